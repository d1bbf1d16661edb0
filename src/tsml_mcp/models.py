"""Request and response shapes for the TSML AJAX endpoint.

These are annotations only. Responses are passed through exactly as the
WordPress site returns them.
"""

from typing import List, Literal, TypedDict, Union


AttendanceOption = Literal['in_person', 'online', 'hybrid']
DistanceUnits = Literal['mi', 'km']


class GetMeetingsParams(TypedDict, total=False):
    """Filters accepted by action=meetings."""

    mode: str
    data_source: str
    day: int  # 0-6, Sunday to Saturday
    time: str
    region: Union[str, int]
    district: Union[str, int]
    type: Union[str, List[str]]
    query: str
    group_id: int
    location_id: int

    latitude: float
    longitude: float
    distance: float
    distance_units: DistanceUnits

    attendance_option: AttendanceOption
    post_status: Union[str, List[str]]

    # Only needed when the site does not expose its feed openly
    nonce: str
    key: str


class TypeaheadParams(TypedDict, total=False):
    nonce: str


class GeocodeParams(TypedDict):
    address: str
    nonce: str


class FeedbackParams(TypedDict):
    meeting_id: int
    tsml_name: str
    tsml_email: str
    tsml_message: str
    tsml_nonce: str


class Meeting(TypedDict, total=False):
    """A meeting record as serialized by the TSML plugin (abridged)."""

    id: int
    name: str
    slug: str
    notes: str
    updated: str
    url: str
    day: int
    time: str
    end_time: str
    time_formatted: str
    types: List[str]
    conference_url: str
    conference_phone: str

    location_id: int
    location: str
    formatted_address: str
    approximate: Literal['yes', 'no']
    latitude: float
    longitude: float
    timezone: str
    region: str
    region_id: int
    regions: List[str]

    group_id: int
    group: str
    district: str
    district_id: int
    website: str
    email: str
    phone: str

    attendance_option: AttendanceOption

    data_source: str
    data_source_name: str
    feedback_emails: List[str]
    feedback_url: str


class TypeaheadResult(TypedDict, total=False):
    value: str
    type: Literal['region', 'location', 'group']
    tokens: List[str]
    url: str
    id: str


class GeocodeResult(TypedDict, total=False):
    latitude: float
    longitude: float
    formatted_address: str
    status: str


GetMeetingsResponse = List[Meeting]
TypeaheadResponse = List[TypeaheadResult]
GeocodeResponse = GeocodeResult
FeedbackResponse = str
