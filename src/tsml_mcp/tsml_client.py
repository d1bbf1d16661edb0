"""HTTP client for the TSML (12 Step Meeting List) WordPress AJAX API."""

import logging
from http.cookiejar import DefaultCookiePolicy
from typing import Any, Dict, List, Optional, Tuple, Union

import requests

from .config import TsmlServerConfig
from .models import (
    AttendanceOption,
    DistanceUnits,
    FeedbackParams,
    FeedbackResponse,
    GeocodeParams,
    GeocodeResponse,
    GetMeetingsParams,
    GetMeetingsResponse,
    TypeaheadParams,
    TypeaheadResponse,
)


logger = logging.getLogger(__name__)

AJAX_PATH = "/wp-admin/admin-ajax.php"
FALLBACK_ERROR_MESSAGE = "API request failed"

class TsmlApiError(Exception):
    """A failed request to the TSML API, whatever layer it failed in."""

    def __init__(self, message: str, status: Optional[int] = None, response: Optional[requests.Response] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.response = response

    @classmethod
    def from_request_exception(cls, error: requests.RequestException) -> 'TsmlApiError':
        """
        Normalize a requests exception.

        The message is the remote body's "message" field when there is one,
        otherwise the transport error text, otherwise a fixed fallback.
        """
        response = getattr(error, 'response', None)
        message = None

        if response is not None:
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                message = body.get('message')

        return cls(
            message=message or str(error) or FALLBACK_ERROR_MESSAGE,
            status=response.status_code if response is not None else None,
            response=response,
        )


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        # 2.0 is sent as "2", like JavaScript's toString
        return str(int(value))
    return str(value)


def encode_params(params: Optional[Dict[str, Any]]) -> List[Tuple[str, str]]:
    """
    Flatten a parameter mapping into ordered key/value pairs.

    Lists become repeated ``key[]`` entries, one per element, in order.
    Keys whose value is None are dropped.

    Args:
        params: Parameter mapping (may be None)

    Returns:
        List of (key, value) pairs ready for a query string or form body
    """
    pairs = []
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((f"{key}[]", _stringify(item)) for item in value)
        else:
            pairs.append((key, _stringify(value)))
    return pairs


class TsmlClient:
    """Client for the four TSML actions exposed through admin-ajax.php."""

    def __init__(self, config: TsmlServerConfig):
        """
        Initialize TSML client.

        Args:
            config: Connection settings (site URL, optional API key, timeout, user agent)
        """
        self.config = config
        self.ajax_url = config.wordpress_url.rstrip('/') + AJAX_PATH
        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': config.user_agent,
        })
        # Shared by concurrent tool calls; response cookies are never kept
        self.session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))

    def _query_params(self, action: str, params: Optional[Dict[str, Any]] = None) -> List[Tuple[str, str]]:
        query = [('action', action)]
        if self.config.api_key:
            query.append(('key', self.config.api_key))
        return query + encode_params(self._without_reserved(params))

    def _without_reserved(self, params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        # action is fixed per operation; a configured key wins over one passed in
        reserved = {'action', 'key'} if self.config.api_key else {'action'}
        return {k: v for k, v in (params or {}).items() if k not in reserved}

    def build_url(self, action: str, params: Optional[Dict[str, Any]] = None) -> str:
        """
        Build the full GET URL for an action.

        Args:
            action: Remote action identifier
            params: Extra query parameters

        Returns:
            Encoded URL including action, API key (if configured) and params
        """
        request = requests.Request('GET', self.ajax_url, params=self._query_params(action, params))
        return request.prepare().url

    def _decode(self, response: requests.Response) -> Any:
        content_type = response.headers.get('Content-Type', '')
        try:
            return response.json()
        except ValueError as e:
            if 'json' in content_type:
                raise TsmlApiError(
                    f"Malformed JSON response: {e}",
                    status=response.status_code,
                    response=response,
                ) from e
            # admin-ajax handlers may answer with plain text
            return response.text

    def _request(self, action: str, params: Optional[Dict[str, Any]] = None, method: str = 'GET') -> Any:
        try:
            if method == 'POST':
                logger.info("Making request to: %s", self.build_url(action))
                response = self.session.post(
                    self.ajax_url,
                    params=self._query_params(action),
                    data=encode_params(self._without_reserved(params)),
                    headers={'Content-Type': 'application/x-www-form-urlencoded'},
                    timeout=self.config.timeout_seconds,
                )
            else:
                logger.info("Making request to: %s", self.build_url(action, params))
                response = self.session.get(
                    self.ajax_url,
                    params=self._query_params(action, params),
                    timeout=self.config.timeout_seconds,
                )
            response.raise_for_status()
            return self._decode(response)

        except requests.RequestException as e:
            error = TsmlApiError.from_request_exception(e)
            logger.error("Error making request to %s: %s", action, error.message)
            raise error from e
        except TsmlApiError as e:
            logger.error("Error making request to %s: %s", action, e.message)
            raise

    def get_meetings(self, params: Optional[GetMeetingsParams] = None) -> GetMeetingsResponse:
        """
        Search for meetings.

        GET /wp-admin/admin-ajax.php?action=meetings

        Args:
            params: Search filters (day, time, type, region, query, ...)

        Returns:
            List of meeting records
        """
        return self._request('meetings', params)

    def get_typeahead(self, params: Optional[TypeaheadParams] = None) -> TypeaheadResponse:
        """
        Get typeahead suggestions for search autocomplete.

        GET /wp-admin/admin-ajax.php?action=tsml_typeahead
        """
        return self._request('tsml_typeahead', params)

    def geocode(self, params: GeocodeParams) -> GeocodeResponse:
        """
        Geocode an address to coordinates.

        GET /wp-admin/admin-ajax.php?action=tsml_geocode
        Requires a WordPress nonce.
        """
        return self._request('tsml_geocode', params)

    def submit_feedback(self, params: FeedbackParams) -> FeedbackResponse:
        """
        Submit feedback about a meeting.

        POST /wp-admin/admin-ajax.php?action=tsml_feedback
        Requires a WordPress nonce.
        """
        return self._request('tsml_feedback', params, method='POST')

    def get_meetings_by_day(self, day: int) -> GetMeetingsResponse:
        return self.get_meetings({'day': day})

    def get_meetings_by_type(self, meeting_type: Union[str, List[str]]) -> GetMeetingsResponse:
        return self.get_meetings({'type': meeting_type})

    def get_meetings_near(
        self,
        latitude: float,
        longitude: float,
        distance: float = 2,
        distance_units: DistanceUnits = 'mi',
    ) -> GetMeetingsResponse:
        """Search meetings within a radius of a point."""
        return self.get_meetings({
            'latitude': latitude,
            'longitude': longitude,
            'distance': distance,
            'distance_units': distance_units,
        })

    def get_meetings_by_region(self, region: Union[str, int]) -> GetMeetingsResponse:
        return self.get_meetings({'region': region})

    def search_meetings(self, query: str) -> GetMeetingsResponse:
        """Free-text search over meeting, location and group names."""
        return self.get_meetings({'query': query})

    def get_meetings_by_attendance(self, attendance_option: AttendanceOption) -> GetMeetingsResponse:
        return self.get_meetings({'attendance_option': attendance_option})

    def get_online_meetings(self) -> GetMeetingsResponse:
        return self.get_meetings_by_attendance('online')

    def get_in_person_meetings(self) -> GetMeetingsResponse:
        return self.get_meetings_by_attendance('in_person')

    def get_hybrid_meetings(self) -> GetMeetingsResponse:
        return self.get_meetings_by_attendance('hybrid')
