"""Read-only TSML tools: tsml_search_meetings, tsml_get_typeahead, tsml_geocode_address."""

from typing import Any

from mcp.types import Tool

from ..tools import ToolHandler
from ..tsml_client import TsmlClient
from ..validation import require_fields


class SearchMeetingsTool(ToolHandler):
    """Tool for searching meetings with the full filter surface."""

    def __init__(self):
        super().__init__("tsml_search_meetings")

    def get_tool_description(self) -> Tool:
        return Tool(
            name=self.name,
            description="""Search for 12-step recovery meetings with extensive filtering options.
Supports filtering by day, time, type, location, region, and attendance option
(in-person, online, hybrid). Includes geographic proximity search.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "day": {
                        "type": "number",
                        "minimum": 0,
                        "maximum": 6,
                        "description": "Day of week (0=Sunday, 1=Monday, 2=Tuesday, 3=Wednesday, 4=Thursday, 5=Friday, 6=Saturday)",
                    },
                    "time": {
                        "type": "string",
                        "description": "Filter by time (format: HH:MM in 24-hour format)",
                    },
                    "type": {
                        "oneOf": [
                            {"type": "string"},
                            {"type": "array", "items": {"type": "string"}},
                        ],
                        "description": "Meeting type code(s). Common types: O (Open), C (Closed), ONL (Online), "
                                       "B (Big Book), BEG (Beginners), W (Women), M (Men), Y (Young People), LGBTQ",
                    },
                    "region": {
                        "oneOf": [{"type": "string"}, {"type": "number"}],
                        "description": "Region name or term ID to filter meetings by geographic region",
                    },
                    "district": {
                        "oneOf": [{"type": "string"}, {"type": "number"}],
                        "description": "District name or term ID",
                    },
                    "query": {
                        "type": "string",
                        "description": "Text search query - searches meeting names, locations, and group names",
                    },
                    "group_id": {
                        "type": "number",
                        "description": "Filter by specific group ID",
                    },
                    "location_id": {
                        "type": "number",
                        "description": "Filter by specific location ID",
                    },
                    "latitude": {
                        "type": "number",
                        "description": "Latitude for geographic proximity search (must be used with longitude)",
                    },
                    "longitude": {
                        "type": "number",
                        "description": "Longitude for geographic proximity search (must be used with latitude)",
                    },
                    "distance": {
                        "type": "number",
                        "description": "Search radius for proximity search (default: 2). Use with latitude/longitude.",
                    },
                    "distance_units": {
                        "type": "string",
                        "enum": ["mi", "km"],
                        "description": "Distance units: mi (miles) or km (kilometers)",
                    },
                    "attendance_option": {
                        "type": "string",
                        "enum": ["in_person", "online", "hybrid"],
                        "description": "Filter by meeting attendance type",
                    },
                    "mode": {
                        "type": "string",
                        "description": "Search mode (default: search)",
                    },
                    "data_source": {
                        "type": "string",
                        "description": "Filter by data source URL (for imported meetings)",
                    },
                    "post_status": {
                        "oneOf": [
                            {"type": "string"},
                            {"type": "array", "items": {"type": "string"}},
                        ],
                        "description": "WordPress post status (default: publish)",
                    },
                },
                "required": list(self.required_fields),
            }
        )

    def run_tool(self, client: TsmlClient, arguments: dict) -> Any:
        # Filters go through untouched; the site rejects bad combinations itself
        return client.get_meetings(arguments)


class TypeaheadTool(ToolHandler):
    """Tool for fetching search autocomplete suggestions."""

    def __init__(self):
        super().__init__("tsml_get_typeahead")

    def get_tool_description(self) -> Tool:
        return Tool(
            name=self.name,
            description="""Get autocomplete suggestions for meeting search. Returns regions, locations,
and group names to help users find meetings.""",
            inputSchema={
                "type": "object",
                "properties": {},
                "required": list(self.required_fields)
            }
        )

    def run_tool(self, client: TsmlClient, arguments: dict) -> Any:
        return client.get_typeahead(arguments)


class GeocodeAddressTool(ToolHandler):
    """Tool for converting an address to coordinates."""

    required_fields = ["address", "nonce"]

    def __init__(self):
        super().__init__("tsml_geocode_address")

    def get_tool_description(self) -> Tool:
        return Tool(
            name=self.name,
            description="""Convert an address string to geographic coordinates (latitude/longitude).

⚠️ Note: This endpoint requires authentication via a WordPress nonce.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "address": {
                        "type": "string",
                        "description": 'Address to geocode (e.g., "123 Main St, New York, NY 10001")',
                    },
                    "nonce": {
                        "type": "string",
                        "description": "WordPress nonce for authentication (required)",
                    },
                },
                "required": list(self.required_fields)
            }
        )

    def run_tool(self, client: TsmlClient, arguments: dict) -> Any:
        require_fields(self.name, arguments, self.required_fields)
        return client.geocode({
            'address': arguments['address'],
            'nonce': arguments['nonce'],
        })
