"""MCP server setup and tool registration for the TSML meeting finder."""

import asyncio
import json
import logging
from typing import Any, Optional, Sequence

from mcp.server import Server
from mcp.types import TextContent, Tool

from .config import SERVER_NAME, SERVER_VERSION
from .tools.read import GeocodeAddressTool, SearchMeetingsTool, TypeaheadTool
from .tools.write import SubmitFeedbackTool
from .tsml_client import TsmlClient


logger = logging.getLogger(__name__)

# Initialize all tool handlers
TOOL_HANDLERS = {
    "tsml_search_meetings": SearchMeetingsTool(),
    "tsml_get_typeahead": TypeaheadTool(),
    "tsml_geocode_address": GeocodeAddressTool(),
    "tsml_submit_feedback": SubmitFeedbackTool(),
}


class UnknownToolError(Exception):
    """Raised when a tool name is not in the registry."""

    def __init__(self, name: str):
        super().__init__(
            f"Unknown tool: {name}\n\nAvailable tools: {', '.join(TOOL_HANDLERS.keys())}"
        )
        self.name = name


def list_tool_descriptions() -> list[Tool]:
    """Describe every registered tool for the host."""
    return [handler.get_tool_description() for handler in TOOL_HANDLERS.values()]


def dispatch(client: TsmlClient, name: str, arguments: Optional[dict]) -> Any:
    """
    Route a tool call to the TSML client.

    Args:
        client: Configured TSML client
        name: Tool name to execute
        arguments: Untyped argument bag from the host

    Returns:
        Decoded TSML response

    Raises:
        UnknownToolError, ValidationError, TsmlApiError
    """
    handler = TOOL_HANDLERS.get(name)
    if not handler:
        raise UnknownToolError(name)

    return handler.run_tool(client, arguments or {})


def create_server(client: TsmlClient) -> Server:
    """
    Create an MCP server bound to one TSML client.

    Args:
        client: Client every tool call is sent through

    Returns:
        Server with list_tools and call_tool handlers registered
    """
    app = Server(SERVER_NAME, version=SERVER_VERSION)

    @app.list_tools()
    async def list_tools() -> list[Tool]:
        """
        List all available TSML tools.

        Returns:
            List of Tool descriptions for MCP
        """
        return list_tool_descriptions()

    @app.call_tool()
    async def call_tool(name: str, arguments: dict) -> Sequence[TextContent]:
        """
        Execute a TSML tool with given arguments.

        Errors are logged and re-raised; the SDK reports them to the host
        as a failed tool call.
        """
        try:
            result = await asyncio.to_thread(dispatch, client, name, arguments)
        except Exception as e:
            logger.error("Error calling tool %s: %s: %s", name, type(e).__name__, e)
            raise

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    return app
