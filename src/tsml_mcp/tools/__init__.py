"""Tool registry and base classes for MCP tools."""

from typing import Any, List

from mcp.types import Tool

from ..tsml_client import TsmlClient


class ToolHandler:
    """Base class for MCP tool handlers."""

    # Fields checked before any request is made; also the schema's "required" list
    required_fields: List[str] = []

    def __init__(self, name: str):
        """Initialize tool handler with name."""
        self.name = name

    def get_tool_description(self) -> Tool:
        """
        Get MCP tool description with input schema.

        Must be implemented by subclasses.

        Returns:
            Tool description for MCP
        """
        raise NotImplementedError

    def run_tool(self, client: TsmlClient, arguments: dict) -> Any:
        """
        Execute the tool against a TSML client.

        Must be implemented by subclasses.

        Args:
            client: Configured TSML client
            arguments: Tool arguments from MCP

        Returns:
            JSON-serializable result decoded from the TSML response
        """
        raise NotImplementedError
