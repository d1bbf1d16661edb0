"""Write TSML tool: tsml_submit_feedback."""

from typing import Any

from mcp.types import Tool

from ..tools import ToolHandler
from ..tsml_client import TsmlClient
from ..validation import require_fields


class SubmitFeedbackTool(ToolHandler):
    """Tool for sending feedback or corrections about a meeting."""

    required_fields = ["meeting_id", "tsml_name", "tsml_email", "tsml_message", "tsml_nonce"]

    def __init__(self):
        super().__init__("tsml_submit_feedback")

    def get_tool_description(self) -> Tool:
        return Tool(
            name=self.name,
            description="""Submit feedback or corrections about a meeting. The message is delivered to
the site's feedback contacts.

⚠️ Note: This endpoint requires authentication via a WordPress nonce.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "meeting_id": {
                        "type": "number",
                        "description": "ID of the meeting to provide feedback about",
                    },
                    "tsml_name": {
                        "type": "string",
                        "description": "Name of person submitting feedback",
                    },
                    "tsml_email": {
                        "type": "string",
                        "description": "Email address of person submitting feedback",
                    },
                    "tsml_message": {
                        "type": "string",
                        "description": "Feedback message or correction details",
                    },
                    "tsml_nonce": {
                        "type": "string",
                        "description": "WordPress nonce for authentication (required)",
                    },
                },
                "required": list(self.required_fields)
            }
        )

    def run_tool(self, client: TsmlClient, arguments: dict) -> Any:
        required = self.required_fields
        require_fields(self.name, arguments, required)
        return client.submit_feedback({field: arguments[field] for field in required})
