"""TSML-MCP: Model Context Protocol server for 12 Step Meeting List sites."""

import asyncio
import logging
import os
import sys

from .config import SERVER_VERSION, ConfigurationError, TsmlServerConfig
from .server import TOOL_HANDLERS, create_server, dispatch
from .tsml_client import TsmlApiError, TsmlClient


logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Send log records to stderr; stdout carries the MCP protocol."""
    logging.basicConfig(
        level=os.getenv('TSML_LOG_LEVEL', 'INFO').upper(),
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
        stream=sys.stderr,
    )


async def main():
    """
    Main entry point for TSML-MCP server.

    Loads configuration from the environment, then sets up a stdio-based
    MCP server and runs it.
    """
    from mcp.server.stdio import stdio_server

    config = TsmlServerConfig.from_environment()
    client = TsmlClient(config)
    app = create_server(client)

    async with stdio_server() as (read_stream, write_stream):
        logger.info("TSML MCP Server started successfully!")
        logger.info("Connected to WordPress site: %s", config.wordpress_url)
        logger.info("Available tools: %d", len(TOOL_HANDLERS))
        await app.run(
            read_stream,
            write_stream,
            app.create_initialization_options()
        )


def run():
    """Synchronous wrapper for main() to use as console script entry point."""
    configure_logging()
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nShutting down TSML MCP server...", file=sys.stderr)
        sys.exit(0)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        sys.exit(1)


__version__ = SERVER_VERSION
__all__ = [
    "main",
    "run",
    "create_server",
    "dispatch",
    "TsmlClient",
    "TsmlApiError",
    "TsmlServerConfig",
    "ConfigurationError",
]
