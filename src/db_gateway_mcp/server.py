"""Database gateway MCP Server

A Model Context Protocol (MCP) server exposing three tools over a single
relational database: a connection health check, a table/column listing and
raw SQL execution with JSON results.
"""

import asyncio
import logging
import os
from functools import partial
from typing import Any, Callable, Optional

from dotenv import load_dotenv
from mcp.server import Server
from mcp.types import TextContent, Tool

from db_gateway_mcp.core import DatabaseGateway
from db_gateway_mcp.models.config import ConfigurationError, DatabaseConfig, load_config
from db_gateway_mcp.utils.recorder import CallRecorder, FileCallRecorder

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class DatabaseMCPServer:
    """MCP server exposing the database gateway operations as tools."""

    def __init__(
        self,
        config: DatabaseConfig,
        recorder: Optional[CallRecorder] = None,
    ):
        """
        Initialize database MCP server.

        Args:
            config: Database configuration
            recorder: Call recorder (defaults to a file recorder at config.log_file)
        """
        self.config = config
        self.gateway = DatabaseGateway(
            config, recorder=recorder or FileCallRecorder(config.log_file)
        )
        self.server = Server("db-gateway-mcp")
        self._register_tools()

        logger.info(
            f"Initialized {self.config.dialect} gateway for {self.config.safe_url}"
        )

    def _create_health_check_tool(self) -> Tool:
        """Create health_check tool."""
        return Tool(
            name="health_check",
            description="Tests if the database connection is good and alive.",
            inputSchema={
                "type": "object",
                "properties": {},
                "required": [],
            },
        )

    def _create_get_schema_tool(self) -> Tool:
        """Create get_schema tool."""
        return Tool(
            name="get_schema",
            description="Get a list of all tables with their respective schema, columns and types.",
            inputSchema={
                "type": "object",
                "properties": {},
                "required": [],
            },
        )

    def _create_query_tool(self) -> Tool:
        """Create query tool."""
        return Tool(
            name="query",
            description="Execute a query against the database and return the result as JSON.",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "SQL statement to execute",
                    },
                },
                "required": ["query"],
            },
        )

    def list_tools(self) -> list[Tool]:
        """All tools exposed by this server."""
        return [
            self._create_health_check_tool(),
            self._create_get_schema_tool(),
            self._create_query_tool(),
        ]

    async def _run(self, operation: Callable[..., str], *args: Any) -> list[TextContent]:
        # Gateway operations block; each runs on its own worker thread
        loop = asyncio.get_running_loop()
        text = await loop.run_in_executor(None, partial(operation, *args))
        return [TextContent(type="text", text=text)]

    # Tool handlers
    async def handle_health_check(self, arguments: dict[str, Any]) -> list[TextContent]:
        """Handle health_check request."""
        return await self._run(self.gateway.health_check)

    async def handle_get_schema(self, arguments: dict[str, Any]) -> list[TextContent]:
        """Handle get_schema request."""
        return await self._run(self.gateway.get_schema)

    async def handle_query(self, arguments: dict[str, Any]) -> list[TextContent]:
        """Handle query request."""
        return await self._run(self.gateway.query, arguments["query"])

    def _register_tools(self) -> None:
        """Register MCP list_tools and call_tool handlers."""
        handlers = {
            "health_check": self.handle_health_check,
            "get_schema": self.handle_get_schema,
            "query": self.handle_query,
        }

        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            """List available tools."""
            return self.list_tools()

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
            """Handle tool calls."""
            handler = handlers.get(name)
            if handler is None:
                raise ValueError(f"Unknown tool: {name}")

            return await handler(arguments or {})

    async def run(self) -> None:
        """Serve over stdio until the client disconnects."""
        from mcp.server.stdio import stdio_server

        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


async def main() -> None:
    """Main entry point for the MCP server."""
    load_dotenv()

    # A missing connection URL is fatal before any tool is served
    config = load_config()

    mcp_server = DatabaseMCPServer(config)
    await mcp_server.run()


def cli_entry() -> None:
    """
    Synchronous entry point for console script.

    This function is called by the 'db-gateway-mcp' console script.
    It sets up the event loop and runs the async main() function.
    """
    # Windows-specific event loop policy
    if os.name == "nt":
        asyncio.set_event_loop_policy(asyncio.WindowsProactorEventLoopPolicy())  # type: ignore[attr-defined]

    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        raise SystemExit(1)
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    cli_entry()
