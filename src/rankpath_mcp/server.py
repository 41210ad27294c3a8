"""RankPath MCP Server.

MCP server exposing 5 read-only RankPath tools over stdio.
Run: rankpath-mcp
"""

from __future__ import annotations

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from . import __version__
from .core.clients import RankPathClient
from .tools import TOOLS, call_tool

logger = logging.getLogger(__name__)

SERVER_NAME = "rankpath-mcp-server"

API_KEY_ENV = "RANKPATH_API_KEY"

INSTRUCTIONS = (
    "RankPath SEO analysis MCP server. "
    "Provides access to project data, crawl results, and SEO issues. "
    f"Requires the {API_KEY_ENV} environment variable."
)


def create_server(client: RankPathClient) -> Server:
    """Build an MCP server whose tools call through ``client``.

    The server owns the client from here on: its connection pool is closed
    when the server shuts down.
    """

    @asynccontextmanager
    async def lifespan(server: Server) -> AsyncIterator[dict]:
        logger.info("%s %s ready with %d tools", SERVER_NAME, __version__, len(TOOLS))
        try:
            yield {}
        finally:
            await client.aclose()

    server = Server(SERVER_NAME, version=__version__, instructions=INSTRUCTIONS, lifespan=lifespan)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return TOOLS

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: Optional[dict]) -> CallToolResult:
        return await call_tool(client, name, arguments)

    return server


def _get_api_key() -> str:
    key = os.environ.get(API_KEY_ENV, "")
    if not key:
        raise ValueError(f"{API_KEY_ENV} environment variable is required. Create a key in your RankPath account settings.")
    return key


async def _serve(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main():
    """Entry point for the CLI command."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    try:
        api_key = _get_api_key()
    except ValueError as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc

    asyncio.run(_serve(create_server(RankPathClient(api_key))))


if __name__ == "__main__":
    main()
