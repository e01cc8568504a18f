"""MCP server for self-hosted Sentry instances.

Exposes a fixed set of Sentry tools over MCP (stdio).  Each tool call is a
stateless round trip to the Sentry web API through one shared client.

Usage:
    sentry-selfhosted-mcp                    # reads SENTRY_URL / SENTRY_AUTH_TOKEN / SENTRY_ORG_SLUG
    sentry-selfhosted-mcp --org my-org       # explicit organization slug
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import (
    METHOD_NOT_FOUND,
    CallToolRequest,
    CallToolResult,
    ErrorData,
    ServerResult,
    Tool,
)

from sentry_selfhosted_mcp import __version__
from sentry_selfhosted_mcp.client import SentryClient
from sentry_selfhosted_mcp.config import SentryConfig
from sentry_selfhosted_mcp.errors import tool_error_result
from sentry_selfhosted_mcp.mcp_tools import events, issues, projects

SERVER_NAME = "sentry-selfhosted-mcp"
SERVER_INSTRUCTIONS = "MCP server for self-hosted Sentry instances with extended tools."

logger = logging.getLogger(__name__)

server: Server[Any, Any] = Server(SERVER_NAME, version=__version__, instructions=SERVER_INSTRUCTIONS)
client: SentryClient | None = None


def _get_client() -> SentryClient:
    if client is None:
        msg = "Sentry client not initialized"
        raise RuntimeError(msg)
    return client


# ---------------------------------------------------------------------------
# Tool registry
# ---------------------------------------------------------------------------


def _collect_tools() -> tuple[list[Tool], dict[str, Callable[..., Any]]]:
    all_tools: list[Tool] = []
    all_handlers: dict[str, Callable[..., Any]] = {}
    for mod in (issues, projects, events):
        tools, handlers = mod.register()
        all_tools.extend(tools)
        all_handlers.update(handlers)
    return all_tools, all_handlers


_TOOLS, _HANDLERS = _collect_tools()


@server.list_tools()  # type: ignore[untyped-decorator,no-untyped-call]
async def list_tools() -> list[Tool]:
    return list(_TOOLS)


# ---------------------------------------------------------------------------
# Tool dispatch
# ---------------------------------------------------------------------------


async def call_tool(name: str, arguments: Any) -> CallToolResult:
    """Run one tool and shape its outcome as a ``CallToolResult``.

    Invalid arguments and unknown tools raise ``McpError`` (a JSON-RPC error
    for the caller).  Every other failure becomes an ``isError`` result.
    """
    handler = _HANDLERS.get(name)
    if handler is None:
        logger.warning("tool_rejected", extra={"tool": name, "error": "unknown tool"})
        raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))

    t0 = time.monotonic()
    try:
        content = await handler(arguments)
    except McpError as exc:
        logger.warning("tool_rejected", extra={"tool": name, "args_data": arguments, "error": exc.error.message})
        raise
    except Exception as exc:
        logger.error("tool_error", extra={"tool": name, "args_data": arguments}, exc_info=True)
        return tool_error_result(name, exc)

    duration_ms = round((time.monotonic() - t0) * 1000, 1)
    logger.info("tool_call", extra={"tool": name, "args_data": arguments, "duration_ms": duration_ms})
    return CallToolResult(content=content, isError=False)


async def _handle_call_tool_request(req: CallToolRequest) -> ServerResult:
    # Registered directly rather than via @server.call_tool(), which would
    # fold McpError into an isError result instead of a JSON-RPC error.
    result = await call_tool(req.params.name, req.params.arguments)
    return ServerResult(result)


server.request_handlers[CallToolRequest] = _handle_call_tool_request


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


async def run(config: SentryConfig) -> None:
    """Serve MCP over stdio until the input stream closes or the task is cancelled."""
    global client

    async with SentryClient(config) as sentry:
        client = sentry
        try:
            async with stdio_server() as (read_stream, write_stream):
                logger.info(
                    "mcp_server_start",
                    extra={"tool": "server", "args_data": {"org": config.org_slug, "url": config.url, "version": __version__}},
                )
                await server.run(read_stream, write_stream, server.create_initialization_options())
        finally:
            client = None
            logger.info("mcp_server_stop", extra={"tool": "server"})
