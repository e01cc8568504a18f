"""MCP tools for the configured Sentry organization's projects."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from mcp.types import TextContent, Tool

from sentry_selfhosted_mcp.mcp_tools.common import _text

logger = logging.getLogger(__name__)


def register() -> tuple[list[Tool], dict[str, Callable[..., Any]]]:
    """Return (tool_definitions, handler_map) for project-domain tools."""
    tools = [
        Tool(
            name="list_sentry_projects",
            description="List all projects within the configured Sentry organization.",
            inputSchema={"type": "object", "properties": {}, "required": []},
        ),
    ]

    handlers: dict[str, Callable[..., Any]] = {
        "list_sentry_projects": _handle_list_projects,
    }
    return tools, handlers


async def _handle_list_projects(arguments: Any) -> list[TextContent]:
    from sentry_selfhosted_mcp.mcp_server import _get_client

    client = _get_client()
    logger.info("Fetching projects for org %s", client.org_slug)
    return _text(await client.list_projects())
