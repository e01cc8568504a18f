"""MCP tools for individual Sentry events."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from mcp.types import TextContent, Tool

from sentry_selfhosted_mcp.mcp_tools.common import _require_args, _text
from sentry_selfhosted_mcp.validation import is_valid_get_event_args

logger = logging.getLogger(__name__)


def register() -> tuple[list[Tool], dict[str, Callable[..., Any]]]:
    """Return (tool_definitions, handler_map) for event-domain tools."""
    tools = [
        Tool(
            name="get_sentry_event_details",
            description="Retrieve details for a specific event ID within a project.",
            inputSchema={
                "type": "object",
                "properties": {
                    "project_slug": {"type": "string", "description": "The slug of the project."},
                    "event_id": {"type": "string", "description": "The ID of the event."},
                },
                "required": ["project_slug", "event_id"],
            },
        ),
    ]

    handlers: dict[str, Callable[..., Any]] = {
        "get_sentry_event_details": _handle_get_event_details,
    }
    return tools, handlers


async def _handle_get_event_details(arguments: Any) -> list[TextContent]:
    from sentry_selfhosted_mcp.mcp_server import _get_client

    args = _require_args(arguments, is_valid_get_event_args, "get_sentry_event_details")
    client = _get_client()
    logger.info("Fetching event %s for project %s in org %s", args["event_id"], args["project_slug"], client.org_slug)
    return _text(await client.get_event(args["project_slug"], args["event_id"]))
