"""MCP tools for Sentry issues: details, listing, status updates and comments."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from mcp.types import TextContent, Tool

from sentry_selfhosted_mcp.mcp_tools.common import _invalid_params, _require_args, _text
from sentry_selfhosted_mcp.types.inputs import ISSUE_STATUSES
from sentry_selfhosted_mcp.validation import (
    extract_issue_id,
    is_valid_create_comment_args,
    is_valid_get_issue_args,
    is_valid_list_issues_args,
    is_valid_update_issue_args,
)

logger = logging.getLogger(__name__)


def register() -> tuple[list[Tool], dict[str, Callable[..., Any]]]:
    """Return (tool_definitions, handler_map) for issue-domain tools."""
    tools = [
        Tool(
            name="get_sentry_issue",
            description=(
                "Retrieve details for a specific Sentry issue by ID or URL, including the stacktrace from the latest event."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "issue_id_or_url": {
                        "type": "string",
                        "description": "Sentry issue ID or full issue URL. Issue ID is a number e.g: 123456",
                    },
                },
                "required": ["issue_id_or_url"],
            },
        ),
        Tool(
            name="list_sentry_issues",
            description="List issues for a specific project, optionally filtering by query or status.",
            inputSchema={
                "type": "object",
                "properties": {
                    "project_slug": {"type": "string", "description": 'The slug of the project (e.g., "my-web-app").'},
                    "query": {
                        "type": "string",
                        "description": 'Optional Sentry search query (e.g., "is:unresolved environment:production").',
                    },
                    "status": {
                        "type": "string",
                        "enum": list(ISSUE_STATUSES),
                        "description": "Optional issue status filter.",
                    },
                },
                "required": ["project_slug"],
            },
        ),
        Tool(
            name="update_sentry_issue_status",
            description="Update the status of a Sentry issue (resolve, ignore, or reopen it).",
            inputSchema={
                "type": "object",
                "properties": {
                    "issue_id": {"type": "string", "description": "The numeric ID of the issue."},
                    "status": {
                        "type": "string",
                        "enum": list(ISSUE_STATUSES),
                        "description": "The new status for the issue.",
                    },
                },
                "required": ["issue_id", "status"],
            },
        ),
        Tool(
            name="create_sentry_issue_comment",
            description="Add a comment to a Sentry issue.",
            inputSchema={
                "type": "object",
                "properties": {
                    "issue_id": {"type": "string", "description": "The numeric ID of the issue."},
                    "comment_text": {"type": "string", "description": "The comment body (markdown supported)."},
                },
                "required": ["issue_id", "comment_text"],
            },
        ),
    ]

    handlers: dict[str, Callable[..., Any]] = {
        "get_sentry_issue": _handle_get_issue,
        "list_sentry_issues": _handle_list_issues,
        "update_sentry_issue_status": _handle_update_issue_status,
        "create_sentry_issue_comment": _handle_create_issue_comment,
    }
    return tools, handlers


def compose_issue_query(query: str | None, status: str | None) -> str | None:
    """Combine free-text search and a status filter into one Sentry query.

    ``("is:unresolved", "ignored")`` -> ``"is:unresolved is:ignored"``.
    Returns None when there is nothing to search for.
    """
    composed = query or None
    if status:
        composed = f"{composed} is:{status}" if composed else f"is:{status}"
    return composed


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


async def _handle_get_issue(arguments: Any) -> list[TextContent]:
    from sentry_selfhosted_mcp.mcp_server import _get_client

    args = _require_args(arguments, is_valid_get_issue_args, "get_sentry_issue")
    issue_id = extract_issue_id(args["issue_id_or_url"])
    if issue_id is None:
        raise _invalid_params(f"Could not extract issue ID from: {args['issue_id_or_url']}")

    client = _get_client()
    logger.info("Fetching Sentry issue %s from %s", issue_id, client.config.url)
    issue = await client.get_issue(issue_id)
    if not isinstance(issue, dict):
        msg = f"Unexpected Sentry response for issue {issue_id}: expected a JSON object, got {type(issue).__name__}"
        raise ValueError(msg)
    data: dict[str, Any] = {**issue, "latest_event": None}

    # The latest event only enriches the issue; an issue with no events is still useful.
    try:
        logger.info("Fetching latest event for issue %s in org %s", issue_id, client.org_slug)
        data["latest_event"] = await client.get_latest_event(issue_id)
    except Exception as exc:
        logger.warning(
            "Could not fetch latest event for issue %s. It might not have any events or there was an API error.",
            issue_id,
            extra={"tool": "get_sentry_issue", "error": str(exc)},
        )
    return _text(data)


async def _handle_list_issues(arguments: Any) -> list[TextContent]:
    from sentry_selfhosted_mcp.mcp_server import _get_client

    args = _require_args(arguments, is_valid_list_issues_args, "list_sentry_issues")
    query = compose_issue_query(args.get("query"), args.get("status"))
    client = _get_client()
    logger.info(
        "Fetching issues for project %s in org %s",
        args["project_slug"],
        client.org_slug,
        extra={"args_data": {"query": query}},
    )
    return _text(await client.list_issues(args["project_slug"], query))


async def _handle_update_issue_status(arguments: Any) -> list[TextContent]:
    from sentry_selfhosted_mcp.mcp_server import _get_client

    args = _require_args(arguments, is_valid_update_issue_args, "update_sentry_issue_status")
    client = _get_client()
    logger.info("Updating issue %s status to %s", args["issue_id"], args["status"])
    return _text(await client.update_issue_status(args["issue_id"], args["status"]))


async def _handle_create_issue_comment(arguments: Any) -> list[TextContent]:
    from sentry_selfhosted_mcp.mcp_server import _get_client

    args = _require_args(arguments, is_valid_create_comment_args, "create_sentry_issue_comment")
    client = _get_client()
    logger.info("Adding comment to issue %s", args["issue_id"])
    return _text(await client.create_issue_comment(args["issue_id"], args["comment_text"]))
