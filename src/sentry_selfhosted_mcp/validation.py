"""Shared validation functions for MCP tool arguments.

Pure functions with no MCP, httpx, or Click dependencies.  Every predicate is
total: it returns False for any malformed payload instead of raising.
"""

from __future__ import annotations

import re
from typing import Any, TypeGuard
from urllib.parse import urlsplit

from sentry_selfhosted_mcp.types.inputs import (
    ISSUE_STATUSES,
    CreateIssueCommentArgs,
    GetEventDetailsArgs,
    GetIssueArgs,
    ListIssuesArgs,
    UpdateIssueStatusArgs,
)

_DIGITS = re.compile(r"[0-9]+")


def _is_numeric_id(value: str) -> bool:
    return _DIGITS.fullmatch(value) is not None


def extract_issue_id(value: str) -> str | None:
    """Normalize a bare issue ID or a Sentry issue URL to the numeric ID.

    ``https://sentry.example.com/organizations/acme/issues/123/`` -> ``"123"``
    ``"123"`` -> ``"123"``

    Input that parses as a URL is only matched on its path: the segment after
    the first ``issues`` segment must be all digits.  Input that is not a URL
    matches only when it is itself all digits.  Returns None otherwise.
    """
    try:
        parts = urlsplit(value)
    except ValueError:
        parts = None
    if parts is None or not parts.scheme:
        return value if _is_numeric_id(value) else None

    segments = parts.path.split("/")
    try:
        idx = segments.index("issues")
    except ValueError:
        return None
    if idx + 1 < len(segments) and _is_numeric_id(segments[idx + 1]):
        return segments[idx + 1]
    return None


def _optional_str(args: dict[str, Any], key: str) -> bool:
    value = args.get(key)
    return value is None or isinstance(value, str)


def _is_status(value: Any) -> bool:
    return isinstance(value, str) and value in ISSUE_STATUSES


def is_valid_get_issue_args(args: Any) -> TypeGuard[GetIssueArgs]:
    return isinstance(args, dict) and isinstance(args.get("issue_id_or_url"), str)


def is_valid_list_issues_args(args: Any) -> TypeGuard[ListIssuesArgs]:
    return (
        isinstance(args, dict)
        and isinstance(args.get("project_slug"), str)
        and _optional_str(args, "query")
        and (args.get("status") is None or _is_status(args["status"]))
    )


def is_valid_get_event_args(args: Any) -> TypeGuard[GetEventDetailsArgs]:
    return isinstance(args, dict) and isinstance(args.get("project_slug"), str) and isinstance(args.get("event_id"), str)


def is_valid_update_issue_args(args: Any) -> TypeGuard[UpdateIssueStatusArgs]:
    return isinstance(args, dict) and isinstance(args.get("issue_id"), str) and _is_status(args.get("status"))


def is_valid_create_comment_args(args: Any) -> TypeGuard[CreateIssueCommentArgs]:
    return isinstance(args, dict) and isinstance(args.get("issue_id"), str) and isinstance(args.get("comment_text"), str)
