# IMPORT CONSTRAINT: types/ modules must only import from typing, stdlib, and each other.
"""TypedDict contracts for MCP tool handler input arguments.

Each TypedDict mirrors the JSON Schema ``inputSchema`` on the corresponding
``mcp.types.Tool`` definition.  The ``TOOL_ARGS_MAP`` registry maps tool names
to their TypedDict class so the sync test can verify structural agreement.

Unlike a plain ``cast()``, handlers only see these types after the runtime
predicates in ``sentry_selfhosted_mcp.validation`` have accepted the payload.
"""

# NOTE: Do NOT add ``from __future__ import annotations`` to this module.
# It breaks TypedDict.__required_keys__ / __optional_keys__ introspection
# on Python <3.14, which the sync test in test_input_type_contracts.py
# depends on for verifying required/optional agreement with JSON Schema.

from typing import Literal, NotRequired, TypedDict

IssueStatus = Literal["resolved", "unresolved", "ignored"]

ISSUE_STATUSES: tuple[str, ...] = ("resolved", "unresolved", "ignored")


class GetIssueArgs(TypedDict):
    issue_id_or_url: str


class ListIssuesArgs(TypedDict):
    project_slug: str
    query: NotRequired[str | None]
    status: NotRequired[IssueStatus | None]


class GetEventDetailsArgs(TypedDict):
    project_slug: str
    event_id: str


class UpdateIssueStatusArgs(TypedDict):
    issue_id: str
    status: IssueStatus


class CreateIssueCommentArgs(TypedDict):
    issue_id: str
    comment_text: str


# Registry: tool_name -> TypedDict class.
# No-argument tools (empty inputSchema properties) are intentionally excluded.
TOOL_ARGS_MAP: dict[str, type] = {
    "get_sentry_issue": GetIssueArgs,
    "list_sentry_issues": ListIssuesArgs,
    "get_sentry_event_details": GetEventDetailsArgs,
    "update_sentry_issue_status": UpdateIssueStatusArgs,
    "create_sentry_issue_comment": CreateIssueCommentArgs,
}
