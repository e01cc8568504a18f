# IMPORT CONSTRAINT: types/ modules must only import from typing, stdlib, and each other.
"""Typed contracts for MCP tool arguments."""

from __future__ import annotations

from sentry_selfhosted_mcp.types.inputs import (
    ISSUE_STATUSES,
    CreateIssueCommentArgs,
    GetEventDetailsArgs,
    GetIssueArgs,
    IssueStatus,
    ListIssuesArgs,
    UpdateIssueStatusArgs,
)

__all__ = [
    "ISSUE_STATUSES",
    "CreateIssueCommentArgs",
    "GetEventDetailsArgs",
    "GetIssueArgs",
    "IssueStatus",
    "ListIssuesArgs",
    "UpdateIssueStatusArgs",
]
