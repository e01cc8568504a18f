"""Pure helpers shared across MCP tool modules.

This module has NO dependency on ``mcp_server`` module globals, so it can
be imported freely without triggering circular-import issues.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, TypeGuard, TypeVar

from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS, ErrorData, TextContent

_T = TypeVar("_T")


def _text(content: object) -> list[TextContent]:
    return [TextContent(type="text", text=json.dumps(content, indent=2, default=str))]


def _invalid_params(message: str) -> McpError:
    return McpError(ErrorData(code=INVALID_PARAMS, message=message))


def _require_args(arguments: Any, guard: Callable[[Any], TypeGuard[_T]], tool_name: str) -> _T:
    """Narrow untyped MCP arguments through *guard* or raise InvalidParams.

    Handlers never touch an argument object that has not passed its guard.
    """
    if not guard(arguments):
        raise _invalid_params(f"Invalid args for {tool_name}.")
    return arguments
