"""Classification of tool failures into a uniform error result.

Protocol errors (``McpError``: invalid params, unknown tool) are re-raised
untouched so the caller sees a JSON-RPC error.  Everything else becomes a
``CallToolResult`` with ``isError=True`` and one text item.
"""

from __future__ import annotations

import json

import httpx
from mcp.shared.exceptions import McpError
from mcp.types import CallToolResult, TextContent


def _response_body(response: httpx.Response) -> str:
    try:
        return json.dumps(response.json())
    except ValueError:
        return json.dumps(response.text)


def _first_line(exc: Exception) -> str:
    # httpx status errors append a multi-line "For more information" hint.
    lines = str(exc).splitlines()
    return lines[0] if lines else ""


def classify_error(tool_name: str, exc: Exception) -> str:
    """Return the human-readable message for a failed tool call.

    Raises *exc* unchanged if it is already a protocol-level ``McpError``.
    """
    if isinstance(exc, McpError):
        raise exc

    if isinstance(exc, httpx.HTTPError):
        message = f"Sentry API error for {tool_name}: {_first_line(exc)}"
        if isinstance(exc, httpx.HTTPStatusError):
            status = exc.response.status_code
            message += f" Status: {status}. Response: {_response_body(exc.response)}"
            if status in (401, 403):
                message = f"Sentry API permission denied for {tool_name}. Check auth token validity and permissions."
            elif status == 404:
                message = f"Sentry resource not found for {tool_name}. Check IDs/slugs."
        return message

    return str(exc) or f"Failed to execute tool {tool_name}."


def tool_error_result(tool_name: str, exc: Exception) -> CallToolResult:
    """Wrap ``classify_error`` output in an error ``CallToolResult``."""
    return CallToolResult(
        content=[TextContent(type="text", text=classify_error(tool_name, exc))],
        isError=True,
    )
