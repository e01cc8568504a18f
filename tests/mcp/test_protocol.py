"""End-to-end protocol tests through an in-memory MCP client session.

These verify the wiring that unit tests of ``call_tool`` cannot: protocol
errors leave the server as JSON-RPC errors, not as ``isError`` results.
"""

from __future__ import annotations

import pytest
from mcp.shared.exceptions import McpError
from mcp.shared.memory import create_connected_server_and_client_session
from mcp.types import INVALID_PARAMS, METHOD_NOT_FOUND

from sentry_selfhosted_mcp.client import SentryClient
from sentry_selfhosted_mcp.mcp_server import SERVER_NAME, server
from tests.mcp._helpers import FakeSentry


class TestProtocol:
    async def test_discovery(self, mcp_client: SentryClient) -> None:
        async with create_connected_server_and_client_session(server) as session:
            result = await session.list_tools()
        assert len(result.tools) == 6

    def test_server_identity(self) -> None:
        options = server.create_initialization_options()
        assert options.server_name == SERVER_NAME
        assert options.capabilities.tools is not None
        assert options.instructions

    async def test_successful_call(self, mcp_client: SentryClient, sentry_api: FakeSentry) -> None:
        sentry_api.json("GET", "organizations/acme/projects/", [{"slug": "web"}])
        async with create_connected_server_and_client_session(server) as session:
            result = await session.call_tool("list_sentry_projects", {})
        assert result.isError is False
        assert '"slug": "web"' in result.content[0].text  # type: ignore[union-attr]

    async def test_upstream_failure_is_tool_result(self, mcp_client: SentryClient) -> None:
        async with create_connected_server_and_client_session(server) as session:
            result = await session.call_tool("get_sentry_issue", {"issue_id_or_url": "42"})
        assert result.isError is True

    async def test_unknown_tool_is_jsonrpc_error(self, mcp_client: SentryClient) -> None:
        async with create_connected_server_and_client_session(server) as session:
            with pytest.raises(McpError) as exc_info:
                await session.call_tool("no_such_tool", {})
        assert exc_info.value.error.code == METHOD_NOT_FOUND

    async def test_invalid_params_is_jsonrpc_error(self, mcp_client: SentryClient) -> None:
        async with create_connected_server_and_client_session(server) as session:
            with pytest.raises(McpError) as exc_info:
                await session.call_tool("get_sentry_event_details", {"project_slug": "web"})
        assert exc_info.value.error.code == INVALID_PARAMS
