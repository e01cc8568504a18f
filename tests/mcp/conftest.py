"""Fixtures for MCP server tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest

from sentry_selfhosted_mcp.client import SentryClient
from sentry_selfhosted_mcp.config import SentryConfig
from tests.mcp._helpers import FakeSentry


@pytest.fixture
def sentry_api() -> FakeSentry:
    """In-memory stand-in for the Sentry web API."""
    return FakeSentry()


@pytest.fixture
async def mcp_client(sentry_config: SentryConfig, sentry_api: FakeSentry) -> AsyncGenerator[SentryClient, None]:
    """A SentryClient wired to ``sentry_api`` and patched into the MCP module globals."""
    import sentry_selfhosted_mcp.mcp_server as mcp_mod

    client = SentryClient(sentry_config, transport=sentry_api.transport())
    original = mcp_mod.client
    mcp_mod.client = client

    yield client

    mcp_mod.client = original
    await client.aclose()
