"""Fixtures for CLI interface tests."""

from __future__ import annotations

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's real Sentry settings out of CLI tests."""
    for var in ("SENTRY_URL", "SENTRY_AUTH_TOKEN", "SENTRY_ORG_SLUG", "SENTRY_MCP_LOG_LEVEL", "SENTRY_MCP_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def mock_setup_logging() -> Generator[MagicMock, None, None]:
    with patch("sentry_selfhosted_mcp.cli.setup_logging") as mock:
        yield mock


@pytest.fixture
def mock_run() -> Generator[MagicMock, None, None]:
    """Replace the stdio server loop; records the config it was started with."""

    async def _fake_run(config: object) -> None:
        return None

    with patch("sentry_selfhosted_mcp.mcp_server.run", side_effect=_fake_run) as mock:
        yield mock
