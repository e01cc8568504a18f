"""Shared pytest fixtures for sentry-selfhosted-mcp tests."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from sentry_selfhosted_mcp.config import SentryConfig

SENTRY_URL = "https://sentry.example.com"
ORG_SLUG = "acme"
AUTH_TOKEN = "test-token"


@pytest.fixture
def sentry_config() -> SentryConfig:
    """Config for a fictional self-hosted Sentry at sentry.example.com."""
    return SentryConfig(url=SENTRY_URL, auth_token=AUTH_TOKEN, org_slug=ORG_SLUG)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Click CLI test runner."""
    return CliRunner()
