"""Startup configuration for the Sentry MCP server.

Resolved once from the environment (or CLI options) into an immutable
``SentryConfig`` that is handed to the upstream client.  Nothing reads the
environment after startup.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from dataclasses import dataclass
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 20.0
API_PREFIX = "/api/0/"


class ConfigError(ValueError):
    """Raised when startup configuration is missing or invalid."""


@dataclass(frozen=True)
class SentryConfig:
    """Resolved connection settings for one Sentry organization."""

    url: str
    auth_token: str
    org_slug: str
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def api_url(self) -> str:
        return f"{self.url}{API_PREFIX}"


def infer_org_slug(auth_token: str) -> str | None:
    """Decode the organization slug embedded in an org auth token.

    Org tokens look like ``sntrys_<base64 json>_<secret>``; the JSON payload
    carries an ``org`` key.  Returns None if the token has no such payload.
    """
    parts = auth_token.split("_")
    if len(parts) < 2 or not parts[1]:
        return None
    encoded = parts[1]
    encoded += "=" * (-len(encoded) % 4)
    try:
        raw = base64.b64decode(encoded.replace("-", "+"), validate=True)
        payload = json.loads(raw)
    except (binascii.Error, ValueError):
        return None
    if not isinstance(payload, dict):
        return None
    org = payload.get("org")
    if isinstance(org, str) and org:
        return org
    return None


def _validate_url(url: str) -> str:
    try:
        parts = urlsplit(url)
    except ValueError:
        msg = f"Invalid SENTRY_URL format: {url}"
        raise ConfigError(msg) from None
    if parts.scheme not in ("http", "https") or not parts.netloc:
        msg = f"Invalid SENTRY_URL format: {url}"
        raise ConfigError(msg)
    return url[:-1] if url.endswith("/") else url


def load_config(
    url: str | None,
    auth_token: str | None,
    org_slug: str | None = None,
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> SentryConfig:
    """Build a ``SentryConfig``, inferring the org slug from the token if needed.

    Raises ConfigError for a missing url/token, a malformed url, or an org
    slug that is neither given nor recoverable from the token.
    """
    if not url:
        msg = "SENTRY_URL environment variable is required"
        raise ConfigError(msg)
    if not auth_token:
        msg = "SENTRY_AUTH_TOKEN environment variable is required"
        raise ConfigError(msg)
    base_url = _validate_url(url)

    if not org_slug:
        logger.warning("SENTRY_ORG_SLUG environment variable not set. Attempting to infer from token (this might fail).")
        org_slug = infer_org_slug(auth_token)
        if org_slug is None:
            msg = "SENTRY_ORG_SLUG environment variable is required and could not be inferred from token."
            raise ConfigError(msg)
        logger.warning("Inferred SENTRY_ORG_SLUG as: %s", org_slug)

    return SentryConfig(url=base_url, auth_token=auth_token, org_slug=org_slug, timeout=timeout)
