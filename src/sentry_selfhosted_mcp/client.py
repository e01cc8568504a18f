"""Async client for the Sentry web API (``<SENTRY_URL>/api/0/``).

One ``httpx.AsyncClient`` bound to the base address, bearer token and
request timeout is shared by all tool handlers.  Every method is a single
round trip; non-2xx responses raise ``httpx.HTTPStatusError`` and transport
failures raise ``httpx.RequestError``.  No retries, no caching.
"""

from __future__ import annotations

import asyncio
import logging
from types import TracebackType
from typing import Any
from urllib.parse import quote

import httpx

from sentry_selfhosted_mcp.config import SentryConfig

logger = logging.getLogger(__name__)


def _seg(value: str) -> str:
    """Percent-encode one caller-supplied path segment."""
    return quote(value, safe="")


class SentryClient:
    """Thin wrapper over the Sentry endpoints the MCP tools need."""

    def __init__(self, config: SentryConfig, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.config = config
        self._http = httpx.AsyncClient(
            base_url=config.api_url,
            headers={
                "Authorization": f"Bearer {config.auth_token}",
                "Content-Type": "application/json",
            },
            timeout=httpx.Timeout(config.timeout),
            transport=transport,
        )

    @property
    def org_slug(self) -> str:
        return self.config.org_slug

    async def __aenter__(self) -> SentryClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        # httpx.Timeout bounds each phase separately; this bounds the whole round trip.
        try:
            async with asyncio.timeout(self.config.timeout):
                response = await self._http.request(method, path, params=params, json=json)
        except TimeoutError as exc:
            msg = f"Request timed out after {self.config.timeout:g}s"
            raise httpx.TimeoutException(msg) from exc
        response.raise_for_status()
        if not response.content:
            return None
        return response.json()

    # -- issues ---------------------------------------------------------------

    async def get_issue(self, issue_id: str) -> Any:
        return await self._request("GET", f"issues/{_seg(issue_id)}/")

    async def get_latest_event(self, issue_id: str) -> Any:
        return await self._request("GET", f"organizations/{_seg(self.org_slug)}/issues/{_seg(issue_id)}/events/latest/")

    async def list_issues(self, project_slug: str, query: str | None = None) -> Any:
        params = {"query": query} if query else None
        return await self._request("GET", f"projects/{_seg(self.org_slug)}/{_seg(project_slug)}/issues/", params=params)

    async def update_issue_status(self, issue_id: str, status: str) -> Any:
        return await self._request("PUT", f"issues/{_seg(issue_id)}/", json={"status": status})

    async def create_issue_comment(self, issue_id: str, text: str) -> Any:
        return await self._request("POST", f"issues/{_seg(issue_id)}/comments/", json={"text": text})

    # -- projects / events ----------------------------------------------------

    async def list_projects(self) -> Any:
        return await self._request("GET", f"organizations/{_seg(self.org_slug)}/projects/")

    async def get_event(self, project_slug: str, event_id: str) -> Any:
        return await self._request("GET", f"projects/{_seg(self.org_slug)}/{_seg(project_slug)}/events/{_seg(event_id)}/")
