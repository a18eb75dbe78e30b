"""
Thin HTTP client for the public Voidly censorship endpoints.

All methods are read-only GETs. Failures are raised as ``UpstreamError`` so
the dispatch layer can turn them into user-facing error text.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from voidly_mcp.config import VoidlyConfig, default_config
from voidly_mcp.errors import UpstreamError, UpstreamUnreachableError

logger = logging.getLogger(__name__)


class VoidlyApiClient:
    """Async client for the Voidly Global Censorship Index API."""

    def __init__(
        self,
        config: VoidlyConfig | None = None,
        *,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or default_config
        self._client: Optional[httpx.AsyncClient] = async_client
        self._owns_client = async_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.config.timeout)
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _build_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }

    def _process_response(self, response: httpx.Response, url: str) -> Any:
        if not 200 <= response.status_code < 300:
            status_text = response.reason_phrase or ""
            logger.warning("Voidly API returned %s for %s", response.status_code, url)
            raise UpstreamError(
                f"API request failed: {response.status_code} {status_text}".rstrip(),
                status_code=response.status_code,
                status_text=status_text,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError(
                "API request failed: invalid JSON response",
                status_code=response.status_code,
            ) from exc

    async def fetch_json(self, url: str) -> Any:
        """GET ``url`` and decode its JSON body."""
        client = await self._get_client()
        try:
            response = await client.get(url, headers=self._build_headers())
        except httpx.RequestError as exc:
            logger.warning("Voidly API unreachable for %s", url)
            raise UpstreamUnreachableError(f"API request failed: {exc.__class__.__name__}") from exc
        return self._process_response(response, url)

    async def fetch_censorship_index(self) -> Any:
        """Retrieve the global censorship index snapshot."""
        return await self.fetch_json(f"{self.config.api_url}/v1/censorship-index")

    async def fetch_country(self, country_code: str) -> Any:
        """Retrieve censorship detail for one country."""
        encoded = quote(country_code, safe="")
        return await self.fetch_json(f"{self.config.api_url}/v1/censorship-index/{encoded}")

    async def fetch_incidents(self) -> Any:
        """Retrieve the active incident feed."""
        return await self.fetch_json(f"{self.config.api_url}/v1/censorship-index/incidents")

    async def fetch_methodology(self) -> Any:
        """Retrieve the data collection and scoring methodology document."""
        return await self.fetch_json(f"{self.config.data_api_url}/methodology")


default_client = VoidlyApiClient()
