"""
api/client.py - HTTP component repository

Fetches a vessel's flat component list from the remote API using httpx.
Every failure mode (transport error, non-2xx status, undecodable or
invalid body) surfaces as ComponentFetchError so the session has a single
failure outcome to handle.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from ..components.errors import ComponentFetchError
from ..components.schema import Component
from ..config import ApiConfig, get_config
from .auth import AuthHeaderProvider, StaticAuthHeaders
from .schemas import ComponentListResponse

logger = logging.getLogger("api.client")


class HttpComponentRepository:
    """
    Component repository backed by the fleet API.

    Configuration:
        - config: ApiConfig (default: from environment)
        - auth: AuthHeaderProvider (default: API key / token from config)
        - transport: optional httpx transport, e.g. httpx.MockTransport
    """

    def __init__(
        self,
        config: Optional[ApiConfig] = None,
        auth: Optional[AuthHeaderProvider] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or get_config().api
        self.auth = auth or StaticAuthHeaders.from_config(self.config)
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=self.config.timeout_seconds,
                transport=self._transport,
            )
        return self._client

    async def fetch_by_vessel(self, vessel_id: str) -> List[Component]:
        """
        Fetch all components of a vessel.

        Args:
            vessel_id: Vessel identifier

        Returns:
            Records in the order served

        Raises:
            ComponentFetchError: On any transport, status or payload failure
        """
        client = self._get_client()
        url = self.config.components_url(vessel_id)

        try:
            headers = self.auth.get_auth_headers()
        except Exception as e:
            raise ComponentFetchError(vessel_id, f"auth headers unavailable: {e}") from e

        try:
            response = await client.get(url, headers=headers)
        except httpx.HTTPError as e:
            raise ComponentFetchError(vessel_id, f"request failed: {e}") from e

        if response.status_code >= 400:
            raise ComponentFetchError(
                vessel_id,
                f"API error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            body: Any = response.json()
        except ValueError as e:
            raise ComponentFetchError(
                vessel_id, "response is not valid JSON", status_code=response.status_code,
            ) from e

        try:
            envelope = ComponentListResponse.model_validate(body)
        except ValidationError as e:
            raise ComponentFetchError(
                vessel_id,
                f"unexpected response shape ({e.error_count()} errors)",
                status_code=response.status_code,
            ) from e

        components = envelope.to_components()
        logger.debug(f"Fetched {len(components)} components for vessel {vessel_id}")
        return components

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpComponentRepository":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
