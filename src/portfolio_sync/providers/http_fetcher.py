"""HTTP holdings fetcher backed by httpx."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from portfolio_sync.api.schemas import HoldingsEnvelope
from portfolio_sync.core.exceptions import (
    InvalidEndpointError,
    NoResponseBodyError,
    ServerStatusError,
    DecodeFailureError,
    TransportError,
)

logger = logging.getLogger(__name__)


class HttpHoldingsFetcher:
    """
    Fetches the holdings envelope with a single HTTP GET.

    No retries: every failure is classified into one `FetchError` subclass
    so callers can decide between cache fallback and surfacing the error.
    """

    HEADERS = {"Accept": "application/json"}

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout_seconds: float = 10.0,
    ):
        """
        Args:
            client: Optional shared client. When omitted a short-lived client
                is opened per request.
            timeout_seconds: Timeout for the per-request client.
        """
        self._client = client
        self._timeout = timeout_seconds

    async def fetch(self, endpoint: str) -> HoldingsEnvelope:
        url = self._parse_endpoint(endpoint)

        try:
            if self._client is not None:
                response = await self._client.get(url, headers=self.HEADERS)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(url, headers=self.HEADERS)
        except httpx.UnsupportedProtocol as e:
            raise InvalidEndpointError(endpoint) from e
        except httpx.HTTPError as e:
            logger.debug(f"Transport failure for {endpoint}: {e!r}")
            raise TransportError(e) from e

        if not 200 <= response.status_code <= 299:
            raise ServerStatusError(response.status_code)

        if not response.content:
            raise NoResponseBodyError()

        try:
            envelope = HoldingsEnvelope.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeFailureError(e) from e

        logger.debug(f"Fetched {len(envelope.data.user_holding)} holdings from {endpoint}")
        return envelope

    @staticmethod
    def _parse_endpoint(endpoint: str) -> httpx.URL:
        """Validate the endpoint string; only absolute http(s) URLs are accepted."""
        if not endpoint or not endpoint.strip():
            raise InvalidEndpointError(endpoint)
        try:
            url = httpx.URL(endpoint.strip())
        except httpx.InvalidURL as e:
            raise InvalidEndpointError(endpoint) from e
        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidEndpointError(endpoint)
        return url
