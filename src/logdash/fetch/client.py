"""Async client for the read-only stats endpoints."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from logdash.core.errors import BadStatus, MalformedPayload, NetworkFailure

logger = logging.getLogger(__name__)

DEFAULT_STATS_URL = "http://127.0.0.1:8080"


def create_http_client(
    base_url: str = DEFAULT_STATS_URL,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the shared HTTP client for one aggregation.

    Args:
        base_url: Root URL of the stats server.
        timeout: Per-request timeout in seconds. None waits forever.
        transport: Optional transport override (tests use httpx.MockTransport).

    Returns:
        httpx.AsyncClient; the caller is responsible for closing it.
    """
    return httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)


class StatsClient:
    """Fetches JSON values from the stats server.

    Every failure is raised as a FetchError subclass or MalformedPayload;
    nothing is retried.
    """

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    async def get_json(self, path: str) -> Any:
        """GET a path and decode its JSON body.

        Args:
            path: Endpoint path relative to the client's base URL.

        Returns:
            Decoded JSON value.

        Raises:
            NetworkFailure: Transport error.
            BadStatus: Non-2xx response.
            MalformedPayload: Body is not valid JSON.
        """
        logger.debug(f"GET {path}")
        try:
            response = await self.http.get(path)
        except httpx.TransportError as e:
            raise NetworkFailure(path, str(e) or type(e).__name__) from e

        if not response.is_success:
            raise BadStatus(path, response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise MalformedPayload(f"{path}: invalid JSON: {e}") from e
