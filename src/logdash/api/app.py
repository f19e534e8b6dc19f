"""FastAPI application factory.

The dashboard page is the page-ready trigger: once loaded it requests
/api/dashboard, which runs a single aggregation against the stats server.
"""

from __future__ import annotations

import os
from typing import AsyncGenerator

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from logdash.aggregation.aggregator import StatsAggregator
from logdash.api.page import DASHBOARD_PAGE
from logdash.fetch.client import DEFAULT_STATS_URL, StatsClient, create_http_client
from logdash.models.domain import DashboardLayout


async def get_aggregator(request: Request) -> AsyncGenerator[StatsAggregator, None]:
    """Dependency to get an aggregator for one request.

    Yields:
        StatsAggregator whose HTTP client is closed after the request.
    """
    state = request.app.state
    async with create_http_client(
        base_url=state.stats_url,
        timeout=state.timeout,
        transport=state.transport,
    ) as http:
        yield StatsAggregator(StatsClient(http), layout=state.layout)


def _env_timeout() -> float | None:
    value = os.environ.get("LOGDASH_TIMEOUT")
    return float(value) if value else None


def create_app(
    stats_url: str | None = None,
    timeout: float | None = None,
    layout: DashboardLayout | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create FastAPI application.

    Args:
        stats_url: Base URL of the stats server. Defaults to
            LOGDASH_STATS_URL, then http://127.0.0.1:8080.
        timeout: Request timeout in seconds. Defaults to LOGDASH_TIMEOUT;
            unset means no timeout.
        layout: Series alignment and chart kind.
        transport: Optional httpx transport for upstream requests.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="logdash",
        description="Message log statistics dashboard",
        version="0.1.0",
    )

    app.state.stats_url = stats_url or os.environ.get("LOGDASH_STATS_URL", DEFAULT_STATS_URL)
    app.state.timeout = timeout if timeout is not None else _env_timeout()
    app.state.layout = layout or DashboardLayout()
    app.state.transport = transport

    # Include routes
    from logdash.api.routes import dashboard

    app.include_router(dashboard.router, prefix="/api")

    @app.get("/", response_class=HTMLResponse)
    def dashboard_page():
        """Dashboard page."""
        return DASHBOARD_PAGE

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app
