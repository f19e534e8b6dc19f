"""Dashboard API endpoint.

GET /api/dashboard - Run one aggregation and return summary + chart config
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from logdash.aggregation.aggregator import StatsAggregator, run
from logdash.api.app import get_aggregator
from logdash.core.errors import AggregationFailed
from logdash.models.domain import DEFAULT_RESOURCES
from logdash.models.types import DashboardPayload
from logdash.sinks.base import SummarySink
from logdash.sinks.chart import ChartConfigSink

router = APIRouter()


class _SummaryCapture(SummarySink):
    """Keeps the summary text for the response body."""

    def __init__(self):
        self.text: str | None = None

    def show(self, summary_text: str) -> None:
        self.text = summary_text


@router.get("/dashboard", response_model=DashboardPayload)
async def get_dashboard(
    aggregator: StatsAggregator = Depends(get_aggregator),
) -> DashboardPayload:
    """Aggregate all dashboard statistics.

    Args:
        aggregator: Aggregator bound to the stats server (injected).

    Returns:
        DashboardPayload with summary text and chart config.

    Raises:
        HTTPException: 502 if any statistic could not be fetched.
    """
    summary_sink = _SummaryCapture()
    chart_sink = ChartConfigSink()

    try:
        await run(aggregator, DEFAULT_RESOURCES, summary_sink, chart_sink)
    except AggregationFailed as e:
        raise HTTPException(
            status_code=502,
            detail={"resource": e.resource_key, "error": str(e.cause)},
        ) from e

    return DashboardPayload(summary_text=summary_sink.text, chart_config=chart_sink.config)
