"""Stats aggregation pipeline.

Architecture:
- StatsAggregator.fetch_all: issues every request concurrently and joins
- derive: pure reshaping of the joined values into an AggregateResult
- run: aggregate, then hand the result to the summary and chart sinks

Any failing resource voids the whole aggregation; nothing partial is
ever returned or handed to a sink.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Mapping

from logdash.aggregation.payloads import parse_payload
from logdash.aggregation.series import build_chart
from logdash.aggregation.summary import render_summary
from logdash.core.errors import AggregationFailed, MalformedPayload, SeriesAlignmentError
from logdash.fetch.client import StatsClient
from logdash.models.domain import (
    RESOURCE_SHAPES,
    TOTAL_MSGS_PER_DAY,
    USER_MSG_COUNT,
    USER_MSGS_PER_DAY,
    DashboardLayout,
    ResourceRequest,
)
from logdash.models.types import AggregateResult
from logdash.sinks.base import ChartSink, SummarySink

logger = logging.getLogger(__name__)


def derive(values: Mapping[str, Any], layout: DashboardLayout | None = None) -> AggregateResult:
    """Compute summary text and chart columns from joined values.

    Pure function - no network access.

    Args:
        values: Parsed resources keyed by resource key.
        layout: Series alignment and chart kind.

    Returns:
        Fully populated AggregateResult.

    Raises:
        AggregationFailed: If the per-day series cannot be combined, or
            the user message count exceeds the total.
    """
    try:
        chart = build_chart(
            values.get(USER_MSGS_PER_DAY),
            values.get(TOTAL_MSGS_PER_DAY),
            layout,
        )
    except SeriesAlignmentError as e:
        raise AggregationFailed(TOTAL_MSGS_PER_DAY, e) from e

    try:
        summary_text = render_summary(values)
    except MalformedPayload as e:
        raise AggregationFailed(USER_MSG_COUNT, e) from e

    return AggregateResult(summary_text=summary_text, chart=chart)


class StatsAggregator:
    """Fetches a set of statistic resources and combines them.

    One instance may aggregate any number of times; it keeps no state
    between calls.
    """

    def __init__(self, client: StatsClient, layout: DashboardLayout | None = None):
        """Initialize aggregator.

        Args:
            client: Client for the stats server.
            layout: Series alignment and chart kind.
        """
        self.client = client
        self.layout = layout or DashboardLayout()

    async def aggregate(self, resources: Mapping[str, ResourceRequest]) -> AggregateResult:
        """Fetch all resources, join, and derive the dashboard output.

        Args:
            resources: Requests keyed by resource key.

        Returns:
            AggregateResult with summary text and chart columns.

        Raises:
            ValueError: If a key is unknown or requested with the wrong shape.
            AggregationFailed: If any resource failed.
        """
        values = await self.fetch_all(resources)
        result = derive(values, self.layout)
        logger.info(f"Aggregated {len(values)} resources into {len(result.chart.x)} chart days")
        return result

    async def fetch_all(self, resources: Mapping[str, ResourceRequest]) -> dict[str, Any]:
        """Request every resource concurrently and wait for all to settle.

        Returns:
            Parsed values keyed by resource key, in the caller's order.

        Raises:
            ValueError: If a key is unknown or requested with the wrong shape.
            AggregationFailed: For the first failed resource in the
                caller's order, once every request has settled.
        """
        for key, request in resources.items():
            expected = RESOURCE_SHAPES.get(key)
            if expected is None:
                raise ValueError(f"Unknown resource key: {key}")
            if request.shape != expected:
                raise ValueError(f"Resource {key} must have shape {expected}, got {request.shape}")

        keys = list(resources)
        outcomes = await asyncio.gather(
            *(self._fetch_one(resources[key]) for key in keys),
            return_exceptions=True,
        )

        for key, outcome in zip(keys, outcomes):
            if isinstance(outcome, Exception):
                logger.warning(f"Resource {key} failed: {outcome}")
                raise AggregationFailed(key, outcome) from outcome
            if isinstance(outcome, BaseException):
                raise outcome

        return dict(zip(keys, outcomes))

    async def _fetch_one(self, request: ResourceRequest) -> Any:
        raw = await self.client.get_json(request.path)
        return parse_payload(request.shape, raw)


async def run(
    aggregator: StatsAggregator,
    resources: Mapping[str, ResourceRequest],
    summary_sink: SummarySink,
    chart_sink: ChartSink,
) -> AggregateResult:
    """Aggregate once and hand the result to both sinks.

    On failure neither sink is called and the error propagates.
    """
    result = await aggregator.aggregate(resources)
    summary_sink.show(result.summary_text)
    chart_sink.render(result.chart)
    return result
