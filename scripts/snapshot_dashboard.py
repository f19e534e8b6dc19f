#!/usr/bin/env python3
"""Print a one-off dashboard snapshot.

Runs the aggregation once against a stats server, writes the summary
text to stdout and then the chart config as JSON.

Usage:
    python scripts/snapshot_dashboard.py [STATS_URL]

STATS_URL defaults to LOGDASH_STATS_URL, then http://127.0.0.1:8080.

Exit codes:
    0: Snapshot printed
    1: A statistic could not be fetched
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from logdash.aggregation.aggregator import StatsAggregator, run  # noqa: E402
from logdash.core.errors import AggregationFailed  # noqa: E402
from logdash.fetch.client import DEFAULT_STATS_URL, StatsClient, create_http_client  # noqa: E402
from logdash.models.domain import DEFAULT_RESOURCES  # noqa: E402
from logdash.sinks.chart import ChartConfigSink  # noqa: E402
from logdash.sinks.text import StreamSummarySink  # noqa: E402


async def snapshot(stats_url: str) -> dict | None:
    """Aggregate once; returns the chart config."""
    chart_sink = ChartConfigSink()
    async with create_http_client(base_url=stats_url) as http:
        aggregator = StatsAggregator(StatsClient(http))
        await run(aggregator, DEFAULT_RESOURCES, StreamSummarySink(sys.stdout), chart_sink)
    return chart_sink.config


def main() -> int:
    """Main entry point."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    stats_url = sys.argv[1] if len(sys.argv) > 1 else os.environ.get(
        "LOGDASH_STATS_URL", DEFAULT_STATS_URL
    )

    try:
        config = asyncio.run(snapshot(stats_url))
    except AggregationFailed as e:
        print(f"FAIL: {e.resource_key}: {e.cause}")
        return 1

    print("\n")
    print(json.dumps(config, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
