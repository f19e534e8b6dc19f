"""Shared pytest fixtures for logdash tests."""

import asyncio
import copy

import httpx
import pytest

from logdash.aggregation.aggregator import StatsAggregator
from logdash.fetch.client import StatsClient, create_http_client
from logdash.models.domain import DEFAULT_RESOURCES

STATS_URL = "http://stats.test"

SCENARIO_RESPONSES = {
    "/api/msg_count": {"count": 100},
    "/api/user_msg_count": 40,
    "/api/edit_count": 7,
    "/api/channels": [{"id": 1, "guild_id": 9}, {"id": 2}],
    "/api/guilds": [{"id": 9}],
    "/api/user_msgs_per_day": [["2023-01-01", 3], ["2023-01-02", 5]],
    "/api/total_msgs_per_day": [["2023-01-01", 10], ["2023-01-02", 12]],
}


def make_transport(responses, failures=None, seen=None):
    """Build a MockTransport serving JSON bodies by path.

    failures maps a path to an int status, "network" (connection error)
    or "malformed" (non-JSON body). Unknown paths answer 404. Requested
    paths are appended to seen when given.
    """
    failures = failures or {}

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if seen is not None:
            seen.append(path)
        failure = failures.get(path)
        if failure == "network":
            raise httpx.ConnectError("connection refused", request=request)
        if failure == "malformed":
            return httpx.Response(200, content=b"<html>not json</html>")
        if isinstance(failure, int):
            return httpx.Response(failure, json={"error": "nope"})
        if path not in responses:
            return httpx.Response(404)
        return httpx.Response(200, json=responses[path])

    return httpx.MockTransport(handler)


async def _aggregate_with(transport, resources, layout):
    async with create_http_client(base_url=STATS_URL, transport=transport) as http:
        aggregator = StatsAggregator(StatsClient(http), layout=layout)
        return await aggregator.aggregate(resources)


@pytest.fixture
def responses():
    """Upstream responses for the reference scenario (safe to mutate)."""
    return copy.deepcopy(SCENARIO_RESPONSES)


@pytest.fixture
def aggregate():
    """Run one aggregation against mocked upstream responses."""

    def _aggregate(responses, resources=None, failures=None, layout=None, seen=None):
        transport = make_transport(responses, failures, seen)
        return asyncio.run(
            _aggregate_with(transport, resources or DEFAULT_RESOURCES, layout)
        )

    return _aggregate
