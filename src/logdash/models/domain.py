"""Domain models for logdash.

Plain dataclasses describing what to fetch and how to lay the results
out. Independent of the HTTP layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from logdash.models.types import ChartKind

# ============================================================================
# Resources
# ============================================================================

ResourceShape = Literal["count", "channels", "guilds", "daily_series"]

TOTAL_MSG_COUNT = "total_msg_count"
USER_MSG_COUNT = "user_msg_count"
EDIT_COUNT = "edit_count"
CHANNELS = "channels"
GUILDS = "guilds"
USER_MSGS_PER_DAY = "user_msgs_per_day"
TOTAL_MSGS_PER_DAY = "total_msgs_per_day"


@dataclass(frozen=True)
class ResourceRequest:
    """A read-only statistic endpoint and the JSON shape it returns."""

    path: str
    shape: ResourceShape


# Shape each known key must be requested with
RESOURCE_SHAPES: dict[str, ResourceShape] = {
    TOTAL_MSG_COUNT: "count",
    USER_MSG_COUNT: "count",
    EDIT_COUNT: "count",
    CHANNELS: "channels",
    GUILDS: "guilds",
    USER_MSGS_PER_DAY: "daily_series",
    TOTAL_MSGS_PER_DAY: "daily_series",
}

DEFAULT_RESOURCES: dict[str, ResourceRequest] = {
    TOTAL_MSG_COUNT: ResourceRequest("/api/msg_count", "count"),
    USER_MSG_COUNT: ResourceRequest("/api/user_msg_count", "count"),
    EDIT_COUNT: ResourceRequest("/api/edit_count", "count"),
    CHANNELS: ResourceRequest("/api/channels", "channels"),
    GUILDS: ResourceRequest("/api/guilds", "guilds"),
    USER_MSGS_PER_DAY: ResourceRequest("/api/user_msgs_per_day", "daily_series"),
    TOTAL_MSGS_PER_DAY: ResourceRequest("/api/total_msgs_per_day", "daily_series"),
}


# ============================================================================
# Layout
# ============================================================================

Alignment = Literal["index", "date"]


@dataclass(frozen=True)
class DashboardLayout:
    """How per-day series are combined and charted.

    Attributes:
        alignment: "index" zips the user and total series position by
            position and requires matching days at every shared index.
            "date" joins them on the day, counting a missing day as 0.
        chart_kind: Overrides the kind picked from the series shape.
    """

    alignment: Alignment = "index"
    chart_kind: ChartKind | None = None
