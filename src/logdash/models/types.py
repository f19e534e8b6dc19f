"""Pydantic models for logdash.

Payload records parsed from the stats server and the results handed
to the summary and chart sinks. All models are frozen: they are built
once per page load and never mutated.
"""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

ChartKind = Literal["area", "area-stacked", "line"]


class ChannelRecord(BaseModel):
    """A logged channel.

    A channel with a guild_id is a guild channel, one without is a
    direct-message channel.
    """

    model_config = ConfigDict(frozen=True)

    id: int | str = Field(validation_alias=AliasChoices("id", "channel_id"))
    guild_id: int | str | None = None

    @property
    def is_guild_channel(self) -> bool:
        return self.guild_id is not None


class DailyPoint(BaseModel):
    """Message count for a single calendar day.

    Split points carry private (direct-message) and public (guild)
    counts; count is always the total for the day.
    """

    model_config = ConfigDict(frozen=True)

    day: date
    count: int = Field(ge=0)
    private_count: int | None = Field(default=None, ge=0)
    public_count: int | None = Field(default=None, ge=0)

    @property
    def is_split(self) -> bool:
        return self.private_count is not None


class NamedColumn(BaseModel):
    """A named numeric series aligned by index to the chart's x axis."""

    model_config = ConfigDict(frozen=True)

    name: str
    values: list[int]


class ChartSpec(BaseModel):
    """Chart-ready columnar data plus the chart kind.

    x is the shared day axis; every column in series has the same
    length as x.
    """

    model_config = ConfigDict(frozen=True)

    kind: ChartKind
    x: list[date]
    series: list[NamedColumn]
    groups: list[list[str]] = Field(default_factory=list)

    @property
    def columns(self) -> list[tuple[str, list]]:
        """Columns in chart order, the day axis first under the name "x"."""
        return [("x", list(self.x))] + [(col.name, list(col.values)) for col in self.series]


class AggregateResult(BaseModel):
    """Fully populated output of one aggregation."""

    model_config = ConfigDict(frozen=True)

    summary_text: str
    chart: ChartSpec


class DashboardPayload(BaseModel):
    """Dashboard data for API response."""

    summary_text: str
    chart_config: dict
