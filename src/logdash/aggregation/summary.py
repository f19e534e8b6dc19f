"""Text summary of the scalar statistics.

The summary lists every available stat as "<Label>: <value>", one per
line, always in the same order regardless of the order resources were
requested in.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from logdash.core.errors import MalformedPayload
from logdash.models.domain import (
    CHANNELS,
    EDIT_COUNT,
    GUILDS,
    TOTAL_MSG_COUNT,
    USER_MSG_COUNT,
    USER_MSGS_PER_DAY,
)
from logdash.models.types import ChannelRecord, DailyPoint


@dataclass
class ChannelPartition:
    """Logged channels split into guild and direct-message channels."""

    guild_channels: int
    dm_channels: int

    @property
    def total(self) -> int:
        return self.guild_channels + self.dm_channels


def partition_channels(channels: Sequence[ChannelRecord]) -> ChannelPartition:
    """Count guild channels; every other channel is a DM channel."""
    guild_channels = sum(1 for c in channels if c.is_guild_channel)
    return ChannelPartition(
        guild_channels=guild_channels,
        dm_channels=len(channels) - guild_channels,
    )


def summary_lines(values: Mapping[str, Any]) -> list[tuple[str, int]]:
    """Build (label, value) pairs for every stat present in values.

    Args:
        values: Parsed resources keyed by resource key.

    Returns:
        Label/value pairs in display order.

    Raises:
        MalformedPayload: If the user message count exceeds the total.
    """
    lines: list[tuple[str, int]] = []

    total = values.get(TOTAL_MSG_COUNT)
    user = values.get(USER_MSG_COUNT)
    if total is not None:
        lines.append(("Total messages", total))
    if user is not None:
        lines.append(("Your messages", user))
    if total is not None and user is not None:
        if user > total:
            raise MalformedPayload(f"user message count {user} exceeds total {total}")
        lines.append(("Others' messages", total - user))

    user_series: Sequence[DailyPoint] | None = values.get(USER_MSGS_PER_DAY)
    if user_series and user_series[0].is_split:
        lines.append(("Your public messages", sum(p.public_count for p in user_series)))
        lines.append(("Your private messages", sum(p.private_count for p in user_series)))

    if GUILDS in values:
        lines.append(("Logged guilds", len(values[GUILDS])))

    if CHANNELS in values:
        partition = partition_channels(values[CHANNELS])
        lines.append(("Logged channels", partition.guild_channels))
        lines.append(("Logged direct message channels", partition.dm_channels))

    if values.get(EDIT_COUNT) is not None:
        lines.append(("Logged edits", values[EDIT_COUNT]))

    return lines


def render_summary(values: Mapping[str, Any]) -> str:
    """Render the summary text, one "<Label>: <value>" per line."""
    return "\n".join(f"{label}: {value}" for label, value in summary_lines(values))
