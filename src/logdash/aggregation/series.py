"""Per-day series handling.

Parses [date, ...counts] rows into DailyPoints, aligns two independently
fetched series, derives "others" by subtraction and lays the result out
as chart columns.

Pure functions - no network access.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Sequence

import numpy as np

from logdash.core.errors import MalformedPayload, SeriesAlignmentError
from logdash.models.domain import Alignment, DashboardLayout
from logdash.models.types import ChartSpec, DailyPoint, NamedColumn

# Tick format of the chart's x axis (strftime / d3 time format)
TICK_FORMAT = "%Y-%m-%d"

PRIVATE_COLUMN = "Private messages"
PUBLIC_COLUMN = "Public messages"
USER_COLUMN = "Your messages"
OTHERS_COLUMN = "Others' messages"
SINGLE_COLUMN = "Messages"


def parse_day(value: str) -> date:
    """Parse a YYYY-MM-DD string into a calendar day.

    Only the exact tick format is accepted, so parse_day and format_tick
    are inverses.
    """
    try:
        day = datetime.strptime(value, TICK_FORMAT).date()
    except (TypeError, ValueError) as e:
        raise MalformedPayload(f"invalid date {value!r}") from e
    if format_tick(day) != value:
        raise MalformedPayload(f"invalid date {value!r}")
    return day


def format_tick(day: date) -> str:
    """Format a day the way the chart's x axis ticks show it."""
    return day.strftime(TICK_FORMAT)


def parse_daily_series(rows: Sequence[Sequence]) -> list[DailyPoint]:
    """Convert [date, count] or [date, private, public] rows to DailyPoints.

    Args:
        rows: Rows with a date string first and one or two counts after it.

    Returns:
        DailyPoints in input order.

    Raises:
        MalformedPayload: On a bad date, a row of the wrong length, or
            dates that are not strictly increasing, or rows mixing
            split and plain counts.
    """
    points: list[DailyPoint] = []
    for row in rows:
        day = parse_day(row[0])
        if points and day <= points[-1].day:
            raise MalformedPayload(f"dates not strictly increasing at {row[0]}")

        rest = row[1:]
        if points and len(rest) != len(rows[0]) - 1:
            raise MalformedPayload(f"mixed split and plain rows at {row[0]}")
        if len(rest) == 1:
            points.append(DailyPoint(day=day, count=rest[0]))
        elif len(rest) == 2:
            private, public = rest
            points.append(
                DailyPoint(
                    day=day,
                    count=private + public,
                    private_count=private,
                    public_count=public,
                )
            )
        else:
            raise MalformedPayload(f"expected 1 or 2 counts per day, got {len(rest)}")
    return points


def _is_split(series: Sequence[DailyPoint]) -> bool:
    return bool(series) and series[0].is_split


def _zero_point(day: date, split: bool) -> DailyPoint:
    if split:
        return DailyPoint(day=day, count=0, private_count=0, public_count=0)
    return DailyPoint(day=day, count=0)


def align_series(
    total: Sequence[DailyPoint],
    user: Sequence[DailyPoint],
    alignment: Alignment = "index",
) -> tuple[list[date], list[DailyPoint], list[DailyPoint]]:
    """Pair two per-day series day for day.

    With "index" alignment the series are zipped by position and cut to
    the shorter length; the days at each shared index must match. With
    "date" alignment the x axis is the union of both series' days and a
    day missing from one side is filled with a zero point.

    Args:
        total: Per-day totals.
        user: Per-day counts for the viewing user.
        alignment: "index" or "date".

    Returns:
        Tuple of (days, total points, user points), all the same length.

    Raises:
        SeriesAlignmentError: If index alignment finds different days
            at the same position.
    """
    if alignment == "index":
        length = min(len(total), len(user))
        for i in range(length):
            if total[i].day != user[i].day:
                raise SeriesAlignmentError(
                    f"day mismatch at index {i}: total has {format_tick(total[i].day)}, "
                    f"user has {format_tick(user[i].day)}"
                )
        days = [p.day for p in total[:length]]
        return days, list(total[:length]), list(user[:length])

    if alignment == "date":
        total_by_day = {p.day: p for p in total}
        user_by_day = {p.day: p for p in user}
        days = sorted(total_by_day.keys() | user_by_day.keys())
        total_split = _is_split(total)
        user_split = _is_split(user)
        return (
            days,
            [total_by_day.get(d) or _zero_point(d, total_split) for d in days],
            [user_by_day.get(d) or _zero_point(d, user_split) for d in days],
        )

    raise ValueError(f"Unknown alignment: {alignment}")


def derive_others(total: Sequence[int], user: Sequence[int]) -> list[int]:
    """Compute others[i] = total[i] - user[i].

    The result has the length of the shorter input.

    Raises:
        SeriesAlignmentError: If any user count exceeds its total.
    """
    length = min(len(total), len(user))
    total_arr = np.asarray(total[:length], dtype=np.int64)
    user_arr = np.asarray(user[:length], dtype=np.int64)
    others = total_arr - user_arr

    negative = np.flatnonzero(others < 0)
    if negative.size:
        i = int(negative[0])
        raise SeriesAlignmentError(
            f"user count {int(user_arr[i])} exceeds total {int(total_arr[i])} at index {i}"
        )
    return others.tolist()


def _split_columns(points: Sequence[DailyPoint]) -> list[NamedColumn]:
    return [
        NamedColumn(name=PRIVATE_COLUMN, values=[p.private_count for p in points]),
        NamedColumn(name=PUBLIC_COLUMN, values=[p.public_count for p in points]),
    ]


def build_chart(
    user: Sequence[DailyPoint] | None,
    total: Sequence[DailyPoint] | None,
    layout: DashboardLayout | None = None,
) -> ChartSpec:
    """Lay out per-day series as chart columns.

    - split user series: private/public columns, stacked
    - user and total: user and others columns, others = total - user
    - one series alone: a single "Messages" column
    A split user series combined with totals gets both: private, public
    and others, stacked together.

    Args:
        user: Per-day series for the viewing user, if requested.
        total: Per-day totals, if requested.
        layout: Alignment and chart kind override.

    Returns:
        ChartSpec whose x axis is the shared day column.
    """
    layout = layout or DashboardLayout()

    if user is None and total is None:
        return ChartSpec(kind=layout.chart_kind or "line", x=[], series=[])

    if user is not None and total is not None:
        days, total_points, user_points = align_series(total, user, layout.alignment)
        others = derive_others(
            [p.count for p in total_points],
            [p.count for p in user_points],
        )
        others_column = NamedColumn(name=OTHERS_COLUMN, values=others)

        if _is_split(user_points):
            series = _split_columns(user_points) + [others_column]
            return ChartSpec(
                kind=layout.chart_kind or "area-stacked",
                x=days,
                series=series,
                groups=[[col.name for col in series]],
            )

        user_column = NamedColumn(name=USER_COLUMN, values=[p.count for p in user_points])
        return ChartSpec(
            kind=layout.chart_kind or "area",
            x=days,
            series=[user_column, others_column],
        )

    if user is not None and _is_split(user):
        series = _split_columns(user)
        return ChartSpec(
            kind=layout.chart_kind or "area-stacked",
            x=[p.day for p in user],
            series=series,
            groups=[[col.name for col in series]],
        )

    only = user if user is not None else total
    return ChartSpec(
        kind=layout.chart_kind or "line",
        x=[p.day for p in only],
        series=[NamedColumn(name=SINGLE_COLUMN, values=[p.count for p in only])],
    )
