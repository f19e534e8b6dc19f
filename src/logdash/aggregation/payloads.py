"""Shape validation for raw endpoint payloads.

Each resource shape has one parser that turns decoded JSON into typed
values or raises MalformedPayload.
"""

from __future__ import annotations

from typing import Annotated, Any, Callable, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from logdash.aggregation.series import parse_daily_series
from logdash.core.errors import MalformedPayload
from logdash.models.domain import ResourceShape
from logdash.models.types import ChannelRecord, DailyPoint

Count = Annotated[int, Field(strict=True, ge=0)]


class CountEnvelope(BaseModel):
    """Count wrapped in an object, e.g. {"count": 100}."""

    count: Count


_count_adapter = TypeAdapter(Union[Count, CountEnvelope])
_channels_adapter = TypeAdapter(list[ChannelRecord])
_guilds_adapter = TypeAdapter(list[Any])
_series_rows_adapter = TypeAdapter(
    list[Union[tuple[str, Count], tuple[str, Count, Count]]]
)


def _validate(adapter: TypeAdapter, raw: Any, what: str) -> Any:
    try:
        return adapter.validate_python(raw)
    except ValidationError as e:
        raise MalformedPayload(f"expected {what}: {e.error_count()} validation error(s)") from e


def parse_count(raw: Any) -> int:
    """Parse a bare non-negative integer or a {"count": n} object."""
    value = _validate(_count_adapter, raw, "a count")
    if isinstance(value, CountEnvelope):
        return value.count
    return value


def parse_channels(raw: Any) -> list[ChannelRecord]:
    """Parse an array of channel objects."""
    return _validate(_channels_adapter, raw, "an array of channels")


def parse_guilds(raw: Any) -> list[Any]:
    """Parse the guild list. Only its length is used downstream."""
    return _validate(_guilds_adapter, raw, "an array of guilds")


def parse_series(raw: Any) -> list[DailyPoint]:
    """Parse [date, count] or [date, private, public] rows into day points."""
    rows = _validate(_series_rows_adapter, raw, "an array of [date, ...counts] rows")
    return parse_daily_series(rows)


PARSERS: dict[ResourceShape, Callable[[Any], Any]] = {
    "count": parse_count,
    "channels": parse_channels,
    "guilds": parse_guilds,
    "daily_series": parse_series,
}


def parse_payload(shape: ResourceShape, raw: Any) -> Any:
    """Validate a raw payload against its resource shape.

    Args:
        shape: Expected shape of the resource.
        raw: Decoded JSON value.

    Returns:
        Typed value for the shape.

    Raises:
        MalformedPayload: If raw does not match the shape.
    """
    return PARSERS[shape](raw)
