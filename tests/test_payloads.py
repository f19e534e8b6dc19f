"""Tests for payload shape validation."""

import pytest

from logdash.aggregation.payloads import (
    parse_channels,
    parse_count,
    parse_guilds,
    parse_payload,
    parse_series,
)
from logdash.core.errors import MalformedPayload


class TestParseCount:
    """Test count payloads."""

    def test_envelope(self):
        assert parse_count({"count": 100}) == 100

    def test_bare_integer(self):
        assert parse_count(40) == 40

    @pytest.mark.parametrize("raw", [{"count": None}, None, -1, "12", 1.5, True, [3]])
    def test_invalid_counts(self, raw):
        with pytest.raises(MalformedPayload):
            parse_count(raw)


class TestParseChannels:
    """Test channel list payloads."""

    def test_guild_and_dm_channels(self):
        channels = parse_channels([{"id": 1, "guild_id": 9}, {"id": 2}])
        assert channels[0].is_guild_channel
        assert not channels[1].is_guild_channel

    def test_channel_id_field_name(self):
        """Upstream may name the id field channel_id."""
        channels = parse_channels([{"channel_id": 5, "guild_id": None}])
        assert channels[0].id == 5
        assert not channels[0].is_guild_channel

    def test_not_a_list(self):
        with pytest.raises(MalformedPayload):
            parse_channels("1,2")

    def test_missing_id(self):
        with pytest.raises(MalformedPayload):
            parse_channels([{"guild_id": 9}])


class TestParseGuilds:
    """Test guild list payloads."""

    def test_any_items(self):
        assert len(parse_guilds([{"id": 9}, 12])) == 2

    def test_not_a_list(self):
        with pytest.raises(MalformedPayload):
            parse_guilds(3)


class TestParseSeries:
    """Test per-day series payloads."""

    def test_rows(self):
        points = parse_series([["2023-01-01", 3], ["2023-01-02", 1, 4]])
        assert [p.count for p in points] == [3, 5]

    @pytest.mark.parametrize(
        "raw",
        [
            [["2023-01-01"]],
            [["2023-01-01", "3"]],
            [["2023-01-01", -3]],
            [[20230101, 3]],
            "2023-01-01,3",
        ],
    )
    def test_invalid_rows(self, raw):
        with pytest.raises(MalformedPayload):
            parse_series(raw)


def test_parse_payload_dispatches_on_shape():
    assert parse_payload("count", 3) == 3
    assert parse_payload("guilds", []) == []
