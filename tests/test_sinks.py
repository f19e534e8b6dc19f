"""Tests for the summary and chart sinks."""

import io
import json
from datetime import date

from logdash.aggregation.series import build_chart, parse_daily_series
from logdash.sinks.chart import ChartConfigSink, build_chart_config
from logdash.sinks.text import StreamSummarySink


class TestStreamSummarySink:
    """Test text summary output."""

    def test_writes_text_verbatim(self):
        stream = io.StringIO()
        StreamSummarySink(stream).show("Total messages: 100\nLogged guilds: 1")
        assert stream.getvalue() == "Total messages: 100\nLogged guilds: 1"


class TestBuildChartConfig:
    """Test billboard.js config generation."""

    def _user_and_total(self):
        user = parse_daily_series([["2023-01-01", 3], ["2023-01-02", 5]])
        total = parse_daily_series([["2023-01-01", 10], ["2023-01-02", 12]])
        return build_chart(user, total)

    def test_columns_start_with_x_axis(self):
        config = build_chart_config(self._user_and_total())
        columns = config["data"]["columns"]
        assert columns[0] == ["x", "2023-01-01", "2023-01-02"]
        assert columns[1] == ["Your messages", 3, 5]
        assert columns[2] == ["Others' messages", 7, 7]
        assert config["data"]["x"] == "x"

    def test_timeseries_axis_with_day_ticks(self):
        config = build_chart_config(self._user_and_total())
        assert config["axis"]["x"]["type"] == "timeseries"
        assert config["axis"]["x"]["tick"]["format"] == "%Y-%m-%d"
        assert date(2023, 5, 1).strftime(config["axis"]["x"]["tick"]["format"]) == "2023-05-01"

    def test_area_kind(self):
        config = build_chart_config(self._user_and_total())
        assert config["data"]["type"] == "area"
        assert "groups" not in config["data"]

    def test_stacked_area_has_groups(self):
        user = parse_daily_series([["2023-01-01", 1, 2]])
        config = build_chart_config(build_chart(user, None))
        assert config["data"]["type"] == "area"
        assert config["data"]["groups"] == [["Private messages", "Public messages"]]

    def test_line_kind(self):
        total = parse_daily_series([["2023-01-01", 10]])
        config = build_chart_config(build_chart(None, total))
        assert config["data"]["type"] == "line"

    def test_json_serializable(self):
        json.dumps(build_chart_config(self._user_and_total()))

    def test_bindto(self):
        config = build_chart_config(self._user_and_total(), bindto="#activity")
        assert config["bindto"] == "#activity"


class TestChartConfigSink:
    """Test the config-keeping chart sink."""

    def test_no_config_before_render(self):
        assert ChartConfigSink().config is None

    def test_keeps_last_config(self):
        sink = ChartConfigSink()
        chart = build_chart(None, parse_daily_series([["2023-01-01", 10]]))
        sink.render(chart)
        assert sink.config == build_chart_config(chart)
