"""Chart sink producing a billboard.js / c3 chart config.

The config is what the dashboard page passes to bb.generate(). The x
axis is always a day timeseries with YYYY-MM-DD ticks.
"""

from __future__ import annotations

from logdash.aggregation.series import TICK_FORMAT, format_tick
from logdash.models.types import ChartSpec
from logdash.sinks.base import ChartSink

# Chart kind -> billboard.js data.type
CHART_TYPES = {
    "area": "area",
    "area-stacked": "area",
    "line": "line",
}


def build_chart_config(chart: ChartSpec, bindto: str = "#chart") -> dict:
    """Build a chart config from chart columns.

    Args:
        chart: Chart columns and kind.
        bindto: CSS selector of the chart element.

    Returns:
        JSON-serializable config dict.
    """
    columns: list[list] = [["x"] + [format_tick(day) for day in chart.x]]
    for col in chart.series:
        columns.append([col.name] + list(col.values))

    data: dict = {
        "x": "x",
        "xFormat": TICK_FORMAT,
        "columns": columns,
        "type": CHART_TYPES[chart.kind],
    }
    if chart.kind == "area-stacked" and chart.groups:
        data["groups"] = [list(group) for group in chart.groups]

    return {
        "bindto": bindto,
        "data": data,
        "axis": {
            "x": {
                "type": "timeseries",
                "tick": {"format": TICK_FORMAT},
            },
        },
    }


class ChartConfigSink(ChartSink):
    """Keeps the config of the last rendered chart."""

    def __init__(self, bindto: str = "#chart"):
        self.bindto = bindto
        self.config: dict | None = None

    def render(self, chart: ChartSpec) -> None:
        self.config = build_chart_config(chart, self.bindto)
