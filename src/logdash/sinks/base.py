"""Sink interfaces.

Sinks only display what they are handed. They must NOT:
- Fetch data
- Derive metrics
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from logdash.models.types import ChartSpec


class SummarySink(ABC):
    """Displays the summary text verbatim, preserving line breaks."""

    @abstractmethod
    def show(self, summary_text: str) -> None:
        pass


class ChartSink(ABC):
    """Renders chart columns as a day-axis time series."""

    @abstractmethod
    def render(self, chart: ChartSpec) -> None:
        pass
