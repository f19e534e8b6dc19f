"""Summary sink writing to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from logdash.sinks.base import SummarySink


class StreamSummarySink(SummarySink):
    """Writes the summary text to a stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    def show(self, summary_text: str) -> None:
        self.stream.write(summary_text)
        self.stream.flush()
