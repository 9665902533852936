"""Gap event formatters — diff and filter modes.

Neither mode re-serialises parsed values: diff prints the two fields as
they were extracted, filter prints the two raw lines unchanged.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol

from gapscan.output.sink import LineSink

if TYPE_CHECKING:
    from gapscan.scanner.models import GapEvent


class OutputMode(str, Enum):
    DIFF = "diff"
    FILTER = "filter"


class GapFormatter(Protocol):
    def emit(self, event: GapEvent) -> None: ...


class DiffFormatter:
    """One line per gap: ``<previous field><delimiter><current field>``."""

    def __init__(self, sink: LineSink, delimiter: str) -> None:
        self._sink = sink
        self._delimiter = delimiter

    def emit(self, event: GapEvent) -> None:
        self._sink.write_line(
            f"{event.previous.field}{self._delimiter}{event.current.field}"
        )


class FilterFormatter:
    """Both offending lines verbatim; pairs are separated by one empty line."""

    def __init__(self, sink: LineSink) -> None:
        self._sink = sink
        self._first = True

    def emit(self, event: GapEvent) -> None:
        if self._first:
            self._first = False
        else:
            self._sink.write_line("")
        self._sink.write_line(event.previous.text)
        self._sink.write_line(event.current.text)


def build_formatter(mode: OutputMode, sink: LineSink, delimiter: str) -> GapFormatter:
    if mode is OutputMode.FILTER:
        return FilterFormatter(sink)
    return DiffFormatter(sink, delimiter)
