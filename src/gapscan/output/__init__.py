"""Output — sink, gap formatters, terminal reporting."""

from gapscan.output.formatter import (
    DiffFormatter,
    FilterFormatter,
    GapFormatter,
    OutputMode,
    build_formatter,
)
from gapscan.output.sink import LineSink, OutputClosed

__all__ = [
    "DiffFormatter",
    "FilterFormatter",
    "GapFormatter",
    "LineSink",
    "OutputClosed",
    "OutputMode",
    "build_formatter",
]
