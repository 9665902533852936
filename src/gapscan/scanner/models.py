"""Scan data models."""

from __future__ import annotations

from dataclasses import dataclass

from gapscan.values.models import Delta, ParsedValue


@dataclass(frozen=True, slots=True)
class Record:
    """A successfully parsed input line."""

    line_no: int
    value: ParsedValue
    field: str  # field text as extracted, before trimming
    text: str  # full raw line


@dataclass(frozen=True, slots=True)
class GapEvent:
    """Two consecutive records whose delta satisfied the relation."""

    previous: Record
    current: Record
    delta: Delta


@dataclass
class ScanResult:
    """Counters for a completed scan run."""

    lines_read: int = 0
    records: int = 0
    comments: int = 0
    skipped: int = 0
    gaps: int = 0
    output_closed: bool = False
    scan_duration_ms: float = 0.0
