"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

FormatName = Literal["uint", "int", "unix", "unix_ms", "rfc-3339"]
RelationName = Literal["gt", "ge", "lt", "le"]
ModeName = Literal["diff", "filter"]

FORMAT_NAMES: tuple[str, ...] = ("uint", "int", "unix", "unix_ms", "rfc-3339")
RELATION_NAMES: tuple[str, ...] = ("gt", "ge", "lt", "le")
MODE_NAMES: tuple[str, ...] = ("diff", "filter")


@dataclass
class InputConfig:
    delimiter: str = ","  # "" = whole line is field 1, "\t" = TAB
    index: int = 1  # 1-based
    format: FormatName = "uint"
    comment: str = "#"  # "" disables comment detection
    allow_invalid: bool = False  # skip empty / invalid lines instead of halting


@dataclass
class GapConfig:
    relation: RelationName = "gt"
    threshold: Optional[str] = None  # None = "1" (numeric) or "1h" (timestamps)
    allow_negative: bool = False  # accept negative time-based thresholds


@dataclass
class OutputConfig:
    mode: ModeName = "diff"
    delimiter: Optional[str] = None  # diff mode; None = same as input
    show_summary: bool = False


@dataclass
class GapScanConfig:
    version: str = "1.0"
    input: InputConfig = field(default_factory=InputConfig)
    gap: GapConfig = field(default_factory=GapConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
