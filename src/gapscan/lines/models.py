"""Data models for input lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LineKind(str, Enum):
    COMMENT = "comment"
    EMPTY = "empty"
    CANDIDATE = "candidate"


@dataclass(frozen=True, slots=True)
class RawLine:
    """A single input line, terminator stripped."""

    line_no: int  # 1-based
    text: str
