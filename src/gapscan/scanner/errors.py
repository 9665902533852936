"""Per-line failure taxonomy, diagnostics, and exit statuses."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

EMPTY_LINE = "EmptyLine"
FORMAT_ERROR = "FormatError"

ELLIPSIS = "…"
MAX_FIELD_DISPLAY = 32


class ExitStatus(IntEnum):
    OK = 0
    DATA_ERROR = 1  # fatal halt on an input line
    SETUP_ERROR = 2  # configuration, gap syntax, unreadable input, I/O failure


def abbreviate(value: str, limit: int = MAX_FIELD_DISPLAY) -> str:
    """Shorten *value* to at most *limit* characters.

    Example: a 40-char field becomes ``first-20-chars…last-11-chars``.
    """
    if len(value) <= limit:
        return value
    room = max(limit - 1, 0)
    head = room * 2 // 3
    tail = room - head
    return f"{value[:head]}{ELLIPSIS}{value[len(value) - tail:]}"


class LineError(Exception):
    """Fatal per-line data error; halts the scan unless invalid lines are allowed."""

    def __init__(
        self,
        line_no: int,
        kind: str,
        detail: str,
        field: Optional[str] = None,
    ) -> None:
        self.line_no = line_no
        self.kind = kind
        self.detail = detail
        self.field = field
        super().__init__(self.diagnostic())

    def diagnostic(self) -> str:
        """Single-line, human-readable description of the failure."""
        prefix = f"line {self.line_no}: {self.kind}:"
        if self.field is None:
            return f"{prefix} {self.detail}"
        return f"{prefix} field '{abbreviate(self.field)}' {self.detail}"
