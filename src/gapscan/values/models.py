"""Typed value models — formats, parsed values, relations, thresholds."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Callable, Optional, Union

Delta = Union[int, timedelta]


class Format(str, Enum):
    UINT = "uint"
    INT = "int"
    UNIX = "unix"
    UNIX_MS = "unix_ms"
    RFC3339 = "rfc-3339"

    @property
    def is_temporal(self) -> bool:
        """True for formats whose values are points in time."""
        return self in (Format.UNIX, Format.UNIX_MS, Format.RFC3339)

    @property
    def kind(self) -> "ValueKind":
        if self is Format.UINT:
            return ValueKind.UNSIGNED
        if self is Format.INT:
            return ValueKind.SIGNED
        return ValueKind.INSTANT


class ValueKind(str, Enum):
    UNSIGNED = "unsigned"
    SIGNED = "signed"
    INSTANT = "instant"


@dataclass(frozen=True, slots=True)
class ParsedValue:
    """A typed field value. Exactly one kind is active for a whole run.

    ``value`` is an ``int`` for the numeric kinds and a UTC-normalised,
    timezone-aware ``datetime`` for ``INSTANT``.
    """

    kind: ValueKind
    value: Union[int, datetime]

    def __sub__(self, other: "ParsedValue") -> Delta:
        if self.kind is not other.kind:
            raise TypeError(
                f"cannot subtract {other.kind.value} from {self.kind.value}"
            )
        return self.value - other.value  # type: ignore[operator]


_RELATION_OPS: dict[str, Callable[[Delta, Delta], bool]] = {
    "gt": operator.gt,
    "ge": operator.ge,
    "lt": operator.lt,
    "le": operator.le,
}


class Relation(str, Enum):
    GT = "gt"
    GE = "ge"
    LT = "lt"
    LE = "le"

    @property
    def symbol(self) -> str:
        return {"gt": ">", "ge": ">=", "lt": "<", "le": "<="}[self.value]

    def holds(self, delta: Delta, threshold: Delta) -> bool:
        """Evaluate ``delta <relation> threshold``."""
        return _RELATION_OPS[self.value](delta, threshold)


class TimeUnit(str, Enum):
    DAYS = "d"
    HOURS = "h"
    MINUTES = "m"
    SECONDS = "s"

    @property
    def seconds(self) -> int:
        return {"d": 86400, "h": 3600, "m": 60, "s": 1}[self.value]


@dataclass(frozen=True)
class GapThreshold:
    """Signed delta compared against consecutive value differences.

    Numeric formats carry a plain ``amount``; timestamp formats carry an
    ``amount`` of ``unit``.
    """

    amount: int
    unit: Optional[TimeUnit] = None

    @property
    def delta(self) -> Delta:
        if self.unit is None:
            return self.amount
        return timedelta(seconds=self.amount * self.unit.seconds)

    def __str__(self) -> str:
        if self.unit is None:
            return str(self.amount)
        return f"{self.amount}{self.unit.value}"
