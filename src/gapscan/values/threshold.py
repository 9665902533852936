"""Gap threshold parser — ``4``, ``-10``, ``12h``, ``30m``, ``2d``.

Parsed once at startup. A malformed threshold is a usage error and is
always fatal, independent of the allow-invalid setting.
"""

from __future__ import annotations

import re
from typing import Optional

from gapscan.values.models import Format, GapThreshold, TimeUnit

_NUMERIC_RE = re.compile(r"^[+-]?[0-9]+$")
_TIMED_RE = re.compile(r"^(?P<amount>[+-]?[0-9]+)(?P<unit>[dhms])$")

DEFAULT_NUMERIC_GAP = "1"
DEFAULT_TIMED_GAP = "1h"

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class GapSyntaxError(ValueError):
    """Raised when a gap threshold string is malformed."""


def default_gap(fmt: Format) -> str:
    return DEFAULT_TIMED_GAP if fmt.is_temporal else DEFAULT_NUMERIC_GAP


def _checked(amount: int, raw: str) -> int:
    if not _I64_MIN <= amount <= _I64_MAX:
        raise GapSyntaxError(f"invalid gap '{raw}': value out of 64-bit range")
    return amount


def parse_gap(
    text: Optional[str],
    fmt: Format,
    *,
    allow_negative: bool = False,
) -> GapThreshold:
    """Parse *text* into a GapThreshold compatible with *fmt*.

    ``None`` selects the per-format default (``1`` or ``1h``). Negative
    time-based gaps are rejected unless *allow_negative* is set; negative
    numeric gaps are always accepted.
    """
    raw = default_gap(fmt) if text is None else text.strip()

    if not fmt.is_temporal:
        if not _NUMERIC_RE.match(raw):
            raise GapSyntaxError(f"invalid numeric gap '{raw}': expected a signed integer")
        return GapThreshold(_checked(int(raw), raw))

    m = _TIMED_RE.match(raw)
    if m is None:
        raise GapSyntaxError(
            f"invalid {fmt.value} gap '{raw}': expected an integer followed by one of d, h, m, s"
        )
    amount = _checked(int(m.group("amount")), raw)
    if amount < 0 and not allow_negative:
        raise GapSyntaxError(f"invalid {fmt.value} gap '{raw}': negative time gaps are not allowed")

    threshold = GapThreshold(amount, TimeUnit(m.group("unit")))
    try:
        _ = threshold.delta
    except OverflowError as exc:
        raise GapSyntaxError(f"invalid {fmt.value} gap '{raw}': duration too large") from exc
    return threshold
