"""Field value parser — raw field text to a typed ParsedValue.

Surrounding whitespace and double quotes are trimmed before parsing, so
``"1936"`` and `` 1936 `` both parse as the number 1936.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from gapscan.values.models import Format, ParsedValue, ValueKind

U64_MAX = 2**64 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_UINT_RE = re.compile(r"^[0-9]+$")
_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_RFC3339_RE = re.compile(
    r"^(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"[Tt _]"  # '_' is a non-standard separator, accepted as well
    r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]+))?"
    r"(?P<offset>[Zz]|[+-][0-9]{2}:[0-9]{2})$"
)


class ValueFormatError(ValueError):
    """Raised when a field cannot be parsed in the configured format."""


def _clean(text: str) -> str:
    return text.strip().strip('"')


def _parse_int(text: str, fmt: Format) -> int:
    pattern = _UINT_RE if fmt is Format.UINT else _INT_RE
    if not pattern.match(text):
        raise ValueFormatError("invalid digit found in string" if text else "empty value")
    number = int(text)
    if fmt is Format.UINT:
        if number > U64_MAX:
            raise ValueFormatError("number too large to fit in 64-bit unsigned integer")
    elif number > I64_MAX:
        raise ValueFormatError("number too large to fit in 64-bit signed integer")
    elif number < I64_MIN:
        raise ValueFormatError("number too small to fit in 64-bit signed integer")
    return number


def _from_epoch(count: int, *, millis: bool) -> datetime:
    try:
        if millis:
            return EPOCH + timedelta(milliseconds=count)
        return EPOCH + timedelta(seconds=count)
    except OverflowError as exc:
        raise ValueFormatError("invalid timestamp") from exc


def _parse_offset(raw: str) -> timezone:
    if raw in ("Z", "z"):
        return timezone.utc
    sign = -1 if raw[0] == "-" else 1
    hours, minutes = int(raw[1:3]), int(raw[4:6])
    if hours > 23 or minutes > 59:
        raise ValueFormatError(f"invalid UTC offset '{raw}'")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def parse_rfc3339(text: str) -> datetime:
    """Parse an RFC 3339 timestamp and normalise it to UTC."""
    m = _RFC3339_RE.match(text)
    if m is None:
        raise ValueFormatError("invalid timestamp syntax")

    fraction = m.group("fraction") or ""
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0
    tz = _parse_offset(m.group("offset"))
    second = int(m.group("second"))
    # A leap second (:60) is read as the first instant of the next minute.
    leap = second == 60
    try:
        stamp = datetime(
            int(m.group("year")),
            int(m.group("month")),
            int(m.group("day")),
            int(m.group("hour")),
            int(m.group("minute")),
            59 if leap else second,
            microsecond,
            tzinfo=tz,
        )
        if leap:
            stamp += timedelta(seconds=1)
        return stamp.astimezone(timezone.utc)
    except (ValueError, OverflowError) as exc:
        raise ValueFormatError(f"invalid timestamp: {exc}") from exc


def parse_value(text: str, fmt: Format) -> ParsedValue:
    """Parse *text* according to *fmt*. Raises ValueFormatError on failure."""
    cleaned = _clean(text)

    if fmt is Format.UINT:
        return ParsedValue(ValueKind.UNSIGNED, _parse_int(cleaned, fmt))
    if fmt is Format.INT:
        return ParsedValue(ValueKind.SIGNED, _parse_int(cleaned, fmt))
    if fmt is Format.UNIX:
        return ParsedValue(ValueKind.INSTANT, _from_epoch(_parse_int(cleaned, Format.INT), millis=False))
    if fmt is Format.UNIX_MS:
        return ParsedValue(ValueKind.INSTANT, _from_epoch(_parse_int(cleaned, Format.INT), millis=True))
    return ParsedValue(ValueKind.INSTANT, parse_rfc3339(cleaned))
