"""Typed values — formats, value parser, gap thresholds."""

from gapscan.values.models import (
    Delta,
    Format,
    GapThreshold,
    ParsedValue,
    Relation,
    TimeUnit,
    ValueKind,
)
from gapscan.values.parser import ValueFormatError, parse_rfc3339, parse_value
from gapscan.values.threshold import GapSyntaxError, default_gap, parse_gap

__all__ = [
    "Delta",
    "Format",
    "GapSyntaxError",
    "GapThreshold",
    "ParsedValue",
    "Relation",
    "TimeUnit",
    "ValueFormatError",
    "ValueKind",
    "default_gap",
    "parse_gap",
    "parse_rfc3339",
    "parse_value",
]
