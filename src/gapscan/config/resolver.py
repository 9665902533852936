"""Resolve a layered GapScanConfig into immutable ScanSettings."""

from __future__ import annotations

from dataclasses import dataclass

from gapscan.config.loader import ConfigError
from gapscan.config.schema import GapScanConfig
from gapscan.output.formatter import OutputMode
from gapscan.values.models import Format, GapThreshold, Relation
from gapscan.values.threshold import parse_gap

TAB_ESCAPE = "\\t"


@dataclass(frozen=True)
class ScanSettings:
    """Everything the line engine needs for one run."""

    delimiter: str
    index: int
    format: Format
    relation: Relation
    threshold: GapThreshold
    comment: str
    allow_invalid: bool
    mode: OutputMode
    output_delimiter: str


def unescape_delimiter(value: str) -> str:
    """Map the two-character string ``\\t`` to a TAB character."""
    return "\t" if value == TAB_ESCAPE else value


def _enum(cls, value, what: str):
    try:
        return cls(value)
    except ValueError:
        choices = " | ".join(m.value for m in cls)
        raise ConfigError(f"invalid {what} '{value}' (expected {choices})") from None


def _string(value, what: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{what} must be a string, got {value!r}")
    return value


def resolve_settings(cfg: GapScanConfig) -> ScanSettings:
    """Validate *cfg* and parse the gap threshold.

    Raises ConfigError for inconsistent settings and GapSyntaxError for a
    malformed threshold.
    """
    delimiter = unescape_delimiter(_string(cfg.input.delimiter, "delimiter"))
    index = cfg.input.index
    if isinstance(index, bool) or not isinstance(index, int) or index < 1:
        raise ConfigError(f"field index must be a positive integer, got {index!r}")
    if delimiter == "" and index != 1:
        raise ConfigError("supplied index and delimiter are incompatible")

    fmt = _enum(Format, cfg.input.format, "format")
    relation = _enum(Relation, cfg.gap.relation, "relation")
    mode = _enum(OutputMode, cfg.output.mode, "output mode")

    threshold_text = cfg.gap.threshold
    if threshold_text is not None:
        threshold_text = _string(threshold_text, "gap threshold")
    threshold = parse_gap(threshold_text, fmt, allow_negative=bool(cfg.gap.allow_negative))

    output_delimiter = delimiter
    if cfg.output.delimiter:
        output_delimiter = unescape_delimiter(_string(cfg.output.delimiter, "output delimiter"))

    return ScanSettings(
        delimiter=delimiter,
        index=index,
        format=fmt,
        relation=relation,
        threshold=threshold,
        comment=_string(cfg.input.comment, "comment marker"),
        allow_invalid=bool(cfg.input.allow_invalid),
        mode=mode,
        output_delimiter=output_delimiter,
    )
