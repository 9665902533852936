"""Input lines — models, classification, field extraction, line source."""

from gapscan.lines.classifier import classify
from gapscan.lines.fields import EMPTY_FIELD, INDEX_OUT_OF_RANGE, FieldError, extract_field
from gapscan.lines.models import LineKind, RawLine
from gapscan.lines.source import STDIN_PATH, SourceError, iter_lines, open_source

__all__ = [
    "EMPTY_FIELD",
    "INDEX_OUT_OF_RANGE",
    "STDIN_PATH",
    "FieldError",
    "LineKind",
    "RawLine",
    "SourceError",
    "classify",
    "extract_field",
    "iter_lines",
    "open_source",
]
