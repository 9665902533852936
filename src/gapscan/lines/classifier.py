"""Line classifier — comment, empty, or candidate data."""

from __future__ import annotations

from gapscan.lines.models import LineKind


def classify(text: str, comment: str) -> LineKind:
    """Classify a terminator-stripped line.

    The comment check is an exact prefix match; leading whitespace is not
    skipped. An empty *comment* disables comment detection.
    """
    if comment and text.startswith(comment):
        return LineKind.COMMENT
    if not text:
        return LineKind.EMPTY
    return LineKind.CANDIDATE
