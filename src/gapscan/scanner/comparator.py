"""Gap comparator — stateless delta evaluation between two records."""

from __future__ import annotations

from typing import Optional

from gapscan.scanner.models import GapEvent, Record
from gapscan.values.models import GapThreshold, Relation


def compare(
    previous: Record,
    current: Record,
    relation: Relation,
    threshold: GapThreshold,
) -> Optional[GapEvent]:
    """Return a GapEvent if ``current - previous <relation> threshold``.

    Negative deltas (out-of-order or repeated values) are ordinary data
    and are compared like any other.
    """
    delta = current.value - previous.value
    if relation.holds(delta, threshold.delta):
        return GapEvent(previous=previous, current=current, delta=delta)
    return None
