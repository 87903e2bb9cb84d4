"""Treatment pattern classification."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .._types import Duration, Timing, TreatmentPattern, UnitCount
from ..exceptions import ShapeError
from .normalize import TreatmentEntry

logger = logging.getLogger(__name__)


def _unit_onset(entries: Sequence[TreatmentEntry], unit):
    """First period in which ``unit`` enters treatment."""
    return min(e.onset for e in entries if e.unit == unit)


def classify_pattern(entries: Sequence[TreatmentEntry]) -> TreatmentPattern:
    """Classify normalized treatment entries into a ``TreatmentPattern``.

    Works on the entries alone, never on the treatment matrix.

    - Unit count: SINGLE if one distinct unit appears, MULTIPLE otherwise.
    - Duration: CONTINUOUS if no entry has an end, DISCONTINUOUS if all do.
    - Timing (multiple units only): SIMULTANEOUS if every treated unit first
      enters treatment in the same period, STAGGERED otherwise. Repeated
      entries or later windows of a unit do not change its onset.

    Raises
    ------
    ShapeError
        If ``entries`` is empty or mixes bounded and unbounded entries.
    """
    if not entries:
        raise ShapeError("Cannot classify an empty treatment specification")

    units = {e.unit for e in entries}
    unit_count = UnitCount.SINGLE if len(units) == 1 else UnitCount.MULTIPLE

    n_bounded = sum(e.is_bounded for e in entries)
    if n_bounded == 0:
        duration = Duration.CONTINUOUS
    elif n_bounded == len(entries):
        duration = Duration.DISCONTINUOUS
    else:
        raise ShapeError("Cannot classify a mix of bounded and unbounded treatment entries")

    onsets = {_unit_onset(entries, unit) for unit in units}
    timing = Timing.SIMULTANEOUS if len(onsets) == 1 else Timing.STAGGERED

    pattern = TreatmentPattern.from_tags(unit_count, timing, duration)
    logger.debug("Classified %s entries over %s units as %s", len(entries), len(units), pattern.name)
    return pattern
