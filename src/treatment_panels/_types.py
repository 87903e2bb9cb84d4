"""Shared types and configuration for treatment-panels."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Hashable


@dataclass(frozen=True)
class PanelConfig:
    """Column name mapping for long-format panel data.

    Every panel builder takes this as its configuration argument. None of the
    column names has a default: leaving one unset is a configuration error
    raised when the builder is created.

    Parameters
    ----------
    unit_col : str
        Column name for the unit identifier (e.g., state, firm, individual).
    time_col : str
        Column name for the time period (integer periods or dates).
    outcome_col : str
        Column name for the numeric outcome variable.
    sort_in_place : bool
        If the input table is not sorted by (unit, time), sort the caller's
        DataFrame in place instead of a private copy.

    Example
    -------
    >>> config = PanelConfig(unit_col="state", time_col="year", outcome_col="cigsale")
    """

    unit_col: Hashable | None = None
    time_col: Hashable | None = None
    outcome_col: Hashable | None = None
    sort_in_place: bool = False


class UnitCount(Enum):
    """Number of distinct treated units."""

    SINGLE = "single"
    MULTIPLE = "multiple"


class Timing(Enum):
    """Onset timing across treated units. Only defined for multiple units."""

    SIMULTANEOUS = "simultaneous"
    STAGGERED = "staggered"


class Duration(Enum):
    """Whether treatment persists to the end of the panel or lapses."""

    CONTINUOUS = "continuous"
    DISCONTINUOUS = "discontinuous"


class TreatmentPattern(Enum):
    """Structural classification of a treatment assignment.

    Estimators dispatch on this value to decide whether they apply to a
    given panel. Each member is a ``(unit_count, timing, duration)`` triple;
    ``timing`` is None for single-unit patterns.
    """

    SINGLE_CONTINUOUS = (UnitCount.SINGLE, None, Duration.CONTINUOUS)
    SINGLE_DISCONTINUOUS = (UnitCount.SINGLE, None, Duration.DISCONTINUOUS)
    MULTIPLE_SIMULTANEOUS_CONTINUOUS = (
        UnitCount.MULTIPLE, Timing.SIMULTANEOUS, Duration.CONTINUOUS,
    )
    MULTIPLE_SIMULTANEOUS_DISCONTINUOUS = (
        UnitCount.MULTIPLE, Timing.SIMULTANEOUS, Duration.DISCONTINUOUS,
    )
    MULTIPLE_STAGGERED_CONTINUOUS = (
        UnitCount.MULTIPLE, Timing.STAGGERED, Duration.CONTINUOUS,
    )
    MULTIPLE_STAGGERED_DISCONTINUOUS = (
        UnitCount.MULTIPLE, Timing.STAGGERED, Duration.DISCONTINUOUS,
    )

    @property
    def unit_count(self) -> UnitCount:
        return self.value[0]

    @property
    def timing(self) -> Timing | None:
        return self.value[1]

    @property
    def duration(self) -> Duration:
        return self.value[2]

    @property
    def is_single(self) -> bool:
        return self.unit_count is UnitCount.SINGLE

    @property
    def is_continuous(self) -> bool:
        return self.duration is Duration.CONTINUOUS

    @classmethod
    def from_tags(
        cls,
        unit_count: UnitCount,
        timing: Timing | None,
        duration: Duration,
    ) -> TreatmentPattern:
        """Look up the pattern for a tag triple. Timing is ignored for single units."""
        if unit_count is UnitCount.SINGLE:
            timing = None
        elif timing is None:
            raise ValueError("timing is required for multiple-unit patterns")
        return cls((unit_count, timing, duration))
