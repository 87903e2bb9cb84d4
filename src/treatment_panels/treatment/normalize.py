"""Normalization of polymorphic treatment specifications.

A treatment can be given in any of these shapes::

    ("CA", 1989)                           # one unit, continuous from 1989
    ("CA", (1989, 1995))                   # one unit, treated 1989 through 1995
    ("CA", [(1989, 1991), (1994, 1995)])   # one unit, several windows
    [("CA", 1989), ("NV", 1990)]           # several pairs
    {"CA": 1989, "NV": 1990}               # mapping of unit -> period/window

``normalize_treatment`` folds all of them into one tuple of ``TreatmentEntry``.
"""

from __future__ import annotations

import datetime
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Hashable

import numpy as np

from ..exceptions import ConfigurationError, ShapeError


@dataclass(frozen=True)
class TreatmentEntry:
    """One normalized treatment assignment.

    Parameters
    ----------
    unit : hashable
        Identifier of the treated unit.
    onset : int or date-like
        First treated period.
    end : int or date-like, optional
        Last treated period. None means treatment persists to the end of
        the panel.
    """

    unit: Hashable
    onset: Any
    end: Any = None

    @property
    def is_bounded(self) -> bool:
        return self.end is not None


def is_period(value: Any) -> bool:
    """True for values usable as a time identifier: integers or dates."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer, datetime.date, np.datetime64))


def _is_window(value: Any) -> bool:
    return (
        isinstance(value, tuple)
        and len(value) == 2
        and is_period(value[0])
        and is_period(value[1])
    )


def _is_pair(value: Any) -> bool:
    return (
        isinstance(value, tuple)
        and len(value) == 2
        and not isinstance(value[0], (tuple, list, Mapping))
    )


def _entries_from_pair(pair: tuple) -> list[TreatmentEntry]:
    unit, period = pair
    if is_period(period):
        return [TreatmentEntry(unit, period)]
    if _is_window(period):
        return [TreatmentEntry(unit, period[0], period[1])]
    if isinstance(period, list) and period and all(_is_window(w) for w in period):
        return [TreatmentEntry(unit, start, end) for start, end in period]
    raise ShapeError(
        f"Unrecognised treatment period {period!r} for unit {unit!r}. Expected "
        "an integer or date, an (onset, end) tuple, or a list of such tuples."
    )


def normalize_treatment(treatment: Any) -> tuple[TreatmentEntry, ...]:
    """Fold any supported treatment shape into an ordered tuple of entries.

    Parameters
    ----------
    treatment : tuple, list or mapping
        A single ``(unit, period)`` or ``(unit, (onset, end))`` pair, an
        ordered collection of such pairs, or a mapping of unit to period.

    Returns
    -------
    tuple[TreatmentEntry, ...]
        At least one entry, in input order.

    Raises
    ------
    ConfigurationError
        If ``treatment`` is None.
    ShapeError
        If the input matches no supported shape, is empty, or mixes bounded
        and unbounded entries.
    """
    if treatment is None:
        raise ConfigurationError(
            "Please specify the treatment assignment, e.g. (unit, period) or "
            "a list of such pairs."
        )

    if _is_pair(treatment):
        entries = _entries_from_pair(treatment)
    else:
        if isinstance(treatment, Mapping):
            pairs = list(treatment.items())
        elif isinstance(treatment, (list, tuple)):
            pairs = list(treatment)
        else:
            raise ShapeError(
                f"Unsupported treatment specification of type {type(treatment).__name__}"
            )

        if not pairs:
            raise ShapeError("Treatment specification must contain at least one entry")

        entries = []
        for pair in pairs:
            if not _is_pair(pair):
                raise ShapeError(f"Treatment entry {pair!r} is not a (unit, period) pair")
            entries.extend(_entries_from_pair(pair))

    bounded = {e.is_bounded for e in entries}
    if len(bounded) > 1:
        raise ShapeError(
            "Treatment specification mixes entries with and without an end "
            "period; give every entry an (onset, end) window or none of them."
        )

    return tuple(entries)
