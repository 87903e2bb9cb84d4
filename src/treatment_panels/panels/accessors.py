"""Read-only queries over a ``BalancedPanel``.

Everything here is recomputed from ``W`` on each call. Functions dispatch on
``panel.pattern``:

- Single-unit panels return scalars (``int`` or a single label).
- Multiple-unit panels return one value per treated row, in the order of
  ``treated_ids(panel)``.
- Continuous panels measure from the first treated column; discontinuous
  panels work with the onsets of each treatment window.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from .balanced import BalancedPanel


class DecomposedOutcomes(NamedTuple):
    """Outcome matrix split into treated/control x pre/post blocks."""

    y10: np.ndarray
    y11: np.ndarray
    y00: np.ndarray
    y01: np.ndarray


def _window_onsets(row: np.ndarray) -> np.ndarray:
    """Column indices where ``row`` switches from False to True."""
    previous = np.concatenate(([False], row[:-1]))
    return np.flatnonzero(row & ~previous)


def _window_ends(row: np.ndarray) -> np.ndarray:
    """Column indices of the last True cell of each window in ``row``."""
    following = np.concatenate((row[1:], [False]))
    return np.flatnonzero(row & ~following)


def _treated_rows(panel: BalancedPanel) -> np.ndarray:
    return np.flatnonzero(panel.W.any(axis=1))


def _control_rows(panel: BalancedPanel) -> np.ndarray:
    return np.setdiff1d(np.arange(panel.N), _treated_rows(panel))


def treated_ids(panel: BalancedPanel):
    """Row indices of treated units.

    Returns an ``int`` for single-unit panels, so that ``panel.Y[i, :]`` is
    the treated unit's outcome path, and an array of row indices otherwise.
    """
    rows = _treated_rows(panel)
    if panel.pattern.is_single:
        if len(rows) != 1:
            raise ValueError(
                f"Single-unit panel has {len(rows)} rows with treated cells; expected 1"
            )
        return int(rows[0])
    return rows


def treated_labels(panel: BalancedPanel):
    """Unit labels of treated units, as given in the unit column."""
    return panel.units[treated_ids(panel)]


def first_treated_period_ids(panel: BalancedPanel):
    """Column index of the first treatment period.

    Continuous panels return the first treated column of each treated row.
    Discontinuous panels return the onset column of every treatment window,
    in time order.

    For single-unit panels this is an ``int`` (continuous) or a list of
    ints (discontinuous); for multiple-unit panels, one such value per
    treated row.
    """
    def _first(row):
        if panel.pattern.is_continuous:
            return int(np.argmax(row))
        return [int(i) for i in _window_onsets(row)]

    if panel.pattern.is_single:
        return _first(panel.W[treated_ids(panel)])

    firsts = [_first(panel.W[i]) for i in treated_ids(panel)]
    if panel.pattern.is_continuous:
        return np.array(firsts, dtype=int)
    return firsts


def first_treated_period_labels(panel: BalancedPanel):
    """Period labels matching ``first_treated_period_ids``."""
    ids = first_treated_period_ids(panel)
    if panel.pattern.is_continuous:
        return panel.times[ids]
    if panel.pattern.is_single:
        return list(panel.times[ids])
    return [list(panel.times[i]) for i in ids]


def _length_T0_row(panel: BalancedPanel, row: np.ndarray) -> int:
    if panel.pattern.is_continuous:
        return int(np.argmax(row))
    return int(_window_onsets(row)[0])


def _length_T1_row(panel: BalancedPanel, row: np.ndarray) -> int:
    if panel.pattern.is_continuous:
        return panel.T - int(np.argmax(row))
    return int(_window_ends(row)[-1] - _window_onsets(row)[-1] + 1)


def length_T0(panel: BalancedPanel):
    """Number of periods strictly before the first treatment onset."""
    if panel.pattern.is_single:
        return _length_T0_row(panel, panel.W[treated_ids(panel)])
    return np.array([_length_T0_row(panel, panel.W[i]) for i in treated_ids(panel)], dtype=int)


def length_T1(panel: BalancedPanel):
    """Number of treatment periods.

    Continuous: periods from the first treated column to the last column.
    Discontinuous: length of the last treatment window, from its onset to its
    end inclusive. Periods after a window closes count toward neither T0 nor
    T1, so ``T0 + T1`` can be less than ``T``.
    """
    if panel.pattern.is_single:
        return _length_T1_row(panel, panel.W[treated_ids(panel)])
    return np.array([_length_T1_row(panel, panel.W[i]) for i in treated_ids(panel)], dtype=int)


def _require_single_continuous(panel: BalancedPanel, name: str) -> None:
    if not (panel.pattern.is_single and panel.pattern.is_continuous):
        raise NotImplementedError(
            f"{name} is only defined for single-unit continuous treatment, "
            f"got {panel.pattern.name}"
        )


def get_y10(panel: BalancedPanel) -> np.ndarray:
    """Pre-treatment outcomes of the treated unit, shape (T0,)."""
    _require_single_continuous(panel, "get_y10")
    return panel.Y[treated_ids(panel), :length_T0(panel)]


def get_y11(panel: BalancedPanel) -> np.ndarray:
    """Treatment-period outcomes of the treated unit, shape (T1,)."""
    _require_single_continuous(panel, "get_y11")
    return panel.Y[treated_ids(panel), length_T0(panel):]


def get_y00(panel: BalancedPanel) -> np.ndarray:
    """Pre-treatment outcomes of control units, shape (N - 1, T0)."""
    _require_single_continuous(panel, "get_y00")
    return panel.Y[_control_rows(panel), :length_T0(panel)]


def get_y01(panel: BalancedPanel) -> np.ndarray:
    """Treatment-period outcomes of control units, shape (N - 1, T1)."""
    _require_single_continuous(panel, "get_y01")
    return panel.Y[_control_rows(panel), length_T0(panel):]


def decompose_y(panel: BalancedPanel) -> DecomposedOutcomes:
    """Split ``Y`` into treated/control x pre/post blocks.

    Only defined for single-unit continuous panels; multiple-unit panels
    would need a per-row boundary and raise ``NotImplementedError``.

    Returns
    -------
    DecomposedOutcomes
        ``(y10, y11, y00, y01)``: treated pre, treated post, control pre,
        control post.
    """
    _require_single_continuous(panel, "decompose_y")
    row = treated_ids(panel)
    t0 = length_T0(panel)
    control = _control_rows(panel)
    return DecomposedOutcomes(
        y10=panel.Y[row, :t0],
        y11=panel.Y[row, t0:],
        y00=panel.Y[control, :t0],
        y01=panel.Y[control, t0:],
    )
