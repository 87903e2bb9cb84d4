"""Balanced Panel Builder.

Pivots a long unit-time table into an N x T outcome matrix ``Y`` and builds
the matching boolean treatment matrix ``W`` from the treatment
specification. Every unit must be observed exactly once in every period.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np
import pandas as pd

from .._types import PanelConfig, TreatmentPattern
from ..exceptions import DuplicateObservationError, MissingObservationError, SchemaError
from ..treatment import classify_pattern
from ._base import BasePanelBuilder

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class BalancedPanel:
    """Immutable unit x time container of outcomes and treatment flags.

    Rows of ``W`` and ``Y`` follow ``units`` and columns follow ``times``,
    both sorted ascending. ``W`` and ``Y`` are copied on construction and
    made read-only, so the caller's arrays are left untouched. A panel is never
    updated, build a new one if the underlying data changes.

    Attributes
    ----------
    W : np.ndarray
        (N, T) boolean treatment assignment matrix.
    Y : np.ndarray
        (N, T) float64 outcome matrix.
    units : pd.Index
        Row labels.
    times : pd.Index
        Column labels.
    pattern : TreatmentPattern
        Classification of the treatment assignment.
    config : PanelConfig
        Column names the panel was built from.
    """

    W: np.ndarray
    Y: np.ndarray
    units: pd.Index
    times: pd.Index
    pattern: TreatmentPattern
    config: PanelConfig = field(default_factory=PanelConfig)

    def __post_init__(self):
        for name, dtype in (("W", bool), ("Y", np.float64)):
            array = np.array(getattr(self, name), dtype=dtype)
            array.setflags(write=False)
            object.__setattr__(self, name, array)
        if self.W.shape != self.Y.shape or self.W.shape != (len(self.units), len(self.times)):
            raise ValueError(
                f"W {self.W.shape} and Y {self.Y.shape} must both have shape "
                f"({len(self.units)}, {len(self.times)})"
            )

    @property
    def N(self) -> int:
        return len(self.units)

    @property
    def T(self) -> int:
        return len(self.times)

    def summary(self) -> pd.DataFrame:
        """Return panel summary statistics.

        Returns
        -------
        pd.DataFrame
            One-row DataFrame with n_units, n_periods, n_treated, n_control,
            time_min, time_max and pattern.
        """
        n_treated = int(self.W.any(axis=1).sum())
        stats = {
            "n_units": self.N,
            "n_periods": self.T,
            "n_treated": n_treated,
            "n_control": self.N - n_treated,
            "time_min": self.times[0],
            "time_max": self.times[-1],
            "pattern": self.pattern.name.lower(),
        }
        return pd.DataFrame([stats])

    def to_frame(self) -> pd.DataFrame:
        """Long-format view: one row per (unit, time) with outcome and ``treated``."""
        c = self.config
        index = pd.MultiIndex.from_product([self.units, self.times])
        df = pd.DataFrame(
            {
                c.outcome_col: self.Y.ravel(),
                "treated": self.W.ravel(),
            },
            index=index,
        )
        df.index.names = [c.unit_col, c.time_col]
        return df.reset_index()


class BalancedPanelBuilder(BasePanelBuilder):
    """Build a ``BalancedPanel`` from long-format data.

    Parameters
    ----------
    df : pd.DataFrame
        Long-format data with ``unit_col``, ``time_col`` and ``outcome_col``.
        If it is not sorted by (unit, time) it is sorted before pivoting; in
        place when ``config.sort_in_place`` is set, on a copy otherwise.
    treatment : tuple, list or mapping
        Treatment specification, see ``normalize_treatment``.
    config : PanelConfig
        Column name mapping.

    Example
    -------
    >>> config = PanelConfig(unit_col="state", time_col="year", outcome_col="cigsale")
    >>> panel = BalancedPanelBuilder(df, ("California", 1989), config=config).build()
    """

    def build(self) -> BalancedPanel:
        """Construct the treatment and outcome matrices and classify the pattern."""
        df = self._sorted_frame()
        W = self.construct_W()
        Y = self.construct_Y(df)
        pattern = classify_pattern(self.resolved_entries())

        panel = BalancedPanel(
            W=W,
            Y=Y,
            units=self.domain.units,
            times=self.domain.times,
            pattern=pattern,
            config=self.config,
        )
        self._log_summary(panel)
        return panel

    def construct_W(self) -> np.ndarray:
        """Boolean (N, T) treatment matrix from the validated entries.

        Unbounded entries switch a row on from the onset to the last period;
        bounded entries only cover [onset, end]. Entries for the same unit
        accumulate.
        """
        units, times = self.domain
        W = np.zeros((len(units), len(times)), dtype=bool)
        for row, start, stop in self._positions:
            if stop is None:
                W[row, start:] = True
            else:
                W[row, start:stop + 1] = True
        return W

    def construct_Y(self, df: pd.DataFrame) -> np.ndarray:
        """Float64 (N, T) outcome matrix aligned with ``units`` x ``times``.

        Raises
        ------
        DuplicateObservationError
            If a (unit, time) pair appears more than once.
        MissingObservationError
            If a (unit, time) pair is absent or its outcome is null.
        SchemaError
            If the outcome column is not numeric.
        """
        c = self.config
        units, times = self.domain
        keys = [c.unit_col, c.time_col]

        if not pd.api.types.is_numeric_dtype(df[c.outcome_col]):
            raise SchemaError(
                f"Outcome column {c.outcome_col!r} must be numeric, "
                f"got dtype {df[c.outcome_col].dtype}",
                column=c.outcome_col,
            )

        counts = df.groupby(keys, sort=False).size()
        counts = counts.reindex(pd.MultiIndex.from_product([units, times], names=keys), fill_value=0)

        duplicated = counts[counts > 1]
        if len(duplicated):
            unit, period = duplicated.index[0]
            raise DuplicateObservationError(
                f"{duplicated.iloc[0]} outcomes present in the data for unit {unit!r} "
                f"in period {period!r} ({len(duplicated):,} duplicated cells)",
                unit=unit,
                period=period,
            )

        missing = counts[counts == 0]
        if len(missing):
            unit, period = missing.index[0]
            raise MissingObservationError(
                f"No outcome present in the data for unit {unit!r} in period "
                f"{period!r} ({len(missing):,} missing cells); the panel is not balanced",
                unit=unit,
                period=period,
            )

        wide = df.pivot(index=c.unit_col, columns=c.time_col, values=c.outcome_col)
        Y = wide.reindex(index=units, columns=times).to_numpy(dtype=np.float64)

        null_cells = np.argwhere(np.isnan(Y))
        if len(null_cells):
            row, col = null_cells[0]
            raise MissingObservationError(
                f"Outcome for unit {units[row]!r} in period {times[col]!r} is missing "
                f"({len(null_cells):,} missing outcomes)",
                unit=units[row],
                period=times[col],
            )

        return Y

    def _sorted_frame(self) -> pd.DataFrame:
        """Return the table sorted by (unit, time), honouring ``sort_in_place``."""
        c = self.config
        keys = [c.unit_col, c.time_col]
        if pd.MultiIndex.from_frame(self._df[keys]).is_monotonic_increasing:
            return self._df

        if c.sort_in_place:
            logger.debug("Sorting input by %s in place", keys)
            self._df.sort_values(keys, inplace=True)
            return self._df

        logger.debug("Sorting a copy of the input by %s", keys)
        return self._df.sort_values(keys)

    def _log_summary(self, panel: BalancedPanel) -> None:
        logger.info(
            "Balanced panel built: %s units x %s periods, pattern %s",
            f"{panel.N:,}",
            f"{panel.T:,}",
            panel.pattern.name,
        )
        logger.info(
            "  %s treated units, %s treated cells",
            f"{int(panel.W.any(axis=1).sum()):,}",
            f"{int(panel.W.sum()):,}",
        )


def build_panel(
    df: pd.DataFrame,
    treatment: Any,
    *,
    unit_col=None,
    time_col=None,
    outcome_col=None,
    sort_in_place: bool = False,
) -> BalancedPanel:
    """Build a validated ``BalancedPanel`` from long-format data.

    Parameters
    ----------
    df : pd.DataFrame
        Long-format data with one row per (unit, time) observation.
    treatment : tuple, list or mapping
        ``(unit, period)``, ``(unit, (onset, end))``, a list of such pairs,
        or a mapping of unit to period or window.
    unit_col, time_col, outcome_col : str
        Column names. All required.
    sort_in_place : bool
        Sort ``df`` in place if it is not already sorted by (unit, time).

    Returns
    -------
    BalancedPanel

    Example
    -------
    >>> df = pd.DataFrame({"id": ["a", "a", "b", "b"], "period": [1, 2, 1, 2],
    ...                    "value": [1.0, 2.0, 3.0, 4.0]})
    >>> panel = build_panel(df, ("a", 2), unit_col="id", time_col="period", outcome_col="value")
    >>> panel.W.tolist()
    [[False, True], [False, False]]
    """
    config = PanelConfig(
        unit_col=unit_col,
        time_col=time_col,
        outcome_col=outcome_col,
        sort_in_place=sort_in_place,
    )
    return BalancedPanelBuilder(df, treatment, config=config).build()
