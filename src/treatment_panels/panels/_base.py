"""Base class for treatment panel builders."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, NamedTuple

import numpy as np
import pandas as pd

from .._types import PanelConfig
from ..exceptions import (
    ConfigurationError,
    SchemaError,
    ShapeError,
    UnknownPeriodError,
    UnknownUnitError,
)
from ..treatment import TreatmentEntry, normalize_treatment
from ..treatment.normalize import is_period

logger = logging.getLogger(__name__)


class PanelDomain(NamedTuple):
    """Sorted, duplicate-free unit and time identifiers of a table."""

    units: pd.Index
    times: pd.Index


def extract_domain(df: pd.DataFrame, unit_col, time_col) -> PanelDomain:
    """Return the sorted unique units and periods present in ``df``.

    Raises
    ------
    SchemaError
        If either column is absent, holds null values, or mixes types that
        cannot be ordered (e.g. integers and dates).
    """
    domain = []
    for col in (unit_col, time_col):
        if col not in df.columns:
            raise SchemaError(f"Column {col!r} is not present in the data", column=col)
        values = df[col]
        if values.isna().any():
            raise SchemaError(f"Column {col!r} contains missing values", column=col)
        try:
            index = pd.Index(values.unique(), name=col).sort_values()
        except TypeError as err:
            raise SchemaError(
                f"Column {col!r} mixes values that cannot be ordered", column=col
            ) from err
        domain.append(index)
    return PanelDomain(*domain)


def locate_unit(units: pd.Index, unit, column=None) -> int:
    """Row position of ``unit`` in ``units``."""
    if unit not in units:
        raise UnknownUnitError(unit, column=column)
    return units.get_loc(unit)


def _as_timestamp(value):
    """``pd.Timestamp`` for date-like values, None for anything else."""
    if isinstance(value, (int, np.integer)) or not is_period(value):
        return None
    return pd.Timestamp(value)


def locate_period(times: pd.Index, period, column=None) -> int:
    """Column position of ``period`` in ``times``.

    Date-like periods are compared as ``pd.Timestamp`` against datetime
    axes and against object axes holding ``datetime.date`` values;
    integers never match a date.
    """
    key = _as_timestamp(period)
    if isinstance(times, pd.DatetimeIndex):
        if key is not None and key in times:
            return times.get_loc(key)
    elif key is None:
        if period in times:
            return times.get_loc(period)
    else:
        for pos, label in enumerate(times):
            if _as_timestamp(label) == key:
                return pos
    raise UnknownPeriodError(period, column=column)


class BasePanelBuilder(ABC):
    """Abstract base for treatment panel construction.

    Validates the configuration, the table schema and every treatment entry
    up front, so subclasses only implement ``build()`` on known-good input.

    Parameters
    ----------
    df : pd.DataFrame
        Long-format data with at least ``unit_col``, ``time_col`` and
        ``outcome_col``.
    treatment : tuple, list or mapping
        Treatment specification, see ``normalize_treatment``.
    config : PanelConfig
        Column name mapping. All three column names are required.
    """

    def __init__(self, df: pd.DataFrame, treatment: Any, config: PanelConfig | None = None):
        self.config = config or PanelConfig()
        self._df = df
        self._check_config()
        self.entries = normalize_treatment(treatment)
        self._check_columns()
        self.domain = extract_domain(df, self.config.unit_col, self.config.time_col)
        self._positions = self._validate_entries()

        logger.info(
            "%s initialized: %s observations, %s units, %s periods",
            type(self).__name__,
            f"{len(df):,}",
            f"{len(self.domain.units):,}",
            f"{len(self.domain.times):,}",
        )

    def _check_config(self) -> None:
        """Check every required argument was supplied."""
        c = self.config
        required = {
            "unit_col": "the column holding the identifier of your units of observation",
            "time_col": "the column holding the time dimension",
            "outcome_col": "the column holding the outcome variable of interest",
        }
        for name, description in required.items():
            value = getattr(c, name)
            if value is None or value == "":
                raise ConfigurationError(f"Please specify {name}, {description}.")

    def _check_columns(self) -> None:
        """Check required columns exist in the table."""
        c = self.config
        for col in (c.unit_col, c.time_col, c.outcome_col):
            if col not in self._df.columns:
                raise SchemaError(
                    f"Column {col!r} is not present in the data. "
                    f"Available: {sorted(map(str, self._df.columns))}",
                    column=col,
                )

    def _validate_entries(self) -> list[tuple[int, int, int | None]]:
        """Resolve each entry to (row, onset column, end column) positions."""
        c = self.config
        units, times = self.domain
        positions = []
        for entry in self.entries:
            row = locate_unit(units, entry.unit, column=c.unit_col)
            start = locate_period(times, entry.onset, column=c.time_col)
            stop = None
            if entry.is_bounded:
                stop = locate_period(times, entry.end, column=c.time_col)
                if stop < start:
                    raise ShapeError(
                        f"Treatment window for unit {entry.unit!r} ends ({entry.end!r}) "
                        f"before it starts ({entry.onset!r})"
                    )
            positions.append((row, start, stop))
        return positions

    def resolved_entries(self) -> tuple[TreatmentEntry, ...]:
        """Entries with periods replaced by the matching axis labels."""
        units, times = self.domain
        return tuple(
            TreatmentEntry(
                units[row],
                times[start],
                None if stop is None else times[stop],
            )
            for row, start, stop in self._positions
        )

    @abstractmethod
    def build(self):
        """Construct the panel."""
        ...
