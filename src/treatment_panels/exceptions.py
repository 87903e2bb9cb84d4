"""Exception hierarchy for treatment-panels.

All errors are raised eagerly while a panel is being built; a panel is never
returned in a partially valid state. Every class derives from
``TreatmentPanelError`` (itself a ``ValueError``) so callers can catch the
whole family at once::

    try:
        panel = build_panel(df, ("CA", 1989), unit_col="state", ...)
    except TreatmentPanelError as e:
        ...
"""

from __future__ import annotations


class TreatmentPanelError(ValueError):
    """Base class for all treatment-panels errors."""


class ConfigurationError(TreatmentPanelError):
    """A required column name or the treatment specification was not supplied."""


class SchemaError(TreatmentPanelError):
    """A named column is absent from the table or has unusable contents.

    Attributes
    ----------
    column : hashable
        The offending column name.
    """

    def __init__(self, message: str, column=None):
        super().__init__(message)
        self.column = column


class ShapeError(TreatmentPanelError):
    """The treatment specification does not match any supported shape.

    Raised for unrecognised input, empty collections, collections mixing
    bounded and unbounded entries, and windows ending before they start.
    """


class ReferentialIntegrityError(TreatmentPanelError):
    """A treatment entry references a value absent from the table's domain."""


class UnknownUnitError(ReferentialIntegrityError):
    """A treatment entry names a unit that does not appear in the unit column."""

    def __init__(self, unit, column=None):
        super().__init__(
            f"Treatment unit {unit!r} is not in the list of unit identifiers "
            f"in column {column!r}"
        )
        self.unit = unit
        self.column = column


class UnknownPeriodError(ReferentialIntegrityError):
    """A treatment entry names a period that does not appear in the time column."""

    def __init__(self, period, column=None):
        super().__init__(
            f"Treatment period {period!r} is not in the list of time identifiers "
            f"in column {column!r}"
        )
        self.period = period
        self.column = column


class BalanceError(TreatmentPanelError):
    """The (unit, time) cross product is not covered exactly once by the table."""

    def __init__(self, message: str, unit=None, period=None):
        super().__init__(message)
        self.unit = unit
        self.period = period


class MissingObservationError(BalanceError):
    """A (unit, time) cell has no observation, or its outcome is null."""


class DuplicateObservationError(BalanceError):
    """A (unit, time) cell has more than one observation."""
