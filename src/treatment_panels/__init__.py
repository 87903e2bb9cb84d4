"""treatment-panels: Build treatment panels for causal panel data estimators."""

from ._types import Duration, PanelConfig, Timing, TreatmentPattern, UnitCount
from .exceptions import (
    ConfigurationError,
    DuplicateObservationError,
    MissingObservationError,
    SchemaError,
    ShapeError,
    TreatmentPanelError,
    UnknownPeriodError,
    UnknownUnitError,
)
from .panels import (
    BalancedPanel,
    BalancedPanelBuilder,
    DecomposedOutcomes,
    build_panel,
    decompose_y,
    first_treated_period_ids,
    first_treated_period_labels,
    length_T0,
    length_T1,
    treated_ids,
    treated_labels,
)
from .treatment import TreatmentEntry, classify_pattern, normalize_treatment

__all__ = [
    "PanelConfig",
    "TreatmentPattern",
    "UnitCount",
    "Timing",
    "Duration",
    "TreatmentEntry",
    "normalize_treatment",
    "classify_pattern",
    "BalancedPanel",
    "BalancedPanelBuilder",
    "build_panel",
    "DecomposedOutcomes",
    "treated_ids",
    "treated_labels",
    "first_treated_period_ids",
    "first_treated_period_labels",
    "length_T0",
    "length_T1",
    "decompose_y",
    "TreatmentPanelError",
    "ConfigurationError",
    "SchemaError",
    "ShapeError",
    "UnknownUnitError",
    "UnknownPeriodError",
    "MissingObservationError",
    "DuplicateObservationError",
]

__version__ = "0.1.0"
