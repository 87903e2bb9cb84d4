"""Panel construction and accessors."""

from ._base import BasePanelBuilder, PanelDomain, extract_domain
from .accessors import (
    DecomposedOutcomes,
    decompose_y,
    first_treated_period_ids,
    first_treated_period_labels,
    get_y00,
    get_y01,
    get_y10,
    get_y11,
    length_T0,
    length_T1,
    treated_ids,
    treated_labels,
)
from .balanced import BalancedPanel, BalancedPanelBuilder, build_panel

__all__ = [
    "BasePanelBuilder",
    "BalancedPanel",
    "BalancedPanelBuilder",
    "build_panel",
    "PanelDomain",
    "extract_domain",
    "DecomposedOutcomes",
    "treated_ids",
    "treated_labels",
    "first_treated_period_ids",
    "first_treated_period_labels",
    "length_T0",
    "length_T1",
    "get_y10",
    "get_y11",
    "get_y00",
    "get_y01",
    "decompose_y",
]
