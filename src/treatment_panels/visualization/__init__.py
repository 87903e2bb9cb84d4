"""Visualization functions for treatment panels."""

from .panel import plot_outcomes, plot_treatment_heatmap, plot_treatment_pattern

__all__ = [
    "plot_treatment_pattern",
    "plot_treatment_heatmap",
    "plot_outcomes",
]
