"""Shared visualization style and color palette."""

from __future__ import annotations

COLORS = {
    "treated": "#E07A5F",
    "control": "#3D405B",
    "pre": "#81B29A",
    "post": "#F2CC8F",
    "highlight": "#E63946",
    "neutral": "#A8DADC",
    "untreated": "grey",
}

# Marker alpha for treated vs. untreated cells of a treated unit
ALPHA_TREATED = 1.0
ALPHA_UNTREATED = 0.3


def apply_style() -> None:
    """Apply the treatment-panels default matplotlib style."""
    import matplotlib.pyplot as plt

    plt.rcParams.update({
        "figure.figsize": (10, 6),
        "figure.dpi": 100,
        "axes.spines.top": False,
        "axes.spines.right": False,
        "font.size": 11,
        "axes.titlesize": 13,
        "axes.labelsize": 11,
    })
