"""Treatment panel visualization functions."""

from __future__ import annotations

import numpy as np

from ..panels import BalancedPanel
from ._style import ALPHA_TREATED, ALPHA_UNTREATED, COLORS


def _axes(ax, figsize):
    import matplotlib.pyplot as plt

    if ax is None:
        return plt.subplots(figsize=figsize)
    return ax.get_figure(), ax


def plot_treatment_pattern(
    panel: BalancedPanel,
    ax=None,
    figsize: tuple[int, int] = (12, 6),
):
    """One row of markers per unit showing when it is under treatment.

    Treated units are drawn in the treated color, opaque in treated periods
    and faded otherwise. Control units are drawn in grey.

    Parameters
    ----------
    panel : BalancedPanel
        Constructed panel.
    ax : matplotlib.axes.Axes, optional
        Axes to plot on.
    figsize : tuple
        Figure size when ``ax`` is not given.

    Returns
    -------
    matplotlib.figure.Figure
    """
    import matplotlib.pyplot as plt

    fig, ax = _axes(ax, figsize)
    x = np.arange(panel.T)

    for i in range(panel.N):
        row = panel.W[i]
        y = np.full(panel.T, i)
        if row.any():
            alpha = np.where(row, ALPHA_TREATED, ALPHA_UNTREATED)
            ax.scatter(x, y, c=COLORS["treated"], alpha=alpha, edgecolors="none")
        else:
            ax.scatter(x, y, c=COLORS["untreated"], edgecolors="none")

    ax.set_yticks(np.arange(panel.N))
    ax.set_yticklabels([str(u) for u in panel.units])
    ax.set_xticks(x)
    ax.set_xticklabels([str(t) for t in panel.times], rotation=45, ha="right")
    ax.set_xlabel("Period", fontsize=12, fontweight="bold")
    ax.set_ylabel("Unit", fontsize=12, fontweight="bold")
    ax.set_title(
        f"Treatment Pattern ({panel.pattern.name.replace('_', ' ').title()})",
        fontsize=13, fontweight="bold",
    )

    plt.tight_layout()
    return fig


def plot_treatment_heatmap(
    panel: BalancedPanel,
    ax=None,
    figsize: tuple[int, int] = (14, 8),
):
    """Heatmap of the treatment assignment matrix ``W``.

    Parameters
    ----------
    panel : BalancedPanel
        Constructed panel.
    ax : matplotlib.axes.Axes, optional
        Axes to plot on.
    figsize : tuple
        Figure size when ``ax`` is not given.

    Returns
    -------
    matplotlib.figure.Figure
    """
    import matplotlib.pyplot as plt
    import pandas as pd
    import seaborn as sns

    fig, ax = _axes(ax, figsize)

    frame = pd.DataFrame(panel.W.astype(int), index=panel.units, columns=panel.times)
    sns.heatmap(
        frame,
        cmap=[COLORS["neutral"], COLORS["treated"]],
        vmin=0,
        vmax=1,
        cbar_kws={"label": "Treated", "ticks": [0, 1]},
        linewidths=0.5,
        ax=ax,
    )
    ax.set_xlabel("Period", fontsize=12, fontweight="bold")
    ax.set_ylabel(f"Units (n={panel.N})", fontsize=12, fontweight="bold")
    ax.set_title("Treatment Assignment", fontsize=13, fontweight="bold")

    plt.tight_layout()
    return fig


def plot_outcomes(
    panel: BalancedPanel,
    ax=None,
    figsize: tuple[int, int] = (12, 6),
):
    """Outcome paths, with treated units split at their first treatment period.

    Each treated unit's path is drawn up to its onset, marked with a square
    at the onset period and continued in a lighter line afterwards. Control
    units are drawn faded.

    Parameters
    ----------
    panel : BalancedPanel
        Constructed panel.
    ax : matplotlib.axes.Axes, optional
        Axes to plot on.
    figsize : tuple
        Figure size when ``ax`` is not given.

    Returns
    -------
    matplotlib.figure.Figure
    """
    import matplotlib.pyplot as plt

    fig, ax = _axes(ax, figsize)
    x = np.arange(panel.T)

    for i in range(panel.N):
        row = panel.W[i]
        label = str(panel.units[i])
        if row.any():
            onset = int(np.argmax(row))
            line, = ax.plot(x[:onset + 1], panel.Y[i, :onset + 1], linewidth=2, label=label)
            color = line.get_color()
            ax.scatter([x[onset]], [panel.Y[i, onset]], marker="s", s=40, color=color, zorder=3)
            ax.plot(x[onset:], panel.Y[i, onset:], color=color, alpha=0.7, linewidth=2)
        else:
            ax.plot(x, panel.Y[i], color=COLORS["control"], alpha=ALPHA_UNTREATED, label=label)

    ax.set_xticks(x)
    ax.set_xticklabels([str(t) for t in panel.times], rotation=45, ha="right")
    ax.set_xlabel("Period", fontsize=12, fontweight="bold")
    ax.set_ylabel("Outcome value", fontsize=12, fontweight="bold")
    ax.set_title(f"Outcomes ({panel.config.outcome_col})", fontsize=13, fontweight="bold")
    if panel.N <= 20:
        ax.legend(loc="upper left", bbox_to_anchor=(1.0, 1.0))

    plt.tight_layout()
    return fig
