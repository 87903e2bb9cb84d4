"""Export utilities for treatment panels."""

from __future__ import annotations

import logging
from pathlib import Path

from ..panels import BalancedPanel

logger = logging.getLogger(__name__)


def to_parquet(panel: BalancedPanel, path: str | Path, **kwargs) -> None:
    """Export a panel to parquet in long format.

    Parameters
    ----------
    panel : BalancedPanel
        Constructed panel.
    path : str or Path
        Output file path.
    **kwargs
        Passed to ``DataFrame.to_parquet()``.
    """
    df = panel.to_frame()
    df.to_parquet(path, index=False, **kwargs)
    logger.info("Exported %s rows to %s", f"{len(df):,}", path)


def to_csv(panel: BalancedPanel, path: str | Path, **kwargs) -> None:
    """Export a panel to CSV in long format.

    Parameters
    ----------
    panel : BalancedPanel
        Constructed panel.
    path : str or Path
        Output file path.
    **kwargs
        Passed to ``DataFrame.to_csv()``.
    """
    df = panel.to_frame()
    df.to_csv(path, index=False, **kwargs)
    logger.info("Exported %s rows to %s", f"{len(df):,}", path)
