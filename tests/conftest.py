"""Shared fixtures for treatment-panels tests."""

import numpy as np
import pandas as pd
import pytest

from treatment_panels import PanelConfig


@pytest.fixture
def config() -> PanelConfig:
    return PanelConfig(unit_col="unit_id", time_col="year", outcome_col="outcome")


@pytest.fixture
def tiny_df() -> pd.DataFrame:
    """Two units observed in two periods, outcomes 1-4 in row-major order."""
    return pd.DataFrame({
        "id": ["a", "a", "b", "b"],
        "period": [1, 2, 1, 2],
        "value": [1.0, 2.0, 3.0, 4.0],
    })


@pytest.fixture
def simple_panel() -> pd.DataFrame:
    """Balanced panel with 5 units ("A"-"E") and 10 years (2000-2009).

    Outcome for unit k (0-based) in year t is ``10 * k + (t - 2000)``,
    so every cell of Y is known in advance.
    """
    rows = []
    for k, uid in enumerate("ABCDE"):
        for year in range(2000, 2010):
            rows.append({
                "unit_id": uid,
                "year": year,
                "outcome": float(10 * k + (year - 2000)),
            })
    return pd.DataFrame(rows)


@pytest.fixture
def shuffled_panel(simple_panel) -> pd.DataFrame:
    """``simple_panel`` with rows in random order."""
    return simple_panel.sample(frac=1.0, random_state=7).reset_index(drop=True)


@pytest.fixture
def monthly_panel() -> pd.DataFrame:
    """Three units observed monthly over 2020, time column of datetime64 dtype."""
    rng = np.random.default_rng(42)
    months = pd.date_range("2020-01-01", periods=12, freq="MS")
    rows = []
    for uid in ["north", "south", "west"]:
        for month in months:
            rows.append({"region": uid, "month": month, "sales": rng.normal(100, 10)})
    return pd.DataFrame(rows)
