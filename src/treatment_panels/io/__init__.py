"""Export utilities for treatment panels."""

from .export import to_csv, to_parquet

__all__ = ["to_parquet", "to_csv"]
