"""Shared utilities for the timesplitter package."""

from timesplitter.utils.dataloader import (
    load_parquet_or_csv,
    save_parquet_or_csv,
)

__all__ = [
    # Tabular files
    "load_parquet_or_csv",
    "save_parquet_or_csv",
]
