"""Shared tabular file helpers.

Parquet and CSV are the two supported formats, chosen by file extension.
"""

from pathlib import Path
from typing import Union

import pandas as pd

SUPPORTED_SUFFIXES = (".parquet", ".csv")


def _check_suffix(file_path: Path) -> None:
    if file_path.suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported file format: {file_path.suffix}. Use .parquet or .csv")


def load_parquet_or_csv(file_path: Union[str, Path]) -> pd.DataFrame:
    """Load DataFrame from parquet or CSV file based on extension.

    CSV columns are read as strings so "HH:mm" values survive unchanged.

    Args:
        file_path: Path to parquet or CSV file

    Returns:
        Loaded DataFrame

    Raises:
        ValueError: If file extension is not .parquet or .csv
    """
    file_path = Path(file_path)
    _check_suffix(file_path)

    if file_path.suffix == ".parquet":
        return pd.read_parquet(file_path)
    return pd.read_csv(file_path, dtype=str)


def save_parquet_or_csv(df: pd.DataFrame, file_path: Union[str, Path]) -> Path:
    """Write DataFrame to parquet or CSV file based on extension.

    Parent directories are created as needed.

    Args:
        df: DataFrame to write
        file_path: Destination path ending in .parquet or .csv

    Returns:
        The path written

    Raises:
        ValueError: If file extension is not .parquet or .csv
    """
    file_path = Path(file_path)
    _check_suffix(file_path)

    file_path.parent.mkdir(parents=True, exist_ok=True)
    if file_path.suffix == ".parquet":
        df.to_parquet(file_path, index=False)
    else:
        df.to_csv(file_path, index=False)
    return file_path


__all__ = [
    "SUPPORTED_SUFFIXES",
    "load_parquet_or_csv",
    "save_parquet_or_csv",
]
