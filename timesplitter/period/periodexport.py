"""Tabular export of split periods.

Turns a compute_periods() result into a pandas DataFrame and writes it to
parquet or CSV.
"""

import logging
from pathlib import Path
from typing import Union

import pandas as pd

from timesplitter.utils.dataloader import save_parquet_or_csv

logger = logging.getLogger(__name__)

PERIOD_COLUMNS = ["index", "start", "end"]


def periods_to_dataframe(result: dict) -> pd.DataFrame:
    """
    Convert a successful compute_periods() result to a DataFrame.

    Columns are index, start and end. Boundary-mode results have no end
    times, so their end column is left empty (None).

    Raises:
        ValueError: If the result is an error result

    Examples:
        >>> df = periods_to_dataframe(compute_periods("10:00", "12:00", 2))
        >>> df.to_dict("records")
        [{'index': 1, 'start': '10:00', 'end': '11:00'},
         {'index': 2, 'start': '11:00', 'end': '12:00'}]
    """
    if not result or not result.get("ok"):
        error = result.get("error") if result else "empty result"
        raise ValueError(f"Cannot export an unsuccessful split: {error}")

    rows = [
        {
            "index": p["index"],
            "start": p["start"],
            "end": p.get("end"),
        }
        for p in result["periods"]
    ]
    df = pd.DataFrame(rows, columns=PERIOD_COLUMNS)
    df["index"] = df["index"].astype("int64")
    return df


def export_periods(result: dict, path: Union[str, Path]) -> Path:
    """
    Write a compute_periods() result to .parquet or .csv.

    Args:
        result: Successful compute_periods() result
        path: Destination file; the extension picks the format

    Returns:
        Path written

    Raises:
        ValueError: For error results or unsupported extensions
    """
    df = periods_to_dataframe(result)
    written = save_parquet_or_csv(df, path)
    logger.info(f"Wrote {len(df)} periods to {written}")
    return written


__all__ = [
    "PERIOD_COLUMNS",
    "periods_to_dataframe",
    "export_periods",
]
