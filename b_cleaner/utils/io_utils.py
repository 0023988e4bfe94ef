"""I/O utility functions."""

import csv
import os
from typing import List, Optional

import pandas as pd

from ..config import AUTHOR_COL_CANDIDATES, TEXT_COL_CANDIDATES, TITLE_COL_CANDIDATES

COL_CANDIDATES = {
    "title": TITLE_COL_CANDIDATES,
    "author": AUTHOR_COL_CANDIDATES,
    "text": TEXT_COL_CANDIDATES,
}


def pick_col(columns: List, candidates: List[str]) -> Optional[str]:
    """Pick the first available column from a list of candidates.

    Matching is case-insensitive. Falls back to the first column.

    Args:
        columns: Column names of the input table
        candidates: List of column names to try

    Returns:
        First matching column name, or None if there are no columns
    """
    by_lower = {str(c).lower(): c for c in columns}
    for c in candidates:
        if c in by_lower:
            return by_lower[c]
    return columns[0] if len(columns) else None


def read_delimited(path: str, delimiter: str = "\t", header: bool = True) -> pd.DataFrame:
    """Read a delimited file as strings, keeping empty cells as "".

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Input file not found at {path}")
    return pd.read_csv(
        path,
        sep=delimiter,
        header=0 if header else None,
        dtype=str,
        keep_default_na=False,
        quoting=csv.QUOTE_NONE,
    )


def get_input_column(df: pd.DataFrame, cleaner_name: str, column: Optional[str] = None):
    """Resolve the column to clean.

    Raises:
        ValueError: If an explicit column is missing from the input
    """
    if column is not None:
        if column in df.columns:
            return column
        if column.isdigit() and int(column) in df.columns:
            return int(column)
        raise ValueError(f"Column {column!r} not found. Available: {list(df.columns)}")
    return pick_col(list(df.columns), COL_CANDIDATES.get(cleaner_name, []))
