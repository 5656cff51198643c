"""Text search over rows and row/frame conversion utilities."""

import hashlib
import math
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

import pandas as pd
import polars as pl

from ..core.columns import Column
from ..core.registry import ColumnTypeRegistry

FrameLike = Union[pl.LazyFrame, pl.DataFrame, pd.DataFrame, Iterable[Mapping[str, Any]]]


def filter_rows(
    rows: Sequence[Mapping[str, Any]],
    search_term: str,
    search_columns: Sequence[Column],
    registry: Optional[ColumnTypeRegistry] = None,
):
    """
    Keep the rows whose text matches a search term in any search column.

    Matching is a case-insensitive substring test against each column's
    text projection (see ColumnType.text_of), so a number column matches
    on its formatted text, not its raw value. Kept rows stay in input order.

    Args:
        rows: Sequence of row mappings
        search_term: Text to look for
        search_columns: Columns to search in
        registry: Column type registry (defaults to the built-in types)

    Returns:
        ``rows`` itself if search_term or search_columns is empty,
        otherwise a new list of matching rows

    Raises:
        UnknownColumnType: If a search column has an unsupported display type
    """
    if search_term == "" or len(search_columns) == 0:
        return rows

    if registry is None:
        registry = ColumnTypeRegistry()

    search_term = search_term.upper()
    behaviors = [registry.for_column(column) for column in search_columns]

    def matches(row: Mapping[str, Any]) -> bool:
        return any(
            search_term in behavior.text_of(row).upper() for behavior in behaviors
        )

    return [row for row in rows if matches(row)]


def _clean_value(value: Any) -> Any:
    """Map pandas/numpy missing markers (NaN, NaT, NA) to None."""
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    if value is pd.NaT or value is pd.NA:
        return None
    return value


def rows_from_frame(data: FrameLike) -> List[Dict[str, Any]]:
    """
    Convert tabular data to a list of row dicts.

    Args:
        data: Polars LazyFrame/DataFrame, pandas DataFrame, or an iterable
            of mappings

    Returns:
        List of dicts, one per row. Missing values (null, NaN, NaT) are None.
    """
    if isinstance(data, pl.LazyFrame):
        data = data.collect()
    if isinstance(data, pl.DataFrame):
        # Polars already reports nulls as None
        return data.to_dicts()
    if isinstance(data, pd.DataFrame):
        return [
            {str(key): _clean_value(value) for key, value in record.items()}
            for record in data.to_dict(orient="records")
        ]
    return [dict(row) for row in data]


def rows_to_pandas(
    rows: Sequence[Mapping[str, Any]],
    columns: Optional[Sequence[str]] = None,
) -> pd.DataFrame:
    """
    Build the pandas DataFrame sent to the frontend.

    Args:
        rows: Row mappings, already filtered and sorted
        columns: Column names to include, in order. Defaults to every key
            seen in the rows.

    Returns:
        pandas DataFrame with one record per row, in row order
    """
    if columns is None:
        columns = []
        for row in rows:
            for key in row:
                if key not in columns:
                    columns.append(key)
    records = [[row.get(name) for name in columns] for row in rows]
    return pd.DataFrame.from_records(records, columns=list(columns))


def compute_rows_hash(rows: Sequence[Mapping[str, Any]]) -> str:
    """
    Compute a change-detection hash for a row sequence.

    Every row contributes in order, so a reordering (new sort) or a
    narrower result (new search) changes the hash.

    Args:
        rows: Row mappings

    Returns:
        SHA256 hash string
    """
    digest = hashlib.sha256(str(len(rows)).encode())
    for row in rows:
        digest.update(b"|")
        digest.update(repr(sorted(row.items(), key=lambda item: str(item[0]))).encode())
    return digest.hexdigest()
