"""Row sorting, text search and data conversion utilities."""

from .filtering import (
    compute_rows_hash,
    filter_rows,
    rows_from_frame,
    rows_to_pandas,
)
from .sorting import compare_rows, sort_rows

__all__ = [
    "filter_rows",
    "sort_rows",
    "compare_rows",
    "rows_from_frame",
    "rows_to_pandas",
    "compute_rows_hash",
]
