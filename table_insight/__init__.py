"""
Table Insight - ordering, search and column typing for interactive tables.

This package decides in which order table rows appear, which rows survive a
text search, and how each column's raw value is turned into searchable text,
independent of the frontend that renders the table.
"""

from .column_types import ColumnType
from .components.table import Table
from .core.columns import AlignContent, Column, DisplayAs, UnknownColumnType
from .core.order_by import (
    MalformedOrderBy,
    get_order_by_info,
    next_order_by_direction,
    toggle_order_by,
    validate_order_by,
)
from .core.registry import ColumnTypeRegistry, register_column_type
from .core.state import StateManager
from .preprocessing.filtering import filter_rows, rows_from_frame
from .preprocessing.sorting import sort_rows

__version__ = "0.1.0"

__all__ = [
    # Core
    "Column",
    "DisplayAs",
    "AlignContent",
    "ColumnType",
    "ColumnTypeRegistry",
    "register_column_type",
    "StateManager",
    # Errors
    "UnknownColumnType",
    "MalformedOrderBy",
    # Ordering
    "next_order_by_direction",
    "toggle_order_by",
    "get_order_by_info",
    "validate_order_by",
    # Rows
    "sort_rows",
    "filter_rows",
    "rows_from_frame",
    # Components
    "Table",
]
