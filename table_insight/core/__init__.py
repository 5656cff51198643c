"""Core infrastructure for table_insight."""

from .columns import AlignContent, Column, DisplayAs, UnknownColumnType
from .order_by import (
    MalformedOrderBy,
    get_order_by_info,
    next_order_by_direction,
    toggle_order_by,
    validate_order_by,
)
from .registry import ColumnTypeRegistry, register_column_type
from .state import StateManager

__all__ = [
    "Column",
    "DisplayAs",
    "AlignContent",
    "ColumnTypeRegistry",
    "register_column_type",
    "UnknownColumnType",
    "MalformedOrderBy",
    "next_order_by_direction",
    "toggle_order_by",
    "get_order_by_info",
    "validate_order_by",
    "StateManager",
]
