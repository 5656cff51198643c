"""Stable multi-column row sorting."""

from functools import cmp_to_key
from typing import Any, Callable, Mapping, Sequence

from ..column_types.base import is_nil
from ..core.order_by import ASCEND, DESCEND

_DIRECTION_SIGN = {ASCEND: 1, DESCEND: -1}


def compare_rows(order_by: Sequence[Mapping[str, Any]]) -> Callable[[Any, Any], int]:
    """
    Build a row comparator for an order-by specification.

    Keys are compared in priority order. For each key, a nil left value or
    a smaller left value puts the left row first (ascending); a larger left
    value or a nil right value puts it last. Only when neither holds is the
    next key consulted. Nil handling therefore depends on which side is nil:
    two nils, or a nil on the left, always count as "left is smaller".

    Args:
        order_by: List of {"name": ..., "direction": "ascend"|"descend"}

    Returns:
        A cmp-style function returning -1, 0 or 1
    """
    keys = [(item["name"], _DIRECTION_SIGN[item["direction"]]) for item in order_by]

    def compare(a: Mapping[str, Any], b: Mapping[str, Any]) -> int:
        for name, sign in keys:
            va = a.get(name)
            vb = b.get(name)
            if is_nil(va) or (not is_nil(vb) and va < vb):
                return -1 * sign
            if is_nil(vb) or va > vb:
                return 1 * sign
        return 0

    return compare


def sort_rows(rows: Sequence[Mapping[str, Any]], order_by: Sequence[Mapping[str, Any]]):
    """
    Sort rows by an order-by specification.

    The sort is stable: rows that compare equal on every key keep their
    input order. Neither the input sequence nor its rows are modified.

    Args:
        rows: Sequence of row mappings
        order_by: List of {"name": ..., "direction": ...}; first item is
            the primary key

    Returns:
        ``rows`` itself if rows or order_by is empty, otherwise a new list
    """
    if len(order_by) == 0 or len(rows) == 0:
        return rows

    return sorted(rows, key=cmp_to_key(compare_rows(order_by)))
