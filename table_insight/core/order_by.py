"""Order-by state machine for column header clicks.

An order-by specification is a list of ``{"name": ..., "direction": ...}``
dicts. The first item is the primary sort key. Directions cycle
``None -> "ascend" -> "descend" -> None`` on repeated clicks.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

ASCEND = "ascend"
DESCEND = "descend"
DIRECTIONS = (ASCEND, DESCEND)

OrderBy = List[Dict[str, str]]


class MalformedOrderBy(ValueError):
    """Raised when an order-by specification has duplicate names or bad directions."""

    pass


def next_order_by_direction(direction: Optional[str]) -> Optional[str]:
    """
    Get the direction that follows the given one in the click cycle.

    Args:
        direction: Current direction, or None when the column is unsorted

    Returns:
        "ascend", "descend", or None (ordering removed)
    """
    if direction == ASCEND:
        return DESCEND
    if direction == DESCEND:
        return None
    return ASCEND


def _find_index(order_by: Sequence[Mapping[str, Any]], column_name: str) -> int:
    for index, item in enumerate(order_by):
        if item["name"] == column_name:
            return index
    return -1


def toggle_order_by(
    column_name: str,
    order_by: Optional[Sequence[Mapping[str, Any]]] = None,
    multi_column_sort: bool = False,
) -> OrderBy:
    """
    Compute the order-by specification after a click on a column header.

    The given specification is never modified; a new list is returned.

    In single-column mode the result only ever contains the clicked column.
    In multi-column mode the clicked column keeps its position (priority)
    when it is already sorted, is appended when it is not, and is removed
    when its direction cycles back to None.

    Args:
        column_name: Name of the clicked column
        order_by: Current specification (None is treated as empty)
        multi_column_sort: Extend the existing ordering instead of replacing it

    Returns:
        The new specification
    """
    order_by = list(order_by or [])
    index = _find_index(order_by, column_name)
    direction = ASCEND
    if index >= 0:
        direction = next_order_by_direction(order_by[index]["direction"])

    if not multi_column_sort:
        return [{"name": column_name, "direction": direction}] if direction else []

    if direction is None:
        return [dict(item) for item in order_by if item["name"] != column_name]

    result = [dict(item) for item in order_by]
    item = {"name": column_name, "direction": direction}
    if index >= 0:
        result[index] = item
    else:
        result.append(item)
    return result


def get_order_by_info(
    order_by: Optional[Sequence[Mapping[str, Any]]],
) -> Dict[str, Dict[str, Any]]:
    """
    Index an order-by specification by column name.

    Args:
        order_by: Current specification

    Returns:
        Dict mapping column names to {"direction": ..., "index": priority},
        where index is 1-based
    """
    return {
        item["name"]: {"direction": item["direction"], "index": position}
        for position, item in enumerate(order_by or [], start=1)
    }


def validate_order_by(order_by: Sequence[Mapping[str, Any]]) -> OrderBy:
    """
    Check an order-by specification before it is stored.

    Sorting and toggling assume well-formed input and do not call this.

    Args:
        order_by: Specification to check

    Returns:
        A plain-dict copy of the specification

    Raises:
        MalformedOrderBy: On missing keys, unknown directions or duplicate names
    """
    seen = set()
    result: OrderBy = []
    for position, item in enumerate(order_by):
        if not isinstance(item, Mapping) or "name" not in item or "direction" not in item:
            raise MalformedOrderBy(
                f"Order-by item {position} must have 'name' and 'direction': {item!r}"
            )
        name, direction = item["name"], item["direction"]
        if direction not in DIRECTIONS:
            raise MalformedOrderBy(
                f"Invalid direction {direction!r} for column '{name}'. "
                f"Expected one of {list(DIRECTIONS)}"
            )
        if name in seen:
            raise MalformedOrderBy(f"Column '{name}' appears more than once in order-by")
        seen.add(name)
        result.append({"name": name, "direction": direction})
    return result
