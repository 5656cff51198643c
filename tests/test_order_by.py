"""Tests for the order-by click state machine."""

import pytest

from table_insight.core.order_by import (
    MalformedOrderBy,
    get_order_by_info,
    next_order_by_direction,
    toggle_order_by,
    validate_order_by,
)


class TestNextDirection:
    """The direction cycle is None -> ascend -> descend -> None."""

    @pytest.mark.parametrize(
        "current,expected",
        [(None, "ascend"), ("ascend", "descend"), ("descend", None)],
    )
    def test_cycle(self, current, expected):
        assert next_order_by_direction(current) == expected


class TestToggleSingleColumn:
    """Single-column mode always replaces the ordering."""

    def test_three_clicks_cycle_back_to_empty(self):
        first = toggle_order_by("x", [])
        second = toggle_order_by("x", first)
        third = toggle_order_by("x", second)

        assert first == [{"name": "x", "direction": "ascend"}]
        assert second == [{"name": "x", "direction": "descend"}]
        assert third == []

    def test_none_order_by_treated_as_empty(self):
        assert toggle_order_by("x", None) == [{"name": "x", "direction": "ascend"}]

    def test_other_columns_are_discarded(self):
        order_by = [
            {"name": "a", "direction": "ascend"},
            {"name": "b", "direction": "descend"},
        ]
        assert toggle_order_by("b", order_by) == []
        assert toggle_order_by("c", order_by) == [{"name": "c", "direction": "ascend"}]

    def test_empty_column_name(self):
        """Column names may be empty strings."""
        result = toggle_order_by("", [{"name": "", "direction": "ascend"}])
        assert result == [{"name": "", "direction": "descend"}]


class TestToggleMultiColumn:
    """Multi-column mode keeps priorities of untouched columns."""

    def test_new_column_appended(self):
        result = toggle_order_by("b", [{"name": "a", "direction": "ascend"}], True)
        assert result == [
            {"name": "a", "direction": "ascend"},
            {"name": "b", "direction": "ascend"},
        ]

    def test_existing_column_replaced_in_place(self):
        order_by = [
            {"name": "a", "direction": "ascend"},
            {"name": "b", "direction": "ascend"},
        ]
        result = toggle_order_by("a", order_by, True)
        assert result == [
            {"name": "a", "direction": "descend"},
            {"name": "b", "direction": "ascend"},
        ]

    def test_descend_removes_column_keeping_order(self):
        order_by = [
            {"name": "a", "direction": "ascend"},
            {"name": "b", "direction": "descend"},
            {"name": "c", "direction": "ascend"},
        ]
        result = toggle_order_by("b", order_by, True)
        assert result == [
            {"name": "a", "direction": "ascend"},
            {"name": "c", "direction": "ascend"},
        ]

    def test_input_is_not_mutated(self):
        """The caller's stored specification must stay untouched."""
        item = {"name": "a", "direction": "ascend"}
        order_by = [item]

        result = toggle_order_by("a", order_by, True)
        toggle_order_by("b", order_by, True)

        assert order_by == [{"name": "a", "direction": "ascend"}]
        assert order_by[0] is item
        assert result is not order_by
        assert result[0] is not item


class TestOrderByInfo:
    """Tests for the name -> direction/priority lookup."""

    def test_priority_is_one_based(self):
        info = get_order_by_info([
            {"name": "a", "direction": "descend"},
            {"name": "b", "direction": "ascend"},
        ])
        assert info == {
            "a": {"direction": "descend", "index": 1},
            "b": {"direction": "ascend", "index": 2},
        }

    def test_empty(self):
        assert get_order_by_info([]) == {}
        assert get_order_by_info(None) == {}

    def test_reflects_latest_toggle(self):
        order_by = toggle_order_by("a", [], True)
        assert get_order_by_info(order_by)["a"]["direction"] == "ascend"

        order_by = toggle_order_by("a", order_by, True)
        assert get_order_by_info(order_by)["a"]["direction"] == "descend"


class TestValidateOrderBy:
    """validate_order_by rejects malformed specifications."""

    def test_valid_returns_copy(self):
        order_by = [{"name": "a", "direction": "ascend"}]
        result = validate_order_by(order_by)
        assert result == order_by
        assert result[0] is not order_by[0]

    def test_duplicate_names(self):
        with pytest.raises(MalformedOrderBy, match="more than once"):
            validate_order_by([
                {"name": "a", "direction": "ascend"},
                {"name": "a", "direction": "descend"},
            ])

    @pytest.mark.parametrize("direction", ["asc", None, "DESCEND", 1])
    def test_bad_direction(self, direction):
        with pytest.raises(MalformedOrderBy, match="Invalid direction"):
            validate_order_by([{"name": "a", "direction": direction}])

    def test_missing_keys(self):
        with pytest.raises(MalformedOrderBy):
            validate_order_by([{"name": "a"}])

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_order_by([{"direction": "ascend"}])
