"""Tests for StateManager ordering and search state."""

import pytest

from table_insight import MalformedOrderBy, StateManager
from table_insight.core.state import get_default_state_manager


class TestStateManagerInit:
    def test_session_state_initialized(self, mock_streamlit):
        manager = StateManager(session_key="my_tables")
        state = mock_streamlit["my_tables"]
        assert state["counter"] == 0
        assert state["tables"] == {}
        assert 0.0 <= state["id"] < 1.0
        assert manager.session_id == state["id"]

    def test_existing_state_reused(self, mock_streamlit):
        first = StateManager(session_key="shared")
        first.set_search_term("t", "abc")
        second = StateManager(session_key="shared")
        assert second.get_search_term("t") == "abc"

    def test_default_state_manager_is_shared(self, mock_streamlit):
        assert get_default_state_manager() is get_default_state_manager()


class TestOrderByState:
    def test_empty_by_default(self, state_manager):
        assert state_manager.get_order_by("t") == []

    def test_set_and_get(self, state_manager):
        order_by = [{"name": "a", "direction": "ascend"}]
        assert state_manager.set_order_by("t", order_by) is True
        assert state_manager.get_order_by("t") == order_by
        assert state_manager.counter == 1

    def test_unchanged_value_does_not_bump_counter(self, state_manager):
        order_by = [{"name": "a", "direction": "ascend"}]
        state_manager.set_order_by("t", order_by)
        assert state_manager.set_order_by("t", list(order_by)) is False
        assert state_manager.counter == 1

    def test_returned_value_is_a_copy(self, state_manager):
        state_manager.set_order_by("t", [{"name": "a", "direction": "ascend"}])
        order_by = state_manager.get_order_by("t")
        order_by[0]["direction"] = "descend"
        order_by.append({"name": "b", "direction": "ascend"})
        assert state_manager.get_order_by("t") == [{"name": "a", "direction": "ascend"}]

    def test_malformed_rejected(self, state_manager):
        with pytest.raises(MalformedOrderBy):
            state_manager.set_order_by("t", [
                {"name": "a", "direction": "ascend"},
                {"name": "a", "direction": "ascend"},
            ])
        assert state_manager.get_order_by("t") == []

    def test_toggle_sequence(self, state_manager):
        assert state_manager.toggle_order_by("t", "a") == [
            {"name": "a", "direction": "ascend"}
        ]
        assert state_manager.toggle_order_by("t", "b", multi_column_sort=True) == [
            {"name": "a", "direction": "ascend"},
            {"name": "b", "direction": "ascend"},
        ]
        assert state_manager.toggle_order_by("t", "a", multi_column_sort=True) == [
            {"name": "a", "direction": "descend"},
            {"name": "b", "direction": "ascend"},
        ]
        assert state_manager.toggle_order_by("t", "b") == [
            {"name": "b", "direction": "descend"}
        ]

    def test_tables_are_independent(self, state_manager):
        state_manager.toggle_order_by("t1", "a")
        assert state_manager.get_order_by("t2") == []


    def test_reading_does_not_create_table_state(self, state_manager):
        assert state_manager.get_order_by("t") == []
        assert state_manager.get_search_term("t") == ""
        assert state_manager.table_ids() == []
        assert state_manager.clear_table("t") is False
        assert state_manager.counter == 0

    def test_unchanged_write_does_not_create_table_state(self, state_manager):
        assert state_manager.set_order_by("t", []) is False
        assert state_manager.set_search_term("t", "") is False
        assert state_manager.table_ids() == []


class TestSearchState:
    def test_set_and_clear(self, state_manager):
        assert state_manager.get_search_term("t") == ""
        assert state_manager.set_search_term("t", "foo") is True
        assert state_manager.get_search_term("t") == "foo"
        assert state_manager.set_search_term("t", None) is True
        assert state_manager.get_search_term("t") == ""
        assert state_manager.set_search_term("t", "") is False


class TestClear:
    def test_clear_table(self, state_manager):
        state_manager.set_search_term("t", "foo")
        assert state_manager.clear_table("t") is True
        assert state_manager.clear_table("t") is False
        assert state_manager.table_ids() == []

    def test_clear_all(self, state_manager):
        state_manager.toggle_order_by("t1", "a")
        state_manager.set_search_term("t2", "x")
        state_manager.clear()
        assert state_manager.table_ids() == []
        assert state_manager.counter == 0
        assert "test_table_state" in repr(state_manager)
