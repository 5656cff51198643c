"""State management for table ordering and search across reruns."""

from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from .order_by import OrderBy, toggle_order_by, validate_order_by

# State of a table that has never been written
_EMPTY_TABLE_STATE: Dict[str, Any] = {"order_by": [], "search_term": ""}

# Module-level default state manager
_default_state_manager: Optional["StateManager"] = None


def get_default_state_manager() -> "StateManager":
    """
    Get or create the default shared StateManager.

    Returns:
        The default StateManager instance
    """
    global _default_state_manager
    if _default_state_manager is None:
        _default_state_manager = StateManager()
    return _default_state_manager


def reset_default_state_manager() -> None:
    """Reset the default state manager (useful for testing)."""
    global _default_state_manager
    _default_state_manager = None


class StateManager:
    """
    Owns the order-by specification and search term of each table.

    The order-by functions are pure; this class is the single place where
    the resulting specifications are stored, so header clicks are applied
    one after another against the latest stored value.

    State lives in Streamlit's session_state under ``session_key``:

        {
            "counter": int,        # bumped on every change
            "id": float,           # random session id
            "tables": {table_id: {"order_by": [...], "search_term": str}},
        }
    """

    def __init__(self, session_key: str = "table_insight_state"):
        """
        Initialize the StateManager.

        Args:
            session_key: Key to use in Streamlit session_state for storing
                state. Use different keys for independent table groups.
        """
        self._session_key = session_key
        self._ensure_session_state()

    def _ensure_session_state(self) -> None:
        """Ensure session state is initialized."""
        import streamlit as st

        if self._session_key not in st.session_state:
            st.session_state[self._session_key] = {
                "counter": 0,
                "id": float(np.random.random()),
                "tables": {},
            }

    @property
    def _state(self) -> Dict[str, Any]:
        """Get the internal state dict from session_state."""
        import streamlit as st

        self._ensure_session_state()
        return st.session_state[self._session_key]

    def _read_table_state(self, table_id: str) -> Dict[str, Any]:
        """Get a table's stored state without creating an entry."""
        return self._state["tables"].get(table_id, _EMPTY_TABLE_STATE)

    def _table_state(self, table_id: str) -> Dict[str, Any]:
        """Get a table's stored state, creating the entry on first write."""
        tables = self._state["tables"]
        if table_id not in tables:
            tables[table_id] = {"order_by": [], "search_term": ""}
        return tables[table_id]

    @property
    def session_id(self) -> float:
        """Get the unique session ID."""
        return self._state["id"]

    @property
    def counter(self) -> int:
        """Get the current state counter."""
        return self._state["counter"]

    def get_order_by(self, table_id: str) -> OrderBy:
        """
        Get the order-by specification of a table.

        Returns:
            A copy of the stored specification (empty if never set)
        """
        return [dict(item) for item in self._read_table_state(table_id)["order_by"]]

    def set_order_by(self, table_id: str, order_by: Sequence[Dict[str, Any]]) -> bool:
        """
        Store the order-by specification of a table.

        Args:
            table_id: Table identifier
            order_by: New specification

        Returns:
            True if the value changed, False otherwise

        Raises:
            MalformedOrderBy: If the specification is not well-formed
        """
        order_by = validate_order_by(order_by)
        if self._read_table_state(table_id)["order_by"] == order_by:
            return False

        self._table_state(table_id)["order_by"] = order_by
        self._state["counter"] += 1
        return True

    def toggle_order_by(
        self, table_id: str, column_name: str, multi_column_sort: bool = False
    ) -> OrderBy:
        """
        Apply a header click to the stored specification.

        Args:
            table_id: Table identifier
            column_name: Name of the clicked column
            multi_column_sort: Extend the existing ordering (shift-click)

        Returns:
            The new specification
        """
        order_by = toggle_order_by(
            column_name, self.get_order_by(table_id), multi_column_sort
        )
        self.set_order_by(table_id, order_by)
        return self.get_order_by(table_id)

    def get_search_term(self, table_id: str) -> str:
        """Get the search term of a table ('' if never set)."""
        return self._read_table_state(table_id)["search_term"]

    def set_search_term(self, table_id: str, search_term: Optional[str]) -> bool:
        """
        Store the search term of a table.

        Returns:
            True if the value changed, False otherwise
        """
        search_term = search_term or ""
        if self._read_table_state(table_id)["search_term"] == search_term:
            return False

        self._table_state(table_id)["search_term"] = search_term
        self._state["counter"] += 1
        return True

    def clear_table(self, table_id: str) -> bool:
        """
        Forget the ordering and search term of a table.

        Returns:
            True if state was cleared, False if the table had none
        """
        if table_id in self._state["tables"]:
            del self._state["tables"][table_id]
            self._state["counter"] += 1
            return True
        return False

    def table_ids(self) -> List[str]:
        """Get the identifiers of all tables with stored state."""
        return list(self._state["tables"].keys())

    def clear(self) -> None:
        """Clear all table state and reset counter."""
        self._state["tables"] = {}
        self._state["counter"] = 0

    def __repr__(self) -> str:
        return (
            f"StateManager(session_key='{self._session_key}', "
            f"counter={self.counter}, "
            f"tables={self.table_ids()})"
        )
