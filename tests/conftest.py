"""Pytest configuration and shared fixtures for table-insight tests."""

from typing import Any, Dict, List
from unittest.mock import patch

import polars as pl
import pytest

from table_insight import Column, ColumnTypeRegistry, StateManager
from table_insight.core.state import reset_default_state_manager


class MockSessionState(dict):
    """Mock Streamlit session_state that behaves like a dict."""
    pass


@pytest.fixture
def mock_streamlit():
    """
    Mock Streamlit's session_state for testing state and components.

    This fixture patches st.session_state to allow testing without
    running a full Streamlit server.
    """
    mock_session_state = MockSessionState()

    with patch('streamlit.session_state', mock_session_state):
        reset_default_state_manager()
        yield mock_session_state
        reset_default_state_manager()


@pytest.fixture
def state_manager(mock_streamlit) -> StateManager:
    """Create a StateManager backed by the mocked session_state."""
    return StateManager(session_key="test_table_state")


@pytest.fixture
def registry() -> ColumnTypeRegistry:
    """Registry with the built-in column types."""
    return ColumnTypeRegistry()


@pytest.fixture
def people_rows() -> List[Dict[str, Any]]:
    """Rows with ties on age to exercise sort stability."""
    return [
        {"name": "Bob", "age": 30},
        {"name": "Amy", "age": 25},
        {"name": "Cid", "age": 25},
    ]


@pytest.fixture
def people_columns() -> List[Column]:
    """Columns matching people_rows."""
    return [
        Column("age", display_as="number", order=1),
        Column("name", display_as="text", order=0, allow_search=True),
    ]


@pytest.fixture
def sample_table_data() -> pl.LazyFrame:
    """Create sample data for the Table component."""
    return pl.LazyFrame({
        "id": [1, 2, 3, 4, 5],
        "name": ["peak_a", "Peak_B", "peak_c", None, "PEAK_E"],
        "mass": [500.5, 600.6, None, 800.8, 500.5],
        "charge": [2, 3, 2, 1, 2],
        "decoy": [False, True, False, False, True],
    })
