"""Table component: ordering, search and column preparation for display."""

import sys
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import pandas as pd

from ..core.columns import Column, as_column
from ..core.order_by import OrderBy, get_order_by_info
from ..core.registry import ColumnTypeRegistry
from ..core.state import StateManager, get_default_state_manager
from ..preprocessing.filtering import (
    FrameLike,
    compute_rows_hash,
    filter_rows,
    rows_from_frame,
    rows_to_pandas,
)
from ..preprocessing.sorting import sort_rows


class Table:
    """
    Interactive table backed by an explicit column type registry.

    Features:
    - Column definitions with display types and type-specific options
    - Click-to-sort headers with shift-click multi-column ordering
    - Case-insensitive text search over selected columns
    - Header descriptors with sort direction and priority for the frontend

    Ordering and search term are kept in a StateManager, so they survive
    Streamlit reruns and several tables can share one session.

    Example:
        table = Table(
            table_id="people",
            columns=[
                {"name": "name", "displayAs": "string", "allowSearch": True},
                {"name": "age", "displayAs": "number"},
            ],
            data=people_df,
        )
        table.handle_header_click("age")                  # age ascending
        table.handle_header_click("name", shift_key=True)  # then by name
        table.search("am")
        rows = table.prepare_rows()
    """

    def __init__(
        self,
        table_id: str,
        columns: Sequence[Union[Column, Mapping[str, Any]]],
        data: Optional[FrameLike] = None,
        state_manager: Optional[StateManager] = None,
        registry: Optional[ColumnTypeRegistry] = None,
        search_columns: Optional[Sequence[str]] = None,
        initial_order_by: Optional[OrderBy] = None,
    ):
        """
        Initialize the Table component.

        Args:
            table_id: Unique identifier of this table's state in the
                StateManager.
            columns: Column objects or column definition dicts. Each dict
                needs a 'name' and may contain:
                - title: Display title (defaults to name)
                - displayAs: 'string', 'number', 'datetime', 'boolean',
                  'link', 'image' or 'json'
                - order: Display position
                - visible: Whether the column is shown
                - alignContent: 'left', 'center', 'right'
                - allowSearch: Include in text search by default
                - any type-specific option (numberFormat, dateTimeFormat,
                  booleanValues, linkUrlTemplate, imageUrlTemplate, ...)
            data: Polars LazyFrame/DataFrame, pandas DataFrame or list of
                row dicts.
            state_manager: State container for ordering and search. Defaults
                to the shared default StateManager.
            registry: Column type registry. Defaults to the built-in types.
            search_columns: Names of columns to search. Defaults to visible
                columns with allowSearch set.
            initial_order_by: Ordering applied when the table has no stored
                state yet, e.g. [{'name': 'age', 'direction': 'descend'}]

        Raises:
            UnknownColumnType: If a column has an unsupported display type
            MalformedOrderBy: If initial_order_by is not well-formed
        """
        self._table_id = table_id
        self._registry = registry if registry is not None else ColumnTypeRegistry()
        self._columns: List[Column] = [as_column(column) for column in columns]
        # Fail fast on unsupported display types
        for column in self._columns:
            self._registry.resolve(column.display_as)

        self._search_column_names = (
            list(search_columns) if search_columns is not None else None
        )
        self._rows: List[Dict[str, Any]] = (
            rows_from_frame(data) if data is not None else []
        )
        self._state_manager = state_manager

        if initial_order_by and not self.order_by:
            self.set_order_by(initial_order_by)

    @property
    def table_id(self) -> str:
        return self._table_id

    @property
    def columns(self) -> List[Column]:
        return list(self._columns)

    @property
    def rows(self) -> List[Dict[str, Any]]:
        return self._rows

    @property
    def state_manager(self) -> StateManager:
        if self._state_manager is None:
            self._state_manager = get_default_state_manager()
        return self._state_manager

    def set_data(self, data: FrameLike) -> "Table":
        """
        Replace the table's rows.

        Returns:
            Self for method chaining
        """
        self._rows = rows_from_frame(data)
        return self

    def get_column(self, name: str) -> Optional[Column]:
        """Get the first column with the given name, or None."""
        for column in self._columns:
            if column.name == name:
                return column
        return None

    def visible_columns(self) -> List[Column]:
        """Get visible columns in display order."""
        return sorted(
            (column for column in self._columns if column.visible),
            key=lambda column: column.order,
        )

    def search_columns(self) -> List[Column]:
        """
        Get the columns text search looks at.

        Unknown names in an explicit search_columns list are reported on
        stderr and skipped.
        """
        if self._search_column_names is None:
            return [column for column in self.visible_columns() if column.allow_search]

        result = []
        for name in self._search_column_names:
            column = self.get_column(name)
            if column is None:
                print(
                    f"[TABLE] {self._table_id}: ignoring unknown search column '{name}'",
                    file=sys.stderr,
                )
                continue
            result.append(column)
        return result

    @property
    def order_by(self) -> OrderBy:
        """Current order-by specification."""
        return self.state_manager.get_order_by(self._table_id)

    def set_order_by(self, order_by: OrderBy) -> "Table":
        """
        Replace the ordering.

        Returns:
            Self for method chaining

        Raises:
            MalformedOrderBy: If the specification is not well-formed
        """
        self.state_manager.set_order_by(self._table_id, order_by)
        return self

    def handle_header_click(self, column_name: str, shift_key: bool = False) -> OrderBy:
        """
        Apply a click on a column header.

        Args:
            column_name: Name of the clicked column
            shift_key: Extend the existing ordering instead of replacing it

        Returns:
            The new order-by specification
        """
        return self.state_manager.toggle_order_by(
            self._table_id, column_name, multi_column_sort=shift_key
        )

    @property
    def search_term(self) -> str:
        """Current search term."""
        return self.state_manager.get_search_term(self._table_id)

    def search(self, search_term: Optional[str]) -> "Table":
        """
        Set the search term ('' or None clears the search).

        Returns:
            Self for method chaining
        """
        self.state_manager.set_search_term(self._table_id, search_term)
        return self

    def prepare_columns(self) -> List[Dict[str, Any]]:
        """
        Describe the visible columns for the frontend header.

        Returns:
            List of dicts, in display order, with keys:
            - key: column name
            - title: display title
            - align: content alignment
            - className: 'display-as-<type>'
            - sortDirection: 'ascend', 'descend' or None
            - sortIndex: 1-based sort priority when more than one column is
              sorted, else None
        """
        order_by = self.order_by
        order_by_info = get_order_by_info(order_by)
        is_multi_column_sort = len(order_by) > 1

        result = []
        for column in self.visible_columns():
            info = order_by_info.get(column.name)
            result.append(
                {
                    "key": column.name,
                    "title": column.title,
                    "align": column.align_content.value,
                    "className": f"display-as-{column.display_as.value}",
                    "sortDirection": info["direction"] if info else None,
                    "sortIndex": info["index"] if info and is_multi_column_sort else None,
                }
            )
        return result

    def prepare_rows(self) -> List[Dict[str, Any]]:
        """
        Apply the current search, then the current ordering.

        Returns:
            Matching rows in display order
        """
        rows = filter_rows(
            self._rows, self.search_term, self.search_columns(), self._registry
        )
        return sort_rows(rows, self.order_by)

    def prepare_cells(self, row: Mapping[str, Any]) -> Dict[str, Dict[str, Any]]:
        """
        Project one row through each visible column's type behavior.

        Returns:
            Dict mapping column names to prepare_data() results
        """
        return {
            column.name: self._registry.for_column(column).prepare_data(row)
            for column in self.visible_columns()
        }

    def prepare_data(self) -> Dict[str, Any]:
        """
        Prepare table data for the frontend.

        Returns:
            Dict with tableData (pandas DataFrame of visible columns),
            _hash, orderBy and searchTerm
        """
        rows = self.prepare_rows()
        names = [column.name for column in self.visible_columns()]
        df_pandas: pd.DataFrame = rows_to_pandas(rows, names)
        return {
            "tableData": df_pandas,
            "_hash": compute_rows_hash(rows),
            "orderBy": self.order_by,
            "searchTerm": self.search_term,
        }

    def __repr__(self) -> str:
        return (
            f"Table(table_id='{self._table_id}', "
            f"columns={[column.name for column in self._columns]}, "
            f"rows={len(self._rows)})"
        )
