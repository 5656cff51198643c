"""Base class for column type behaviors."""

import json
import re
from typing import Any, Dict, Mapping, Optional

from ..core.columns import Column, DisplayAs

_TEMPLATE_PLACEHOLDER = re.compile(r"{{\s*([^\s]+?)\s*}}")


def is_nil(value: Any) -> bool:
    """Return True for the missing-value marker (None)."""
    return value is None


def to_text(value: Any) -> str:
    """
    Convert a raw cell value to text.

    None becomes '', dicts and lists become JSON, everything else uses str().
    """
    if is_nil(value):
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, default=str)
    return str(value)


def format_simple_template(template: str, data: Mapping[str, Any]) -> str:
    """
    Substitute ``{{ key }}`` placeholders with values from data.

    Placeholders whose key is missing (or None) are replaced by ''.

    Example:
        format_simple_template("/users/{{ id }}", {"id": 7})  # '/users/7'
    """
    if not template:
        return ""

    def replace(match: "re.Match") -> str:
        return to_text(data.get(match.group(1)))

    return _TEMPLATE_PLACEHOLDER.sub(replace, template)


class ColumnType:
    """
    Behavior of a column display type.

    Subclasses implement prepare_data(), which projects a row's value for
    this column into a dict with at least a ``text`` key. The text is what
    search matches against; the remaining keys are for the renderer.

    Attributes:
        column: The column this behavior is bound to
        display_as: Display type handled (set by @register_column_type)
    """

    display_as: Optional[DisplayAs] = None

    def __init__(self, column: Column):
        self.column = column

    def get_value(self, row: Mapping[str, Any]) -> Any:
        """Look up this column's raw value in a row (None when missing)."""
        return row.get(self.column.name)

    def prepare_data(self, row: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Project a row's value for display.

        Args:
            row: Row mapping column names to raw values

        Returns:
            Dict with at least a 'text' key
        """
        return {"text": to_text(self.get_value(row))}

    def text_of(self, row: Mapping[str, Any]) -> str:
        """Get the searchable text of a row's value."""
        return self.prepare_data(row)["text"]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(column='{self.column.name}')"
