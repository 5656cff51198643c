"""Plain text columns."""

from typing import Any, Dict, Mapping

from ..core.registry import register_column_type
from .base import ColumnType, to_text


@register_column_type("string")
class TextColumn(ColumnType):
    """
    Text column.

    Options:
        allowHTML: Render the value as HTML instead of escaped text
        highlightLinks: Turn URLs in the text into links
    """

    def prepare_data(self, row: Mapping[str, Any]) -> Dict[str, Any]:
        return {
            "text": to_text(self.get_value(row)),
            "allowHTML": bool(self.column.get_option("allowHTML", False)),
            "highlightLinks": bool(self.column.get_option("highlightLinks", False)),
        }
