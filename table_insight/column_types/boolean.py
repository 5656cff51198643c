"""Boolean columns."""

from typing import Any, Dict, Mapping

from ..core.registry import register_column_type
from .base import ColumnType, is_nil

DEFAULT_BOOLEAN_VALUES = ("false", "true")


@register_column_type("boolean")
class BooleanColumn(ColumnType):
    """
    Boolean column.

    Options:
        booleanValues: Pair of labels for false and true values
    """

    def prepare_data(self, row: Mapping[str, Any]) -> Dict[str, Any]:
        value = self.get_value(row)
        if is_nil(value):
            return {"text": "", "value": None}

        labels = self.column.get_option("booleanValues") or DEFAULT_BOOLEAN_VALUES
        value = bool(value)
        return {"text": str(labels[1 if value else 0]), "value": value}
