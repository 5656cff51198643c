"""Columns holding structured (JSON) values."""

import json
from typing import Any, Dict, Mapping

from ..core.registry import register_column_type
from .base import ColumnType, is_nil


@register_column_type("json")
class StructuredColumn(ColumnType):
    """
    Column of JSON documents.

    Strings are parsed as JSON when possible so that equivalent documents
    share the same text; other values are serialized directly.
    """

    def prepare_data(self, row: Mapping[str, Any]) -> Dict[str, Any]:
        value = self.get_value(row)
        if is_nil(value):
            return {"text": "", "value": None}

        if isinstance(value, str):
            try:
                value = json.loads(value)
            except ValueError:
                # Not JSON: show the raw string
                return {"text": value, "value": value}

        return {"text": json.dumps(value, default=str), "value": value}
