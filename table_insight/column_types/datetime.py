"""Date and time columns."""

import datetime as dt
import numbers
from typing import Any, Dict, Mapping, Optional

import pandas as pd

from ..core.registry import register_column_type
from .base import ColumnType, is_nil, to_text

DEFAULT_DATETIME_FORMAT = "%d/%m/%y %H:%M"

# Strings pandas resolves against the clock
_RELATIVE_KEYWORDS = {"now", "today", "tomorrow", "yesterday"}


def parse_datetime(value: Any) -> Optional[pd.Timestamp]:
    """
    Interpret a raw value as a timestamp.

    Accepts datetime/date objects, pandas Timestamps, numpy datetime64
    values and strings pandas can parse. Numbers are not treated as epochs,
    and relative keywords such as "now" or "today" are not dates.

    Returns:
        The Timestamp, or None if the value is not a valid date/time
    """
    if is_nil(value) or isinstance(value, numbers.Number):
        return None
    if not isinstance(value, (str, dt.date, pd.Timestamp)) and not hasattr(value, "dtype"):
        return None
    if isinstance(value, str) and value.strip().lower() in _RELATIVE_KEYWORDS:
        return None
    try:
        timestamp = pd.Timestamp(value)
    except (ValueError, TypeError, OverflowError):
        return None
    if pd.isna(timestamp):
        return None
    return timestamp


def format_datetime(value: Any, datetime_format: str = DEFAULT_DATETIME_FORMAT) -> str:
    """
    Format a date/time value with a strftime format.

    Values that cannot be parsed are returned as text unchanged.
    """
    timestamp = parse_datetime(value)
    if timestamp is None:
        return to_text(value)
    return timestamp.strftime(datetime_format or DEFAULT_DATETIME_FORMAT)


@register_column_type("datetime")
class DateTimeColumn(ColumnType):
    """
    Date/time column.

    Options:
        dateTimeFormat: strftime format (default "%d/%m/%y %H:%M")
    """

    def prepare_data(self, row: Mapping[str, Any]) -> Dict[str, Any]:
        value = self.get_value(row)
        datetime_format = self.column.get_option(
            "dateTimeFormat", DEFAULT_DATETIME_FORMAT
        )
        return {"text": format_datetime(value, datetime_format), "value": value}
