"""Numeric columns with numeral-style formatting."""

import numbers
import re
from typing import Any, Dict, Mapping

from ..core.registry import register_column_type
from .base import ColumnType, is_nil

DEFAULT_NUMBER_FORMAT = "0,0[.]00"

# Numeric part of a format; text around it is copied literally
_NUMBER_PATTERN = re.compile(r"[0\[][0,.\[\]]*")


def format_number(value: Any, number_format: str = DEFAULT_NUMBER_FORMAT) -> str:
    """
    Format a number with a numeral-style format string.

    Supported syntax:
        - ``,`` in the integer part: thousands separators ("0,0")
        - zeros after ``.``: fixed number of decimals ("0.000")
        - ``[.]`` or ``[0]`` decimals: optional, trailing zeros dropped ("0[.]00")
        - ``%`` after the number: multiply by 100 ("0.0%")
        - any other text before or after the number is kept ("$0,0.00")

    Strings are parsed as floats; values that are not numbers are returned
    as str().

    Examples:
        format_number(1234.5)             # '1,234.5'
        format_number(1234.5, "0,0.00")   # '1,234.50'
        format_number(0.256, "0.0%")      # '25.6%'
        format_number(1234.5, "$0,0.00")  # '$1,234.50'
    """
    if is_nil(value):
        return ""
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return value
    if not isinstance(value, numbers.Number) or isinstance(value, bool):
        return str(value)

    number_format = number_format or DEFAULT_NUMBER_FORMAT
    match = _NUMBER_PATTERN.search(number_format)
    if match is None:
        return str(value)
    prefix = number_format[: match.start()]
    suffix = number_format[match.end() :]
    pattern = match.group(0)

    if "%" in suffix:
        value = value * 100

    optional = "[" in pattern
    integer_part, _, decimal_part = pattern.replace("[.]", ".").partition(".")
    decimals = decimal_part.count("0")
    separator = "," if "," in integer_part else ""

    text = f"{value:{separator}.{decimals}f}"
    if optional and decimals:
        text = text.rstrip("0").rstrip(".")
    # Values that round to zero print without a sign
    if text.startswith("-") and not any(digit in text for digit in "123456789"):
        text = text[1:]
    return prefix + text + suffix


@register_column_type("number")
class NumberColumn(ColumnType):
    """
    Number column.

    Options:
        numberFormat: Numeral-style format (default "0,0[.]00")
    """

    def prepare_data(self, row: Mapping[str, Any]) -> Dict[str, Any]:
        value = self.get_value(row)
        number_format = self.column.get_option("numberFormat", DEFAULT_NUMBER_FORMAT)
        return {"text": format_number(value, number_format), "value": value}
