"""Built-in column type behaviors, one per display type."""

from .base import ColumnType, format_simple_template, to_text
from .boolean import BooleanColumn
from .datetime import DateTimeColumn
from .image import ImageColumn
from .link import LinkColumn
from .number import NumberColumn
from .structured import StructuredColumn
from .text import TextColumn

__all__ = [
    "ColumnType",
    "TextColumn",
    "NumberColumn",
    "DateTimeColumn",
    "BooleanColumn",
    "LinkColumn",
    "ImageColumn",
    "StructuredColumn",
    "format_simple_template",
    "to_text",
]
