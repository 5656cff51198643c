"""Column definitions for table visualizations."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union


class UnknownColumnType(KeyError):
    """Raised when a column's display type is not one of the supported tags.

    Column definitions must be validated before they reach sorting or
    filtering; there is no fallback type.

    Attributes:
        display_as: The offending tag
        available: Tags that would have been accepted
    """

    def __init__(self, display_as: Any, available: List[str]):
        self.display_as = display_as
        self.available = list(available)
        super().__init__(
            f"Unknown column type '{display_as}'. "
            f"Available column types: {self.available}"
        )

    def __str__(self) -> str:
        return self.args[0]


class DisplayAs(str, Enum):
    """Closed set of column display types."""

    TEXT = "string"
    NUMBER = "number"
    DATETIME = "datetime"
    BOOLEAN = "boolean"
    LINK = "link"
    IMAGE = "image"
    STRUCTURED = "json"

    @classmethod
    def parse(cls, value: Union[str, "DisplayAs"]) -> "DisplayAs":
        """
        Convert a display tag to a DisplayAs member.

        Accepts the member itself, its tag, or one of the aliases
        "text" and "structured".

        Raises:
            UnknownColumnType: If the tag is not supported
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            value = _DISPLAY_AS_ALIASES.get(value, value)
            for member in cls:
                if member.value == value:
                    return member
        raise UnknownColumnType(value, [member.value for member in cls])


_DISPLAY_AS_ALIASES = {
    "text": "string",
    "structured": "json",
}


class AlignContent(str, Enum):
    """Horizontal alignment of cell content."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# Definition keys that map onto Column attributes; everything else is an option
_DEFINITION_KEYS = {
    "name": "name",
    "title": "title",
    "displayAs": "display_as",
    "display_as": "display_as",
    "order": "order",
    "visible": "visible",
    "alignContent": "align_content",
    "align_content": "align_content",
    "allowSearch": "allow_search",
    "allow_search": "allow_search",
}


@dataclass(frozen=True)
class Column:
    """
    A single table column.

    Attributes:
        name: Key used to look up the column's value in each row. May be any
            string, including the empty string.
        title: Display label (defaults to name)
        display_as: Display type, selects the column type behavior
        order: Display position; lower values come first
        visible: Whether the column is shown
        align_content: Cell alignment
        allow_search: Whether the column takes part in text search by default
        options: Type-specific formatting options (e.g. numberFormat)
    """

    name: str
    title: Optional[str] = None
    display_as: DisplayAs = DisplayAs.TEXT
    order: int = 0
    visible: bool = True
    align_content: AlignContent = AlignContent.LEFT
    allow_search: bool = False
    options: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # Frozen dataclass: normalize through object.__setattr__
        if self.title is None:
            object.__setattr__(self, "title", self.name)
        object.__setattr__(self, "display_as", DisplayAs.parse(self.display_as))
        try:
            align = AlignContent(self.align_content)
        except ValueError:
            raise ValueError(
                f"Invalid alignContent '{self.align_content}' for column "
                f"'{self.name}'. Expected one of {[a.value for a in AlignContent]}"
            ) from None
        object.__setattr__(self, "align_content", align)
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    @classmethod
    def from_dict(cls, definition: Mapping[str, Any]) -> "Column":
        """
        Build a Column from a column definition dict.

        Both snake_case and the frontend's camelCase keys are accepted.
        Unrecognized keys are kept as type-specific options.

        Example:
            Column.from_dict({
                "name": "price",
                "displayAs": "number",
                "numberFormat": "0,0.00",
            })
        """
        kwargs: Dict[str, Any] = {}
        options: Dict[str, Any] = dict(definition.get("options") or {})
        for key, value in definition.items():
            if key == "options":
                continue
            if key in _DEFINITION_KEYS:
                kwargs[_DEFINITION_KEYS[key]] = value
            else:
                options[key] = value
        if "name" not in kwargs:
            raise ValueError(f"Column definition is missing 'name': {dict(definition)}")
        return cls(options=options, **kwargs)

    def get_option(self, key: str, default: Any = None) -> Any:
        """Get a type-specific option, falling back to default."""
        return self.options.get(key, default)


def as_column(column: Union[Column, Mapping[str, Any]]) -> Column:
    """Return column unchanged if it is a Column, else build one from a dict."""
    if isinstance(column, Column):
        return column
    return Column.from_dict(column)
