"""Column type registry mapping display types to column behaviors."""

from typing import TYPE_CHECKING, Dict, List, Mapping, Optional, Type, Union

from .columns import Column, DisplayAs, UnknownColumnType

if TYPE_CHECKING:
    from ..column_types.base import ColumnType

# Built-in behaviors, filled by @register_column_type in table_insight.column_types
_BUILTIN_COLUMN_TYPES: Dict[DisplayAs, Type["ColumnType"]] = {}


def register_column_type(display_as: Union[str, DisplayAs]):
    """
    Decorator to register a built-in column type behavior.

    Args:
        display_as: Display type handled by the class (e.g., 'number')

    Returns:
        Decorator function

    Example:
        @register_column_type("number")
        class NumberColumn(ColumnType):
            ...
    """
    key = DisplayAs.parse(display_as)

    def decorator(cls: Type["ColumnType"]) -> Type["ColumnType"]:
        if key in _BUILTIN_COLUMN_TYPES:
            raise ValueError(
                f"Column type '{key.value}' is already registered to "
                f"{_BUILTIN_COLUMN_TYPES[key].__name__}"
            )
        _BUILTIN_COLUMN_TYPES[key] = cls
        cls.display_as = key
        return cls

    return decorator


def builtin_column_types() -> Dict[DisplayAs, Type["ColumnType"]]:
    """
    Get the built-in column type behaviors.

    Returns:
        Dict mapping display types to their classes
    """
    # Importing the package runs the @register_column_type decorators
    from .. import column_types  # noqa: F401

    return _BUILTIN_COLUMN_TYPES.copy()


class ColumnTypeRegistry:
    """
    Resolves column display types to column type behaviors.

    A registry is an explicit value passed to the filter engine and the
    Table component, so tests and applications can substitute their own
    behaviors. Every DisplayAs member must be covered.

    Example:
        registry = ColumnTypeRegistry()
        behavior = registry.for_column(Column("price", display_as="number"))
        behavior.text_of({"price": 1234.5})  # '1,234.5'
    """

    def __init__(
        self,
        types: Optional[Mapping[Union[str, DisplayAs], Type["ColumnType"]]] = None,
    ):
        """
        Initialize the registry.

        Args:
            types: Mapping of display types to behavior classes. Defaults to
                the built-in behaviors.

        Raises:
            ValueError: If a display type has no behavior
        """
        if types is None:
            resolved = builtin_column_types()
        else:
            resolved = {DisplayAs.parse(key): cls for key, cls in types.items()}

        missing = [member.value for member in DisplayAs if member not in resolved]
        if missing:
            raise ValueError(
                f"Column type registry is missing behaviors for: {missing}"
            )
        self._types: Dict[DisplayAs, Type["ColumnType"]] = resolved

    def resolve(self, display_as: Union[str, DisplayAs]) -> Type["ColumnType"]:
        """
        Get the behavior class for a display type.

        Args:
            display_as: DisplayAs member or display tag

        Returns:
            The column type class

        Raises:
            UnknownColumnType: If the display type is not supported
        """
        key = DisplayAs.parse(display_as)
        if key not in self._types:
            raise UnknownColumnType(display_as, self.display_types())
        return self._types[key]

    def for_column(self, column: Column) -> "ColumnType":
        """Instantiate the behavior bound to a column."""
        return self.resolve(column.display_as)(column)

    def display_types(self) -> List[str]:
        """Get all registered display tags."""
        return [key.value for key in self._types]

    def __contains__(self, display_as: object) -> bool:
        try:
            key = DisplayAs.parse(display_as)
        except UnknownColumnType:
            return False
        return key in self._types

    def __repr__(self) -> str:
        return f"ColumnTypeRegistry(types={self.display_types()})"
