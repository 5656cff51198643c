"""Image columns built from a URL template."""

from typing import Any, Dict, Mapping

from ..core.registry import register_column_type
from .base import ColumnType, format_simple_template
from .link import DEFAULT_LINK_TEMPLATE, template_data


@register_column_type("image")
class ImageColumn(ColumnType):
    """
    Image column.

    Options:
        imageUrlTemplate: Template for the image source (default "{{ @ }}")
        imageTitleTemplate: Template for the tooltip (default "{{ @ }}")
        imageWidth: Width in pixels ('' keeps the natural width)
        imageHeight: Height in pixels ('' keeps the natural height)

    The searchable text is the title, or the source URL when there is none.
    """

    def prepare_data(self, row: Mapping[str, Any]) -> Dict[str, Any]:
        data = template_data(row, self.get_value(row))
        option = self.column.get_option

        src = format_simple_template(
            option("imageUrlTemplate", DEFAULT_LINK_TEMPLATE), data
        ).strip()
        title = format_simple_template(
            option("imageTitleTemplate", DEFAULT_LINK_TEMPLATE), data
        ).strip()

        return {
            "text": title or src,
            "src": src,
            "title": title,
            "width": str(option("imageWidth", "") or ""),
            "height": str(option("imageHeight", "") or ""),
        }
