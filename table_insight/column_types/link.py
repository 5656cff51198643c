"""Link columns built from URL and text templates."""

from typing import Any, Dict, Mapping

from ..core.registry import register_column_type
from .base import ColumnType, format_simple_template

DEFAULT_LINK_TEMPLATE = "{{ @ }}"


def template_data(row: Mapping[str, Any], value: Any) -> Dict[str, Any]:
    """Row values plus the cell value under the '@' key."""
    data = dict(row)
    data["@"] = value
    return data


@register_column_type("link")
class LinkColumn(ColumnType):
    """
    Link column.

    Options:
        linkUrlTemplate: Template for the href (default "{{ @ }}")
        linkTextTemplate: Template for the link text (default "{{ @ }}")
        linkTitleTemplate: Template for the tooltip (default "{{ @ }}")
        linkOpenInNewTab: Open the link in a new tab (default True)

    Templates may reference any row value as ``{{ column_name }}``.
    """

    def prepare_data(self, row: Mapping[str, Any]) -> Dict[str, Any]:
        data = template_data(row, self.get_value(row))
        option = self.column.get_option

        href = format_simple_template(
            option("linkUrlTemplate", DEFAULT_LINK_TEMPLATE), data
        ).strip()
        text = format_simple_template(
            option("linkTextTemplate", DEFAULT_LINK_TEMPLATE), data
        ).strip()
        title = format_simple_template(
            option("linkTitleTemplate", DEFAULT_LINK_TEMPLATE), data
        ).strip()

        return {
            "text": text or href,
            "href": href,
            "title": title,
            "target": "_blank" if option("linkOpenInNewTab", True) else "_self",
        }
