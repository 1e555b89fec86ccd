"""Shared reporting utilities."""

from .utils import (
    build_property_table,
    build_supported_properties_table,
    format_property_value,
    truncate_list,
)

__all__ = [
    "build_property_table",
    "build_supported_properties_table",
    "format_property_value",
    "truncate_list",
]
