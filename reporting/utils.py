"""Utility helpers for rendering test case property values."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

from rich.table import Table

from testcases import SUPPORTED_PROPERTIES, SUPPORTED_PROPERTY_NAMES, TestCase, TestMethodFilter

DEFAULT_MAX_LIST_ITEMS = 3
MISSING_VALUE = "-"


def truncate_list(items: Optional[Iterable[Any]], max_items: int = DEFAULT_MAX_LIST_ITEMS) -> str:
    """Return a comma-separated string capped at *max_items* with a suffix when truncated."""
    if not items:
        return ""

    materialized = [str(item) for item in items if item is not None and str(item).strip()]
    if len(materialized) <= max_items:
        return ", ".join(materialized)

    remaining = len(materialized) - max_items
    return f"{', '.join(materialized[:max_items])} (+{remaining} more)"


def format_property_value(value: Any) -> str:
    """Render a property value for display; absent values become a dash."""
    if value is None:
        return MISSING_VALUE
    if isinstance(value, (list, tuple, set)):
        return truncate_list(value) or MISSING_VALUE
    return str(value)


def build_supported_properties_table() -> Table:
    """Table describing every filterable property."""
    table = Table(title="Supported filter properties")
    table.add_column("Name", style="cyan")
    table.add_column("Id")
    table.add_column("Type")
    table.add_column("Owner")
    for label, prop in SUPPORTED_PROPERTIES.items():
        table.add_row(label, prop.id, prop.value_type.__name__, prop.owner_type)
    return table


def build_property_table(
    test_cases: Iterable[TestCase],
    resolver: TestMethodFilter,
    property_names: Optional[Sequence[str]] = None,
) -> Table:
    """Table with one row per test case and one column per property."""
    names = list(property_names or SUPPORTED_PROPERTY_NAMES)
    table = Table(title="Test case properties")
    for name in names:
        table.add_column(name, overflow="fold")

    for test_case in test_cases:
        table.add_row(*(
            format_property_value(resolver.property_value_provider(test_case, name))
            for name in names
        ))
    return table
