# tests/test_reporting.py
"""
Tests for property value rendering helpers.
"""

from rich.console import Console

from reporting import build_property_table, build_supported_properties_table, format_property_value, truncate_list
from testcases import TestMethodFilter
from tests.conftest import make_test_case


def _render(table):
    console = Console(width=200, record=True)
    console.print(table)
    return console.export_text()


def test_truncate_list():
    assert truncate_list([]) == ""
    assert truncate_list(["a", None, " ", "b"]) == "a, b"
    assert truncate_list(["a", "b", "c", "d", "e"]) == "a, b, c (+2 more)"


def test_format_property_value():
    assert format_property_value(None) == "-"
    assert format_property_value([]) == "-"
    assert format_property_value(["smoke", "auth"]) == "smoke, auth"
    assert format_property_value(2) == "2"


def test_supported_properties_table_lists_every_property():
    text = _render(build_supported_properties_table())
    for name in ("FullyQualifiedName", "ClassName", "Name", "TestCategory", "Priority"):
        assert name in text
    assert "TestCase.Priority" in text


def test_property_table_rows():
    table = build_property_table(
        [make_test_case("A.B.c", categories=["smoke"], priority=1), make_test_case("A.B.d")],
        TestMethodFilter(),
        ["Name", "TestCategory", "Priority"],
    )
    assert table.row_count == 2
    assert [column.header for column in table.columns] == ["Name", "TestCategory", "Priority"]
    text = _render(table)
    assert "smoke" in text
    assert "-" in text
