"""Filterable test case properties.

The five descriptors below are the only properties a filter expression may
reference. They are created once at import time and shared read-only.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class TestProperty:
    """Describes one filterable attribute of a test case.

    Attributes:
        id: Stable identifier (e.g., 'TestCase.FullyQualifiedName')
        label: Name used in filter expressions (e.g., 'FullyQualifiedName')
        value_type: Python type of the property value
        owner_type: Name of the type that owns the property
    """
    __test__ = False

    id: str
    label: str
    value_type: type
    owner_type: str = "TestCase"


FULLY_QUALIFIED_NAME = TestProperty("TestCase.FullyQualifiedName", "FullyQualifiedName", str)
CLASS_NAME = TestProperty("TestCase.ClassName", "ClassName", str)
NAME = TestProperty("TestCase.Name", "Name", str)
TEST_CATEGORY = TestProperty("TestCase.TestCategory", "TestCategory", list)
PRIORITY = TestProperty("TestCase.Priority", "Priority", int)

SUPPORTED_PROPERTIES: Mapping[str, TestProperty] = MappingProxyType({
    prop.label: prop
    for prop in (FULLY_QUALIFIED_NAME, CLASS_NAME, NAME, TEST_CATEGORY, PRIORITY)
})

SUPPORTED_PROPERTY_NAMES: Tuple[str, ...] = tuple(SUPPORTED_PROPERTIES)


def lookup_property(name: Optional[str]) -> Optional[TestProperty]:
    """Return the descriptor registered under *name*, or None."""
    if not isinstance(name, str):
        return None
    return SUPPORTED_PROPERTIES.get(name)
