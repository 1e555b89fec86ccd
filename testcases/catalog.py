"""
Test Case Catalog Module

This module provides the test case record consumed by the filter resolver,
helpers for splitting fully-qualified test names into their class and method
parts, and a catalog container that can be loaded from a JSON file produced
by an upstream discovery step.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from loguru import logger

from .properties import PRIORITY, TEST_CATEGORY, TestProperty


class CatalogError(Exception):
    """Raised when a test catalog file cannot be read or is malformed."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path


@dataclass
class TestCase:
    """A discovered test case.

    Attributes:
        fully_qualified_name: 'Namespace.Class.Method' style name
        executor_uri: Identifier of the executor that discovered the test
        source: Container the test was discovered in (assembly, module, file)
        display_name: Optional human-readable name
    """
    __test__ = False

    fully_qualified_name: str
    executor_uri: str
    source: str
    display_name: Optional[str] = None
    _properties: Dict[TestProperty, Any] = field(default_factory=dict, repr=False, compare=False)

    def get_property_value(self, prop: TestProperty, default: Any = None) -> Any:
        """Get the value attached for *prop*, or *default* when never attached."""
        return self._properties.get(prop, default)

    def set_property_value(self, prop: TestProperty, value: Any) -> None:
        """Attach a property value (done by upstream discovery)."""
        self._properties[prop] = value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: Dict[str, Any] = {
            "fully_qualified_name": self.fully_qualified_name,
            "executor_uri": self.executor_uri,
            "source": self.source,
            "display_name": self.display_name,
        }
        categories = self.get_property_value(TEST_CATEGORY)
        if categories is not None:
            data["test_category"] = list(categories)
        priority = self.get_property_value(PRIORITY)
        if priority is not None:
            data["priority"] = priority
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TestCase":
        """Build a test case from a catalog entry.

        Raises:
            CatalogError: if a required key is missing or a value has the wrong type
        """
        if not isinstance(data, dict):
            raise CatalogError(f"Test case entry must be an object, got {type(data).__name__}")

        missing = [
            key for key in ("fully_qualified_name", "executor_uri", "source")
            if not data.get(key)
        ]
        if missing:
            raise CatalogError(f"Test case entry is missing: {', '.join(missing)}")

        test_case = cls(
            fully_qualified_name=str(data["fully_qualified_name"]),
            executor_uri=str(data["executor_uri"]),
            source=str(data["source"]),
            display_name=data.get("display_name"),
        )

        categories = data.get("test_category")
        if categories is not None:
            if isinstance(categories, str):
                categories = [categories]
            if not isinstance(categories, list):
                raise CatalogError(
                    f"test_category of {test_case.fully_qualified_name} must be a list"
                )
            test_case.set_property_value(TEST_CATEGORY, [str(c) for c in categories])

        priority = data.get("priority")
        if priority is not None:
            # bool is an int subclass, reject it explicitly
            if isinstance(priority, bool) or not isinstance(priority, int):
                raise CatalogError(
                    f"priority of {test_case.fully_qualified_name} must be an integer"
                )
            test_case.set_property_value(PRIORITY, priority)

        return test_case


def split_fully_qualified_name(fully_qualified_name: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """Split a fully-qualified test name into (class name, method name).

    The split happens on the last dot outside any parenthesised or bracketed
    argument list, so parameterized names keep their arguments intact:

    - 'Ns.Class.Method' -> ('Ns.Class', 'Method')
    - 'Ns.Class.Method(1.5, "a.b")' -> ('Ns.Class', 'Method(1.5, "a.b")')
    - 'Method' -> (None, 'Method')
    - 'Ns.Class.' -> ('Ns.Class', None)
    """
    if not fully_qualified_name:
        return None, None

    depth = 0
    for index in range(len(fully_qualified_name) - 1, -1, -1):
        char = fully_qualified_name[index]
        if char in ")]":
            depth += 1
        elif char in "([":
            depth = max(depth - 1, 0)
        elif char == "." and depth == 0:
            return fully_qualified_name[:index] or None, fully_qualified_name[index + 1:] or None

    return None, fully_qualified_name


class TestCaseCatalog:
    """Container for discovered test cases, keyed by fully-qualified name."""

    __test__ = False

    def __init__(self, test_cases: Optional[Iterable[TestCase]] = None):
        self._test_cases: Dict[str, TestCase] = {}
        self._by_class: Dict[str, List[str]] = {}
        for test_case in test_cases or []:
            self.add(test_case)

    def add(self, test_case: TestCase) -> str:
        """Add a test case and return its key."""
        key = test_case.fully_qualified_name
        if key in self._test_cases:
            logger.debug(f"Replacing duplicate test case: {key}")
        else:
            class_name, _ = split_fully_qualified_name(key)
            self._by_class.setdefault(class_name or "", []).append(key)
        self._test_cases[key] = test_case
        return key

    def get(self, key: str) -> Optional[TestCase]:
        """Get a test case by fully-qualified name."""
        return self._test_cases.get(key)

    def get_all(self) -> List[TestCase]:
        """Get all test cases in insertion order."""
        return list(self._test_cases.values())

    def get_by_class(self, class_name: str) -> List[TestCase]:
        """Get all test methods of a class."""
        keys = self._by_class.get(class_name, [])
        return [self._test_cases[k] for k in keys]

    def count(self) -> int:
        """Total number of test cases."""
        return len(self._test_cases)

    def __iter__(self):
        return iter(self.get_all())

    def __len__(self) -> int:
        return self.count()

    def to_dict(self) -> Dict[str, Any]:
        """Convert catalog to dictionary for serialization."""
        return {
            "total_count": self.count(),
            "by_class": {
                class_name: len(keys) for class_name, keys in self._by_class.items()
            },
            "test_cases": [tc.to_dict() for tc in self._test_cases.values()],
        }


def load_test_catalog(path: Union[str, Path]) -> TestCaseCatalog:
    """Load a catalog from a JSON file.

    The file holds either a list of test case objects or an object with a
    'test_cases' list.

    Raises:
        CatalogError: if the file is missing, unreadable, not valid UTF-8 JSON, or malformed
    """
    catalog_path = Path(path)
    try:
        raw = json.loads(catalog_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise CatalogError(f"Catalog file not found: {catalog_path}", str(catalog_path))
    except json.JSONDecodeError as e:
        raise CatalogError(f"Failed to parse catalog {catalog_path}: {e}", str(catalog_path))
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogError(f"Failed to read catalog {catalog_path}: {e}", str(catalog_path))

    entries = raw.get("test_cases") if isinstance(raw, dict) else raw
    if not isinstance(entries, list):
        raise CatalogError(
            f"Catalog {catalog_path} must contain a list of test cases", str(catalog_path)
        )

    catalog = TestCaseCatalog()
    for entry in entries:
        try:
            catalog.add(TestCase.from_dict(entry))
        except CatalogError as e:
            e.path = str(catalog_path)
            raise

    logger.info(f"Loaded {catalog.count()} test cases from {catalog_path}")
    return catalog
