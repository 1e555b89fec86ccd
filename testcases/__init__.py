"""Test case model and filter resolution for test runs."""

from .catalog import (
    CatalogError,
    TestCase,
    TestCaseCatalog,
    load_test_catalog,
    split_fully_qualified_name,
)
from .filter import TestMethodFilter
from .messages import LoguruMessageLogger, MessageLevel, MessageLogger
from .properties import (
    CLASS_NAME,
    FULLY_QUALIFIED_NAME,
    NAME,
    PRIORITY,
    SUPPORTED_PROPERTIES,
    SUPPORTED_PROPERTY_NAMES,
    TEST_CATEGORY,
    TestProperty,
)
from .run_context import (
    CallableRunContext,
    FilterFormatError,
    RunContext,
    TestCaseFilterExpression,
)

__all__ = [
    "CatalogError",
    "TestCase",
    "TestCaseCatalog",
    "load_test_catalog",
    "split_fully_qualified_name",
    "TestMethodFilter",
    "LoguruMessageLogger",
    "MessageLevel",
    "MessageLogger",
    "TestProperty",
    "SUPPORTED_PROPERTIES",
    "SUPPORTED_PROPERTY_NAMES",
    "FULLY_QUALIFIED_NAME",
    "CLASS_NAME",
    "NAME",
    "TEST_CATEGORY",
    "PRIORITY",
    "CallableRunContext",
    "FilterFormatError",
    "RunContext",
    "TestCaseFilterExpression",
]
