# tests/conftest.py
"""
Shared fixtures and stub collaborators for testfilter tests.
"""

import json

import pytest
from loguru import logger

from testcases import (
    PRIORITY,
    TEST_CATEGORY,
    MessageLevel,
    MessageLogger,
    TestCase,
    TestCaseFilterExpression,
)

EXECUTOR_URI = "executor://testfilter/v1"
FULL_NAME = "tests.dummy.DummyTestClassWithTestMethods.test_method"


class RecordingMessageLogger(MessageLogger):
    """Remembers every message it receives."""

    def __init__(self):
        self.calls = []

    def send_message(self, level, message):
        self.calls.append((level, message))

    @property
    def last_level(self):
        return self.calls[-1][0] if self.calls else None

    @property
    def last_message(self):
        return self.calls[-1][1] if self.calls else None


class NeverCalledExpression(TestCaseFilterExpression):
    """Expression stub for tests that only check identity."""

    @property
    def filter_value(self):
        return "Priority=1"

    def match_test_case(self, test_case, value_provider):
        raise NotImplementedError


class EqualsExpression(TestCaseFilterExpression):
    """Matches when a property equals, or for lists contains, a value."""

    def __init__(self, property_name, expected):
        self.property_name = property_name
        self.expected = expected

    @property
    def filter_value(self):
        return f"{self.property_name}={self.expected}"

    def match_test_case(self, test_case, value_provider):
        actual = value_provider(self.property_name)
        if isinstance(actual, list):
            return self.expected in actual
        return actual == self.expected


def make_test_case(fully_qualified_name=FULL_NAME, categories=None, priority=None):
    test_case = TestCase(fully_qualified_name, EXECUTOR_URI, "tests/dummy.py")
    if categories is not None:
        test_case.set_property_value(TEST_CATEGORY, categories)
    if priority is not None:
        test_case.set_property_value(PRIORITY, priority)
    return test_case


@pytest.fixture
def test_case():
    return make_test_case()


@pytest.fixture
def recorder():
    return RecordingMessageLogger()


@pytest.fixture
def log_records():
    """Capture loguru records emitted during a test."""
    records = []
    sink_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(sink_id)


@pytest.fixture
def catalog_file(tmp_path):
    entries = [
        {
            "fully_qualified_name": "pkg.mod.LoginTests.test_valid_password",
            "executor_uri": EXECUTOR_URI,
            "source": "pkg/mod.py",
            "test_category": ["smoke", "auth"],
            "priority": 1,
        },
        {
            "fully_qualified_name": "pkg.mod.LoginTests.test_locked_account",
            "executor_uri": EXECUTOR_URI,
            "source": "pkg/mod.py",
        },
    ]
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"test_cases": entries}), encoding="utf-8")
    return path
