"""
Test Method Filter

Resolves filter property names to descriptors, extracts property values from
test cases, and builds the run's filter expression. A filter string that
fails to parse is reported through the message logger instead of aborting
the run.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Tuple

from loguru import logger

from .catalog import TestCase, split_fully_qualified_name
from .messages import MessageLevel, MessageLogger
from .properties import (
    CLASS_NAME,
    FULLY_QUALIFIED_NAME,
    NAME,
    PRIORITY,
    SUPPORTED_PROPERTY_NAMES,
    TEST_CATEGORY,
    TestProperty,
    lookup_property,
)
from .run_context import FilterFormatError, RunContext, TestCaseFilterExpression


def _class_name(test_case: TestCase) -> Optional[str]:
    return split_fully_qualified_name(test_case.fully_qualified_name)[0]


def _method_name(test_case: TestCase) -> Optional[str]:
    return split_fully_qualified_name(test_case.fully_qualified_name)[1]


_VALUE_EXTRACTORS: Dict[TestProperty, Callable[[TestCase], Any]] = {
    FULLY_QUALIFIED_NAME: lambda tc: tc.fully_qualified_name,
    CLASS_NAME: _class_name,
    NAME: _method_name,
    TEST_CATEGORY: lambda tc: tc.get_property_value(TEST_CATEGORY),
    PRIORITY: lambda tc: tc.get_property_value(PRIORITY),
}


class TestMethodFilter:
    """Filter resolver shared by discovery and execution.

    Holds no state of its own; every method is safe to call concurrently.
    """

    __test__ = False

    def property_provider(self, property_name: Optional[str]) -> Optional[TestProperty]:
        """Return the descriptor for a supported property name, or None."""
        return lookup_property(property_name)

    def property_value_provider(self, test_case: Optional[TestCase], property_name: Optional[str]) -> Any:
        """Return the value of *property_name* for *test_case*.

        None is returned when the test case is missing, the property is not
        supported, or the test case carries no value for it.
        """
        if test_case is None:
            return None

        prop = self.property_provider(property_name)
        if prop is None:
            return None

        return _VALUE_EXTRACTORS[prop](test_case)

    def get_filter_expression(
        self,
        run_context: Optional[RunContext],
        message_logger: MessageLogger,
    ) -> Tuple[Optional[TestCaseFilterExpression], bool]:
        """Build the filter expression for the run.

        Returns:
            (expression, has_error). The expression is None when no run
            context was given or when the filter failed to parse; has_error
            is True only in the latter case.
        """
        if run_context is None:
            return None, False

        try:
            expression = run_context.get_test_case_filter(
                SUPPORTED_PROPERTY_NAMES, self.property_value_provider
            )
        except FilterFormatError as e:
            message_logger.send_message(MessageLevel.ERROR, e.message)
            return None, True

        if expression is not None:
            logger.debug(f"Using test case filter: {getattr(expression, 'filter_value', expression)}")
        return expression, False

    def filter_test_cases(
        self,
        test_cases: Iterable[TestCase],
        expression: Optional[TestCaseFilterExpression],
    ) -> Iterator[TestCase]:
        """Yield the test cases that satisfy *expression*.

        All test cases are yielded when no expression is configured.
        """
        for test_case in test_cases:
            if expression is None or expression.match_test_case(
                test_case, lambda name, tc=test_case: self.property_value_provider(tc, name)
            ):
                yield test_case
            else:
                logger.debug(f"Skipping {test_case.fully_qualified_name}: does not match filter")
