"""Run context and filter expression interfaces.

The filter grammar lives outside this package. A run context hands the
configured filter string to whatever parser it wraps and returns the
resulting expression object.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence

from .catalog import TestCase

ValueProvider = Callable[[Optional[TestCase], Optional[str]], Any]
FilterFactory = Callable[[Sequence[str], ValueProvider], Optional["TestCaseFilterExpression"]]


class FilterFormatError(Exception):
    """Raised when the configured test case filter cannot be parsed."""

    def __init__(self, message: str, filter_value: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.filter_value = filter_value

    def __str__(self) -> str:
        return self.message


class TestCaseFilterExpression(ABC):
    """A parsed filter that decides whether a test case should run."""

    __test__ = False

    @property
    @abstractmethod
    def filter_value(self) -> str:
        """The filter string this expression was built from."""

    @abstractmethod
    def match_test_case(self, test_case: TestCase, value_provider: Callable[[str], Any]) -> bool:
        """Return True when *test_case* satisfies the filter.

        Args:
            test_case: The test case being evaluated
            value_provider: Maps a property name to the test case's value, or None
        """


class RunContext(ABC):
    """Settings of a single test run relevant to filtering."""

    @abstractmethod
    def get_test_case_filter(
        self,
        supported_properties: Sequence[str],
        value_provider: ValueProvider,
    ) -> Optional[TestCaseFilterExpression]:
        """Build the filter expression for this run.

        Raises:
            FilterFormatError: if the configured filter string is invalid
        """


class CallableRunContext(RunContext):
    """Run context that delegates filter construction to a factory callable."""

    def __init__(self, filter_factory: FilterFactory):
        self._filter_factory = filter_factory

    def get_test_case_filter(
        self,
        supported_properties: Sequence[str],
        value_provider: ValueProvider,
    ) -> Optional[TestCaseFilterExpression]:
        return self._filter_factory(supported_properties, value_provider)
