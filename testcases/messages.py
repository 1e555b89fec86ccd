"""Message channel used to surface user-facing test run messages."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Tuple

from loguru import logger


class MessageLevel(str, Enum):
    """Severity of a test run message."""
    INFORMATIONAL = "informational"
    WARNING = "warning"
    ERROR = "error"


_LOGURU_LEVELS = {
    MessageLevel.INFORMATIONAL: "INFO",
    MessageLevel.WARNING: "WARNING",
    MessageLevel.ERROR: "ERROR",
}


class MessageLogger(ABC):
    """Receives messages meant for the user running the tests."""

    @abstractmethod
    def send_message(self, level: MessageLevel, message: str) -> None:
        pass


class LoguruMessageLogger(MessageLogger):
    """Forwards messages to loguru and keeps them for the run summary."""

    def __init__(self, name: str = "testfilter"):
        self.name = name
        self.messages: List[Tuple[MessageLevel, str]] = []
        self._logger = logger.bind(channel=name)

    def send_message(self, level: MessageLevel, message: str) -> None:
        level = MessageLevel(level)
        self.messages.append((level, message))
        self._logger.log(_LOGURU_LEVELS[level], message)

    @property
    def has_errors(self) -> bool:
        return any(level is MessageLevel.ERROR for level, _ in self.messages)
