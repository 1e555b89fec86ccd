"""Configuration settings for testfilter."""

import os
from enum import Enum
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """Log levels."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Config(BaseModel):
    """Main configuration class."""

    # Logging configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_file: Optional[str] = Field(default=None)
    verbose: bool = Field(default=False)  # DEBUG output on the console
    log_rotation: str = Field(default="10 MB")
    log_retention: str = Field(default="7 days")

    # Default catalog for CLI commands that take one
    catalog_path: Optional[str] = Field(default=None)

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "Config":
        """Create configuration from environment variables."""
        # Load .env file if it exists
        env_file = env_file or Path(".env")
        if env_file.exists():
            load_dotenv(env_file)

        return cls(
            log_level=LogLevel(os.getenv("TESTFILTER_LOG_LEVEL", "INFO").upper()),
            log_file=os.getenv("TESTFILTER_LOG_FILE") or None,
            verbose=_env_flag("TESTFILTER_VERBOSE"),
            log_rotation=os.getenv("TESTFILTER_LOG_ROTATION", "10 MB"),
            log_retention=os.getenv("TESTFILTER_LOG_RETENTION", "7 days"),
            catalog_path=os.getenv("TESTFILTER_CATALOG_PATH") or None,
        )

    @property
    def console_level(self) -> str:
        return LogLevel.DEBUG.value if self.verbose else self.log_level.value
