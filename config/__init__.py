"""Configuration module for testfilter."""

from typing import Optional

from .logger import setup_session_logging
from .settings import Config, LogLevel


def setup_logging(config: Config):
    """Setup logging configuration for the given config."""
    return setup_session_logging(config)


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
        setup_logging(_config)
    return _config


def set_config(config: Config) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
    setup_logging(config)


__all__ = [
    "Config",
    "LogLevel",
    "get_config",
    "set_config",
    "setup_logging",
]
