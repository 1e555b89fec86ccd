# tests/test_config.py
"""
Tests for configuration loading and logging setup.
"""

import os
import sys

import pytest
from loguru import logger

import config
from config import Config, LogLevel, setup_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "TESTFILTER_LOG_LEVEL",
        "TESTFILTER_LOG_FILE",
        "TESTFILTER_VERBOSE",
        "TESTFILTER_CATALOG_PATH",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_defaults(tmp_path):
    cfg = Config.from_env(env_file=tmp_path / ".env")
    assert cfg.log_level is LogLevel.INFO
    assert cfg.log_file is None
    assert cfg.verbose is False
    assert cfg.catalog_path is None
    assert cfg.console_level == "INFO"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("TESTFILTER_LOG_LEVEL", "warning")
    monkeypatch.setenv("TESTFILTER_VERBOSE", "yes")
    monkeypatch.setenv("TESTFILTER_CATALOG_PATH", "catalog.json")

    cfg = Config.from_env(env_file=tmp_path / ".env")

    assert cfg.log_level is LogLevel.WARNING
    assert cfg.verbose is True
    assert cfg.console_level == "DEBUG"
    assert cfg.catalog_path == "catalog.json"


def test_env_file_is_loaded(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("TESTFILTER_LOG_LEVEL=ERROR\n")

    try:
        cfg = Config.from_env(env_file=env_file)
    finally:
        os.environ.pop("TESTFILTER_LOG_LEVEL", None)

    assert cfg.log_level is LogLevel.ERROR


def test_file_sink_receives_records(tmp_path):
    log_file = tmp_path / "logs" / "testfilter.log"
    cfg = Config(log_file=str(log_file))

    sink_ids = setup_logging(cfg)
    logger.info("written to file")
    for sink_id in sink_ids:
        logger.remove(sink_id)

    assert len(sink_ids) == 2
    assert "written to file" in log_file.read_text()


def test_set_config_replaces_global(tmp_path):
    cfg = Config(log_level=LogLevel.ERROR)
    config.set_config(cfg)
    assert config.get_config() is cfg
