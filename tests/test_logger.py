"""
Tests for logger setup.
"""

from __future__ import annotations

import json

import pytest
from loguru import logger

from node_checker.config.models import LoggingConfig
from node_checker.utils.logger import get_run_logger, setup_logger


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    setup_logger()


class TestSetupLogger:
    """Tests for setup_logger sinks."""

    def test_file_sink(self, tmp_path):
        log_file = tmp_path / "logs" / "checker.log"
        setup_logger(LoggingConfig(log_file=log_file, file_level="info"))

        logger.debug("hidden")
        get_run_logger("http://target.local").info("run started")
        logger.complete()

        content = log_file.read_text(encoding="utf-8")
        assert "run started" in content
        assert "http://target.local" in content
        assert "hidden" not in content

    def test_json_sink(self, tmp_path):
        log_file = tmp_path / "checker.jsonl"
        setup_logger(LoggingConfig(log_file=log_file, json_logs=True))

        get_run_logger("http://target.local").warning("braces {kept}")
        logger.complete()

        entry = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
        assert entry["message"] == "braces {kept}"
        assert entry["level"] == "WARNING"
        assert entry["target"] == "http://target.local"

    def test_console_only(self, capsys):
        setup_logger(LoggingConfig(console_level="error"))
        logger.warning("not shown")
        logger.error("shown")

        err = capsys.readouterr().err
        assert "shown" in err
        assert "not shown" not in err
