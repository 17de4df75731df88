"""Tests for dumpstage.logger module."""

import json
import logging
import os
from unittest import mock

import pytest

from dumpstage.logger import (
    Logger,
    StructuredLogger,
    create_logger,
    get_logger,
)


class TestLoggerInterface:
    """Tests for the Logger abstract interface."""

    def test_logger_is_abstract(self):
        with pytest.raises(TypeError):
            Logger()  # type: ignore

    @pytest.mark.parametrize("method", ["debug", "info", "warning", "error"])
    def test_logger_has_required_methods(self, method):
        assert hasattr(Logger, method)


class TestStructuredLogger:
    """Tests for the StructuredLogger implementation."""

    def test_session_id_truncated(self):
        assert len(StructuredLogger(name="test-structured").get_session_id()) == 8

    def test_text_format(self, capsys):
        logger = StructuredLogger(name="test-text", json_format=False)
        logger.info("Test message", trigger="nightly")

        out = capsys.readouterr().out
        assert "INFO" in out
        assert "Test message" in out
        assert "trigger=nightly" in out

    def test_json_format(self, capsys):
        logger = StructuredLogger(name="test-json", json_format=True)
        logger.info("Test message", target="Redis", size=42)

        log_entry = json.loads(capsys.readouterr().out.strip())
        assert log_entry["level"] == "INFO"
        assert log_entry["message"] == "Test message"
        assert log_entry["logger"] == "test-json"
        assert log_entry["target"] == "Redis"
        assert log_entry["size"] == 42
        assert "session_id" in log_entry

    def test_reserved_kwargs_prefixed(self, capsys):
        logger = StructuredLogger(name="test-reserved", json_format=True)
        logger.info("Test", name="should be prefixed")

        log_entry = json.loads(capsys.readouterr().out.strip())
        assert log_entry["_name"] == "should be prefixed"

    def test_file_output(self, tmp_path):
        log_file = tmp_path / "dumpstage.log"
        logger = StructuredLogger(name="test-file", log_file=str(log_file))
        logger.info("File test message")

        for handler in logger._logger.handlers:
            handler.flush()

        assert "File test message" in log_file.read_text()

    def test_unwritable_log_file_falls_back(self, tmp_path, capsys):
        logger = StructuredLogger(name="test-bad-file", log_file=str(tmp_path / "missing" / "x.log"))
        logger.info("still logged")

        captured = capsys.readouterr()
        assert "Failed to setup log file" in captured.err
        assert "still logged" in captured.out

    def test_reinitialising_does_not_duplicate(self, capsys):
        StructuredLogger(name="test-dup")
        logger = StructuredLogger(name="test-dup")
        logger.info("once")

        assert capsys.readouterr().out.count("once") == 1


class TestLoggerFactoryFunctions:
    """Tests for create_logger and get_logger factory functions."""

    def test_create_logger_returns_logger(self):
        assert isinstance(create_logger(name="test-factory"), Logger)

    def test_create_logger_respects_level(self, capsys):
        logger = create_logger(name="test-level-factory", level=logging.WARNING)
        logger.info("Should not appear")
        logger.warning("Should appear")

        out = capsys.readouterr().out
        assert "Should not appear" not in out
        assert "Should appear" in out

    def test_get_logger_reads_env_json(self, capsys):
        with mock.patch.dict(os.environ, {"TEST_JSON_ENV_LOG_JSON": "true"}):
            logger = get_logger("test-json-env")
            logger.info("JSON env test")

        assert json.loads(capsys.readouterr().out.strip())["message"] == "JSON env test"

    def test_env_prefix_conversion(self):
        with mock.patch.dict(os.environ, {"DUMPSTAGE_REDIS_LOG_LEVEL": "DEBUG"}):
            logger = get_logger("dumpstage-redis")
            assert logger._logger.level == logging.DEBUG

    def test_default_level_is_info(self, capsys):
        logger = get_logger("test-default-level")
        logger.debug("Debug should not appear")
        logger.info("Info should appear")

        out = capsys.readouterr().out
        assert "Debug should not appear" not in out
        assert "Info should appear" in out
