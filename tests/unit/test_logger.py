"""
Unit tests for structured logging helpers.
"""

import json
import logging

import pytest

from kontrolio.observability.logger import get_logger, log_operation, setup_logger


class TestSetupLogger:
    """Tests for setup_logger"""

    def test_json_output(self, capsys):
        logger = setup_logger("kontrolio-test-json", level="INFO")

        logger.info("hello", extra={"field": "code"})

        line = capsys.readouterr().out.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["message"] == "hello"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "kontrolio-test-json"
        assert payload["field"] == "code"

    def test_text_output(self, capsys):
        logger = setup_logger("kontrolio-test-text", level="INFO", format_type="text")

        logger.info("plain message")

        assert "plain message" in capsys.readouterr().out

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")

        logger = setup_logger("kontrolio-test-env")

        assert logger.level == logging.WARNING

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logger("kontrolio-test-dup")
        logger = setup_logger("kontrolio-test-dup")

        assert len(logger.handlers) == 1


class TestGetLogger:
    """Tests for get_logger"""

    def test_module_logger_propagates_to_package_logger(self):
        logger = get_logger("kontrolio.some.module")

        assert logger.handlers == []
        assert logging.getLogger("kontrolio").handlers


class TestLogOperation:
    """Tests for log_operation"""

    def test_success_logs_one_completion_line(self, captured_logs):
        logger = logging.getLogger("kontrolio.test_operation")

        with log_operation("Validating batch", logger=logger, batch_size=3) as op:
            op.fields["failed"] = 1

        assert [r.getMessage() for r in captured_logs] == ["Completed: Validating batch"]
        assert captured_logs[-1].status == "success"
        assert captured_logs[-1].batch_size == 3
        assert captured_logs[-1].failed == 1
        assert captured_logs[-1].duration_seconds >= 0

    def test_failure_is_logged_and_reraised(self, captured_logs):
        logger = logging.getLogger("kontrolio.test_operation")

        with pytest.raises(RuntimeError):
            with log_operation("Validating batch", logger=logger):
                raise RuntimeError("boom")

        failure = captured_logs[-1]
        assert failure.levelno == logging.ERROR
        assert failure.error_type == "RuntimeError"
        assert failure.exc_info[1].args == ("boom",)
