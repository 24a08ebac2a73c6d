"""Unit tests for logging configuration."""

import logging

from pythonjsonlogger.json import JsonFormatter

from authcore.infrastructure.logging import (
    NO_REQUEST_ID,
    CorrelationIdFilter,
    get_logging_config,
    request_id_var,
    setup_logging,
)


def make_record() -> logging.LogRecord:
    return logging.LogRecord("authcore.test", logging.INFO, __file__, 1, "hello", None, None)


class TestLoggingConfig:
    """Test the dictConfig mapping."""

    def test_console_only_without_files(self, settings):
        config = get_logging_config(settings)

        assert list(config["handlers"]) == ["console"]
        assert config["loggers"]["authcore"]["handlers"] == ["console"]
        assert config["handlers"]["console"]["formatter"] == "text"

    def test_file_handlers_when_enabled(self, settings, tmp_path):
        settings = settings.model_copy(
            update={"log_file_enabled": True, "log_file_path": str(tmp_path / "app.log")}
        )

        config = get_logging_config(settings)

        assert config["handlers"]["file"]["filename"] == str(tmp_path / "app.log")
        assert config["handlers"]["error_file"]["filename"] == str(tmp_path / "error.log")
        assert config["handlers"]["error_file"]["level"] == "ERROR"
        assert config["root"]["handlers"] == ["console", "file", "error_file"]

    def test_json_format_installs_json_formatter(self, settings):
        settings = settings.model_copy(update={"log_format": "json"})

        setup_logging(settings)

        handler = logging.getLogger("authcore").handlers[0]
        assert isinstance(handler.formatter, JsonFormatter)


class TestCorrelationIdFilter:
    """Test request id stamping."""

    def test_outside_request(self):
        record = make_record()
        CorrelationIdFilter().filter(record)
        assert record.correlation_id == NO_REQUEST_ID

    def test_inside_request(self):
        token = request_id_var.set("req-123")
        try:
            record = make_record()
            CorrelationIdFilter().filter(record)
        finally:
            request_id_var.reset(token)

        assert record.correlation_id == "req-123"
