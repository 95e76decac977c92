"""Tests for config and logging."""

import io
import json
import logging
import os
from unittest.mock import patch

import pytest

from estate_reports.config import CacheConfig, PostgresConfig, ReportingConfig, RetryConfig
from estate_reports.exceptions import ConfigurationError
from estate_reports.logging import JsonFormatter, get_logger, setup_logging


class TestPostgresConfig:
    """Tests for PostgresConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        config = PostgresConfig()

        assert config.host == "localhost"
        assert config.port == 5432
        assert config.database == "estate"
        assert config.connect_timeout == 10

    def test_connection_string(self) -> None:
        """Test connection string generation."""
        config = PostgresConfig(host="db", port=6543, database="prod", user="app", password="pw")

        assert config.connection_string == "postgresql://app:pw@db:6543/prod"

    def test_to_dict(self) -> None:
        """Test conversion to psycopg connect() keyword arguments."""
        result = PostgresConfig(database="prod").to_dict()

        assert result["dbname"] == "prod"
        assert result["host"] == "localhost"
        assert result["connect_timeout"] == 10
        assert "database" not in result


class TestRetryConfig:
    """Tests for RetryConfig."""

    def test_defaults(self) -> None:
        """Test three attempts with doubling backoff capped at ten seconds."""
        config = RetryConfig()

        assert config.max_attempts == 3
        assert config.backoff_seconds == 0.5
        assert config.backoff_multiplier == 2.0
        assert config.max_backoff_seconds == 10.0


class TestReportingConfig:
    """Tests for ReportingConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        config = ReportingConfig()

        assert config.trend_window_days == 30
        assert config.max_workers == 6
        assert config.preview_mode is False
        assert config.retry.max_attempts == 3
        assert config.cache == CacheConfig()
        assert config.cache.ttl_seconds == 300.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"trend_window_days": 0},
            {"max_workers": 0},
            {"retry": RetryConfig(max_attempts=0)},
        ],
    )
    def test_invalid_values(self, kwargs: dict) -> None:
        """Test out-of-range values are rejected."""
        with pytest.raises(ConfigurationError):
            ReportingConfig(**kwargs)

    def test_from_env_defaults(self) -> None:
        """Test from_env with no variables set."""
        with patch.dict(os.environ, {}, clear=True):
            config = ReportingConfig.from_env()

        assert config.postgres.host == "localhost"
        assert config.cache.enabled is True
        assert config.preview_mode is False
        assert config.preview_seed is None

    def test_from_env_custom(self) -> None:
        """Test from_env reads every supported variable."""
        env = {
            "POSTGRES_HOST": "db.internal",
            "POSTGRES_PORT": "6543",
            "POSTGRES_DB": "estate_prod",
            "FETCH_MAX_ATTEMPTS": "5",
            "FETCH_BACKOFF_SECONDS": "0.1",
            "REPORT_CACHE_TTL": "60",
            "REPORT_CACHE_ENABLED": "false",
            "TREND_WINDOW_DAYS": "7",
            "FETCH_WORKERS": "2",
            "ESTATE_REPORTS_PREVIEW_MODE": "TRUE",
            "PREVIEW_SEED": "99",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "json",
        }
        with patch.dict(os.environ, env, clear=True):
            config = ReportingConfig.from_env()

        assert config.postgres.host == "db.internal"
        assert config.postgres.port == 6543
        assert config.postgres.database == "estate_prod"
        assert config.retry.max_attempts == 5
        assert config.retry.backoff_seconds == 0.1
        assert config.cache.ttl_seconds == 60.0
        assert config.cache.enabled is False
        assert config.trend_window_days == 7
        assert config.max_workers == 2
        assert config.preview_mode is True
        assert config.preview_seed == 99
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    @pytest.mark.parametrize("name", ["POSTGRES_PORT", "FETCH_WORKERS", "REPORT_CACHE_TTL"])
    def test_from_env_malformed_number(self, name: str) -> None:
        """Test malformed numbers raise ConfigurationError."""
        with patch.dict(os.environ, {name: "lots"}, clear=True):
            with pytest.raises(ConfigurationError, match=name):
                ReportingConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_standard_format(self) -> None:
        """Test standard format installs one stderr handler."""
        setup_logging(level="DEBUG", format_type="standard")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)
        assert logging.getLogger("psycopg").level == logging.WARNING
        assert logging.getLogger("faker").level == logging.WARNING

    def test_json_format(self) -> None:
        """Test json format uses JsonFormatter."""
        setup_logging(level="INFO", format_type="json")

        assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)

    def test_stream(self) -> None:
        """Test records are written to the given stream."""
        stream = io.StringIO()
        setup_logging(level="INFO", stream=stream)

        logging.getLogger("estate_reports.test").info("Assembled %s", "financial")

        assert "| estate_reports.test | Assembled financial" in stream.getvalue()

    def test_invalid_level_falls_back_to_info(self) -> None:
        """Test an unknown level name falls back to INFO."""
        setup_logging(level="CHATTY")

        assert logging.getLogger().level == logging.INFO


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        return logging.LogRecord(
            name="estate_reports.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Assembled %s",
            args=("financial",),
            exc_info=kwargs.get("exc_info"),
        )

    def test_basic_fields(self) -> None:
        """Test the JSON object carries level, logger and message."""
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "estate_reports.test"
        assert data["message"] == "Assembled financial"
        assert "timestamp" in data
        assert data["thread"] == "MainThread"

    def test_exception_included(self) -> None:
        """Test exception text is included."""
        try:
            raise ValueError("bad row")
        except ValueError:
            import sys

            record = self._record(exc_info=sys.exc_info())

        data = json.loads(JsonFormatter().format(record))

        assert "ValueError: bad row" in data["exception"]

    def test_extra_fields_merged(self) -> None:
        """Test an ``extra`` mapping on the record is merged in."""
        record = self._record()
        record.extra = {"scope": "company:abc"}

        data = json.loads(JsonFormatter().format(record))

        assert data["scope"] == "company:abc"


class TestGetLogger:
    """Tests for get_logger."""

    def test_returns_named_logger(self) -> None:
        """Test the logger has the requested name."""
        assert get_logger("estate_reports.reports").name == "estate_reports.reports"

    def test_short_names_nested(self) -> None:
        """Test script loggers are nested under the package logger."""
        assert get_logger("scripts.build_report").name == "estate_reports.scripts.build_report"
