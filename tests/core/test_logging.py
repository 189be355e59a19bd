"""Tests for structured logging."""

import json
import logging
from pathlib import Path

import pytest
import structlog

from defhint.config.models import LoggingConfig, LogOutputConfig
from defhint.core.logging import configure_logging


class TestLoggingConfiguration:
    """Logging configuration tests."""

    def setup_method(self) -> None:
        """Reset structlog and stdlib logging before each test."""
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()

    def test_given_json_format_when_log_then_valid_json_output(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """JSON format produces valid JSON with required fields."""
        # Given
        configure_logging(json_format=True, level="INFO")
        logger = structlog.get_logger("test")

        # When
        logger.info("test message", key="value")

        # Then
        captured = capsys.readouterr()
        lines = [line for line in captured.err.strip().split("\n") if line]
        if lines:
            data = json.loads(lines[-1])
            assert data["event"] == "test message"
            assert data["key"] == "value"
            assert "timestamp" in data
            assert data["level"] == "info"

    def test_given_named_logger_when_log_then_name_recorded(self, tmp_path: Path) -> None:
        """Events carry the name of the logger that emitted them."""
        # Given
        log_file = tmp_path / "named.log"
        configure_logging(
            config=LoggingConfig(
                level="INFO",
                outputs=[LogOutputConfig(format="json", destination=str(log_file))],
            )
        )

        # When
        structlog.get_logger("mymodule").info("hello")

        # Then
        data = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert data["logger"] == "mymodule"

    def test_given_config_object_when_configure_then_takes_precedence(self, tmp_path: Path) -> None:
        """LoggingConfig object takes precedence over simple params."""
        # Given
        log_file = tmp_path / "test.log"
        config = LoggingConfig(
            level="DEBUG",
            outputs=[LogOutputConfig(format="json", destination=str(log_file))],
        )

        # When  - config's DEBUG should override the level="ERROR" param
        configure_logging(config=config, json_format=False, level="ERROR")
        logger = structlog.get_logger()
        logger.debug("debug msg")

        # Then
        content = log_file.read_text()
        assert "debug msg" in content

    def test_given_multi_output_config_when_configure_then_logs_to_all(
        self, tmp_path: Path
    ) -> None:
        """Multiple outputs receive logs according to their levels."""
        # Given
        debug_file = tmp_path / "debug.log"
        info_file = tmp_path / "info.log"
        config = LoggingConfig(
            level="DEBUG",
            outputs=[
                LogOutputConfig(format="json", destination=str(info_file), level="INFO"),
                LogOutputConfig(format="json", destination=str(debug_file)),
            ],
        )

        # When
        configure_logging(config=config)
        logger = structlog.get_logger()
        logger.debug("debug only")
        logger.info("info msg")

        # Then
        info_content = info_file.read_text()
        assert "info msg" in info_content
        assert "debug only" not in info_content

        debug_content = debug_file.read_text()
        assert "debug only" in debug_content
        assert "info msg" in debug_content

    def test_given_reconfigure_when_configure_then_replaces_handlers(
        self, tmp_path: Path
    ) -> None:
        """Configuring twice leaves only the latest outputs attached."""
        # Given
        first = tmp_path / "first.log"
        second = tmp_path / "second.log"
        configure_logging(
            config=LoggingConfig(
                level="INFO",
                outputs=[LogOutputConfig(format="json", destination=str(first))],
            )
        )

        # When
        configure_logging(
            config=LoggingConfig(
                level="INFO",
                outputs=[LogOutputConfig(format="json", destination=str(second))],
            )
        )
        structlog.get_logger().info("after reconfigure")

        # Then
        assert len(logging.getLogger().handlers) == 1
        assert "after reconfigure" in second.read_text()
        assert "after reconfigure" not in first.read_text()
