"""Tests for structured logging."""

import json
import logging
from pathlib import Path

import pytest

from covnav.config.models import LoggingConfig, LogOutputConfig
from covnav.core.logging import configure_logging, get_log_file_path, get_logger


class TestLoggingConfiguration:
    """Logging configuration tests."""

    def setup_method(self) -> None:
        logging.getLogger().handlers.clear()

    def teardown_method(self) -> None:
        for handler in logging.getLogger().handlers:
            handler.close()
        logging.getLogger().handlers.clear()

    def test_given_no_outputs_when_log_then_nothing_reaches_terminal(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Default configuration discards records so the viewer owns the screen."""
        # Given
        configure_logging(level="DEBUG")

        # When
        get_logger("test").info("hidden message")

        # Then
        captured = capsys.readouterr()
        assert "hidden message" not in captured.err
        assert "hidden message" not in captured.out
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.NullHandler)
        assert get_log_file_path() is None

    def test_given_log_file_when_log_then_written_as_json(self, tmp_path: Path) -> None:
        # Given
        log_file = tmp_path / "logs" / "covnav.log"
        configure_logging(log_file=log_file, json_format=True, level="INFO")

        # When
        get_logger("test").info("profile_parsed", files=3)

        # Then
        lines = [line for line in log_file.read_text().splitlines() if line]
        data = json.loads(lines[-1])
        assert data["event"] == "profile_parsed"
        assert data["files"] == 3
        assert data["level"] == "info"
        assert "timestamp" in data
        assert get_log_file_path() == log_file.resolve()

    def test_given_config_object_when_configure_then_takes_precedence(self, tmp_path: Path) -> None:
        """LoggingConfig level overrides the simple level parameter."""
        # Given
        log_file = tmp_path / "test.log"
        config = LoggingConfig(
            level="DEBUG",
            outputs=[LogOutputConfig(format="json", destination=str(log_file))],
        )

        # When
        configure_logging(config=config, level="ERROR")
        get_logger().debug("debug msg")

        # Then
        assert "debug msg" in log_file.read_text()

    def test_given_multi_output_config_when_configure_then_levels_respected(
        self, tmp_path: Path
    ) -> None:
        # Given
        debug_file = tmp_path / "debug.log"
        info_file = tmp_path / "info.log"
        config = LoggingConfig(
            level="DEBUG",
            outputs=[
                LogOutputConfig(format="json", destination=str(info_file), level="INFO"),
                LogOutputConfig(format="console", destination=str(debug_file)),
            ],
        )

        # When
        configure_logging(config=config)
        logger = get_logger()
        logger.debug("debug only")
        logger.info("info msg")

        # Then
        info_content = info_file.read_text()
        assert "info msg" in info_content
        assert "debug only" not in info_content

        debug_content = debug_file.read_text()
        assert "debug only" in debug_content
        assert "info msg" in debug_content

    def test_given_log_file_and_config_when_configure_then_both_outputs_kept(
        self, tmp_path: Path
    ) -> None:
        # Given
        config_file = tmp_path / "config.log"
        extra_file = tmp_path / "extra.log"
        config = LoggingConfig(outputs=[LogOutputConfig(destination=str(config_file))])

        # When
        configure_logging(config=config, log_file=extra_file)
        get_logger().warning("both")

        # Then
        assert "both" in config_file.read_text()
        assert "both" in extra_file.read_text()
