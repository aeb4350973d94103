"""
Unit Tests for Logging Configuration

Tests:
- Root logger setup with rotating log files
- Per-package levels for the transition packages
- Exception logging with season context
"""

import logging

import pytest

from logging_config import (
    LOG_FILE_PREFIX,
    TRANSITION_PACKAGES,
    configure_module_logger,
    log_exception,
    setup_logging,
    setup_transition_logging,
)
from season.season_exceptions import SeasonTransitionFailedException


@pytest.fixture
def restore_logging():
    """Put the root and package loggers back the way the test found them."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    package_levels = {name: logging.getLogger(name).level for name in TRANSITION_PACKAGES}

    yield

    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, package_level in package_levels.items():
        logging.getLogger(name).setLevel(package_level)


class TestSetupLogging:
    """Test root logger configuration."""

    def test_creates_main_debug_and_error_logs(self, tmp_path, restore_logging):
        setup_logging(level="DEBUG", log_dir=str(tmp_path), enable_console=False)

        logging.getLogger("season.test").error("transition broke")
        for handler in logging.getLogger().handlers:
            handler.flush()

        for suffix in ("", "_debug", "_error"):
            log_file = tmp_path / f"{LOG_FILE_PREFIX}{suffix}.log"
            assert log_file.exists()
            assert "transition broke" in log_file.read_text(encoding="utf-8")

    def test_console_only_adds_no_files(self, tmp_path, restore_logging):
        setup_logging(level="WARNING", log_dir=str(tmp_path / "logs"), enable_file=False)

        assert logging.getLogger().level == logging.WARNING
        assert not (tmp_path / "logs").exists()


class TestTransitionLogging:
    """Test per-package levels."""

    def test_sets_every_transition_package(self, restore_logging):
        setup_transition_logging("ERROR")

        for package in TRANSITION_PACKAGES:
            assert logging.getLogger(package).level == logging.ERROR

    def test_module_logger_without_level_keeps_current(self, restore_logging):
        logging.getLogger("scheduling").setLevel(logging.INFO)
        logger = configure_module_logger("scheduling")

        assert logger.level == logging.INFO
        assert logger.propagate


class TestLogException:
    """Test exception logging."""

    def test_includes_error_code_and_season_context(self, caplog):
        error = SeasonTransitionFailedException("schedule", 2025, original_exception=ValueError("bad"))

        with caplog.at_level(logging.ERROR, logger="season.test"):
            log_exception(logging.getLogger("season.test"), error, context={"save": "dynasty-1"})

        record = caplog.records[-1]
        assert "error_code=TRANSITION_004" in record.getMessage()
        assert "step=schedule" in record.getMessage()
        assert "save=dynasty-1" in record.getMessage()
        assert record.exc_info is not None
