"""Unit tests for Registrar logging configuration."""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from unittest.mock import patch

import pytest

from registrar.config import LoggingConfig
from registrar.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def reset_registrar_logger():
    """Detach file handlers so temp directories can be removed."""
    yield
    logger = logging.getLogger("registrar")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def _file_only(log_dir: Path, level: str = "INFO") -> LoggingConfig:
    return LoggingConfig(dir=str(log_dir), level=level, console=False)


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_creates_log_directory(self, tmp_path: Path) -> None:
        """Log directory is created if it doesn't exist."""
        log_dir = tmp_path / "nested" / "logs"
        setup_logging(_file_only(log_dir))

        assert log_dir.exists()
        assert (log_dir / "registrar.log").exists()

    def test_log_format(self, tmp_path: Path) -> None:
        """Entries carry timestamp, padded level and component name."""
        setup_logging(_file_only(tmp_path))
        logging.getLogger("registrar.orchestrator.registrar").info("format test")

        content = (tmp_path / "registrar.log").read_text()
        # Format: 2026-01-28 16:30:45 | INFO     | registrar.orchestrator.registrar | message
        assert " | INFO     | registrar.orchestrator.registrar | format test" in content

    def test_all_components_write_to_same_file(self, tmp_path: Path) -> None:
        setup_logging(_file_only(tmp_path))

        logging.getLogger("registrar.engine.waitlist").info("waitlist log")
        logging.getLogger("registrar.orchestrator.cascade").info("cascade log")

        content = (tmp_path / "registrar.log").read_text()
        assert "waitlist log" in content
        assert "cascade log" in content

    def test_level_from_config_section(self, tmp_path: Path) -> None:
        """The section's level filters lower-severity records."""
        setup_logging(_file_only(tmp_path, level="WARNING"))
        logger = logging.getLogger("registrar")
        logger.info("should not appear")
        logger.warning("should appear")

        content = (tmp_path / "registrar.log").read_text()
        assert "should not appear" not in content
        assert "should appear" in content

    def test_lowercase_level_accepted(self, tmp_path: Path) -> None:
        logger = setup_logging(_file_only(tmp_path, level="debug"))

        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, tmp_path: Path) -> None:
        logger = setup_logging(_file_only(tmp_path, level="CHATTY"))

        assert logger.level == logging.INFO

    def test_console_flag_adds_stream_handler(self, tmp_path: Path) -> None:
        config = LoggingConfig(dir=str(tmp_path), console=True)
        logger = setup_logging(config)

        kinds = {type(h) for h in logger.handlers}
        assert kinds == {RotatingFileHandler, logging.StreamHandler}

    def test_returns_registrar_logger(self, tmp_path: Path) -> None:
        logger = setup_logging(_file_only(tmp_path))

        assert logger.name == "registrar"

    def test_no_duplicate_handlers_on_repeated_setup(self, tmp_path: Path) -> None:
        setup_logging(_file_only(tmp_path))
        setup_logging(LoggingConfig(dir=str(tmp_path), console=True))

        assert len(logging.getLogger("registrar").handlers) == 2

    def test_rotation_configured(self, tmp_path: Path) -> None:
        setup_logging(_file_only(tmp_path), rotate_at_bytes=1024, keep_rotated=3)

        handlers = [
            h for h in logging.getLogger("registrar").handlers
            if isinstance(h, RotatingFileHandler)
        ]

        assert len(handlers) == 1
        assert handlers[0].maxBytes == 1024
        assert handlers[0].backupCount == 3


@pytest.mark.unit
class TestSetupLoggingDefaults:
    """Without a section, setup_logging reads the REGISTRAR_* overrides."""

    def test_log_dir_from_env(self, tmp_path: Path) -> None:
        env = {"REGISTRAR_LOG_DIR": str(tmp_path), "REGISTRAR_LOG_LEVEL": "WARNING"}
        with patch.dict(os.environ, env):
            logger = setup_logging()

        assert (tmp_path / "registrar.log").exists()
        assert logger.level == logging.WARNING

    def test_explicit_section_is_not_overridden_by_env(self, tmp_path: Path) -> None:
        """Overrides are applied when the config is loaded, not here."""
        other = tmp_path / "elsewhere"
        with patch.dict(os.environ, {"REGISTRAR_LOG_DIR": str(other)}):
            setup_logging(_file_only(tmp_path))

        assert (tmp_path / "registrar.log").exists()
        assert not other.exists()


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_prefixes_registrar(self) -> None:
        assert get_logger("engine.waitlist").name == "registrar.engine.waitlist"

    def test_get_logger_no_double_prefix(self) -> None:
        assert get_logger("registrar.api").name == "registrar.api"

    def test_get_logger_root_name(self) -> None:
        assert get_logger("registrar").name == "registrar"
