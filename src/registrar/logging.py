"""Log output for the registrar service.

A rotating file and an optional console stream hang off the ``registrar``
logger, so every module logger created with ``logging.getLogger(__name__)``
inside the package writes through them.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from registrar.config import LoggingConfig, RegistrarConfig

ROOT_LOGGER = "registrar"
LOG_FILE_NAME = "registrar.log"
ROTATE_AT_BYTES = 5 * 1024 * 1024
KEEP_ROTATED = 3

# e.g. 2026-01-28 16:30:45 | INFO     | registrar.orchestrator.registrar | ...
LINE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    config: LoggingConfig | None = None,
    *,
    rotate_at_bytes: int = ROTATE_AT_BYTES,
    keep_rotated: int = KEEP_ROTATED,
) -> logging.Logger:
    """Point the ``registrar`` logger at the destinations in ``config``.

    Calling it again replaces the previous handlers.

    Args:
        config: The ``logging`` section of a loaded RegistrarConfig. When
            None, the defaults with REGISTRAR_* environment overrides apply.
        rotate_at_bytes: Size at which the log file is rotated.
        keep_rotated: Number of rotated files kept beside the live one.

    Returns:
        The ``registrar`` logger.
    """
    if config is None:
        config = RegistrarConfig().apply_env_overrides().logging

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    log_path = Path(config.dir) / LOG_FILE_NAME
    log_path.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger(ROOT_LOGGER)
    _detach_handlers(root)
    root.setLevel(level)

    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            log_path,
            maxBytes=rotate_at_bytes,
            backupCount=keep_rotated,
            encoding="utf-8",
        )
    ]
    if config.console:
        handlers.append(logging.StreamHandler())

    formatter = logging.Formatter(LINE_FORMAT, datefmt=TIMESTAMP_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.info("Logging to %s at %s", log_path, logging.getLevelName(level))
    return root


def get_logger(name: str) -> logging.Logger:
    """Logger for a component, placed under the ``registrar`` namespace."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def _detach_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
