"""Configuration loading for Registrar deployments."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_NAME = "registrar.yaml"


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass
class DatabaseConfig:
    """Entity store configuration."""

    path: str = ":memory:"


@dataclass
class LoggingConfig:
    """Log output configuration."""

    dir: str = "logs"
    level: str = "INFO"
    console: bool = True


@dataclass
class RegistrationConfig:
    """Registration policy settings.

    ``max_credits: null`` turns the credit-load gate off.
    """

    max_credits: int | None = 20


@dataclass
class APIConfig:
    """HTTP server settings."""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class RegistrarConfig:
    """Registrar configuration.

    Every section is optional; missing keys fall back to defaults so an
    empty file yields an in-memory deployment.
    """

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    registration: RegistrationConfig = field(default_factory=RegistrationConfig)
    api: APIConfig = field(default_factory=APIConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RegistrarConfig:
        """Create config from dictionary.

        Args:
            data: Configuration dictionary from YAML.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If a section or value has the wrong type.
        """
        database_data = _section(data, "database")
        logging_data = _section(data, "logging")
        registration_data = _section(data, "registration")
        api_data = _section(data, "api")

        database = DatabaseConfig(path=str(database_data.get("path", ":memory:")))
        log_config = LoggingConfig(
            dir=str(logging_data.get("dir", "logs")),
            level=str(logging_data.get("level", "INFO")).upper(),
            console=bool(logging_data.get("console", True)),
        )
        registration = RegistrationConfig(
            max_credits=_optional_int(registration_data, "max_credits", 20),
        )
        api = APIConfig(
            host=str(api_data.get("host", "127.0.0.1")),
            port=_non_negative_int(api_data, "port", 8000),
        )

        return cls(
            database=database,
            logging=log_config,
            registration=registration,
            api=api,
        )

    def apply_env_overrides(self) -> RegistrarConfig:
        """Apply REGISTRAR_* environment variables on top of file values."""
        db_path = os.environ.get("REGISTRAR_DB_PATH")
        if db_path:
            self.database.path = db_path
        log_dir = os.environ.get("REGISTRAR_LOG_DIR")
        if log_dir:
            self.logging.dir = log_dir
        log_level = os.environ.get("REGISTRAR_LOG_LEVEL")
        if log_level:
            self.logging.level = log_level.upper()
        return self


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"Section '{name}' must be a mapping")
    return value


def _non_negative_int(data: dict[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{key}' must be an integer, got {value!r}")
    if value < 0:
        raise ConfigError(f"'{key}' must be non-negative, got {value}")
    return value


def _optional_int(data: dict[str, Any], key: str, default: int) -> int | None:
    # An explicit null disables the setting
    if key in data and data[key] is None:
        return None
    return _non_negative_int(data, key, default)


def load_config(config_path: Path | None = None) -> RegistrarConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the config file. When None, defaults are used.

    Returns:
        Parsed configuration with environment overrides applied.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if config_path is None:
        return RegistrarConfig().apply_env_overrides()

    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {config_path}")

    return RegistrarConfig.from_dict(data).apply_env_overrides()
