"""Unit tests for Registrar configuration loading."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from registrar.config import ConfigError, RegistrarConfig, load_config


@pytest.mark.unit
class TestFromDict:
    """Tests for RegistrarConfig.from_dict."""

    def test_empty_dict_uses_defaults(self) -> None:
        config = RegistrarConfig.from_dict({})

        assert config.database.path == ":memory:"
        assert config.logging.level == "INFO"
        assert config.logging.console is True
        assert config.registration.max_credits == 20
        assert config.api.port == 8000

    def test_values_read(self) -> None:
        config = RegistrarConfig.from_dict(
            {
                "database": {"path": "data/registrar.db"},
                "logging": {"dir": "/var/log/registrar", "level": "debug", "console": False},
                "registration": {"max_credits": 18},
                "api": {"host": "0.0.0.0", "port": 9000},
                "unknown": {"ignored": True},
            }
        )

        assert config.database.path == "data/registrar.db"
        assert config.logging.dir == "/var/log/registrar"
        assert config.logging.level == "DEBUG"
        assert config.logging.console is False
        assert config.registration.max_credits == 18
        assert config.api.host == "0.0.0.0"
        assert config.api.port == 9000

    def test_null_max_credits_disables_cap(self) -> None:
        config = RegistrarConfig.from_dict({"registration": {"max_credits": None}})

        assert config.registration.max_credits is None

    @pytest.mark.parametrize("value", ["twenty", -1, True, 1.5])
    def test_invalid_max_credits(self, value: object) -> None:
        with pytest.raises(ConfigError, match="max_credits"):
            RegistrarConfig.from_dict({"registration": {"max_credits": value}})

    def test_section_must_be_mapping(self) -> None:
        with pytest.raises(ConfigError, match="Section 'api'"):
            RegistrarConfig.from_dict({"api": ["localhost"]})


@pytest.mark.unit
class TestLoadConfig:
    """Tests for load_config."""

    def test_none_returns_defaults(self) -> None:
        config = load_config(None)

        assert isinstance(config, RegistrarConfig)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "registrar.yaml")

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "registrar.yaml"
        path.write_text("")

        assert load_config(path).database.path == ":memory:"

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "registrar.yaml"
        path.write_text("database: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping_file(self, tmp_path: Path) -> None:
        path = tmp_path / "registrar.yaml"
        path.write_text("- just\n- a list\n")

        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "registrar.yaml"
        path.write_text("database:\n  path: campus.db\nregistration:\n  max_credits: 24\n")

        config = load_config(path)

        assert config.database.path == "campus.db"
        assert config.registration.max_credits == 24

    def test_env_overrides(self, tmp_path: Path) -> None:
        path = tmp_path / "registrar.yaml"
        path.write_text("database:\n  path: campus.db\n")
        env = {
            "REGISTRAR_DB_PATH": "override.db",
            "REGISTRAR_LOG_DIR": "/tmp/registrar-logs",
            "REGISTRAR_LOG_LEVEL": "warning",
        }

        with patch.dict(os.environ, env):
            config = load_config(path)

        assert config.database.path == "override.db"
        assert config.logging.dir == "/tmp/registrar-logs"
        assert config.logging.level == "WARNING"
