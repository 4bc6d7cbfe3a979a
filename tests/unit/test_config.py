"""Unit tests for settings loading."""

from pathlib import Path
from textwrap import dedent

import pytest

from roster.config import ConfigError, RosterSettings, load_settings


@pytest.fixture
def temp_config(tmp_path: Path) -> Path:
    """Create a temporary settings file."""
    config_content = dedent("""
        db_path: data/roster.db
        storage_key: alunos
        admin_username: admin
        admin_password: 123
        port: 9000
    """).strip()

    config_path = tmp_path / "roster.yaml"
    config_path.write_text(config_content)
    return config_path


@pytest.mark.unit
class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults_without_file(self) -> None:
        settings = load_settings(environ={})

        assert settings == RosterSettings()
        assert settings.db_path == "roster.db"
        assert settings.storage_key == "students"
        assert settings.admin_username is None
        assert settings.admin_password is None

    def test_load_file(self, temp_config: Path) -> None:
        settings = load_settings(temp_config, environ={})

        assert settings.db_path == "data/roster.db"
        assert settings.storage_key == "alunos"
        assert settings.admin_username == "admin"
        assert settings.admin_password == "123"
        assert settings.port == 9000

    def test_env_overrides_file(self, temp_config: Path) -> None:
        settings = load_settings(
            temp_config,
            environ={"ROSTER_ADMIN_PASSWORD": "from-env", "ROSTER_PORT": "8080"},
        )

        assert settings.admin_password == "from-env"
        assert settings.port == 8080
        assert settings.admin_username == "admin"

    def test_env_only(self) -> None:
        settings = load_settings(environ={"ROSTER_DB_PATH": ":memory:"})

        assert settings.db_path == ":memory:"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_settings(tmp_path / "nope.yaml", environ={})

        assert "not found" in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        config_path = tmp_path / "roster.yaml"
        config_path.write_text("db_path: [unclosed")

        with pytest.raises(ConfigError) as exc_info:
            load_settings(config_path, environ={})

        assert "Invalid YAML" in str(exc_info.value)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        config_path = tmp_path / "roster.yaml"
        config_path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError) as exc_info:
            load_settings(config_path, environ={})

        assert "mapping" in str(exc_info.value)

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        config_path = tmp_path / "roster.yaml"
        config_path.write_text("")

        assert load_settings(config_path, environ={}) == RosterSettings()

    def test_unknown_key(self, tmp_path: Path) -> None:
        config_path = tmp_path / "roster.yaml"
        config_path.write_text("colour: blue\n")

        with pytest.raises(ConfigError) as exc_info:
            load_settings(config_path, environ={})

        assert "colour" in str(exc_info.value)

    @pytest.mark.parametrize("port", ["abc", "0", "70000"])
    def test_bad_port(self, port: str) -> None:
        with pytest.raises(ConfigError):
            load_settings(environ={"ROSTER_PORT": port})
