"""Configuration loading for the roster."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from roster.storage.student_storage import DEFAULT_STORAGE_KEY

# Environment variable -> settings field
ENV_OVERRIDES = {
    "ROSTER_DB_PATH": "db_path",
    "ROSTER_STORAGE_KEY": "storage_key",
    "ROSTER_ADMIN_USERNAME": "admin_username",
    "ROSTER_ADMIN_PASSWORD": "admin_password",
    "ROSTER_LOG_DIR": "log_dir",
    "ROSTER_LOG_LEVEL": "log_level",
    "ROSTER_HOST": "host",
    "ROSTER_PORT": "port",
}


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass
class RosterSettings:
    """Runtime settings.

    There are no default credentials: until admin_username and
    admin_password are set, every login is rejected.
    """

    db_path: str = "roster.db"
    storage_key: str = DEFAULT_STORAGE_KEY
    admin_username: str | None = None
    admin_password: str | None = None
    log_dir: str = "logs"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RosterSettings:
        """Create settings from a dictionary.

        Raises:
            ConfigError: On unknown keys or a non-integer port.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown settings: {', '.join(unknown)}")

        values = dict(data)
        if "port" in values:
            values["port"] = _parse_port(values["port"])
        for key, value in values.items():
            if key != "port" and value is not None:
                values[key] = str(value)
        return cls(**values)

    def with_env(self, environ: Mapping[str, str] | None = None) -> RosterSettings:
        """Return a copy with ROSTER_* environment overrides applied."""
        env = os.environ if environ is None else environ
        overrides: dict[str, Any] = {}
        for var, name in ENV_OVERRIDES.items():
            if var in env:
                overrides[name] = env[var]
        if not overrides:
            return self
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data.update(overrides)
        return RosterSettings.from_dict(data)


def _parse_port(value: Any) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Port must be an integer, got {value!r}") from e
    if not 0 < port < 65536:
        raise ConfigError(f"Port out of range: {port}")
    return port


def load_settings(
    config_path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> RosterSettings:
    """Load settings from an optional YAML file plus environment overrides.

    Args:
        config_path: Path to a YAML mapping of settings. None uses defaults.
        environ: Environment to read overrides from. Defaults to os.environ.

    Returns:
        Parsed settings.

    Raises:
        ConfigError: If the file doesn't exist or is invalid.
    """
    settings = RosterSettings()

    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")
        settings = RosterSettings.from_dict(data)

    return settings.with_env(environ)
