"""Configuration management for server-info.

Settings are read from a YAML file. The file is optional; a missing file
yields the defaults.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8765


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or is malformed."""


@dataclass
class Settings:
    """Parsed configuration."""

    database: dict[str, Any] = field(default_factory=dict)
    application: dict[str, Any] = field(default_factory=dict)
    disabled_capabilities: list[str] = field(default_factory=list)
    server_admin: str | None = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


class ConfigManager:
    """Locates and loads the YAML configuration file."""

    def __init__(self, config_path: Path | None = None) -> None:
        if config_path is None:
            # Check for environment variable override
            env_config = os.getenv("SERVER_INFO_CONFIG")
            if env_config:
                config_path = Path(env_config).expanduser().resolve()
            else:
                # Default to ~/.server-info/config.yaml
                config_path = Path.home() / ".server-info" / "config.yaml"

        self.config_path = config_path

    def _load_raw(self) -> dict[str, Any]:
        """Load the YAML document as a mapping."""
        if not self.config_path.exists():
            return {}

        try:
            with open(self.config_path, "r") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read {self.config_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"{self.config_path}: top level must be a mapping")
        return data

    def load(self) -> Settings:
        """Load settings, applying defaults for missing keys."""
        data = self._load_raw()

        server = self._section(data, "server")
        disabled = data.get("disabled_capabilities") or []
        if not isinstance(disabled, list):
            raise ConfigError("disabled_capabilities must be a list")

        try:
            port = int(server.get("port", DEFAULT_PORT))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid server port: {server.get('port')!r}") from e

        return Settings(
            database=self._section(data, "database"),
            application=self._section(data, "application"),
            disabled_capabilities=[str(name) for name in disabled],
            server_admin=server.get("admin"),
            host=str(server.get("host", DEFAULT_HOST)),
            port=port,
        )

    @staticmethod
    def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
        section = data.get(name) or {}
        if not isinstance(section, dict):
            raise ConfigError(f"Section '{name}' must be a mapping")
        return section
