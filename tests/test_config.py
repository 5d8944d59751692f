"""Tests for configuration loading and the composition root."""

from pathlib import Path

import pytest

from server_info.config import DEFAULT_PORT, ConfigError, ConfigManager
from server_info.core import ServerInfo


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(text)
    return path


def test_missing_file_gives_defaults(tmp_path):
    settings = ConfigManager(tmp_path / "missing.yaml").load()

    assert settings.database == {}
    assert settings.application == {}
    assert settings.disabled_capabilities == []
    assert settings.host == "127.0.0.1"
    assert settings.port == DEFAULT_PORT


def test_empty_file_gives_defaults(tmp_path):
    settings = ConfigManager(_write(tmp_path, "")).load()
    assert settings.port == DEFAULT_PORT


def test_sections_are_loaded(tmp_path):
    path = _write(tmp_path, """
database:
  path: ":memory:"
  user: reader
application:
  user_count: 7
disabled_capabilities:
  - uptime
server:
  port: 9000
  admin: ops@example.com
""")
    settings = ConfigManager(path).load()

    assert settings.database == {"path": ":memory:", "user": "reader"}
    assert settings.application == {"user_count": 7}
    assert settings.disabled_capabilities == ["uptime"]
    assert settings.port == 9000
    assert settings.server_admin == "ops@example.com"


def test_env_override(tmp_path, monkeypatch):
    path = _write(tmp_path, "server:\n  port: 9100\n")
    monkeypatch.setenv("SERVER_INFO_CONFIG", str(path))

    manager = ConfigManager()

    assert manager.config_path == path.resolve()
    assert manager.load().port == 9100


def test_malformed_yaml(tmp_path):
    with pytest.raises(ConfigError):
        ConfigManager(_write(tmp_path, "database: [unclosed\n")).load()


def test_non_mapping_document(tmp_path):
    with pytest.raises(ConfigError):
        ConfigManager(_write(tmp_path, "- just\n- a list\n")).load()


def test_non_mapping_section(tmp_path):
    with pytest.raises(ConfigError):
        ConfigManager(_write(tmp_path, "database: sqlite\n")).load()


def test_invalid_port(tmp_path):
    with pytest.raises(ConfigError):
        ConfigManager(_write(tmp_path, "server:\n  port: http\n")).load()


def test_server_info_from_settings(tmp_path):
    path = _write(tmp_path, """
database:
  path: ":memory:"
  user: reader
application:
  user_count: 7
disabled_capabilities:
  - uptime
""")
    server_info = ServerInfo.from_settings(ConfigManager(path).load())

    report = server_info.collect()

    assert [g.key for g in report] == ["server", "database", "application"]
    assert "system_uptime" not in report.group("server").fields
    assert report.fact("database", "extension").value == "sqlite3"
    assert report.fact("database", "database_user").value == "reader"
    assert report.fact("application", "user_count").value == "7"
    assert "Hosting Server Information" in server_info.render(report)


def test_server_info_without_database(tmp_path):
    server_info = ServerInfo.from_settings(ConfigManager(tmp_path / "none.yaml").load())

    report = server_info.collect()

    assert report.group("database").is_empty
    assert "Database" not in server_info.render(report)
