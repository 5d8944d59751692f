"""Application state - What the hosting application knows about itself.

The scanners talk to the application only through ``ApplicationState``.
``StaticApplicationState`` implements it from the ``application`` section
of the configuration file.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol

from server_info.config import ConfigError


@dataclass(frozen=True)
class Theme:
    """Active theme identity."""

    name: str
    stylesheet: str  # Stable identifier (directory name)


@dataclass(frozen=True)
class Module:
    """An installed application module (plugin)."""

    path: str
    name: str
    author: str = ""
    active: bool = False


@dataclass(frozen=True)
class NetworkPage:
    """One page of a network enumeration."""

    ids: list[int]
    found: int  # Total networks matching, across all pages


@dataclass(frozen=True)
class ApplicationConstants:
    """Configuration constants of the application."""

    memory_limit: str = "40M"
    max_memory_limit: str = "256M"
    debug: bool = False


class ApplicationState(Protocol):
    """Queries the application answers for the report."""

    def is_multisite(self) -> bool: ...

    def user_count(self) -> int: ...

    def query_networks(self, number: int, offset: int = 0) -> NetworkPage: ...

    def site_count(self, network_id: int) -> int: ...

    def active_theme(self) -> Theme: ...

    def modules(self) -> list[Module]: ...

    def constants(self) -> ApplicationConstants: ...


@dataclass
class Network:
    id: int
    site_count: int = 0


@dataclass
class StaticApplicationState:
    """Application state declared in configuration."""

    multisite: bool = False
    users: int = 0
    networks: list[Network] = field(default_factory=list)
    theme: Theme = field(default_factory=lambda: Theme(name="Default", stylesheet="default"))
    installed_modules: list[Module] = field(default_factory=list)
    application_constants: ApplicationConstants = field(default_factory=ApplicationConstants)

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "StaticApplicationState":
        """Build from the ``application`` config section.

        Raises:
            ConfigError: If an entry has the wrong shape or type.
        """
        theme_cfg = config.get("theme") or {}
        if not isinstance(theme_cfg, dict):
            raise ConfigError("application.theme must be a mapping")
        theme = Theme(
            name=str(theme_cfg.get("name", "Default")),
            stylesheet=str(theme_cfg.get("stylesheet", "default")),
        )

        networks: list[Network] = []
        for n in _entries(config, "networks"):
            if "id" not in n:
                raise ConfigError(f"application.networks entry has no id: {n!r}")
            try:
                networks.append(Network(id=int(n["id"]), site_count=int(n.get("site_count", 0))))
            except (TypeError, ValueError) as e:
                raise ConfigError(f"Invalid application.networks entry {n!r}: {e}") from e

        modules = [
            Module(
                path=str(m.get("path", m.get("name", ""))),
                name=str(m.get("name", "")),
                author=str(m.get("author") or ""),
                active=bool(m.get("active", False)),
            )
            for m in _entries(config, "modules")
        ]

        defaults = ApplicationConstants()
        constants = ApplicationConstants(
            memory_limit=str(config.get("memory_limit", defaults.memory_limit)),
            max_memory_limit=str(config.get("max_memory_limit", defaults.max_memory_limit)),
            debug=bool(config.get("debug", defaults.debug)),
        )

        try:
            users = int(config.get("user_count", 0))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid application.user_count: {config.get('user_count')!r}") from e

        return cls(
            multisite=bool(config.get("multisite", False)),
            users=users,
            networks=networks,
            theme=theme,
            installed_modules=modules,
            application_constants=constants,
        )

    def is_multisite(self) -> bool:
        return self.multisite

    def user_count(self) -> int:
        return self.users

    def query_networks(self, number: int, offset: int = 0) -> NetworkPage:
        page = self.networks[offset:offset + number]
        return NetworkPage(ids=[n.id for n in page], found=len(self.networks))

    def site_count(self, network_id: int) -> int:
        for network in self.networks:
            if network.id == network_id:
                return network.site_count
        return 0

    def active_theme(self) -> Theme:
        return self.theme

    def modules(self) -> list[Module]:
        return list(self.installed_modules)

    def constants(self) -> ApplicationConstants:
        return self.application_constants


def _entries(config: dict[str, Any], key: str) -> list[dict[str, Any]]:
    """List-of-mappings section entries, validated."""
    entries = config.get(key) or []
    if not isinstance(entries, list):
        raise ConfigError(f"application.{key} must be a list")
    for entry in entries:
        if not isinstance(entry, dict):
            raise ConfigError(f"application.{key} entries must be mappings, got {entry!r}")
    return entries
