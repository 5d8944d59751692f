"""Composition root - Wires the collector and renderer once at startup.

The web app and the CLI receive a ``ServerInfo`` instance and use its two
entry points: ``collect()`` and ``render()``.
"""

from server_info.application import StaticApplicationState
from server_info.capabilities import Capabilities
from server_info.collector import FactCollector
from server_info.config import Settings
from server_info.context import RequestContext
from server_info.database import open_database
from server_info.model.report import Report
from server_info.render.html import HTMLRenderer, RenderMode


class ServerInfo:
    """Collector and renderer pair shared by all requests."""

    def __init__(
        self,
        collector: FactCollector,
        renderer: HTMLRenderer | None = None,
        server_admin: str | None = None,
    ) -> None:
        self.collector = collector
        self.renderer = renderer or HTMLRenderer()
        self.server_admin = server_admin

    @classmethod
    def from_settings(cls, settings: Settings) -> "ServerInfo":
        collector = FactCollector(
            capabilities=Capabilities(settings.disabled_capabilities),
            database=open_database(settings.database),
            application=StaticApplicationState.from_config(settings.application),
        )
        return cls(collector, server_admin=settings.server_admin)

    def collect(self, context: RequestContext | None = None) -> Report:
        return self.collector.collect(context)

    def render(
        self,
        report: Report,
        mode: RenderMode | str = RenderMode.FULL,
        redact_sensitive: bool = False,
    ) -> str:
        return self.renderer.render(report, mode, redact_sensitive=redact_sensitive)
