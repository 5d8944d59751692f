"""HTML Renderer - Dashboard widget and settings page markup.

Rendering is a pure function of a Report. Every value goes through Jinja2
autoescaping; hostnames, module names and admin-supplied strings are not
trusted.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from server_info import i18n
from server_info.model.report import Fact, Report

# Hosting group fields shown on the dashboard widget, in order
SUMMARY_FIELDS = ("operating_system", "server_ip", "server_hostname", "runtime_version")
SUMMARY_GROUP = "server"


class RenderMode(Enum):
    """Presentation mode."""

    SUMMARY = "summary"
    FULL = "full"


@dataclass(frozen=True)
class Row:
    """One table row ready for a template."""

    label: str
    value: Any  # str, or list of (name, value) pairs for mapping facts
    is_list: bool = False
    sensitive: bool = False


@dataclass(frozen=True)
class Section:
    label: str
    rows: list[Row]


class HTMLRenderer:
    """Renders reports to HTML fragments or complete pages."""

    TEMPLATES = {
        RenderMode.SUMMARY: "summary.html",
        RenderMode.FULL: "full.html",
    }

    def __init__(
        self,
        template_dir: str | None = None,
        full_url: str = "/server-info",
        stylesheet_url: str = "/static/style.css",
    ) -> None:
        if template_dir is None:
            template_dir = os.path.join(os.path.dirname(__file__), "..", "templates")

        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html", "xml"]),
            extensions=["jinja2.ext.i18n"],
        )
        self.env.install_gettext_callables(i18n.gettext, i18n.ngettext, newstyle=True)
        self.full_url = full_url
        self.stylesheet_url = stylesheet_url

    def render(
        self,
        report: Report,
        mode: RenderMode | str = RenderMode.FULL,
        redact_sensitive: bool = False,
    ) -> str:
        """Render the report body for the given mode."""
        mode = RenderMode(mode)
        template = self.env.get_template(self.TEMPLATES[mode])
        return template.render(**self._context(report, mode, redact_sensitive))

    def render_page(
        self,
        report: Report,
        mode: RenderMode | str = RenderMode.FULL,
        redact_sensitive: bool = False,
    ) -> str:
        """Render a standalone HTML document wrapping the report body."""
        mode = RenderMode(mode)
        template = self.env.get_template("page.html")
        context = self._context(report, mode, redact_sensitive)
        return template.render(
            fragment=self.TEMPLATES[mode],
            stylesheet_url=self.stylesheet_url,
            **context,
        )

    def _context(self, report: Report, mode: RenderMode, redact_sensitive: bool) -> dict[str, Any]:
        if mode == RenderMode.SUMMARY:
            return {"rows": self.summary_rows(report), "full_url": self.full_url}
        return {"sections": self.full_sections(report, redact_sensitive=redact_sensitive)}

    @staticmethod
    def summary_rows(report: Report) -> list[Row]:
        """Fixed subset of hosting facts; absent fields are skipped."""
        rows: list[Row] = []
        for key in SUMMARY_FIELDS:
            fact = report.fact(SUMMARY_GROUP, key)
            if fact is None or fact.sensitive:
                continue
            rows.append(_row(fact, redact_sensitive=False))
        return rows

    @staticmethod
    def full_sections(report: Report, redact_sensitive: bool = False) -> list[Section]:
        """All non-empty groups, in report order."""
        return [
            Section(
                label=group.label,
                rows=[_row(fact, redact_sensitive) for fact in group.fields.values()],
            )
            for group in report
            if not group.is_empty
        ]


def _row(fact: Fact, redact_sensitive: bool) -> Row:
    if fact.sensitive and redact_sensitive:
        return Row(label=fact.label, value=i18n.gettext("[redacted]"), sensitive=True)
    if fact.is_mapping:
        return Row(
            label=fact.label,
            value=list(fact.value.items()),  # type: ignore[union-attr]
            is_list=True,
            sensitive=fact.sensitive,
        )
    return Row(
        label=fact.label,
        value="" if fact.value is None else fact.value,
        sensitive=fact.sensitive,
    )
