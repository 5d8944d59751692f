"""Console Renderer - Report tables for the terminal using Rich."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from server_info import i18n
from server_info.model.report import Fact, Report
from server_info.render.html import SUMMARY_FIELDS, SUMMARY_GROUP, RenderMode


class ConsoleRenderer:
    """Prints reports as Rich tables.

    Values are wrapped in ``Text`` so that markup-like strings coming from
    the environment are printed literally.
    """

    def __init__(self, console: Console, redact_sensitive: bool = False) -> None:
        self.console = console
        self.redact_sensitive = redact_sensitive

    def render(self, report: Report, mode: RenderMode | str = RenderMode.FULL) -> None:
        mode = RenderMode(mode)
        if mode == RenderMode.SUMMARY:
            self._print_summary(report)
        else:
            self._print_full(report)

    def _print_summary(self, report: Report) -> None:
        table = Table(title=i18n.gettext("Server Info"), show_header=False, title_justify="left")
        table.add_column(style="bold")
        table.add_column()
        for key in SUMMARY_FIELDS:
            fact = report.fact(SUMMARY_GROUP, key)
            if fact is None or fact.sensitive:
                continue
            table.add_row(Text(fact.label), self._value(fact))
        self.console.print(table)

    def _print_full(self, report: Report) -> None:
        for group in report:
            if group.is_empty:
                continue
            table = Table(title=Text(group.label, style="bold underline"), show_header=False, title_justify="left", expand=True)
            table.add_column(style="bold", ratio=1)
            table.add_column(ratio=2)
            for fact in group.fields.values():
                label = Text(fact.label)
                if fact.sensitive:
                    label.append(" *", style="yellow")
                table.add_row(label, self._value(fact))
            self.console.print(table)
            self.console.print()

    def _value(self, fact: Fact) -> Text:
        if fact.sensitive and self.redact_sensitive:
            return Text(i18n.gettext("[redacted]"), style="dim")
        if fact.is_mapping:
            text = Text()
            for i, (name, value) in enumerate(fact.value.items()):  # type: ignore[union-attr]
                if i:
                    text.append("\n")
                text.append(f"- {name}")
                if value:
                    text.append(f"  {value}", style="dim")
            return text
        return Text("" if fact.value is None else str(fact.value))
