"""Application Scanner - Tenancy, theme, modules and constants."""

from collections.abc import Iterable

from server_info.application import ApplicationState
from server_info.i18n import _
from server_info.model.report import Fact
from server_info.scanner.base import BaseScanner, Probe

NETWORK_PAGE_SIZE = 100


class ApplicationScanner(BaseScanner):
    """Scanner for the application group."""

    group_key = "application"

    def __init__(self, state: ApplicationState | None) -> None:
        self.state = state

    def group_label(self) -> str:
        return _("Application Information")

    def probes(self) -> Iterable[Probe]:
        if self.state is None:
            return ()
        return (
            self._multisite,
            self._counts,
            self._active_theme,
            self._modules,
            self._constants,
        )

    def _multisite(self, fields: dict) -> None:
        fields["multisite"] = Fact(
            label=_("Is this a multisite?"),
            value=_("Yes") if self.state.is_multisite() else _("No"),
        )

    def _counts(self, fields: dict) -> None:
        if not self.state.is_multisite():
            fields["user_count"] = Fact(label=_("User count"), value=str(self.state.user_count()))
            return

        site_count, network_count = self._count_sites()
        fields["user_count"] = Fact(label=_("User count"), value=str(self.state.user_count()))
        fields["site_count"] = Fact(label=_("Site count"), value=str(site_count))
        fields["network_count"] = Fact(label=_("Network count"), value=str(network_count))

    def _count_sites(self) -> tuple[int, int]:
        """Walk every network page, summing per-network site counts.

        Returns:
            (total sites, total networks found)
        """
        site_count = 0
        found = 0
        offset = 0
        while True:
            page = self.state.query_networks(number=NETWORK_PAGE_SIZE, offset=offset)
            found = page.found
            for network_id in page.ids:
                site_count += self.state.site_count(network_id)
            offset += len(page.ids)
            if not page.ids or offset >= found:
                break
        return site_count, found

    def _active_theme(self, fields: dict) -> None:
        theme = self.state.active_theme()
        fields["active_theme"] = Fact(
            label=_("Active Theme"),
            value=_("{name} ({stylesheet})").format(name=theme.name, stylesheet=theme.stylesheet),
        )

    def _modules(self, fields: dict) -> None:
        active: dict[str, str] = {}
        inactive: dict[str, str] = {}

        for module in self.state.modules():
            author = _("By {author}").format(author=module.author) if module.author else ""
            if module.active:
                active[module.name] = author
            else:
                inactive[module.name] = author

        fields["modules_active"] = Fact(label=_("Active Modules"), value=active or _("None"))
        fields["modules_inactive"] = Fact(label=_("Inactive Modules"), value=inactive or _("None"))

    def _constants(self, fields: dict) -> None:
        constants = self.state.constants()
        fields["memory_limit"] = Fact(
            label=_("Application Memory Limit"), value=constants.memory_limit
        )
        fields["max_memory_limit"] = Fact(
            label=_("Application Max Memory Limit"), value=constants.max_memory_limit
        )
        fields["debug"] = Fact(
            label=_("Application Debugging"),
            value=_("Enabled") if constants.debug else _("Disabled"),
        )
