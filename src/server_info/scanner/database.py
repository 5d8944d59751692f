"""Database Scanner - Driver, server and connection facts.

Issues exactly one read query (the server version). Connection settings
are reported as sensitive.
"""

import logging
from collections.abc import Iterable

from server_info.database import DatabaseHandle
from server_info.i18n import _
from server_info.model.report import Fact
from server_info.scanner.base import BaseScanner, Probe

logger = logging.getLogger(__name__)


class DatabaseScanner(BaseScanner):
    """Scanner for the database group.

    Without a handle the group is empty and renderers skip it.
    """

    group_key = "database"

    def __init__(self, handle: DatabaseHandle | None) -> None:
        self.handle = handle

    def group_label(self) -> str:
        return _("Database")

    def probes(self) -> Iterable[Probe]:
        if self.handle is None:
            return ()
        return (
            self._extension,
            self._server_version,
            self._client_version,
            self._connection_settings,
        )

    def _extension(self, fields: dict) -> None:
        extension = self.handle.extension()
        if extension:
            fields["extension"] = Fact(label=_("Extension"), value=extension)

    def _server_version(self, fields: dict) -> None:
        try:
            version = self.handle.server_version()
        except Exception as e:
            # Driver error classes differ per DB-API module
            logger.warning("Database version query failed: %s", e)
            version = None
        fields["server_version"] = Fact(label=_("Server version"), value=version)

    def _client_version(self, fields: dict) -> None:
        fields["client_version"] = Fact(
            label=_("Client version"), value=self.handle.client_version()
        )

    def _connection_settings(self, fields: dict) -> None:
        settings = self.handle.settings
        for key, label, value in (
            ("database_user", _("Database username"), settings.user),
            ("database_host", _("Database host"), settings.host),
            ("database_name", _("Database name"), settings.name),
            ("database_prefix", _("Table prefix"), settings.prefix),
            ("database_charset", _("Database charset"), settings.charset),
            ("database_collate", _("Database collation"), settings.collate),
        ):
            fields[key] = Fact(label=label, value=value, sensitive=True)
