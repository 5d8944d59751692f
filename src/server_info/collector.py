"""Fact Collector - Builds a Report from live system state.

One collection pass runs the host, database and application scanners in
that order. It never fails as a whole: every probe is guarded on its own.
"""

from server_info.application import ApplicationState
from server_info.capabilities import Capabilities
from server_info.connector.local import LocalConnector
from server_info.context import RequestContext
from server_info.database import DatabaseHandle
from server_info.model.report import Report
from server_info.scanner import ApplicationScanner, DatabaseScanner, HostScanner


class FactCollector:
    """Probes the environment for the fixed fact catalog."""

    def __init__(
        self,
        capabilities: Capabilities | None = None,
        connector: LocalConnector | None = None,
        database: DatabaseHandle | None = None,
        application: ApplicationState | None = None,
    ) -> None:
        self.capabilities = capabilities or Capabilities()
        self.connector = connector or LocalConnector()
        self.database = database
        self.application = application

    def collect(self, context: RequestContext | None = None) -> Report:
        """Collect a fresh report.

        Args:
            context: Server variables of the current request, if any.

        Returns:
            Report with the server, database and application groups.
        """
        host = HostScanner(context or RequestContext(), self.capabilities, self.connector)
        return Report(
            groups=(
                host.scan(),
                DatabaseScanner(self.database).scan(),
                ApplicationScanner(self.application).scan(),
            )
        )
