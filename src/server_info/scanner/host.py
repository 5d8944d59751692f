"""Host Scanner - Operating system, web server and interpreter facts.

Collects:
- OS name, release and machine, hostname, uptime
- Server variables of the current request
- Interpreter version and word size
- Process memory limit
"""

import os
import platform
import socket
import sys
from collections.abc import Iterable

from server_info import capabilities as caps
from server_info.capabilities import Capabilities
from server_info.connector.local import LocalConnector
from server_info.context import RequestContext
from server_info.i18n import _
from server_info.model.report import Fact
from server_info.scanner.base import BaseScanner, Probe


def format_memory_limit(limit: int, unlimited: int) -> str:
    """Render a byte limit in K/M/G shorthand."""
    if limit == unlimited or limit < 0:
        return _("Unlimited")
    for suffix, size in (("G", 1024 ** 3), ("M", 1024 ** 2), ("K", 1024)):
        if limit >= size and limit % size == 0:
            return f"{limit // size}{suffix}"
    return str(limit)


class HostScanner(BaseScanner):
    """Scanner for the hosting server group."""

    group_key = "server"

    def __init__(
        self,
        context: RequestContext,
        capabilities: Capabilities,
        connector: LocalConnector,
    ) -> None:
        self.context = context
        self.capabilities = capabilities
        self.connector = connector

    def group_label(self) -> str:
        return _("Hosting Server Information")

    def probes(self) -> Iterable[Probe]:
        return (
            self._operating_system,
            self._hostname,
            self._server_ip,
            self._server_protocol,
            self._server_administrator,
            self._server_web_port,
            self._uptime,
            self._web_server_software,
            self._runtime_version,
            self._memory_limit,
            self._cgi_version,
        )

    def _operating_system(self, fields: dict) -> None:
        architecture = None
        if self.capabilities.has_capability(caps.OS_UNAME):
            try:
                uname = os.uname()
            except OSError:
                uname = None
            if uname is not None:
                architecture = f"{uname.sysname} {uname.release} {uname.machine}"

        fields["operating_system"] = Fact(
            label=_("Operating System"),
            value=architecture or _("Unable to determine server architecture"),
        )

    def _hostname(self, fields: dict) -> None:
        if not self.capabilities.has_capability(caps.HOSTNAME):
            return
        hostname = socket.gethostname()
        if hostname:
            fields["server_hostname"] = Fact(label=_("Server Hostname"), value=hostname)

    def _server_ip(self, fields: dict) -> None:
        if self.context.server_addr:
            fields["server_ip"] = Fact(label=_("Server IP"), value=self.context.server_addr)

    def _server_protocol(self, fields: dict) -> None:
        if self.context.server_protocol:
            fields["server_protocol"] = Fact(
                label=_("Server Protocol"), value=self.context.server_protocol
            )

    def _server_administrator(self, fields: dict) -> None:
        if self.context.server_admin:
            fields["server_administrator"] = Fact(
                label=_("Server Administrator"), value=self.context.server_admin
            )

    def _server_web_port(self, fields: dict) -> None:
        if self.context.server_port:
            fields["server_web_port"] = Fact(
                label=_("Server Web Port"), value=self.context.server_port
            )

    def _uptime(self, fields: dict) -> None:
        if not self.capabilities.has_capability(caps.UPTIME):
            return
        result = self.connector.run("uptime")
        if not result.success:
            return
        # Last output line, like a shell capture of the command
        lines = [line.strip() for line in result.stdout.splitlines() if line.strip()]
        if lines:
            fields["system_uptime"] = Fact(label=_("System Uptime"), value=lines[-1])

    def _web_server_software(self, fields: dict) -> None:
        fields["httpd_software"] = Fact(
            label=_("Web server"),
            value=self.context.server_software
            or _("Unable to determine what web server software is used"),
        )

    def _runtime_version(self, fields: dict) -> None:
        if self.capabilities.has_capability(caps.RUNTIME_VERSION):
            supports_64bit = sys.maxsize > 2 ** 32
            value = "{} {}".format(
                platform.python_version(),
                _("(supports 64-bit values)") if supports_64bit else _("(does not support 64-bit values)"),
            )
        else:
            value = _("Unable to determine Python version")

        fields["runtime_version"] = Fact(label=_("Python version"), value=value)

    def _memory_limit(self, fields: dict) -> None:
        if not self.capabilities.has_capability(caps.CONFIG_READ):
            return
        import resource

        soft, _hard = resource.getrlimit(resource.RLIMIT_AS)
        fields["memory_limit"] = Fact(
            label=_("Process memory limit"),
            value=format_memory_limit(soft, resource.RLIM_INFINITY),
        )

    def _cgi_version(self, fields: dict) -> None:
        if self.context.gateway_interface:
            fields["cgi_version"] = Fact(
                label=_("CGI Version"), value=self.context.gateway_interface
            )
