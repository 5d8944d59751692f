"""Request context - CGI-style server variables for the current request."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RequestContext:
    """Server variables visible to the request being answered.

    Every field is optional; a missing value means the host did not
    provide it.
    """

    server_addr: str | None = None
    server_protocol: str | None = None
    server_admin: str | None = None
    server_port: str | None = None
    gateway_interface: str | None = None
    server_software: str | None = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "RequestContext":
        """Build from a CGI/WSGI environment mapping."""
        return cls(
            server_addr=environ.get("SERVER_ADDR") or None,
            server_protocol=environ.get("SERVER_PROTOCOL") or None,
            server_admin=environ.get("SERVER_ADMIN") or None,
            server_port=environ.get("SERVER_PORT") or None,
            gateway_interface=environ.get("GATEWAY_INTERFACE") or None,
            server_software=environ.get("SERVER_SOFTWARE") or None,
        )

    @classmethod
    def from_scope(
        cls,
        scope: Mapping[str, Any],
        server_software: str | None = None,
        server_admin: str | None = None,
    ) -> "RequestContext":
        """Build from an ASGI connection scope.

        ASGI has no notion of a server administrator or software string,
        so the host passes them in.
        """
        server = scope.get("server")
        addr: str | None = None
        port: str | None = None
        if server:
            host, bound_port = server
            addr = str(host)
            if bound_port is not None:
                port = str(bound_port)

        protocol = None
        http_version = scope.get("http_version")
        if http_version:
            protocol = f"HTTP/{http_version}"

        gateway = None
        asgi = scope.get("asgi") or {}
        if asgi.get("version"):
            gateway = f"ASGI/{asgi['version']}"

        return cls(
            server_addr=addr,
            server_protocol=protocol,
            server_admin=server_admin,
            server_port=port,
            gateway_interface=gateway,
            server_software=server_software,
        )
