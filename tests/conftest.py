"""Pytest configuration and fixtures for server-info tests."""

import os
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from server_info.application import ApplicationConstants, Module, Network, StaticApplicationState, Theme
from server_info.capabilities import Capabilities
from server_info.connector.local import CommandResult, LocalConnector
from server_info.context import RequestContext
from server_info.model.report import Fact, Group, Report


def make_capabilities(disabled: set[str] | None = None) -> MagicMock:
    """Capabilities mock reporting everything available except ``disabled``."""
    disabled = disabled or set()
    capabilities = MagicMock(spec=Capabilities)
    capabilities.has_capability.side_effect = lambda name: name not in disabled
    return capabilities


@pytest.fixture
def all_capabilities():
    return make_capabilities()


@pytest.fixture
def mock_connector():
    """Create a mock local connector for testing."""
    connector = MagicMock(spec=LocalConnector)

    # Default behavior: uptime succeeds
    connector.run.return_value = CommandResult(
        command="uptime",
        stdout=" 10:12:01 up 3 days,  4:05,  1 user,  load average: 0.08, 0.03, 0.01\n",
        stderr="",
        exit_code=0,
    )
    return connector


@pytest.fixture
def fixed_uname(monkeypatch):
    """Deterministic os.uname()."""
    monkeypatch.setattr(
        os,
        "uname",
        lambda: SimpleNamespace(
            sysname="Linux", nodename="web01", release="6.1.0-18-amd64", version="#1", machine="x86_64"
        ),
    )


@pytest.fixture
def request_context():
    return RequestContext(
        server_addr="10.0.0.5",
        server_protocol="HTTP/1.1",
        server_admin="admin@example.com",
        server_port="443",
        gateway_interface="CGI/1.1",
        server_software="nginx/1.24.0",
    )


@pytest.fixture
def single_site_state():
    return StaticApplicationState(
        multisite=False,
        users=7,
        theme=Theme(name="Twenty Twenty-Four", stylesheet="twentytwentyfour"),
        installed_modules=[
            Module(path="akismet/akismet.php", name="Akismet", author="Automattic", active=True),
            Module(path="hello.php", name="Hello Dolly", author="", active=False),
        ],
        application_constants=ApplicationConstants(memory_limit="40M", max_memory_limit="256M", debug=False),
    )


@pytest.fixture
def multisite_state():
    return StaticApplicationState(
        multisite=True,
        users=12,
        networks=[Network(id=1, site_count=3), Network(id=2, site_count=5)],
    )


@pytest.fixture
def sample_report():
    """Report with all three groups, one sensitive field and a module list."""
    return Report(
        groups=(
            Group(
                key="server",
                label="Hosting Server Information",
                fields={
                    "operating_system": Fact(label="Operating System", value="Linux 6.1.0 x86_64"),
                    "server_hostname": Fact(label="Server Hostname", value="web01"),
                    "server_ip": Fact(label="Server IP", value="10.0.0.5"),
                    "system_uptime": Fact(label="System Uptime", value="up 3 days"),
                    "runtime_version": Fact(label="Python version", value="3.12.1 (supports 64-bit values)"),
                },
            ),
            Group(
                key="database",
                label="Database",
                fields={
                    "extension": Fact(label="Extension", value="sqlite3"),
                    "database_user": Fact(label="Database username", value="wp_admin", sensitive=True),
                },
            ),
            Group(
                key="application",
                label="Application Information",
                fields={
                    "modules_active": Fact(
                        label="Active Modules",
                        value={"Akismet": "By Automattic", "Hello Dolly": ""},
                    ),
                },
            ),
        )
    )
