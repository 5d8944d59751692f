"""Connector package - Command execution on the local host."""

from server_info.connector.local import CommandResult, LocalConnector

__all__ = ["CommandResult", "LocalConnector"]
