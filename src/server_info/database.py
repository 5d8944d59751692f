"""Database handle - Driver introspection over a live DB-API connection.

The connection itself is owned by the host. This module only identifies
the driver, asks the server for its version (the single read query of a
collection pass) and reports the client library version.
"""

import logging
import re
import sqlite3
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Top-level driver module -> displayed extension name
KNOWN_DRIVERS = {
    "sqlite3": "sqlite3",
    "pymysql": "pymysql",
    "MySQLdb": "mysqlclient",
    "mysql": "mysql-connector",
    "mariadb": "mariadb",
    "psycopg2": "psycopg2",
    "psycopg": "psycopg",
}

DEFAULT_VERSION_QUERY = "SELECT VERSION()"
VERSION_QUERIES = {
    "sqlite3": "SELECT sqlite_version()",
}

# Legacy drivers only expose a free-form client info string
CLIENT_VERSION_PATTERN = re.compile(r"[0-9]{1,2}\.[0-9]{1,2}\.[0-9]{1,2}")


def parse_client_version(text: str | None) -> str | None:
    """Extract ``major.minor.patch`` from a client info string.

    >>> parse_client_version("Server type 5.7.32-log")
    '5.7.32'
    """
    if not text:
        return None
    match = CLIENT_VERSION_PATTERN.search(text)
    if match:
        return match.group(0)
    return None


@dataclass(frozen=True)
class DatabaseSettings:
    """Connection configuration shown on the report (all sensitive)."""

    user: str = ""
    host: str = ""
    name: str = ""
    prefix: str = ""
    charset: str = ""
    collate: str = ""


class DatabaseHandle:
    """A live connection plus the settings it was opened with."""

    def __init__(self, connection: Any, settings: DatabaseSettings | None = None) -> None:
        self.connection = connection
        self.settings = settings or DatabaseSettings()

    @property
    def driver(self) -> str:
        """Top-level module name of the connection's class."""
        return type(self.connection).__module__.split(".")[0]

    def extension(self) -> str | None:
        """Name of the driver, or None if the handle type is unrecognized."""
        return KNOWN_DRIVERS.get(self.driver)

    def server_version(self) -> str | None:
        """Ask the database server for its version string."""
        query = VERSION_QUERIES.get(self.driver, DEFAULT_VERSION_QUERY)
        cursor = self.connection.cursor()
        try:
            cursor.execute(query)
            row = cursor.fetchone()
        finally:
            cursor.close()

        if not row:
            return None
        return None if row[0] is None else str(row[0])

    def client_version(self) -> str | None:
        """Version of the client library the driver talks through.

        Modern drivers expose ``client_info`` on the connection. Otherwise
        fall back to the driver module's ``get_client_info()`` string (or
        the SQLite library version) and parse it.
        """
        info = getattr(self.connection, "client_info", None)
        if isinstance(info, str) and info:
            return info

        module = sys.modules.get(self.driver)
        if module is None:
            return None

        get_client_info = getattr(module, "get_client_info", None)
        if callable(get_client_info):
            return parse_client_version(str(get_client_info()))

        return parse_client_version(getattr(module, "sqlite_version", None))


def open_database(config: dict[str, Any]) -> DatabaseHandle | None:
    """Open the configured SQLite database.

    Returns None when no database is configured or it cannot be opened;
    the report then carries an empty database group.
    """
    path = config.get("path")
    if not path:
        return None

    settings = DatabaseSettings(
        user=str(config.get("user", "")),
        host=str(config.get("host", "localhost")),
        name=str(config.get("name", path)),
        prefix=str(config.get("prefix", "")),
        charset=str(config.get("charset", "utf8")),
        collate=str(config.get("collate", "")),
    )

    try:
        # Read-only URI so the report can never write
        if path == ":memory:":
            conn = sqlite3.connect(":memory:", check_same_thread=False)
        else:
            uri = Path(path).expanduser().resolve().as_uri() + "?mode=ro"
            conn = sqlite3.connect(uri, uri=True, check_same_thread=False)
    except sqlite3.Error as e:
        logger.warning("Could not open database %s: %s", path, e)
        return None

    return DatabaseHandle(conn, settings)
