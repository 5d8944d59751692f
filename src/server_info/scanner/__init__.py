"""Scanner package - Fact collection for each report group.

Scanners probe the environment and build groups of facts.
They do NOT format markup - that's the renderer's job.
"""

from server_info.scanner.application import ApplicationScanner
from server_info.scanner.database import DatabaseScanner
from server_info.scanner.host import HostScanner

__all__ = [
    "ApplicationScanner",
    "DatabaseScanner",
    "HostScanner",
]
