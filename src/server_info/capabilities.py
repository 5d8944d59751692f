"""Capability detection for environment probes.

Every probe asks ``has_capability(name)`` once before it runs. A name is
either a dotted callable (``os.uname``) or a shell command (``uptime``).
Hosting setups that forbid some of these can list them as disabled in the
configuration file.
"""

import importlib
import shutil
from collections.abc import Iterable

# Capabilities used by the host scanner
OS_UNAME = "os.uname"
HOSTNAME = "socket.gethostname"
RUNTIME_VERSION = "platform.python_version"
CONFIG_READ = "resource.getrlimit"
UPTIME = "uptime"


class Capabilities:
    """Feature-detection interface for the current environment."""

    def __init__(self, disabled: Iterable[str] = ()) -> None:
        self.disabled = frozenset(disabled)

    def has_capability(self, name: str) -> bool:
        """Return True if the named probe can run here."""
        if name in self.disabled:
            return False

        if "." in name:
            module_name, _, attr = name.rpartition(".")
            try:
                module = importlib.import_module(module_name)
            except ImportError:
                return False
            return callable(getattr(module, attr, None))

        return shutil.which(name) is not None
