"""Local Connector - Read-only command execution on the hosting server.

This module runs shell probes (such as ``uptime``) on the machine the
application is served from. It never raises for a failing command: the
result carries the exit code and callers decide what a failure means.
"""

import shlex
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass
class CommandResult:
    """Result of a command execution."""

    command: str
    stdout: str
    stderr: str
    exit_code: int
    success: bool = field(init=False)

    def __post_init__(self) -> None:
        self.success = self.exit_code == 0


class LocalConnector:
    """Runs read-only commands on the local host.

    Example:
        >>> connector = LocalConnector()
        >>> result = connector.run("uptime")
        >>> print(result.stdout)
    """

    def __init__(self, timeout: float = 5.0) -> None:
        self.timeout = timeout

    def run(self, command: str | Sequence[str], timeout: float | None = None) -> CommandResult:
        """Execute a command without a shell.

        Args:
            command: Command line or argument list.
            timeout: Timeout in seconds. Defaults to the connector timeout.

        Returns:
            CommandResult with stdout, stderr, and exit_code.
        """
        if isinstance(command, str):
            args = shlex.split(command)
            display = command
        else:
            args = list(command)
            display = shlex.join(args)

        cmd_timeout = timeout if timeout is not None else self.timeout

        try:
            completed = subprocess.run(
                args,
                capture_output=True,
                text=True,
                timeout=cmd_timeout,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as e:
            # Missing binary, permission problem or timeout
            return CommandResult(
                command=display,
                stdout="",
                stderr=f"Execution error: {e}",
                exit_code=255,
            )

        return CommandResult(
            command=display,
            stdout=completed.stdout,
            stderr=completed.stderr,
            exit_code=completed.returncode,
        )
