"""brewfmt exception hierarchy.

Everything raised on purpose by brewfmt inherits from BrewFormatterError so the
CLI can tell expected failures apart from programming errors.
"""

from __future__ import annotations

from collections.abc import Sequence


class BrewFormatterError(Exception):
    """Base exception for all brewfmt errors."""


class CommandError(BrewFormatterError):
    """Raised when an external command cannot start or exits non-zero."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        name = command[0] if command else "<empty>"
        if returncode is None:
            message = f"Command '{name}' could not be started: {stderr or '<no detail>'}"
        else:
            detail = stderr.strip() or "<none>"
            message = f"Command '{name}' exited with status {returncode}: {detail}"
        super().__init__(message)
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class ProvisioningError(BrewFormatterError):
    """Raised when an external tool cannot be installed into its directory."""

    def __init__(self, tool: str, reason: str) -> None:
        super().__init__(f"Failed to install {tool}: {reason}")
        self.tool = tool
        self.reason = reason
