"""Thin wrapper around ``subprocess.run`` for external tool invocations."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from brewfmt.errors import CommandError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    capture_output: bool = True,
    check: bool = True,
    timeout: float | None = None,
) -> CommandResult:
    """Run *args* without a shell and wait for it to finish.

    Output is captured in memory unless *capture_output* is False, in which
    case the child inherits our stdout/stderr. With *check*, a non-zero exit
    raises :class:`CommandError`. A binary that cannot be started always
    raises :class:`CommandError` with ``returncode=None``.
    """
    if not args:
        raise ValueError("run_command requires at least one argument")

    argv = [str(a) for a in args]
    logger.debug("Running %s", " ".join(argv))
    try:
        completed = subprocess.run(
            argv,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=capture_output,
            text=True,
            timeout=timeout,
            stdin=subprocess.DEVNULL,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        raise CommandError(argv, 124, stderr=f"timed out after {exc.timeout}s") from exc
    except OSError as exc:
        raise CommandError(argv, None, stderr=str(exc)) from exc

    result = CommandResult(
        args=tuple(argv),
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )
    if check and not result.ok:
        raise CommandError(argv, result.returncode, result.stdout, result.stderr)
    return result
