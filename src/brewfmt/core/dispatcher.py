"""Per-file dispatch: formatter check, formatter write, then linters."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from brewfmt.core.process import run_command
from brewfmt.core.tools import PRETTIER, ToolSpec, linters_for
from brewfmt.errors import CommandError
from brewfmt.models.config import FormatterConfig
from brewfmt.models.paths import StatePaths
from brewfmt.models.stats import CheckStatus, FileOutcome, RunStats

logger = logging.getLogger(__name__)

console = Console()

# Prettier exits 1 when --check finds unformatted files, 2 on its own errors.
CHECK_DIFFERS_EXIT_CODE = 1


class Dispatcher:
    """Runs the formatter and linters on one file at a time."""

    def __init__(self, config: FormatterConfig, paths: StatePaths) -> None:
        self.config = config
        self.paths = paths
        self.formatter = PRETTIER
        self.linters = linters_for(config)

    def _tool_args(self, spec: ToolSpec, flags: Sequence[str], path: Path) -> list[str]:
        return [
            str(spec.bin_path(self.paths)),
            *flags,
            "--config",
            str(spec.config_path(self.paths)),
            str(path),
        ]

    def check_file(self, path: Path) -> CheckStatus:
        try:
            result = run_command(self._tool_args(self.formatter, ("--check",), path), check=False)
        except CommandError as exc:
            logger.debug("Formatter check could not run on %s: %s", path, exc)
            return CheckStatus.FAILED

        if result.ok:
            return CheckStatus.COMPLIANT
        if result.returncode == CHECK_DIFFERS_EXIT_CODE:
            return CheckStatus.NEEDS_WRITE
        logger.debug(
            "Formatter check failed on %s (exit %d): %s",
            path,
            result.returncode,
            result.stderr.strip(),
        )
        return CheckStatus.FAILED

    def write_file(self, path: Path) -> None:
        """Rewrite *path* in place. Raises CommandError on failure."""
        run_command(self._tool_args(self.formatter, self.formatter.fix_args, path))

    def lint_file(self, spec: ToolSpec, path: Path) -> bool:
        """Run *spec* with its auto-fix flag. Failures only warn."""
        try:
            run_command(self._tool_args(spec, spec.fix_args, path))
        except CommandError as exc:
            logger.warning("%s reported problems in %s: %s", spec.name, path, exc)
            console.print(f"[yellow]{spec.name} warning for {escape(str(path))}[/yellow]")
            return False
        return True

    def format_file(self, path: Path, stats: RunStats) -> FileOutcome:
        """Check, write if needed, then lint; record the outcome in *stats*."""
        outcome = self._format(path)
        stats.record(outcome)
        return outcome

    def _format(self, path: Path) -> FileOutcome:
        status = self.check_file(path)
        if status is CheckStatus.COMPLIANT:
            logger.debug("Already formatted: %s", path)
            return FileOutcome.SKIPPED

        try:
            self.write_file(path)
        except CommandError as exc:
            logger.error("Failed to format %s: %s", path, exc)
            console.print(f"[red]Error formatting {escape(str(path))}[/red]")
            return FileOutcome.ERROR

        suffix = path.suffix.lower()
        for linter in self.linters:
            if linter.handles(suffix):
                self.lint_file(linter, path)

        console.print(f"[green]Formatted:[/green] {escape(str(path))}")
        return FileOutcome.FORMATTED
