"""Scan orchestration: banner, traversal, timing and summary."""

from __future__ import annotations

import time
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from brewfmt.core.dispatcher import Dispatcher
from brewfmt.core.scanner import scan_directory
from brewfmt.models.config import FormatterConfig
from brewfmt.models.paths import StatePaths
from brewfmt.models.stats import RunStats
from brewfmt.utils import fmt_seconds

console = Console()

PRODUCT_NAME = "Homebrew Code Formatter"


def banner() -> Panel:
    return Panel.fit(
        f"[bold]{PRODUCT_NAME}[/bold]\nScan, format and lint source trees",
        border_style="blue",
        padding=(1, 6),
    )


def _summary_table(stats: RunStats, elapsed: float) -> Table:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan")
    table.add_column("Value", justify="right")
    table.add_row("Files scanned", f"{stats.scanned:,}")
    table.add_row("Files formatted", f"{stats.formatted:,}")
    table.add_row("Already formatted", f"{stats.skipped:,}")
    table.add_row("Errors", f"[red]{stats.errors:,}[/red]" if stats.errors else "0")
    table.add_row("Duration", fmt_seconds(elapsed))
    return table


def closing_message(stats: RunStats) -> str:
    if stats.formatted > 0:
        return "[bold green]Formatting complete![/bold green]"
    if stats.scanned > 0:
        return "[bold green]All files are already formatted![/bold green]"
    return "[yellow]No files to format found.[/yellow]"


def run_format(
    root: str | Path,
    config: FormatterConfig,
    paths: StatePaths,
    dispatcher: Dispatcher | None = None,
) -> RunStats:
    """Format every eligible file under *root*. Returns the run's counters."""
    dispatcher = dispatcher or Dispatcher(config, paths)
    stats = RunStats()

    console.print(banner())
    console.print(f"\n[bold]Scanning[/bold] {escape(str(root))}")
    console.print(f"  Extensions: {', '.join(config.extensions)}\n")

    start = time.monotonic()
    completed = scan_directory(root, config, stats, lambda p: dispatcher.format_file(p, stats))
    elapsed = time.monotonic() - start

    if not completed:
        return stats

    console.print()
    console.print("[bold]Summary[/bold]")
    console.print(_summary_table(stats, elapsed))
    console.print()
    console.print(closing_message(stats))
    return stats
