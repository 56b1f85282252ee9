"""Recursive source-file discovery with an ignore-list."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from brewfmt.models.config import FormatterConfig
from brewfmt.models.stats import RunStats

logger = logging.getLogger(__name__)

console = Console()


def iter_source_files(root: str | Path, config: FormatterConfig) -> Iterator[Path]:
    """Yield files under *root* whose suffix is configured, depth-first.

    Directories whose name is in ``config.ignore_dirs`` are pruned along with
    their subtree. Entries are visited in name order; symlinked directories
    are not followed.
    """
    extensions = config.extension_set()
    ignored = config.ignore_set()
    yield from _walk(Path(root), extensions, ignored)


def _walk(directory: Path, extensions: frozenset[str], ignored: frozenset[str]) -> Iterator[Path]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        logger.warning("Cannot read directory %s: %s", directory, exc)
        return

    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            if entry.name in ignored:
                continue
            yield from _walk(Path(entry.path), extensions, ignored)
        elif entry.is_file() and os.path.splitext(entry.name)[1].lower() in extensions:
            yield Path(entry.path)


def scan_directory(
    root: str | Path,
    config: FormatterConfig,
    stats: RunStats,
    dispatch: Callable[[Path], object],
) -> bool:
    """Dispatch every eligible file under *root*, one at a time.

    Returns False, without touching *stats*, when *root* is not a directory.
    """
    root = Path(root)
    if not root.is_dir():
        logger.error("Scan root is not a directory: %s", root)
        console.print(
            f"[red]Error: {escape(str(root))} does not exist or is not a directory.[/red]"
        )
        return False

    for path in iter_source_files(root, config):
        stats.scanned += 1
        dispatch(path)
    return True
