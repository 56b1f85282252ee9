"""Install the external tools into isolated per-tool npm directories."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import orjson
from rich.console import Console

from brewfmt.core.process import run_command
from brewfmt.core.tools import MANIFEST_FILENAME, PRETTIER, ToolSpec, linters_for
from brewfmt.errors import BrewFormatterError, ProvisioningError
from brewfmt.models.config import FormatterConfig
from brewfmt.models.paths import StatePaths

logger = logging.getLogger(__name__)

console = Console()

INSTALL_COMMAND: tuple[str, ...] = ("npm", "install")


def _write_json(path: Path, data: dict[str, Any]) -> None:
    path.write_bytes(orjson.dumps(data, option=orjson.OPT_INDENT_2 | orjson.OPT_APPEND_NEWLINE))


def tools_installed(paths: StatePaths) -> bool:
    """True once the formatter binary exists (first-run detection)."""
    return PRETTIER.bin_path(paths).exists()


def provision_tool(
    spec: ToolSpec,
    config: FormatterConfig,
    paths: StatePaths,
    install_command: Sequence[str] = INSTALL_COMMAND,
) -> bool:
    """Install *spec* into its own directory unless that directory exists.

    Returns True when the tool was installed, False when it was already
    present. Raises :class:`ProvisioningError` on failure, after removing the
    partially written directory so the next run starts clean.
    """
    tool_dir = spec.directory(paths)
    if tool_dir.exists():
        logger.debug("%s already provisioned in %s", spec.name, tool_dir)
        return False

    console.print(f"\n[bold]Installing {spec.name}[/bold] into {tool_dir}")
    tool_dir.mkdir(parents=True)
    try:
        _write_json(tool_dir / MANIFEST_FILENAME, spec.manifest())
        _write_json(spec.config_path(paths), spec.build_config(config))
        run_command(list(install_command), cwd=tool_dir, capture_output=False)
    except (OSError, BrewFormatterError) as exc:
        shutil.rmtree(tool_dir, ignore_errors=True)
        raise ProvisioningError(spec.name, str(exc)) from exc
    except BaseException:
        shutil.rmtree(tool_dir, ignore_errors=True)
        raise

    console.print(f"  [green]{spec.name} installed.[/green]")
    return True


def tools_for(config: FormatterConfig) -> list[ToolSpec]:
    """The formatter, followed by whichever linters are enabled."""
    return [PRETTIER, *linters_for(config)]


def provision_all(
    config: FormatterConfig,
    paths: StatePaths,
    install_command: Sequence[str] = INSTALL_COMMAND,
) -> bool:
    """Provision every tool *config* needs. Returns True if all succeeded.

    A failing tool is reported and the next one is still attempted.
    """
    paths.tools_dir.mkdir(parents=True, exist_ok=True)
    console.print("\n[bold blue]Installing tools[/bold blue]")

    failed: list[str] = []
    for spec in tools_for(config):
        try:
            provision_tool(spec, config, paths, install_command)
        except ProvisioningError as exc:
            logger.error("%s", exc)
            console.print(f"  [red]{exc}[/red]")
            failed.append(spec.name)

    if failed:
        console.print(f"\n[bold red]Installation failed for: {', '.join(failed)}[/bold red]")
        return False
    console.print("\n[bold green]All tools are installed and configured.[/bold green]")
    return True
