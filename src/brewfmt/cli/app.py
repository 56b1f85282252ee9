"""Root Typer app: scan-and-format by default, plus setup and tool install."""

from __future__ import annotations

import logging
import os
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from brewfmt.core.provisioner import provision_all, tools_installed
from brewfmt.io.config_io import load_config
from brewfmt.models.paths import StatePaths
from brewfmt.pipeline.runner import PRODUCT_NAME, run_format
from brewfmt.utils import split_csv

logger = logging.getLogger(__name__)

console = Console()

EXAMPLES = """\
Examples:

  brewfmt                     Format the current directory

  brewfmt /path/to/dir        Format the given directory

  brewfmt --setup             Edit the configuration

  brewfmt --tools             Install or update the formatting tools
"""

app = typer.Typer(
    name="brewfmt",
    help="Recursively format and lint a source tree with Prettier, ESLint and Stylelint.",
    epilog=EXAMPLES,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        from brewfmt import __version__

        typer.echo(f"{PRODUCT_NAME} v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def main(
    path: Optional[str] = typer.Argument(
        None, help="Directory to format (defaults to the current directory)"
    ),
    setup: bool = typer.Option(
        False, "--setup", "-s", help="Configure extensions, ignored directories, etc."
    ),
    tools: bool = typer.Option(False, "--tools", "-t", help="Install or update the tools."),
    extensions: Optional[str] = typer.Option(
        None, "--extensions", help="Comma-separated extensions for this run only"
    ),
    ignore: Optional[str] = typer.Option(
        None, "--ignore", help="Comma-separated directory names to skip for this run only"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging."),
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", callback=_version_callback, is_eager=True, help="Show version."
    ),
) -> None:
    """Format every matching file under PATH."""
    configure_logging(verbose)
    paths = StatePaths.resolve()
    config, found = load_config(paths.config_file)
    logger.debug("Configuration %s from %s", "loaded" if found else "defaults", paths.config_file)

    if setup:
        from brewfmt.cli.setup import run_setup

        if not run_setup(config, paths):
            raise typer.Exit(1)
        return

    if tools:
        if not provision_all(config, paths):
            raise typer.Exit(1)
        return

    if not tools_installed(paths):
        console.print("[bold]First run detected, installing tools...[/bold]")
        provision_all(config, paths)

    run_config = config.with_overrides(
        extensions=split_csv(extensions) if extensions else None,
        ignore_dirs=split_csv(ignore) if ignore else None,
    )
    root = path or os.getcwd()

    try:
        run_format(root, run_config, paths)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        raise typer.Exit(130)
    except Exception as exc:
        logger.error("Scan failed", exc_info=True)
        console.print(f"\n[red]Error: {exc}[/red]")
        raise typer.Exit(1)
