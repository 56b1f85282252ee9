"""Interactive configurator — questionary prompts for each config field."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import questionary
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from brewfmt.io.config_io import save_config
from brewfmt.models.config import FormatterConfig, normalize_extension
from brewfmt.models.paths import StatePaths
from brewfmt.utils import split_csv

console = Console()


def parse_bool(text: str) -> bool:
    return text.strip().lower() == "true"


def parse_int(text: str) -> int:
    return int(text.strip(), 10)


def parse_extensions(text: str) -> list[str]:
    return [normalize_extension(e) for e in split_csv(text)]


def _is_int(text: str) -> bool | str:
    if not text.strip():
        return True
    try:
        parse_int(text)
    except ValueError:
        return "Please enter a whole number (or leave empty to keep the current value)"
    return True


def _show(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True, slots=True)
class SetupField:
    prompt: str
    current: Callable[[FormatterConfig], Any]
    parse: Callable[[str], Any]
    apply: Callable[[FormatterConfig, Any], None]
    validate: Callable[[str], bool | str] | None = None

    def message(self, config: FormatterConfig) -> str:
        return f"{self.prompt} [{_show(self.current(config))}]:"


def _set_extensions(config: FormatterConfig, value: list[str]) -> None:
    config.extensions = value


def _set_ignore_dirs(config: FormatterConfig, value: list[str]) -> None:
    config.ignore_dirs = value


def _set_print_width(config: FormatterConfig, value: int) -> None:
    config.prettier["printWidth"] = value


def _set_use_tabs(config: FormatterConfig, value: bool) -> None:
    config.prettier["useTabs"] = value


def _set_eslint(config: FormatterConfig, value: bool) -> None:
    config.eslint.enabled = value


def _set_stylelint(config: FormatterConfig, value: bool) -> None:
    config.stylelint.enabled = value


SETUP_FIELDS: tuple[SetupField, ...] = (
    SetupField(
        "Extensions to format",
        lambda c: c.extensions,
        parse_extensions,
        _set_extensions,
    ),
    SetupField(
        "Directories to ignore",
        lambda c: c.ignore_dirs,
        split_csv,
        _set_ignore_dirs,
    ),
    SetupField(
        "Print width (printWidth)",
        lambda c: c.prettier.get("printWidth"),
        parse_int,
        _set_print_width,
        validate=_is_int,
    ),
    SetupField(
        "Indent with tabs (true/false)",
        lambda c: bool(c.prettier.get("useTabs", False)),
        parse_bool,
        _set_use_tabs,
    ),
    SetupField(
        "Enable ESLint (true/false)",
        lambda c: c.eslint.enabled,
        parse_bool,
        _set_eslint,
    ),
    SetupField(
        "Enable Stylelint (true/false)",
        lambda c: c.stylelint.enabled,
        parse_bool,
        _set_stylelint,
    ),
)


def apply_answer(field: SetupField, config: FormatterConfig, answer: str) -> None:
    """Apply a raw prompt answer; an empty answer keeps the current value."""
    if not answer.strip():
        return
    field.apply(config, field.parse(answer))


def _config_panel(config: FormatterConfig) -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan")
    table.add_column("Value")
    table.add_row("Extensions", _show(config.extensions))
    table.add_row("Ignored dirs", _show(config.ignore_dirs))
    for key, value in config.prettier.items():
        table.add_row(key, _show(value))
    table.add_row("ESLint", _show(config.eslint.enabled))
    table.add_row("Stylelint", _show(config.stylelint.enabled))
    return Panel(table, title="Configuration", border_style="blue")


def run_setup(config: FormatterConfig, paths: StatePaths) -> bool:
    """Prompt for every field in turn, then persist. False if cancelled or unsaved."""
    console.print("\n[bold blue]Homebrew Code Formatter setup[/bold blue]\n")

    for field in SETUP_FIELDS:
        answer = questionary.text(field.message(config), default="", validate=field.validate).ask()
        if answer is None:
            console.print("[yellow]Setup cancelled, nothing saved.[/yellow]")
            return False
        apply_answer(field, config, answer)

    if not save_config(config, paths.config_file):
        console.print(f"[red]Could not save configuration to {paths.config_file}[/red]")
        return False

    console.print(_config_panel(config))
    console.print(f"[green]Saved to {paths.config_file}[/green]")
    return True
