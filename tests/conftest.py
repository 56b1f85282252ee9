"""Fake toolchain fixtures: shell scripts standing in for the npm binaries."""

from __future__ import annotations

import stat
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from brewfmt.core.tools import ALL_TOOLS, ESLINT, PRETTIER, STYLELINT, ToolSpec
from brewfmt.models.config import FormatterConfig
from brewfmt.models.paths import StatePaths

# Content markers understood by the fake binaries:
#   UNFORMATTED  prettier --check exits 1, --write rewrites it to "formatted"
#   BROKEN       prettier exits 2 in both modes (parse error)
#   WRITEFAIL    prettier --write exits 2
#   CHECKFAIL    prettier --check exits 2, --write still succeeds
#   LINTFAIL     eslint / stylelint exit 1
FAKE_PRETTIER = textwrap.dedent(
    """\
    #!/bin/sh
    mode="$1"
    file="$4"
    echo "$mode $file" >> "$(dirname "$0")/../../calls.log"
    if grep -q BROKEN "$file"; then
        echo "SyntaxError: unexpected token" >&2
        exit 2
    fi
    case "$mode" in
        --check)
            if grep -q CHECKFAIL "$file"; then
                echo "internal error" >&2
                exit 2
            fi
            if grep -q UNFORMATTED "$file"; then
                echo "[warn] $file" >&2
                exit 1
            fi
            exit 0
            ;;
        --write)
            if grep -q WRITEFAIL "$file"; then
                echo "cannot write $file" >&2
                exit 2
            fi
            sed 's/UNFORMATTED/formatted/' "$file" > "$file.tmp" && mv "$file.tmp" "$file"
            exit 0
            ;;
    esac
    exit 2
    """
)

FAKE_LINTER = textwrap.dedent(
    """\
    #!/bin/sh
    echo "$1 $4" >> "$(dirname "$0")/../../calls.log"
    if grep -q LINTFAIL "$4"; then
        echo "1 problem (1 error, 0 warnings)" >&2
        exit 1
    fi
    exit 0
    """
)


def install_fake_tool(spec: ToolSpec, paths: StatePaths, script: str) -> Path:
    """Lay out *spec* as if ``npm install`` had run, with *script* as its binary."""
    bin_path = spec.bin_path(paths)
    bin_path.parent.mkdir(parents=True, exist_ok=True)
    bin_path.write_text(script)
    bin_path.chmod(bin_path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    spec.config_path(paths).write_text("{}\n")
    return bin_path


def read_calls(spec: ToolSpec, paths: StatePaths) -> list[str]:
    """Argument lines (mode and file) the fake binary of *spec* was called with."""
    log = spec.directory(paths) / "calls.log"
    if not log.exists():
        return []
    return log.read_text().splitlines()


@pytest.fixture
def state_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> StatePaths:
    """An empty per-user state directory, also exported as BREWFMT_HOME."""
    home = tmp_path / "home"
    monkeypatch.setenv("BREWFMT_HOME", str(home))
    return StatePaths.resolve(home)


@pytest.fixture
def fake_tools(state_paths: StatePaths) -> StatePaths:
    """State directory with fake prettier, eslint and stylelint installed."""
    install_fake_tool(PRETTIER, state_paths, FAKE_PRETTIER)
    install_fake_tool(ESLINT, state_paths, FAKE_LINTER)
    install_fake_tool(STYLELINT, state_paths, FAKE_LINTER)
    assert all(spec.bin_path(state_paths).exists() for spec in ALL_TOOLS)
    return state_paths


@pytest.fixture
def config() -> FormatterConfig:
    return FormatterConfig()


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """A small project tree.

    Layout:
        a.js                    needs formatting
        b.css                   already formatted
        README.txt              not a configured extension
        node_modules/c.js       ignored directory
        src/Nested.TS           needs formatting (upper-case suffix)
        src/build/skip.js       ignored directory, nested
        src/styles/site.scss    already formatted
    """
    root = tmp_path / "project"
    (root / "node_modules").mkdir(parents=True)
    (root / "src" / "build").mkdir(parents=True)
    (root / "src" / "styles").mkdir(parents=True)

    (root / "a.js").write_text("const a = UNFORMATTED;\n")
    (root / "b.css").write_text("body { color: red; }\n")
    (root / "README.txt").write_text("UNFORMATTED\n")
    (root / "node_modules" / "c.js").write_text("UNFORMATTED\n")
    (root / "src" / "Nested.TS").write_text("let x = UNFORMATTED;\n")
    (root / "src" / "build" / "skip.js").write_text("UNFORMATTED\n")
    (root / "src" / "styles" / "site.scss").write_text("a { b: c; }\n")
    return root


@pytest.fixture
def calls(state_paths: StatePaths) -> Callable[[ToolSpec], list[str]]:
    """``calls(ESLINT)`` -> invocations recorded by that fake binary."""
    return lambda spec: read_calls(spec, state_paths)
