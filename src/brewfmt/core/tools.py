"""Catalog of the external tools brewfmt provisions and drives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from brewfmt.models.config import FormatterConfig
from brewfmt.models.paths import StatePaths

MANIFEST_FILENAME = "package.json"
MANIFEST_NAME_PREFIX = "brew-formatter-"
MANIFEST_VERSION = "1.0.0"

ESLINT_EXTENSIONS = frozenset({".js", ".jsx", ".ts", ".tsx", ".vue"})
STYLELINT_EXTENSIONS = frozenset({".css", ".scss", ".sass", ".less"})


@dataclass(frozen=True, slots=True)
class ToolSpec:
    name: str
    binary: str
    config_filename: str
    dependencies: dict[str, str]
    build_config: Callable[[FormatterConfig], dict[str, Any]]
    # None means the tool applies to every configured extension.
    extensions: frozenset[str] | None = None
    fix_args: tuple[str, ...] = ("--fix",)

    def directory(self, paths: StatePaths) -> Path:
        return paths.tool_dir(self.name)

    def bin_path(self, paths: StatePaths) -> Path:
        return self.directory(paths) / "node_modules" / ".bin" / self.binary

    def config_path(self, paths: StatePaths) -> Path:
        return self.directory(paths) / self.config_filename

    def manifest(self) -> dict[str, Any]:
        return {
            "name": f"{MANIFEST_NAME_PREFIX}{self.name}",
            "version": MANIFEST_VERSION,
            "private": True,
            "dependencies": dict(self.dependencies),
        }

    def handles(self, suffix: str) -> bool:
        return self.extensions is None or suffix.lower() in self.extensions


def _prettier_config(config: FormatterConfig) -> dict[str, Any]:
    return dict(config.prettier)


def _eslint_config(_config: FormatterConfig) -> dict[str, Any]:
    return {
        "env": {"browser": True, "es2021": True, "node": True},
        "extends": [
            "eslint:recommended",
            "plugin:react/recommended",
            "plugin:@typescript-eslint/recommended",
            "prettier",
        ],
        "parser": "@typescript-eslint/parser",
        "parserOptions": {
            "ecmaFeatures": {"jsx": True},
            "ecmaVersion": "latest",
            "sourceType": "module",
        },
        "plugins": ["react", "@typescript-eslint"],
        "rules": {"no-unused-vars": "warn", "no-console": "off"},
    }


def _stylelint_config(_config: FormatterConfig) -> dict[str, Any]:
    return {
        "extends": ["stylelint-config-standard", "stylelint-config-standard-scss"],
        "rules": {"indentation": 2, "string-quotes": "single"},
    }


PRETTIER = ToolSpec(
    name="prettier",
    binary="prettier",
    config_filename=".prettierrc",
    dependencies={
        "prettier": "^3.2.0",
        "@prettier/plugin-php": "^0.22.0",
        "@prettier/plugin-ruby": "^4.0.2",
        "prettier-plugin-svelte": "^3.1.0",
        "prettier-plugin-astro": "^0.12.0",
        "prettier-plugin-tailwindcss": "^0.5.0",
    },
    build_config=_prettier_config,
    fix_args=("--write",),
)

ESLINT = ToolSpec(
    name="eslint",
    binary="eslint",
    config_filename=".eslintrc.json",
    dependencies={
        "eslint": "^8.55.0",
        "eslint-config-prettier": "^9.1.0",
        "eslint-plugin-react": "^7.33.0",
        "eslint-plugin-vue": "^9.19.0",
        "@typescript-eslint/eslint-plugin": "^6.13.0",
        "@typescript-eslint/parser": "^6.13.0",
    },
    build_config=_eslint_config,
    extensions=ESLINT_EXTENSIONS,
)

STYLELINT = ToolSpec(
    name="stylelint",
    binary="stylelint",
    config_filename=".stylelintrc.json",
    dependencies={
        "stylelint": "^15.11.0",
        "stylelint-config-standard": "^34.0.0",
        "stylelint-config-standard-scss": "^11.0.0",
    },
    build_config=_stylelint_config,
    extensions=STYLELINT_EXTENSIONS,
)

ALL_TOOLS: tuple[ToolSpec, ...] = (PRETTIER, ESLINT, STYLELINT)


def linters_for(config: FormatterConfig) -> list[ToolSpec]:
    """Linters enabled in *config*, in invocation order."""
    enabled: list[ToolSpec] = []
    if config.eslint.enabled:
        enabled.append(ESLINT)
    if config.stylelint.enabled:
        enabled.append(STYLELINT)
    return enabled
