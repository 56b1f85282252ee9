"""Configuration models with sensible defaults."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (
    # JavaScript / TypeScript
    ".js",
    ".jsx",
    ".ts",
    ".tsx",
    # Web
    ".html",
    ".css",
    ".scss",
    ".sass",
    ".less",
    ".vue",
    ".svelte",
    # Data
    ".json",
    ".yaml",
    ".yml",
    ".md",
    ".mdx",
    # Ruby (Homebrew formulae)
    ".rb",
)

DEFAULT_IGNORE_DIRS: tuple[str, ...] = (
    "node_modules",
    ".git",
    "vendor",
    "tmp",
    "cache",
    "dist",
    "build",
    "Caskroom",
    "Cellar",
)

DEFAULT_PRETTIER_OPTIONS: dict[str, Any] = {
    "printWidth": 100,
    "tabWidth": 2,
    "useTabs": False,
    "semi": True,
    "singleQuote": True,
    "trailingComma": "es5",
    "bracketSpacing": True,
    "arrowParens": "avoid",
    "endOfLine": "lf",
}

# On-disk keys, kept compatible with existing config.json files.
KEY_EXTENSIONS = "extensions"
KEY_IGNORE_DIRS = "ignoreDirs"
KEY_PRETTIER = "prettierConfig"
KEY_ESLINT = "eslintConfig"
KEY_STYLELINT = "stylelintConfig"


@dataclass(slots=True)
class LinterConfig:
    enabled: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"enabled": self.enabled}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LinterConfig:
        value = data.get("enabled", True)
        if not isinstance(value, bool):
            logger.warning("Ignoring non-boolean linter setting enabled=%r", value)
            value = True
        return cls(enabled=value)


@dataclass(slots=True)
class FormatterConfig:
    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    ignore_dirs: list[str] = field(default_factory=lambda: list(DEFAULT_IGNORE_DIRS))
    prettier: dict[str, Any] = field(default_factory=lambda: dict(DEFAULT_PRETTIER_OPTIONS))
    eslint: LinterConfig = field(default_factory=LinterConfig)
    stylelint: LinterConfig = field(default_factory=LinterConfig)

    def to_dict(self) -> dict[str, Any]:
        return {
            KEY_EXTENSIONS: list(self.extensions),
            KEY_IGNORE_DIRS: list(self.ignore_dirs),
            KEY_PRETTIER: dict(self.prettier),
            KEY_ESLINT: self.eslint.to_dict(),
            KEY_STYLELINT: self.stylelint.to_dict(),
        }

    def merged(self, data: dict[str, Any]) -> FormatterConfig:
        """Return a copy with top-level keys from *data* replacing ours.

        The merge is shallow: a present key replaces the whole field. Unknown
        keys and values of the wrong JSON type are ignored.
        """
        current = self.to_dict()
        for key, default in current.items():
            if key not in data:
                continue
            value = data[key]
            if not isinstance(value, type(default)):
                logger.warning(
                    "Ignoring config key %r: expected %s, got %s",
                    key,
                    type(default).__name__,
                    type(value).__name__,
                )
                continue
            current[key] = value
        return FormatterConfig.from_dict(current)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FormatterConfig:
        defaults = cls()
        eslint = data.get(KEY_ESLINT)
        stylelint = data.get(KEY_STYLELINT)
        return cls(
            extensions=[str(e) for e in data.get(KEY_EXTENSIONS, defaults.extensions)],
            ignore_dirs=[str(d) for d in data.get(KEY_IGNORE_DIRS, defaults.ignore_dirs)],
            prettier=dict(data.get(KEY_PRETTIER, defaults.prettier)),
            eslint=LinterConfig.from_dict(eslint) if isinstance(eslint, dict) else defaults.eslint,
            stylelint=(
                LinterConfig.from_dict(stylelint)
                if isinstance(stylelint, dict)
                else defaults.stylelint
            ),
        )

    def with_overrides(
        self,
        extensions: list[str] | None = None,
        ignore_dirs: list[str] | None = None,
    ) -> FormatterConfig:
        """Return a copy with per-run overrides applied (never persisted)."""
        copy = FormatterConfig.from_dict(self.to_dict())
        if extensions:
            copy.extensions = [normalize_extension(e) for e in extensions]
        if ignore_dirs:
            copy.ignore_dirs = list(ignore_dirs)
        return copy

    def extension_set(self) -> frozenset[str]:
        return frozenset(e.lower() for e in self.extensions)

    def ignore_set(self) -> frozenset[str]:
        return frozenset(self.ignore_dirs)


def normalize_extension(ext: str) -> str:
    """``"js"`` / ``".JS"`` -> ``".js"``."""
    return f".{ext.strip().lstrip('.').lower()}"
