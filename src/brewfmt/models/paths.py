"""Per-user state layout: config file and provisioned tool directories."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

HOME_ENV_VAR = "BREWFMT_HOME"
DEFAULT_HOME_DIRNAME = ".brew-formatter"
CONFIG_FILENAME = "config.json"
TOOLS_SUBDIR = "tools"


def default_home() -> Path:
    """Return ``$BREWFMT_HOME`` when set, else ``~/.brew-formatter``."""
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / DEFAULT_HOME_DIRNAME


@dataclass(frozen=True, slots=True)
class StatePaths:
    home: Path

    @classmethod
    def resolve(cls, home: str | Path | None = None) -> StatePaths:
        return cls(home=Path(home) if home is not None else default_home())

    @property
    def config_file(self) -> Path:
        return self.home / CONFIG_FILENAME

    @property
    def tools_dir(self) -> Path:
        return self.home / TOOLS_SUBDIR

    def tool_dir(self, name: str) -> Path:
        return self.tools_dir / name
