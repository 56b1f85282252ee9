"""JSON configuration file load/save."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

import orjson

from brewfmt.models.config import FormatterConfig

logger = logging.getLogger(__name__)


def load_config(
    path: str | Path,
    config: FormatterConfig | None = None,
) -> tuple[FormatterConfig, bool]:
    """Shallow-merge the JSON file at *path* over *config* (defaults if None).

    Returns ``(config, found)``. A missing, unreadable or malformed file leaves
    the base configuration untouched and reports ``found=False``.
    """
    base = config if config is not None else FormatterConfig()
    path = Path(path)
    if not path.is_file():
        return base, False

    try:
        data = orjson.loads(path.read_bytes())
    except (OSError, orjson.JSONDecodeError) as exc:
        logger.error("Failed to load configuration from %s: %s", path, exc)
        return base, False

    if not isinstance(data, dict):
        logger.error("Failed to load configuration from %s: top level is not an object", path)
        return base, False

    return base.merged(data), True


def save_config(config: FormatterConfig, path: str | Path) -> bool:
    """Write *config* to *path* atomically. Returns False on failure."""
    path = Path(path)
    payload = orjson.dumps(config.to_dict(), option=orjson.OPT_INDENT_2 | orjson.OPT_APPEND_NEWLINE)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, path)
        except BaseException:
            os.unlink(tmp)
            raise
    except OSError as exc:
        logger.error("Failed to save configuration to %s: %s", path, exc)
        return False
    return True
