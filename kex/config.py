"""Runtime configuration, read from environment variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

CATALOG_ENV_VAR = "KEX_FILE"
DEFAULT_CATALOG_FILE = "commands.yaml"

LOG_LEVEL_ENV_VAR = "KEX_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING


@dataclass(frozen=True)
class KexConfig:
    """Settings resolved once at startup."""

    catalog_path: Path
    log_level: int = DEFAULT_LOG_LEVEL


def resolve_catalog_path(environ: Mapping[str, str] | None = None) -> Path:
    """Return the catalog path from ``KEX_FILE``, or ``commands.yaml`` if unset."""
    env = os.environ if environ is None else environ
    location = env.get(CATALOG_ENV_VAR, "").strip()
    return Path(location).expanduser() if location else Path(DEFAULT_CATALOG_FILE)


def resolve_log_level(environ: Mapping[str, str] | None = None) -> int:
    env = os.environ if environ is None else environ
    name = env.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    level = logging.getLevelName(name) if name else DEFAULT_LOG_LEVEL
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def load_config(environ: Mapping[str, str] | None = None) -> KexConfig:
    return KexConfig(
        catalog_path=resolve_catalog_path(environ),
        log_level=resolve_log_level(environ),
    )
