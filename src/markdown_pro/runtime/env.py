"""``MARKDOWN_PRO_*`` environment lookups shared by logging and editor settings."""

from __future__ import annotations

import os
from typing import Mapping, Optional

ENV_PREFIX = "MARKDOWN_PRO_"

_TRUTHY = {"1", "true", "yes", "on"}


def env_value(name: str, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    source = os.environ if environ is None else environ
    return source.get(f"{ENV_PREFIX}{name}")


def env_flag(
    name: str, default: bool, environ: Optional[Mapping[str, str]] = None
) -> bool:
    raw = env_value(name, environ)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def env_int(
    name: str, fallback: int, environ: Optional[Mapping[str, str]] = None
) -> int:
    """Integer setting; unset or malformed values give ``fallback``."""

    raw = env_value(name, environ)
    if raw is None:
        return fallback
    try:
        return int(raw)
    except ValueError:
        return fallback


__all__ = ["ENV_PREFIX", "env_value", "env_flag", "env_int"]
