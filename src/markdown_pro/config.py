"""Editor settings resolved from the environment."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from markdown_pro.buffer import DEFAULT_HISTORY_LIMIT
from markdown_pro.runtime.env import ENV_PREFIX, env_flag, env_int, env_value


@dataclass(slots=True)
class EditorSettings:
    history_limit: int = DEFAULT_HISTORY_LIMIT
    export_dir: Path = field(default_factory=Path.cwd)
    dark: bool = False
    show_preview: bool = True

    def __post_init__(self) -> None:
        if self.history_limit < 1:
            raise ValueError("history_limit must be at least 1")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorSettings":
        limit = env_int("HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT, environ)
        export_dir = env_value("EXPORT_DIR", environ)
        return cls(
            history_limit=limit if limit >= 1 else DEFAULT_HISTORY_LIMIT,
            export_dir=Path(export_dir) if export_dir else Path.cwd(),
            dark=env_flag("DARK", False, environ),
            show_preview=env_flag("PREVIEW", True, environ),
        )


__all__ = ["ENV_PREFIX", "EditorSettings"]
