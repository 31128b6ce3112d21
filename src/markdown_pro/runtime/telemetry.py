"""Editor logging on top of telelog.

Settings come from ``MARKDOWN_PRO_*`` variables, optionally overlaid with a
named preset (``MARKDOWN_PRO_LOG_PRESET`` or ``markdown-pro --log-preset``).
Dispatch, history and export code log through :func:`record_event` and
:func:`span`.
"""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

from .env import env_flag, env_int, env_value

tl = cast(Any, telelog)

DEFAULT_LOGGER_NAME = "markdown_pro"

# preset -> field overrides; "file" only applies when no file is configured.
PRESETS: Mapping[str, Mapping[str, Any]] = {
    "development": {"level": "DEBUG", "console": True, "color": True, "json": False},
    "production": {
        "level": "INFO",
        "console": False,
        "buffered": True,
        "file": "markdown_pro.log",
    },
    "performance": {
        "level": "DEBUG",
        "console": False,
        "buffered": True,
        "json": True,
        "file": "markdown_pro-performance.log",
    },
}


@dataclass(frozen=True)
class LogSettings:
    level: str = "WARNING"
    console: bool = True
    color: bool = True
    json: bool = False
    file: str = ""
    buffered: bool = False
    buffer_size: int = 2048
    logger_name: str = DEFAULT_LOGGER_NAME

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LogSettings":
        return cls(
            level=(env_value("LOG_LEVEL", environ) or "WARNING").upper(),
            console=not env_flag("DISABLE_CONSOLE", False, environ),
            color=not env_flag("NO_COLOR", False, environ),
            json=env_flag("LOG_JSON", False, environ),
            file=env_value("LOG_FILE", environ) or "",
            buffered=env_flag("LOG_BUFFERED", False, environ),
            buffer_size=env_int("LOG_BUFFER_SIZE", 2048, environ),
            logger_name=env_value("LOGGER", environ) or DEFAULT_LOGGER_NAME,
        )

    def with_preset(self, preset: str) -> "LogSettings":
        try:
            overrides = dict(PRESETS[preset.lower()])
        except KeyError:
            raise ValueError(
                f"Unknown log preset '{preset}' (expected one of {sorted(PRESETS)})"
            ) from None
        preset_file = overrides.pop("file", None)
        if preset_file and not self.file:
            overrides["file"] = preset_file
        return replace(self, **overrides)


def _to_config(settings: LogSettings) -> Any:
    config = tl.Config()
    config.with_min_level(settings.level)
    config.with_console_output(settings.console)
    if settings.console:
        config.with_colored_output(settings.color)
    config.with_json_format(settings.json)
    if settings.file:
        config.with_file_output(settings.file)
    if settings.buffered:
        config.with_buffering(True)
        config.with_buffer_size(settings.buffer_size)
    config.with_profiling(True)
    return config


_LOGGERS: MutableMapping[str, Any] = {}
_settings: LogSettings = LogSettings()
_config: Optional[Any] = None


def configure(
    settings: Optional[LogSettings] = None, *, preset: Optional[str] = None
) -> LogSettings:
    """Rebuild the telelog configuration and drop cached loggers.

    Without ``settings`` the environment is read. ``preset`` (or
    ``MARKDOWN_PRO_LOG_PRESET``) is applied on top.
    """

    global _settings, _config
    resolved = settings or LogSettings.from_env()
    preset = preset or env_value("LOG_PRESET")
    if preset:
        resolved = resolved.with_preset(preset)
    _settings = resolved
    _config = _to_config(resolved)
    _LOGGERS.clear()
    return resolved


def active_settings() -> LogSettings:
    return _settings


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or _settings.logger_name
    log = _LOGGERS.get(logger_name)
    if log is None:
        if _config is None:
            configure()
        log = tl.Logger.with_config(logger_name, _config)
        _LOGGERS[logger_name] = log
    return log


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _log(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    name = level.lower()
    structured = getattr(log, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(k), _text(v)) for k, v in payload.items()])
        return
    plain = getattr(log, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _log(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Live view of an open span; metadata added here is logged on cancel/fail."""

    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def cancel(self, reason: Optional[str] = None) -> None:
        self._report("warning", "span::cancel", reason)

    def fail(self, reason: str) -> None:
        self._report("error", "span::fail", reason)

    def _report(self, level: str, message: str, reason: Optional[str]) -> None:
        payload: Dict[str, Any] = {"span": self.name, **self.metadata}
        if self.component:
            payload["component"] = self.component
        if reason:
            payload["reason"] = reason
        _log(self.logger, level, message, payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block; ``metadata`` is logger context while it runs.

    An exception escaping the block is reported with ``span::fail`` and
    re-raised.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(
        logger=log,
        name=name,
        component=component,
        metadata={key: _text(value) for key, value in (metadata or {}).items()},
    )
    with ExitStack() as stack:
        for key, value in handle.metadata.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "PRESETS",
    "LogSettings",
    "SpanHandle",
    "active_settings",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
