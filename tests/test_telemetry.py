from __future__ import annotations

from contextlib import nullcontext
from typing import Any, List, Tuple

import pytest

from markdown_pro.buffer import MemorySurface, Selection
from markdown_pro.engine import KeyInput
from markdown_pro.runtime import telemetry
from markdown_pro.runtime.telemetry import LogSettings
from markdown_pro.session import EditorSession


class RecordingLogger:
    """Stands in for a telelog logger; keeps every structured call."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, dict]] = []
        self.context: dict = {}

    def __getattr__(self, name: str) -> Any:
        if not name.endswith("_with"):
            raise AttributeError(name)
        level = name[: -len("_with")]

        def emit(message: str, pairs: list) -> None:
            self.records.append((level, message, dict(pairs)))

        return emit

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        self.context.pop(key, None)

    def profile(self, name: str) -> Any:
        return nullcontext()

    def track_component(self, name: str) -> Any:
        return nullcontext()


@pytest.fixture
def recorder(monkeypatch: pytest.MonkeyPatch) -> RecordingLogger:
    telemetry.get_logger()  # settle configuration before swapping the logger in
    fake = RecordingLogger()
    monkeypatch.setitem(telemetry._LOGGERS, telemetry.active_settings().logger_name, fake)
    return fake


def test_log_settings_read_environment() -> None:
    settings = LogSettings.from_env(
        {
            "MARKDOWN_PRO_LOG_LEVEL": "info",
            "MARKDOWN_PRO_NO_COLOR": "1",
            "MARKDOWN_PRO_LOG_FILE": "editor.log",
            "MARKDOWN_PRO_LOG_BUFFER_SIZE": "many",
        }
    )

    assert settings.level == "INFO"
    assert settings.color is False
    assert settings.file == "editor.log"
    assert settings.buffer_size == 2048


def test_preset_overlays_settings_and_keeps_configured_file() -> None:
    production = LogSettings().with_preset("production")
    pinned = LogSettings(file="custom.log").with_preset("Production")

    assert production.level == "INFO"
    assert production.console is False
    assert production.file == "markdown_pro.log"
    assert pinned.file == "custom.log"


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        LogSettings().with_preset("verbose")


def test_span_attaches_metadata_while_open(recorder: RecordingLogger) -> None:
    with telemetry.span("export::write", metadata={"bytes": 3}) as handle:
        assert recorder.context == {"bytes": "3"}
        handle.add_metadata("path", "README.md")

    assert recorder.context == {}
    assert handle.metadata == {"bytes": "3", "path": "README.md"}


def test_span_reports_failure_and_reraises(recorder: RecordingLogger) -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("session::dispatch", component="session"):
            raise RuntimeError("boom")

    level, message, payload = recorder.records[-1]
    assert (level, message) == ("error", "span::fail")
    assert payload["reason"] == "boom"
    assert payload["component"] == "session"


def test_cancelled_shortcut_is_reported_on_its_span(recorder: RecordingLogger) -> None:
    session = EditorSession(MemorySurface("x", Selection(0, 1)))

    session.handle_key(KeyInput("l", ("ctrl",)))

    level, message, payload = next(
        record for record in recorder.records if record[1] == "span::cancel"
    )
    assert level == "warning"
    assert payload["action"] == "format.link"
    assert payload["status"] == "cancelled"


def test_record_event_prefixes_name(recorder: RecordingLogger) -> None:
    telemetry.record_event("history.capture", level="debug", data={"depth": 1})

    assert recorder.records[-1] == (
        "debug",
        "event::history.capture",
        {"event": "history.capture", "depth": "1"},
    )
