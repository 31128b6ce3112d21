"""Bridges an EditorSession to a Textual ``TextArea`` and host UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Mapping, Optional, Protocol, Tuple

from textual.widgets.text_area import Selection as TextAreaSelection

from markdown_pro.buffer import (
    BufferMirror,
    Selection,
    ensure_selection,
    location_from_offset,
    offset_for_location,
)
from markdown_pro.engine import (
    DispatchResult,
    KeyInput,
    ParameterKind,
    ScriptedParameters,
)
from markdown_pro.engine.scheduler import Callback
from markdown_pro.runtime import telemetry
from markdown_pro.session import EditorSession

Answers = Optional[Mapping[ParameterKind, str]]


class TextAreaLike(Protocol):
    text: str
    selection: TextAreaSelection

    def load_text(self, text: str) -> None: ...

    def focus(self, scroll_visible: bool = True) -> object: ...

    def call_after_refresh(self, callback: Callable[..., object], *args: object) -> bool: ...


class TextAreaSurface:
    """Text surface over a ``TextArea``; also its render scheduler.

    ``TextArea`` works in ``(row, column)`` locations, the engine in offsets.
    """

    def __init__(self, text_area: TextAreaLike) -> None:
        self.text_area = text_area

    @property
    def text(self) -> str:
        return self.text_area.text

    @property
    def selection(self) -> Selection:
        text = self.text_area.text
        start, end = self.text_area.selection
        return Selection(
            offset_for_location(text, start), offset_for_location(text, end)
        ).ordered()

    def set_text(self, text: str) -> None:
        kept = self.selection.clamp(len(text))
        self.text_area.load_text(text)
        self._select(text, kept)

    def set_selection(self, start: int, end: int) -> None:
        text = self.text_area.text
        self._select(text, ensure_selection(text, Selection(start, end)))

    def focus(self) -> None:
        self.text_area.focus()

    def after_render(self, callback: Callback) -> None:
        self.text_area.call_after_refresh(callback)

    def _select(self, text: str, selection: Selection) -> None:
        self.text_area.selection = TextAreaSelection(
            location_from_offset(text, selection.start),
            location_from_offset(text, selection.end),
        )


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


ParameterCollector = Callable[
    [Tuple[ParameterKind, ...], Callable[[Answers], None]], None
]


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None] = _noop
    update_status: Callable[[str], None] = _noop
    # Asks the user for each kind, then calls back with the answers or None.
    collect_parameters: Optional[ParameterCollector] = None
    log: Callable[[str], None] = _noop


def split_textual_key(key: str) -> Tuple[str, Tuple[str, ...]]:
    """``"ctrl+shift+c"`` -> ``("c", ("ctrl", "shift"))``."""

    if key.endswith("++"):
        return "+", tuple(part for part in key[:-2].split("+") if part)
    parts = key.split("+")
    return parts[-1], tuple(parts[:-1])


class TextualEditorAdapter:
    """Routes Textual key events into the session and reports back to the UI."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self.logger = telemetry.get_logger("markdown_pro.adapters.textual")
        self._subscribe_events()

    def handle_textual_key(
        self,
        key: str,
        *,
        modifiers: Iterable[str] = (),
        text: Optional[str] = None,
    ) -> DispatchResult:
        """Dispatch a key; prompted actions collect their answers first when hooked."""

        base_key, key_modifiers = split_textual_key(key)
        key_input = KeyInput(
            key=base_key,
            modifiers=tuple(key_modifiers) + tuple(modifiers),
            text=text,
        )
        match = self.session.lookup(key_input)
        if match is None:
            return DispatchResult(consumed=False, status="miss")

        self.hooks.log(f"key -> {key!r} action={match.action.id}")
        kinds = tuple(ParameterKind(kind) for kind in match.action.prompts)
        if kinds and self.hooks.collect_parameters is not None:
            action_id = match.action.id
            self.hooks.collect_parameters(
                kinds, lambda answers: self._run_with_answers(action_id, answers)
            )
            return DispatchResult(consumed=True, status="pending", action_id=action_id)

        result = self.session.handle_key(key_input)
        self._after_result(result)
        return result

    def run_action(self, action_id: str) -> DispatchResult:
        result = self.session.run_action(action_id)
        self._after_result(result)
        return result

    def _run_with_answers(self, action_id: str, answers: Answers) -> DispatchResult:
        if answers is None:
            result = DispatchResult(
                consumed=True, status="cancelled", action_id=action_id
            )
        else:
            result = self.session.run_action(
                action_id, prompts=ScriptedParameters(dict(answers))
            )
        self._after_result(result)
        return result

    def _after_result(self, result: DispatchResult) -> None:
        label = result.message or result.action_id or ""
        status = label if result.status == "ok" else f"{label}:{result.status}"
        self.hooks.update_status(status)
        self.hooks.update_buffer(self.session.snapshot())
        self.hooks.log(f"result <- {result.status} {label}")

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in (
            "transform.apply",
            "transform.cancel",
            "history.undo",
            "history.redo",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self.hooks.log(f"event -> {name} {payload!r}")
        data: Dict[str, object] = {"payload": payload}
        telemetry.record_event(name, level="debug", data=data)


__all__ = [
    "TextAreaSurface",
    "TextualEditorAdapter",
    "TextualUIHooks",
    "split_textual_key",
]
