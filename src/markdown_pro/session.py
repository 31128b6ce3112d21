"""Editor session: resolves shortcuts and runs transforms against a surface."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from markdown_pro.buffer import (
    DEFAULT_HISTORY_LIMIT,
    BufferMirror,
    HistoryState,
    MemorySurface,
    TextSurface,
)
from markdown_pro.engine import (
    DeferredScheduler,
    DispatchResult,
    EditorBus,
    EditorContext,
    KeyInput,
    NoParameters,
    ParameterRequest,
    RenderScheduler,
)
from markdown_pro.keymaps import (
    KeymapRegistry,
    KeymapResolver,
    ResolutionMatch,
    load_default_keymaps,
    normalize_chord,
)
from markdown_pro.runtime import telemetry


class EditorSession:
    """Owns one surface, its history and the shortcut table it answers to.

    Sessions share nothing, so several editors can run side by side.
    """

    def __init__(
        self,
        surface: Optional[TextSurface] = None,
        *,
        history: Optional[HistoryState] = None,
        prompts: Optional[ParameterRequest] = None,
        scheduler: Optional[RenderScheduler] = None,
        keymap_registry: Optional[KeymapRegistry] = None,
        keymap_resolver: Optional[KeymapResolver] = None,
        load_defaults: bool = True,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        self.logger = telemetry.get_logger("markdown_pro.session")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="markdown_pro.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="markdown_pro.keymaps"
        )
        self.context = EditorContext(
            surface=surface if surface is not None else MemorySurface(),
            history=history or HistoryState(history_limit),
            prompts=prompts or NoParameters(),
            scheduler=scheduler or DeferredScheduler(),
            bus=EditorBus(),
        )

    @property
    def surface(self) -> TextSurface:
        return self.context.surface

    @property
    def history(self) -> HistoryState:
        return self.context.history

    @property
    def bus(self) -> EditorBus:
        return self.context.bus

    def snapshot(self) -> BufferMirror:
        return BufferMirror(
            text=self.surface.text,
            selection=self.surface.selection,
            attributes={
                "undo_depth": str(self.history.undo_depth),
                "redo_depth": str(self.history.redo_depth),
            },
        )

    def lookup(self, key: KeyInput) -> Optional[ResolutionMatch]:
        result = self.keymap_resolver.resolve(normalize_chord(key.key, key.modifiers))
        if result.status == "match":
            return result.match
        return None

    def handle_key(self, key: KeyInput) -> DispatchResult:
        """Run the shortcut bound to ``key``; unbound chords are not consumed."""

        match = self.lookup(key)
        if match is None:
            return DispatchResult(consumed=False, status="miss")
        return self._execute(match, self.context)

    def run_action(
        self, action_id: str, *, prompts: Optional[ParameterRequest] = None
    ) -> DispatchResult:
        """Run an action directly, optionally answering its prompts up front."""

        action = self.keymap_registry.get_action(action_id)
        context = self.context
        if prompts is not None:
            context = replace(context, prompts=prompts)
        with telemetry.span(
            name="session::run_action",
            component="session",
            metadata={"action": action.id},
        ) as handle:
            result = _finish(handle, action(context, None), action.id)
        return result

    def _execute(self, match: ResolutionMatch, context: EditorContext) -> DispatchResult:
        with telemetry.span(
            name="session::dispatch",
            component="session",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ) as handle:
            result = _finish(handle, match.action(context, match), match.action.id)
        return result


def _finish(
    handle: telemetry.SpanHandle, outcome: object, action_id: str
) -> DispatchResult:
    result = _coerce(outcome, action_id)
    handle.add_metadata("status", result.status)
    if result.status == "cancelled":
        handle.cancel("prompt dismissed or invalid")
    return result


def _coerce(outcome: object, action_id: str) -> DispatchResult:
    if isinstance(outcome, DispatchResult):
        if outcome.action_id is None:
            outcome.action_id = action_id
        return outcome
    return DispatchResult(consumed=True, action_id=action_id)


__all__ = ["EditorSession"]
