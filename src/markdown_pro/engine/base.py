"""Shared types passed between the session, actions and hosts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from markdown_pro.buffer import HistoryState, Selection, TextSurface

from .prompts import ParameterRequest
from .scheduler import RenderScheduler


@dataclass(slots=True)
class KeyInput:
    """Raw key event as reported by a host."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None


@dataclass(slots=True)
class DispatchResult:
    """Outcome of handling a key or running an action.

    ``consumed`` is False only for unbound chords, telling the host to let its
    default key handling proceed.
    """

    consumed: bool
    status: str = "ok"
    action_id: Optional[str] = None
    message: Optional[str] = None
    selection: Optional[Selection] = None


class EditorBus:
    """Minimal event bus letting hosts observe edits."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class EditorContext:
    """Services every action can reach."""

    surface: TextSurface
    history: HistoryState
    prompts: ParameterRequest
    scheduler: RenderScheduler
    bus: EditorBus
    extras: Dict[str, object] = field(default_factory=dict)


__all__ = ["KeyInput", "DispatchResult", "EditorBus", "EditorContext"]
