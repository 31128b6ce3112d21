"""Linear undo/redo history of whole-buffer snapshots."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional

from markdown_pro.runtime import telemetry

DEFAULT_HISTORY_LIMIT = 100


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    text: str
    label: str = ""


class HistoryState:
    """Undo stack bounded at ``limit`` (oldest evicted) plus an unbounded redo stack.

    ``capture_before_edit``, ``undo`` and ``redo`` are the only mutators.
    Capturing is the caller's job and must happen once per user edit, before
    the buffer changes; undo and redo never capture.
    """

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError("history limit must be at least 1")
        self._limit = limit
        self._undo: Deque[HistoryEntry] = deque(maxlen=limit)
        self._redo: List[HistoryEntry] = []

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def capture_before_edit(self, current: str, *, label: str = "") -> HistoryEntry:
        entry = HistoryEntry(text=current, label=label)
        evicted = len(self._undo) == self._limit
        self._undo.append(entry)
        self._redo.clear()
        telemetry.record_event(
            "history.capture",
            level="debug",
            data={"label": label, "depth": len(self._undo), "evicted": evicted},
        )
        return entry

    def undo(self, current: str) -> Optional[str]:
        if not self._undo:
            return None
        previous = self._undo.pop()
        self._redo.append(HistoryEntry(text=current, label="undo"))
        telemetry.record_event(
            "history.undo",
            level="debug",
            data={"undo_depth": len(self._undo), "redo_depth": len(self._redo)},
        )
        return previous.text

    def redo(self, current: str) -> Optional[str]:
        if not self._redo:
            return None
        following = self._redo.pop()
        self._undo.append(HistoryEntry(text=current, label="redo"))
        telemetry.record_event(
            "history.redo",
            level="debug",
            data={"undo_depth": len(self._undo), "redo_depth": len(self._redo)},
        )
        return following.text

    def entries(self) -> tuple[tuple[HistoryEntry, ...], tuple[HistoryEntry, ...]]:
        """Return ``(undo, redo)`` stacks, most recent last."""

        return tuple(self._undo), tuple(self._redo)

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()
