"""Boundary types for exchanging buffer state with host text surfaces."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from .state import Selection


@dataclass(frozen=True, slots=True)
class BufferMirror:
    """Snapshot of a surface: the current buffer and its selection."""

    text: str
    selection: Selection
    attributes: dict[str, str] = field(default_factory=dict)


class TextSurface(Protocol):
    """Editable text box the engine reads from and writes to."""

    @property
    def text(self) -> str:
        """Full current buffer."""
        ...

    @property
    def selection(self) -> Selection:
        """Current selection, normalized so ``start <= end``."""
        ...

    def set_text(self, text: str) -> None:
        """Replace the buffer, keeping selection offsets clamped to it."""
        ...

    def set_selection(self, start: int, end: int) -> None:
        ...

    def focus(self) -> None:
        ...


class BufferValidationError(RuntimeError):
    """Raised when a selection falls outside the buffer it is paired with."""

    def __init__(self, message: str, *, selection: Selection | None = None) -> None:
        super().__init__(message)
        self.selection = selection
