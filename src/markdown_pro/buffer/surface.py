"""In-memory text surface used by headless hosts and tests."""

from __future__ import annotations

from .state import Selection
from .validation import ensure_selection


class MemorySurface:
    """Plain-Python stand-in for an editable text box."""

    def __init__(self, text: str = "", selection: Selection | None = None) -> None:
        self._text = text
        self._selection = ensure_selection(text, selection or Selection())
        self.focused = False

    @property
    def text(self) -> str:
        return self._text

    @property
    def selection(self) -> Selection:
        return self._selection

    def set_text(self, text: str) -> None:
        self._text = text
        self._selection = self._selection.clamp(len(text))

    def set_selection(self, start: int, end: int) -> None:
        self._selection = ensure_selection(self._text, Selection(start, end))

    def focus(self) -> None:
        self.focused = True

    def selected_text(self) -> str:
        return self._text[self._selection.start : self._selection.end]
