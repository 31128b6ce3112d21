"""Buffer state, selections, text surfaces and undo/redo history."""

from .history import DEFAULT_HISTORY_LIMIT, HistoryEntry, HistoryState
from .state import Location, Selection, location_from_offset, offset_for_location
from .surface import MemorySurface
from .sync import BufferMirror, BufferValidationError, TextSurface
from .validation import ensure_selection

__all__ = [
    "DEFAULT_HISTORY_LIMIT",
    "HistoryEntry",
    "HistoryState",
    "Location",
    "Selection",
    "location_from_offset",
    "offset_for_location",
    "MemorySurface",
    "BufferMirror",
    "BufferValidationError",
    "TextSurface",
    "ensure_selection",
]
