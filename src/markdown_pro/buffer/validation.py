"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .state import Selection
from .sync import BufferValidationError


def ensure_selection(text: str, selection: Selection) -> Selection:
    ordered = selection.ordered()
    if ordered.start < 0:
        raise BufferValidationError("Selection starts before buffer", selection=selection)
    if ordered.end > len(text):
        raise BufferValidationError("Selection ends past buffer", selection=selection)
    return ordered
