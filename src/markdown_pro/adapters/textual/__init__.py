"""Textual host for the editor session."""

from .controller import (
    TextAreaSurface,
    TextualEditorAdapter,
    TextualUIHooks,
    split_textual_key,
)

__all__ = [
    "TextAreaSurface",
    "TextualEditorAdapter",
    "TextualUIHooks",
    "split_textual_key",
]
