"""Declarative shortcut registry and the default Markdown bindings."""

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult, normalize_chord
from .defaults import load_default_keymaps, shortcut_legend

__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
    "normalize_chord",
    "load_default_keymaps",
    "shortcut_legend",
]
