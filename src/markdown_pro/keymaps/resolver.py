"""Chord resolution with telemetry instrumentation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Literal, Optional

from markdown_pro.runtime.telemetry import span

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome returned from the resolver."""

    status: Literal["match", "miss"]
    match: Optional[ResolutionMatch] = None


def normalize_chord(key: str, modifiers: Iterable[str] = ()) -> Optional[KeyStroke]:
    """Turn a raw key event into a chord, or ``None`` when Ctrl/Cmd is not held."""

    if not key:
        return None
    stroke = KeyStroke(key, tuple(modifiers))
    if not stroke.has_ctrl:
        return None
    return stroke


class KeymapResolver:
    """Caches the chord table per registry revision and resolves strokes."""

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._cache: Optional[tuple[int, Dict[str, ResolutionMatch]]] = None

    def resolve(self, stroke: Optional[KeyStroke]) -> ResolutionResult:
        if stroke is None:
            return ResolutionResult(status="miss")
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"chord": stroke.token},
        ) as handle:
            match = self._ensure_table().get(stroke.token)
            if match is None:
                handle.add_metadata("status", "miss")
                return ResolutionResult(status="miss")
            handle.add_metadata("status", "match")
            handle.add_metadata("binding_id", match.binding.id)
            return ResolutionResult(status="match", match=match)

    def reset(self) -> None:
        self._cache = None

    def _ensure_table(self) -> Dict[str, ResolutionMatch]:
        revision = self._registry.revision()
        if self._cache and self._cache[0] == revision:
            return self._cache[1]

        table: Dict[str, ResolutionMatch] = {}
        for binding in self._registry.iter_bindings():
            action = self._registry.get_action(binding.action_id)
            table[binding.key_signature] = ResolutionMatch(binding=binding, action=action)
        self._cache = (revision, table)
        return table


__all__ = [
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
    "normalize_chord",
]
