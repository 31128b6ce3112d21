"""Dataclasses describing shortcut chords, bindings and action metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional

# Cmd on macOS and Meta/Super elsewhere act as Ctrl.
_MODIFIER_ALIASES = {
    "control": "ctrl",
    "ctrl": "ctrl",
    "cmd": "ctrl",
    "command": "ctrl",
    "meta": "ctrl",
    "super": "ctrl",
    "shift": "shift",
}
_MODIFIER_LABELS = {"ctrl": "Ctrl", "shift": "Shift"}


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = (_MODIFIER_ALIASES.get(m.strip().lower()) for m in modifiers)
    return tuple(sorted({value for value in values if value}))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Normalized chord: a lower-cased key plus the ``ctrl``/``shift`` modifiers.

    Any other modifier (alt, hyper, ...) is dropped during normalization.
    """

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", self.key.lower())
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @classmethod
    def parse(cls, chord: str) -> "KeyStroke":
        """Build a stroke from ``"ctrl+shift+c"`` style notation."""

        parts = [part for part in chord.split("+") if part]
        if not parts:
            raise ValueError(f"Invalid chord '{chord}'")
        if chord.endswith("++"):
            parts.append("+")
        return cls(parts[-1], tuple(parts[:-1]))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @property
    def label(self) -> str:
        names = [_MODIFIER_LABELS[m] for m in self.modifiers]
        return "+".join(names + [self.key.upper()])

    @property
    def has_ctrl(self) -> bool:
        return "ctrl" in self.modifiers


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during binding execution."""

    id: str
    handler: Callable[..., object]
    telemetry_name: str | None = None
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", self.id)

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)

    @property
    def prompts(self) -> tuple[object, ...]:
        """Parameter kinds the action asks for before it edits."""

        return tuple(self.metadata.get("prompts", ()))  # type: ignore[call-overload]


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a chord with an action."""

    id: str
    stroke: KeyStroke
    action_id: str
    description: str = ""
    label: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        if not self.stroke.has_ctrl:
            raise ValueError(f"Binding '{self.id}' must use Ctrl/Cmd")

    @property
    def key_signature(self) -> str:
        return self.stroke.token

    @property
    def legend(self) -> str:
        """Text shown in the shortcut legend, e.g. ``"Ctrl+B Bold"``."""

        return f"{self.stroke.label} {self.label or self.description}".strip()


__all__ = [
    "KeyStroke",
    "ActionRef",
    "Binding",
]
