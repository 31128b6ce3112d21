from __future__ import annotations

import pytest

from markdown_pro.keymaps import (
    ActionRef,
    Binding,
    KeymapConflictError,
    KeymapRegistry,
    KeyStroke,
    load_default_keymaps,
    shortcut_legend,
)


def make_action(action_id: str = "format.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    chord: str = "ctrl+b",
    action_id: str = "format.test",
) -> Binding:
    return Binding(id=binding_id, stroke=KeyStroke.parse(chord), action_id=action_id)


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="bold")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings()) == [binding]
    assert registry.binding_for(KeyStroke("B", ("control",))) == binding


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="bold"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding(binding_id="bold.duplicate"))

    assert excinfo.value.existing.id == "bold"


def test_register_binding_replace_swaps_chord_owner() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_action(make_action("format.other"))
    registry.register_binding(make_binding(binding_id="bold"))

    replacement = make_binding(binding_id="other", action_id="format.other")
    registry.register_binding(replacement, replace=True)

    assert registry.stats().binding_count == 1
    assert registry.binding_for(KeyStroke.parse("ctrl+b")) == replacement


def test_register_binding_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="bold"))


def test_register_action_twice_requires_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())


def test_unregister_binding_frees_chord() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="bold"))
    revision = registry.revision()

    removed = registry.unregister_binding("bold")

    assert removed is not None
    assert registry.binding_for(KeyStroke.parse("ctrl+b")) is None
    assert registry.revision() > revision
    assert registry.unregister_binding("bold") is None


def test_binding_requires_ctrl_modifier() -> None:
    with pytest.raises(ValueError):
        make_binding(binding_id="plain", chord="b")


def test_keystroke_normalizes_cmd_and_case() -> None:
    stroke = KeyStroke("I", ("Shift", "meta", "alt"))

    assert stroke.token == "ctrl+shift+i"
    assert stroke.label == "Ctrl+Shift+I"


def test_default_keymaps_cover_shortcut_table() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)

    stats = registry.stats()
    assert stats.action_count == 17
    assert stats.binding_count == 17
    assert "ctrl+shift+g" in stats.chords
    assert "ctrl+z" in stats.chords


def test_default_keymaps_exclude_drops_bindings() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry, exclude_actions=["format.table"])

    assert registry.binding_for(KeyStroke.parse("ctrl+shift+g")) is None
    with pytest.raises(KeyError):
        registry.get_action("format.table")


def test_shortcut_legend_lists_labels() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)

    legend = shortcut_legend(registry)

    assert legend[0] == "Ctrl+B Bold"
    assert "Ctrl+Shift+G Table" in legend
