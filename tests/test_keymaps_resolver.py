from __future__ import annotations

from markdown_pro.keymaps import (
    ActionRef,
    Binding,
    KeymapRegistry,
    KeymapResolver,
    KeyStroke,
    load_default_keymaps,
    normalize_chord,
)


def make_action(action_id: str) -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def build_resolver() -> KeymapResolver:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    return KeymapResolver(registry)


def test_resolver_matches_plain_ctrl_chord() -> None:
    resolver = build_resolver()

    result = resolver.resolve(normalize_chord("b", ("ctrl",)))

    assert result.status == "match"
    assert result.match is not None
    assert result.match.action.id == "format.bold"


def test_resolver_distinguishes_shift_state() -> None:
    resolver = build_resolver()

    italic = resolver.resolve(normalize_chord("i", ("ctrl",)))
    image = resolver.resolve(normalize_chord("I", ("ctrl", "shift")))

    assert italic.match is not None and italic.match.action.id == "format.italic"
    assert image.match is not None and image.match.action.id == "format.image"


def test_resolver_treats_meta_as_ctrl() -> None:
    resolver = build_resolver()

    result = resolver.resolve(normalize_chord("K", ("meta",)))

    assert result.match is not None
    assert result.match.action.id == "format.inline_code"


def test_resolver_misses_without_ctrl() -> None:
    resolver = build_resolver()

    assert normalize_chord("b", ("shift",)) is None
    assert resolver.resolve(normalize_chord("b")).status == "miss"


def test_resolver_misses_unbound_chord() -> None:
    resolver = build_resolver()

    result = resolver.resolve(normalize_chord("x", ("ctrl", "shift")))

    assert result.status == "miss"
    assert result.match is None


def test_resolver_cache_refreshes_on_revision() -> None:
    registry = KeymapRegistry()
    resolver = KeymapResolver(registry)

    assert resolver.resolve(KeyStroke.parse("ctrl+x")).status == "miss"

    registry.register_action(make_action("custom.x"))
    registry.register_binding(
        Binding(id="custom.x", stroke=KeyStroke.parse("ctrl+x"), action_id="custom.x")
    )

    match = resolver.resolve(KeyStroke.parse("ctrl+x"))
    assert match.status == "match"
    assert match.match is not None
    assert match.match.binding.id == "custom.x"
