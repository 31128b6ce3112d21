"""The built-in Markdown shortcut table."""

from __future__ import annotations

from typing import Iterable, Sequence

from markdown_pro.actions import format as format_actions
from markdown_pro.actions import history as history_actions
from markdown_pro.actions import lines as line_actions
from markdown_pro.engine.prompts import ParameterKind
from markdown_pro.runtime import telemetry

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(id="format.bold", handler=format_actions.bold, description="Bold"),
    ActionRef(id="format.italic", handler=format_actions.italic, description="Italic"),
    ActionRef(
        id="format.inline_code",
        handler=format_actions.inline_code,
        description="Inline code",
    ),
    ActionRef(
        id="format.strikethrough",
        handler=format_actions.strikethrough,
        description="Strikethrough",
    ),
    ActionRef(
        id="format.code_block",
        handler=format_actions.code_block,
        description="Code block",
    ),
    ActionRef(
        id="format.link",
        handler=format_actions.link,
        description="Link",
        metadata={"prompts": (ParameterKind.URL,)},
    ),
    ActionRef(
        id="format.image",
        handler=format_actions.image,
        description="Image",
        metadata={"prompts": (ParameterKind.IMAGE_URL,)},
    ),
    ActionRef(
        id="format.table",
        handler=format_actions.table,
        description="Table",
        metadata={"prompts": (ParameterKind.COLUMNS, ParameterKind.ROWS)},
    ),
    ActionRef(id="lines.heading_1", handler=line_actions.heading_1, description="H1"),
    ActionRef(id="lines.heading_2", handler=line_actions.heading_2, description="H2"),
    ActionRef(id="lines.heading_3", handler=line_actions.heading_3, description="H3"),
    ActionRef(id="lines.bullet", handler=line_actions.bullet, description="Bullet"),
    ActionRef(
        id="lines.blockquote",
        handler=line_actions.blockquote,
        description="Blockquote",
    ),
    ActionRef(id="lines.task", handler=line_actions.task, description="Task list"),
    ActionRef(
        id="lines.horizontal_rule",
        handler=line_actions.horizontal_rule,
        description="Horizontal rule",
    ),
    ActionRef(id="history.undo", handler=history_actions.undo, description="Undo"),
    ActionRef(id="history.redo", handler=history_actions.redo, description="Redo"),
)


def _bind(chord: str, action_id: str, label: str) -> Binding:
    return Binding(
        id=f"{chord}:{action_id}",
        stroke=KeyStroke.parse(chord),
        action_id=action_id,
        label=label,
    )


# Legend order follows the toolbar.
DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind("ctrl+b", "format.bold", "Bold"),
    _bind("ctrl+i", "format.italic", "Italic"),
    _bind("ctrl+1", "lines.heading_1", "H1"),
    _bind("ctrl+2", "lines.heading_2", "H2"),
    _bind("ctrl+3", "lines.heading_3", "H3"),
    _bind("ctrl+p", "lines.bullet", "Bullet"),
    _bind("ctrl+q", "lines.blockquote", "Blockquote"),
    _bind("ctrl+k", "format.inline_code", "Inline Code"),
    _bind("ctrl+l", "format.link", "Link"),
    _bind("ctrl+shift+c", "format.code_block", "Code Block"),
    _bind("ctrl+shift+t", "lines.task", "Task List"),
    _bind("ctrl+shift+s", "format.strikethrough", "Strikethrough"),
    _bind("ctrl+shift+i", "format.image", "Image"),
    _bind("ctrl+shift+h", "lines.horizontal_rule", "Horizontal Rule"),
    _bind("ctrl+shift+g", "format.table", "Table"),
    _bind("ctrl+z", "history.undo", "Undo"),
    _bind("ctrl+y", "history.redo", "Redo"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    include_actions: Sequence[str] | None = None,
    exclude_actions: Sequence[str] | None = None,
) -> None:
    """Register the built-in actions and their chords.

    Filtering out an action also drops the bindings that point at it.
    """

    allowed = _build_filters(include_actions, exclude_actions)

    for action in DEFAULT_ACTIONS:
        if _selected(action.id, allowed):
            registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if _selected(binding.action_id, allowed):
            registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)

    stats = registry.stats()
    telemetry.record_event(
        "keymaps.loaded",
        level="debug",
        data={"actions": stats.action_count, "bindings": stats.binding_count},
    )


def shortcut_legend(registry: KeymapRegistry) -> list[str]:
    return [binding.legend for binding in registry.iter_bindings()]


def _build_filters(
    include: Sequence[str] | None, exclude: Sequence[str] | None
) -> tuple[set[str] | None, set[str]]:
    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    return include_set, exclude_set


def _selected(item_id: str, filters: tuple[set[str] | None, set[str]]) -> bool:
    include, exclude = filters
    if include is not None and item_id not in include:
        return False
    if item_id in exclude:
        return False
    return True


__all__ = [
    "load_default_keymaps",
    "shortcut_legend",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
]
