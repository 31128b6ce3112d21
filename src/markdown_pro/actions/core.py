"""Edit helpers shared by every transform action.

Each helper captures history exactly once, right before the surface text is
replaced, and never when a transform is abandoned.
"""

from __future__ import annotations

from typing import Optional

from markdown_pro.engine.base import DispatchResult, EditorContext
from markdown_pro.transforms import prefix_lines, wrap


def apply_wrap(
    context: EditorContext,
    before: str,
    after: Optional[str] = None,
    *,
    label: str,
) -> DispatchResult:
    surface = context.surface
    current = surface.text
    result = wrap(current, surface.selection, before, after)
    selection = result.selection
    assert selection is not None

    context.history.capture_before_edit(current, label=label)
    surface.set_text(result.text)

    def restore_selection() -> None:
        # Undo or another edit may land before the render tick.
        if surface.text != result.text:
            return
        surface.focus()
        surface.set_selection(selection.start, selection.end)

    context.scheduler.after_render(restore_selection)
    context.bus.emit(
        "transform.apply",
        {"label": label, "kind": "wrap", "selection": selection.as_tuple()},
    )
    return DispatchResult(consumed=True, message=label, selection=selection)


def apply_prefix(context: EditorContext, prefix: str, *, label: str) -> DispatchResult:
    surface = context.surface
    current = surface.text
    result = prefix_lines(current, surface.selection, prefix)

    context.history.capture_before_edit(current, label=label)
    surface.set_text(result.text)
    context.bus.emit("transform.apply", {"label": label, "kind": "prefix"})
    return DispatchResult(consumed=True, message=label)


def cancelled(context: EditorContext, *, label: str) -> DispatchResult:
    context.bus.emit("transform.cancel", {"label": label})
    return DispatchResult(consumed=True, status="cancelled", message=label)


__all__ = ["apply_wrap", "apply_prefix", "cancelled"]
