"""Undo and redo actions. Neither captures history."""

from __future__ import annotations

from markdown_pro.engine.base import DispatchResult, EditorContext


def undo(context: EditorContext, match) -> DispatchResult:
    del match
    restored = context.history.undo(context.surface.text)
    if restored is None:
        return DispatchResult(consumed=True, status="noop", message="undo")
    context.surface.set_text(restored)
    context.bus.emit("history.undo", {"undo_depth": context.history.undo_depth})
    return DispatchResult(consumed=True, message="undo")


def redo(context: EditorContext, match) -> DispatchResult:
    del match
    restored = context.history.redo(context.surface.text)
    if restored is None:
        return DispatchResult(consumed=True, status="noop", message="redo")
    context.surface.set_text(restored)
    context.bus.emit("history.redo", {"redo_depth": context.history.redo_depth})
    return DispatchResult(consumed=True, message="redo")


__all__ = ["undo", "redo"]
