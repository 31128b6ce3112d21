"""Inline and block formatting actions built on the wrap transform."""

from __future__ import annotations

from markdown_pro.engine.base import DispatchResult, EditorContext
from markdown_pro.engine.prompts import ParameterKind, ask
from markdown_pro.transforms import build_table, parse_dimension

from .core import apply_wrap, cancelled


def bold(context: EditorContext, match) -> DispatchResult:
    del match
    return apply_wrap(context, "**", label="bold")


def italic(context: EditorContext, match) -> DispatchResult:
    del match
    return apply_wrap(context, "*", label="italic")


def inline_code(context: EditorContext, match) -> DispatchResult:
    del match
    return apply_wrap(context, "`", label="inline_code")


def strikethrough(context: EditorContext, match) -> DispatchResult:
    del match
    return apply_wrap(context, "~~", label="strikethrough")


def code_block(context: EditorContext, match) -> DispatchResult:
    del match
    return apply_wrap(context, "\n```bash\n", "\n```\n", label="code_block")


def link(context: EditorContext, match) -> DispatchResult:
    del match
    url = ask(context.prompts, ParameterKind.URL)
    if not url:
        return cancelled(context, label="link")
    return apply_wrap(context, "[", f"]({url})", label="link")


def image(context: EditorContext, match) -> DispatchResult:
    """Wrap the selection as ``![](selection)``.

    The URL answer only gates the edit; it is not inserted.
    """

    del match
    url = ask(context.prompts, ParameterKind.IMAGE_URL)
    if not url:
        return cancelled(context, label="image")
    return apply_wrap(context, "![](", ")", label="image")


def table(context: EditorContext, match) -> DispatchResult:
    del match
    columns = parse_dimension(ask(context.prompts, ParameterKind.COLUMNS))
    rows = parse_dimension(ask(context.prompts, ParameterKind.ROWS))
    if columns is None or rows is None:
        return cancelled(context, label="table")
    return apply_wrap(context, build_table(columns, rows), "", label="table")


__all__ = [
    "bold",
    "italic",
    "inline_code",
    "strikethrough",
    "code_block",
    "link",
    "image",
    "table",
]
