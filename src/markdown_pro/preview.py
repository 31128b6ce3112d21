"""Markdown preview rendering with GitHub-flavored extensions."""

from __future__ import annotations

from markdown_it import MarkdownIt
from mdit_py_plugins.tasklists import tasklists_plugin


def create_parser() -> MarkdownIt:
    """Parser shared by the HTML renderer and the live preview widget."""

    return (
        MarkdownIt("commonmark", {"html": False, "typographer": False})
        .enable("table")
        .enable("strikethrough")
        .use(tasklists_plugin)
    )


_PARSER = create_parser()


def render(text: str) -> str:
    """Render ``text`` to HTML. Malformed Markdown renders best-effort."""

    return _PARSER.render(text)


__all__ = ["create_parser", "render"]
