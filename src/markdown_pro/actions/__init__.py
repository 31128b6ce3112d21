"""Editing verbs bound to shortcuts."""

from .core import apply_prefix, apply_wrap, cancelled
from .format import (
    bold,
    code_block,
    image,
    inline_code,
    italic,
    link,
    strikethrough,
    table,
)
from .history import redo, undo
from .lines import (
    blockquote,
    bullet,
    heading_1,
    heading_2,
    heading_3,
    horizontal_rule,
    task,
)

__all__ = [
    "apply_wrap",
    "apply_prefix",
    "cancelled",
    "bold",
    "italic",
    "inline_code",
    "strikethrough",
    "code_block",
    "link",
    "image",
    "table",
    "heading_1",
    "heading_2",
    "heading_3",
    "bullet",
    "blockquote",
    "task",
    "horizontal_rule",
    "undo",
    "redo",
]
