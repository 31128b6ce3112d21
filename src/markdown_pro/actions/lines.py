"""Line-prefix actions: headings, lists, quotes and rules."""

from __future__ import annotations

from functools import partial
from typing import Callable

from markdown_pro.engine.base import DispatchResult, EditorContext

from .core import apply_prefix

LineAction = Callable[[EditorContext, object], DispatchResult]


def prefix_action(context: EditorContext, match, *, prefix: str, label: str) -> DispatchResult:
    del match
    return apply_prefix(context, prefix, label=label)


heading_1: LineAction = partial(prefix_action, prefix="# ", label="heading_1")
heading_2: LineAction = partial(prefix_action, prefix="## ", label="heading_2")
heading_3: LineAction = partial(prefix_action, prefix="### ", label="heading_3")
bullet: LineAction = partial(prefix_action, prefix="- ", label="bullet")
blockquote: LineAction = partial(prefix_action, prefix="> ", label="blockquote")
task: LineAction = partial(prefix_action, prefix="- [ ] ", label="task")
# Inserts the rule above each touched line.
horizontal_rule: LineAction = partial(
    prefix_action, prefix="---\n", label="horizontal_rule"
)


__all__ = [
    "prefix_action",
    "heading_1",
    "heading_2",
    "heading_3",
    "bullet",
    "blockquote",
    "task",
    "horizontal_rule",
]
