"""Selection-aware string transforms.

Both transforms are pure: they take the buffer and a selection and return the
new buffer plus, where it is defined, the selection to restore afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from markdown_pro.buffer.state import Selection
from markdown_pro.buffer.validation import ensure_selection


@dataclass(frozen=True, slots=True)
class TransformResult:
    text: str
    selection: Optional[Selection] = None


def wrap(
    text: str, selection: Selection, before: str, after: Optional[str] = None
) -> TransformResult:
    """Insert ``before`` at the selection start and ``after`` at its end.

    The returned selection covers the originally selected substring at its
    shifted position.
    """

    if after is None:
        after = before
    start, end = ensure_selection(text, selection).as_tuple()
    new_text = text[:start] + before + text[start:end] + after + text[end:]
    inner_start = start + len(before)
    return TransformResult(
        text=new_text,
        selection=Selection(inner_start, inner_start + (end - start)),
    )


def touched_lines(text: str, selection: Selection, prefix: str = "") -> list[int]:
    """Indices of lines whose ``[line_start, line_end]`` range meets the selection.

    Line ranges are counted over the buffer as it is being rewritten: each
    touched line contributes ``len(prefix)`` extra characters to the offsets
    of the lines after it, while the selection stays at its pre-edit offsets.
    A multi-line selection therefore reaches fewer lines the longer the prefix.
    """

    start, end = ensure_selection(text, selection).as_tuple()
    touched: list[int] = []
    offset = 0
    for index, line in enumerate(text.split("\n")):
        line_start = offset
        line_end = offset + len(line)
        if start <= line_end and end >= line_start:
            touched.append(index)
            line_end += len(prefix)
        offset = line_end + 1
    return touched


def prefix_lines(text: str, selection: Selection, prefix: str) -> TransformResult:
    """Prepend ``prefix`` to every line touched by ``selection``.

    No selection is returned: the caller leaves the surface offsets where they
    were, so they drift relative to the lengthened lines.
    """

    lines = text.split("\n")
    for index in touched_lines(text, selection, prefix):
        lines[index] = prefix + lines[index]
    return TransformResult(text="\n".join(lines))


__all__ = ["TransformResult", "wrap", "prefix_lines", "touched_lines"]
