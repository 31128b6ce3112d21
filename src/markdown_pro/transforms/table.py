"""GitHub-flavored Markdown table skeletons."""

from __future__ import annotations

import re
from typing import Optional

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_dimension(raw: Optional[str]) -> Optional[int]:
    """Parse a prompt answer the lenient way browsers' ``parseInt`` does.

    Leading whitespace and trailing junk are ignored (``"3 cols"`` is 3).
    Anything that is not a positive integer yields ``None``.
    """

    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    value = int(match.group(1))
    return value if value > 0 else None


def build_table(columns: int, rows: int) -> str:
    if columns < 1 or rows < 1:
        raise ValueError("table needs at least one column and one row")
    header = "| " + "".join(f"Header {c + 1} | " for c in range(columns)) + "\n"
    divider = "| " + "---- | " * columns + "\n"
    body = ("| " + "Data | " * columns + "\n") * rows
    return header + divider + body


__all__ = ["parse_dimension", "build_table"]
