"""Selection ranges expressed as character offsets into the buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Location = Tuple[int, int]  # (row, column)


@dataclass(frozen=True, slots=True)
class Selection:
    """Half-open ``[start, end)`` range of code-point offsets.

    ``start == end`` is a caret. Surfaces may hand back a reversed range
    (anchor after cursor); use :meth:`ordered` before doing arithmetic.
    """

    start: int = 0
    end: int = 0

    @classmethod
    def caret(cls, offset: int) -> "Selection":
        return cls(offset, offset)

    @property
    def collapsed(self) -> bool:
        return self.start == self.end

    @property
    def length(self) -> int:
        return abs(self.end - self.start)

    def ordered(self) -> "Selection":
        if self.start <= self.end:
            return self
        return Selection(self.end, self.start)

    def clamp(self, length: int) -> "Selection":
        ordered = self.ordered()
        return Selection(
            max(0, min(ordered.start, length)),
            max(0, min(ordered.end, length)),
        )

    def as_tuple(self) -> Tuple[int, int]:
        return (self.start, self.end)


def offset_for_location(text: str, location: Location) -> int:
    lines = text.split("\n")
    row, col = location
    row = max(0, min(row, len(lines) - 1))
    offset = 0
    for i in range(row):
        offset += len(lines[i]) + 1  # newline
    return offset + max(0, min(col, len(lines[row])))


def location_from_offset(text: str, offset: int) -> Location:
    lines = text.split("\n")
    running = 0
    for row, line in enumerate(lines):
        line_len = len(line)
        if offset <= running + line_len:
            return (row, max(0, offset - running))
        running += line_len + 1
    return (len(lines) - 1, len(lines[-1]))


__all__ = ["Location", "Selection", "offset_for_location", "location_from_offset"]
