"""Pure text transforms applied by editor shortcuts."""

from .core import TransformResult, prefix_lines, touched_lines, wrap
from .table import build_table, parse_dimension

__all__ = [
    "TransformResult",
    "wrap",
    "prefix_lines",
    "touched_lines",
    "build_table",
    "parse_dimension",
]
