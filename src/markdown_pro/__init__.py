"""Selection-aware Markdown editing engine with undo/redo history."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "config",
    "engine",
    "export",
    "keymaps",
    "preview",
    "runtime",
    "session",
    "transforms",
]

__version__ = "0.1.0"
