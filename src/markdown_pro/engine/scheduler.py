"""Run-after-render scheduling used to restore selections after an edit."""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Protocol

Callback = Callable[[], None]


class RenderScheduler(Protocol):
    def after_render(self, callback: Callback) -> None:
        """Run ``callback`` once the surface has shown the new buffer."""
        ...


class DeferredScheduler:
    """Queues callbacks until the host calls :meth:`flush` after rendering."""

    def __init__(self) -> None:
        self._pending: Deque[Callback] = deque()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def after_render(self, callback: Callback) -> None:
        self._pending.append(callback)

    def flush(self) -> int:
        """Run queued callbacks in order; callbacks queued meanwhile wait."""

        count = len(self._pending)
        for _ in range(count):
            self._pending.popleft()()
        return count


class ImmediateScheduler:
    """For surfaces that render synchronously on ``set_text``."""

    def after_render(self, callback: Callback) -> None:
        callback()


__all__ = ["Callback", "RenderScheduler", "DeferredScheduler", "ImmediateScheduler"]
