"""Fire-once timer primitive used for auto-grouping."""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, runtime_checkable

from PyQt6.QtCore import QObject, QTimer


@runtime_checkable
class Scheduler(Protocol):
    """Schedules a callback once after ``delay`` milliseconds."""

    def schedule(self, callback: Callable[[], None], delay: float) -> Any:
        ...

    def cancel(self, handle: Any) -> None:
        ...


class QtTimerScheduler:
    """Scheduler backed by single-shot QTimers on the current thread's event loop."""

    def __init__(self, parent: Optional[QObject] = None):
        self._parent = parent
        self._timers: set[QTimer] = set()

    @property
    def active_count(self) -> int:
        return len(self._timers)

    def schedule(self, callback: Callable[[], None], delay: float) -> QTimer:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._fire(timer, callback))
        self._timers.add(timer)
        timer.start(max(0, int(round(delay))))
        return timer

    def cancel(self, handle: Optional[QTimer]) -> None:
        # Fired or already cancelled timers are no longer tracked.
        if handle is None or handle not in self._timers:
            return
        handle.stop()
        self._release(handle)

    def _fire(self, timer: QTimer, callback: Callable[[], None]) -> None:
        self._release(timer)
        callback()

    def _release(self, timer: QTimer) -> None:
        self._timers.discard(timer)
        timer.deleteLater()
