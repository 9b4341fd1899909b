from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, QTimer

from .status_tracker import StatusTracker
from .types import TrackerContext

log = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_MS = 2000


class PollScheduler(QObject):
    """
    Recurring poll timer on the Qt event loop.

    Owns the tracker context and hands it to the tracker on every tick.
    Ticks never overlap because the event loop runs them one at a time.
    """

    def __init__(
        self,
        tracker: StatusTracker,
        ctx: Optional[TrackerContext] = None,
        interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.tracker = tracker
        self.ctx = ctx if ctx is not None else TrackerContext()

        self._timer = QTimer(self)
        self._timer.setInterval(self._validated(interval_ms))
        self._timer.timeout.connect(self.tick)

    @staticmethod
    def _validated(interval_ms: int) -> int:
        if interval_ms <= 0:
            raise ValueError(f"Polling interval must be positive, got {interval_ms} ms")
        return int(interval_ms)

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    def is_active(self) -> bool:
        return self._timer.isActive()

    def start(self) -> None:
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    def set_interval(self, interval_ms: int) -> None:
        self._timer.setInterval(self._validated(interval_ms))
        log.info(f"Update polling interval set to {interval_ms} ms")

    def tick(self) -> bool:
        return self.tracker.check(self.ctx)
