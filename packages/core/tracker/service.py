"""
Start-up wiring for the update tracker.

Builds the file layer, tracker, poll scheduler and (simulator target only)
the update simulator from an AppConfig, and runs the start-up sequence:
default file, forced first check, then the timers.
"""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject

from packages.shared.config import AppConfig

from .bootstrap import ensure_status_file
from .file_access import FileAccess, file_access_for
from .scheduler import PollScheduler
from .simulator import UpdateSimulator
from .status_tracker import StatusTracker
from .types import NO_TIMESTAMP, StatusDisplay, StatusSnapshot, TrackerContext

log = logging.getLogger(__name__)


class UpdateTrackerService(QObject):
    def __init__(
        self,
        cfg: AppConfig,
        display: Optional[StatusDisplay] = None,
        files: Optional[FileAccess] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.cfg = cfg
        self.path = cfg.resolved_status_path()
        self.files = files if files is not None else file_access_for(cfg.target)

        self.ctx = TrackerContext()
        self.tracker = StatusTracker(self.path, self.files, display=display)
        self.scheduler = PollScheduler(self.tracker, self.ctx, cfg.poll_interval_ms, parent=self)
        self.simulator: Optional[UpdateSimulator] = None
        if cfg.target == "simulator":
            self.simulator = UpdateSimulator(self.files, self.path, parent=self)

    @property
    def snapshot(self) -> StatusSnapshot:
        return self.ctx.snapshot

    def attach_display(self, display: Optional[StatusDisplay]) -> None:
        self.tracker.attach_display(display)
        if display is not None:
            self.tracker.publish(self.ctx.snapshot)

    def start(self) -> None:
        log.info(f"Update tracker: Monitoring {self.path} for update status changes")

        ensure_status_file(self.files, self.path)

        # First check always reads the file, whatever was seen before
        self.ctx.poll.last_modified_time = NO_TIMESTAMP
        self.tracker.check(self.ctx)
        self.scheduler.start()

        if self.simulator is not None:
            self.simulator.start()

    def stop(self) -> None:
        self.scheduler.stop()
        if self.simulator is not None:
            self.simulator.stop()

    def set_polling_interval(self, interval_ms: int) -> None:
        self.scheduler.set_interval(interval_ms)
        self.cfg.poll_interval_ms = interval_ms
