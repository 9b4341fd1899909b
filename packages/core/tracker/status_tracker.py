"""
Status tracker: change detection on the status file and snapshot refresh.

State machine:
  AWAITING_FILE -> AWAITING_FILE   file absent (throttled "waiting" log)
  AWAITING_FILE | IDLE -> PROCESSING -> IDLE   new timestamp, file read and published
  PROCESSING -> IDLE   read failed; timestamp not recorded, retried next tick
  IDLE -> IDLE   timestamp unchanged

A tick that sees the same timestamp as the last processed one does no I/O
beyond the stat call and does not touch the display.
"""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Callable, Optional

from .file_access import FileAccess
from .status_json import extract_field, parse_int_prefix
from .types import TEXT_FIELD_SIZE, StatusDisplay, StatusSnapshot, TrackerContext

log = logging.getLogger(__name__)

JSON_BUFFER_SIZE = 512
PROGRESS_FIELD_SIZE = 32
WAITING_LOG_INTERVAL_MS = 10_000


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


class StatusTracker:
    """Reads the status file when it changes and publishes the result to a display."""

    def __init__(
        self,
        path: str,
        files: FileAccess,
        display: Optional[StatusDisplay] = None,
        clock: Callable[[], float] = _monotonic_ms,
        buffer_size: int = JSON_BUFFER_SIZE,
    ) -> None:
        self.path = path
        self._files = files
        self._display = display
        self._clock = clock
        self._buffer_size = buffer_size

    def attach_display(self, display: Optional[StatusDisplay]) -> None:
        self._display = display

    def check(self, ctx: TrackerContext) -> bool:
        """
        Run one poll tick against ctx.

        Returns True when the snapshot was re-read and published.
        """
        file_time = self._files.timestamp_of(self.path)
        if file_time is None:
            ctx.state = "AWAITING_FILE"
            self._log_waiting(ctx)
            return False

        if file_time == ctx.poll.last_modified_time:
            ctx.state = "IDLE"
            return False

        ctx.state = "PROCESSING"
        raw = self._files.read_whole(self.path, self._buffer_size)
        if raw is None:
            # Timestamp is left as-is so the same change is picked up next tick
            log.error(f"Could not read file {self.path}")
            ctx.state = "IDLE"
            return False

        ctx.snapshot = self._apply(ctx.snapshot, raw.decode("utf-8", errors="replace"))
        ctx.poll.last_modified_time = file_time
        self.publish(ctx.snapshot)
        ctx.state = "IDLE"

        s = ctx.snapshot
        log.info(f"Update status: {s.progress}% - {s.status} - {s.step}")
        return True

    def publish(self, snapshot: StatusSnapshot) -> None:
        """Push a snapshot to the attached display, if any."""
        display = self._display
        if display is None:
            return
        display.set_status_text(snapshot.status)
        display.set_step_text(snapshot.step)
        display.set_progress_text(f"{snapshot.progress}%")
        display.set_progress_value(snapshot.progress)

    @staticmethod
    def _apply(current: StatusSnapshot, text: str) -> StatusSnapshot:
        """Overlay every field that parses onto current; the rest keep their value."""
        updated = replace(current)

        progress = extract_field(text, "progress", PROGRESS_FIELD_SIZE)
        if progress is not None:
            updated.progress = parse_int_prefix(progress)

        status = extract_field(text, "status", TEXT_FIELD_SIZE)
        if status is not None:
            updated.status = status

        step = extract_field(text, "step", TEXT_FIELD_SIZE)
        if step is not None:
            updated.step = step

        return updated

    def _log_waiting(self, ctx: TrackerContext) -> None:
        now = self._clock()
        last = ctx.poll.last_log_time
        if last is None or now - last > WAITING_LOG_INTERVAL_MS:
            log.info(f"Waiting for update status file: {self.path}")
            ctx.poll.last_log_time = now
