"""
Synthetic update sequence for simulator runs.

Writes the status file on its own timer exactly as an external updater
would, so the tracker sees it through the normal polling path.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from PySide6.QtCore import QObject, QTimer

from .file_access import FileAccess
from .status_json import format_status_document

log = logging.getLogger(__name__)

SIMULATION_PERIOD_MS = 3000
SIMULATED_STATUS = "System Updating..."

UPDATE_STEPS: tuple[str, ...] = (
    "Preparing for update",
    "Downloading packages",
    "Verifying download",
    "Installing updates",
    "Configuring system",
    "Finalizing installation",
    "Cleaning up",
    "Update complete.",
)


def phase_progress(phase: int, phase_count: int) -> int:
    # Integer division: the last phase of 8 reports 87, not 100
    return min(phase * 100 // phase_count, 100)


class UpdateSimulator(QObject):
    """Cycles through UPDATE_STEPS forever, one phase per timer tick."""

    def __init__(
        self,
        files: FileAccess,
        path: str,
        steps: Sequence[str] = UPDATE_STEPS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        if not steps:
            raise ValueError("Simulator needs at least one step")
        self._files = files
        self._path = path
        self._steps = tuple(steps)
        self.phase = 0

        self._timer = QTimer(self)
        self._timer.setInterval(SIMULATION_PERIOD_MS)
        self._timer.timeout.connect(self.step)

    def is_active(self) -> bool:
        return self._timer.isActive()

    def start(self) -> None:
        self._timer.start()
        log.info(
            f"SIMULATOR MODE: Auto-generating update status changes every "
            f"{SIMULATION_PERIOD_MS // 1000} seconds"
        )

    def stop(self) -> None:
        self._timer.stop()

    def step(self) -> int:
        """Write the current phase, advance, and return the progress written."""
        progress = phase_progress(self.phase, len(self._steps))
        doc = format_status_document(progress, SIMULATED_STATUS, self._steps[self.phase])
        if not self._files.write_whole(self._path, doc):
            log.error(f"Simulator could not write {self._path}")

        self.phase += 1
        if self.phase >= len(self._steps):
            self.phase = 0
        return progress
