from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Protocol

TrackerState = Literal["AWAITING_FILE", "IDLE", "PROCESSING"]

# last_modified_time sentinel: no file observed yet. None never equals a real mtime, epoch 0 included
NO_TIMESTAMP = None
TEXT_FIELD_SIZE = 64  # status/step slot size, one slot reserved for the terminator

DEFAULT_PROGRESS = 0
DEFAULT_STATUS = "System Ready"
DEFAULT_STEP = "Waiting for update"


@dataclass
class StatusSnapshot:
    """Latest known update status as shown on screen."""
    progress: int = DEFAULT_PROGRESS  # 0-100 by convention, never clamped
    status: str = DEFAULT_STATUS
    step: str = DEFAULT_STEP


@dataclass
class PollState:
    last_modified_time: Optional[int] = NO_TIMESTAMP
    last_log_time: Optional[float] = None  # monotonic ms of the last "waiting" message


@dataclass
class TrackerContext:
    """
    Mutable tracker state, owned by whoever drives the poll timer and
    passed into every tick.
    """
    snapshot: StatusSnapshot = field(default_factory=StatusSnapshot)
    poll: PollState = field(default_factory=PollState)
    state: TrackerState = "AWAITING_FILE"


class StatusDisplay(Protocol):
    """Display primitives the tracker pushes a snapshot into."""

    def set_status_text(self, text: str) -> None:
        ...

    def set_step_text(self, text: str) -> None:
        ...

    def set_progress_text(self, text: str) -> None:
        ...

    def set_progress_value(self, value: int) -> None:
        ...
