from __future__ import annotations

import os
from typing import Dict, Literal, Optional

from pydantic import BaseModel, Field

Target = Literal["simulator", "embedded", "linux"]

STATUS_FILE_NAME = "current_update_step.json"

# One status file location per target runtime
STATUS_PATHS: Dict[str, str] = {
    "simulator": STATUS_FILE_NAME,
    "embedded": "/tmp/" + STATUS_FILE_NAME,
    "linux": "/var/lib/update_tracker/" + STATUS_FILE_NAME,
}


def default_target() -> Target:
    value = os.environ.get("UPDATE_TRACKER_TARGET", "simulator").strip().lower()
    return value if value in STATUS_PATHS else "simulator"


class AppConfig(BaseModel):
    target: Target = Field(default_factory=default_target)
    status_path: Optional[str] = None  # overrides the target's default location
    poll_interval_ms: int = Field(default=2000, ge=1)
    dark_mode: bool = True

    def resolved_status_path(self) -> str:
        return self.status_path or STATUS_PATHS[self.target]
