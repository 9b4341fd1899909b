from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "UpdateTracker"

def app_data_dir() -> Path:
    override = os.environ.get("UPDATE_TRACKER_HOME")
    if override:
        return Path(override)
    base = os.environ.get("APPDATA") or os.environ.get("XDG_CONFIG_HOME") or str(Path.home())
    return Path(base) / APP_NAME

def config_path() -> Path:
    return app_data_dir() / "config.json"

def logs_dir() -> Path:
    return app_data_dir() / "logs"

def log_path() -> Path:
    return logs_dir() / "update_tracker.log"

def ensure_app_dirs() -> None:
    logs_dir().mkdir(parents=True, exist_ok=True)
