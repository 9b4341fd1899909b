from __future__ import annotations

import logging

from .file_access import FileAccess
from .status_json import format_status_document
from .types import StatusSnapshot

log = logging.getLogger(__name__)


def default_status_document() -> str:
    s = StatusSnapshot()
    return format_status_document(s.progress, s.status, s.step)


def ensure_status_file(files: FileAccess, path: str) -> bool:
    """
    Create the status file with default values if it does not exist yet.

    An existing file is never touched, whatever it contains.
    Returns True only when a new file was written.
    """
    if files.timestamp_of(path) is not None:
        return False

    if not files.write_whole(path, default_status_document()):
        log.error(f"Could not create {path}")
        return False

    log.info(f"Created default update status file at {path}")
    return True
