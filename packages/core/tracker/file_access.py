"""
File access layer for the update status file.

One implementation per target runtime:
  - PosixFileAccess: buffered I/O on a regular filesystem (simulator, Linux)
  - VfsFileAccess: raw descriptor I/O, the way an embedded VFS is driven

Missing files are a normal condition and never raise out of this layer.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from packages.shared.config import Target

log = logging.getLogger(__name__)


class FileAccess(ABC):
    """Timestamp / read / write capability over one target filesystem."""

    @abstractmethod
    def timestamp_of(self, path: str) -> Optional[int]:
        """Return a comparable modification marker, or None if the file is absent."""
        ...

    @abstractmethod
    def read_whole(self, path: str, max_size: int) -> Optional[bytes]:
        """Read at most max_size - 1 bytes. None on open/read failure."""
        ...

    @abstractmethod
    def _write(self, path: str, content: bytes) -> bool:
        ...

    def write_whole(self, path: str, content: str) -> bool:
        """
        Overwrite path with content.

        If the first attempt fails, the parent directory is created and the
        write is retried once. There is no further retry.
        """
        data = content.encode("utf-8")
        if self._write(path, data):
            return True

        parent = Path(path).parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            log.debug(f"Could not create directory {parent}: {e}")
        return self._write(path, data)


class PosixFileAccess(FileAccess):
    def timestamp_of(self, path: str) -> Optional[int]:
        try:
            return os.stat(path).st_mtime_ns
        except OSError:
            return None

    def read_whole(self, path: str, max_size: int) -> Optional[bytes]:
        try:
            with open(path, "rb") as f:
                data = f.read(max(max_size - 1, 0))
        except OSError as e:
            log.debug(f"Read of {path} failed: {e}")
            return None
        # An empty read is treated as a failure: the writer has truncated but not yet written
        return data or None

    def _write(self, path: str, content: bytes) -> bool:
        try:
            with open(path, "wb") as f:
                written = f.write(content)
        except OSError as e:
            log.debug(f"Write of {path} failed: {e}")
            return False
        return written == len(content)


class VfsFileAccess(FileAccess):
    """Descriptor-level access with millisecond timestamps."""

    def timestamp_of(self, path: str) -> Optional[int]:
        try:
            return os.stat(path).st_mtime_ns // 1_000_000
        except OSError:
            return None

    def read_whole(self, path: str, max_size: int) -> Optional[bytes]:
        try:
            fd = os.open(path, os.O_RDONLY)
        except OSError:
            return None
        try:
            return os.read(fd, max(max_size - 1, 0))
        except OSError as e:
            log.debug(f"Read of {path} failed: {e}")
            return None
        finally:
            os.close(fd)

    def _write(self, path: str, content: bytes) -> bool:
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        except OSError:
            return False
        try:
            view = memoryview(content)
            while view:
                n = os.write(fd, view)
                view = view[n:]
            return True
        except OSError as e:
            log.debug(f"Write of {path} failed: {e}")
            return False
        finally:
            os.close(fd)


def file_access_for(target: Target) -> FileAccess:
    """Pick the file access implementation for a target runtime."""
    if target == "embedded":
        return VfsFileAccess()
    return PosixFileAccess()
