import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pytest

# Ensure repo root is on sys.path so `import packages...` works in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from packages.core.tracker.file_access import FileAccess  # noqa: E402


class FakeFileAccess(FileAccess):
    """In-memory filesystem with explicit timestamps and injectable failures."""

    def __init__(self) -> None:
        self.files: Dict[str, Tuple[int, bytes]] = {}
        self.clock = 0
        self.reads = 0
        self.write_attempts = 0
        self.fail_reads = 0
        self.fail_writes = 0

    def put(self, path: str, text: str, mtime: Optional[int] = None) -> None:
        if mtime is None:
            self.clock += 1
            mtime = self.clock
        self.files[path] = (mtime, text.encode("utf-8"))

    def text(self, path: str) -> str:
        return self.files[path][1].decode("utf-8")

    def timestamp_of(self, path: str) -> Optional[int]:
        entry = self.files.get(path)
        return entry[0] if entry else None

    def read_whole(self, path: str, max_size: int) -> Optional[bytes]:
        self.reads += 1
        if self.fail_reads:
            self.fail_reads -= 1
            return None
        entry = self.files.get(path)
        if entry is None:
            return None
        return entry[1][: max_size - 1]

    def _write(self, path: str, content: bytes) -> bool:
        self.write_attempts += 1
        if self.fail_writes:
            self.fail_writes -= 1
            return False
        self.clock += 1
        self.files[path] = (self.clock, content)
        return True


class RecordingDisplay:
    def __init__(self) -> None:
        self.calls: List[Tuple[str, object]] = []

    def set_status_text(self, text: str) -> None:
        self.calls.append(("status", text))

    def set_step_text(self, text: str) -> None:
        self.calls.append(("step", text))

    def set_progress_text(self, text: str) -> None:
        self.calls.append(("progress_text", text))

    def set_progress_value(self, value: int) -> None:
        self.calls.append(("progress_value", value))

    @property
    def pushes(self) -> int:
        return sum(1 for name, _ in self.calls if name == "status")


class FakeClock:
    def __init__(self, start_ms: float = 1_000.0) -> None:
        self.now = start_ms

    def advance(self, ms: float) -> None:
        self.now += ms

    def __call__(self) -> float:
        return self.now


# Relative path: the write retry only ever creates "." for it
STATUS_PATH = "current_update_step.json"


@pytest.fixture
def files():
    return FakeFileAccess()


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(scope="session")
def qcore_app():
    from PySide6.QtCore import QCoreApplication

    app = QCoreApplication.instance() or QCoreApplication([])
    yield app
