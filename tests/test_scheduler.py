import logging

import pytest

from conftest import STATUS_PATH
from packages.core.tracker.scheduler import DEFAULT_POLL_INTERVAL_MS, PollScheduler
from packages.core.tracker.status_tracker import StatusTracker
from packages.core.tracker.types import TrackerContext


@pytest.fixture
def scheduler(qcore_app, files, display):
    sched = PollScheduler(StatusTracker(STATUS_PATH, files, display=display))
    yield sched
    sched.stop()


def test_default_interval(scheduler):
    assert DEFAULT_POLL_INTERVAL_MS == 2000
    assert scheduler.interval_ms == 2000


def test_set_interval_at_runtime(scheduler, caplog):
    caplog.set_level(logging.INFO)
    scheduler.start()
    scheduler.set_interval(500)
    assert scheduler.interval_ms == 500
    assert scheduler.is_active()
    assert any(r.getMessage() == "Update polling interval set to 500 ms" for r in caplog.records)


@pytest.mark.parametrize("bad", [0, -1])
def test_rejects_non_positive_interval(scheduler, bad):
    with pytest.raises(ValueError):
        scheduler.set_interval(bad)
    assert scheduler.interval_ms == 2000


def test_start_stop(scheduler):
    assert not scheduler.is_active()
    scheduler.start()
    assert scheduler.is_active()
    scheduler.stop()
    assert not scheduler.is_active()


def test_tick_uses_owned_context(scheduler, files, display):
    files.put(STATUS_PATH, '{"progress": 64, "status": "Updating", "step": "Configuring system"}', mtime=3)

    assert scheduler.tick() is True
    assert scheduler.tick() is False

    assert scheduler.ctx.snapshot.progress == 64
    assert scheduler.ctx.poll.last_modified_time == 3
    assert display.pushes == 1


def test_shared_context_is_passed_by_reference(qcore_app, files):
    ctx = TrackerContext()
    sched = PollScheduler(StatusTracker(STATUS_PATH, files), ctx, interval_ms=100)
    files.put(STATUS_PATH, '{"step": "Cleaning up"}')

    sched.tick()

    assert sched.ctx is ctx
    assert ctx.snapshot.step == "Cleaning up"
    assert sched.interval_ms == 100
