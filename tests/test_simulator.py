"""Tests for the simulated update cycle."""
import json
import logging

import pytest

from conftest import STATUS_PATH
from packages.core.tracker.simulator import (
    SIMULATION_PERIOD_MS,
    SIMULATED_STATUS,
    UPDATE_STEPS,
    UpdateSimulator,
    phase_progress,
)
from packages.core.tracker.status_tracker import StatusTracker
from packages.core.tracker.types import TrackerContext


@pytest.fixture
def simulator(qcore_app, files):
    sim = UpdateSimulator(files, STATUS_PATH)
    yield sim
    sim.stop()


def test_progress_sequence_wraps_and_never_reaches_100(simulator):
    values = [simulator.step() for _ in range(len(UPDATE_STEPS) + 2)]
    assert values == [0, 12, 25, 37, 50, 62, 75, 87, 0, 12]


def test_phase_progress_is_capped():
    assert phase_progress(7, 8) == 87
    assert phase_progress(8, 8) == 100
    assert phase_progress(20, 8) == 100


def test_written_document_matches_updater_format(simulator, files):
    simulator.step()
    simulator.step()

    doc = json.loads(files.text(STATUS_PATH))
    assert doc == {"progress": 12, "status": SIMULATED_STATUS, "step": "Downloading packages"}


def test_phase_wraps_to_zero(simulator, files):
    for _ in range(len(UPDATE_STEPS)):
        simulator.step()
    assert simulator.phase == 0
    assert json.loads(files.text(STATUS_PATH))["step"] == "Update complete."


def test_tracker_follows_simulator(simulator, files):
    tracker = StatusTracker(STATUS_PATH, files)
    ctx = TrackerContext()
    seen = []
    for _ in range(3):
        simulator.step()
        assert tracker.check(ctx) is True
        seen.append((ctx.snapshot.progress, ctx.snapshot.step))

    assert seen == [
        (0, "Preparing for update"),
        (12, "Downloading packages"),
        (25, "Verifying download"),
    ]
    assert ctx.snapshot.status == SIMULATED_STATUS


def test_write_failure_still_advances(simulator, files, caplog):
    files.fail_writes = 2
    assert simulator.step() == 0
    assert simulator.phase == 1
    assert STATUS_PATH not in files.files
    assert any("Simulator could not write" in r.getMessage() for r in caplog.records)


def test_timer_uses_fixed_period(simulator):
    simulator.start()
    assert simulator.is_active()
    assert simulator._timer.interval() == SIMULATION_PERIOD_MS == 3000
    simulator.stop()
    assert not simulator.is_active()


def test_requires_steps(qcore_app, files):
    with pytest.raises(ValueError):
        UpdateSimulator(files, STATUS_PATH, steps=[])


def test_start_is_logged(simulator, caplog):
    caplog.set_level(logging.INFO)
    simulator.start()
    assert any("SIMULATOR MODE" in r.getMessage() for r in caplog.records)
