"""Tests for the engine's process-table entry."""

from models.enums import ProcessState
from models.process import SimulatedProcess


def _make_process(**kwargs) -> SimulatedProcess:
    return SimulatedProcess(
        pid=kwargs.get("pid", "p"),
        burst_cycles=kwargs.get("burst_cycles", 3),
        remaining_cycles=kwargs.get("remaining_cycles", 3),
        submitted_at=kwargs.get("submitted_at", 0),
    )


def test_new_process_is_ready_and_unfinished():
    process = _make_process()

    assert process.state == ProcessState.READY
    assert process.turnaround is None
    assert process.waiting is None


def test_turnaround_and_waiting():
    process = _make_process(burst_cycles=3, submitted_at=2)
    process.finished_at = 9

    assert process.turnaround == 7
    assert process.waiting == 4


def test_state_enum_compares_to_string():
    assert ProcessState.FINISHED == "FINISHED"
