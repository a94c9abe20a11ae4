"""
Process-table entry for the simulation engine.

Policies never see this class: they only deal in process identifiers.
SimulatedProcess is what the engine keeps on its side of the boundary
(how much work is left, when the process first ran, when it finished).
"""

from dataclasses import dataclass
from typing import Hashable, Optional

from models.enums import ProcessState


@dataclass
class SimulatedProcess:
    pid: Hashable
    burst_cycles: int                  # total CPU cycles the process needs
    remaining_cycles: int
    submitted_at: int                  # engine clock value at submit()
    state: ProcessState = ProcessState.READY
    first_run_at: Optional[int] = None
    finished_at: Optional[int] = None

    @property
    def turnaround(self) -> Optional[int]:
        """Cycles from submission to completion, or None while unfinished."""
        if self.finished_at is None:
            return None
        return self.finished_at - self.submitted_at

    @property
    def waiting(self) -> Optional[int]:
        """Cycles spent in the ready queue without the CPU."""
        if self.turnaround is None:
            return None
        return self.turnaround - self.burst_cycles
