"""
Simulation Engine — drives a scheduling policy one CPU cycle at a time.

The engine owns everything the policy deliberately does not:
the clock, the process table (how much work each process still needs)
and the knowledge of when a process is done. Every tick it:

    1. Asks the policy whether the process that ran last should be
       preempted (counted and logged; Round Robin always says no)
    2. Asks the policy which process runs this cycle (dispatch)
    3. Charges that cycle to the process; when its burst is used up,
       tells the policy via process_finished()

      Process table            Policy                 CPU
    ┌──────────────┐       ┌──────────────┐      ┌────────────┐
    │ submit()     │──────>│ new_process  │      │            │
    │              │       │ dispatch     │─────>│ one cycle  │
    │ burst left   │<──────│ finished     │<─────│ per step() │
    └──────────────┘       └──────────────┘      └────────────┘

Single-threaded and synchronous: one engine, one policy, one clock.
Nothing here sleeps or blocks, so a full run is just a loop over step().
"""

import logging
from typing import Optional

from config.settings import settings
from models.enums import ProcessState
from models.process import SimulatedProcess
from scheduler.base import IDLE, AbstractSchedulingPolicy, Pid
from scheduler.exceptions import DuplicateProcessError

logger = logging.getLogger(__name__)


class SimulationEngine:
    """
    Runs a single simulation against one policy instance.

    The engine doesn't decide anything; the policy does. Think of it as
    the CPU plus the process table: it executes whatever it is handed and
    reports back when a process has finished.
    """

    def __init__(self, policy: AbstractSchedulingPolicy):
        self._policy = policy
        self._clock = 0
        self._processes: dict[Pid, SimulatedProcess] = {}
        self._timeline: list[Pid] = []
        self._last_dispatched: Pid = IDLE
        self._idle_cycles = 0
        self._preemptions = 0

    @property
    def policy(self) -> AbstractSchedulingPolicy:
        return self._policy

    @property
    def clock(self) -> int:
        return self._clock

    @property
    def timeline(self) -> list[Pid]:
        """Pid dispatched on each tick so far (IDLE for idle ticks)."""
        return list(self._timeline)

    @property
    def processes(self) -> dict[Pid, SimulatedProcess]:
        return dict(self._processes)

    @property
    def idle_cycles(self) -> int:
        return self._idle_cycles

    @property
    def preemptions(self) -> int:
        return self._preemptions

    @property
    def all_finished(self) -> bool:
        return all(p.state == ProcessState.FINISHED for p in self._processes.values())

    def submit(self, pid: Pid, burst_cycles: int) -> SimulatedProcess:
        """Add a process needing `burst_cycles` CPU cycles and hand it to the policy."""
        if isinstance(burst_cycles, bool) or not isinstance(burst_cycles, int) or burst_cycles <= 0:
            raise ValueError(f"burst_cycles must be a positive integer, got {burst_cycles!r}")
        if pid in self._processes:
            raise DuplicateProcessError(f"Process {pid!r} was already submitted", pid=pid)

        self._policy.new_process(pid)
        process = SimulatedProcess(
            pid=pid,
            burst_cycles=burst_cycles,
            remaining_cycles=burst_cycles,
            submitted_at=self._clock,
        )
        self._processes[pid] = process
        logger.debug(f"Submitted {pid!r} ({burst_cycles} cycles) at t={self._clock}")
        return process

    def step(self) -> Pid:
        """
        Advance the clock by one cycle and return the pid that ran (or IDLE).

        A pid the policy returns that the engine never submitted (or that
        already finished) is a policy bug and raises KeyError; the clock,
        timeline and counters are left as they were.
        """
        if self._last_dispatched != IDLE and self._policy.preempt():
            self._preemptions += 1
            logger.debug(f"Policy preempted {self._last_dispatched!r} at t={self._clock}")

        pid = self._policy.dispatch()

        if pid == IDLE:
            self._idle_cycles += 1
            self._last_dispatched = IDLE
        else:
            finished = self._run_cycle(pid)
            # a finished process is off the CPU; nothing is left to preempt
            self._last_dispatched = IDLE if finished else pid

        self._timeline.append(pid)
        self._clock += 1
        return pid

    def run(self, max_cycles: Optional[int] = None) -> list[Pid]:
        """
        Step until every submitted process has finished or `max_cycles`
        ticks have elapsed in this call (default settings.SIMULATION_MAX_CYCLES).

        Returns the full timeline.
        """
        limit = settings.SIMULATION_MAX_CYCLES if max_cycles is None else max_cycles
        steps = 0
        while not self.all_finished and steps < limit:
            self.step()
            steps += 1

        if not self.all_finished:
            unfinished = [p.pid for p in self._processes.values() if p.state != ProcessState.FINISHED]
            logger.warning(f"Stopped after {steps} cycles with unfinished processes: {unfinished}")
        return self.timeline

    def reset(self) -> None:
        """Forget every process and rewind the clock; also resets the policy."""
        self._policy.reset_policy()
        self._clock = 0
        self._processes = {}
        self._timeline = []
        self._last_dispatched = IDLE
        self._idle_cycles = 0
        self._preemptions = 0

    def _run_cycle(self, pid: Pid) -> bool:
        """Charge one cycle to `pid`. Returns True if that was its last cycle."""
        process = self._processes.get(pid)
        if process is None or process.state == ProcessState.FINISHED:
            raise KeyError(f"Policy dispatched {pid!r}, which is not a runnable process")

        if self._last_dispatched != IDLE and self._last_dispatched != pid:
            previous = self._processes.get(self._last_dispatched)
            if previous is not None and previous.state == ProcessState.RUNNING:
                previous.state = ProcessState.READY

        if process.first_run_at is None:
            process.first_run_at = self._clock
        process.state = ProcessState.RUNNING
        process.remaining_cycles -= 1

        if process.remaining_cycles == 0:
            process.state = ProcessState.FINISHED
            process.finished_at = self._clock + 1
            self._policy.process_finished(pid)
            logger.info(
                f"Process {pid!r} finished at t={process.finished_at} "
                f"(turnaround={process.turnaround}, waiting={process.waiting})"
            )
            return True
        return False
