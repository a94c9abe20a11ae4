"""
Round Robin scheduling policy.

Every process gets a fixed quantum: the number of dispatch() calls it may
win in a row. The simulator calls dispatch() once per CPU cycle, so each
call charges one cycle to the process it returns. When a process uses up
its quantum it is moved to the back of the ready queue with a fresh
quantum, and the next process in line wins the following cycle.

Data structures:
- deque of pids (the ready queue)
    - new_process: append to right  → O(1)
    - rotation:    popleft + append → O(1)
- dict pid → remaining quantum (the time-slice table)

With A and B submitted in that order and quantum=2 the cycles go
A, A, B, B, A, A, B, B, ...; with quantum=1 it is plain FIFO cycling.

preempt() always answers False: slice expiry is detected and handled
inside dispatch(), so the simulator never has to interrupt anything.

Passing handoff_on_expiry=True switches to the other reading of the
rotation: the call that exhausts a slice already returns the NEXT process
(A, B, B, A, A, B, B, ... for quantum=2). It models a context switch that
costs nothing, and the process whose slice ran out gives up its last cycle.
In both modes the quantum refill goes to the process being rotated out;
the process taking over keeps whatever slice it had left, which is always
a full quantum during steady rotation.
"""

import logging
from collections import deque

from scheduler.base import IDLE, AbstractSchedulingPolicy, Pid
from scheduler.exceptions import (
    DuplicateProcessError,
    InvalidProcessError,
    PolicyConsistencyError,
    UnknownProcessError,
)

logger = logging.getLogger(__name__)


class RoundRobinPolicy(AbstractSchedulingPolicy):

    def __init__(self, quantum: int, handoff_on_expiry: bool = False):
        if isinstance(quantum, bool) or not isinstance(quantum, int) or quantum <= 0:
            raise ValueError(f"Round Robin quantum must be a positive integer, got {quantum!r}")

        self._quantum = quantum
        self._handoff_on_expiry = handoff_on_expiry
        self._ready_queue: deque[Pid] = deque()
        self._time_slices: dict[Pid, int] = {}
        self.reset_policy()

    @property
    def quantum(self) -> int:
        return self._quantum

    @property
    def handoff_on_expiry(self) -> bool:
        """True if an expiring slice returns the new head (refilling the rotated-out process)."""
        return self._handoff_on_expiry

    def new_process(self, pid: Pid) -> None:
        if pid is None or pid == IDLE:
            raise InvalidProcessError(f"{pid!r} is reserved and cannot be scheduled", pid=pid)
        if pid in self._time_slices:
            raise DuplicateProcessError(f"Process {pid!r} is already scheduled", pid=pid)

        self._ready_queue.append(pid)
        self._time_slices[pid] = self._quantum

    def dispatch(self) -> Pid:
        if not self._ready_queue:
            return IDLE

        pid = self._ready_queue[0]
        if pid not in self._time_slices:
            raise PolicyConsistencyError(
                f"Process {pid!r} is in the ready queue but has no time slice", pid=pid
            )

        self._time_slices[pid] -= 1
        if self._time_slices[pid] > 0:
            return pid

        # Slice used up: send it to the back of the line with a fresh quantum.
        self._ready_queue.rotate(-1)
        self._time_slices[pid] = self._quantum
        logger.debug(f"Quantum expired for {pid!r}, rotated to the back of the ready queue")

        if self._handoff_on_expiry:
            return self._ready_queue[0]
        return pid

    def preempt(self) -> bool:
        return False

    def reset_policy(self) -> None:
        """
        Start over with an empty ready queue and time-slice table.

        Fresh containers are swapped in rather than cleared in place, so
        anything still holding a ready_queue snapshot is unaffected.
        Quantum refills during rotation happen in dispatch(), always for
        the process rotated to the back, never for the new head.
        """
        self._ready_queue = deque()
        self._time_slices = {}
        logger.debug(f"Round Robin policy reset (quantum={self._quantum})")

    def process_finished(self, pid: Pid) -> None:
        if pid not in self._time_slices:
            raise UnknownProcessError(f"Process {pid!r} is not scheduled", pid=pid)

        try:
            self._ready_queue.remove(pid)
        except ValueError:
            raise PolicyConsistencyError(
                f"Process {pid!r} has a time slice but is not in the ready queue", pid=pid
            ) from None
        del self._time_slices[pid]
        logger.debug(f"Process {pid!r} finished, {len(self._ready_queue)} left in the ready queue")

    def peek(self) -> Pid:
        """The pid at the head of the ready queue, without charging a cycle. IDLE if empty."""
        return self._ready_queue[0] if self._ready_queue else IDLE

    def remaining_slice(self, pid: Pid) -> int:
        """Cycles `pid` may still run before it is rotated."""
        try:
            return self._time_slices[pid]
        except KeyError:
            raise UnknownProcessError(f"Process {pid!r} is not scheduled", pid=pid) from None

    @property
    def ready_queue(self) -> tuple:
        """Snapshot of the ready queue, head first."""
        return tuple(self._ready_queue)

    def size(self) -> int:
        return len(self._ready_queue)

    def __contains__(self, pid: Pid) -> bool:
        return pid in self._time_slices

    @property
    def policy_name(self) -> str:
        return "round_robin"

    def __repr__(self) -> str:
        return f"RoundRobinPolicy(quantum={self._quantum}, queued={len(self._ready_queue)})"
