"""
Abstract base class for all scheduling policies (Strategy pattern).

The Strategy pattern lets you swap algorithms at runtime without changing
the code that uses them. The SimulationEngine only knows about
AbstractSchedulingPolicy: it calls new_process(), dispatch(), preempt()
and process_finished() without caring which algorithm sits behind them.

To add a new scheduling policy:
1. Create a new class that inherits AbstractSchedulingPolicy
2. Implement the abstract methods
3. Register it in scheduler/registry.py

Policies are purely reactive. They never call out to the simulator; they
only answer its questions and keep whatever bookkeeping they need to do so.
They deal in process identifiers (Pid) only, never in process-table rows,
which keeps this layer independent of how the simulator models processes.
"""

from abc import ABC, abstractmethod
from typing import Hashable

# Any hashable value can identify a process (ints, strings, tuples...).
Pid = Hashable

# Returned by dispatch() when nothing is eligible to run. Never a valid pid.
IDLE: Pid = -1


class AbstractSchedulingPolicy(ABC):
    """
    Interface that all scheduling policies implement.

    The contract the simulator relies on:
    - new_process: a process became ready
    - dispatch: which process runs for the next cycle (or IDLE)
    - preempt: should the running process be stopped right now
    - reset_policy: forget everything, as if freshly constructed
    - process_finished: a process completed, stop tracking it

    Calls are expected one at a time from a single thread. A simulation
    that runs in parallel with another needs its own policy instance.
    """

    @abstractmethod
    def new_process(self, pid: Pid) -> None:
        """Make `pid` eligible for dispatch."""
        ...

    @abstractmethod
    def dispatch(self) -> Pid:
        """Return the pid to run for the next cycle, or IDLE if none is ready."""
        ...

    @abstractmethod
    def preempt(self) -> bool:
        """True if the currently dispatched process should be stopped now."""
        ...

    @abstractmethod
    def reset_policy(self) -> None:
        """Clear all scheduling state. Idempotent; safe to call at any time."""
        ...

    @abstractmethod
    def process_finished(self, pid: Pid) -> None:
        """Stop tracking `pid`. Raises UnknownProcessError if it is not tracked."""
        ...

    @abstractmethod
    def size(self) -> int:
        """Return the number of processes this policy currently tracks."""
        ...

    @abstractmethod
    def __contains__(self, pid: Pid) -> bool:
        """True while `pid` is tracked (submitted and not yet finished)."""
        ...

    @property
    @abstractmethod
    def policy_name(self) -> str:
        """Unique name for this policy (e.g., 'round_robin')."""
        ...

    def is_idle(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()
