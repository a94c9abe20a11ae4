"""
Errors raised by scheduling policies.

An empty ready queue is NOT an error: dispatch() returns IDLE for that.
Everything here means the caller broke the contract (submitting a pid
twice, finishing a pid the policy never saw) or the policy's own
bookkeeping is corrupt.

Each class also inherits the builtin it refines, so callers that only
care about "bad value" or "missing key" can keep catching ValueError /
KeyError.
"""

from typing import Hashable, Optional


class SchedulingError(Exception):
    """Base class for all policy errors. `pid` is the process involved, if any."""

    def __init__(self, message: str, pid: Optional[Hashable] = None):
        super().__init__(message)
        self.message = message
        self.pid = pid

    def __str__(self) -> str:
        return self.message


class InvalidProcessError(SchedulingError, ValueError):
    """The value can never be a process identifier (IDLE, None)."""


class DuplicateProcessError(SchedulingError, ValueError):
    """new_process() was called for a pid the policy already tracks."""


class UnknownProcessError(SchedulingError, KeyError):
    """The pid is not tracked by this policy."""


class PolicyConsistencyError(SchedulingError, RuntimeError):
    """
    Internal bookkeeping is out of sync (e.g. a queued pid with no
    time-slice entry). Never expected under correct use; the failing
    call is aborted rather than patched up.
    """
