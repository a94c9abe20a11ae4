"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They compare equal to their plain string values ("round_robin")
- They can be built straight from config values: SchedulingPolicy(settings.DEFAULT_SCHEDULING_POLICY)
- Typos become immediate errors instead of silent bugs
"""

import enum


class ProcessState(str, enum.Enum):
    READY = "READY"            # submitted, waiting in the policy's ready queue
    RUNNING = "RUNNING"        # dispatched on the most recent clock tick
    FINISHED = "FINISHED"      # burst fully consumed, removed from the policy


class SchedulingPolicy(str, enum.Enum):
    ROUND_ROBIN = "round_robin"  # Round Robin — fixed quantum, FIFO rotation
