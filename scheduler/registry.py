"""
Policy factory — maps policy names to scheduling policy classes.

This is the Factory pattern: instead of writing if/elif chains everywhere,
you have ONE place that knows how to create policies. The simulator asks
for a policy by name once per run and from then on only talks to the
AbstractSchedulingPolicy interface.
"""

from typing import Optional, Union

from config.settings import settings
from models.enums import SchedulingPolicy
from scheduler.base import AbstractSchedulingPolicy
from scheduler.round_robin import RoundRobinPolicy


_REGISTRY: dict[SchedulingPolicy, type[AbstractSchedulingPolicy]] = {
    SchedulingPolicy.ROUND_ROBIN: RoundRobinPolicy,
}


def available_policies() -> list[str]:
    return [policy.value for policy in _REGISTRY]


def create_policy(policy: Optional[Union[SchedulingPolicy, str]] = None, **kwargs) -> AbstractSchedulingPolicy:
    """
    Create a scheduling policy instance.

    `policy` may be a SchedulingPolicy member or its string value; when
    omitted, settings.DEFAULT_SCHEDULING_POLICY is used.

    For Round Robin the quantum comes from settings.ROUND_ROBIN_TIME_QUANTUM
    unless passed explicitly:
        create_policy(SchedulingPolicy.ROUND_ROBIN, quantum=4)
    """
    if policy is None:
        policy = settings.DEFAULT_SCHEDULING_POLICY

    try:
        key = SchedulingPolicy(policy)
    except ValueError:
        key = None

    cls = _REGISTRY.get(key)
    if cls is None:
        raise ValueError(
            f"Unknown scheduling policy: '{policy}'. Available: {available_policies()}"
        )

    if key == SchedulingPolicy.ROUND_ROBIN:
        kwargs.setdefault("quantum", settings.ROUND_ROBIN_TIME_QUANTUM)
    return cls(**kwargs)
