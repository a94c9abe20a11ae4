"""
Tests for the policy factory.

create_policy() is the only place that maps a policy name to a class,
and the only place that pulls the Round Robin quantum from settings.
"""

import pytest

from config.settings import settings
from models.enums import SchedulingPolicy
from scheduler.registry import available_policies, create_policy
from scheduler.round_robin import RoundRobinPolicy


def test_create_round_robin_from_enum():
    policy = create_policy(SchedulingPolicy.ROUND_ROBIN, quantum=4)

    assert isinstance(policy, RoundRobinPolicy)
    assert policy.quantum == 4


def test_create_round_robin_from_string():
    assert isinstance(create_policy("round_robin", quantum=1), RoundRobinPolicy)


def test_quantum_defaults_to_settings(monkeypatch):
    monkeypatch.setattr(settings, "ROUND_ROBIN_TIME_QUANTUM", 6)

    assert create_policy(SchedulingPolicy.ROUND_ROBIN).quantum == 6


def test_policy_defaults_to_settings():
    policy = create_policy()
    assert policy.policy_name == settings.DEFAULT_SCHEDULING_POLICY


def test_extra_kwargs_are_forwarded():
    policy = create_policy(SchedulingPolicy.ROUND_ROBIN, quantum=2, handoff_on_expiry=True)
    assert policy.handoff_on_expiry is True


def test_unknown_policy_raises():
    with pytest.raises(ValueError, match="Unknown scheduling policy"):
        create_policy("lottery")


def test_each_call_returns_a_new_instance():
    first = create_policy(SchedulingPolicy.ROUND_ROBIN, quantum=2)
    second = create_policy(SchedulingPolicy.ROUND_ROBIN, quantum=2)

    first.new_process("a")

    assert first is not second
    assert second.size() == 0


def test_available_policies():
    assert available_policies() == ["round_robin"]
