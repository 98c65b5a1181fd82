"""
状态机单元测试：合法转换、幂等重复、非法转换 409、PATCH 目标校验、status 过滤。
"""
from __future__ import annotations

import pytest

from hrm_mock.core.errors import InvalidTransitionError, ValidationError
from hrm_mock.core.state_machine import StateMachine
from hrm_mock.handlers.machines import (
    BOOKING,
    CANDIDATE,
    ENROLLMENT,
    EXPENSE,
    LEAVE_REQUEST,
    NOTIFICATION,
    PAYROLL_CYCLE,
    PAYROLL_RECORD,
    SEPARATION,
    TRAVEL,
)


def test_legal_transition():
    assert LEAVE_REQUEST.next_state("PENDING", "approve") == "APPROVED"
    assert LEAVE_REQUEST.next_state("APPROVED", "cancel") == "CANCELLED"


def test_repeat_is_idempotent():
    assert LEAVE_REQUEST.next_state("APPROVED", "approve") == "APPROVED"
    assert CANDIDATE.next_state("REJECTED", "reject") == "REJECTED"


def test_illegal_transition_raises_409():
    with pytest.raises(InvalidTransitionError) as ei:
        LEAVE_REQUEST.next_state("REJECTED", "approve")
    assert ei.value.status == 409
    assert ei.value.code == "INVALID_STATE_TRANSITION"
    assert ei.value.message == "Cannot approve leave request in state REJECTED"


def test_unknown_action_raises():
    with pytest.raises(InvalidTransitionError):
        LEAVE_REQUEST.next_state("PENDING", "archive")


def test_calculate_may_repeat():
    assert PAYROLL_CYCLE.next_state("CALCULATED", "calculate") == "CALCULATED"
    with pytest.raises(InvalidTransitionError):
        PAYROLL_CYCLE.next_state("APPROVED", "calculate")


def test_reachable_follows_chain():
    assert PAYROLL_CYCLE.reachable("DRAFT") == {"DRAFT", "CALCULATED", "APPROVED", "PROCESSED", "CLOSED"}
    assert PAYROLL_CYCLE.reachable("CLOSED") == {"CLOSED"}


def test_check_patch():
    LEAVE_REQUEST.check_patch("PENDING", None)
    LEAVE_REQUEST.check_patch("PENDING", "PENDING")
    LEAVE_REQUEST.check_patch("PENDING", "APPROVED")
    with pytest.raises(InvalidTransitionError):
        LEAVE_REQUEST.check_patch("CANCELLED", "PENDING")
    with pytest.raises(ValidationError):
        LEAVE_REQUEST.check_patch("PENDING", "WHATEVER")


def test_validate_filter():
    assert LEAVE_REQUEST.validate_filter(None) is None
    assert LEAVE_REQUEST.validate_filter("") is None
    assert LEAVE_REQUEST.validate_filter("PENDING") == "PENDING"
    assert LEAVE_REQUEST.validate_filter("pending", strict=False) is None
    with pytest.raises(ValidationError):
        LEAVE_REQUEST.validate_filter("pending", strict=True)


def test_definition_checks_states():
    with pytest.raises(ValueError):
        StateMachine("x", ("A",), {"go": (("A",), "B")})
    with pytest.raises(ValueError):
        StateMachine("x", ("A", "B"), {"go": (("C",), "B")})
    m = StateMachine("x", ("A", "B"), {"go": (("A",), "B")})
    assert m.actions == ["go"]
    assert m.is_state("A") and not m.is_state("C")


@pytest.mark.parametrize("machine", [
    LEAVE_REQUEST, PAYROLL_CYCLE, PAYROLL_RECORD, ENROLLMENT, CANDIDATE,
    SEPARATION, EXPENSE, BOOKING, TRAVEL, NOTIFICATION,
])
def test_every_state_reachable_from_initial(machine):
    assert machine.reachable(machine.states[0]) == set(machine.states)


def test_patch_rejection_message():
    with pytest.raises(InvalidTransitionError) as ei:
        ENROLLMENT.check_patch("CANCELLED", "ACTIVE")
    assert ei.value.status == 409
    assert ei.value.message == "Cannot change enrollment status from CANCELLED to ACTIVE"
    ENROLLMENT.check_patch("PENDING", "ACTIVE")
