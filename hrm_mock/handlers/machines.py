"""各状态资源的转换表；states 的首项为新建记录的初始状态。"""
from __future__ import annotations

from ..core.state_machine import StateMachine

PENDING = "PENDING"
APPROVED = "APPROVED"
REJECTED = "REJECTED"
CANCELLED = "CANCELLED"
DRAFT = "DRAFT"
CALCULATED = "CALCULATED"
PROCESSED = "PROCESSED"
CLOSED = "CLOSED"
PAID = "PAID"
ACTIVE = "ACTIVE"
SUBMITTED = "SUBMITTED"
INITIATED = "INITIATED"
COMPLETED = "COMPLETED"
UNREAD = "UNREAD"
READ = "READ"

LEAVE_REQUEST = StateMachine(
    "leave request",
    (PENDING, APPROVED, REJECTED, CANCELLED),
    {
        "approve": ((PENDING,), APPROVED),
        "reject": ((PENDING,), REJECTED),
        "cancel": ((PENDING, APPROVED), CANCELLED),
    },
)

PAYROLL_CYCLE = StateMachine(
    "payroll cycle",
    (DRAFT, CALCULATED, APPROVED, PROCESSED, CLOSED),
    {
        "calculate": ((DRAFT, CALCULATED), CALCULATED),
        "approve": ((CALCULATED,), APPROVED),
        "process": ((APPROVED,), PROCESSED),
        "close": ((PROCESSED,), CLOSED),
    },
)

PAYROLL_RECORD = StateMachine(
    "payroll",
    (DRAFT, CALCULATED, APPROVED, PROCESSED, PAID),
    {
        "calculate": ((DRAFT,), CALCULATED),
        "approve": ((DRAFT, CALCULATED), APPROVED),
        "process": ((APPROVED,), PROCESSED),
        "pay": ((PROCESSED,), PAID),
    },
)

ENROLLMENT = StateMachine(
    "enrollment",
    (PENDING, ACTIVE, CANCELLED),
    {
        "activate": ((PENDING,), ACTIVE),
        "cancel": ((PENDING, ACTIVE), CANCELLED),
    },
)

CANDIDATE_STAGES = ("NEW", "SCREENING", "INTERVIEW", "OFFER", "HIRED")
CANDIDATE = StateMachine(
    "candidate",
    CANDIDATE_STAGES + (REJECTED,),
    {
        "screen": (("NEW",), "SCREENING"),
        "interview": (("SCREENING",), "INTERVIEW"),
        "offer": (("INTERVIEW",), "OFFER"),
        "hire": (("OFFER",), "HIRED"),
        "reject": (("NEW", "SCREENING", "INTERVIEW", "OFFER"), REJECTED),
    },
)

SEPARATION = StateMachine(
    "separation",
    (INITIATED, APPROVED, COMPLETED),
    {
        "approve": ((INITIATED,), APPROVED),
        "complete": ((APPROVED,), COMPLETED),
    },
)

EXPENSE = StateMachine(
    "expense",
    (DRAFT, SUBMITTED, APPROVED, REJECTED),
    {
        "submit": ((DRAFT,), SUBMITTED),
        "approve": ((DRAFT, SUBMITTED), APPROVED),
        "reject": ((DRAFT, SUBMITTED), REJECTED),
    },
)

BOOKING = StateMachine(
    "booking",
    (PENDING, APPROVED),
    {"approve": ((PENDING,), APPROVED)},
)

TRAVEL = StateMachine(
    "travel request",
    (DRAFT, PENDING, APPROVED),
    {
        "submit": ((DRAFT,), PENDING),
        "approve": ((DRAFT, PENDING), APPROVED),
    },
)

NOTIFICATION = StateMachine(
    "notification",
    (UNREAD, READ),
    {"read": ((UNREAD,), READ)},
)
