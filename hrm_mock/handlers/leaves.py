"""请假：类型、申请（含天数计算与状态动作）、余额。"""
from __future__ import annotations

from datetime import date
from typing import List, Optional

from ..core.errors import BusinessRuleError, ValidationError
from ..core.routing import RequestContext, RouteTable
from ._crud import patch_record, register_crud, transition
from .machines import LEAVE_REQUEST, PENDING

routes = RouteTable("leaves")


def parse_date(value, field: str) -> date:
    if not value or not isinstance(value, str):
        raise ValidationError(f"{field} is required")
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        raise ValidationError(f"Invalid {field}: {value}")


def inclusive_days(start: str, end: str) -> int:
    """起止日期（含首尾）的天数；结束早于开始时拒绝。"""
    s, e = parse_date(start, "startDate"), parse_date(end, "endDate")
    if e < s:
        raise BusinessRuleError("End date must not be before start date")
    return (e - s).days + 1


def with_leave_type(store, records: List[dict]) -> List[dict]:
    """读时关联：附加当前的请假类型记录，缺失时保留写入时快照或为 None。"""
    out = []
    for r in records:
        lt = store.find("leaveTypes", r.get("leaveTypeId"))
        out.append({**r, "leaveType": lt if lt is not None else r.get("leaveType")})
    return out


def status_filter(ctx: RequestContext) -> Optional[str]:
    return LEAVE_REQUEST.validate_filter(ctx.arg("status"), ctx.settings.STRICT_STATUS_FILTER)


register_crud(routes, ["leaves/types"], "leaveTypes", "Leave type")


@routes.get("leaves/requests")
def list_requests(ctx: RequestContext):
    return ctx.store.filter("leaveRequests", status=status_filter(ctx), employeeId=ctx.arg("employeeId"))


@routes.get("leaves/requests/<request_id>")
def get_request(ctx: RequestContext, request_id: str):
    return ctx.store.require("leaveRequests", request_id, "Leave request")


@routes.post("leaves/requests")
def create_request(ctx: RequestContext):
    data = ctx.data
    leave_type = ctx.store.require("leaveTypes", data.get("leaveTypeId"), "Leave type")
    days = inclusive_days(data.get("startDate"), data.get("endDate"))
    employee_id = str(data.get("employeeId") or ctx.user_id)
    return ctx.store.create("leaveRequests", data, overrides={
        "employeeId": employee_id,
        "days": days,
        "status": PENDING,
        "leaveType": ctx.store.snapshot("leaveTypes", leave_type["id"]),
        "employee": ctx.store.snapshot("employees", employee_id),
    })


@routes.patch("leaves/requests/<request_id>")
def patch_request(ctx: RequestContext, request_id: str):
    return patch_record(ctx, "leaveRequests", request_id, "Leave request", LEAVE_REQUEST)


@routes.post("leaves/requests/<request_id>/approve")
def approve_request(ctx: RequestContext, request_id: str):
    return transition(ctx, "leaveRequests", request_id, "Leave request", LEAVE_REQUEST, "approve",
                      {"approvedAt": ctx.store.timestamp(), "approvedBy": ctx.user_id})


@routes.post("leaves/requests/<request_id>/reject")
def reject_request(ctx: RequestContext, request_id: str):
    reason = ctx.data.get("rejectedReason") or ctx.data.get("reason")
    return transition(ctx, "leaveRequests", request_id, "Leave request", LEAVE_REQUEST, "reject",
                      {"rejectedReason": reason})


@routes.post("leaves/requests/<request_id>/cancel")
def cancel_request(ctx: RequestContext, request_id: str):
    transition(ctx, "leaveRequests", request_id, "Leave request", LEAVE_REQUEST, "cancel")
    return None


@routes.get("leaves/balances/<employee_id>")
def balances(ctx: RequestContext, employee_id: str):
    return with_leave_type(ctx.store, ctx.store.filter("leaveBalances", employeeId=employee_id))
