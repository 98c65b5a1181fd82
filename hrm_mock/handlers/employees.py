"""员工：me 系列（档案、仪表盘、请假、考勤、目标、培训、绩效、薪资单、证明申请）与员工 CRUD。"""
from __future__ import annotations

from ..core.routing import RequestContext, RouteTable
from ._crud import patch_record, register_crud
from .attendance import in_range, summarize
from .leaves import status_filter, with_leave_type
from .machines import ACTIVE

routes = RouteTable("employees")

PREFIXES = ("employee", "employees")


def _me(ctx: RequestContext):
    return ctx.store.require("employees", ctx.user_id, "Employee")


def my_profile(ctx: RequestContext):
    return _me(ctx)


def patch_my_profile(ctx: RequestContext):
    return patch_record(ctx, "employees", ctx.user_id, "Employee")


def my_dashboard(ctx: RequestContext):
    store, uid = ctx.store, ctx.user_id
    attendance = sorted(store.filter("attendance", employeeId=uid), key=lambda r: r.get("date") or "", reverse=True)
    return {
        "profile": _me(ctx),
        "leaveBalances": with_leave_type(store, store.filter("leaveBalances", employeeId=uid)),
        "recentAttendance": attendance[:5],
        "goals": store.filter("goals", employeeId=uid),
        "trainings": _my_trainings(ctx),
        "performanceReviews": store.filter("performanceReviews", employeeId=uid),
        "achievements": store.filter("achievements", employeeId=uid),
    }


def my_leaves(ctx: RequestContext):
    records = ctx.store.filter("leaveRequests", employeeId=ctx.user_id, status=status_filter(ctx))
    return with_leave_type(ctx.store, records)


def my_leave_balances(ctx: RequestContext):
    return with_leave_type(ctx.store, ctx.store.filter("leaveBalances", employeeId=ctx.user_id))


def my_attendance_summary(ctx: RequestContext):
    return summarize(ctx.store.filter("attendance", employeeId=ctx.user_id))


def my_attendance(ctx: RequestContext):
    return in_range(ctx.store.filter("attendance", employeeId=ctx.user_id), ctx.arg("startDate"), ctx.arg("endDate"))


def my_goals(ctx: RequestContext):
    return ctx.store.filter("goals", employeeId=ctx.user_id)


def _my_trainings(ctx: RequestContext):
    # 未指定员工的培训视为全员可见
    return [t for t in ctx.store.collection("trainings") if t.get("employeeId") in (None, ctx.user_id)]


def my_trainings(ctx: RequestContext):
    return _my_trainings(ctx)


def my_reviews(ctx: RequestContext):
    return ctx.store.filter("performanceReviews", employeeId=ctx.user_id)


def my_payrolls(ctx: RequestContext):
    """按 period 年份前缀过滤，period 倒序。"""
    records = ctx.store.filter("payrolls", employeeId=ctx.user_id)
    year = ctx.arg("year")
    if year is not None:
        records = [p for p in records if str(p.get("period") or "").startswith(str(year))]
    return sorted(records, key=lambda p: p.get("period") or "", reverse=True)


def request_document(ctx: RequestContext):
    request = ctx.store.create("documentRequests", ctx.data, overrides={
        "employeeId": ctx.user_id, "status": "REQUESTED",
    })
    return {"success": True, "message": "Document requested successfully", "request": request}


def list_employees(ctx: RequestContext):
    records = ctx.store.filter("employees", departmentId=ctx.arg("departmentId"), status=ctx.arg("status"))
    search = ctx.arg("search")
    if search:
        needle = str(search).lower()
        records = [e for e in records
                   if any(needle in str(e.get(f) or "").lower() for f in ("name", "email", "position", "department"))]
    return records


for _p in PREFIXES:
    routes.add("GET", f"{_p}/me/profile", my_profile)
    routes.add("PATCH", f"{_p}/me/profile", patch_my_profile)
    routes.add("GET", f"{_p}/me/dashboard", my_dashboard)
    routes.add("GET", f"{_p}/me/leaves", my_leaves)
    routes.add("GET", f"{_p}/me/leave-balances", my_leave_balances)
    routes.add("GET", f"{_p}/me/attendance/summary", my_attendance_summary)
    routes.add("GET", f"{_p}/me/attendance", my_attendance)
    routes.add("GET", f"{_p}/me/goals", my_goals)
    routes.add("GET", f"{_p}/me/trainings", my_trainings)
    routes.add("GET", f"{_p}/me/performance-reviews", my_reviews)
    routes.add("GET", f"{_p}/me/payrolls", my_payrolls)
    routes.add("POST", f"{_p}/me/documents/request", request_document)
    routes.add("GET", _p, list_employees)

register_crud(routes, PREFIXES, "employees", "Employee",
              overrides=lambda ctx: {"status": ACTIVE},
              methods=("GET", "POST", "PATCH", "DELETE"))
