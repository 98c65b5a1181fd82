"""考勤：签到/签退（工时计算）、汇总、工作班次、月度考勤镜像与签字、异常说明。"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from ..core.errors import BusinessRuleError
from ..core.routing import RequestContext, RouteTable
from ._crud import register_crud

routes = RouteTable("attendance")

PRESENT = "PRESENT"
ABSENT = "ABSENT"
LATE = "LATE"
ON_LEAVE = "ON_LEAVE"


def summarize(records: List[dict]) -> Dict[str, Any]:
    total_days = len(records)
    total_hours = sum(r.get("workHours") or 0 for r in records)
    return {
        "totalDays": total_days,
        "present": sum(1 for r in records if r.get("status") == PRESENT),
        "absent": sum(1 for r in records if r.get("status") == ABSENT),
        "late": sum(1 for r in records if r.get("status") == LATE),
        "onLeave": sum(1 for r in records if r.get("status") == ON_LEAVE),
        "totalWorkHours": total_hours,
        "totalOvertimeHours": sum(r.get("overtimeHours") or 0 for r in records),
        "averageWorkHours": total_hours / total_days if total_days else 0,
    }


def in_range(records: List[dict], start: Optional[str], end: Optional[str]) -> List[dict]:
    """按 date 字段闭区间过滤（ISO 日期字符串可直接比较）。"""
    out = records
    if start:
        out = [r for r in out if (r.get("date") or "") >= start[:10]]
    if end:
        out = [r for r in out if (r.get("date") or "") <= end[:10]]
    return out


def _today_record(ctx: RequestContext) -> Optional[dict]:
    today = ctx.store.today()
    for r in ctx.store.collection("attendance"):
        if r.get("date") == today and str(r.get("employeeId")) == ctx.user_id:
            return r
    return None


@routes.post("attendance/check-in")
def check_in(ctx: RequestContext):
    now = ctx.store.now().strftime("%H:%M:%S")
    record = _today_record(ctx)
    if record is not None:
        record["checkIn"] = now
        record["status"] = PRESENT
        return ctx.store.touch(record)
    return ctx.store.create("attendance", overrides={
        "employeeId": ctx.user_id, "date": ctx.store.today(), "checkIn": now, "status": PRESENT,
    })


@routes.post("attendance/check-out")
def check_out(ctx: RequestContext):
    record = _today_record(ctx)
    if record is None or not record.get("checkIn"):
        raise BusinessRuleError("No check-in found for today")
    now = ctx.store.now()
    record["checkOut"] = now.strftime("%H:%M:%S")
    started = datetime.strptime(f"{record['date']}T{record['checkIn']}", "%Y-%m-%dT%H:%M:%S")
    ended = datetime.strptime(f"{record['date']}T{record['checkOut']}", "%Y-%m-%dT%H:%M:%S")
    record["workHours"] = (ended - started).total_seconds() / 3600
    return ctx.store.touch(record)


@routes.get("attendance/summary")
def my_summary(ctx: RequestContext):
    return summarize(ctx.store.filter("attendance", employeeId=ctx.user_id))


@routes.get("attendance/summary/<employee_id>")
def employee_summary(ctx: RequestContext, employee_id: str):
    return summarize(ctx.store.filter("attendance", employeeId=employee_id))


register_crud(routes, ["attendance/work-schedules"], "workSchedules", "Work schedule")


@routes.get("attendance/mirror")
def mirror(ctx: RequestContext):
    """月度考勤镜像：当月记录、汇总与签字状态。"""
    month = str(ctx.arg("month") or ctx.store.today()[:7])
    employee_id = str(ctx.arg("employeeId") or ctx.user_id)
    records = sorted(
        (r for r in ctx.store.filter("attendance", employeeId=employee_id) if (r.get("date") or "").startswith(month)),
        key=lambda r: r.get("date") or "",
    )
    signature = next(iter(ctx.store.filter("attendanceMirrorSignatures", employeeId=employee_id, month=month)), None)
    return {
        "employeeId": employee_id,
        "month": month,
        "records": records,
        "summary": summarize(records),
        "signed": signature is not None,
        "signedAt": signature.get("signedAt") if signature else None,
    }


@routes.post("attendance/sign-mirror")
def sign_mirror(ctx: RequestContext):
    month = str(ctx.data.get("month") or ctx.store.today()[:7])
    existing = ctx.store.filter("attendanceMirrorSignatures", employeeId=ctx.user_id, month=month)
    if existing:
        return existing[0]
    return ctx.store.create("attendanceMirrorSignatures", overrides={
        "employeeId": ctx.user_id, "month": month, "signedAt": ctx.store.timestamp(),
    })


@routes.post("attendance/<attendance_id>/justification")
def justify(ctx: RequestContext, attendance_id: str):
    record = ctx.store.require("attendance", attendance_id, "Attendance")
    justification = ctx.store.create("attendanceJustifications", ctx.data, overrides={
        "attendanceId": record["id"], "employeeId": record.get("employeeId"), "status": "PENDING",
    })
    record["justificationId"] = justification["id"]
    ctx.store.touch(record)
    return justification


@routes.get("attendance")
def list_attendance(ctx: RequestContext):
    records = ctx.store.filter("attendance", employeeId=ctx.arg("employeeId"))
    return in_range(records, ctx.arg("startDate"), ctx.arg("endDate"))


register_crud(routes, ["attendance"], "attendance", "Attendance", methods=("GET", "POST", "PATCH", "DELETE"))
