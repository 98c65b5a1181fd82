"""发展：培训、目标、反馈、绩效评估、知识库、成就、导师关系、职业发展、技能熟练度。"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from ..core.routing import RequestContext, RouteTable
from ._crud import register_crud

routes = RouteTable("development")

NEXT_POSITIONS = ["Tech Lead", "Software Architect"]
PROGRESSION = [
    {"position": "Junior Developer", "date": "2021-01-15"},
    {"position": "Mid-level Developer", "date": "2022-06-01"},
    {"position": "Senior Developer", "date": "2023-12-01"},
]


def normalize_date(value: Any) -> Optional[str]:
    """日期统一为 YYYY-MM-DD；datetime/date 对象与带时间的 ISO 串均截取日期部分。"""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    text = str(value)
    try:
        return date.fromisoformat(text[:10]).isoformat()
    except ValueError:
        return text


register_crud(routes, ["trainings"], "trainings", "Training")
register_crud(routes, ["goals"], "goals", "Goal", defaults={"progress": 0})
register_crud(routes, ["feedback"], "feedback", "Feedback")
register_crud(routes, ["performance", "performance-reviews"], "performanceReviews", "Performance review")
register_crud(routes, ["knowledge-base"], "knowledgeBase", "Knowledge article")
register_crud(routes, ["achievements"], "achievements", "Achievement")


def _mentoring_snapshots(ctx: RequestContext, record: dict) -> None:
    record["mentor"] = ctx.store.snapshot("employees", record.get("mentorId"))
    record["mentee"] = ctx.store.snapshot("employees", record.get("menteeId"))


@routes.post("mentoring")
def create_mentoring(ctx: RequestContext):
    data = ctx.data
    record = ctx.store.create("mentoring", data, defaults={"status": "ACTIVE"}, overrides={
        "startDate": normalize_date(data.get("startDate")),
        "endDate": normalize_date(data.get("endDate")),
    })
    _mentoring_snapshots(ctx, record)
    return record


@routes.patch("mentoring/<mentoring_id>")
def patch_mentoring(ctx: RequestContext, mentoring_id: str):
    data = dict(ctx.data)
    record = ctx.store.require("mentoring", mentoring_id, "Mentoring relationship")
    for field in ("startDate", "endDate"):
        if data.get(field):
            data[field] = normalize_date(data[field])
        else:
            data.pop(field, None)
    people_changed = any(k in data and data[k] != record.get(k) for k in ("mentorId", "menteeId"))
    record = ctx.store.merge("mentoring", mentoring_id, data, "Mentoring relationship")
    if people_changed:
        _mentoring_snapshots(ctx, record)
    return record


register_crud(routes, ["mentoring"], "mentoring", "Mentoring relationship", methods=("LIST", "GET", "DELETE"))


@routes.get("career/overview/<employee_id>")
def career_overview(ctx: RequestContext, employee_id: str):
    employee = ctx.store.require("employees", employee_id, "Employee")
    years = 0
    hired = normalize_date(employee.get("hireDate"))
    if hired:
        try:
            years = max(0, (date.fromisoformat(ctx.store.today()) - date.fromisoformat(hired)).days // 365)
        except ValueError:
            years = 0
    return {
        "employeeId": employee["id"],
        "currentPosition": employee.get("position") or "Developer",
        "level": "SENIOR",
        "yearsInCompany": years,
        "nextPositions": list(NEXT_POSITIONS),
    }


@routes.get("career/progression/<employee_id>")
def career_progression(ctx: RequestContext, employee_id: str):
    ctx.store.require("employees", employee_id, "Employee")
    return [dict(p) for p in PROGRESSION]


@routes.post("skill-proficiency")
def create_proficiency(ctx: RequestContext):
    data = ctx.data
    return ctx.store.create("skillProficiencies", overrides={
        "employeeId": data.get("employeeId"),
        "skillId": data.get("skillId"),
        "proficiency": data.get("proficiency"),
        "lastEvaluated": ctx.store.timestamp(),
    })


@routes.get("skill-proficiency/employee/<employee_id>")
def employee_proficiencies(ctx: RequestContext, employee_id: str):
    return ctx.store.filter("skillProficiencies", employeeId=employee_id)
