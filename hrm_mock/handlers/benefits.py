"""福利：福利项目、参保（含受益人）、薪酬调整。删除参保为软取消。"""
from __future__ import annotations

from ..core.errors import NotFoundError
from ..core.routing import RequestContext, RouteTable
from ._crud import patch_record, register_crud, transition
from .machines import ENROLLMENT, PENDING

routes = RouteTable("benefits")


def _enrollment(ctx: RequestContext, enrollment_id: str) -> dict:
    return ctx.store.require("enrollments", enrollment_id, "Enrollment")


@routes.get("benefits/my")
def my_benefits(ctx: RequestContext):
    return [b for b in ctx.store.collection("benefits") if b.get("isActive", True)]


@routes.get("benefits/my/enrollments")
def my_enrollments(ctx: RequestContext):
    return ctx.store.filter("enrollments", employeeId=ctx.user_id)


@routes.get("benefits/enrollments")
def list_enrollments(ctx: RequestContext):
    return ctx.store.filter("enrollments", employeeId=ctx.arg("employeeId"), status=ctx.arg("status"))


@routes.get("benefits/enrollments/<enrollment_id>")
def get_enrollment(ctx: RequestContext, enrollment_id: str):
    return _enrollment(ctx, enrollment_id)


@routes.post("benefits/enroll")
def enroll(ctx: RequestContext):
    data = ctx.data
    ctx.store.require("benefits", data.get("benefitId"), "Benefit")
    return ctx.store.create("enrollments", data, defaults={"employeeId": ctx.user_id}, overrides={
        "status": PENDING,
        "enrolledAt": ctx.store.timestamp(),
        "dependents": [],
        "benefit": ctx.store.snapshot("benefits", data.get("benefitId")),
    })


@routes.patch("benefits/enrollments/<enrollment_id>")
def patch_enrollment(ctx: RequestContext, enrollment_id: str):
    return patch_record(ctx, "enrollments", enrollment_id, "Enrollment", ENROLLMENT)


@routes.post("benefits/enrollments/<enrollment_id>/activate")
def activate_enrollment(ctx: RequestContext, enrollment_id: str):
    return transition(ctx, "enrollments", enrollment_id, "Enrollment", ENROLLMENT, "activate",
                      {"activatedAt": ctx.store.timestamp()})


@routes.post("benefits/enrollments/<enrollment_id>/dependents")
def add_dependent(ctx: RequestContext, enrollment_id: str):
    enrollment = _enrollment(ctx, enrollment_id)
    dependents = enrollment.setdefault("dependents", [])
    dependent = {k: v for k, v in ctx.data.items() if k != "id"}
    dependent["id"] = ctx.store.new_id(taken=(d.get("id") for d in dependents))
    dependents.append(dependent)
    return ctx.store.touch(enrollment)


@routes.patch("benefits/enrollments/<enrollment_id>/dependents/<dependent_id>")
def patch_dependent(ctx: RequestContext, enrollment_id: str, dependent_id: str):
    enrollment = _enrollment(ctx, enrollment_id)
    for d in enrollment.get("dependents") or []:
        if str(d.get("id")) == dependent_id:
            d.update({k: v for k, v in ctx.data.items() if k != "id"})
            return ctx.store.touch(enrollment)
    raise NotFoundError("Dependent")


@routes.delete("benefits/enrollments/<enrollment_id>/dependents/<dependent_id>")
def remove_dependent(ctx: RequestContext, enrollment_id: str, dependent_id: str):
    enrollment = _enrollment(ctx, enrollment_id)
    dependents = enrollment.get("dependents") or []
    for i, d in enumerate(dependents):
        if str(d.get("id")) == dependent_id:
            dependents.pop(i)
            return ctx.store.touch(enrollment)
    raise NotFoundError("Dependent")


@routes.delete("benefits/enrollments/<enrollment_id>")
def cancel_enrollment(ctx: RequestContext, enrollment_id: str):
    """软取消：保留记录，状态置为 CANCELLED 并记录结束时间。"""
    return transition(ctx, "enrollments", enrollment_id, "Enrollment", ENROLLMENT, "cancel",
                      {"endDate": ctx.store.timestamp()})


@routes.patch("benefits/compensation/<employee_id>")
def patch_compensation(ctx: RequestContext, employee_id: str):
    employee = ctx.store.require("employees", employee_id, "Employee")
    compensation = employee.setdefault("compensation", {})
    compensation.update(ctx.data)
    return ctx.store.touch(employee)


register_crud(routes, ["benefits"], "benefits", "Benefit", defaults={"isActive": True})
