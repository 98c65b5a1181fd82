"""组织：部门、岗位、技能。"""
from __future__ import annotations

from ..core.routing import RequestContext, RouteTable
from ._crud import register_crud

routes = RouteTable("organization")


@routes.get("departments/<department_id>/employees")
def department_employees(ctx: RequestContext, department_id: str):
    return ctx.store.filter("employees", departmentId=department_id)


register_crud(routes, ["departments"], "departments", "Department")
register_crud(routes, ["positions"], "positions", "Position")
register_crud(routes, ["skills"], "skills", "Skill")
