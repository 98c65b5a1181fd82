"""项目与人员分配（项目分配、任务分配）。"""
from __future__ import annotations

from ..core.routing import RequestContext, RouteTable
from ._crud import register_crud

routes = RouteTable("projects")


@routes.get("projects/<project_id>/allocations")
def project_allocations(ctx: RequestContext, project_id: str):
    return ctx.store.filter("projectAllocations", projectId=project_id)


@routes.get("tasks/<task_id>/allocations")
def task_allocations(ctx: RequestContext, task_id: str):
    return ctx.store.filter("taskAllocations", taskId=task_id)


@routes.get("employees/<employee_id>/project-allocations")
def employee_project_allocations(ctx: RequestContext, employee_id: str):
    return ctx.store.filter("projectAllocations", employeeId=employee_id)


@routes.get("employees/<employee_id>/task-allocations")
def employee_task_allocations(ctx: RequestContext, employee_id: str):
    return ctx.store.filter("taskAllocations", employeeId=employee_id)


register_crud(routes, ["projects"], "projects", "Project")
register_crud(routes, ["allocations/projects"], "projectAllocations", "Allocation", defaults={"status": "ACTIVE"})
register_crud(routes, ["allocations/tasks"], "taskAllocations", "Task allocation")
