"""合规：制度文件与阅读确认、离职流程（读时关联员工）。"""
from __future__ import annotations

from ..core.routing import RequestContext, RouteTable
from ._crud import patch_record, register_crud, transition
from .machines import INITIATED, SEPARATION

routes = RouteTable("compliance")


@routes.get("policies/my/acknowledgments")
def my_acknowledgments(ctx: RequestContext):
    return ctx.store.filter("policyAcknowledgments", employeeId=ctx.user_id)


@routes.get("policies/<policy_id>/acknowledgments")
def policy_acknowledgments(ctx: RequestContext, policy_id: str):
    ctx.store.require("policies", policy_id, "Policy")
    return ctx.store.filter("policyAcknowledgments", policyId=policy_id)


@routes.post("policies/<policy_id>/acknowledge")
def acknowledge(ctx: RequestContext, policy_id: str):
    """同一员工对同一制度只确认一次，重复确认返回已有记录。"""
    policy = ctx.store.require("policies", policy_id, "Policy")
    existing = ctx.store.filter("policyAcknowledgments", policyId=policy["id"], employeeId=ctx.user_id)
    if existing:
        return existing[0]
    return ctx.store.create("policyAcknowledgments", stamp=False, overrides={
        "policyId": policy["id"],
        "policyVersion": policy.get("version"),
        "employeeId": ctx.user_id,
        "acknowledgedAt": ctx.store.timestamp(),
    })


register_crud(routes, ["policies"], "policies", "Policy",
              defaults={"status": "ACTIVE"}, overrides=lambda ctx: {"createdBy": ctx.user_id})


def _with_employee(ctx: RequestContext, record: dict) -> dict:
    return {**record, "employee": ctx.store.find("employees", record.get("employeeId"))}


@routes.get("separations")
def list_separations(ctx: RequestContext):
    return [_with_employee(ctx, s) for s in ctx.store.filter("separations", status=ctx.arg("status"))]


@routes.get("separations/<separation_id>")
def get_separation(ctx: RequestContext, separation_id: str):
    return _with_employee(ctx, ctx.store.require("separations", separation_id, "Separation"))


@routes.post("separations")
def create_separation(ctx: RequestContext):
    return ctx.store.create("separations", ctx.data, overrides={
        "status": INITIATED,
        "exitInterviewCompleted": False,
        "checklist": [],
        "initiatedBy": ctx.user_id,
    })


@routes.patch("separations/<separation_id>")
def patch_separation(ctx: RequestContext, separation_id: str):
    return patch_record(ctx, "separations", separation_id, "Separation", SEPARATION)


@routes.post("separations/<separation_id>/approve")
def approve_separation(ctx: RequestContext, separation_id: str):
    return transition(ctx, "separations", separation_id, "Separation", SEPARATION, "approve",
                      {"approvedBy": ctx.user_id, "approvedAt": ctx.store.timestamp()})


@routes.post("separations/<separation_id>/complete")
def complete_separation(ctx: RequestContext, separation_id: str):
    return transition(ctx, "separations", separation_id, "Separation", SEPARATION, "complete",
                      {"completedAt": ctx.store.timestamp()})
