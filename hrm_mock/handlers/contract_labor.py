"""外包用工：承包商、外包人员（承包商/项目写时快照）、外包考勤。"""
from __future__ import annotations

from ..core.errors import ValidationError
from ..core.routing import RequestContext, RouteTable
from ._crud import register_crud

routes = RouteTable("contract_labor")

REF_FIELDS = {"contractorId": "contractor", "projectId": "project"}

register_crud(routes, ["contract-labor/contractors"], "contractors", "Contractor", defaults={"isActive": True})


def _resolve_refs(ctx: RequestContext, data: dict) -> dict:
    """校验并快照承包商与项目；引用不存在时报 not found。"""
    refs = {}
    if data.get("contractorId"):
        ctx.store.require("contractors", data["contractorId"], "Contractor")
        refs["contractor"] = ctx.store.snapshot("contractors", data["contractorId"])
    if data.get("projectId"):
        ctx.store.require("projects", data["projectId"], "Project")
        refs["project"] = ctx.store.snapshot("projects", data["projectId"])
    return refs


@routes.get("contract-labor")
def list_labor(ctx: RequestContext):
    return ctx.store.filter("contractLabor", contractorId=ctx.arg("contractorId"), projectId=ctx.arg("projectId"))


@routes.post("contract-labor")
def create_labor(ctx: RequestContext):
    data = ctx.data
    ctx.store.require("contractors", data.get("contractorId"), "Contractor")
    overrides = {"project": None}
    overrides.update(_resolve_refs(ctx, data))
    return ctx.store.create("contractLabor", data, defaults={"status": "ACTIVE"}, overrides=overrides)


@routes.patch("contract-labor/<labor_id>")
def patch_labor(ctx: RequestContext, labor_id: str):
    record = ctx.store.require("contractLabor", labor_id, "Contract labor")
    changed = {k: v for k, v in ctx.data.items() if k in REF_FIELDS and v != record.get(k)}
    patch = dict(ctx.data)
    if "contractorId" in changed and not changed["contractorId"]:
        raise ValidationError("contractorId is required")
    for key, v in changed.items():
        # 清空引用时快照一并清空
        if not v:
            patch[REF_FIELDS[key]] = None
    patch.update(_resolve_refs(ctx, changed))
    return ctx.store.merge("contractLabor", labor_id, patch, "Contract labor")


@routes.get("contract-labor/<labor_id>/attendance")
def labor_attendance(ctx: RequestContext, labor_id: str):
    ctx.store.require("contractLabor", labor_id, "Contract labor")
    return ctx.store.filter("contractLaborAttendance", laborId=labor_id)


@routes.post("contract-labor/<labor_id>/attendance")
def add_labor_attendance(ctx: RequestContext, labor_id: str):
    ctx.store.require("contractLabor", labor_id, "Contract labor")
    return ctx.store.create("contractLaborAttendance", ctx.data, overrides={"laborId": labor_id})


register_crud(routes, ["contract-labor"], "contractLabor", "Contract labor", methods=("GET", "DELETE"))
