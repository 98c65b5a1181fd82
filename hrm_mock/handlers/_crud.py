"""通用 CRUD 与状态动作助手：各资源模块在其路由表上复用。"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence

from ..core.audit import human_audit
from ..core.routing import RequestContext, RouteTable
from ..core.state_machine import StateMachine


def list_records(ctx: RequestContext, collection: str, **eq: Any) -> List[dict]:
    return ctx.store.filter(collection, **eq)


def transition(ctx: RequestContext, collection: str, record_id: str, label: str, machine: StateMachine,
               action: str, extra: Optional[Dict[str, Any]] = None) -> dict:
    """执行状态动作；重复执行已生效的动作原样返回记录，不覆盖任何字段。"""
    record = ctx.store.require(collection, record_id, label)
    current = record.get("status")
    target = machine.next_state(current, action)
    if target == current:
        return record
    record["status"] = target
    for k, v in (extra or {}).items():
        record[k] = v
    ctx.store.touch(record)
    human_audit(ctx.user_id, record["updatedAt"], f"将{label} {record_id} 由 {current} 变更为 {target}（{action}）")
    return record


def patch_record(ctx: RequestContext, collection: str, record_id: str, label: str,
                 machine: Optional[StateMachine] = None, patch: Optional[dict] = None) -> dict:
    """合并请求体；状态机资源的 status 须为当前或可达状态。"""
    patch = ctx.data if patch is None else patch
    if machine is not None and "status" in patch:
        current = ctx.store.require(collection, record_id, label).get("status")
        machine.check_patch(current, patch.get("status"))
    return ctx.store.merge(collection, record_id, patch, label)


def register_crud(table: RouteTable, prefixes: Sequence[str], collection: str, label: str,
                  defaults: Optional[Dict[str, Any]] = None,
                  overrides: Optional[Callable[[RequestContext], Dict[str, Any]]] = None,
                  machine: Optional[StateMachine] = None,
                  methods: Sequence[str] = ("LIST", "GET", "POST", "PATCH", "DELETE")) -> None:
    """为每个前缀注册 list / get / create / patch / delete 标准路由；methods 可裁剪（LIST 表示列表路由）。"""

    def list_(ctx: RequestContext):
        return list_records(ctx, collection)

    def get_(ctx: RequestContext, record_id: str):
        return ctx.store.require(collection, record_id, label)

    def create_(ctx: RequestContext):
        return ctx.store.create(collection, ctx.data, defaults=defaults,
                                overrides=overrides(ctx) if overrides else None)

    def patch_(ctx: RequestContext, record_id: str):
        return patch_record(ctx, collection, record_id, label, machine)

    def delete_(ctx: RequestContext, record_id: str):
        ctx.store.remove(collection, record_id, label)
        return None

    for prefix in prefixes:
        if "LIST" in methods:
            table.add("GET", prefix, list_)
        if "GET" in methods:
            table.add("GET", f"{prefix}/<record_id>", get_)
        if "POST" in methods:
            table.add("POST", prefix, create_)
        if "PATCH" in methods:
            table.add("PATCH", f"{prefix}/<record_id>", patch_)
        if "DELETE" in methods:
            table.add("DELETE", f"{prefix}/<record_id>", delete_)
