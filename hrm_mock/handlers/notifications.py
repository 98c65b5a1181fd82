"""通知：列表、未读、标记已读。status 与 read 字段始终一致。"""
from __future__ import annotations

from ..core.errors import ValidationError
from ..core.routing import RequestContext, RouteTable
from ._crud import register_crud, transition
from .machines import NOTIFICATION, READ, UNREAD

routes = RouteTable("notifications")


@routes.get("notifications")
def list_notifications(ctx: RequestContext):
    return ctx.store.filter("notifications", userId=ctx.arg("userId"))


@routes.get("notifications/user/<user_id>/unread")
def unread(ctx: RequestContext, user_id: str):
    return ctx.store.filter("notifications", userId=user_id, status=UNREAD)


@routes.route("notifications/<notification_id>/read", methods=("PATCH", "POST"))
def mark_read(ctx: RequestContext, notification_id: str):
    return transition(ctx, "notifications", notification_id, "Notification", NOTIFICATION, "read",
                      {"read": True, "readAt": ctx.store.timestamp()})


@routes.patch("notifications/<notification_id>")
def patch_notification(ctx: RequestContext, notification_id: str):
    """普通字段直接合并；status / read 任一标记已读时走 mark_read。"""
    record = ctx.store.require("notifications", notification_id, "Notification")
    patch = dict(ctx.data)
    target = patch.pop("status", None)
    read = patch.pop("read", None)
    if read is not None:
        implied = READ if read else UNREAD
        if target is not None and target != implied:
            raise ValidationError(f"Notification status {target} conflicts with read={read}")
        target = implied
    NOTIFICATION.check_patch(record.get("status"), target)
    ctx.store.merge("notifications", notification_id, patch, "Notification")
    if target == READ:
        return mark_read(ctx, notification_id)
    return record


register_crud(routes, ["notifications"], "notifications", "Notification",
              overrides=lambda ctx: {"status": UNREAD, "read": False},
              methods=("GET", "POST", "DELETE"))
