"""认证桩：返回静态 Token，不校验凭据。"""
from __future__ import annotations

from ..core.routing import RequestContext, RouteTable

routes = RouteTable("auth")


@routes.post("auth/login")
def login(ctx: RequestContext):
    employees = ctx.store.collection("employees")
    token = ctx.settings.AUTH_TOKEN
    return {"accessToken": token, "token": token, "user": employees[0] if employees else None}
