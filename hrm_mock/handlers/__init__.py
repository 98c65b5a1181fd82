"""资源处理器：每个模块维护自己的路由表，这里按固定顺序合并为分发器使用的总表。"""
from __future__ import annotations

from ..core.routing import RouteTable
from . import (
    analytics,
    attendance,
    auth,
    benefits,
    compliance,
    contract_labor,
    development,
    employees,
    leaves,
    notifications,
    organization,
    payroll,
    projects,
    recruitment,
    workplace,
)

MODULES = (
    auth,
    employees,
    organization,
    projects,
    development,
    leaves,
    attendance,
    payroll,
    benefits,
    recruitment,
    contract_labor,
    notifications,
    compliance,
    workplace,
    analytics,
)


def build_route_table() -> RouteTable:
    table = RouteTable("hrm")
    for module in MODULES:
        table.include(module.routes)
    return table
