"""
HRM 模拟后端：内存请求路由与资源分发器。
对外唯一入口为 MockService.request()，可选经 Flask 暴露为真实 HTTP 服务（hrm_mock.app）。
"""
from __future__ import annotations

from .core.errors import MockApiError
from .service import MockService, MockRequest, get_service, reset_service

__all__ = ["MockApiError", "MockService", "MockRequest", "get_service", "reset_service"]
