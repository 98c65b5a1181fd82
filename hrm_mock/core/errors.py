"""
统一错误：处理器只负责抛出，最外层入口一次性捕获并归一为信封
{"status": int, "data": {"message": str, "code": str}}，与常规 HTTP 客户端的失败形状一致。
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class MockApiError(Exception):
    """所有模拟后端错误的基类；status 默认 400。"""

    status = 400
    code = "BAD_REQUEST"

    def __init__(self, message: str = "Request failed", status: Optional[int] = None, code: Optional[str] = None, details: str = "") -> None:
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status
        if code is not None:
            self.code = code
        self.details = details

    @property
    def response(self) -> Dict[str, Any]:
        return {"status": self.status, "data": {"message": self.message, "code": self.code}}

    def to_body(self, request_id: str = "") -> Dict[str, Any]:
        """HTTP 边界的统一错误体：code、message、details、requestId。"""
        return {"code": self.code, "message": self.message, "details": self.details, "requestId": request_id}


class RouteNotFoundError(MockApiError):
    status = 404
    code = "ROUTE_NOT_FOUND"

    def __init__(self, path: str) -> None:
        super().__init__(f"Route not found: {path}")
        self.path = path


class NotFoundError(MockApiError):
    status = 404
    code = "NOT_FOUND"

    def __init__(self, label: str) -> None:
        super().__init__(f"{label} not found")
        self.label = label


class MethodNotImplementedError(MockApiError):
    status = 405
    code = "METHOD_NOT_IMPLEMENTED"

    def __init__(self, method: str) -> None:
        super().__init__(f"Method {method} not implemented")
        self.method = method


class ValidationError(MockApiError):
    status = 400
    code = "BAD_REQUEST"


class BusinessRuleError(MockApiError):
    """业务前置条件不满足，如未签到即签退。"""

    status = 400
    code = "BUSINESS_RULE_VIOLATION"


class InvalidTransitionError(BusinessRuleError):
    status = 409
    code = "INVALID_STATE_TRANSITION"

    def __init__(self, resource: str, state: str, action: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Cannot {action} {resource} in state {state}")
        self.resource = resource
        self.state = state
        self.action = action


def normalize_error(exc: BaseException) -> MockApiError:
    """任意异常归一为 MockApiError；已是信封错误则原样返回。"""
    if isinstance(exc, MockApiError):
        return exc
    message = str(exc) or "Request failed"
    status = getattr(exc, "status", None)
    return MockApiError(message, status=status if isinstance(status, int) else None)
