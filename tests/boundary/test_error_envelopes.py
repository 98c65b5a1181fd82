"""
边界测试：错误信封 {status, data:{message, code}} 与 HTTP 统一错误体 {code, message, details, requestId}。
"""
from __future__ import annotations

import asyncio

import pytest

from hrm_mock.core.errors import (
    BusinessRuleError,
    InvalidTransitionError,
    MockApiError,
    NotFoundError,
    ValidationError,
    normalize_error,
)


@pytest.mark.parametrize("method,url,data,status,code", [
    ("GET", "employee/404", None, 404, "NOT_FOUND"),
    ("GET", "nope/1", None, 404, "ROUTE_NOT_FOUND"),
    ("PUT", "employee/1", None, 405, "METHOD_NOT_IMPLEMENTED"),
    ("POST", "attendance/check-out", None, 400, "BUSINESS_RULE_VIOLATION"),
    ("POST", "payroll/cycles/1/close", None, 409, "INVALID_STATE_TRANSITION"),
    ("POST", "leaves/requests", {"leaveTypeId": "1"}, 400, "BAD_REQUEST"),
])
def test_envelope_shape(service, method, url, data, status, code):
    with pytest.raises(MockApiError) as ei:
        service.request(method=method, url=url, data=data)
    resp = ei.value.response
    assert resp["status"] == status
    assert resp["data"]["code"] == code
    assert isinstance(resp["data"]["message"], str) and resp["data"]["message"]


def test_error_hierarchy():
    assert issubclass(InvalidTransitionError, BusinessRuleError)
    assert BusinessRuleError("x").status == 400
    assert ValidationError("bad").response == {"status": 400, "data": {"message": "bad", "code": "BAD_REQUEST"}}
    err = NotFoundError("Goal")
    assert normalize_error(err) is err
    assert normalize_error(ValueError()).message == "Request failed"


def test_to_body():
    body = NotFoundError("Employee").to_body("req-1")
    assert body == {"code": "NOT_FOUND", "message": "Employee not found", "details": "", "requestId": "req-1"}


def test_http_not_found_body(client):
    r = client.get("/employee/404", headers={"X-Request-ID": "bound-1"})
    assert r.status_code == 404
    assert r.get_json() == {"code": "NOT_FOUND", "message": "Employee not found", "details": "", "requestId": "bound-1"}


def test_http_route_not_found(client):
    r = client.get("/does-not-exist/123")
    assert r.status_code == 404
    body = r.get_json()
    assert body["code"] == "ROUTE_NOT_FOUND"
    assert "does-not-exist/123" in body["message"]
    assert body["requestId"]


def test_http_put_is_405(client):
    r = client.put("/employee/1", json={"name": "x"})
    assert r.status_code == 405
    assert r.get_json()["code"] == "METHOD_NOT_IMPLEMENTED"


def test_http_conflict(client):
    r = client.post("/leaves/requests/1/reject")
    assert r.status_code == 200
    r = client.post("/leaves/requests/1/approve")
    assert r.status_code == 409
    assert r.get_json()["message"] == "Cannot approve leave request in state REJECTED"


def test_http_invalid_status_filter(client, settings):
    r = client.get("/leaves/requests?status=nope")
    assert r.status_code == 400
    settings.STRICT_STATUS_FILTER = False
    assert client.get("/leaves/requests?status=nope").status_code == 200


def test_http_non_json_body_is_ignored(client):
    r = client.post("/leaves/requests", data="not json", content_type="text/plain")
    assert r.status_code == 404
    assert r.get_json()["message"] == "Leave type not found"


@pytest.mark.parametrize("descriptor", [
    {"method": "GET", "url": "employee/me/payrolls", "params": "year=2024"},
    {"method": "POST", "url": "leaves/requests", "data": b"\xff\xfe"},
    {"method": "GET", "url": None},
])
def test_malformed_descriptor_is_bad_request(service, descriptor):
    with pytest.raises(MockApiError) as ei:
        service.request(descriptor)
    assert ei.value.response["status"] == 400
    assert ei.value.response["data"]["code"] == "BAD_REQUEST"
    with pytest.raises(ValidationError):
        asyncio.run(service.request_async(**descriptor))


def test_non_mapping_descriptor_is_bad_request(service):
    with pytest.raises(ValidationError):
        service.request("employee/1")
