"""
分发器单元测试：请求描述的多种写法、人为延迟、方法与路由错误、结果副本、异常归一、异步入口、种子覆盖。
"""
from __future__ import annotations

import asyncio

import pytest

from hrm_mock.core.errors import MethodNotImplementedError, MockApiError, RouteNotFoundError
from hrm_mock.service import MockRequest, MockService


def test_request_forms(service):
    by_kw = service.request(method="GET", url="employee/1")
    by_dict = service.request({"method": "get", "url": "/employee/1"})
    by_model = service.request(MockRequest(method="GET", url="https://api.local/employee/1"))
    assert by_kw["id"] == by_dict["id"] == by_model["id"] == "1"


def test_mock_request_decodes_string_body():
    assert MockRequest(method="post", url="x", data='{"a": 1}').data == {"a": 1}
    assert MockRequest(url="x", data=b'{"b": 2}').data == {"b": 2}
    assert MockRequest(url="x", data="not json").data == "not json"
    assert MockRequest(url="x", data="  ").data is None
    assert MockRequest(url="x", unknown="ignored").method == "GET"


def test_latency_applied_before_dispatch(store, settings):
    settings.LATENCY_MIN_MS = 300
    settings.LATENCY_JITTER_MS = 200
    slept = []
    svc = MockService(store=store, settings=settings, sleep=slept.append, rng=lambda: 0.5)
    svc.request(method="GET", url="departments")
    assert slept == [pytest.approx(0.4)]


def test_zero_latency_skips_sleep(store, settings):
    slept = []
    svc = MockService(store=store, settings=settings, sleep=slept.append)
    svc.request(method="GET", url="departments")
    assert slept == []


def test_unsupported_method(service):
    with pytest.raises(MethodNotImplementedError) as ei:
        service.request(method="PUT", url="employee/1")
    assert ei.value.response["status"] == 405
    assert ei.value.response["data"]["message"] == "Method PUT not implemented"


def test_route_not_found_message(service):
    with pytest.raises(RouteNotFoundError) as ei:
        service.request(method="GET", url="/does-not-exist/123/")
    assert "does-not-exist/123" in ei.value.response["data"]["message"]


def test_empty_target_is_route_not_found(service):
    with pytest.raises(RouteNotFoundError):
        service.request(method="GET", url="")


def test_results_are_detached(service):
    e = service.request(method="GET", url="employee/1")
    e["name"] = "Mutated"
    e["skills"].append("Cobol")
    again = service.request(method="GET", url="employee/1")
    assert again["name"] == "João Silva"
    assert "Cobol" not in again["skills"]


def test_unexpected_error_is_normalized(service):
    def boom(ctx):
        raise RuntimeError("kaput")

    service.routes.add("GET", "boom", boom)
    with pytest.raises(MockApiError) as ei:
        service.request(method="GET", url="boom")
    assert ei.value.response == {"status": 400, "data": {"message": "kaput", "code": "BAD_REQUEST"}}
    assert isinstance(ei.value.__cause__, RuntimeError)


def test_request_async(service):
    result = asyncio.run(service.request_async(method="GET", url="departments/1"))
    assert result["name"] == "Information Technology"


def test_reset_applies_seed_file(tmp_path, service, settings):
    seed = tmp_path / "seed.yaml"
    seed.write_text("departments:\n  - id: d9\n    name: Yaml Dept\nnotes: ignored\n", encoding="utf-8")
    settings.SEED_PATH = str(seed)
    service.request(method="POST", url="departments", data={"name": "Temp"})
    service.reset()
    assert service.request(method="GET", url="departments") == [{"id": "d9", "name": "Yaml Dept"}]
    assert len(service.request(method="GET", url="employee")) == 3
