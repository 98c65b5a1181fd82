"""
HRM 模拟后端测试公共 fixture：可控时钟、存储、零延迟分发器与 Flask 测试客户端。
"""
from __future__ import annotations

import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from hrm_mock.config import Settings
from hrm_mock.core.store import HRMStore
from hrm_mock.service import MockService

# 晚于全部种子时间戳，保证 PATCH 后 updatedAt 一定更新
START = datetime(2025, 6, 2, 9, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, start: datetime = START) -> None:
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kw) -> None:
        self.current = self.current + timedelta(**kw)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings():
    s = Settings()
    s.LATENCY_MIN_MS = 0
    s.LATENCY_JITTER_MS = 0
    s.CURRENT_USER_ID = "1"
    s.SEED_PATH = None
    s.STRICT_STATUS_FILTER = True
    return s


@pytest.fixture
def store(clock):
    return HRMStore(clock=clock)


@pytest.fixture
def service(store, settings):
    return MockService(store=store, settings=settings)


@pytest.fixture
def call(service):
    """service.request 的简写：call("GET", "employee/1", params={...})。"""
    def _call(method, url, data=None, params=None):
        return service.request(method=method, url=url, data=data, params=params)
    return _call


@pytest.fixture
def app(service):
    from hrm_mock.app import create_app
    a = create_app(service)
    a.config["TESTING"] = True
    return a


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c
