"""
分发器唯一入口：人为延迟 -> 路径解析 -> 路由表匹配 -> 处理函数 -> 结果副本。
错误只在这里统一捕获并归一为 MockApiError（.response 即 {"status", "data": {"message", "code"}}）。
"""
from __future__ import annotations

import asyncio
import copy
import json
import logging
import random
import time
from typing import Any, Callable, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as SchemaError

from .config import Settings, load_seed_overrides, settings as default_settings
from .core.errors import MethodNotImplementedError, MockApiError, RouteNotFoundError, ValidationError, normalize_error
from .core.paths import resolve_path
from .core.routing import SUPPORTED_METHODS, RequestContext, RouteTable
from .core.store import HRMStore, get_store
from .handlers import build_route_table

logger = logging.getLogger("hrm_mock.dispatcher")


class MockRequest(BaseModel):
    """请求描述：method、url（可带 scheme/host 与查询串）、data（请求体）、params（查询参数）。"""

    model_config = ConfigDict(extra="ignore")

    method: str = "GET"
    url: str = ""
    data: Optional[Any] = None
    params: Optional[Dict[str, Any]] = None

    @field_validator("method", mode="before")
    @classmethod
    def _upper(cls, v: Any) -> str:
        return str(v or "GET").strip().upper()

    @field_validator("data", mode="before")
    @classmethod
    def _decode_body(cls, v: Any) -> Any:
        # 字符串请求体按 JSON 解析，解析失败保留原文
        if isinstance(v, (bytes, bytearray)):
            v = v.decode("utf-8")
        if isinstance(v, str):
            if not v.strip():
                return None
            try:
                return json.loads(v)
            except ValueError:
                return v
        return v


RequestLike = Union[MockRequest, Dict[str, Any], None]


class MockService:
    def __init__(self, store: Optional[HRMStore] = None, settings: Optional[Settings] = None,
                 sleep: Callable[[float], None] = time.sleep, rng: Callable[[], float] = random.random) -> None:
        self.store = store if store is not None else HRMStore()
        self.settings = settings or default_settings
        self.routes: RouteTable = build_route_table()
        self._sleep = sleep
        self._rng = rng

    @staticmethod
    def _coerce(config: RequestLike, kw: Dict[str, Any]) -> MockRequest:
        """请求描述校验失败（参数非 dict、请求体非 UTF-8、url 缺失等）统一报 400。"""
        try:
            if isinstance(config, MockRequest):
                if not kw:
                    return config
                config = config.model_dump()
            payload = dict(config or {})
            payload.update(kw)
            return MockRequest(**payload)
        except (SchemaError, UnicodeDecodeError, TypeError, ValueError) as e:
            logger.warning("request rejected: invalid descriptor: %s", e)
            raise ValidationError(f"Invalid request: {e}") from e

    def latency_seconds(self) -> float:
        ms = self.settings.LATENCY_MIN_MS + self._rng() * self.settings.LATENCY_JITTER_MS
        return max(ms, 0) / 1000.0

    def request(self, config: RequestLike = None, **kw: Any) -> Any:
        """同步入口：先延迟（不持锁），再分发。成功返回值本身，失败抛 MockApiError。"""
        req = self._coerce(config, kw)
        delay = self.latency_seconds()
        if delay > 0:
            self._sleep(delay)
        return self.dispatch(req)

    async def request_async(self, config: RequestLike = None, **kw: Any) -> Any:
        req = self._coerce(config, kw)
        delay = self.latency_seconds()
        if delay > 0:
            await asyncio.sleep(delay)
        return self.dispatch(req)

    def dispatch(self, req: MockRequest) -> Any:
        """无延迟分发；整个处理函数在存储锁内执行，保证单次调用的原子性。"""
        start = time.perf_counter()
        method = req.method
        path = req.url
        try:
            resource, segments = resolve_path(req.url)
            parts = [resource] + segments if resource else []
            path = "/".join(parts)
            if method not in SUPPORTED_METHODS:
                raise MethodNotImplementedError(method)
            with self.store.lock:
                found = self.routes.match(method, parts)
                if found is None:
                    raise RouteNotFoundError(path)
                rule, kwargs = found
                ctx = RequestContext(self.store, self.settings, method, path, query=req.params, body=req.data)
                result = copy.deepcopy(rule.endpoint(ctx, **kwargs))
        except MockApiError as e:
            logger.warning("request method=%s path=%s status=%s code=%s duration_ms=%.1f message=%s",
                           method, path, e.status, e.code, (time.perf_counter() - start) * 1000, e.message)
            raise
        except Exception as e:
            err = normalize_error(e)
            logger.exception("request method=%s path=%s status=%s duration_ms=%.1f unhandled error",
                             method, path, err.status, (time.perf_counter() - start) * 1000)
            raise err from e
        logger.info("request method=%s path=%s status=200 duration_ms=%.1f",
                    method, path, (time.perf_counter() - start) * 1000)
        return result

    def reset(self) -> None:
        """恢复种子数据，并应用 HRM_MOCK_SEED_PATH 指定的覆盖。"""
        self.store.reset(load_seed_overrides(self.settings.SEED_PATH))


_service: Optional[MockService] = None


def get_service() -> MockService:
    global _service
    if _service is None:
        _service = MockService(get_store())
        if _service.settings.SEED_PATH:
            _service.reset()
    return _service


def reset_service() -> None:
    get_service().reset()
