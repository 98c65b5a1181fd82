"""
路由表：(method, rule) -> 处理函数，按注册顺序匹配，先注册者优先（最具体的路径形状须先注册）。
规则写法与 Flask 一致：literal 段原样匹配，<name> 段捕获为关键字参数。
"""
from __future__ import annotations

import re
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple

SUPPORTED_METHODS = ("GET", "POST", "PATCH", "DELETE")

_PARAM_RE = re.compile(r"^<([A-Za-z_][A-Za-z0-9_]*)>$")


class RequestContext:
    """单次请求上下文：处理函数通过它访问存储、查询参数与请求体。"""

    def __init__(self, store, settings, method: str, path: str, query: Optional[Dict[str, Any]] = None, body: Any = None) -> None:
        self.store = store
        self.settings = settings
        self.method = method
        self.path = path
        self.query: Dict[str, Any] = dict(query or {})
        self.body = body

    @property
    def data(self) -> Dict[str, Any]:
        """请求体按 dict 读取；非 dict 请求体视为空。"""
        return self.body if isinstance(self.body, dict) else {}

    @property
    def user_id(self) -> str:
        return self.settings.CURRENT_USER_ID

    def arg(self, key: str, default: Any = None) -> Any:
        v = self.query.get(key)
        if v is None or v == "":
            return default
        return v


class Rule:
    def __init__(self, method: str, rule: str, endpoint: Callable[..., Any]) -> None:
        self.method = method.upper()
        self.rule = rule.strip("/")
        self.parts: Tuple[str, ...] = tuple(p for p in self.rule.split("/") if p)
        self.endpoint = endpoint
        self._params = [(i, _PARAM_RE.match(p)) for i, p in enumerate(self.parts)]

    def match(self, segments: Sequence[str]) -> Optional[Dict[str, str]]:
        if len(segments) != len(self.parts):
            return None
        kwargs: Dict[str, str] = {}
        for (i, param), seg in zip(self._params, segments):
            if param:
                kwargs[param.group(1)] = seg
            elif self.parts[i] != seg:
                return None
        return kwargs

    def __repr__(self) -> str:
        return f"<Rule {self.method} {self.rule} -> {getattr(self.endpoint, '__name__', self.endpoint)}>"


class RouteTable:
    """可枚举的路由表；各资源模块各自建表，再由 handlers.build_route_table 按序合并。"""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._rules: List[Rule] = []

    def add(self, method: str, rule: str, endpoint: Callable[..., Any]) -> Rule:
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"unsupported method {method}")
        r = Rule(method, rule, endpoint)
        self._rules.append(r)
        return r

    def route(self, rule: str, methods: Sequence[str] = ("GET",)):
        def decorator(fn):
            for m in methods:
                self.add(m, rule, fn)
            return fn
        return decorator

    def get(self, rule: str):
        return self.route(rule, ("GET",))

    def post(self, rule: str):
        return self.route(rule, ("POST",))

    def patch(self, rule: str):
        return self.route(rule, ("PATCH",))

    def delete(self, rule: str):
        return self.route(rule, ("DELETE",))

    def include(self, other: "RouteTable") -> None:
        self._rules.extend(other._rules)

    def match(self, method: str, segments: Sequence[str]) -> Optional[Tuple[Rule, Dict[str, str]]]:
        method = method.upper()
        for r in self._rules:
            if r.method != method:
                continue
            kwargs = r.match(segments)
            if kwargs is not None:
                return r, kwargs
        return None

    def iter_rules(self, method: Optional[str] = None) -> Iterator[Rule]:
        for r in self._rules:
            if method is None or r.method == method.upper():
                yield r

    def __len__(self) -> int:
        return len(self._rules)
