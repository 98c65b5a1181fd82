"""HRM 内存存储：按集合名组织的有序记录列表 + 单例对象。进程级单例，reset() 恢复种子。"""
from __future__ import annotations

import copy
import logging
import threading
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional

from .errors import NotFoundError

logger = logging.getLogger("hrm_mock.store")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _id() -> str:
    return str(uuid.uuid4()).replace("-", "")[:16]


def _iso(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


class HRMStore:
    def __init__(self, seed: Optional[Dict[str, Any]] = None, clock: Optional[Callable[[], datetime]] = None) -> None:
        self.lock = threading.RLock()
        self.clock = clock or _utcnow
        self.collections: Dict[str, List[dict]] = {}
        self.singletons: Dict[str, dict] = {}
        self._last_stamp: Optional[datetime] = None
        self._seed = seed
        self.reset()

    def reset(self, overrides: Optional[Dict[str, List[dict]]] = None) -> None:
        """恢复种子数据；overrides 按集合名整体替换。"""
        from .seed import build_seed
        with self.lock:
            data = copy.deepcopy(self._seed) if self._seed is not None else build_seed()
            self.collections = {k: v for k, v in data.items() if isinstance(v, list)}
            self.singletons = {k: v for k, v in data.items() if isinstance(v, dict)}
            for name, records in (overrides or {}).items():
                self.collections[name] = copy.deepcopy(records)
            self._last_stamp = None
            logger.debug("store reset: %d collections", len(self.collections))

    # 时间
    def now(self) -> datetime:
        return self.clock()

    def timestamp(self) -> str:
        """严格递增的 ISO-8601 UTC 时间戳：时钟未前进时顺延 1ms。"""
        now = self.now()
        if self._last_stamp is not None and now <= self._last_stamp:
            now = self._last_stamp + timedelta(milliseconds=1)
        self._last_stamp = now
        return _iso(now)

    def today(self) -> str:
        return self.now().date().isoformat()

    def new_id(self, name: Optional[str] = None, taken: Iterable[Any] = ()) -> str:
        """集合内唯一的随机 id；嵌套列表可通过 taken 传入已占用的 id。"""
        existing = {r.get("id") for r in self.collection(name)} if name else set()
        existing.update(taken)
        rid = _id()
        while rid in existing:
            rid = _id()
        return rid

    # 读取
    def collection(self, name: str) -> List[dict]:
        return self.collections.setdefault(name, [])

    def find(self, name: str, record_id: Any) -> Optional[dict]:
        key = str(record_id)
        for r in self.collection(name):
            if str(r.get("id")) == key:
                return r
        return None

    def require(self, name: str, record_id: Any, label: str) -> dict:
        r = self.find(name, record_id)
        if r is None:
            raise NotFoundError(label)
        return r

    def snapshot(self, name: str, record_id: Any) -> Optional[dict]:
        """写时快照：关联记录的独立副本，之后的修改不会回流。"""
        r = self.find(name, record_id)
        return copy.deepcopy(r) if r is not None else None

    def filter(self, name: str, **eq: Any) -> List[dict]:
        """按字段等值过滤；值为 None 的条件忽略。"""
        conds = {k: v for k, v in eq.items() if v is not None and v != ""}
        return [r for r in self.collection(name) if all(str(r.get(k)) == str(v) for k, v in conds.items())]

    def singleton(self, name: str) -> dict:
        return self.singletons.setdefault(name, {})

    # 写入
    def create(self, name: str, data: Optional[dict] = None, defaults: Optional[dict] = None,
               overrides: Optional[dict] = None, stamp: bool = True, front: bool = False) -> dict:
        """新建记录：defaults < 请求体 < overrides；id 始终由存储生成。"""
        record: Dict[str, Any] = copy.deepcopy(defaults or {})
        record.update({k: copy.deepcopy(v) for k, v in (data or {}).items() if k != "id"})
        record.update(overrides or {})
        record["id"] = self.new_id(name)
        if stamp:
            ts = self.timestamp()
            record["createdAt"] = ts
            record["updatedAt"] = ts
        items = self.collection(name)
        if front:
            items.insert(0, record)
        else:
            items.append(record)
        return record

    def merge(self, name: str, record_id: Any, patch: Optional[dict], label: str) -> dict:
        """浅合并；id 与 createdAt 不可覆盖，updatedAt 前进。"""
        record = self.require(name, record_id, label)
        for k, v in (patch or {}).items():
            if k in ("id", "createdAt"):
                continue
            record[k] = copy.deepcopy(v)
        record["updatedAt"] = self.timestamp()
        return record

    def touch(self, record: dict) -> dict:
        record["updatedAt"] = self.timestamp()
        return record

    def remove(self, name: str, record_id: Any, label: str) -> dict:
        """删除首个匹配记录并返回之。"""
        items = self.collection(name)
        key = str(record_id)
        for i, r in enumerate(items):
            if str(r.get("id")) == key:
                return items.pop(i)
        raise NotFoundError(label)


_store: Optional[HRMStore] = None


def get_store() -> HRMStore:
    global _store
    if _store is None:
        _store = HRMStore()
    return _store
