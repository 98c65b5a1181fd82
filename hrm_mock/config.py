# 模拟后端配置：仅环境变量（HRM_MOCK_ 前缀），可选种子文件支持 JSON / YAML
from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger("hrm_mock.config")


def _int_env(key: str, default: int) -> int:
    try:
        return int(os.environ.get(key, default))
    except (TypeError, ValueError):
        return default


def _float_env(key: str, default: float) -> float:
    try:
        return float(os.environ.get(key, default))
    except (TypeError, ValueError):
        return default


class Settings:
    """统一配置入口。测试中可直接构造后覆盖属性。"""

    def __init__(self) -> None:
        # 人为延迟：min + random() * jitter（毫秒），设为 0 关闭
        self.LATENCY_MIN_MS: float = _float_env("HRM_MOCK_LATENCY_MIN_MS", 300)
        self.LATENCY_JITTER_MS: float = _float_env("HRM_MOCK_LATENCY_JITTER_MS", 200)
        # me / my 路由对应的当前用户
        self.CURRENT_USER_ID: str = os.environ.get("HRM_MOCK_CURRENT_USER_ID", "1").strip() or "1"
        # 认证桩返回的静态 Token，不做任何校验
        self.AUTH_TOKEN: str = os.environ.get("HRM_MOCK_AUTH_TOKEN", "mock-token-123")
        # 种子覆盖文件（.json / .yaml / .yml），按集合名整体替换
        self.SEED_PATH: Optional[str] = os.environ.get("HRM_MOCK_SEED_PATH", "").strip() or None
        # status 查询参数取值不在状态机内时是否拒绝（1 拒绝，0 忽略过滤）
        self.STRICT_STATUS_FILTER: bool = os.environ.get("HRM_MOCK_STRICT_STATUS_FILTER", "1") == "1"
        self.PORT: int = _int_env("PORT", 8010)


settings = Settings()


def load_seed_overrides(path: Optional[str]) -> Dict[str, Any]:
    """从文件加载种子覆盖：顶层键为集合名，值须为列表；其余键忽略。"""
    if not path:
        return {}
    if not os.path.isfile(path):
        logger.warning("seed override file not found: %s", path)
        return {}
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    path_lower = path.lower()
    if path_lower.endswith(".yaml") or path_lower.endswith(".yml"):
        import yaml
        data = yaml.safe_load(content) or {}
    else:
        data = json.loads(content) if content.strip() else {}
    if not isinstance(data, dict):
        logger.warning("seed override file %s is not a mapping, ignored", path)
        return {}
    overrides = {k: v for k, v in data.items() if isinstance(v, list)}
    logger.info("seed overrides loaded from %s: %s", path, ", ".join(sorted(overrides)) or "-")
    return overrides
