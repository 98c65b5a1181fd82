"""路径解析：请求目标 -> (resource, segments)。纯结构处理，不感知任何资源语义。"""
from __future__ import annotations

from typing import List, Tuple
from urllib.parse import urlsplit


def split_segments(url: str) -> List[str]:
    """去掉 scheme/host 与查询串、前导分隔符，按 / 切分并丢弃空段。"""
    path = url or ""
    if "://" in path:
        path = urlsplit(path).path
    else:
        path = path.split("?", 1)[0].split("#", 1)[0]
    path = path.lstrip("/")
    return [p for p in path.split("/") if p]


def resolve_path(url: str) -> Tuple[str, List[str]]:
    """返回 (resource, 其余段)；空目标返回 ("", [])。"""
    segments = split_segments(url)
    if not segments:
        return "", []
    return segments[0], segments[1:]
