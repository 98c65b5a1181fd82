"""
路径解析单元测试：scheme/host、查询串、前导与多余分隔符。
"""
from __future__ import annotations

from hrm_mock.core.paths import resolve_path, split_segments


def test_relative_path():
    assert resolve_path("employees/1") == ("employees", ["1"])


def test_leading_and_trailing_separators_dropped():
    assert resolve_path("/leaves/requests/") == ("leaves", ["requests"])
    assert resolve_path("//leaves//requests//1") == ("leaves", ["requests", "1"])


def test_absolute_url_stripped_to_path():
    assert split_segments("https://api.example.com/payroll/cycles/1?x=1") == ["payroll", "cycles", "1"]
    assert resolve_path("http://localhost:3000/attendance/summary") == ("attendance", ["summary"])


def test_query_string_and_fragment_ignored():
    assert resolve_path("employee/me/payrolls?year=2024") == ("employee", ["me", "payrolls"])
    assert resolve_path("goals#top") == ("goals", [])


def test_empty_target():
    assert resolve_path("") == ("", [])
    assert resolve_path("/") == ("", [])
    assert split_segments(None) == []
