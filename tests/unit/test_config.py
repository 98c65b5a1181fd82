"""
配置单元测试：环境变量解析与种子覆盖文件加载。
"""
from __future__ import annotations

import json

from hrm_mock.config import Settings, load_seed_overrides


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("HRM_MOCK_LATENCY_MIN_MS", "0")
    monkeypatch.setenv("HRM_MOCK_CURRENT_USER_ID", "2")
    monkeypatch.setenv("HRM_MOCK_STRICT_STATUS_FILTER", "0")
    monkeypatch.setenv("PORT", "9100")
    s = Settings()
    assert s.LATENCY_MIN_MS == 0
    assert s.CURRENT_USER_ID == "2"
    assert s.STRICT_STATUS_FILTER is False
    assert s.PORT == 9100


def test_bad_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("HRM_MOCK_LATENCY_JITTER_MS", "lots")
    monkeypatch.setenv("PORT", "eighty")
    s = Settings()
    assert s.LATENCY_JITTER_MS == 200
    assert s.PORT == 8010


def test_blank_user_defaults(monkeypatch):
    monkeypatch.setenv("HRM_MOCK_CURRENT_USER_ID", "  ")
    assert Settings().CURRENT_USER_ID == "1"


def test_load_json_overrides(tmp_path):
    p = tmp_path / "seed.json"
    p.write_text(json.dumps({"skills": [{"id": "s1"}], "meta": {"v": 1}}), encoding="utf-8")
    assert load_seed_overrides(str(p)) == {"skills": [{"id": "s1"}]}


def test_load_yaml_overrides(tmp_path):
    p = tmp_path / "seed.yml"
    p.write_text("skills:\n  - id: s1\n    name: Go\n", encoding="utf-8")
    assert load_seed_overrides(str(p)) == {"skills": [{"id": "s1", "name": "Go"}]}


def test_missing_or_invalid_file(tmp_path):
    assert load_seed_overrides(None) == {}
    assert load_seed_overrides(str(tmp_path / "nope.json")) == {}
    p = tmp_path / "list.json"
    p.write_text("[1, 2]", encoding="utf-8")
    assert load_seed_overrides(str(p)) == {}
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert load_seed_overrides(str(empty)) == {}
