"""
员工、组织、项目、发展与分析：me 路由、搜索、嵌套过滤、导师快照、职业发展、实时概览与洞察、聊天助手。
"""
from __future__ import annotations

import pytest

from hrm_mock.core.errors import NotFoundError


def test_login_stub(call, settings):
    r = call("POST", "auth/login", data={"email": "anyone", "password": "wrong"})
    assert r["token"] == r["accessToken"] == settings.AUTH_TOKEN
    assert r["user"]["id"] == "1"


def test_me_profile_and_patch(call):
    assert call("GET", "employee/me/profile")["name"] == "João Silva"
    p = call("PATCH", "employees/me/profile", data={"phone": "(11) 00000-0000"})
    assert p["phone"] == "(11) 00000-0000"
    assert p["email"] == "joao.silva@company.com"


def test_me_dashboard(call):
    d = call("GET", "employee/me/dashboard")
    assert [a["date"] for a in d["recentAttendance"]] == ["2024-03-06", "2024-03-05", "2024-03-04"]
    assert d["leaveBalances"][0]["leaveType"]["name"] == "Vacation"
    assert len(d["goals"]) == 2 and len(d["achievements"]) == 3
    assert d["profile"]["id"] == "1"


def test_me_reads(call):
    leaves = call("GET", "employee/me/leaves", params={"status": "PENDING"})
    assert len(leaves) == 1 and leaves[0]["leaveType"]["code"] == "VACATION"
    assert len(call("GET", "employee/me/leave-balances")) == 2
    assert call("GET", "employee/me/attendance/summary")["totalDays"] == 3
    assert len(call("GET", "employee/me/attendance", params={"startDate": "2024-03-06"})) == 1
    assert len(call("GET", "employee/me/trainings")) == 2
    assert len(call("GET", "employee/me/performance-reviews")) == 1
    assert len(call("GET", "employees/me/goals")) == 2
    r = call("POST", "employee/me/documents/request", data={"type": "EMPLOYMENT_LETTER"})
    assert r["success"] is True and r["request"]["type"] == "EMPLOYMENT_LETTER"


def test_employee_list_filters(call):
    assert [e["id"] for e in call("GET", "employee", params={"search": "MARIA"})] == ["2"]
    assert len(call("GET", "employees", params={"departmentId": "1"})) == 3
    assert call("GET", "employee", params={"departmentId": "2"}) == []
    e = call("POST", "employee", data={"name": "New Hire", "status": "INACTIVE"})
    assert e["status"] == "ACTIVE"
    assert len(call("GET", "employee", params={"status": "ACTIVE"})) == 4


def test_nested_filters(call):
    assert len(call("GET", "departments/1/employees")) == 3
    assert call("GET", "departments/2/employees") == []
    assert [a["id"] for a in call("GET", "projects/1/allocations")] == ["1"]
    assert [a["id"] for a in call("GET", "tasks/1/allocations")] == ["1"]
    assert len(call("GET", "employees/1/project-allocations")) == 1
    assert call("GET", "employees/2/task-allocations") == []


def test_deleted_department_does_not_cascade(call):
    call("DELETE", "departments/1")
    assert len(call("GET", "departments/1/employees")) == 3
    with pytest.raises(NotFoundError):
        call("GET", "departments/1")


def test_mentoring_snapshot_and_dates(call):
    m = call("POST", "mentoring", data={"mentorId": "2", "menteeId": "3", "startDate": "2025-05-01T10:00:00Z"})
    assert m["startDate"] == "2025-05-01" and m["endDate"] is None
    assert m["status"] == "ACTIVE"
    assert m["mentor"]["name"] == "Maria Santos"
    call("PATCH", "employee/2", data={"name": "Maria S."})
    assert call("GET", f"mentoring/{m['id']}")["mentor"]["name"] == "Maria Santos"
    m = call("PATCH", f"mentoring/{m['id']}", data={"mentorId": "1", "endDate": "2025-12-31"})
    assert m["mentor"]["name"] == "João Silva" and m["endDate"] == "2025-12-31"
    assert m["startDate"] == "2025-05-01"


def test_career(call):
    o = call("GET", "career/overview/1")
    assert o["yearsInCompany"] == 5
    assert o["currentPosition"] == "Senior Developer"
    assert len(call("GET", "career/progression/1")) == 3
    with pytest.raises(NotFoundError):
        call("GET", "career/overview/99")


def test_skill_proficiency(call):
    p = call("POST", "skill-proficiency", data={"employeeId": "2", "skillId": "1", "proficiency": "EXPERT"})
    assert p["lastEvaluated"]
    assert [x["id"] for x in call("GET", "skill-proficiency/employee/2")] == [p["id"]]


def test_goal_default_progress(call):
    assert call("POST", "goals", data={"title": "Learn Rust"})["progress"] == 0
    assert len(call("GET", "performance")) == len(call("GET", "performance-reviews")) == 1


def test_overview_is_live(call):
    o = call("GET", "analytics/overview")
    assert o["totalEmployees"] == 3
    assert o["activeProjects"] == 1
    assert o["pendingLeaves"] == 1
    assert o["averagePerformance"] == 4.5
    assert o["recentHires"] == 0
    call("POST", "employee", data={"name": "Fresh", "hireDate": "2025-05-20"})
    o = call("GET", "analytics/overview")
    assert o["totalEmployees"] == 4 and o["recentHires"] == 1


def test_analytics_reads(call):
    assert len(call("GET", "analytics/performance-trend")) == 3
    a = call("GET", "analytics/employee/1")
    assert a["goals"] == {"total": 2, "completed": 0, "inProgress": 2}
    assert a["performance"] == {"averageRating": 4.5, "totalReviews": 1}
    assert call("GET", "analytics/predictive")["lastUpdated"]
    assert call("GET", "analytics/deib")["inclusionScore"] == 7.8
    assert call("GET", "analytics/workforce-monitoring")["totalHeadcount"] == 30
    with pytest.raises(NotFoundError):
        call("GET", "analytics/employee/99")


def test_insights(call):
    assert [i["id"] for i in call("GET", "insights", params={"type": "WARNING"})] == ["1"]
    assert call("GET", "insights/2")["type"] == "SUCCESS"
    with pytest.raises(NotFoundError) as ei:
        call("GET", "insights/99")
    assert ei.value.message == "Insight not found"
    assert call("GET", "performance-insights/employee/1")["insights"][0]["type"] == "SUCCESS"
    assert call("GET", "performance-insights/employee/2")["insights"] == []
    team = call("GET", "performance-insights/team/2")["metrics"]
    assert team == {"teamSize": 2, "averagePerformance": 4.5}
    assert call("GET", "performance-insights/department/1")["metrics"]["totalEmployees"] == 3


def test_chatbot(call):
    m = call("POST", "chatbot/interact", data={"message": "How many vacation days do I have?"})
    assert m["response"] and m["userId"] == "1"
    history = call("GET", "chatbot/chat")["history"]
    assert [h["id"] for h in history] == [m["id"]]
    a = call("POST", "chatbot/analyze-performance", data={"employeeId": "1"})
    assert a["score"] == 4.5
    assert a["recommendations"] == ["Improve communication"]
