"""
办公服务、合规与通知：报销/差旅/预订状态流转、问卷；制度确认幂等、离职读时关联；通知已读。
"""
from __future__ import annotations

import pytest

from hrm_mock.core.errors import InvalidTransitionError, NotFoundError, ValidationError


def test_expense_flow(call):
    e = call("POST", "expenses", data={"amount": 120, "category": "MEAL", "status": "APPROVED"})
    assert e["status"] == "DRAFT" and e["employeeId"] == "1"
    assert call("POST", f"expenses/{e['id']}/submit")["status"] == "SUBMITTED"
    approved = call("POST", f"expenses/{e['id']}/approve")
    assert approved["status"] == "APPROVED" and approved["approvedBy"] == "1"
    with pytest.raises(InvalidTransitionError):
        call("POST", f"expenses/{e['id']}/reject")
    with pytest.raises(InvalidTransitionError):
        call("PATCH", f"expenses/{e['id']}", data={"status": "DRAFT"})
    assert [x["id"] for x in call("GET", "expenses/my")] == [e["id"]]


def test_expense_reports(call):
    r = call("POST", "expenses/reports", data={"title": "March trip", "expenseIds": []})
    assert r["status"] == "SUBMITTED" and r["submittedAt"]
    assert len(call("GET", "expenses/reports")) == 1


def test_booking_snapshots_room(call):
    b = call("POST", "facilities/bookings", data={"roomId": "1", "startTime": "2025-06-03T10:00:00Z"})
    assert b["status"] == "PENDING" and b["room"]["name"] == "Meeting Room A"
    b = call("PATCH", f"facilities/bookings/{b['id']}", data={"roomId": "2"})
    assert b["room"]["name"] == "Meeting Room B"
    assert call("POST", f"facilities/bookings/{b['id']}/approve")["status"] == "APPROVED"
    assert len(call("GET", "facilities/my/bookings")) == 1
    with pytest.raises(NotFoundError) as ei:
        call("POST", "facilities/bookings", data={"roomId": "99"})
    assert ei.value.message == "Room not found"


def test_travel_flow(call):
    t = call("POST", "travel", data={"destination": "Porto"})
    assert t["status"] == "DRAFT"
    assert call("POST", f"travel/{t['id']}/submit")["status"] == "PENDING"
    assert call("POST", f"travel/{t['id']}/approve")["status"] == "APPROVED"
    with pytest.raises(InvalidTransitionError):
        call("POST", f"travel/{t['id']}/submit")
    assert len(call("GET", "travel/my")) == 1


def test_surveys(call):
    assert [s["id"] for s in call("GET", "surveys/available")] == ["1"]
    draft = call("POST", "surveys", data={"title": "Draft", "status": "ACTIVE"})
    assert draft["status"] == "DRAFT"
    assert len(call("GET", "surveys/available")) == 1
    r = call("POST", "surveys/1/responses", data={"answers": [{"questionId": "q1", "value": 5}]})
    assert r["surveyId"] == "1" and r["employeeId"] == "1"
    results = call("GET", "surveys/1/results")
    assert results["totalResponses"] == 1
    assert len(call("GET", "surveys/my/responses")) == 1
    with pytest.raises(NotFoundError):
        call("POST", "surveys/99/responses", data={})


def test_policy_acknowledge_once(call):
    a = call("POST", "policies/1/acknowledge")
    b = call("POST", "policies/1/acknowledge")
    assert a["id"] == b["id"] and a["policyVersion"] == "1.0"
    assert len(call("GET", "policies/1/acknowledgments")) == 1
    assert len(call("GET", "policies/my/acknowledgments")) == 1
    assert call("GET", "policies/2/acknowledgments") == []
    with pytest.raises(NotFoundError):
        call("POST", "policies/99/acknowledge")


def test_separation_joins_employee_at_read(call):
    s = call("GET", "separations/1")
    assert s["employee"]["name"] == "Pedro Oliveira"
    call("PATCH", "employee/3", data={"name": "Pedro O."})
    assert call("GET", "separations/1")["employee"]["name"] == "Pedro O."
    assert call("GET", "separations", params={"status": "INITIATED"})[0]["employee"]["id"] == "3"


def test_separation_dangling_employee(call):
    s = call("POST", "separations", data={"employeeId": "99", "reason": "Moving"})
    assert s["status"] == "INITIATED" and s["checklist"] == [] and s["exitInterviewCompleted"] is False
    assert call("GET", f"separations/{s['id']}")["employee"] is None


def test_separation_transitions(call):
    s = call("POST", "separations", data={"employeeId": "2"})
    with pytest.raises(InvalidTransitionError):
        call("POST", f"separations/{s['id']}/complete")
    call("POST", f"separations/{s['id']}/approve")
    assert call("POST", f"separations/{s['id']}/complete")["status"] == "COMPLETED"


def test_notifications(call):
    assert len(call("GET", "notifications/user/1/unread")) == 1
    n = call("PATCH", "notifications/1/read")
    assert n["status"] == "READ" and n["read"] is True
    assert call("GET", "notifications/user/1/unread") == []
    created = call("POST", "notifications", data={"userId": "1", "title": "New", "status": "READ"})
    assert created["status"] == "UNREAD"
    assert len(call("GET", "notifications", params={"userId": "1"})) == 2
    assert call("DELETE", f"notifications/{created['id']}") is None
    assert len(call("GET", "notifications")) == 1


def test_notification_patch_keeps_read_fields_in_sync(call):
    n = call("PATCH", "notifications/1", data={"status": "READ", "title": "Seen"})
    assert n["status"] == "READ" and n["read"] is True and n["readAt"]
    assert n["title"] == "Seen"
    other = call("POST", "notifications", data={"userId": "1", "title": "Other"})
    n = call("PATCH", f"notifications/{other['id']}", data={"read": True})
    assert n["status"] == "READ" and n["readAt"]
    with pytest.raises(InvalidTransitionError) as ei:
        call("PATCH", "notifications/1", data={"read": False})
    assert ei.value.message == "Cannot change notification status from READ to UNREAD"
    with pytest.raises(ValidationError):
        call("PATCH", f"notifications/{other['id']}", data={"status": "UNREAD", "read": True})
