"""
HTTP 外壳集成测试：经 Flask 测试客户端完成健康检查、读写、状态动作与删除。
"""
from __future__ import annotations


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json() == {"status": "up", "cell": "hrm-mock"}
    assert "X-Response-Time" in r.headers


def test_list_and_query_args(client):
    r = client.get("/employee/me/payrolls?year=2024")
    assert r.status_code == 200
    assert [p["period"] for p in r.get_json()] == ["2024-03", "2024-02", "2024-01"]
    assert "X-Response-Time" in r.headers


def test_create_patch_delete(client):
    r = client.post("/departments", json={"name": "Legal"})
    assert r.status_code == 200
    dept = r.get_json()
    r = client.patch(f"/departments/{dept['id']}", json={"description": "Contracts"})
    assert r.status_code == 200
    assert r.get_json()["name"] == "Legal"
    r = client.delete(f"/departments/{dept['id']}")
    assert r.status_code == 204
    assert client.get(f"/departments/{dept['id']}").status_code == 404


def test_leave_request_flow(client):
    r = client.post("/leaves/requests", json={
        "leaveTypeId": "1", "startDate": "2024-03-01", "endDate": "2024-03-05", "reason": "Vacation",
    })
    created = r.get_json()
    assert created["days"] == 5
    r = client.post(f"/leaves/requests/{created['id']}/approve")
    assert r.status_code == 200 and r.get_json()["status"] == "APPROVED"
    r = client.post(f"/leaves/requests/{created['id']}/cancel")
    assert r.status_code == 204


def test_attendance_day(client, clock):
    assert client.post("/attendance/check-in").status_code == 200
    clock.advance(hours=4)
    r = client.post("/attendance/check-out")
    assert r.status_code == 200
    assert r.get_json()["workHours"] == 4


def test_shared_store_between_http_and_service(client, service):
    client.post("/skills", json={"name": "Elixir"})
    assert "Elixir" in [s["name"] for s in service.request(method="GET", url="skills")]
