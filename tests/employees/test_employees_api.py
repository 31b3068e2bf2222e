from __future__ import annotations


def test_register_then_approve_then_clock(client, admin_headers):
    reg = client.post(
        "/api/users/register",
        json={"userId": "U9", "fullName": "Bob", "phone": "0800", "branch": "Central"},
    )
    assert reg.status_code == 201

    pending = client.post("/api/clock/clock", json={"user_id": "U9", "latitude": 13.7563, "longitude": 100.5018})
    assert pending.get_json()["code"] == "not_approved"

    employee = client.get("/api/users/U9").get_json()
    upd = client.put(
        f"/api/users/{employee['id']}",
        json={
            "fullName": "Bob",
            "phone": "0800",
            "branch": "Central",
            "status": "approved",
            "daily_rate": 120,
            "bonus": 0,
            "compensation": 0,
            "employee_type": "part_time",
        },
        headers=admin_headers,
    )
    assert upd.status_code == 200

    clocked = client.post("/api/clock/clock", json={"user_id": "U9", "latitude": 13.7563, "longitude": 100.5018})
    assert clocked.status_code == 201


def test_duplicate_registration_is_409(client):
    body = {"userId": "U1", "fullName": "Bob", "phone": "0800", "branch": "Central"}
    assert client.post("/api/users/register", json=body).status_code == 201
    resp = client.post("/api/users/register", json=body)
    assert resp.status_code == 409
    assert resp.get_json()["code"] == "conflict"


def test_admin_routes_need_token(client, employees_repo):
    emp = employees_repo.add("U1")
    assert client.get("/api/users").status_code == 401
    assert client.delete(f"/api/users/{emp.employee_id}").status_code == 401
    assert client.get("/api/users", headers={"Authorization": "Bearer forged"}).status_code == 401


def test_list_and_branches(client, admin_headers, employees_repo):
    employees_repo.add("U1", branch="Central")
    employees_repo.add("U2", branch="Riverside")
    employees_repo.add("U3", branch="Central")

    listed = client.get("/api/users", headers=admin_headers).get_json()
    assert [e["userId"] for e in listed] == ["U1", "U2", "U3"]
    assert client.get("/api/users/branches").get_json() == ["Central", "Riverside"]


def test_unknown_employee_is_404(client):
    resp = client.get("/api/users/missing")
    assert resp.status_code == 404
