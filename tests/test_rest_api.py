import uuid
from datetime import timedelta


def create_user(client, name="Ada", email="ada@example.com"):
    response = client.post("/api/users", json={"name": name, "email": email})
    assert response.status_code == 201, response.text
    return response.json()


def create_task(client, user_id, deadline, **fields):
    payload = {"title": "Write report", "deadline": deadline.isoformat(), "assigned_member_id": user_id}
    payload.update(fields)
    response = client.post("/api/tasks", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_root_and_health(client) -> None:
    assert "Welcome" in client.get("/").json()["message"]

    health = client.get("/api/health")
    assert health.status_code == 200
    assert health.json()["status"] == "ok"
    assert health.json()["database"]["status"] == "healthy"


def test_user_crud(client) -> None:
    user = create_user(client)

    listing = client.get("/api/users").json()
    assert listing["total_count"] == 1

    updated = client.put(f"/api/users/{user['id']}", json={"name": "Ada L."})
    assert updated.status_code == 200
    assert updated.json()["name"] == "Ada L."
    assert updated.json()["email"] == "ada@example.com"

    deleted = client.delete(f"/api/users/{user['id']}")
    assert deleted.status_code == 200
    assert client.get(f"/api/users/{user['id']}").status_code == 404


def test_user_validation_errors(client) -> None:
    assert client.post("/api/users", json={"name": "", "email": "ada@example.com"}).status_code == 422
    assert client.post("/api/users", json={"name": "Ada", "email": "not-an-email"}).status_code == 422
    assert client.get("/api/users/not-a-uuid").status_code == 422


def test_duplicate_email_returns_409(client) -> None:
    create_user(client)

    response = client.post("/api/users", json={"name": "Other", "email": "ada@example.com"})

    assert response.status_code == 409


def test_update_rejects_explicit_null(client) -> None:
    user = create_user(client)

    assert client.put(f"/api/users/{user['id']}", json={"name": None}).status_code == 422


def test_delete_user_with_tasks_returns_409(client, now) -> None:
    user = create_user(client)
    create_task(client, user["id"], now + timedelta(days=1))

    response = client.delete(f"/api/users/{user['id']}")

    assert response.status_code == 409
    assert "Cannot delete" in response.json()["detail"]
    assert client.get(f"/api/users/{user['id']}").status_code == 200


def test_task_create_for_unknown_user_returns_404(client, now) -> None:
    response = client.post("/api/tasks", json={
        "title": "Orphan",
        "deadline": now.isoformat(),
        "assigned_member_id": str(uuid.uuid4()),
    })

    assert response.status_code == 404
    assert "does not exist" in response.json()["detail"]
    assert client.get("/api/tasks").json()["total_count"] == 0


def test_task_negative_effort_is_rejected(client, now) -> None:
    user = create_user(client)

    response = client.post("/api/tasks", json={
        "title": "x",
        "deadline": now.isoformat(),
        "assigned_member_id": user["id"],
        "effort_spent": -1,
    })

    assert response.status_code == 422


def test_task_list_filters(client, now) -> None:
    ada = create_user(client)
    bob = create_user(client, "Bob", "bob@example.com")
    create_task(client, ada["id"], now - timedelta(days=1), title="late")
    create_task(client, bob["id"], now + timedelta(days=4), title="done", status="done")

    def listed(**params):
        return sorted(t["title"] for t in client.get("/api/tasks", params=params).json()["tasks"])

    assert listed() == ["done", "late"]
    assert listed(status="done") == ["done"]
    assert listed(assigned_member_id=ada["id"]) == ["late"]
    assert listed(overdue_only="true") == ["late"]
    assert listed(deadline_after=now.isoformat()) == ["done"]


def test_task_update_and_idempotent_delete(client, now) -> None:
    user = create_user(client)
    task = create_task(client, user["id"], now + timedelta(days=1), description="draft")

    updated = client.put(f"/api/tasks/{task['id']}", json={"description": None, "status": "in_progress"})
    assert updated.status_code == 200
    assert updated.json()["description"] is None
    assert updated.json()["status"] == "in_progress"

    assert client.delete(f"/api/tasks/{task['id']}").status_code == 200
    assert client.delete(f"/api/tasks/{task['id']}").status_code == 200
    assert client.get(f"/api/tasks/{task['id']}").status_code == 404


def test_dashboard_uses_camel_case_keys(client, now) -> None:
    user = create_user(client)
    create_task(client, user["id"], now + timedelta(days=1), status="in_progress")

    dashboard = client.get("/api/dashboard").json()

    assert set(dashboard) == {"overdue", "nearingDeadline", "inProgress", "total"}
    assert len(dashboard["nearingDeadline"]) == 1
    assert len(dashboard["inProgress"]) == 1
    assert dashboard["total"] == 1


def test_task_non_finite_effort_returns_422(client, now) -> None:
    user = create_user(client)
    body = (
        f'{{"title": "Huge", "deadline": "{now.isoformat()}", '
        f'"assigned_member_id": "{user["id"]}", "effort_spent": 1e999}}'
    )

    response = client.post("/api/tasks", content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 422
    assert response.json()["detail"][0]["loc"][-1] == "effort_spent"
    assert client.get("/api/tasks").json()["total_count"] == 0
    assert client.get("/api/dashboard").json()["total"] == 0
