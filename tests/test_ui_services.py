from datetime import datetime, timedelta, timezone

import pytest
import requests

from taskboard_ui.app_lib.api.client import APIClient
from taskboard_ui.services.task_service import TaskService, to_wire
from taskboard_ui.services.user_service import UserService

from .fakes import FakeAPIClient


def test_list_tasks_without_filters_sends_no_input(fake_api) -> None:
    fake_api.results["getTasks"] = []

    assert TaskService(client=fake_api).list_tasks() == []
    assert fake_api.last_call == ("getTasks", None)


def test_list_tasks_sends_only_set_filters(fake_api) -> None:
    TaskService(client=fake_api).list_tasks(
        status="done",
        assigned_member_id="u-1",
        deadline_before=datetime(2030, 1, 1, 9, 30),
    )

    assert fake_api.last_call == ("getTasks", {
        "status": "done",
        "assigned_member_id": "u-1",
        "deadline_before": to_wire(datetime(2030, 1, 1, 9, 30)),
    })


def test_create_task_payload(fake_api) -> None:
    TaskService(client=fake_api).create_task(
        title="Write report",
        deadline=datetime(2030, 1, 1, 17, 0),
        assigned_member_id="u-1",
        description="",
        dependencies=("t-1",),
    )

    procedure, payload = fake_api.last_call
    assert procedure == "createTask"
    assert payload == {
        "title": "Write report",
        "description": None,
        "deadline": to_wire(datetime(2030, 1, 1, 17, 0)),
        "assigned_member_id": "u-1",
        "effort_spent": 0,
        "status": "todo",
        "dependencies": ["t-1"],
    }


def test_update_and_delete_task(fake_api) -> None:
    service = TaskService(client=fake_api)

    service.update_task("t-1", status="done", deadline=datetime(2030, 2, 1))
    assert fake_api.last_call == ("updateTask", {"id": "t-1", "status": "done", "deadline": to_wire(datetime(2030, 2, 1))})

    service.delete_task("t-1")
    assert fake_api.last_call == ("deleteTask", {"id": "t-1"})


def test_naive_deadline_is_sent_as_local_time_with_offset() -> None:
    picked = datetime(2030, 1, 1, 17, 0)

    sent = datetime.fromisoformat(to_wire(picked))

    assert sent.utcoffset() is not None
    assert sent == picked.astimezone()
    assert sent.replace(tzinfo=None) == picked


def test_aware_deadline_keeps_its_instant() -> None:
    picked = datetime(2030, 1, 1, 17, 0, tzinfo=timezone(timedelta(hours=-5)))

    assert datetime.fromisoformat(to_wire(picked)) == picked


def test_create_task_deadline_carries_offset(fake_api) -> None:
    TaskService(client=fake_api).create_task(
        title="Write report",
        deadline=datetime(2030, 1, 1, 17, 0),
        assigned_member_id="u-1",
    )

    _, payload = fake_api.last_call
    assert datetime.fromisoformat(payload["deadline"]).utcoffset() is not None


def test_dashboard_call(fake_api) -> None:
    fake_api.results["getDashboardTasks"] = {"overdue": [], "nearingDeadline": [], "inProgress": [], "total": 0}

    assert TaskService(client=fake_api).get_dashboard()["total"] == 0


def test_user_service_calls(fake_api) -> None:
    service = UserService(client=fake_api)

    service.create_user("  Ada ", " ada@example.com ")
    assert fake_api.last_call == ("createUser", {"name": "Ada", "email": "ada@example.com"})

    service.update_user("u-1", name="Ada L.")
    assert fake_api.last_call == ("updateUser", {"id": "u-1", "name": "Ada L."})

    service.delete_user("u-1")
    assert fake_api.last_call == ("deleteUser", {"id": "u-1"})

    service.list_users()
    assert fake_api.last_call == ("getUsers", None)


def test_services_default_to_shared_client() -> None:
    from taskboard_ui.app_lib.api.client import api_client

    assert TaskService().client is api_client
    assert UserService(client=FakeAPIClient()).client is not api_client


class StubResponse:
    def __init__(self, body, status_code=200):
        self.body = body
        self.status_code = status_code
        self.text = str(body)

    def json(self):
        return self.body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(response=self)


def test_api_client_call_unwraps_result(monkeypatch) -> None:
    client = APIClient()
    seen = {}

    def fake_post(url, json=None, timeout=None):
        seen.update(url=url, json=json, timeout=timeout)
        return StubResponse({"result": [{"id": "u-1"}]})

    monkeypatch.setattr(client.session, "post", fake_post)

    assert client.call("getUsers") == [{"id": "u-1"}]
    assert seen["url"].endswith("/api/rpc/getUsers")
    assert seen["json"] is None
    assert seen["timeout"] == client.timeout


def test_api_client_reraises_errors(monkeypatch) -> None:
    client = APIClient()

    def failing_post(url, json=None, timeout=None):
        return StubResponse({"error": "Cannot delete user with assigned tasks"}, status_code=409)

    monkeypatch.setattr(client.session, "post", failing_post)

    with pytest.raises(requests.exceptions.HTTPError):
        client.call("deleteUser", {"id": "u-1"}, show_errors=False)


def test_api_client_connection_error(monkeypatch) -> None:
    client = APIClient()

    def unreachable(url, params=None, timeout=None):
        raise requests.exceptions.ConnectionError("refused")

    monkeypatch.setattr(client.session, "get", unreachable)

    with pytest.raises(requests.exceptions.ConnectionError):
        client.get("/api/health", show_errors=False)


def test_error_detail_prefers_error_field() -> None:
    client = APIClient()

    assert client._error_detail(StubResponse({"error": "boom"})) == "boom"
    assert client._error_detail(StubResponse({"detail": "missing"})) == "missing"
