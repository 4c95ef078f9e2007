import uuid
from datetime import timedelta

import pytest

from taskboard.core.exceptions import NotFoundException
from taskboard.models.enums import TaskStatus
from taskboard.schemas.task import CreateTaskRequest, TaskFilter, UpdateTaskRequest
from taskboard.schemas.user import CreateUserRequest
from taskboard.services.dashboard_service import DashboardService
from taskboard.services.task_service import TaskService
from taskboard.services.user_service import UserService


@pytest.fixture()
def member(uow):
    return UserService(uow).create_user(CreateUserRequest(name="Ada", email="ada@example.com"))


@pytest.fixture()
def service(uow) -> TaskService:
    return TaskService(uow)


def new_task(service, member, now, **overrides):
    fields = {
        "title": "Write report",
        "deadline": now + timedelta(days=5),
        "assigned_member_id": member.id,
    }
    fields.update(overrides)
    return service.create_task(CreateTaskRequest(**fields))


def test_create_task_applies_defaults(service, member, now) -> None:
    task = new_task(service, member, now)

    assert task.effort_spent == 0
    assert task.status == TaskStatus.TODO
    assert task.dependencies == []
    assert task.description is None


def test_create_task_for_unknown_assignee_creates_nothing(service, now) -> None:
    with pytest.raises(NotFoundException, match="does not exist"):
        service.create_task(CreateTaskRequest(
            title="Orphan",
            deadline=now,
            assigned_member_id=str(uuid.uuid4()),
        ))

    assert service.list_tasks() == []


def test_dependencies_are_stored_as_given(service, member, now) -> None:
    ghost = str(uuid.uuid4())

    task = new_task(service, member, now, dependencies=[ghost, ghost])

    assert service.get_task(task.id).dependencies == [ghost, ghost]


def test_partial_update(service, member, now) -> None:
    task = new_task(service, member, now, description="draft")

    updated = service.update_task(task.id, UpdateTaskRequest(status=TaskStatus.IN_PROGRESS, effort_spent=1.5))

    assert updated.status == TaskStatus.IN_PROGRESS
    assert updated.effort_spent == 1.5
    assert updated.title == "Write report"
    assert updated.description == "draft"


def test_update_can_clear_description(service, member, now) -> None:
    task = new_task(service, member, now, description="draft")

    assert service.update_task(task.id, UpdateTaskRequest(description=None)).description is None


def test_update_missing_task_raises(service) -> None:
    with pytest.raises(NotFoundException, match="Task with id"):
        service.update_task(str(uuid.uuid4()), UpdateTaskRequest(title="x"))


def test_reassign_to_unknown_user_raises(service, member, now) -> None:
    task = new_task(service, member, now)

    with pytest.raises(NotFoundException, match="does not exist"):
        service.update_task(task.id, UpdateTaskRequest(assigned_member_id=str(uuid.uuid4())))

    assert service.get_task(task.id).assigned_member_id == member.id


def test_overdue_status_is_only_set_explicitly(service, member, now) -> None:
    task = new_task(service, member, now, deadline=now - timedelta(days=3))
    assert service.get_task(task.id).status == TaskStatus.TODO

    updated = service.update_task(task.id, UpdateTaskRequest(status=TaskStatus.OVERDUE))
    assert updated.status == TaskStatus.OVERDUE


def test_delete_task_is_idempotent(service, member, now) -> None:
    task = new_task(service, member, now)

    service.delete_task(task.id)
    service.delete_task(task.id)

    with pytest.raises(NotFoundException):
        service.get_task(task.id)


def test_list_tasks_with_filter(service, member, now) -> None:
    new_task(service, member, now, title="a", status=TaskStatus.DONE)
    new_task(service, member, now, title="b")

    done = service.list_tasks(TaskFilter(status=TaskStatus.DONE))

    assert [t.title for t in done] == ["a"]


def test_dashboard_buckets(uow, service, member, now) -> None:
    late = new_task(service, member, now, title="late", deadline=now - timedelta(days=1))
    new_task(service, member, now, title="shipped", deadline=now + timedelta(days=1), status=TaskStatus.DONE)
    busy = new_task(service, member, now, title="busy", deadline=now + timedelta(days=2), status=TaskStatus.IN_PROGRESS)

    buckets = DashboardService(uow).get_dashboard(now)

    assert [t.id for t in buckets.overdue] == [late.id]
    assert [t.id for t in buckets.nearing_deadline] == [busy.id]
    assert [t.id for t in buckets.in_progress] == [busy.id]
    assert buckets.total == 3
