"""
TaskService - task and dashboard calls for the Streamlit components.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from taskboard_ui.app_lib.api.client import api_client


def to_wire(value: datetime) -> str:
    """
    ISO timestamp with an explicit offset.

    Naive values are taken as local time (what the date and time inputs
    return); the server treats offset-less timestamps as UTC.
    """
    return value.astimezone().isoformat()


class TaskService:
    def __init__(self, client=None):
        self.client = client or api_client

    def get_dashboard(self) -> Dict[str, Any]:
        return self.client.call("getDashboardTasks")

    def list_tasks(
        self,
        status: Optional[str] = None,
        assigned_member_id: Optional[str] = None,
        overdue_only: bool = False,
        deadline_before: Optional[datetime] = None,
        deadline_after: Optional[datetime] = None
    ) -> List[Dict[str, Any]]:
        task_filter: Dict[str, Any] = {}
        if status:
            task_filter["status"] = status
        if assigned_member_id:
            task_filter["assigned_member_id"] = assigned_member_id
        if overdue_only:
            task_filter["overdue_only"] = True
        if deadline_before:
            task_filter["deadline_before"] = to_wire(deadline_before)
        if deadline_after:
            task_filter["deadline_after"] = to_wire(deadline_after)

        return self.client.call("getTasks", task_filter or None)

    def get_task(self, task_id: str) -> Dict[str, Any]:
        return self.client.call("getTaskById", {"id": task_id})

    def create_task(
        self,
        title: str,
        deadline: datetime,
        assigned_member_id: str,
        description: Optional[str] = None,
        effort_spent: float = 0,
        status: str = "todo",
        dependencies: Optional[List[str]] = None
    ) -> Dict[str, Any]:
        payload = {
            "title": title,
            "description": description or None,
            "deadline": to_wire(deadline),
            "assigned_member_id": assigned_member_id,
            "effort_spent": effort_spent,
            "status": status,
            "dependencies": list(dependencies or []),
        }
        return self.client.call("createTask", payload)

    def update_task(self, task_id: str, **changes: Any) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"id": task_id}
        for key, value in changes.items():
            payload[key] = to_wire(value) if isinstance(value, datetime) else value
        return self.client.call("updateTask", payload)

    def delete_task(self, task_id: str) -> None:
        self.client.call("deleteTask", {"id": task_id})


task_service = TaskService()
