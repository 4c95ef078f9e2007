"""
Dashboard component

Shows the three dashboard buckets (overdue, nearing deadline, in progress)
with a count and one card per task. Buckets overlap: an in-progress task
that is also overdue shows up in both columns.
"""

from typing import Any, Dict, List

import streamlit as st

from taskboard_ui.app_lib.utils.formatters import format_date, format_effort, format_status, user_name
from taskboard_ui.services import task_service, user_service

BUCKETS = [
    ("overdue", "Overdue", "error"),
    ("nearingDeadline", "Nearing Deadline", "warning"),
    ("inProgress", "In Progress", "info"),
]


def render_task_card(task: Dict[str, Any], users: List[Dict[str, Any]]):
    with st.container(border=True):
        st.markdown(f"**{task['title']}**")
        if task.get("description"):
            st.caption(task["description"])
        st.text(f"Due {format_date(task['deadline'])}")
        st.text(f"Assignee: {user_name(task['assigned_member_id'], users)}")
        st.text(f"{format_status(task['status'])} · {format_effort(task.get('effort_spent'))}")


def Dashboard():
    st.subheader("Dashboard")

    if st.button("Refresh", key="dashboard_refresh"):
        st.rerun()

    try:
        dashboard = task_service.get_dashboard()
        users = user_service.list_users()
    except Exception:
        st.info("Dashboard unavailable until the API is reachable.")
        return

    st.metric("Total tasks", dashboard.get("total", 0))

    columns = st.columns(len(BUCKETS))
    for column, (key, label, tone) in zip(columns, BUCKETS):
        tasks = dashboard.get(key) or []
        with column:
            getattr(st, tone)(f"{label} ({len(tasks)})")
            if not tasks:
                st.caption("Nothing here.")
            for task in tasks:
                render_task_card(task, users)
