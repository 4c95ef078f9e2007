"""
Create Task form.

Assignee and dependency choices come from the current users and tasks, so a
task can only be created once at least one team member exists.
"""

from datetime import date, datetime, time, timedelta

import streamlit as st

from taskboard_ui.config.constants import STATUS_LABELS, TASK_STATUSES
from taskboard_ui.services import task_service, user_service


def Task_Form():
    st.subheader("Create Task")

    try:
        users = user_service.list_users()
        tasks = task_service.list_tasks()
    except Exception:
        return

    if not users:
        st.warning("Add a team member in the Users tab before creating tasks.")
        return

    assignees = {f"{u['name']} ({u['email']})": u["id"] for u in users}
    task_titles = {t["id"]: t["title"] for t in tasks}

    with st.form("create_task_form", clear_on_submit=True):
        title = st.text_input("Title *")
        description = st.text_area("Description")

        col1, col2 = st.columns(2)
        with col1:
            deadline_date = st.date_input("Deadline date", value=date.today() + timedelta(days=7))
        with col2:
            deadline_time = st.time_input("Deadline time", value=time(17, 0))

        assignee = st.selectbox("Assigned member *", list(assignees))

        col3, col4 = st.columns(2)
        with col3:
            effort_spent = st.number_input("Effort spent (hours)", min_value=0.0, value=0.0, step=0.5)
        with col4:
            status = st.selectbox("Status", TASK_STATUSES, format_func=lambda s: STATUS_LABELS[s])

        dependencies = st.multiselect(
            "Depends on",
            list(task_titles),
            format_func=lambda task_id: task_titles[task_id]
        )

        submitted = st.form_submit_button("Create Task", type="primary")

    if not submitted:
        return

    if not title.strip():
        st.error("Title is required")
        return

    try:
        created = task_service.create_task(
            title=title.strip(),
            description=description.strip() or None,
            deadline=datetime.combine(deadline_date, deadline_time),
            assigned_member_id=assignees[assignee],
            effort_spent=effort_spent,
            status=status,
            dependencies=dependencies
        )
    except Exception:
        return

    st.success(f"Created task '{created['title']}'")
