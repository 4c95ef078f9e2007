import streamlit as st

from taskboard_ui.app_lib.utils.formatters import format_date, format_effort, format_status, user_name
from taskboard_ui.config.constants import STATUS_LABELS, TASK_STATUSES
from taskboard_ui.services import task_service, user_service

ALL = "All"


def Task_List():
    """Render every task with status and assignee filters"""
    st.subheader("All Tasks")

    try:
        users = user_service.list_users()
    except Exception:
        return

    user_options = {ALL: None}
    user_options.update({f"{u['name']} ({u['email']})": u["id"] for u in users})

    col1, col2, col3 = st.columns([2, 3, 1])
    with col1:
        status_choice = st.selectbox(
            "Status",
            [ALL] + TASK_STATUSES,
            format_func=lambda s: s if s == ALL else STATUS_LABELS[s],
            key="task_list_status"
        )
    with col2:
        assignee_choice = st.selectbox("Assignee", list(user_options), key="task_list_assignee")
    with col3:
        overdue_only = st.checkbox("Overdue only", key="task_list_overdue")

    try:
        tasks = task_service.list_tasks(
            status=None if status_choice == ALL else status_choice,
            assigned_member_id=user_options[assignee_choice],
            overdue_only=overdue_only
        )
    except Exception:
        return

    if not tasks:
        st.info("No tasks match these filters.")
        return

    st.caption(f"{len(tasks)} task(s)")
    titles = {t["id"]: t["title"] for t in tasks}

    for task in tasks:
        with st.expander(f"{task['title']} · {format_status(task['status'])}"):
            if task.get("description"):
                st.write(task["description"])
            st.text(f"Deadline: {format_date(task['deadline'])}")
            st.text(f"Assignee: {user_name(task['assigned_member_id'], users)}")
            st.text(format_effort(task.get("effort_spent")))
            if task.get("dependencies"):
                st.text("Depends on: " + ", ".join(titles.get(d, d) for d in task["dependencies"]))

            col_a, col_b = st.columns([3, 1])
            with col_a:
                new_status = st.selectbox(
                    "Change status",
                    TASK_STATUSES,
                    index=TASK_STATUSES.index(task["status"]),
                    format_func=lambda s: STATUS_LABELS[s],
                    key=f"status_{task['id']}"
                )
                if new_status != task["status"]:
                    try:
                        task_service.update_task(task["id"], status=new_status)
                    except Exception:
                        st.caption("Status not saved.")
                    else:
                        st.rerun()
            with col_b:
                if st.button("Delete", key=f"delete_{task['id']}"):
                    try:
                        task_service.delete_task(task["id"])
                    except Exception:
                        st.caption("Task not deleted.")
                    else:
                        st.rerun()
