import streamlit as st

from taskboard_ui.app_lib.utils.formatters import format_date
from taskboard_ui.services import user_service


def User_Management():
    """Create, list and delete team members"""
    st.subheader("Users")

    with st.form("create_user_form", clear_on_submit=True):
        col1, col2 = st.columns(2)
        with col1:
            name = st.text_input("Name *")
        with col2:
            email = st.text_input("Email *")
        submitted = st.form_submit_button("Add User", type="primary")

    if submitted:
        if not name.strip() or not email.strip():
            st.error("Name and email are required")
        else:
            try:
                user = user_service.create_user(name, email)
                st.success(f"Added {user['name']}")
            except Exception:
                st.caption("User not added.")

    try:
        users = user_service.list_users()
    except Exception:
        return

    if not users:
        st.info("No team members yet.")
        return

    st.caption(f"{len(users)} member(s)")
    for user in users:
        col_a, col_b, col_c = st.columns([3, 2, 1])
        with col_a:
            st.markdown(f"**{user['name']}**  \n{user['email']}")
        with col_b:
            st.caption(f"Joined {format_date(user['created_at'])}")
        with col_c:
            if st.button("Delete", key=f"delete_user_{user['id']}"):
                try:
                    user_service.delete_user(user["id"])
                except Exception:
                    # 409 when tasks are still assigned; APIClient already shows the message
                    continue
                st.rerun()
