import streamlit as st
from taskboard_ui.config.settings import config
from taskboard_ui.app_lib.api.client import api_client


def Healthcheck_Sidebar():
    """Render the sidebar with the API health check"""

    if "health_status" not in st.session_state:
        st.session_state.health_status = None

    st.sidebar.title("System Health")

    with st.sidebar:
        if st.button("Check Health"):
            try:
                with st.spinner("Checking health..."):
                    response = api_client.get(config.endpoints.health, timeout=10, show_errors=False)
                    st.session_state.health_status = response
                    if response.get("status") == "ok":
                        st.success("Online")
                    else:
                        st.warning(f"API status: {response.get('status')}")
            except Exception as e:
                st.session_state.health_status = None
                st.error(f"Cannot connect to API: {e}")

        if st.session_state.health_status:
            with st.expander("System Details"):
                st.json(st.session_state.health_status)

        st.caption(f"API: {config.fastapi_url}")
