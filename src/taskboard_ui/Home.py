import logging

import streamlit as st

from taskboard_ui.config.constants import UI_CONSTANTS
from taskboard_ui.config.env import env

from taskboard_ui.components.healthcheck_sidebar import Healthcheck_Sidebar
from taskboard_ui.components.dashboard import Dashboard
from taskboard_ui.components.task_list import Task_List
from taskboard_ui.components.task_form import Task_Form
from taskboard_ui.components.user_management import User_Management


# Page refreshes during a request close the websocket; those errors are noise
class WebSocketErrorFilter(logging.Filter):
    def filter(self, record):
        if 'WebSocketClosedError' in str(record.msg) or 'StreamClosedError' in str(record.msg):
            return False
        return True


for logger_name in ['', 'streamlit', 'tornado.application']:
    logging.getLogger(logger_name).addFilter(WebSocketErrorFilter())

# THIS MUST BE THE VERY FIRST STREAMLIT COMMAND
st.set_page_config(page_title=UI_CONSTANTS["page_title"], layout="wide", page_icon=UI_CONSTANTS["page_icon"])

st.title(UI_CONSTANTS["page_title"])

if 'health_status' not in st.session_state:
    st.session_state.health_status = None

# ----------------------------------------------------------------------
# SIDEBAR - SYSTEM STATUS
# ----------------------------------------------------------------------
Healthcheck_Sidebar()

# ----------------------------------------------------------------------
# MAIN INTERFACE
# ----------------------------------------------------------------------
dashboard_tab, tasks_tab, create_tab, users_tab = st.tabs(["Dashboard", "All Tasks", "Create Task", "Users"])

with dashboard_tab:
    Dashboard()

with tasks_tab:
    Task_List()

with create_tab:
    Task_Form()

with users_tab:
    User_Management()

st.markdown("---")
st.caption(f"Environment: {env.environment}")
