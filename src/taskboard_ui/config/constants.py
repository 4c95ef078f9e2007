"""
UI constants shared by the Streamlit components.
"""

TASK_STATUSES = ["todo", "in_progress", "done", "overdue"]

STATUS_LABELS = {
    "todo": "To do",
    "in_progress": "In progress",
    "done": "Done",
    "overdue": "Overdue",
}

STATUS_ICONS = {
    "todo": "🕒",
    "in_progress": "🔄",
    "done": "✅",
    "overdue": "🚨",
}

UI_CONSTANTS = {
    "page_title": "Task Management System",
    "page_icon": "📋",
    "date_format": "%b %d, %Y",
    "unknown_user": "Unknown User",
}
