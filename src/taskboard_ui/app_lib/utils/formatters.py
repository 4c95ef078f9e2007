from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional

from taskboard_ui.config.constants import STATUS_LABELS, STATUS_ICONS, UI_CONSTANTS


def parse_datetime(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def to_local(value: Any) -> Optional[datetime]:
    """Server timestamps without an offset are UTC; show them in local time."""
    parsed = parse_datetime(value)
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone()


def format_date(value: Any) -> str:
    local = to_local(value)
    if local is None:
        return ""
    return local.strftime(UI_CONSTANTS["date_format"])


def format_status(status: str) -> str:
    label = STATUS_LABELS.get(status, status.replace("_", " "))
    icon = STATUS_ICONS.get(status)
    return f"{icon} {label}" if icon else label


def user_name(user_id: str, users: Iterable[Dict[str, Any]]) -> str:
    for user in users:
        if user.get("id") == user_id:
            return user.get("name", UI_CONSTANTS["unknown_user"])
    return UI_CONSTANTS["unknown_user"]


def format_effort(hours: Any) -> str:
    return f"{float(hours or 0):g}h spent"
