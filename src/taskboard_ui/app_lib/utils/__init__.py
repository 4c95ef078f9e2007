from .formatters import format_date, format_effort, format_status, parse_datetime, to_local, user_name

__all__ = ['format_date', 'format_effort', 'format_status', 'parse_datetime', 'to_local', 'user_name']
