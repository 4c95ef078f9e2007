"""Configuration package for Streamlit application"""
from .settings import config, AppConfig
from .constants import TASK_STATUSES, STATUS_LABELS, UI_CONSTANTS
from .env import get_env

__all__ = ['config', 'AppConfig', 'TASK_STATUSES', 'STATUS_LABELS', 'UI_CONSTANTS', 'get_env']
