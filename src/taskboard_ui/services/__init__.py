"""Services package - API wrappers used by the Streamlit components"""
from .task_service import TaskService, task_service
from .user_service import UserService, user_service

__all__ = ['TaskService', 'task_service', 'UserService', 'user_service']
