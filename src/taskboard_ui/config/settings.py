"""
Application Settings
Centralized configuration - Single Source of Truth for all endpoints and settings
"""
from dataclasses import dataclass
from .env import env
from .constants import TASK_STATUSES, STATUS_LABELS


@dataclass
class APIEndpoints:
    base: str
    api: str
    users: str
    tasks: str
    dashboard: str
    health: str
    rpc: str

    def get_url(self, endpoint_key: str) -> str:
        return getattr(self, endpoint_key, self.base)


class AppConfig:
    def __init__(self):
        # Environment
        self.env = env

        # Base URLs
        self.fastapi_url = env.fastapi_url.rstrip('/')
        self.request_timeout = env.request_timeout

        # API Endpoints - SINGLE SOURCE OF TRUTH
        self.endpoints = APIEndpoints(
            base=self.fastapi_url,
            api=f"{self.fastapi_url}/api",
            users=f"{self.fastapi_url}/api/users",
            tasks=f"{self.fastapi_url}/api/tasks",
            dashboard=f"{self.fastapi_url}/api/dashboard",
            health=f"{self.fastapi_url}/api/health",
            rpc=f"{self.fastapi_url}/api/rpc",
        )

        self.task_statuses = TASK_STATUSES
        self.status_labels = STATUS_LABELS

    def is_development(self) -> bool:
        """Check if running in development mode"""
        return self.env.is_development

    def is_production(self) -> bool:
        """Check if running in production mode"""
        return self.env.is_production

    @classmethod
    def get_instance(cls):
        if not hasattr(cls, '_instance'):
            cls._instance = cls()
        return cls._instance


# Export singleton instance - Use this throughout the app
config = AppConfig.get_instance()


def get_endpoint(name: str) -> str:
    return config.endpoints.get_url(name)
