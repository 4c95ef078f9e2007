"""
Environment variable management
Centralized access to environment variables with defaults
"""
import os
from typing import Optional


def get_env(key: str, default: Optional[str] = None) -> str:
    return os.getenv(key, default)


def get_env_bool(key: str, default: bool = False) -> bool:
    value = os.getenv(key, str(default))
    return value.lower() in ('true', '1', 'yes', 'on')


def get_env_int(key: str, default: int = 0) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


# Environment configuration
class EnvironmentConfig:
    """Environment configuration singleton"""

    def __init__(self):
        # API Configuration
        self.fastapi_url = get_env("FASTAPI_URL", "http://localhost:9020")
        self.request_timeout = get_env_int("API_TIMEOUT", 30)

        # Environment
        self.environment = get_env("ENVIRONMENT", "development").lower()
        self.debug = get_env_bool("DEBUG", False)

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


env = EnvironmentConfig()
