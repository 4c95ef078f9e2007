"""
API routers package for the FastAPI application.

This package contains all API endpoint routers organized by domain:
- users_api: User CRUD endpoints
- tasks_api: Task CRUD and filtered listing
- dashboard_api: Dashboard buckets
- health_api: Health check endpoint
- rpc_api: Named procedures behind a single endpoint
"""

from .users_api import router as users_api_router
from .tasks_api import router as tasks_api_router
from .dashboard_api import router as dashboard_api_router
from .health_api import health_api_router
from .rpc_api import rpc_api_router

__all__ = [
    "users_api_router",
    "tasks_api_router",
    "dashboard_api_router",
    "health_api_router",
    "rpc_api_router",
]
