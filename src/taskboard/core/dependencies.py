from sqlalchemy.orm import Session
from fastapi import Depends

from taskboard.core.database import get_db
from taskboard.core.config import get_settings, Settings


# ============================================================================
# Configuration Dependencies
# ============================================================================

def get_settings_dependency() -> Settings:
    """
    Get cached application settings.

    Example:
        @router.get("/config")
        def get_config(settings: Settings = Depends(get_settings_dependency)):
            return {"app_name": settings.app_name}
    """
    return get_settings()


# ============================================================================
# Unit of Work Dependencies
# ============================================================================

def get_uow(db: Session = Depends(get_db)):
    """
    Get Unit of Work instance for coordinating repository access.

    Args:
        db: Database session (automatically injected)

    Returns:
        UnitOfWork: Coordinated repository access
    """
    from taskboard.repositories import UnitOfWork
    return UnitOfWork(db)


# ============================================================================
# Service Dependencies
# ============================================================================

def get_user_service(uow=Depends(get_uow)):
    """
    Get UserService instance.

    Example:
        @router.get("/users/{user_id}")
        def get_user(
            user_id: str,
            service: UserService = Depends(get_user_service)
        ):
            return service.get_user(user_id)
    """
    from taskboard.services.user_service import UserService
    return UserService(uow)


def get_task_service(uow=Depends(get_uow)):
    """Get TaskService instance."""
    from taskboard.services.task_service import TaskService
    return TaskService(uow)


def get_dashboard_service(uow=Depends(get_uow)):
    """Get DashboardService instance."""
    from taskboard.services.dashboard_service import DashboardService
    return DashboardService(uow)
