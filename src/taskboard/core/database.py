"""
Database connection and session management.

This module handles:
- Database engine creation with connection pooling
- Session factory setup
- Connection health checks
- Retry logic for database initialization
"""

import time
from typing import Generator, Dict, Any
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import QueuePool, StaticPool
import logging

from taskboard.core.config import get_settings, Settings

logger = logging.getLogger('CORE_DATABASE')

# Get settings
settings = get_settings()

# Optimized retry logic with exponential backoff
RETRY_DELAYS = [1, 2, 3, 5, 8]


def build_engine_config(settings: Settings) -> Dict[str, Any]:
    """
    Engine keyword arguments for the configured database.

    SQLite connections are shared across FastAPI's threadpool, and an
    in-memory SQLite database only exists for a single connection, so it
    is pinned with a StaticPool.
    """
    url = settings.get_database_url()
    if settings.is_sqlite:
        config: Dict[str, Any] = {
            'connect_args': {'check_same_thread': False},
            'echo': settings.db_echo,
        }
        if url in ("sqlite://", "sqlite:///:memory:"):
            config['poolclass'] = StaticPool
        return config

    return {
        'poolclass': QueuePool,
        'pool_size': settings.db_pool_size,
        'max_overflow': settings.db_max_overflow,
        'pool_timeout': settings.db_pool_timeout,
        'pool_recycle': settings.db_pool_recycle,
        'pool_pre_ping': settings.db_pool_pre_ping,
        'echo': settings.db_echo,
    }


def create_engine_with_retry(settings: Settings) -> Engine:
    """
    Create the engine and wait for the database to accept connections.

    Raises:
        Exception: If the database is still unreachable after the last attempt
    """
    database_url = settings.get_database_url()
    logger.info(f"Initializing database connection to: {settings.get_masked_database_url()}")

    engine_config = build_engine_config(settings)
    for i, delay in enumerate(RETRY_DELAYS):
        try:
            engine = create_engine(database_url, **engine_config)
            # Test connection with health check
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.info(f"Database connection established successfully on attempt {i+1}")
            return engine
        except OperationalError as e:
            logger.error(f"Database not ready (attempt {i+1}/{len(RETRY_DELAYS)}): {e}")
            if i < len(RETRY_DELAYS) - 1:
                logger.info(f"Retrying in {delay} seconds...")
                time.sleep(delay)
            else:
                raise Exception(f"Could not connect to the database after {len(RETRY_DELAYS)} attempts") from e


engine = create_engine_with_retry(settings)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function to get database session.

    Yields:
        Session: SQLAlchemy database session

    Example:
        @router.get("/tasks")
        def list_tasks(db: Session = Depends(get_db)):
            return db.query(Task).all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_database_health() -> Dict[str, Any]:
    """
    Check database connection health and return status.

    Returns:
        dict: Health status with connection pool information

    Example:
        {
            "status": "healthy",
            "connection_pool": "Pool size: 5  Connections in pool: 0 ..."
        }
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1")).fetchone()
            return {
                "status": "healthy",
                "dialect": engine.dialect.name,
                "connection_pool": engine.pool.status(),
            }
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return {
            "status": "unhealthy",
            "dialect": engine.dialect.name,
            "error": str(e),
        }


def init_db() -> None:
    """
    Create all tables that do not exist yet.

    Safe to call on every startup.
    """
    from taskboard.models import Base

    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables ensured")
    except Exception as e:
        logger.error(f"Error during database initialization: {e}")
        raise
