"""
Application configuration management using Pydantic Settings.

This module centralizes all environment-based configuration for the application,
providing type-safe access to configuration values with validation.
"""

import os
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url
from functools import lru_cache
import logging

logger = logging.getLogger('CORE_CONFIG')


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Name of the application
        debug: Debug mode flag
        log_level: Level applied to the application loggers on startup

        # Database Configuration
        database_url: Complete database URL (if provided directly)
        db_username: PostgreSQL username
        db_password: PostgreSQL password
        db_host: PostgreSQL host
        db_endpoint: AWS RDS endpoint (alternative to db_host)
        db_port: PostgreSQL port
        db_name: PostgreSQL database name

        # Connection Pool Settings
        db_pool_size: Database connection pool size
        db_max_overflow: Maximum overflow connections
        db_pool_timeout: Pool checkout timeout in seconds
        db_pool_recycle: Connection recycle time in seconds

        # Server
        api_host: Bind address for uvicorn
        api_port: Port for uvicorn
        cors_origins: Origins allowed to call the API from a browser
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "Taskboard"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Database Configuration
    database_url: Optional[str] = None
    db_username: str = "postgres"
    db_password: Optional[str] = None
    db_host: Optional[str] = None
    db_endpoint: Optional[str] = None  # AWS RDS style
    db_port: str = "5432"
    db_name: Optional[str] = None
    postgres_db: str = "taskboard"  # Fallback

    # Connection Pool Settings
    db_pool_size: int = 10
    db_max_overflow: int = 20
    db_pool_timeout: int = 10
    db_pool_recycle: int = 3600
    db_pool_pre_ping: bool = True
    db_echo: bool = False

    # Server Settings
    api_host: str = "0.0.0.0"
    api_port: int = 9020
    cors_origins: List[str] = ["*"]

    def get_database_name(self) -> str:
        """Get the database name, falling back to POSTGRES_DB."""
        return self.db_name or self.postgres_db

    def get_database_host(self) -> str:
        """
        Get database host, parsing DB_ENDPOINT if necessary.

        Returns:
            str: Database host address

        Raises:
            ValueError: If no host configuration is found
        """
        if self.db_endpoint:
            if ':' in self.db_endpoint:
                potential_host, potential_port = self.db_endpoint.rsplit(':', 1)
                try:
                    int(potential_port)
                    # Valid port found, update port if not explicitly set
                    if not os.getenv("DB_PORT"):
                        self.db_port = potential_port
                    return potential_host
                except ValueError:
                    return self.db_endpoint
            return self.db_endpoint

        if self.db_host:
            return self.db_host

        raise ValueError("Database host configuration missing (DB_HOST or DB_ENDPOINT)")

    def get_database_url(self) -> str:
        """
        Construct the database URL from components or return direct URL.

        Returns:
            str: SQLAlchemy database URL

        Raises:
            ValueError: If required configuration is missing
        """
        if self.database_url:
            return self.database_url

        missing = []
        if not self.db_username:
            missing.append("DB_USERNAME")
        if not self.db_password:
            missing.append("DB_PASSWORD")

        try:
            db_host = self.get_database_host()
        except ValueError:
            missing.append("DB_HOST or DB_ENDPOINT")
            db_host = None

        if missing:
            raise ValueError(
                f"Database configuration incomplete. Set DATABASE_URL or provide: {', '.join(missing)}"
            )

        return f"postgresql://{self.db_username}:{self.db_password}@{db_host}:{self.db_port}/{self.get_database_name()}"

    def get_masked_database_url(self) -> str:
        """Database URL safe for log output."""
        return make_url(self.get_database_url()).render_as_string(hide_password=True)

    @property
    def is_sqlite(self) -> bool:
        return self.get_database_url().startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings object
    """
    return Settings()
