"""
Application configuration management using Pydantic Settings.

This module centralizes all environment-based configuration for the application,
providing type-safe access to configuration values with validation.
"""

import os
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
import logging

from pomodoro.core.exceptions import ConfigurationException

logger = logging.getLogger('CORE_CONFIG')


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Name of the application
        debug: Debug mode flag
        log_level: Level applied to application loggers

        # Database Configuration
        database_url: Complete database URL (if provided directly)
        db_username: PostgreSQL username
        db_password: PostgreSQL password
        db_host: PostgreSQL host
        db_endpoint: Host with optional port, e.g. an RDS endpoint
        db_port: PostgreSQL port
        db_name: PostgreSQL database name

        # Connection Pool Settings
        db_pool_size: Database connection pool size
        db_max_overflow: Maximum overflow connections
        db_pool_timeout: Pool checkout timeout in seconds
        db_pool_recycle: Connection recycle time in seconds

        # Authentication
        jwt_secret: Secret used to verify bearer tokens
        jwt_algorithm: Signing algorithm of bearer tokens
        jwt_expires_in: Lifetime of tokens created by create_access_token, seconds

        # CORS
        cors_origins: Origins allowed to call the API from a browser
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="allow",
    )

    # Application Settings
    app_name: str = "Pomodoro"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Database Configuration
    database_url: Optional[str] = None
    db_username: str = "postgres"
    db_password: Optional[str] = None
    db_host: Optional[str] = None
    db_endpoint: Optional[str] = None
    db_port: str = "5432"
    db_name: Optional[str] = None
    sqlite_fallback_url: str = "sqlite:///./pomodoro.db"

    # Connection Pool Settings
    db_pool_size: int = 20
    db_max_overflow: int = 30
    db_pool_timeout: int = 10
    db_pool_recycle: int = 3600
    db_pool_pre_ping: bool = True
    db_echo: bool = False

    # Authentication
    jwt_secret: str = "change_me"
    jwt_algorithm: str = "HS256"
    jwt_expires_in: int = 60 * 60 * 24

    # CORS
    cors_origins: List[str] = ["http://localhost:4200"]

    def get_database_host(self) -> Optional[str]:
        """
        Get database host, parsing DB_ENDPOINT if necessary.

        Returns:
            Database host address, or None if neither DB_ENDPOINT nor DB_HOST is set
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

        return self.db_host

    def get_database_url(self) -> str:
        """
        Construct the database URL from components or return direct URL.

        A direct DATABASE_URL wins. Otherwise a PostgreSQL URL is composed when a
        host is configured; without one the local SQLite file is used.

        Returns:
            str: SQLAlchemy database URL

        Raises:
            ConfigurationException: If a host is configured but other required parts are missing
        """
        if self.database_url:
            return self.database_url

        db_host = self.get_database_host()
        if db_host is None:
            logger.warning("No database host configured, using %s", self.sqlite_fallback_url)
            return self.sqlite_fallback_url

        missing = []
        if not self.db_password:
            missing.append("DB_PASSWORD")
        if not self.db_name:
            missing.append("DB_NAME")
        if missing:
            raise ConfigurationException(f"Database configuration incomplete. Missing: {', '.join(missing)}")

        return f"postgresql://{self.db_username}:{self.db_password}@{db_host}:{self.db_port}/{self.db_name}"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings object
    """
    return Settings()
