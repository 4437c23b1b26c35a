"""
Database configuration for PostgreSQL connection.
Centralized configuration so the same pool factory serves local, Docker and hosted deployments.
"""
import os
from typing import Optional


class DatabaseConfig:
    """Database configuration class with environment variable support."""

    DB_USER: str = os.getenv("DB_USER", "postgres")
    DB_NAME: str = os.getenv("DB_NAME", "f1-management")
    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
    DB_PASSWORD: Optional[str] = os.getenv("DB_PASSWORD", None)

    DB_POOL_MIN_SIZE: int = int(os.getenv("DB_POOL_MIN_SIZE", "1"))
    DB_POOL_MAX_SIZE: int = int(os.getenv("DB_POOL_MAX_SIZE", "10"))
    DB_CONNECT_TIMEOUT: float = float(os.getenv("DB_CONNECT_TIMEOUT", "10"))
    DB_COMMAND_TIMEOUT: float = float(os.getenv("DB_COMMAND_TIMEOUT", "60"))

    @classmethod
    def get_async_connection_params(cls) -> dict:
        """
        Get PostgreSQL async connection parameters for asyncpg.
        Returns dict with connection parameters instead of connection string.
        """
        params = {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "database": cls.DB_NAME,
            "user": cls.DB_USER,
        }
        if cls.DB_PASSWORD:
            params["password"] = cls.DB_PASSWORD
        return params

    @classmethod
    def get_pool_options(cls) -> dict:
        """Pool sizing and timeouts passed to asyncpg.create_pool."""
        return {
            "min_size": cls.DB_POOL_MIN_SIZE,
            "max_size": cls.DB_POOL_MAX_SIZE,
            "timeout": cls.DB_CONNECT_TIMEOUT,
            "command_timeout": cls.DB_COMMAND_TIMEOUT,
        }

    @classmethod
    def describe(cls) -> dict:
        """Connection summary safe for logging (no password)."""
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "database": cls.DB_NAME,
            "user": cls.DB_USER,
            "pool_max_size": cls.DB_POOL_MAX_SIZE,
        }
