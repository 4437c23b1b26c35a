"""
Application-level settings for the API server and the client layer.
"""
import os
from typing import List


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class AppConfig:
    """HTTP server and client settings read from the environment."""

    PORT: int = int(os.getenv("PORT", "8080"))
    ENVIRONMENT: str = os.getenv("APP_ENV", "development")

    # Comma separated; "*" allows every origin
    CORS_ORIGINS: List[str] = [
        origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
    ]

    EXPOSE_ERROR_DETAILS: bool = _env_flag("EXPOSE_ERROR_DETAILS", "true")

    API_URL: str = os.getenv("API_URL", "http://localhost:8080/api")
