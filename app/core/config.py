from typing import List
from fastapi import Request
from pydantic_settings import BaseSettings, SettingsConfigDict


# =====================================================================
# SETTINGS
# =====================================================================


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # App
    APP_NAME: str = "Adaptive UI Tracker API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    SHUTDOWN_TIMEOUT: int = 10  # seconds to drain in-flight requests

    # Database
    DATABASE_URL: str = "sqlite:///./telemetry.db"

    # Connection retry (bounded exponential backoff)
    DB_CONNECT_MAX_ATTEMPTS: int = 10
    DB_CONNECT_INITIAL_DELAY: float = 5.0
    DB_CONNECT_MAX_DELAY: float = 60.0
    DB_CONNECT_BACKOFF_FACTOR: float = 2.0

    # Query page caps
    SENSOR_PAGE_LIMIT: int = 100
    APP_USAGE_PAGE_LIMIT: int = 100

    # Middleware
    CORS_ORIGINS: List[str] = ["*"]
    MAX_BODY_BYTES: int = 10 * 1024 * 1024


settings = Settings()


def get_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings
