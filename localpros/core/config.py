"""Application configuration management."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Settings
    app_name: str = "Local Service Provider Directory"
    app_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    # Database Settings
    database_url: str = Field(
        default="",
        description="SQLAlchemy URL; empty means storage is unavailable",
    )
    database_echo: bool = False

    # Session Settings
    session_secret: str = "change-me"
    session_algorithm: str = "HS256"
    session_issuer: str = "localpros"
    owner_open_id: str = Field(
        default="",
        description="External identity that is promoted to the admin role on first sign-in",
    )

    # Admin notification sink
    notification_url: str = ""
    notification_api_key: str = ""
    notification_timeout_seconds: float = 5.0

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parent.parent.parent / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
