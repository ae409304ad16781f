"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.

MONGODB_URI has no default: booting without it fails immediately.
"""

from functools import lru_cache
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # MongoDB
    mongodb_uri: str
    mongodb_db: str = "eduguide"
    mongodb_timeout_ms: int = 5000

    # JWT Auth (JWT_SECRET is the name older deployments use)
    jwt_secret_key: str = Field(
        default="change-this-secret",
        validation_alias=AliasChoices("jwt_secret_key", "jwt_secret"),
    )
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60

    # Uploads
    upload_dir: str = "uploads"
    max_upload_mb: int = 5

    # Rate limiting (fixed window per client address)
    rate_limit_max_requests: int = 100
    rate_limit_window_seconds: int = 15 * 60

    # App
    cors_origins: str = "*"
    log_level: str = "INFO"

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

    @property
    def cors_origin_list(self) -> list:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
