"""Application settings loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration with sensible defaults."""

    log_level: str = Field(default="info", alias="LOG_LEVEL")
    metrics_enabled: bool = Field(default=True, alias="METRICS_ENABLED")
    max_request_size_bytes: int = Field(default=65536, alias="MAX_REQUEST_SIZE_BYTES")
    max_concurrent_requests: int = Field(default=8, alias="MAX_CONCURRENT_REQUESTS")
    request_timeout_seconds: float = Field(default=2.0, alias="REQUEST_TIMEOUT_SECONDS")
    service_version: str = Field(default="0.1.0", alias="SERVICE_VERSION")
    host: str = Field(default="127.0.0.1", alias="HOST")
    port: int = Field(default=8080, alias="PORT")
    dev_reload: bool = Field(default=False, alias="DEV_RELOAD")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
