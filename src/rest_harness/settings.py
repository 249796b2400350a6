"""Connection configuration for the REST test harness using Pydantic settings."""

from functools import lru_cache
from typing import Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration consumed by the request context."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    base_url: str = Field("https://reqres.in", alias="API_BASE_URL")
    default_headers: Dict[str, str] = Field(
        default_factory=lambda: {
            "Content-Type": "application/json",
            "x-api-key": "reqres-free-v1",
        },
        alias="API_DEFAULT_HEADERS",
    )
    timeout_seconds: float = Field(30.0, gt=0, alias="API_TIMEOUT_SECONDS")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        """Endpoint paths always start with '/', so keep the base bare."""

        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance loaded from environment variables."""

    return Settings()
