"""Settings for HAL representation building."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HALSettings(BaseSettings):
    """HAL configuration loaded from ``HAL_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HAL_",
        extra="ignore",
    )

    page_number_param: str = Field(default="pn", description="Query parameter for the page number")
    page_size_param: str = Field(default="ps", description="Query parameter for the page size")
    default_page_size: int = Field(default=10, ge=1)
    max_page_size: int = Field(default=100, ge=1)
    media_type: str = "application/hal+json"
    error_media_type: str = "application/vnd.error+json"


@lru_cache
def get_settings() -> HALSettings:
    """Return the process-wide settings instance."""
    return HALSettings()
