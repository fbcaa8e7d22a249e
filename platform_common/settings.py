"""Package settings using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from platform_common.kernel.enums import Environment


class Settings(BaseSettings):
    """Settings for the shared utilities, loaded from `PLATFORM_*` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PLATFORM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["dev", "qa", "prod"] = Field(default="dev")

    # Directories searched, in order, for named configuration sources
    config_search_path: list[str] = Field(default=[".", "config"])

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_format: Literal["json", "text"] = Field(default="json")

    @property
    def environment_id(self) -> int:
        return Environment[self.environment.upper()].value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
