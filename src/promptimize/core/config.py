"""Configuration management using Pydantic settings."""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List
from functools import lru_cache


class HistorySettings(BaseSettings):
    """Durable history storage configuration."""

    storage_dir: str = Field("~/.promptimize", alias="PROMPTIMIZE_STORAGE_DIR")
    storage_key: str = Field("promptimize.history", alias="PROMPTIMIZE_STORAGE_KEY")

    model_config = {"env_prefix": "", "extra": "ignore", "populate_by_name": True}


class EnhancementSettings(BaseSettings):
    """Enhancement module configuration."""

    improve_delay: float = Field(1.5, ge=0.0, alias="PROMPTIMIZE_IMPROVE_DELAY")

    model_config = {"env_prefix": "", "extra": "ignore", "populate_by_name": True}


class ShareSettings(BaseSettings):
    """Share link configuration."""

    base_url: str = Field("http://localhost:8000/", alias="PROMPTIMIZE_SHARE_URL")
    param: str = Field("share", alias="PROMPTIMIZE_SHARE_PARAM")

    model_config = {"env_prefix": "", "extra": "ignore", "populate_by_name": True}


class APISettings(BaseSettings):
    """API server configuration."""

    host: str = Field("0.0.0.0", alias="PROMPTIMIZE_API_HOST")
    port: int = Field(8000, alias="PROMPTIMIZE_API_PORT")
    debug: bool = Field(False, alias="PROMPTIMIZE_DEBUG")
    cors_origins: List[str] = Field(["*"], alias="PROMPTIMIZE_CORS_ORIGINS")

    model_config = {"env_prefix": "", "extra": "ignore", "populate_by_name": True}


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: str = Field("WARNING", alias="PROMPTIMIZE_LOG_LEVEL")
    format: str = Field("text", alias="PROMPTIMIZE_LOG_FORMAT")

    model_config = {"env_prefix": "", "extra": "ignore", "populate_by_name": True}


class Settings(BaseSettings):
    """Root configuration aggregating all settings."""

    history: HistorySettings = Field(default_factory=HistorySettings)
    enhancement: EnhancementSettings = Field(default_factory=EnhancementSettings)
    share: ShareSettings = Field(default_factory=ShareSettings)
    api: APISettings = Field(default_factory=APISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {
        "env_file": ".env",
        "env_nested_delimiter": "__",
        "extra": "ignore"
    }


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reload_settings() -> Settings:
    """Reload settings (clears cache)."""
    get_settings.cache_clear()
    return get_settings()
