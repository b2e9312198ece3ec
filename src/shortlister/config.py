"""Configuration management for Shortlister."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SHORTLISTER_",
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage
    data_dir: Path = Field(
        default=Path(".shortlister"),
        description="Directory holding applications.json and criteria.json",
    )

    # Shortlisting
    auto_shortlist_threshold: int = Field(
        default=70,
        ge=0,
        le=100,
        description="Score at or above which applicants are shortlisted automatically",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
