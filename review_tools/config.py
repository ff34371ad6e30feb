"""Configuration and settings for review tools."""

import os
from functools import lru_cache

from pydantic import BaseModel, Field

DEFAULT_EXCLUDE_FILES = ("dist", "bun.lock")


def _exclude_from_env() -> list[str]:
    raw = os.getenv("REVIEW_TOOLS_EXCLUDE")
    if raw is None:
        return list(DEFAULT_EXCLUDE_FILES)
    return [name.strip() for name in raw.split(",") if name.strip()]


class Settings(BaseModel):
    """Application settings loaded from environment variables."""

    # Paths skipped by list_changes (exact match against git's path)
    exclude_files: list[str] = Field(default_factory=_exclude_from_env)

    # Review documents
    default_review_title: str = Field(
        default_factory=lambda: os.getenv("REVIEW_TOOLS_REVIEW_TITLE", "Code Review")
    )

    log_level: str = Field(
        default_factory=lambda: os.getenv("REVIEW_TOOLS_LOG_LEVEL", "WARNING").upper()
    )

    model_config = {"extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    """
    Get the global settings instance (cached).

    Settings are loaded from environment variables:
    - REVIEW_TOOLS_EXCLUDE: Comma-separated paths to skip (dist,bun.lock)
    - REVIEW_TOOLS_REVIEW_TITLE: Default review document title
    - REVIEW_TOOLS_LOG_LEVEL: Logging level for the CLI (WARNING)
    """
    return Settings()


def reload_settings() -> Settings:
    """Force reload settings (clears cache)."""
    get_settings.cache_clear()
    return get_settings()
