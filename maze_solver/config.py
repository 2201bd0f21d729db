"""Solver configuration using Pydantic settings."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory (parent of the maze_solver package)
BASE_DIR = Path(__file__).resolve().parent.parent

DEFAULT_BASE_URL = "https://challenge.flipboard.com/"
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Solver settings loaded from MAZE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MAZE_",
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Remote maze service
    base_url: str = DEFAULT_BASE_URL
    request_timeout: Optional[float] = None  # seconds; None blocks forever

    # Offline mode: solve a maze loaded from a JSON file instead
    local_maze_file: Optional[str] = None

    # Logging
    log_level: str = "WARNING"

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an absolute http(s) URL and make it end with a slash."""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"MAZE_BASE_URL must be an absolute http(s) URL, got {v!r}")
        if not v.endswith("/"):
            v += "/"
        return v

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("MAZE_REQUEST_TIMEOUT must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
