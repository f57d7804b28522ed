"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - The listening port is a constant, not a setting (fixed at 8080)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box with no environment
    - TOOLKIT_ prefix so generic names like LOG_LEVEL from other tools are not picked up
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

HOST = "0.0.0.0"
PORT = 8080

# Levels both stdlib logging and uvicorn understand
LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="TOOLKIT_", case_sensitive=False,
    )

    # Service identity
    service_name: str = "go-beginner-toolkit"
    api_version: str = "1.0.0"

    # Routing — True keeps the root route answering every unmatched path
    catch_all_home: bool = True

    # Startup
    banner_delay_seconds: float = Field(default=0.1, ge=0)

    # Transport — read/write bound each request, idle bounds keep-alive connections
    read_timeout_seconds: float = Field(default=10, gt=0)
    write_timeout_seconds: float = Field(default=10, gt=0)
    idle_timeout_seconds: int = Field(default=30, gt=0)

    # Observability
    log_level: LogLevel = "INFO"
    log_format: Literal["json", "text"] = "text"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            v = v.strip().upper()
            return LOG_LEVEL_ALIASES.get(v, v)
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
