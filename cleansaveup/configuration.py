"""Mini README: Centralised configuration for the CleanSaveUp planner.

Structure:
    * CleanSaveUpSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Environment variables prefixed with ``CLEANSAVEUP_`` (or a local ``.env``
    file) override the defaults a new budget session starts with, as well as
    the dashboard host and port. Settings are validated once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings

FALLBACK_GOAL_NAME = "Dream Trip"


class CleanSaveUpSettings(BaseSettings):
    """Runtime configuration for the planner and its dashboard."""

    environment: str = Field(
        "development",
        description="Environment label controlling reload and logging behaviour.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the command line launcher.",
    )
    default_savings_rate: float = Field(
        35.0,
        description="Savings rate percentage a new session starts with.",
        ge=0,
        le=100,
    )
    default_goal_name: str = Field(
        FALLBACK_GOAL_NAME,
        description="Goal name a new session starts with.",
    )
    default_goal_duration_months: int = Field(
        12,
        description="Goal horizon in months a new session starts with.",
        ge=1,
    )
    currency_symbol: str = Field(
        "$",
        description="Symbol prefixed to formatted amounts on the dashboard.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the dashboard to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the dashboard exposes.",
        ge=1,
        le=65535,
    )

    class Config:
        env_prefix = "CLEANSAVEUP_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level")
    def _normalise_level(cls, value: str) -> str:
        """Accept any casing of the standard logging level names."""

        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {value}")
        return level

    @validator("default_goal_name")
    def _goal_name_fallback(cls, value: str) -> str:
        """Blank goal names fall back to the stock goal label."""

        return value.strip() or FALLBACK_GOAL_NAME


@lru_cache()
def get_settings() -> CleanSaveUpSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return CleanSaveUpSettings()
