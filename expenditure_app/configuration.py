"""Mini README: Centralised configuration for the expenditure tracker.

Structure:
    * ExpenditureSettings - Pydantic settings model read from the environment.
    * get_settings - cached accessor so validation runs once per process.

Usage:
    Every value can be overridden with an ``EXPENDITURE_`` prefixed
    environment variable or a local ``.env`` file, for example
    ``EXPENDITURE_INTERFACE_PORT=9000`` or ``EXPENDITURE_CURRENCY_LABEL=KES``.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExpenditureSettings(BaseSettings):
    """Runtime configuration for the expenditure tracker."""

    model_config = SettingsConfigDict(
        env_prefix="EXPENDITURE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label; 'production' disables auto-reload in the run command.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface the JSON interface binds to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the JSON interface listens on.",
        ge=1,
        le=65535,
    )
    currency_label: str = Field(
        "Ksh",
        description="Label printed before every amount, e.g. 'Ksh 350'.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name (DEBUG, INFO, WARNING, ...).",
    )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @field_validator("environment")
    @classmethod
    def _normalise_environment(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("currency_label")
    @classmethod
    def _strip_currency_label(cls, value: str) -> str:
        """Reject blank labels so formatted totals never start with a space."""

        stripped = value.strip()
        if not stripped:
            raise ValueError("currency_label must not be blank")
        return stripped

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        """Ensure the level name is one ``logging`` understands."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalised


@lru_cache()
def get_settings() -> ExpenditureSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return ExpenditureSettings()
