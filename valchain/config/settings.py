"""Centralized configuration management using pydantic-settings.

This module provides type-safe configuration with environment variable loading,
validation, and sensible defaults for all valchain settings.
"""

from http import HTTPStatus
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    debug_all: bool = Field(
        default=False,
        validation_alias="DEBUG_ALL",
        description="Enable debug logging for all libraries",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level for valchain namespace",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v


class ValidationSettings(BaseSettings):
    """Validation engine configuration."""

    model_config = SettingsConfigDict(env_prefix="VALIDATION_", extra="ignore")

    default_status_code: int = Field(
        default=int(HTTPStatus.BAD_REQUEST),
        description="Status code carried by a ValidationException when none is given",
    )
    locale: str | None = Field(
        default=None,
        description="Locale handed to the translator when rendering messages",
    )
    formatter: Literal["percent", "brace"] = Field(
        default="percent",
        description="Placeholder style of message templates ('%s' or '{0}')",
    )

    @field_validator("default_status_code")
    @classmethod
    def known_status_code(cls, v: int) -> int:
        try:
            HTTPStatus(v)
        except ValueError:
            raise ValueError(f"Unknown HTTP status code: {v}") from None
        return v

    @field_validator("formatter", mode="before")
    @classmethod
    def lowercase_formatter(cls, v: str) -> str:
        if isinstance(v, str):
            return v.lower()
        return v

    @property
    def default_status(self) -> HTTPStatus:
        return HTTPStatus(self.default_status_code)


class Settings(BaseSettings):
    """Root settings class with all nested configurations.

    Usage:
        from valchain.config import get_settings

        settings = get_settings()
        status = settings.validation.default_status
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    validation: ValidationSettings = Field(default_factory=ValidationSettings)


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance.

    Returns:
        The singleton Settings instance with all configuration loaded.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
