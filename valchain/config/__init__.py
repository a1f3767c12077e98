"""Configuration module for valchain.

This module provides centralized, type-safe configuration management
using pydantic-settings with environment variable loading.

Usage:
    from valchain.config import get_settings

    settings = get_settings()

    # Status code used when an invalid aggregate is raised
    status = settings.validation.default_status

    # Locale handed to translators
    locale = settings.validation.locale
"""

from valchain.config.settings import (
    LoggingSettings,
    Settings,
    ValidationSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "LoggingSettings",
    "Settings",
    "ValidationSettings",
    "get_settings",
    "reset_settings",
]
