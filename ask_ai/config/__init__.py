"""Configuration module for the Ask AI action."""

from ask_ai.config.settings import (
    HttpSettings,
    LogSettings,
    Settings,
    configure,
    get_settings,
    settings,
)

__all__ = [
    "HttpSettings",
    "LogSettings",
    "Settings",
    "configure",
    "get_settings",
    "settings",
]
