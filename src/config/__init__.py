"""Configuration module."""

from src.config.logging import (
    bind_log_context,
    clear_log_context,
    configure_logging,
    get_logger,
)
from src.config.settings import Settings, get_settings, reset_settings

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "get_logger",
    "bind_log_context",
    "clear_log_context",
]
