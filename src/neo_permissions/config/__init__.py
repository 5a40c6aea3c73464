"""Configuration management for neo-permissions."""

from .settings import PermissionSettings, get_settings
from .logging_config import LoggingConfig, LogFormat, setup_logging, get_logger

__all__ = [
    "PermissionSettings",
    "get_settings",
    "LoggingConfig",
    "LogFormat",
    "setup_logging",
    "get_logger",
]
