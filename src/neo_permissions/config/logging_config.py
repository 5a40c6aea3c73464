"""Centralized logging configuration for neo-permissions.

Provides consistent, configurable logging for hosts embedding the
library, with environment-based control over level and format.
"""

import logging
import logging.config
from enum import Enum
from typing import Any, Dict, Optional

from .settings import PermissionSettings, get_settings


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


class LoggingConfig:
    """Logging configuration manager for the library loggers."""

    ROOT_LOGGER = "neo_permissions"

    @classmethod
    def build_config(cls, settings: PermissionSettings) -> Dict[str, Any]:
        """Build a dictConfig mapping from settings.

        Only the library's own logger tree is configured so that host
        applications keep control of the root logger.
        """
        format_string = FORMAT_STRINGS[LogFormat(settings.log_format)]

        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": settings.log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                cls.ROOT_LOGGER: {
                    "level": settings.log_level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

    @classmethod
    def configure(cls, settings: Optional[PermissionSettings] = None) -> None:
        """Configure logging based on settings (environment by default)."""
        settings = settings or get_settings()
        logging.config.dictConfig(cls.build_config(settings))

        logger = logging.getLogger(__name__)
        logger.debug(
            f"Logging configured: level={settings.log_level}, format={settings.log_format}"
        )


def setup_logging(settings: Optional[PermissionSettings] = None) -> None:
    """Setup logging configuration.

    This is the main entry point for configuring library logging. Hosts
    call it once at startup; importing the package does not configure
    handlers.
    """
    LoggingConfig.configure(settings)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(name)
