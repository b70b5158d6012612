"""Core module exports."""

from covnav.core.errors import (
    ConfigError,
    CovNavError,
    ErrorCode,
    NavigationError,
    ProfileError,
)
from covnav.core.logging import configure_logging, get_logger

__all__ = [
    # Errors
    "ConfigError",
    "CovNavError",
    "ErrorCode",
    "NavigationError",
    "ProfileError",
    # Logging
    "configure_logging",
    "get_logger",
]
