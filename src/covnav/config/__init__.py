"""Config module exports."""

from covnav.config.loader import load_config
from covnav.config.models import CovNavConfig, LoggingConfig, LogOutputConfig, ViewerConfig

__all__ = [
    "load_config",
    "CovNavConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "ViewerConfig",
]
