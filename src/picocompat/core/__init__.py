"""Core infrastructure: settings, logging and process-wide constants."""

from picocompat.core.config import (
    CompatSettings,
    LoggingSettings,
    TwigSettings,
    load_settings,
)
from picocompat.core.constants import (
    CONFIG_CONSTANT_NAMES,
    LegacyConstants,
    define_config_constants,
    get_constants,
)
from picocompat.core.logging import configure_logging, get_logger

__all__ = [
    # Config
    "CompatSettings",
    "LoggingSettings",
    "TwigSettings",
    "load_settings",
    # Constants
    "CONFIG_CONSTANT_NAMES",
    "LegacyConstants",
    "define_config_constants",
    "get_constants",
    # Logging
    "configure_logging",
    "get_logger",
]
