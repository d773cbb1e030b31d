from .config_manager import (
    ConfigManager,
    get_config,
    init_config,
    ConfigValidationError,
    Environment,
)
from .logging_setup import configure_logging

__all__ = [
    "ConfigManager",
    "get_config",
    "init_config",
    "ConfigValidationError",
    "Environment",
    "configure_logging",
]
