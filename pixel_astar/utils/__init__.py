"""
Shared utilities: configuration loading and logging setup.
"""

from pixel_astar.utils.config_loader import ConfigManager, SystemConfig, load_config, validate_config
from pixel_astar.utils.logger import SystemLogger, setup_logging, get_logger, log_exceptions

__all__ = [
    # Config
    "ConfigManager",
    "SystemConfig",
    "load_config",
    "validate_config",
    # Logging
    "SystemLogger",
    "setup_logging",
    "get_logger",
    "log_exceptions",
]
