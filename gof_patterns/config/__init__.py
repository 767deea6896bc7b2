"""Configuration package."""

from gof_patterns.config.loader import ConfigurationLoader
from gof_patterns.config.manager import ConfigurationManager, get_config_manager
from gof_patterns.config.schemas import AppConfig, CatalogConfig, LoggingConfig

__all__ = [
    "AppConfig",
    "CatalogConfig",
    "LoggingConfig",
    "ConfigurationLoader",
    "ConfigurationManager",
    "get_config_manager",
]
