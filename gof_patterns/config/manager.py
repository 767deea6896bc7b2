"""Configuration manager - typed and dot-notation access to configuration."""
from typing import Any, Dict, Optional

from gof_patterns.config.loader import ConfigurationLoader
from gof_patterns.config.schemas import AppConfig, CatalogConfig, LoggingConfig


class ConfigurationManager:
    """Holds the loaded configuration for the application."""

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file
        """
        self.config_path = config_path
        self.raw_config = ConfigurationLoader.load(config_path)
        self._app_config = ConfigurationLoader.create_app_config(self.raw_config)

    @property
    def config(self) -> AppConfig:
        """Get typed application configuration."""
        return self._app_config

    @property
    def logging(self) -> LoggingConfig:
        return self._app_config.logging

    @property
    def catalog(self) -> CatalogConfig:
        return self._app_config.catalog

    def get_raw_config(self) -> Dict[str, Any]:
        """Get a copy of the raw configuration dictionary."""
        return ConfigurationLoader._deep_copy(self.raw_config)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value = self.raw_config
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value."""
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes", "y", "on")
        if isinstance(value, int):
            return value != 0
        return bool(value)

    def get_int(self, key: str, default: int = 0) -> int:
        """Get integer configuration value, falling back on bad input."""
        value = self.get(key, default)
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def get_str(self, key: str, default: str = "") -> str:
        """Get string configuration value."""
        value = self.get(key, default)
        return default if value is None else str(value)

    def reload(self) -> None:
        """Reload configuration from its sources."""
        self.raw_config = ConfigurationLoader.load(self.config_path)
        self._app_config = ConfigurationLoader.create_app_config(self.raw_config)


_default_manager: Optional[ConfigurationManager] = None


def get_config_manager() -> ConfigurationManager:
    """Get the process-wide configuration manager, creating it on first use."""
    global _default_manager
    if _default_manager is None:
        _default_manager = ConfigurationManager()
    return _default_manager
