"""Configuration loading - defaults, config file and environment overrides."""
import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from gof_patterns.config.env_expansion import expand_config_env_vars
from gof_patterns.config.schemas import AppConfig
from gof_patterns.domain.exceptions import ConfigurationError

CONFIG_PATH_ENV = "GOF_PATTERNS_CONFIG"

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "logging": {
        "level": "${GOF_PATTERNS_LOG_LEVEL:WARNING}",
        "destination": "stderr",
        "file_path": None,
        "max_size_mb": 10,
        "backup_count": 5,
        "renderer": "console",
    },
    "catalog": {
        "default_format": "text",
        "default_variant": "canonical",
        "show_banner": True,
    },
}

# Environment variable -> dotted config key
ENV_OVERRIDES = {
    "GOF_PATTERNS_LOG_LEVEL": "logging.level",
    "GOF_PATTERNS_LOG_DESTINATION": "logging.destination",
    "GOF_PATTERNS_OUTPUT_FORMAT": "catalog.default_format",
}


class ConfigurationLoader:
    """Builds the raw configuration dictionary and the typed AppConfig."""

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Load configuration from defaults, an optional file and the environment.

        Args:
            config_path: Optional JSON or YAML file. Falls back to
                $GOF_PATTERNS_CONFIG when not given.

        Returns:
            Merged and env-expanded configuration dictionary

        Raises:
            ConfigurationError: If the file is missing or cannot be parsed
        """
        config = cls._deep_copy(DEFAULT_CONFIG)

        path = config_path or os.environ.get(CONFIG_PATH_ENV)
        if path:
            cls._merge(config, cls._load_file(Path(path)))

        for env_var, key in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value:
                cls._set_dotted(config, key, value)

        return expand_config_env_vars(config)

    @classmethod
    def create_app_config(cls, raw_config: Dict[str, Any]) -> AppConfig:
        """Validate a raw configuration dictionary into AppConfig."""
        try:
            return AppConfig.model_validate(raw_config)
        except PydanticValidationError as e:
            raise ConfigurationError(
                "Invalid configuration",
                details=[err["msg"] for err in e.errors()],
            ) from e

    @staticmethod
    def _load_file(path: Path) -> Dict[str, Any]:
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")
        try:
            with path.open("r", encoding="utf-8") as f:
                if path.suffix in (".yml", ".yaml"):
                    data = yaml.safe_load(f) or {}
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot parse configuration file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        return data

    @classmethod
    def _merge(cls, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                cls._merge(base[key], value)
            else:
                base[key] = value

    @staticmethod
    def _set_dotted(config: Dict[str, Any], key: str, value: Any) -> None:
        *parents, leaf = key.split(".")
        node = config
        for part in parents:
            node = node.setdefault(part, {})
            if not isinstance(node, dict):
                raise ConfigurationError(f"Configuration section '{part}' must be a mapping")
        node[leaf] = value

    @staticmethod
    def _deep_copy(config: Dict[str, Any]) -> Dict[str, Any]:
        return copy.deepcopy(config)
