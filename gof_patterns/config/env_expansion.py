"""Environment variable expansion for configuration values."""
import os
import re
from typing import Any, Dict

# ${VAR:default} form; $VAR and ${VAR} are left to os.path.expandvars
_DEFAULT_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*):([^}]*)\}")


def _expand_string(value: str) -> str:
    def replace(match: "re.Match[str]") -> str:
        return os.environ.get(match.group(1), match.group(2))

    return os.path.expandvars(_DEFAULT_PATTERN.sub(replace, value))


def expand_env_vars(value: Any) -> Any:
    """
    Expand environment variables in a configuration value.

    Strings support ``$VAR``, ``${VAR}`` and ``${VAR:default}``. Dicts and
    lists are expanded recursively. Unknown variables without a default are
    left untouched and other types are returned unchanged.

    Args:
        value: Value to expand

    Returns:
        Expanded value
    """
    if isinstance(value, str):
        return _expand_string(value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables throughout a configuration dictionary."""
    return expand_env_vars(config)
