"""Domain layer - catalog models and exceptions."""

from gof_patterns.domain.catalog import (
    DemoResult,
    PatternCategory,
    PatternInfo,
    normalize_pattern_name,
)
from gof_patterns.domain.exceptions import (
    ConfigurationError,
    DemoExecutionError,
    PatternCatalogError,
    PatternNotFoundError,
    RegistrationError,
    ResourceNotFoundError,
    ValidationError,
    VariantNotFoundError,
)

__all__ = [
    "DemoResult",
    "PatternCategory",
    "PatternInfo",
    "normalize_pattern_name",
    "ConfigurationError",
    "DemoExecutionError",
    "PatternCatalogError",
    "PatternNotFoundError",
    "RegistrationError",
    "ResourceNotFoundError",
    "ValidationError",
    "VariantNotFoundError",
]
