"""Exception hierarchy for the pattern catalog."""
from typing import Any, List, Optional


class PatternCatalogError(Exception):
    """Base exception for all catalog errors."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(PatternCatalogError):
    """Raised when an argument or a domain value is invalid."""
    pass


class ConfigurationError(PatternCatalogError):
    """Raised when there's an issue with configuration."""
    pass


class RegistrationError(PatternCatalogError):
    """Raised when a pattern or a demo cannot be registered."""
    pass


class ResourceNotFoundError(PatternCatalogError):
    """Raised when a requested resource cannot be found."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} '{resource_id}' not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class PatternNotFoundError(ResourceNotFoundError):
    """Raised when no pattern is registered under the requested name."""
    def __init__(self, pattern: str):
        super().__init__("Pattern", pattern)
        self.pattern = pattern


class VariantNotFoundError(ResourceNotFoundError):
    """Raised when a pattern has no demo for the requested variant."""
    def __init__(self, pattern: str, variant: str, available: Optional[List[str]] = None):
        super().__init__("Variant", f"{pattern}/{variant}")
        self.pattern = pattern
        self.variant = variant
        self.available = available or []
        self.details = {"available_variants": self.available}


class DemoExecutionError(PatternCatalogError):
    """Raised when a demo fails while running."""
    def __init__(self, pattern: str, variant: str, reason: str):
        super().__init__(f"Demo {pattern}/{variant} failed: {reason}")
        self.pattern = pattern
        self.variant = variant
