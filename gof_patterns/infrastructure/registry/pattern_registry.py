"""Pattern Registry - registry pattern for pattern metadata and demo functions."""
import importlib
import threading
from typing import Callable, Dict, List, Optional

from gof_patterns.domain.catalog import PatternCategory, PatternInfo, normalize_pattern_name
from gof_patterns.domain.exceptions import (
    PatternNotFoundError,
    RegistrationError,
    VariantNotFoundError,
)
from gof_patterns.infrastructure.logging.logger import get_logger

DemoFunction = Callable[[], None]

BUILTIN_PATTERN_MODULES = [
    "gof_patterns.creational.abstract_factory",
    "gof_patterns.creational.builder",
    "gof_patterns.creational.factory_method",
    "gof_patterns.creational.prototype",
    "gof_patterns.structural.adapter",
    "gof_patterns.structural.bridge",
    "gof_patterns.structural.composite",
    "gof_patterns.structural.decorator",
    "gof_patterns.structural.flyweight",
    "gof_patterns.structural.proxy",
    "gof_patterns.behavioral.chain_of_responsibility",
    "gof_patterns.behavioral.command",
    "gof_patterns.behavioral.iterator",
    "gof_patterns.behavioral.mediator",
]

_CATEGORY_ORDER = list(PatternCategory)


class DemoRegistration:
    """Demo registration container."""

    def __init__(self, pattern: str, variant: str, func: DemoFunction, description: str = ""):
        self.pattern = pattern
        self.variant = variant
        self.func = func
        self.description = description or (func.__doc__ or "").strip().split("\n")[0]

    def run(self) -> None:
        """Run the demo function."""
        self.func()

    def __repr__(self) -> str:
        return f"DemoRegistration(pattern={self.pattern!r}, variant={self.variant!r})"


class PatternRegistry:
    """
    Registry of design patterns and their runnable demos.

    Patterns are keyed by slug. Each pattern keeps its demo variants in
    registration order; the first one registered is the default.
    """

    def __init__(self):
        self._patterns: Dict[str, PatternInfo] = {}
        self._demos: Dict[str, Dict[str, DemoRegistration]] = {}
        self._lock = threading.RLock()
        self._logger = get_logger(__name__)

    def register_pattern(self, info: PatternInfo) -> PatternInfo:
        """
        Register pattern metadata.

        Args:
            info: Pattern metadata

        Returns:
            The registered metadata

        Raises:
            RegistrationError: If the pattern is already registered
        """
        with self._lock:
            if info.name in self._patterns:
                raise RegistrationError(f"Pattern '{info.name}' is already registered")
            self._patterns[info.name] = info
            self._demos[info.name] = {}
        self._logger.debug("Registered pattern", pattern=info.name, category=info.category.value)
        return info

    def register_demo(
        self, pattern: str, variant: str, func: DemoFunction, description: str = ""
    ) -> DemoRegistration:
        """
        Register a demo variant for an already registered pattern.

        Raises:
            RegistrationError: If the pattern is unknown or the variant exists
        """
        name = normalize_pattern_name(pattern)
        with self._lock:
            if name not in self._patterns:
                raise RegistrationError(
                    f"Cannot register demo '{variant}' for unknown pattern '{name}'"
                )
            variants = self._demos[name]
            if variant in variants:
                raise RegistrationError(
                    f"Demo '{variant}' is already registered for pattern '{name}'"
                )
            registration = DemoRegistration(name, variant, func, description)
            variants[variant] = registration
        self._logger.debug("Registered demo", pattern=name, variant=variant)
        return registration

    def is_registered(self, pattern: str) -> bool:
        return normalize_pattern_name(pattern) in self._patterns

    def get_pattern(self, pattern: str) -> PatternInfo:
        """Get pattern metadata by name."""
        name = normalize_pattern_name(pattern)
        try:
            return self._patterns[name]
        except KeyError:
            raise PatternNotFoundError(name) from None

    def list_variants(self, pattern: str) -> List[str]:
        """Get the demo variants of a pattern in registration order."""
        info = self.get_pattern(pattern)
        return list(self._demos[info.name])

    def get_demo(self, pattern: str, variant: Optional[str] = None) -> DemoRegistration:
        """
        Get a demo registration.

        Args:
            pattern: Pattern name
            variant: Variant name; the first registered variant when omitted

        Returns:
            Demo registration

        Raises:
            PatternNotFoundError: If the pattern is unknown
            VariantNotFoundError: If the pattern has no such variant
        """
        info = self.get_pattern(pattern)
        variants = self._demos[info.name]
        if variant is None:
            if not variants:
                raise VariantNotFoundError(info.name, "<default>", [])
            return next(iter(variants.values()))
        try:
            return variants[variant]
        except KeyError:
            raise VariantNotFoundError(info.name, variant, list(variants)) from None

    def list_patterns(self, category: Optional[PatternCategory] = None) -> List[PatternInfo]:
        """List patterns ordered by category, then by registration order."""
        patterns = [
            info for info in self._patterns.values()
            if category is None or info.category == category
        ]
        return sorted(patterns, key=lambda info: _CATEGORY_ORDER.index(info.category))

    def clear_registrations(self) -> None:
        """Clear all registrations (primarily for testing)."""
        with self._lock:
            self._patterns.clear()
            self._demos.clear()


_registry: Optional[PatternRegistry] = None
_registry_lock = threading.Lock()

# Module-level declarations in import order, replayed into a cleared registry
_declarations: List[Callable[[PatternRegistry], None]] = []
_declarations_lock = threading.Lock()


def get_pattern_registry() -> PatternRegistry:
    """Get the default pattern registry instance."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = PatternRegistry()
    return _registry


def _record(declare: Callable[[PatternRegistry], None]) -> None:
    with _declarations_lock:
        _declarations.append(declare)


def register_pattern(info: PatternInfo) -> PatternInfo:
    """Register pattern metadata in the default registry."""
    registered = get_pattern_registry().register_pattern(info)

    def declare(registry: PatternRegistry) -> None:
        if not registry.is_registered(info.name):
            registry.register_pattern(info)

    _record(declare)
    return registered


def demo(pattern: str, variant: str = "canonical", description: str = "") -> Callable[[DemoFunction], DemoFunction]:
    """
    Decorator registering a client-code function as a demo in the default registry.

    Usage:
        @demo("adapter", "canonical")
        def run_canonical():
            ...
    """

    def decorator(func: DemoFunction) -> DemoFunction:
        get_pattern_registry().register_demo(pattern, variant, func, description)

        def declare(registry: PatternRegistry) -> None:
            if variant not in registry.list_variants(pattern):
                registry.register_demo(pattern, variant, func, description)

        _record(declare)
        return func

    return decorator


def load_builtin_patterns() -> PatternRegistry:
    """
    Import every built-in pattern module so its registrations run.

    Modules already imported do not run again, so declarations missing from
    the default registry (after clear_registrations) are replayed in their
    original order.
    """
    for module_name in BUILTIN_PATTERN_MODULES:
        importlib.import_module(module_name)

    registry = get_pattern_registry()
    with _declarations_lock:
        declarations = list(_declarations)
    for declare in declarations:
        declare(registry)
    return registry
