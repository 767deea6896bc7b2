"""Pattern registry."""

from gof_patterns.infrastructure.registry.pattern_registry import (
    DemoRegistration,
    PatternRegistry,
    demo,
    get_pattern_registry,
    load_builtin_patterns,
    register_pattern,
)

__all__ = [
    "DemoRegistration",
    "PatternRegistry",
    "demo",
    "get_pattern_registry",
    "load_builtin_patterns",
    "register_pattern",
]
