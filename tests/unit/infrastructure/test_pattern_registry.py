"""Tests for the pattern registry."""

import pytest

from gof_patterns.domain.catalog import PatternCategory, PatternInfo
from gof_patterns.domain.exceptions import (
    PatternNotFoundError,
    RegistrationError,
    VariantNotFoundError,
)
from gof_patterns.infrastructure.registry import (
    DemoRegistration,
    get_pattern_registry,
    load_builtin_patterns,
)
from gof_patterns.infrastructure.registry.pattern_registry import BUILTIN_PATTERN_MODULES


def noop():
    """Does nothing at all."""


def make_info(name: str, category: PatternCategory) -> PatternInfo:
    return PatternInfo(name=name, title=name.title(), category=category, intent="x")


class TestPatternRegistry:
    """Test registration and lookup."""

    def test_register_and_get_pattern(self, registry, sample_info):
        registry.register_pattern(sample_info)

        assert registry.is_registered("Sample")
        assert registry.get_pattern("sample") is sample_info

    def test_duplicate_pattern(self, registry, sample_info):
        registry.register_pattern(sample_info)
        with pytest.raises(RegistrationError, match="already registered"):
            registry.register_pattern(sample_info)

    def test_demo_for_unknown_pattern(self, registry):
        with pytest.raises(RegistrationError, match="unknown pattern"):
            registry.register_demo("ghost", "canonical", noop)

    def test_duplicate_variant(self, registry, sample_info):
        registry.register_pattern(sample_info)
        registry.register_demo("sample", "canonical", noop)
        with pytest.raises(RegistrationError):
            registry.register_demo("sample", "canonical", noop)

    def test_default_variant_is_first_registered(self, registry, sample_info):
        registry.register_pattern(sample_info)
        registry.register_demo("sample", "second", noop)
        registry.register_demo("sample", "first", noop)

        assert registry.get_demo("sample").variant == "second"
        assert registry.list_variants("sample") == ["second", "first"]

    def test_unknown_variant_lists_available(self, registry, sample_info):
        registry.register_pattern(sample_info)
        registry.register_demo("sample", "canonical", noop)

        with pytest.raises(VariantNotFoundError) as exc_info:
            registry.get_demo("sample", "missing")
        assert exc_info.value.available == ["canonical"]

    def test_pattern_without_demos(self, registry, sample_info):
        registry.register_pattern(sample_info)
        with pytest.raises(VariantNotFoundError):
            registry.get_demo("sample")

    def test_unknown_pattern(self, registry):
        with pytest.raises(PatternNotFoundError):
            registry.get_pattern("visitor")

    def test_list_patterns_ordered_by_category(self, registry):
        registry.register_pattern(make_info("mediator", PatternCategory.BEHAVIORAL))
        registry.register_pattern(make_info("proxy", PatternCategory.STRUCTURAL))
        registry.register_pattern(make_info("builder", PatternCategory.CREATIONAL))
        registry.register_pattern(make_info("adapter", PatternCategory.STRUCTURAL))

        names = [info.name for info in registry.list_patterns()]
        assert names == ["builder", "proxy", "adapter", "mediator"]

        structural = registry.list_patterns(PatternCategory.STRUCTURAL)
        assert [info.name for info in structural] == ["proxy", "adapter"]

    def test_clear_registrations(self, registry, sample_info):
        registry.register_pattern(sample_info)
        registry.clear_registrations()
        assert registry.list_patterns() == []


def test_demo_registration_description_from_docstring():
    registration = DemoRegistration("sample", "canonical", noop)
    assert registration.description == "Does nothing at all."


def test_demo_registration_runs_function():
    calls = []
    DemoRegistration("sample", "canonical", lambda: calls.append(1)).run()
    assert calls == [1]


class TestBuiltinPatterns:
    """The default registry holds every built-in pattern."""

    def test_every_module_registers(self, builtin_registry):
        assert len(builtin_registry.list_patterns()) == len(BUILTIN_PATTERN_MODULES)

    def test_load_is_idempotent(self):
        assert load_builtin_patterns() is get_pattern_registry()
        assert len(load_builtin_patterns().list_patterns()) == len(BUILTIN_PATTERN_MODULES)

    def test_load_restores_cleared_registry(self):
        expected = [info.name for info in load_builtin_patterns().list_patterns()]
        get_pattern_registry().clear_registrations()
        assert get_pattern_registry().list_patterns() == []

        registry = load_builtin_patterns()
        assert [info.name for info in registry.list_patterns()] == expected
        assert len(expected) == len(BUILTIN_PATTERN_MODULES)
        assert registry.list_variants("decorator") == ["canonical", "notifier"]

    def test_every_pattern_has_a_demo(self, builtin_registry):
        for info in builtin_registry.list_patterns():
            assert builtin_registry.list_variants(info.name), info.name

    @pytest.mark.parametrize(
        "category, expected",
        [
            (PatternCategory.CREATIONAL, ["abstract-factory", "builder", "factory-method", "prototype"]),
            (PatternCategory.STRUCTURAL,
             ["adapter", "bridge", "composite", "decorator", "flyweight", "proxy"]),
            (PatternCategory.BEHAVIORAL,
             ["chain-of-responsibility", "command", "iterator", "mediator"]),
        ],
    )
    def test_categories(self, builtin_registry, category, expected):
        assert [info.name for info in builtin_registry.list_patterns(category)] == expected
