"""Tests for the catalog service."""

import pytest

from gof_patterns.application.catalog_service import CatalogService
from gof_patterns.config.schemas import CatalogConfig
from gof_patterns.domain.catalog import PatternCategory, PatternInfo
from gof_patterns.domain.exceptions import (
    DemoExecutionError,
    PatternNotFoundError,
    ValidationError,
    VariantNotFoundError,
)
from gof_patterns.infrastructure.registry import PatternRegistry


def hello():
    """Say hello."""
    print("hello")


def broken():
    raise ValueError("boom")


@pytest.fixture
def service() -> CatalogService:
    registry = PatternRegistry()
    registry.register_pattern(PatternInfo(
        name="greeter", title="Greeter", category=PatternCategory.CREATIONAL, intent="Greets.",
    ))
    registry.register_demo("greeter", "example", hello)
    registry.register_demo("greeter", "canonical", lambda: print("canonical"), "The canonical one")
    registry.register_pattern(PatternInfo(
        name="faulty", title="Faulty", category=PatternCategory.BEHAVIORAL, intent="Fails.",
    ))
    registry.register_demo("faulty", "example", broken)
    return CatalogService(registry=registry)


class TestCatalogService:
    """Test listing, describing and running demos."""

    def test_list_patterns(self, service):
        assert [p.name for p in service.list_patterns()] == ["greeter", "faulty"]
        assert [p.name for p in service.list_patterns("behavioral")] == ["faulty"]

    def test_list_unknown_category(self, service):
        with pytest.raises(ValidationError):
            service.list_patterns("functional")

    def test_describe(self, service):
        description = service.describe("Greeter")
        assert description["name"] == "greeter"
        assert description["category"] == "creational"
        assert description["variants"] == [
            {"name": "example", "description": "Say hello."},
            {"name": "canonical", "description": "The canonical one"},
        ]

    def test_run_prefers_configured_default_variant(self, service):
        result = service.run("greeter")
        assert result.variant == "canonical"
        assert result.output == "canonical\n"
        assert result.duration_ms >= 0

    def test_run_falls_back_to_first_variant(self, service):
        other = CatalogService(registry=service.registry, config=CatalogConfig(default_variant="none"))
        assert other.run("greeter").variant == "example"

    def test_run_explicit_variant(self, service, capsys):
        result = service.run("greeter", "example")
        assert result.lines == ["hello"]
        # Demo output is captured, not printed
        assert capsys.readouterr().out == ""

    def test_run_unknown_variant(self, service):
        with pytest.raises(VariantNotFoundError):
            service.run("greeter", "missing")

    def test_run_unknown_pattern(self, service):
        with pytest.raises(PatternNotFoundError):
            service.run("visitor")

    def test_demo_failure_is_wrapped(self, service):
        with pytest.raises(DemoExecutionError, match="Demo faulty/example failed: boom") as exc_info:
            service.run("faulty")
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_run_variants(self, service):
        results = service.run_variants("greeter")
        assert [r.variant for r in results] == ["example", "canonical"]

    def test_run_all_by_category(self, service):
        results = service.run_all("creational")
        assert [(r.pattern, r.variant) for r in results] == [
            ("greeter", "example"),
            ("greeter", "canonical"),
        ]


class TestBuiltinCatalog:
    """Every built-in demo runs cleanly."""

    def setup_method(self):
        self.service = CatalogService()

    def test_run_all(self):
        results = self.service.run_all()
        assert len(results) == 26
        assert all(result.output for result in results)

    def test_builder_has_no_canonical_variant(self):
        assert self.service.run("builder").variant == "example"

    def test_run_by_display_name(self):
        result = self.service.run("Chain of Responsibility", "request-validation")
        assert result.lines[0] == "Request valid, we can now process the order"
