"""
Catalog Service - entry point for browsing and running pattern demos.

This service sits between the CLI and the pattern registry. It resolves
pattern names and variants, runs demos while capturing what they print, and
converts demo failures into domain errors.
"""
import io
import time
from contextlib import redirect_stdout
from typing import Any, Dict, List, Optional

from gof_patterns.config.schemas import CatalogConfig
from gof_patterns.domain.catalog import DemoResult, PatternCategory, PatternInfo
from gof_patterns.domain.exceptions import DemoExecutionError
from gof_patterns.infrastructure.logging.logger import get_logger
from gof_patterns.infrastructure.registry import PatternRegistry, load_builtin_patterns


class CatalogService:
    """
    Browse the pattern catalog and run demos.

    Uses the default registry, populated with the built-in patterns, unless a
    registry is injected.
    """

    def __init__(
        self,
        registry: Optional[PatternRegistry] = None,
        config: Optional[CatalogConfig] = None,
    ):
        """
        Initialize the catalog service.

        Args:
            registry: Pattern registry to read from
            config: Catalog configuration (default variant and output settings)
        """
        self._registry = registry if registry is not None else load_builtin_patterns()
        self._config = config or CatalogConfig()
        self._logger = get_logger(__name__)

    @property
    def registry(self) -> PatternRegistry:
        return self._registry

    def list_patterns(self, category: Optional[str] = None) -> List[PatternInfo]:
        """
        List registered patterns.

        Args:
            category: Optional category name to filter on

        Returns:
            Pattern metadata ordered by category

        Raises:
            ValidationError: If the category is unknown
        """
        parsed = PatternCategory.parse(category) if category else None
        return self._registry.list_patterns(parsed)

    def describe(self, name: str) -> Dict[str, Any]:
        """Describe a pattern together with its demo variants."""
        info = self._registry.get_pattern(name)
        description = info.model_dump(mode="json")
        description["variants"] = [
            {
                "name": variant,
                "description": self._registry.get_demo(info.name, variant).description,
            }
            for variant in self._registry.list_variants(info.name)
        ]
        return description

    def resolve_variant(self, name: str, variant: Optional[str] = None) -> str:
        """Pick the variant to run: explicit, configured default, or first registered."""
        info = self._registry.get_pattern(name)
        if variant:
            return self._registry.get_demo(info.name, variant).variant
        variants = self._registry.list_variants(info.name)
        if self._config.default_variant in variants:
            return self._config.default_variant
        return self._registry.get_demo(info.name).variant

    def run(self, name: str, variant: Optional[str] = None) -> DemoResult:
        """
        Run one demo and capture its console output.

        Args:
            name: Pattern name
            variant: Demo variant; see resolve_variant for the default

        Returns:
            Demo result with the captured output

        Raises:
            PatternNotFoundError: If the pattern is unknown
            VariantNotFoundError: If the variant is unknown
            DemoExecutionError: If the demo raises
        """
        info = self._registry.get_pattern(name)
        chosen = self.resolve_variant(info.name, variant)
        registration = self._registry.get_demo(info.name, chosen)

        self._logger.info("Running demo", pattern=info.name, variant=chosen)
        buffer = io.StringIO()
        start = time.perf_counter()
        try:
            with redirect_stdout(buffer):
                registration.run()
        except Exception as e:
            self._logger.error("Demo failed", pattern=info.name, variant=chosen, error=str(e))
            raise DemoExecutionError(info.name, chosen, str(e)) from e
        duration_ms = (time.perf_counter() - start) * 1000

        self._logger.debug("Demo finished", pattern=info.name, variant=chosen, duration_ms=duration_ms)
        return DemoResult(
            pattern=info.name,
            variant=chosen,
            output=buffer.getvalue(),
            duration_ms=duration_ms,
        )

    def run_variants(self, name: str) -> List[DemoResult]:
        """Run every variant of one pattern in registration order."""
        info = self._registry.get_pattern(name)
        return [self.run(info.name, variant) for variant in self._registry.list_variants(info.name)]

    def run_all(self, category: Optional[str] = None) -> List[DemoResult]:
        """Run every variant of every pattern, optionally limited to a category."""
        results: List[DemoResult] = []
        for info in self.list_patterns(category):
            results.extend(self.run_variants(info.name))
        self._logger.info("Ran demos", count=len(results), category=category)
        return results
