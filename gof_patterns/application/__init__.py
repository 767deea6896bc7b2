"""Application layer - use cases exposed to the CLI."""

from gof_patterns.application.catalog_service import CatalogService

__all__ = ["CatalogService"]
