"""Logging infrastructure."""

from gof_patterns.infrastructure.logging.logger import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
