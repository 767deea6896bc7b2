"""Error handling infrastructure."""

from gof_patterns.infrastructure.error.error_middleware import ErrorMiddleware, build_error_response

__all__ = ["ErrorMiddleware", "build_error_response"]
