"""Error middleware for wrapping CLI handlers."""

import functools
import json
import sys
from typing import Any, Callable, Dict, Optional, TextIO

from gof_patterns.domain.exceptions import PatternCatalogError
from gof_patterns.infrastructure.logging.logger import get_logger


def build_error_response(error: Exception) -> Dict[str, Any]:
    """
    Build the JSON error document for an exception.

    Catalog errors report their class name, message and details. Anything
    else is reported as an unexpected error.
    """
    if isinstance(error, PatternCatalogError):
        return {
            "error": type(error).__name__,
            "message": error.message,
            "details": error.details,
        }
    return {
        "error": "UnexpectedError",
        "message": str(error),
        "details": {"type": type(error).__name__},
    }


class ErrorMiddleware:
    """Converts exceptions escaping a handler into an error document and exit code."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._logger = get_logger(__name__)

    def wrap_script_handler(self, script_handler: Callable[..., int]) -> Callable[..., int]:
        """
        Wrap a script handler function with error handling.

        Args:
            script_handler: Handler returning an exit code

        Returns:
            Wrapped handler that prints a JSON error to stderr and returns 1
            when the handler raises
        """

        @functools.wraps(script_handler)
        def wrapped_script_handler(*args, **kwargs) -> int:
            try:
                return script_handler(*args, **kwargs)
            except PatternCatalogError as e:
                self._logger.debug("Handler failed", error=type(e).__name__, message=e.message)
                self._write(build_error_response(e))
                return 1
            except Exception as e:
                self._logger.exception("Unexpected error in handler")
                self._write(build_error_response(e))
                return 1

        return wrapped_script_handler

    def _write(self, response: Dict[str, Any]) -> None:
        stream = self._stream or sys.stderr
        print(json.dumps(response, indent=2, default=str), file=stream)
