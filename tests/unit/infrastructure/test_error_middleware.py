"""Tests for the CLI error middleware."""

import io
import json

from gof_patterns.domain.exceptions import PatternNotFoundError, VariantNotFoundError
from gof_patterns.infrastructure.error import ErrorMiddleware, build_error_response


def test_build_error_response_for_catalog_error():
    response = build_error_response(VariantNotFoundError("adapter", "x", ["canonical"]))
    assert response == {
        "error": "VariantNotFoundError",
        "message": "Variant 'adapter/x' not found",
        "details": {"available_variants": ["canonical"]},
    }


def test_build_error_response_for_unexpected_error():
    response = build_error_response(KeyError("boom"))
    assert response["error"] == "UnexpectedError"
    assert response["details"] == {"type": "KeyError"}


class TestErrorMiddleware:

    def setup_method(self):
        self.stream = io.StringIO()
        self.middleware = ErrorMiddleware(stream=self.stream)

    def test_passes_through_exit_code(self):
        handler = self.middleware.wrap_script_handler(lambda: 0)
        assert handler() == 0
        assert self.stream.getvalue() == ""

    def test_catalog_error_becomes_json(self):
        def handler():
            raise PatternNotFoundError("visitor")

        assert self.middleware.wrap_script_handler(handler)() == 1
        document = json.loads(self.stream.getvalue())
        assert document["error"] == "PatternNotFoundError"
        assert document["message"] == "Pattern 'visitor' not found"

    def test_unexpected_error_becomes_json(self):
        def handler():
            raise RuntimeError("kaput")

        assert self.middleware.wrap_script_handler(handler)() == 1
        assert json.loads(self.stream.getvalue())["message"] == "kaput"
