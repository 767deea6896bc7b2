"""Shared fixtures for the pattern catalog tests."""
import logging
import os
from unittest.mock import patch

import pytest

from gof_patterns.domain.catalog import PatternCategory, PatternInfo
from gof_patterns.infrastructure.registry import PatternRegistry, load_builtin_patterns

CONFIG_ENV_VARS = (
    "GOF_PATTERNS_CONFIG",
    "GOF_PATTERNS_LOG_LEVEL",
    "GOF_PATTERNS_LOG_DESTINATION",
    "GOF_PATTERNS_OUTPUT_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_config_environment():
    """Keep developer environment variables out of configuration tests."""
    cleaned = {k: v for k, v in os.environ.items() if k not in CONFIG_ENV_VARS}
    with patch.dict(os.environ, cleaned, clear=True):
        yield


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging replaces root handlers; put the originals back afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def builtin_registry() -> PatternRegistry:
    """The default registry with every built-in pattern loaded."""
    return load_builtin_patterns()


@pytest.fixture
def registry() -> PatternRegistry:
    """A fresh, empty registry."""
    return PatternRegistry()


@pytest.fixture
def sample_info() -> PatternInfo:
    return PatternInfo(
        name="sample",
        title="Sample",
        category=PatternCategory.STRUCTURAL,
        intent="A pattern used by the tests.",
    )
