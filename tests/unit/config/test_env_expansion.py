"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from gof_patterns.config.env_expansion import expand_config_env_vars, expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        """Test expansion of simple environment variable."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("$TEST_VAR") == "/test/path"

    def test_expand_braced_env_var_with_subpath(self):
        """Test expansion of braced environment variable with subpath."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("${TEST_VAR}/subdir") == "/test/path/subdir"

    def test_expand_nonexistent_env_var(self):
        """Test that unknown variables are left untouched."""
        assert expand_env_vars("$NONEXISTENT_VAR") == "$NONEXISTENT_VAR"

    def test_default_used_when_unset(self):
        """Test ${VAR:default} falls back to the default."""
        assert expand_env_vars("${NONEXISTENT_VAR:WARNING}") == "WARNING"

    def test_default_ignored_when_set(self):
        """Test ${VAR:default} prefers the environment."""
        with patch.dict(os.environ, {"LEVEL_VAR": "DEBUG"}):
            assert expand_env_vars("${LEVEL_VAR:WARNING}") == "DEBUG"

    def test_empty_default(self):
        assert expand_env_vars("x${NONEXISTENT_VAR:}y") == "xy"

    def test_expand_nested_dict_and_list_values(self):
        """Test recursive expansion through dicts and lists."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {
                "logging": {"file_path": "$TEST_VAR/app.log"},
                "paths": ["$TEST_VAR/a", "plain"],
            }
            assert expand_env_vars(config) == {
                "logging": {"file_path": "/test/path/app.log"},
                "paths": ["/test/path/a", "plain"],
            }

    def test_expand_non_string_values(self):
        """Test that non-string values are returned unchanged."""
        config = {"number": 42, "boolean": True, "none": None}
        assert expand_env_vars(config) == config

    def test_expand_config_env_vars(self):
        with patch.dict(os.environ, {"TEST_VAR": "value"}):
            assert expand_config_env_vars({"key": "$TEST_VAR"}) == {"key": "value"}
