"""
Tests for common utility functions.
"""

from ssm_migrate.common import MASKED_VALUE, format_migration_summary, format_parameter


class TestCommon:
    """Test common utility functions."""

    def test_format_parameter_plain(self):
        result = format_parameter("/a", "debug", "String", "log level")
        assert result == "name: /a, value: debug, type: String, description: log level"

    def test_format_parameter_string_list(self):
        result = format_parameter("/a", "x,y", "StringList", "")
        assert "value: x,y" in result

    def test_format_parameter_masks_secure_string(self):
        result = format_parameter("/a", "hunter2", "SecureString", "password")
        assert "hunter2" not in result
        assert f"value: {MASKED_VALUE}" in result

    def test_format_migration_summary(self):
        summary = {'total_pairs': 3, 'copied': 3, 'copied_params': {}}
        assert format_migration_summary(summary) == "Copied 3 of 3 parameters"

    def test_format_migration_summary_empty(self):
        summary = {'total_pairs': 0, 'copied': 0, 'copied_params': {}}
        assert format_migration_summary(summary) == "No parameters to migrate."
