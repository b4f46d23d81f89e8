"""
Tests for sorter configuration.
"""

import pytest
from pydantic import ValidationError

from backend.sortbystr import SorterConfig, load_config


class TestSorterConfig:
    """Tests for SorterConfig."""

    def test_defaults(self):
        """Test default settings."""
        config = SorterConfig()
        assert config.default_expression is None
        assert config.warn_on_unknown_direction is True
        assert config.decorate_workers == 0

    def test_invalid_default_expression(self):
        """Test a malformed default expression is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            SorterConfig(default_expression="size ASC DESC")
        assert "default_expression" in str(exc_info.value)

    def test_negative_workers(self):
        """Test decorate_workers cannot be negative."""
        with pytest.raises(ValidationError):
            SorterConfig(decorate_workers=-1)

    def test_from_yaml(self):
        """Test loading settings from YAML content."""
        config = SorterConfig.from_yaml(
            "sorter:\n"
            "  default_expression: year DESC, month\n"
            "  warn_on_unknown_direction: false\n"
            "  decorate_workers: 4\n"
        )
        assert config.default_expression == "year DESC, month"
        assert config.warn_on_unknown_direction is False
        assert config.decorate_workers == 4

    def test_from_empty_yaml(self):
        """Test empty YAML yields defaults."""
        assert SorterConfig.from_yaml("") == SorterConfig()


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file(self, tmp_path):
        """Test a missing file yields defaults."""
        assert load_config(tmp_path / "missing.yaml") == SorterConfig()

    def test_load_file(self, tmp_path):
        """Test loading settings from a file."""
        path = tmp_path / "sorter.yaml"
        path.write_text("sorter:\n  default_expression: size\n", encoding="utf-8")
        assert load_config(path).default_expression == "size"

    def test_file_without_sorter_section(self, tmp_path):
        """Test a file without a sorter section yields defaults."""
        path = tmp_path / "other.yaml"
        path.write_text("other:\n  key: value\n", encoding="utf-8")
        assert load_config(str(path)) == SorterConfig()
