"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from fpds.config.defaults import get_default_config
from fpds.config.loader import ConfigLoader
from fpds.config.validation import ConfigValidator
from fpds.errors import ConfigurationError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.structures.strict_empty is False
        assert config.logging.level == "INFO"
        assert config.demo.sample_list == (1, 2, 3, 4, 5)


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, config_dir) -> None:
        """Test config merging without a settings file."""
        loader = ConfigLoader.create(config_dir)
        config = loader.merge_config()

        assert config["structures"]["strict_empty"] is False
        assert config["demo"]["drop_count"] == 2

    def test_settings_file_overrides_defaults(self, config_dir) -> None:
        """Test that settings.yaml beats the defaults."""
        (config_dir / "settings.yaml").write_text(
            "structures:\n  strict_empty: true\ndemo:\n  sample_list: [3, 1]\n"
        )
        config = ConfigLoader.create(config_dir).load()

        assert config.structures.strict_empty is True
        assert config.demo.sample_list == (3, 1)
        assert config.demo.drop_count == 2

    def test_overrides_beat_settings_file(self, config_dir) -> None:
        """Test the 3-tier precedence order."""
        (config_dir / "settings.yaml").write_text("logging:\n  level: DEBUG\n")
        config = ConfigLoader.create(config_dir).load({"logging": {"level": "ERROR"}})

        assert config.logging.level == "ERROR"
        assert config.logging.format_json is False

    def test_empty_settings_file(self, config_dir) -> None:
        """Test that an empty settings.yaml is treated as no overrides."""
        (config_dir / "settings.yaml").write_text("")
        assert ConfigLoader.create(config_dir).load() == get_default_config()

    def test_non_mapping_settings_file(self, config_dir) -> None:
        """Test that a settings.yaml holding a list is rejected."""
        (config_dir / "settings.yaml").write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError):
            ConfigLoader.create(config_dir).load()

    def test_malformed_settings_file(self, config_dir) -> None:
        """Test that a YAML syntax error surfaces as ConfigurationError."""
        (config_dir / "settings.yaml").write_text("demo: [unclosed\n")
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(config_dir).load()

        assert exc_info.value.context["path"].endswith("settings.yaml")

    def test_invalid_values_raise(self, config_dir) -> None:
        """Test that load() validates the merged configuration."""
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(config_dir).load({"demo": {"drop_count": -1}})

        assert [e.field for e in exc_info.value.errors] == ["drop_count"]

    def test_shipped_settings_are_valid(self) -> None:
        """Test the repository's own config/settings.yaml."""
        config = ConfigLoader.create().load()
        assert config.demo.zip_with_list == (10, 20)


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_defaults(self, config_dir) -> None:
        """Test that the defaults validate cleanly."""
        merged = ConfigLoader.create(config_dir).merge_config()
        assert ConfigValidator.validate_config(merged) == []

    def test_invalid_strict_flag(self) -> None:
        """Test validation of a non-boolean strict_empty."""
        errors = ConfigValidator.validate_structure_params({"strict_empty": "yes"})
        assert len(errors) == 1
        assert errors[0].field == "strict_empty"

    def test_invalid_log_level(self) -> None:
        """Test validation of an unknown log level."""
        errors = ConfigValidator.validate_logging_params({"level": "LOUD"})
        assert len(errors) == 1
        assert errors[0].field == "level"

    def test_lowercase_log_level_accepted(self) -> None:
        """Test that level names are case-insensitive."""
        assert ConfigValidator.validate_logging_params({"level": "debug"}) == []

    def test_invalid_demo_params(self) -> None:
        """Test validation of demo sample values."""
        errors = ConfigValidator.validate_demo_params({
            "sample_list": [1, "two"],
            "drop_count": True,
            "head_value": 1.5,
        })
        assert {e.field for e in errors} == {"sample_list", "drop_count", "head_value"}

    def test_unknown_fields(self) -> None:
        """Test that misspelled sections and fields are reported."""
        errors = ConfigValidator.validate_config({
            "structure": {},
            "demo": {"drop_cnt": 1},
        })
        assert {e.field for e in errors} == {"structure", "demo.drop_cnt"}
