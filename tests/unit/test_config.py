"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from patternmotion.config import (
    LogLevel,
    LoggingConfig,
    MeasureConfig,
    PatternConfig,
    PatternMotionSettings,
    get_default_settings,
)


class TestMeasureConfig:
    """Tests for MeasureConfig."""

    def test_defaults(self):
        """Test default flattening settings."""
        config = MeasureConfig()
        assert config.flatten_tolerance == 1e-4
        assert config.max_depth == 16

    def test_tolerance_must_be_positive(self):
        """Test zero tolerance is rejected."""
        with pytest.raises(ValidationError):
            MeasureConfig(flatten_tolerance=0.0)

    def test_depth_bounds(self):
        """Test depth outside bounds is rejected."""
        with pytest.raises(ValidationError):
            MeasureConfig(max_depth=0)
        with pytest.raises(ValidationError):
            MeasureConfig(max_depth=64)


class TestSettings:
    """Tests for aggregated settings."""

    def test_default_settings(self):
        """Test default settings tree."""
        settings = get_default_settings()
        assert isinstance(settings, PatternMotionSettings)
        assert settings.pattern.path_data is None
        assert settings.logging.log_level == "WARNING"
        assert settings.logging.log_file is None

    def test_nested_models(self):
        """Test building settings from nested models."""
        settings = PatternMotionSettings(
            pattern=PatternConfig(path_data="M0,0 L1,1"),
            logging=LoggingConfig(log_level="DEBUG"),
        )
        assert settings.pattern.path_data == "M0,0 L1,1"
        assert settings.logging.log_level == "DEBUG"
        assert settings.measure == MeasureConfig()

    def test_from_dict(self):
        """Test settings validate from plain dictionaries."""
        settings = PatternMotionSettings.model_validate(
            {"measure": {"flatten_tolerance": 0.01}, "pattern": {"path_data": "M0 0H1"}}
        )
        assert settings.measure.flatten_tolerance == 0.01
        assert settings.pattern.path_data == "M0 0H1"


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_levels_are_enum_members(self):
        """Test level names validate into LogLevel."""
        config = LoggingConfig(log_level="INFO")
        assert config.log_level is LogLevel.INFO
        assert config.file_log_level is LogLevel.DEBUG

    def test_unknown_level_rejected(self):
        """Test unknown level names are rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(log_level="FOO")
