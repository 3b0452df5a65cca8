"""Configuration management for patternmotion.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- MeasureConfig: Path flattening and measurement settings
- PatternConfig: Declarative pattern definition (path data)
- LoggingConfig: Logging settings
- LogLevel: Accepted logging level names
- PatternMotionSettings: Main application settings
"""

from patternmotion.config.settings import (
    LogLevel,
    LoggingConfig,
    MeasureConfig,
    PatternConfig,
    PatternMotionSettings,
    get_default_settings,
)

__all__ = [
    "LogLevel",
    "LoggingConfig",
    "MeasureConfig",
    "PatternConfig",
    "PatternMotionSettings",
    "get_default_settings",
]
