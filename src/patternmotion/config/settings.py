"""Configuration settings for patternmotion."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """Logging level names."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class MeasureConfig(BaseModel):
    """Configuration for path measurement.

    Curved segments are flattened into polylines before measuring. The
    tolerance is an absolute distance in curve units, so patterns drawn in a
    unit box need a much smaller value than patterns drawn in pixels.
    """

    flatten_tolerance: float = Field(
        default=1e-4,
        gt=0.0,
        le=10.0,
        description="Maximum distance between a flattened curve and the true curve",
    )
    max_depth: int = Field(
        default=16,
        ge=1,
        le=32,
        description="Maximum recursive subdivisions per Bezier segment",
    )


class PatternConfig(BaseModel):
    """Declarative description of a pattern motion."""

    path_data: str | None = Field(
        default=None,
        description="SVG path data of the motion template",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="File log level (more verbose)",
    )


class PatternMotionSettings(BaseModel):
    """Main application settings."""

    measure: MeasureConfig = Field(default_factory=MeasureConfig)
    pattern: PatternConfig = Field(default_factory=PatternConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PatternMotionSettings:
    """Get default application settings."""
    return PatternMotionSettings()
