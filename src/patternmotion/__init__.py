"""patternmotion - Reproduce a template curve between any two points.

patternmotion takes a template path (an arc, a zig-zag, an L) and produces
the motion curve between an arbitrary start and end point that traces the
same shape, scaled and rotated to fit.

Example:
    $ patternmotion path 0 0 0 10 --pattern "M0,0 L0,1 L1,1"

This prints the L-shaped path running from (0, 0) to (0, 10) as SVG path data.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

from patternmotion.core import PathMeasure, PathMotion, PatternMotion, StraightMotion
from patternmotion.domain import Curve
from patternmotion.exceptions import (
    InvalidTemplateError,
    MissingTemplateDataError,
    PathDataError,
    PatternMotionError,
)
from patternmotion.io import format_path_data, parse_path_data

__all__ = [
    "Curve",
    "InvalidTemplateError",
    "MissingTemplateDataError",
    "PathDataError",
    "PathMeasure",
    "PathMotion",
    "PatternMotion",
    "PatternMotionError",
    "StraightMotion",
    "__author__",
    "__version__",
    "format_path_data",
    "parse_path_data",
]
