"""Core algorithms for patternmotion.

This module contains the core algorithms for:

- Path measurement (arc length, position and tangent along a contour)
- Geometry operations (distance, affine normalization and placement)
- Path motions (straight and template-shaped)

Key functions:
- distance: Length of a 2D vector
- length_of: Arc length of a curve
- position_at: Position at an arc-length offset
- apply_affine: Transform every point of a curve
- normalizing_transform: Map a template onto (0, 0) -> (1, 0)
- instantiating_transform: Map (0, 0) -> (1, 0) onto concrete endpoints

Key classes:
- PathMeasure: Measures curves one contour at a time
- PathMotion: Abstract motion between two points
- StraightMotion: Straight-line motion
- PatternMotion: Template-shaped motion
"""

from patternmotion.core.geometry import (
    apply_affine,
    distance,
    instantiating_transform,
    length_of,
    normalizing_transform,
    position_at,
)
from patternmotion.core.measure import PathMeasure
from patternmotion.core.motion import (
    PathMotion,
    PatternMotion,
    PatternState,
    StraightMotion,
)

__all__ = [
    # Measurement
    "PathMeasure",
    # Motions
    "PathMotion",
    "PatternMotion",
    "PatternState",
    "StraightMotion",
    # Geometry functions
    "apply_affine",
    "distance",
    "instantiating_transform",
    "length_of",
    "normalizing_transform",
    "position_at",
]
