"""Geometric operations for pattern normalization and instantiation.

This module provides the narrow capabilities the motion code relies on:
- Euclidean distance
- Arc length and position queries on a curve
- Affine transformation of a curve
- The two affine maps that normalize a template and place it between
  concrete endpoints

All functions are pure and stateless.
"""

import math

from fontTools.misc.transform import Identity, Offset, Scale, Transform

from patternmotion.core.measure import PathMeasure
from patternmotion.domain import Coordinate, Curve


def distance(x: float, y: float) -> float:
    """Length of the vector (x, y).

    Examples:
        >>> distance(3.0, 4.0)
        5.0
    """
    return math.sqrt((x * x) + (y * y))


def length_of(curve: Curve, tolerance: float = 1e-4) -> float:
    """Arc length of the first measurable contour of a curve."""
    return PathMeasure(curve, tolerance=tolerance).length


def position_at(curve: Curve, offset: float, tolerance: float = 1e-4) -> Coordinate:
    """Position at an arc-length offset along the first measurable contour."""
    return PathMeasure(curve, tolerance=tolerance).get_position(offset)


def apply_affine(curve: Curve, transformation: Transform) -> Curve:
    """Apply an affine map to every point of a curve, returning a new curve."""
    return curve.transform(transformation)


def normalizing_transform(start: Coordinate, end: Coordinate) -> Transform:
    """Build the map sending start to (0, 0) and end to (1, 0).

    The map translates start to the origin, then scales uniformly so that end
    is at unit distance, then rotates end onto the positive X axis.

    Args:
        start: Template start point
        end: Template end point, must differ from start

    Returns:
        Transform applying translate, scale, rotate in that order

    Examples:
        >>> t = normalizing_transform((1.0, 1.0), (1.0, 3.0))
        >>> t.transformPoint((1.0, 3.0))
        (1.0, 0.0)
    """
    sx, sy = start
    dx = end[0] - sx
    dy = end[1] - sy
    scale = 1 / distance(dx, dy)
    angle = math.atan2(dy, dx)
    # reverseTransform(other) applies other after self
    return (
        Offset(-sx, -sy)
        .reverseTransform(Scale(scale))
        .reverseTransform(Identity.rotate(-angle))
    )


def instantiating_transform(start: Coordinate, end: Coordinate) -> Transform:
    """Build the map sending (0, 0) to start and (1, 0) to end.

    The map scales uniformly by the distance between the points, rotates by
    the direction from start to end, then translates to start. When start
    equals end the scale is zero and every point collapses onto start.

    Args:
        start: Requested start point
        end: Requested end point

    Returns:
        Transform applying scale, rotate, translate in that order

    Examples:
        >>> t = instantiating_transform((0.0, 0.0), (0.0, 10.0))
        >>> t.transformPoint((1.0, 0.0))
        (0.0, 10.0)
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length = distance(dx, dy)
    angle = math.atan2(dy, dx)
    return (
        Scale(length)
        .reverseTransform(Identity.rotate(angle))
        .reverseTransform(Offset(*start))
    )
