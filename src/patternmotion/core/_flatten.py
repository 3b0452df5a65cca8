"""Internal Bezier curve flattening algorithms.

This is an internal module containing helper functions for PathMeasure.
Not intended for public use.
"""

import math

from patternmotion.domain import Coordinate


def _chord_distance(pt: Coordinate, start: Coordinate, end: Coordinate) -> float:
    """Distance from pt to the line through start and end."""
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    chord = math.hypot(dx, dy)
    if chord == 0.0:
        return math.hypot(pt[0] - start[0], pt[1] - start[1])
    return abs(dx * (pt[1] - start[1]) - dy * (pt[0] - start[0])) / chord


def _midpoint(a: Coordinate, b: Coordinate) -> Coordinate:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def flatten_quadratic(
    points: list[Coordinate], tolerance: float, depth: int = 16
) -> list[Coordinate]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    Args:
        points: List of 3 control points [p0, p1, p2]
        tolerance: Maximum distance from true curve
        depth: Remaining subdivision levels

    Returns:
        List of points approximating the curve, both endpoints included
    """
    p0, p1, p2 = points

    # The curve lies within half the control point's distance from the chord
    if depth <= 0 or _chord_distance(p1, p0, p2) / 2 <= tolerance:
        return [p0, p2]

    # Subdivide at t=0.5
    q1 = _midpoint(p0, p1)
    r1 = _midpoint(p1, p2)
    mid = _midpoint(q1, r1)

    left = flatten_quadratic([p0, q1, mid], tolerance, depth - 1)
    right = flatten_quadratic([mid, r1, p2], tolerance, depth - 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def flatten_cubic(
    points: list[Coordinate], tolerance: float, depth: int = 16
) -> list[Coordinate]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve
        depth: Remaining subdivision levels

    Returns:
        List of points approximating the curve, both endpoints included
    """
    p0, p1, p2, p3 = points

    # Check flatness
    deviation = max(_chord_distance(p1, p0, p3), _chord_distance(p2, p0, p3))
    if depth <= 0 or deviation * 0.75 <= tolerance:
        return [p0, p3]

    # Subdivide at t=0.5 using De Casteljau's algorithm
    # First level
    q1 = _midpoint(p0, p1)
    q2 = _midpoint(p1, p2)
    q3 = _midpoint(p2, p3)

    # Second level
    r1 = _midpoint(q1, q2)
    r2 = _midpoint(q2, q3)

    # Third level (midpoint)
    mid = _midpoint(r1, r2)

    left = flatten_cubic([p0, q1, r1, mid], tolerance, depth - 1)
    right = flatten_cubic([mid, r2, q3, p3], tolerance, depth - 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right
