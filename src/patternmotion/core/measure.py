"""Arc-length measurement of curves.

A PathMeasure flattens a curve into one polyline per contour and answers
length, position and tangent queries by walking the polyline. Contours are
measured one at a time, starting with the first one that has a non-zero
length.
"""

import bisect
import math
from dataclasses import dataclass

from fontTools.pens.basePen import BasePen

from patternmotion.config import MeasureConfig
from patternmotion.core._flatten import flatten_cubic, flatten_quadratic
from patternmotion.domain import Coordinate, Curve

ORIGIN: Coordinate = (0.0, 0.0)


@dataclass(frozen=True, slots=True)
class FlatContour:
    """A single contour flattened into a polyline.

    Attributes:
        points: Polyline vertices in drawing order
        cumulative: Arc length from the first vertex to each vertex
        closed: Whether the contour was closed with closePath
    """

    points: tuple[Coordinate, ...]
    cumulative: tuple[float, ...]
    closed: bool = False

    @classmethod
    def build(cls, points: list[Coordinate], closed: bool) -> "FlatContour":
        cumulative = [0.0]
        for (x0, y0), (x1, y1) in zip(points, points[1:]):
            cumulative.append(cumulative[-1] + math.hypot(x1 - x0, y1 - y0))
        return cls(points=tuple(points), cumulative=tuple(cumulative), closed=closed)

    @property
    def length(self) -> float:
        return self.cumulative[-1]

    def pos_tan(self, distance: float) -> tuple[Coordinate, Coordinate]:
        """Return position and unit tangent at an arc-length offset.

        The offset is clamped to [0, length]. Offsets at either end return the
        exact first or last vertex.
        """
        length = self.length
        distance = min(max(distance, 0.0), length)

        index = bisect.bisect_left(self.cumulative, distance)
        index = min(max(index, 1), len(self.points) - 1)
        # Zero-length pieces at the start carry no direction
        while (
            index < len(self.points) - 1
            and self.cumulative[index] == self.cumulative[index - 1]
        ):
            index += 1

        (x0, y0), (x1, y1) = self.points[index - 1], self.points[index]
        piece = self.cumulative[index] - self.cumulative[index - 1]

        if distance <= 0.0:
            position = self.points[0]
        elif distance >= length:
            position = self.points[-1]
        else:
            t = (distance - self.cumulative[index - 1]) / piece
            position = (x0 + (x1 - x0) * t, y0 + (y1 - y0) * t)

        if piece == 0.0:
            return position, ORIGIN
        return position, ((x1 - x0) / piece, (y1 - y0) / piece)


class FlatteningPen(BasePen):
    """Pen collecting flattened contours.

    Quadratic and cubic super-segments are decomposed by BasePen before
    reaching the flattening callbacks.
    """

    def __init__(self, tolerance: float, max_depth: int) -> None:
        super().__init__(glyphSet=None)
        self.tolerance = tolerance
        self.max_depth = max_depth
        self.contours: list[FlatContour] = []
        self._current: list[Coordinate] | None = None
        self._contour_start: Coordinate = ORIGIN

    def _open(self) -> list[Coordinate]:
        # Drawing without a moveTo continues from the last contour start
        if self._current is None:
            self._current = [self._contour_start]
        return self._current

    def finish(self, closed: bool = False) -> None:
        """Store the contour in progress, if any."""
        if self._current is not None:
            self.contours.append(FlatContour.build(self._current, closed))
            self._current = None

    def _moveTo(self, pt: Coordinate) -> None:
        self.finish()
        self._contour_start = pt
        self._current = [pt]

    def _lineTo(self, pt: Coordinate) -> None:
        self._open().append(pt)

    def _curveToOne(self, pt1: Coordinate, pt2: Coordinate, pt3: Coordinate) -> None:
        contour = self._open()
        flat = flatten_cubic(
            [contour[-1], pt1, pt2, pt3], self.tolerance, self.max_depth
        )
        contour.extend(flat[1:])

    def _qCurveToOne(self, pt1: Coordinate, pt2: Coordinate) -> None:
        contour = self._open()
        flat = flatten_quadratic([contour[-1], pt1, pt2], self.tolerance, self.max_depth)
        contour.extend(flat[1:])

    def _closePath(self) -> None:
        if self._current is None:
            return
        if self._current[-1] != self._current[0]:
            self._current.append(self._current[0])
        self.finish(closed=True)

    def _endPath(self) -> None:
        self.finish()


class PathMeasure:
    """Measures arc length, position and tangent along a curve.

    Only one contour is measured at a time. Zero-length contours are skipped;
    call next_contour() to move on to the following one.

    Example:
        measure = PathMeasure(curve)
        end = measure.get_position(measure.length)
    """

    def __init__(
        self,
        curve: Curve,
        tolerance: float = 1e-4,
        max_depth: int = 16,
    ) -> None:
        """Flatten and index the curve.

        Args:
            curve: Curve to measure
            tolerance: Maximum flattening error in curve units
            max_depth: Maximum subdivisions per Bezier segment
        """
        pen = FlatteningPen(tolerance, max_depth)
        curve.draw(pen)
        pen.finish()
        self._contours = [c for c in pen.contours if c.length > 0.0]
        self._index = 0

    @classmethod
    def from_config(cls, curve: Curve, config: MeasureConfig) -> "PathMeasure":
        """Create a measure using MeasureConfig tolerances."""
        return cls(curve, tolerance=config.flatten_tolerance, max_depth=config.max_depth)

    @property
    def contour_count(self) -> int:
        """Number of measurable (non-zero length) contours."""
        return len(self._contours)

    def _contour(self) -> FlatContour | None:
        if self._index < len(self._contours):
            return self._contours[self._index]
        return None

    @property
    def length(self) -> float:
        """Arc length of the current contour, 0.0 when there is none."""
        contour = self._contour()
        return contour.length if contour is not None else 0.0

    def get_pos_tan(self, distance: float) -> tuple[Coordinate, Coordinate]:
        """Return position and unit tangent at a distance along the contour.

        Args:
            distance: Arc-length offset, clamped to [0, length]

        Returns:
            ((x, y), (tx, ty)); both are (0, 0) when there is no contour
        """
        contour = self._contour()
        if contour is None:
            return ORIGIN, ORIGIN
        return contour.pos_tan(distance)

    def get_position(self, distance: float) -> Coordinate:
        """Return the position at a distance along the contour."""
        return self.get_pos_tan(distance)[0]

    def get_tangent(self, distance: float) -> Coordinate:
        """Return the unit tangent at a distance along the contour."""
        return self.get_pos_tan(distance)[1]

    def is_closed(self) -> bool:
        """Check whether the current contour was closed."""
        contour = self._contour()
        return contour.closed if contour is not None else False

    def next_contour(self) -> bool:
        """Advance to the next contour.

        Returns:
            True if there is a next contour to measure
        """
        if self._index < len(self._contours):
            self._index += 1
        return self._index < len(self._contours)
