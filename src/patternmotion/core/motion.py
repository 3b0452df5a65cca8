"""Path motions between two points.

A PathMotion turns a pair of endpoints into the curve an object travels
along. PatternMotion reproduces a template curve between any two points:
the template is normalized once so that it runs from (0, 0) to (1, 0), and
every request scales, rotates and translates that canonical curve onto the
requested endpoints.

Key classes:
- PathMotion: Abstract base for all motions
- StraightMotion: Straight segment between the endpoints
- PatternMotion: Template-shaped motion
"""

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from patternmotion.config import MeasureConfig, PatternConfig
from patternmotion.core.geometry import (
    apply_affine,
    instantiating_transform,
    normalizing_transform,
)
from patternmotion.core.measure import PathMeasure
from patternmotion.domain import Curve
from patternmotion.exceptions import InvalidTemplateError, MissingTemplateDataError
from patternmotion.io.path_data import parse_path_data

logger = logging.getLogger(__name__)

UNIT_LINE = Curve.line(0.0, 0.0, 1.0, 0.0)


class PathMotion(ABC):
    """Computes the curve travelled between two points."""

    @abstractmethod
    def get_path(
        self, start_x: float, start_y: float, end_x: float, end_y: float
    ) -> Curve:
        """Return the motion curve from (start_x, start_y) to (end_x, end_y)."""


class StraightMotion(PathMotion):
    """Moves along the straight segment between the two points."""

    def get_path(
        self, start_x: float, start_y: float, end_x: float, end_y: float
    ) -> Curve:
        return Curve.line(start_x, start_y, end_x, end_y)


@dataclass(frozen=True, slots=True)
class PatternState:
    """Template as supplied and its canonical form, published together.

    Attributes:
        template: Curve exactly as the caller supplied it
        canonical: Template moved, scaled and rotated to run (0, 0) -> (1, 0)
    """

    template: Curve
    canonical: Curve


class PatternMotion(PathMotion):
    """Applies a template curve to the separation between two points.

    The start of the template is moved to the origin and its end point is
    scaled and rotated onto the target end point. Templates must not end at
    their starting point.

    get_path() only reads the published PatternState, so it can be called
    from several threads at once. set_pattern() builds the new state before
    swapping it in with a single assignment.

    Example:
        motion = PatternMotion.from_path_data("M0,0 L0,1 L1,1")
        curve = motion.get_path(0, 0, 0, 10)
    """

    def __init__(
        self,
        pattern: Curve | None = None,
        measure: MeasureConfig | None = None,
    ) -> None:
        """Create a motion, straight-line unless a pattern is given.

        Args:
            pattern: Template curve
            measure: Flattening settings used to find the template endpoints

        Raises:
            InvalidTemplateError: If the pattern ends at its starting point
        """
        self._measure_config = measure or MeasureConfig()
        if pattern is None:
            self._state = PatternState(template=UNIT_LINE, canonical=UNIT_LINE)
        else:
            self.set_pattern(pattern)

    @classmethod
    def from_path_data(
        cls, path_data: str, measure: MeasureConfig | None = None
    ) -> "PatternMotion":
        """Create a motion from SVG path data.

        Raises:
            PathDataError: If the path data cannot be parsed
            InvalidTemplateError: If the pattern ends at its starting point
        """
        return cls(parse_path_data(path_data), measure=measure)

    @classmethod
    def from_config(
        cls, config: PatternConfig, measure: MeasureConfig | None = None
    ) -> "PatternMotion":
        """Create a motion from declarative configuration.

        Unlike the constructor, a configuration must name its template; no
        straight-line default is substituted.

        Args:
            config: Pattern configuration carrying path data
            measure: Flattening settings

        Returns:
            Configured PatternMotion

        Raises:
            MissingTemplateDataError: If no path data is configured
            PathDataError: If the path data cannot be parsed
            InvalidTemplateError: If the pattern ends at its starting point
        """
        if config.path_data is None or not config.path_data.strip():
            raise MissingTemplateDataError("path_data")
        return cls.from_path_data(config.path_data, measure=measure)

    def get_pattern(self) -> Curve:
        """Return the template exactly as it was supplied."""
        return self._state.template

    def set_pattern(self, pattern: Curve) -> None:
        """Replace the template.

        The template is measured along its first contour. Its start is moved
        to the origin, then it is scaled and rotated so its end lands on
        (1, 0). On failure the current template is kept.

        Args:
            pattern: Template curve

        Raises:
            InvalidTemplateError: If the pattern ends at its starting point or
                has a non-finite coordinate
        """
        for x, y in pattern.points():
            if not (math.isfinite(x) and math.isfinite(y)):
                raise InvalidTemplateError((x, y), "pattern coordinates must be finite")

        measure = PathMeasure.from_config(pattern, self._measure_config)
        length = measure.length
        end = measure.get_position(length)
        start = measure.get_position(0.0)

        if start == end:
            raise InvalidTemplateError(start)

        canonical = apply_affine(pattern, normalizing_transform(start, end))
        self._state = PatternState(template=pattern, canonical=canonical)
        logger.debug(
            "Pattern normalized: start=%s end=%s length=%.6g", start, end, length
        )

    pattern = property(get_pattern, set_pattern)

    @property
    def canonical_pattern(self) -> Curve:
        """Template normalized to run from (0, 0) to (1, 0)."""
        return self._state.canonical

    def get_path(
        self, start_x: float, start_y: float, end_x: float, end_y: float
    ) -> Curve:
        """Reproduce the template between two points.

        A request whose start equals its end yields a curve collapsed onto
        the start point.

        Args:
            start_x: Start X
            start_y: Start Y
            end_x: End X
            end_y: End Y

        Returns:
            New curve from (start_x, start_y) to (end_x, end_y)
        """
        start = (start_x, start_y)
        end = (end_x, end_y)
        if start == end:
            logger.debug("Degenerate motion request collapsed onto %s", start)
        return apply_affine(self._state.canonical, instantiating_transform(start, end))

    instantiate = get_path
