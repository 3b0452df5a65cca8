"""Unit tests for path motions.

Tests for PathMotion, StraightMotion and PatternMotion.
"""

import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from patternmotion.config import MeasureConfig, PatternConfig
from patternmotion.core.measure import PathMeasure
from patternmotion.core.motion import PathMotion, PatternMotion, StraightMotion
from patternmotion.domain import Curve
from patternmotion.exceptions import (
    InvalidTemplateError,
    MissingTemplateDataError,
    PathDataError,
    PatternMotionError,
    TemplateError,
)
from patternmotion.io import parse_path_data

L_SHAPE = "M0,0 L0,1 L1,1"

TEMPLATES = [
    L_SHAPE,
    "M0,0 C0,1 1,1 1,0",
    "M10,10 Q20,40 50,10",
    "M0 0 L1 1 L2 0 L3 1 L4 0",
    "M0,0 A1,1 0 0 1 2,0",
]

ENDPOINTS = [
    (0.0, 0.0, 5.0, 0.0),
    (1.0, 2.0, -3.0, 7.0),
    (-4.0, -4.0, 10.0, -20.0),
    (100.0, 0.0, 0.0, 100.0),
]


def _points(curve: Curve) -> list[tuple[float, float]]:
    return list(curve.points())


def _flat(points: list[tuple[float, float]]) -> list[float]:
    return [value for point in points for value in point]


def _endpoints(curve: Curve) -> tuple[tuple[float, float], tuple[float, float]]:
    measure = PathMeasure(curve)
    return measure.get_position(0.0), measure.get_position(measure.length)


class TestStraightMotion:
    """Tests for StraightMotion class."""

    def test_is_path_motion(self):
        """Test StraightMotion implements PathMotion."""
        assert isinstance(StraightMotion(), PathMotion)

    def test_straight_segment(self):
        """Test the path is the segment between the points."""
        assert StraightMotion().get_path(1, 2, 3, 4) == Curve.line(1, 2, 3, 4)

    def test_path_motion_is_abstract(self):
        """Test PathMotion cannot be instantiated."""
        with pytest.raises(TypeError):
            PathMotion()  # type: ignore[abstract]


class TestDefaultPattern:
    """Tests for PatternMotion without a template."""

    def test_default_pattern_is_unit_line(self):
        """Test the default template runs from (0, 0) to (1, 0)."""
        motion = PatternMotion()
        assert _points(motion.get_pattern()) == [(0.0, 0.0), (1.0, 0.0)]
        assert motion.canonical_pattern == motion.get_pattern()

    def test_default_pattern_is_linear(self):
        """Test default motion equals a straight segment."""
        motion = PatternMotion()
        curve = motion.get_path(0, 0, 5, 0)
        assert _flat(_points(curve)) == pytest.approx([0.0, 0.0, 5.0, 0.0])

    @pytest.mark.parametrize("start_x,start_y,end_x,end_y", ENDPOINTS)
    def test_default_matches_straight_motion(self, start_x, start_y, end_x, end_y):
        """Test default motion for arbitrary endpoints."""
        curve = PatternMotion().get_path(start_x, start_y, end_x, end_y)
        straight = StraightMotion().get_path(start_x, start_y, end_x, end_y)
        assert [op for op, _ in curve.commands] == [op for op, _ in straight.commands]
        for actual, expected in zip(_points(curve), _points(straight)):
            assert actual == pytest.approx(expected, abs=1e-9)


class TestSetPattern:
    """Tests for template normalization."""

    @pytest.mark.parametrize("path_data", TEMPLATES)
    def test_canonical_runs_from_origin_to_unit_x(self, path_data):
        """Test canonical start and end points."""
        motion = PatternMotion(parse_path_data(path_data))
        start, end = _endpoints(motion.canonical_pattern)
        assert start == pytest.approx((0.0, 0.0), abs=1e-9)
        assert end == pytest.approx((1.0, 0.0), abs=1e-9)

    def test_get_pattern_returns_supplied_curve(self):
        """Test the template is returned as supplied, not normalized."""
        template = parse_path_data("M2,3 L2,5 L7,5")
        motion = PatternMotion()
        motion.set_pattern(template)
        assert motion.get_pattern() is template
        assert motion.canonical_pattern != template

    def test_pattern_property(self):
        """Test property accessors mirror get/set."""
        template = parse_path_data(L_SHAPE)
        motion = PatternMotion()
        motion.pattern = template
        assert motion.pattern is template

    def test_canonical_of_offset_template(self):
        """Test a vertical template is rotated onto the X axis."""
        motion = PatternMotion(parse_path_data("M2,3 L2,5"))
        points = _points(motion.canonical_pattern)
        assert points[0] == pytest.approx((0.0, 0.0), abs=1e-12)
        assert points[1] == pytest.approx((1.0, 0.0), abs=1e-12)

    def test_only_first_contour_defines_direction(self):
        """Test later contours follow the first contour's normalization."""
        motion = PatternMotion(parse_path_data("M0,0 L1,0 M5,5 L6,9"))
        points = _points(motion.canonical_pattern)
        assert _flat(points) == pytest.approx([0.0, 0.0, 1.0, 0.0, 5.0, 5.0, 6.0, 9.0])

    @pytest.mark.parametrize(
        "path_data",
        [
            "M1,1",
            "M0,0 L1,0 L1,1 Z",
            "M0,0 L1,0 L0,0",
            "",
        ],
    )
    def test_degenerate_template_rejected(self, path_data):
        """Test templates ending where they start are rejected."""
        with pytest.raises(InvalidTemplateError):
            PatternMotion(parse_path_data(path_data))

    def test_empty_curve_rejected(self):
        """Test an empty Curve is rejected."""
        with pytest.raises(InvalidTemplateError):
            PatternMotion(Curve())

    def test_rejection_keeps_previous_pattern(self):
        """Test a failed update leaves the previous template in place."""
        template = parse_path_data(L_SHAPE)
        motion = PatternMotion(template)
        canonical = motion.canonical_pattern

        with pytest.raises(InvalidTemplateError):
            motion.set_pattern(parse_path_data("M0,0 L1,0 L1,1 Z"))

        assert motion.get_pattern() is template
        assert motion.canonical_pattern is canonical

    def test_invalid_template_error_details(self):
        """Test error carries the coinciding point."""
        with pytest.raises(InvalidTemplateError) as exc_info:
            PatternMotion(parse_path_data("M3,4 L5,4 L3,4"))
        assert exc_info.value.point == (3.0, 4.0)
        assert isinstance(exc_info.value, TemplateError)
        assert isinstance(exc_info.value, PatternMotionError)
        assert "must not end at the starting point" in str(exc_info.value)

    @pytest.mark.parametrize(
        "template",
        [
            parse_path_data("M0,0 L1,1e999"),
            Curve.from_recording(
                [("moveTo", ((0, 0),)), ("lineTo", ((float("nan"), 1),))]
            ),
        ],
    )
    def test_non_finite_template_rejected(self, template):
        """Test infinite or NaN coordinates are rejected."""
        motion = PatternMotion()
        with pytest.raises(InvalidTemplateError) as exc_info:
            motion.set_pattern(template)
        assert "must be finite" in str(exc_info.value)
        assert motion.canonical_pattern == motion.get_pattern()

    def test_measure_config_used(self):
        """Test custom measurement settings are accepted."""
        motion = PatternMotion(
            parse_path_data("M0,0 Q1,2 2,0"),
            measure=MeasureConfig(flatten_tolerance=0.5, max_depth=4),
        )
        _, end = _endpoints(motion.canonical_pattern)
        assert end == pytest.approx((1.0, 0.0), abs=1e-12)


class TestGetPath:
    """Tests for instantiating the pattern between endpoints."""

    @pytest.mark.parametrize("path_data", TEMPLATES)
    @pytest.mark.parametrize("start_x,start_y,end_x,end_y", ENDPOINTS)
    def test_endpoint_exactness(self, path_data, start_x, start_y, end_x, end_y):
        """Test the path starts and ends at the requested points."""
        motion = PatternMotion(parse_path_data(path_data))
        start, end = _endpoints(motion.get_path(start_x, start_y, end_x, end_y))
        assert start == pytest.approx((start_x, start_y), abs=1e-9)
        assert end == pytest.approx((end_x, end_y), abs=1e-9)

    def test_scale_invariance(self):
        """Test a 10x longer request is the same shape scaled 10x."""
        motion = PatternMotion(parse_path_data("M0,0 C0,1 1,1 1,0"))
        short = _points(motion.get_path(0, 0, 1, 0))
        long = _points(motion.get_path(0, 0, 10, 0))
        for (sx, sy), (lx, ly) in zip(short, long):
            assert (lx, ly) == pytest.approx((10 * sx, 10 * sy), abs=1e-9)

    def test_rotation(self):
        """Test an upward request is the rightward one rotated 90 degrees."""
        motion = PatternMotion(parse_path_data("M0 0 L1 1 L2 0 L3 1 L4 0"))
        right = _points(motion.get_path(0, 0, 1, 0))
        up = _points(motion.get_path(0, 0, 0, 1))
        for (rx, ry), (ux, uy) in zip(right, up):
            assert (ux, uy) == pytest.approx((-ry, rx), abs=1e-12)

    def test_l_shape_scenario(self):
        """Test the L template placed from (0, 0) to (0, 10)."""
        motion = PatternMotion(parse_path_data(L_SHAPE))

        canonical = _points(motion.canonical_pattern)
        assert canonical[-1] == pytest.approx((1.0, 0.0), abs=1e-12)
        assert canonical[1] == pytest.approx((0.5, 0.5), abs=1e-12)

        curve = motion.get_path(0, 0, 0, 10)
        measure = PathMeasure(curve)
        assert measure.length == pytest.approx(10 * math.sqrt(2))
        assert measure.get_position(measure.length) == pytest.approx((0.0, 10.0), abs=1e-9)
        # Canonical midpoint (0.5, 0.5) scaled by 10 and rotated 90 degrees
        assert measure.get_position(measure.length / 2) == pytest.approx(
            (-5.0, 5.0), abs=1e-9
        )

    def test_degenerate_request_collapses(self):
        """Test start == end yields a single-point curve, not an error."""
        motion = PatternMotion(parse_path_data(L_SHAPE))
        curve = motion.get_path(3, 3, 3, 3)
        for point in curve.points():
            assert point == pytest.approx((3.0, 3.0))
        assert PathMeasure(curve).length == 0.0

    def test_canonical_not_mutated(self):
        """Test instantiating leaves the canonical curve unchanged."""
        motion = PatternMotion(parse_path_data(L_SHAPE))
        canonical = motion.canonical_pattern
        motion.get_path(5, 5, -5, 20)
        assert motion.canonical_pattern == canonical

    def test_instantiate_alias(self):
        """Test instantiate is the same operation as get_path."""
        motion = PatternMotion(parse_path_data(L_SHAPE))
        assert motion.instantiate(1, 2, 3, 4) == motion.get_path(1, 2, 3, 4)

    def test_concurrent_get_path(self):
        """Test concurrent requests produce identical results."""
        motion = PatternMotion(parse_path_data("M0,0 A1,1 0 0 1 2,0"))
        expected = motion.get_path(1, 1, 8, 5)
        with ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(lambda _: motion.get_path(1, 1, 8, 5), range(32)))
        assert all(result == expected for result in results)


class TestDeclarativeConstruction:
    """Tests for building motions from configuration."""

    def test_from_path_data(self):
        """Test construction from path data text."""
        motion = PatternMotion.from_path_data(L_SHAPE)
        assert motion.get_pattern() == parse_path_data(L_SHAPE)

    def test_from_config(self):
        """Test construction from PatternConfig."""
        motion = PatternMotion.from_config(PatternConfig(path_data=L_SHAPE))
        assert _points(motion.get_pattern()) == [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0)]

    @pytest.mark.parametrize("path_data", [None, "", "   "])
    def test_missing_path_data(self, path_data):
        """Test missing path data is not replaced by a default."""
        with pytest.raises(MissingTemplateDataError) as exc_info:
            PatternMotion.from_config(PatternConfig(path_data=path_data))
        assert exc_info.value.field == "path_data"

    def test_invalid_path_data(self):
        """Test unparseable path data."""
        with pytest.raises(PathDataError):
            PatternMotion.from_path_data("L1,1")

    def test_degenerate_config(self):
        """Test config with a closed template."""
        with pytest.raises(InvalidTemplateError):
            PatternMotion.from_config(PatternConfig(path_data="M0,0 L1,0 L1,1 Z"))
