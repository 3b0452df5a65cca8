"""Immutable curve value type.

A Curve is an ordered sequence of drawing commands in the fontTools pen
vocabulary:
- ('moveTo', ((x, y),))
- ('lineTo', ((x, y),))
- ('qCurveTo', ((x1, y1), ..., (xn, yn)))  # Quadratic
- ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))  # Cubic
- ('closePath', ())
- ('endPath', ())

Curves never change once built. Transforming a curve returns a new one.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from fontTools.misc.transform import Transform
from fontTools.pens.recordingPen import RecordingPen, replayRecording
from fontTools.pens.transformPen import TransformPen

Coordinate = tuple[float, float]
Command = tuple[str, tuple[Coordinate, ...]]

_COMMANDS = frozenset(
    {"moveTo", "lineTo", "curveTo", "qCurveTo", "closePath", "endPath"}
)


def _freeze(recording: Iterable[tuple[str, Iterable[Any]]]) -> tuple[Command, ...]:
    commands: list[Command] = []
    for operator, operands in recording:
        if operator not in _COMMANDS:
            raise ValueError(f"Unsupported drawing command: {operator!r}")
        points = tuple(
            None if pt is None else (float(pt[0]), float(pt[1])) for pt in operands
        )
        commands.append((operator, points))  # type: ignore[arg-type]
    return tuple(commands)


@dataclass(frozen=True, slots=True)
class Curve:
    """A 2D path made of connected line and Bezier segments.

    Immutable and hashable, so a curve can be shared between threads and
    used as a dictionary key.

    Attributes:
        commands: Drawing commands in pen order
    """

    commands: tuple[Command, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "commands", _freeze(self.commands))

    @classmethod
    def from_recording(cls, recording: Iterable[tuple[str, Iterable[Any]]]) -> "Curve":
        """Build a curve from a RecordingPen value.

        Args:
            recording: List of (operator, operands) tuples

        Returns:
            Curve instance
        """
        return cls(commands=_freeze(recording))

    @classmethod
    def from_pen_drawing(cls, drawable: Any) -> "Curve":
        """Build a curve from any object with a ``draw(pen)`` method.

        Args:
            drawable: Object drawing itself onto a fontTools pen

        Returns:
            Curve instance
        """
        pen = RecordingPen()
        drawable.draw(pen)
        return cls.from_recording(pen.value)

    @classmethod
    def line(cls, x0: float, y0: float, x1: float, y1: float) -> "Curve":
        """Build a single straight segment.

        Args:
            x0: Start X
            y0: Start Y
            x1: End X
            y1: End Y

        Returns:
            Open curve from (x0, y0) to (x1, y1)
        """
        return cls.from_recording(
            [
                ("moveTo", ((x0, y0),)),
                ("lineTo", ((x1, y1),)),
                ("endPath", ()),
            ]
        )

    def draw(self, pen: Any) -> None:
        """Replay the curve onto a fontTools pen."""
        replayRecording(self.commands, pen)

    def transform(self, transformation: Transform | tuple[float, ...]) -> "Curve":
        """Apply an affine transformation to every point of the curve.

        Args:
            transformation: fontTools Transform or 6-tuple matrix

        Returns:
            New transformed curve
        """
        pen = RecordingPen()
        self.draw(TransformPen(pen, transformation))
        return Curve.from_recording(pen.value)

    def is_empty(self) -> bool:
        """Check whether the curve has no drawn points."""
        return not any(operands for _, operands in self.commands)

    def points(self) -> Iterator[Coordinate]:
        """Iterate all coordinates in drawing order, control points included."""
        for _, operands in self.commands:
            for pt in operands:
                if pt is not None:
                    yield pt

    def first_point(self) -> Coordinate | None:
        """Return the first drawn coordinate, or None for an empty curve."""
        return next(self.points(), None)

    def last_point(self) -> Coordinate | None:
        """Return the last drawn coordinate, or None for an empty curve."""
        last = None
        for pt in self.points():
            last = pt
        return last

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with a list of commands; implied TrueType on-curve
            points are kept as None
        """
        return {
            "commands": [
                {
                    "op": operator,
                    "points": [None if pt is None else list(pt) for pt in operands],
                }
                for operator, operands in self.commands
            ]
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Curve":
        """Deserialize from dictionary.

        Args:
            data: Dictionary produced by ``to_dict``

        Returns:
            Curve instance
        """
        return cls.from_recording(
            (
                item["op"],
                [None if pt is None else tuple(pt) for pt in item["points"]],
            )
            for item in data["commands"]
        )

    def __len__(self) -> int:
        return len(self.commands)
