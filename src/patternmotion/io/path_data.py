"""Conversion between SVG path data text and Curve models.

Parsing uses fontTools' SVG path parser, which draws onto a pen. Elliptical
arcs are approximated by cubic Bezier segments. Formatting goes through
SVGPathPen, which emits compact path data (H/V for axis-aligned lines,
implicit lineto after a moveto).
"""

import re
from functools import partial

from fontTools.pens.recordingPen import RecordingPen
from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.svgLib.path import parse_path

from patternmotion.domain import Curve
from patternmotion.exceptions import PathDataError

# Letters allowed in path data: commands plus the exponent marker
_PATH_LETTERS = frozenset("MmLlHhVvCcSsQqTtAaZzEe")
_LETTER_RE = re.compile("[A-Za-z]")


def parse_path_data(path_data: str) -> Curve:
    """Parse SVG path data into a Curve.

    Args:
        path_data: Path data string, e.g. "M0,0 L0,1 L1,1"

    Returns:
        Curve drawn by the path data

    Raises:
        PathDataError: If the text is not valid path data
    """
    text = path_data.strip()
    if text and text[0] not in "Mm":
        raise PathDataError(path_data, "path must start with a moveto command")
    for match in _LETTER_RE.finditer(text):
        if match.group() not in _PATH_LETTERS:
            raise PathDataError(path_data, f"unknown command '{match.group()}'")

    pen = RecordingPen()
    try:
        parse_path(path_data, pen)
    except (ValueError, IndexError) as e:
        # IndexError: a command ran out of numeric arguments
        raise PathDataError(path_data, str(e) or "missing coordinates") from e
    return Curve.from_recording(pen.value)


def _format_number(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def _round_curve(curve: Curve, precision: int) -> Curve:
    return Curve.from_recording(
        (
            operator,
            tuple(
                None if pt is None else (round(pt[0], precision), round(pt[1], precision))
                for pt in operands
            ),
        )
        for operator, operands in curve.commands
    )


def format_path_data(curve: Curve, precision: int = 6) -> str:
    """Serialize a Curve as SVG path data.

    Coordinates are rounded to ``precision`` decimals and written without
    trailing zeros.

    Args:
        curve: Curve to serialize
        precision: Number of decimals to keep

    Returns:
        Path data string, e.g. "M0 0V1H1"
    """
    pen = SVGPathPen(None, ntos=partial(_format_number, precision=precision))
    _round_curve(curve, precision).draw(pen)
    return pen.getCommands()
