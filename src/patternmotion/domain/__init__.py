"""Domain models for patternmotion.

The only domain type is the Curve, an immutable sequence of fontTools pen
commands. It is designed to be:

- Immutable (frozen dataclass), so it can be shared between threads
- Serializable to plain dictionaries
- Independent of any parser or renderer

Key classes:
- Curve: A 2D path of line and Bezier segments
"""

from patternmotion.domain.curve import Command, Coordinate, Curve

__all__: list[str] = [
    "Command",
    "Coordinate",
    "Curve",
]
