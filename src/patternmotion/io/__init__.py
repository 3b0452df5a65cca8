"""Path data I/O layer for patternmotion.

This module handles reading and writing SVG path data using fonttools.
It provides a clean abstraction layer between fonttools and the
domain models.

Key functions:
- parse_path_data: Parse path data text into a Curve
- format_path_data: Serialize a Curve as path data text
"""

from patternmotion.io.path_data import format_path_data, parse_path_data

__all__ = [
    "format_path_data",
    "parse_path_data",
]
