"""Utility functions for patternmotion.

This module provides logging setup and configuration.
"""

from patternmotion.utils.logging import configure_logging, reset_logging

__all__ = [
    "configure_logging",
    "reset_logging",
]
