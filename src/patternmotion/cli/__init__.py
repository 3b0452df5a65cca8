"""Command-line interface for patternmotion.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Path data output ready to paste into SVG
- Optional table of evenly spaced samples along the path
- Canonical form inspection of a template
"""

from patternmotion.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
