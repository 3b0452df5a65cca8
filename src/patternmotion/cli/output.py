"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages. Path data itself is printed without
markup or wrapping so it can be piped into other tools.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# Unicode symbols for consistent visual language
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_path_data(path_data: str) -> None:
    """Print path data verbatim on a single line.

    Args:
        path_data: SVG path data string
    """
    console.print(path_data, markup=False, highlight=False, soft_wrap=True)


def print_samples(
    samples: list[tuple[float, float, float]], precision: int
) -> None:
    """Print sampled points along a curve as a table.

    Args:
        samples: (distance, x, y) tuples
        precision: Number of decimals to show
    """
    table = Table(show_edge=False, box=None, pad_edge=False)
    table.add_column("distance", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for dist, x, y in samples:
        table.add_row(
            f"{dist:.{precision}f}",
            f"{x:.{precision}f}",
            f"{y:.{precision}f}",
        )
    console.print(table)


def print_pattern_info(canonical: str, length: float, contours: int) -> None:
    """Print a normalized pattern summary.

    Args:
        canonical: Canonical path data
        length: Arc length of the measured template contour
        contours: Number of measurable contours in the template
    """
    print_path_data(canonical)
    console.print(
        f"[green]{SYM_OK}[/green] length {length:g} {SYM_DOT} {contours} "
        f"{'contour' if contours == 1 else 'contours'}",
        highlight=False,
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
