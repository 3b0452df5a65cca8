"""CLI application entry point for patternmotion.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from patternmotion import __version__
from patternmotion.cli.output import (
    console,
    print_error,
    print_path_data,
    print_pattern_info,
    print_samples,
)
from patternmotion.config import (
    LogLevel,
    LoggingConfig,
    PatternConfig,
    PatternMotionSettings,
)
from patternmotion.core import PathMeasure, PatternMotion
from patternmotion.exceptions import PatternMotionError
from patternmotion.io import format_path_data
from patternmotion.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="patternmotion",
    help="Reproduce a template curve between two points.",
    add_completion=False,
    no_args_is_help=True,
)

# Negative coordinates look like short options to the parser
_NUMERIC_ARGS = {"ignore_unknown_options": True}

LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    LogLevel,
    typer.Option(
        "--log-level",
        help="Console logging level",
        case_sensitive=False,
    ),
]
PrecisionOption = Annotated[
    int,
    typer.Option(
        "--precision",
        help="Decimals written for each coordinate",
        min=0,
        max=15,
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]patternmotion[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Reproduce a template curve between two points."""


def _setup_logging(settings: PatternMotionSettings, quiet: bool) -> None:
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level.value,
        file_level=settings.logging.file_log_level.value,
        quiet=quiet,
    )


def _sample_curve(
    measure: PathMeasure, count: int, start: tuple[float, float]
) -> list[tuple[float, float, float]]:
    """Sample count + 1 evenly spaced points along the measured contour.

    A path collapsed onto its start point has no measurable contour, so every
    sample is the start point.
    """
    if measure.contour_count == 0:
        return [(0.0, start[0], start[1])] * (count + 1)
    length = measure.length
    samples = []
    for i in range(count + 1):
        offset = length * i / count
        x, y = measure.get_position(offset)
        samples.append((offset, x, y))
    return samples


@app.command("path", context_settings=_NUMERIC_ARGS)
def path_command(
    start_x: Annotated[float, typer.Argument(help="Start X", show_default=False)],
    start_y: Annotated[float, typer.Argument(help="Start Y", show_default=False)],
    end_x: Annotated[float, typer.Argument(help="End X", show_default=False)],
    end_y: Annotated[float, typer.Argument(help="End Y", show_default=False)],
    pattern: Annotated[
        str | None,
        typer.Option(
            "--pattern",
            "-p",
            help="Template as SVG path data (default: straight line)",
        ),
    ] = None,
    samples: Annotated[
        int,
        typer.Option(
            "--samples",
            "-s",
            help="Also print this many evenly spaced intervals along the path",
            min=0,
            max=10000,
        ),
    ] = 0,
    precision: PrecisionOption = 6,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = LogLevel.WARNING,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print errors to the log console",
        ),
    ] = False,
) -> None:
    """Print the motion path from (START_X, START_Y) to (END_X, END_Y).

    The template is moved, scaled and rotated so that it starts at the start
    point and ends at the end point.

    Example:
        patternmotion path 0 0 0 10 --pattern "M0,0 L0,1 L1,1"
    """
    settings = PatternMotionSettings(
        pattern=PatternConfig(path_data=pattern),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    _setup_logging(settings, quiet)

    try:
        if settings.pattern.path_data is None:
            motion = PatternMotion(measure=settings.measure)
        else:
            motion = PatternMotion.from_config(settings.pattern, measure=settings.measure)

        curve = motion.get_path(start_x, start_y, end_x, end_y)
        print_path_data(format_path_data(curve, precision=precision))

        if samples:
            measure = PathMeasure.from_config(curve, settings.measure)
            rows = _sample_curve(measure, samples, (start_x, start_y))
            print_samples(rows, precision)

    except PatternMotionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@app.command("normalize")
def normalize_command(
    pattern: Annotated[
        str,
        typer.Argument(help="Template as SVG path data", show_default=False),
    ],
    precision: PrecisionOption = 6,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = LogLevel.WARNING,
) -> None:
    """Print the canonical form of a template, running from (0, 0) to (1, 0).

    Example:
        patternmotion normalize "M0,0 L0,1 L1,1"
    """
    settings = PatternMotionSettings(
        pattern=PatternConfig(path_data=pattern),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    _setup_logging(settings, quiet=False)

    try:
        motion = PatternMotion.from_config(settings.pattern, measure=settings.measure)
    except PatternMotionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    measure = PathMeasure.from_config(motion.get_pattern(), settings.measure)
    print_pattern_info(
        canonical=format_path_data(motion.canonical_pattern, precision=precision),
        length=measure.length,
        contours=measure.contour_count,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
