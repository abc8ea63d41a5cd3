"""CLI application entry point for pointkit.

This module provides the main CLI interface using Typer. Every command
loads a point file, runs one operation and prints the result; ``--output``
additionally saves it as JSON.
"""

from pathlib import Path
from typing import Annotated, Any

import typer

from pointkit import __version__
from pointkit.cli.output import (
    console,
    print_ellipse,
    print_error,
    print_header,
    print_hull,
    print_line,
    print_points_info,
    print_rectangle,
    print_saved,
    print_segments,
    print_step,
    print_values,
)
from pointkit.config import LoggingConfig, PointKitSettings
from pointkit.core import GeometryEngine, build_polyline, interpolate_all
from pointkit.domain import DistanceType, Orientation, Point
from pointkit.exceptions import EngineFailureError, PointFileError, PointKitError
from pointkit.io import PointReader, ResultWriter
from pointkit.utils import LOG_LEVELS, OperationLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="pointkit",
    help="Interpolate, connect and fit 2D point sets.",
    add_completion=False,
    no_args_is_help=True,
)

PointFileArg = Annotated[
    Path,
    typer.Argument(
        help="Path to a .csv or .json point file",
        show_default=False,
    ),
]
OutputOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Write the result to a JSON file",
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]pointkit[/bold blue] v{__version__}")
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
    """Interpolate, connect and fit 2D point sets."""


def _setup(
    operation: str, log_file: Path | None, log_level: str, quiet: bool
) -> tuple[PointKitSettings, OperationLogger]:
    """Build settings from CLI options and initialize logging."""
    if log_level.upper() not in LOG_LEVELS:
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: " + ", ".join(LOG_LEVELS),
        )
        raise typer.Exit(code=1)

    settings = PointKitSettings(
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    if not quiet:
        print_header(__version__)
    return settings, OperationLogger(logger, operation)


def _load_points(path: Path, quiet: bool, run_log: OperationLogger) -> list[Point[Any]]:
    """Load a point file, printing a summary unless quiet."""
    if not quiet:
        print_step("Loading points")

    reader = PointReader(path)
    reader.load()
    run_log.log_points_loaded(path, reader.point_count, reader.is_integer)

    if not quiet:
        print_points_info(str(path), reader.point_count, reader.is_integer)
    return reader.points


def _fail(error: Exception, run_log: OperationLogger) -> typer.Exit:
    """Report an error and return the exit to raise."""
    run_log.log_operation_error(error)
    if isinstance(error, PointFileError):
        print_error(f"Could not read points: {error.reason}")
    elif isinstance(error, EngineFailureError):
        print_error(f"Geometry engine failed: {error.reason}")
    else:
        print_error(str(error))
    return typer.Exit(code=1)


def _saved(output: Path, quiet: bool, run_log: OperationLogger) -> None:
    """Record a written result file."""
    run_log.log_result_saved(output)
    if not quiet:
        print_saved(str(output))


@app.command()
def interpolate(
    points_file: PointFileArg,
    queries: Annotated[
        list[float],
        typer.Argument(
            help="X coordinates to evaluate (use -- before negative values)",
            show_default=False,
        ),
    ],
    sort: Annotated[
        bool,
        typer.Option(
            "--sort",
            help="Sort the points by x before interpolating",
        ),
    ] = False,
    output: OutputOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Interpolate y values at the given x coordinates.

    The points must be sorted by x unless --sort is given.

    Example:
        pointkit interpolate samples.csv 5 15 -- -5
    """
    _, run_log = _setup("interpolate", log_file, log_level, quiet)
    try:
        points = _load_points(points_file, quiet, run_log)
        if sort:
            points = sorted(points, key=lambda p: p.x)

        values = interpolate_all(points, queries)
        run_log.log_operation_complete(len(points), len(values), sorted=sort)

        if not quiet:
            print_step("Interpolated")
        print_values(queries, values)

        if output is not None:
            ResultWriter(output).write_values("interpolate", queries, values)
            _saved(output, quiet, run_log)
    except PointKitError as e:
        raise _fail(e, run_log) from None


@app.command()
def polyline(
    points_file: PointFileArg,
    closed: Annotated[
        bool,
        typer.Option(
            "--closed",
            help="Join the last point back to the first",
        ),
    ] = False,
    output: OutputOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Connect the points into line segments."""
    _, run_log = _setup("polyline", log_file, log_level, quiet)
    try:
        points = _load_points(points_file, quiet, run_log)
        segments = build_polyline(points, closed=closed)
        run_log.log_operation_complete(len(points), len(segments), closed=closed)

        if not quiet:
            kind = "closed" if closed else "open"
            print_step(f"{len(segments)} segments ({kind})")
        print_segments(segments)

        if output is not None:
            ResultWriter(output).write_segments("polyline", segments)
            _saved(output, quiet, run_log)
    except PointKitError as e:
        raise _fail(e, run_log) from None


@app.command("fit-line")
def fit_line(
    points_file: PointFileArg,
    distance: Annotated[
        str,
        typer.Option(
            "--distance",
            "-d",
            help="Distance metric (l1|l2|l12|fair|welsch|huber)",
        ),
    ] = "l2",
    output: OutputOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Fit a line through the points."""
    try:
        distance_type = DistanceType(distance.lower())
    except ValueError:
        print_error(
            f"Invalid distance: {distance}",
            details="Valid values: " + ", ".join(d.value for d in DistanceType),
        )
        raise typer.Exit(code=1)

    settings, run_log = _setup("fit-line", log_file, log_level, quiet)
    try:
        points = _load_points(points_file, quiet, run_log)
        direction, point_on_line = GeometryEngine(settings.engine).fit_line(
            points, distance_type
        )
        run_log.log_operation_complete(len(points), 1, distance=distance_type.value)

        if not quiet:
            print_step(f"Fitted line ({distance_type.value})")
        print_line(direction, point_on_line)

        if output is not None:
            ResultWriter(output).write_payload(
                "fit-line",
                {
                    "distance": distance_type.value,
                    "direction": direction.to_dict(),
                    "point": point_on_line.to_dict(),
                },
            )
            _saved(output, quiet, run_log)
    except PointKitError as e:
        raise _fail(e, run_log) from None


@app.command("fit-ellipse")
def fit_ellipse(
    points_file: PointFileArg,
    output: OutputOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Fit an ellipse to the points (at least five)."""
    settings, run_log = _setup("fit-ellipse", log_file, log_level, quiet)
    try:
        points = _load_points(points_file, quiet, run_log)
        ellipse = GeometryEngine(settings.engine).fit_ellipse(points)
        run_log.log_operation_complete(len(points), 1)

        if not quiet:
            print_step("Fitted ellipse")
        print_ellipse(ellipse)

        if output is not None:
            ResultWriter(output).write_payload("fit-ellipse", ellipse.to_dict())
            _saved(output, quiet, run_log)
    except PointKitError as e:
        raise _fail(e, run_log) from None


@app.command()
def hull(
    points_file: PointFileArg,
    clockwise: Annotated[
        bool,
        typer.Option(
            "--clockwise",
            help="Return hull vertices in clockwise order",
        ),
    ] = False,
    output: OutputOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Find the convex hull of the points."""
    settings, run_log = _setup("hull", log_file, log_level, quiet)
    orientation = Orientation.CLOCKWISE if clockwise else Orientation.COUNTER_CLOCKWISE
    try:
        points = _load_points(points_file, quiet, run_log)
        vertices = GeometryEngine(settings.engine).convex_hull(points, orientation)
        run_log.log_operation_complete(
            len(points), len(vertices), orientation=orientation.name.lower()
        )

        if not quiet:
            print_step("Convex hull")
        print_hull(vertices)

        if output is not None:
            ResultWriter(output).write_payload(
                "hull", [v.to_dict() for v in vertices]
            )
            _saved(output, quiet, run_log)
    except PointKitError as e:
        raise _fail(e, run_log) from None


@app.command()
def bbox(
    points_file: PointFileArg,
    output: OutputOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Compute the axis-aligned bounding rectangle of the points."""
    settings, run_log = _setup("bbox", log_file, log_level, quiet)
    try:
        points = _load_points(points_file, quiet, run_log)
        rect = GeometryEngine(settings.engine).bounding_rectangle(points)
        run_log.log_operation_complete(len(points), 1)

        if not quiet:
            print_step("Bounding rectangle")
        print_rectangle(rect)

        if output is not None:
            ResultWriter(output).write_payload("bbox", rect.to_dict())
            _saved(output, quiet, run_log)
    except PointKitError as e:
        raise _fail(e, run_log) from None


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
