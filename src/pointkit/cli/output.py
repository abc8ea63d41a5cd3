"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from pointkit.domain import Ellipse, LineSegment, Point, Rectangle

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def _fmt(value: float) -> str:
    return f"{value:g}"


def _fmt_point(point: Point[Any]) -> str:
    return f"({_fmt(point.x)}, {_fmt(point.y)})"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]pointkit[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_points_info(path: str, count: int, is_integer: bool) -> None:
    """Print information about a loaded point file.

    Args:
        path: Path to the point file
        count: Number of points loaded
        is_integer: Whether all coordinates are integers
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path)
    console.print(line)
    kind = "integer" if is_integer else "float"
    console.print(f"  {count:,} points {SYM_DOT} {kind} coordinates")


def print_values(queries: Sequence[float], values: Sequence[float]) -> None:
    """Print interpolation results as a two-column table."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for x, y in zip(queries, values, strict=True):
        table.add_row(_fmt(x), _fmt(y))
    console.print(table)


def print_segments(segments: Sequence[LineSegment[Any]]) -> None:
    """Print one line per segment."""
    for i, segment in enumerate(segments):
        console.print(
            f"  {i:>3}  {_fmt_point(segment.start)} → {_fmt_point(segment.end)}"
        )


def print_line(direction: Point[float], point_on_line: Point[float]) -> None:
    """Print a fitted line."""
    console.print(f"  direction {_fmt_point(direction)}")
    console.print(f"  through   {_fmt_point(point_on_line)}")


def print_ellipse(ellipse: Ellipse) -> None:
    """Print a fitted ellipse."""
    console.print(f"  center {_fmt_point(ellipse.center)}")
    console.print(
        f"  axes   {_fmt(ellipse.width)} × {_fmt(ellipse.height)} "
        f"{SYM_DOT} angle {_fmt(ellipse.angle)}°"
    )


def print_hull(vertices: Sequence[Point[float]]) -> None:
    """Print convex hull vertices."""
    console.print(f"  {len(vertices)} vertices")
    for vertex in vertices:
        console.print(f"  {_fmt_point(vertex)}")


def print_rectangle(rect: Rectangle) -> None:
    """Print a bounding rectangle."""
    console.print(f"  origin ({rect.x}, {rect.y}) {SYM_DOT} size {rect.width} × {rect.height}")


def print_saved(output_path: str) -> None:
    """Print confirmation that a result file was written."""
    line = Text(f"\n{SYM_OK} Saved ", style="bold green")
    line.append(output_path, style="bold")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
