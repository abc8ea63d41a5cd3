"""Conversion of point sequences into connected line segments."""

from collections.abc import Sequence

from pointkit.domain import LineSegment, Point
from pointkit.domain.point import N
from pointkit.exceptions import InvalidArgumentError


def build_polyline(points: Sequence[Point[N]], closed: bool) -> list[LineSegment[N]]:
    """Connect consecutive points into line segments.

    Works for integer and float points alike; segments keep the point type.

    For a closed polyline the first segment runs from the last point back
    to the first, followed by every consecutive pair:
    ``(p[-1], p[0]), (p[0], p[1]), ..., (p[-2], p[-1])``.
    An open polyline has only the consecutive pairs.

    Args:
        points: Points in traversal order
        closed: Whether to join the last point back to the first

    Returns:
        ``len(points)`` segments when closed, ``len(points) - 1`` otherwise

    Raises:
        InvalidArgumentError: If fewer than 2 points (open) or no points
            (closed) are given

    Examples:
        >>> pts = [Point(0, 0), Point(1, 1), Point(2, 0)]
        >>> len(build_polyline(pts, closed=False))
        2
        >>> build_polyline(pts, closed=True)[0].start
        Point(x=2, y=0)
    """
    minimum = 1 if closed else 2
    if len(points) < minimum:
        kind = "closed" if closed else "open"
        raise InvalidArgumentError(
            f"A {kind} polyline needs at least {minimum} points, got {len(points)}",
            point_count=len(points),
            closed=closed,
        )

    segments: list[LineSegment[N]] = []
    if closed:
        previous = points[-1]
        for point in points:
            segments.append(LineSegment(previous, point))
            previous = point
    else:
        for i in range(len(points) - 1):
            segments.append(LineSegment(points[i], points[i + 1]))

    return segments
