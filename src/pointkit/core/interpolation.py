"""First degree (piecewise-linear) interpolation over sorted points.

Given points sorted ascending by x, the y value for an arbitrary x is read
off the line through the bracketing segment:

- a query equal to a sample's x returns that sample's y unmodified
- a query below the first sample extrapolates along the first segment
- a query above the last sample extrapolates along the last segment
- anything else uses the segment immediately left of the insertion point
"""

import logging
import math
from collections.abc import Iterable, Sequence
from typing import Any

from pointkit.core.search import ExactIndex, locate
from pointkit.domain import LineSegment, Point
from pointkit.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def bracketing_segment(
    points: Sequence[Point[Any]], insertion_index: int
) -> LineSegment[Any]:
    """Select the segment used to evaluate a query at an insertion point.

    Args:
        points: Points sorted by x, at least two of them
        insertion_index: Insertion point of the query, in ``0..len(points)``

    Returns:
        Segment whose supporting line is evaluated for the query
    """
    n = len(points)
    if insertion_index == 0:
        start = 0
    elif insertion_index == n:
        start = n - 2
    else:
        start = insertion_index - 1
    return LineSegment(points[start], points[start + 1])


def interpolate(points: Sequence[Point[Any]], query_x: float) -> float:
    """Interpolate the y coordinate for ``query_x``.

    Args:
        points: Points sorted ascending by x (not checked; unsorted input
            gives meaningless results)
        query_x: X coordinate to evaluate

    Returns:
        Interpolated (or extrapolated) y coordinate

    Raises:
        InvalidArgumentError: If fewer than two points are given or
            ``query_x`` is NaN or infinite
        UndefinedInterpolationError: If the bracketing segment is vertical

    Examples:
        >>> pts = [Point(0.0, 0.0), Point(10.0, 10.0), Point(20.0, 5.0)]
        >>> interpolate(pts, 15.0)
        7.5
    """
    if len(points) < 2:
        raise InvalidArgumentError(
            f"Interpolation needs at least 2 points, got {len(points)}",
            point_count=len(points),
        )
    if not math.isfinite(query_x):
        raise InvalidArgumentError(
            f"Query must be a finite number, got {query_x}",
            query_x=query_x,
        )

    result = locate(points, query_x)
    if isinstance(result, ExactIndex):
        return float(points[result.index].y)

    if result.index == 0 or result.index == len(points):
        logger.debug(
            "Extrapolating x=%.3f outside sample range [%.3f, %.3f]",
            query_x, points[0].x, points[-1].x
        )

    segment = bracketing_segment(points, result.index)
    return segment.y_by_x(query_x)


def interpolate_all(
    points: Sequence[Point[Any]], queries: Iterable[float]
) -> list[float]:
    """Interpolate each query independently, preserving order.

    Args:
        points: Points sorted ascending by x
        queries: X coordinates (any iterable, including numpy arrays)

    Returns:
        One y coordinate per query, in input order
    """
    return [interpolate(points, float(x)) for x in queries]
