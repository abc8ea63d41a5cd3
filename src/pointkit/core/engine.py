"""Adapter for the external geometry engine (OpenCV).

Line fitting, ellipse fitting, convex hull and bounding rectangle are
computed entirely by the engine. This module only:

- packs the points into the contiguous float32 buffer the engine expects
- forwards the call with the configured parameters
- wraps the engine's output into pointkit value types
- releases the buffer on every exit path

Any failure raised by the engine or while packing the buffer surfaces as
EngineFailureError chained to the original exception.
"""

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any

import cv2
import numpy as np

from pointkit.config import EngineConfig
from pointkit.domain import DistanceType, Ellipse, Orientation, Point, Rectangle
from pointkit.exceptions import EngineFailureError, PointKitError

logger = logging.getLogger(__name__)

# Names of the engine's distance constants
_DISTANCE_FLAGS: dict[DistanceType, str] = {
    DistanceType.L1: "DIST_L1",
    DistanceType.L2: "DIST_L2",
    DistanceType.L12: "DIST_L12",
    DistanceType.FAIR: "DIST_FAIR",
    DistanceType.WELSCH: "DIST_WELSCH",
    DistanceType.HUBER: "DIST_HUBER",
}


class PointBuffer:
    """Contiguous ``(count, 1, 2)`` float32 copy of a point sequence.

    Use as a context manager; the array is dropped on exit and any later
    access raises RuntimeError.

    Example:
        with PointBuffer(points) as buffer:
            cv2.boundingRect(buffer.array)
    """

    def __init__(self, points: Sequence[Point[Any]]) -> None:
        self.count = len(points)
        self._array: np.ndarray | None = np.ascontiguousarray(
            np.array([p.to_tuple() for p in points], dtype=np.float32).reshape(
                self.count, 1, 2
            )
        )

    @property
    def array(self) -> np.ndarray:
        """The packed points.

        Raises:
            RuntimeError: If the buffer has been released
        """
        if self._array is None:
            raise RuntimeError("Point buffer already released")
        return self._array

    @property
    def released(self) -> bool:
        return self._array is None

    def release(self) -> None:
        self._array = None

    def __enter__(self) -> "PointBuffer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()


class GeometryEngine:
    """Forwards point sets to the geometry engine.

    The engine backend defaults to the ``cv2`` module. Any object exposing
    ``fitLine``, ``fitEllipse``, ``convexHull``, ``boundingRect`` and the
    ``DIST_*`` constants can stand in for it.

    Example:
        engine = GeometryEngine()
        direction, origin = engine.fit_line(points, DistanceType.HUBER)
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        backend: Any = None,
    ) -> None:
        """Initialize the engine adapter.

        Args:
            config: Engine settings (defaults if None)
            backend: Engine implementation (``cv2`` if None)
        """
        self.config = config or EngineConfig()
        self._backend = backend if backend is not None else cv2

    @contextmanager
    def _engine_call(
        self, operation: str, points: Sequence[Point[Any]]
    ) -> Iterator[PointBuffer]:
        logger.debug("Engine call %s with %d points", operation, len(points))
        try:
            with PointBuffer(points) as buffer:
                yield buffer
        except PointKitError:
            raise
        except Exception as e:
            logger.debug("Engine call %s failed: %s", operation, e)
            raise EngineFailureError(operation, str(e)) from e

    def fit_line(
        self,
        points: Sequence[Point[Any]],
        distance_type: DistanceType | None = None,
    ) -> tuple[Point[float], Point[float]]:
        """Fit a line through the points under a robust distance metric.

        Args:
            points: Points to fit
            distance_type: Metric to minimize (configured default if None)

        Returns:
            Tuple of (normalized direction, a point on the line)

        Raises:
            EngineFailureError: If the engine rejects the input
        """
        distance_type = distance_type or self.config.default_distance
        params = self.config.fit_line

        with self._engine_call("fit_line", points) as buffer:
            flag = getattr(self._backend, _DISTANCE_FLAGS[distance_type])
            line = self._backend.fitLine(
                buffer.array, flag, params.param, params.reps, params.aeps
            )
            vx, vy, x0, y0 = (float(v) for v in np.asarray(line).reshape(-1)[:4])

        return Point(vx, vy), Point(x0, y0)

    def fit_ellipse(self, points: Sequence[Point[Any]]) -> Ellipse:
        """Fit an ellipse to the points in the least-squares sense.

        Raises:
            EngineFailureError: If the engine rejects the input (it needs
                at least five points)
        """
        with self._engine_call("fit_ellipse", points) as buffer:
            (cx, cy), (width, height), angle = self._backend.fitEllipse(buffer.array)

        return Ellipse(
            center=Point(float(cx), float(cy)),
            width=float(width),
            height=float(height),
            angle=float(angle),
        )

    def convex_hull(
        self,
        points: Sequence[Point[Any]],
        orientation: Orientation | None = None,
    ) -> list[Point[float]]:
        """Find the convex hull of the points (Sklansky's algorithm).

        Args:
            points: Points to enclose
            orientation: Winding of the returned hull (configured default
                if None)

        Returns:
            Hull vertices in the requested winding

        Raises:
            EngineFailureError: If the engine rejects the input
        """
        orientation = orientation or self.config.default_orientation

        with self._engine_call("convex_hull", points) as buffer:
            hull = self._backend.convexHull(
                buffer.array,
                clockwise=orientation is Orientation.CLOCKWISE,
                returnPoints=True,
            )
            vertices = np.asarray(hull, dtype=np.float64).reshape(-1, 2)

        return [Point(float(x), float(y)) for x, y in vertices]

    def bounding_rectangle(self, points: Sequence[Point[Any]]) -> Rectangle:
        """Compute the up-right bounding rectangle of the points.

        The rectangle is recomputed from the points on every call.

        Raises:
            EngineFailureError: If the engine rejects the input
        """
        with self._engine_call("bounding_rectangle", points) as buffer:
            x, y, width, height = self._backend.boundingRect(buffer.array)

        return Rectangle(int(x), int(y), int(width), int(height))


_default_engine = GeometryEngine()


def fit_line(
    points: Sequence[Point[Any]],
    distance_type: DistanceType = DistanceType.L2,
) -> tuple[Point[float], Point[float]]:
    """Fit a line with the default engine. See GeometryEngine.fit_line."""
    return _default_engine.fit_line(points, distance_type)


def fit_ellipse(points: Sequence[Point[Any]]) -> Ellipse:
    """Fit an ellipse with the default engine. See GeometryEngine.fit_ellipse."""
    return _default_engine.fit_ellipse(points)


def convex_hull(
    points: Sequence[Point[Any]],
    orientation: Orientation = Orientation.COUNTER_CLOCKWISE,
) -> list[Point[float]]:
    """Convex hull with the default engine. See GeometryEngine.convex_hull."""
    return _default_engine.convex_hull(points, orientation)


def bounding_rectangle(points: Sequence[Point[Any]]) -> Rectangle:
    """Bounding rectangle with the default engine. See GeometryEngine.bounding_rectangle."""
    return _default_engine.bounding_rectangle(points)
