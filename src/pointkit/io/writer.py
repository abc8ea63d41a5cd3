"""JSON writer for operation results."""

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pointkit.domain import LineSegment
from pointkit.exceptions import PointFileError


class ResultWriter:
    """Writes operation results as JSON documents.

    Every document carries the operation name next to its payload:
    ``{"operation": "interpolate", "result": ...}``.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def write_payload(self, operation: str, result: Any) -> None:
        """Write an already serializable result.

        Raises:
            PointFileError: If the file cannot be written
        """
        document = {"operation": operation, "result": result}
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8") as handle:
                json.dump(document, handle, indent=2)
        except (OSError, TypeError, ValueError) as e:
            raise PointFileError(str(self._path), str(e)) from e

    def write_values(
        self, operation: str, queries: Sequence[float], values: Sequence[float]
    ) -> None:
        """Write query/value pairs, e.g. interpolation results."""
        self.write_payload(
            operation,
            [{"x": x, "y": y} for x, y in zip(queries, values, strict=True)],
        )

    def write_segments(self, operation: str, segments: Sequence[LineSegment[Any]]) -> None:
        """Write a list of line segments."""
        self.write_payload(operation, [s.to_dict() for s in segments])
