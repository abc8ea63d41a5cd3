"""Point file reader.

This module provides the PointReader class for loading point sets from
CSV or JSON files into domain models.

Supported layouts:
- CSV: two numeric columns (x, y), optionally preceded by a header row
- JSON: a list of ``[x, y]`` pairs or ``{"x": ..., "y": ...}`` objects
"""

import csv
import json
from pathlib import Path
from typing import Any

from pointkit.domain import Point
from pointkit.exceptions import PointFileError

SUPPORTED_SUFFIXES = (".csv", ".json")


def _parse_number(text: str) -> int | float:
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        return float(text)


def _coerce(value: Any) -> int | float:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, str):
        return _parse_number(value)
    return value


class PointReader:
    """Loads point sets from CSV or JSON files.

    Example:
        reader = PointReader(Path("samples.csv"))
        reader.load()
        print(reader.point_count)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the point reader.

        Args:
            path: Path to a .csv or .json point file
        """
        self._path = path
        self._points: list[Point[Any]] | None = None

    def load(self) -> None:
        """Load and parse the point file.

        Raises:
            PointFileError: If the file is missing, has an unsupported
                suffix, or contains malformed rows
        """
        if not self._path.exists():
            raise PointFileError(str(self._path), "file not found")

        suffix = self._path.suffix.lower()
        if suffix not in SUPPORTED_SUFFIXES:
            raise PointFileError(
                str(self._path),
                f"unsupported format '{suffix}' (expected .csv or .json)",
            )

        try:
            if suffix == ".csv":
                self._points = self._read_csv()
            else:
                self._points = self._read_json()
        except PointFileError:
            raise
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise PointFileError(str(self._path), str(e)) from e

    def _read_csv(self) -> list[Point[Any]]:
        points: list[Point[Any]] = []
        with self._path.open(newline="", encoding="utf-8") as handle:
            for line_no, row in enumerate(csv.reader(handle), start=1):
                cells = [cell for cell in row if cell.strip()]
                if not cells:
                    continue
                if len(cells) < 2:
                    raise PointFileError(
                        str(self._path), f"line {line_no}: expected 2 columns"
                    )
                try:
                    x, y = _parse_number(cells[0]), _parse_number(cells[1])
                except ValueError:
                    # Header row
                    if line_no == 1:
                        continue
                    raise PointFileError(
                        str(self._path), f"line {line_no}: non-numeric value"
                    ) from None
                points.append(Point(x, y))
        return points

    def _read_json(self) -> list[Point[Any]]:
        with self._path.open(encoding="utf-8") as handle:
            data = json.load(handle)

        if isinstance(data, dict) and "points" in data:
            data = data["points"]
        if not isinstance(data, list):
            raise PointFileError(str(self._path), "expected a list of points")

        points: list[Point[Any]] = []
        for item in data:
            if isinstance(item, dict):
                points.append(Point(_coerce(item["x"]), _coerce(item["y"])))
            elif isinstance(item, (list, tuple)) and len(item) == 2:
                points.append(Point(_coerce(item[0]), _coerce(item[1])))
            else:
                raise PointFileError(str(self._path), f"malformed point: {item!r}")
        return points

    @property
    def points(self) -> list[Point[Any]]:
        """Return the loaded points.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._points is None:
            raise RuntimeError("Points not loaded. Call load() first.")
        return list(self._points)

    @property
    def point_count(self) -> int:
        """Return the number of loaded points."""
        return len(self.points)

    @property
    def is_integer(self) -> bool:
        """Whether every loaded coordinate is an integer."""
        return all(
            isinstance(p.x, int) and isinstance(p.y, int) for p in self.points
        )

    def __enter__(self) -> "PointReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self._points = None
