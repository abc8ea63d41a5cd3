"""Exception hierarchy for pointkit."""

from typing import Any


class PointKitError(Exception):
    """Base exception for all pointkit errors."""

    pass


class GeometryError(PointKitError):
    """Errors in geometric calculations."""

    pass


class InvalidArgumentError(GeometryError):
    """Input violates a precondition of the requested operation."""

    def __init__(self, reason: str, **context: Any) -> None:
        self.reason = reason
        self.context = context
        super().__init__(reason)


class UndefinedInterpolationError(GeometryError):
    """Line equation cannot be evaluated along the requested axis."""

    def __init__(self, value: float, segment: Any) -> None:
        self.value = value
        self.segment = segment
        super().__init__(
            f"Cannot evaluate degenerate segment {segment} at {value}"
        )


class EngineFailureError(PointKitError):
    """The external geometry engine rejected or failed a call."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Geometry engine failed in '{operation}': {reason}")


class PointFileError(PointKitError):
    """Error reading or writing a point file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to process point file '{path}': {reason}")
