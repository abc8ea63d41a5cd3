"""Configuration settings for pointkit."""

from pathlib import Path

from pydantic import BaseModel, Field

from pointkit.domain import DistanceType, Orientation


class FitLineConfig(BaseModel):
    """Numeric parameters forwarded to the engine's line fitting.

    The defaults match the classic ``cvFitLine(seq, type, 0, 0.01, 0.01)``
    call.
    """

    param: float = Field(
        default=0.0,
        ge=0.0,
        description="Numerical parameter C of the robust metric (0 = engine optimum)",
    )
    reps: float = Field(
        default=0.01,
        gt=0.0,
        le=1.0,
        description="Sufficient accuracy for the distance to the origin",
    )
    aeps: float = Field(
        default=0.01,
        gt=0.0,
        le=1.0,
        description="Sufficient accuracy for the angle",
    )


class EngineConfig(BaseModel):
    """Configuration for geometry engine calls."""

    fit_line: FitLineConfig = Field(default_factory=FitLineConfig)
    default_distance: DistanceType = Field(
        default=DistanceType.L2,
        description="Distance metric used when none is requested",
    )
    default_orientation: Orientation = Field(
        default=Orientation.COUNTER_CLOCKWISE,
        description="Convex hull winding used when none is requested",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PointKitSettings(BaseModel):
    """Main application settings."""

    engine: EngineConfig = Field(default_factory=EngineConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PointKitSettings:
    """Get default application settings."""
    return PointKitSettings()
