"""Configuration management for pointkit.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FitLineConfig: Accuracy parameters for line fitting
- EngineConfig: Geometry engine settings
- LoggingConfig: Logging settings
- PointKitSettings: Main application settings
"""

from pointkit.config.settings import (
    EngineConfig,
    FitLineConfig,
    LoggingConfig,
    PointKitSettings,
    get_default_settings,
)

__all__ = [
    "EngineConfig",
    "FitLineConfig",
    "LoggingConfig",
    "PointKitSettings",
    "get_default_settings",
]
