"""Utility functions for pointkit.

This module provides logging setup and configuration.
"""

from pointkit.utils.logging import LOG_LEVELS, OperationLogger, configure_logging

__all__ = [
    "LOG_LEVELS",
    "OperationLogger",
    "configure_logging",
]
