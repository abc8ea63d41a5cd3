"""Command-line interface for pointkit.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- One command per operation (interpolate, polyline, fits, hull, bbox)
- Optional JSON result files
- Quiet output mode
- Detailed error reporting
"""

from pointkit.cli.app import cli, main

__all__ = ["cli", "main"]
