"""Point file I/O layer for pointkit.

This module handles reading point sets from files and writing operation
results, keeping file formats out of the core algorithms.

Key classes:
- PointReader: Load points from CSV or JSON
- ResultWriter: Save results as JSON
"""

from pointkit.io.reader import PointReader
from pointkit.io.writer import ResultWriter

__all__ = [
    "PointReader",
    "ResultWriter",
]
