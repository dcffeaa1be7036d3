"""
Domain models and value objects.

Contains fundamental domain entities like Point, StoredPoint, Square and reports.
"""

from src.core.domain.point import POINT_ID_PATTERN, Coord, Point, StoredPoint
from src.core.domain.square import Square, SquareCountReport, SquareDetailReport

__all__ = [
    # Point models
    "POINT_ID_PATTERN",
    "Coord",
    "Point",
    "StoredPoint",
    # Square models
    "Square",
    "SquareCountReport",
    "SquareDetailReport",
]
