"""
Domain models and value objects.

Contains fundamental geodesy entities: Coordinate, Line (ellipsoidal)
and Point, Vector (local projection plane).
"""

from src.core.domain.coordinate import Coordinate, Line
from src.core.domain.planar import Point, Vector

__all__ = [
    # Ellipsoidal models
    "Coordinate",
    "Line",
    # Planar models
    "Point",
    "Vector",
]
