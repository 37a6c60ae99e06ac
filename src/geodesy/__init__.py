"""Geodesy — точки и линии на эллипсоиде WGS84.

- GeodesicEngine: прямая/обратная задачи и гномоническая проекция (geographiclib)
- GeodesyFacade: расстояния, intercept, прямая задача, азимуты
"""

from .engine import GeodesicEngine, GnomonicConfig
from .facade import (
    GeodesyFacade,
    destination_point,
    distance_to_line,
    distance_to_point,
    final_bearing,
    initial_bearing,
    intercept,
    solve_intercept,
)

__all__ = [
    "GeodesicEngine",
    "GnomonicConfig",
    "GeodesyFacade",
    "destination_point",
    "distance_to_line",
    "distance_to_point",
    "final_bearing",
    "initial_bearing",
    "intercept",
    "solve_intercept",
]
