"""
Planar — Точки и векторы в плоскости локальной проекции

Point и Vector — лёгкие NamedTuple (создаются сотнями внутри итераций solver).
Координаты в метрах, смещение относительно центра гномонической проекции.
Point без своего центра проекции смысла не имеет: точки из разных центров
никогда не сравниваются.
"""

from typing import NamedTuple


class Point(NamedTuple):
    """Декартова точка (x, y) в метрах. x — на восток, y — на север."""

    x: float
    y: float


class Vector(NamedTuple):
    """Прямая в плоскости проекции, заданная двумя точками."""

    start: Point
    end: Point
