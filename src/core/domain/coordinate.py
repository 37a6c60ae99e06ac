"""
Coordinate / Line — Модели точек и линий на эллипсоиде WGS84

Immutable Pydantic модели. Координаты хранятся в порядке (longitude, latitude),
в градусах.

Диапазоны НЕ валидируются: значения вне [-180, 180] / [-90, 90], а также
NaN/Inf принимаются как есть и пропагируют в геодезический движок.
NaN в координате — штатный сигнал о вырожденном или несошедшемся расчёте.
"""

import math
from typing import Sequence

from pydantic import BaseModel, Field

from src.core.math.numerical_safeguards import has_nan, is_valid_pair


# =============================================================================
# COORDINATE
# =============================================================================


class Coordinate(BaseModel):
    """
    Точка на поверхности эллипсоида WGS84.

    Immutable модель (frozen=True). Пара (lon, lat) в градусах.
    """

    lon: float = Field(..., description="Долгота (градусы)")
    lat: float = Field(..., description="Широта (градусы)")

    model_config = {"frozen": True}

    @classmethod
    def from_pair(cls, pair: Sequence[float]) -> "Coordinate":
        """Создание из пары [lon, lat]."""
        return cls(lon=pair[0], lat=pair[1])

    @classmethod
    def nan(cls) -> "Coordinate":
        """Координата-маркер неудачного расчёта (NaN, NaN)."""
        return cls(lon=math.nan, lat=math.nan)

    def to_pair(self) -> tuple[float, float]:
        """Пара (lon, lat)."""
        return (self.lon, self.lat)

    def is_finite(self) -> bool:
        """Обе компоненты конечны (не NaN, не Inf)."""
        return is_valid_pair(self.lon, self.lat)

    def has_nan(self) -> bool:
        """Хотя бы одна компонента NaN."""
        return has_nan(self.lon, self.lat)


# =============================================================================
# LINE
# =============================================================================


class Line(BaseModel):
    """
    Линия (геодезический отрезок) между двумя точками.

    Направление не влияет на результат intercept, но идентичность концов
    важна: результат всегда зажимается в отрезок между ними.
    """

    origin: Coordinate = Field(..., description="Начальная точка")
    destination: Coordinate = Field(..., description="Конечная точка")

    model_config = {"frozen": True}

    @classmethod
    def from_pairs(cls, origin: Sequence[float], destination: Sequence[float]) -> "Line":
        """Создание из двух пар [lon, lat]."""
        return cls(
            origin=Coordinate.from_pair(origin),
            destination=Coordinate.from_pair(destination),
        )

    def endpoints(self) -> tuple[Coordinate, Coordinate]:
        """Концы линии (origin, destination)."""
        return (self.origin, self.destination)

    def midpoint(self) -> Coordinate:
        """
        Арифметическое среднее концов по lon и lat независимо.

        Это НЕ геодезическая середина: используется только как начальное
        приближение для intercept solver.
        """
        return Coordinate(
            lon=(self.origin.lon + self.destination.lon) / 2,
            lat=(self.origin.lat + self.destination.lat) / 2,
        )

    def to_pairs(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """Пары ((lon, lat), (lon, lat))."""
        return (self.origin.to_pair(), self.destination.to_pair())
