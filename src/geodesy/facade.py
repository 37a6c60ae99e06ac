"""Geodesy Facade — публичные операции над точками и линиями WGS84.

Операции:
- distance_to_point: длина геодезической между двумя точками (м)
- distance_to_line: расстояние от точки до ближайшей точки линии (м)
- intercept: ближайшая к точке точка на линии
- solve_intercept: то же, но с диагностикой InterceptResult
- destination_point: прямая задача (точка по азимуту и расстоянию)
- initial_bearing / final_bearing: азимут в начале / в конце геодезической

Все углы в градусах, расстояния в метрах, координаты — (lon, lat).
Вырожденные расчёты возвращают NaN, исключение бросается только при
исчерпании лимита итераций intercept (InterceptNotConverged).
"""

import math
from typing import Optional

from src.core.contracts.validators import (
    CoordinateLike,
    LineLike,
    as_coordinate,
    as_line,
)
from src.core.domain.coordinate import Coordinate
from src.geodesy.engine import GeodesicEngine
from src.intercept.state_machine import (
    InterceptNotConverged,
    InterceptResult,
    InterceptSolver,
    InterceptSolverConfig,
    InterceptState,
)


class GeodesyFacade:
    """Фасад геодезических операций поверх GeodesicEngine и InterceptSolver.

    Экземпляр не хранит состояния между вызовами: все операции реентерабельны.
    """

    def __init__(
        self,
        engine: Optional[GeodesicEngine] = None,
        solver_config: Optional[InterceptSolverConfig] = None
    ):
        """
        Args:
            engine: геодезический движок (default WGS84)
            solver_config: конфигурация intercept solver
        """
        self.engine = engine or GeodesicEngine()
        self.solver = InterceptSolver(self.engine, solver_config)

    def distance_to_point(self, origin: CoordinateLike, destination: CoordinateLike) -> float:
        """Расстояние между точками (м). Симметрично, 0 для совпадающих точек."""
        return self.engine.distance(as_coordinate(origin), as_coordinate(destination))

    def distance_to_line(self, point: CoordinateLike, line: LineLike) -> float:
        """Расстояние от точки до линии (м): distance_to_point(point, intercept(point, line)).

        Raises:
            InterceptNotConverged: если solver исчерпал лимит итераций
        """
        point = as_coordinate(point)
        nearest_point = self.intercept(point, line)
        if nearest_point.has_nan():
            return math.nan
        return self.distance_to_point(point, nearest_point)

    def solve_intercept(self, point: CoordinateLike, line: LineLike) -> InterceptResult:
        """Intercept с полной диагностикой (терминальное состояние, итерации)."""
        return self.solver.solve(as_coordinate(point), as_line(line))

    def intercept(self, point: CoordinateLike, line: LineLike) -> Coordinate:
        """Точка на линии, ближайшая к point.

        Returns:
            Coordinate; (NaN, NaN)-компоненты при вырожденной геометрии

        Raises:
            InterceptNotConverged: если solver исчерпал лимит итераций
        """
        result = self.solve_intercept(point, line)
        if result.state == InterceptState.EXHAUSTED:
            raise InterceptNotConverged(result)
        return result.coordinate

    def destination_point(
        self,
        origin: CoordinateLike,
        azimuth: float,
        distance: float
    ) -> Coordinate:
        """Точка в distance метрах от origin по азимуту azimuth (0 — север, 90 — восток)."""
        return self.engine.destination(as_coordinate(origin), azimuth, distance)

    def initial_bearing(self, origin: CoordinateLike, destination: CoordinateLike) -> float:
        """Азимут геодезической в origin, градусы в (-180, 180]."""
        azi1, _ = self.engine.azimuths(as_coordinate(origin), as_coordinate(destination))
        return azi1

    def final_bearing(self, origin: CoordinateLike, destination: CoordinateLike) -> float:
        """Азимут геодезической в destination, градусы в (-180, 180]."""
        _, azi2 = self.engine.azimuths(as_coordinate(origin), as_coordinate(destination))
        return azi2


# Глобальный экземпляр фасада (WGS84, конфигурация по умолчанию)
_DEFAULT_FACADE = GeodesyFacade()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def distance_to_point(origin: CoordinateLike, destination: CoordinateLike) -> float:
    return _DEFAULT_FACADE.distance_to_point(origin, destination)


def distance_to_line(point: CoordinateLike, line: LineLike) -> float:
    return _DEFAULT_FACADE.distance_to_line(point, line)


def intercept(point: CoordinateLike, line: LineLike) -> Coordinate:
    return _DEFAULT_FACADE.intercept(point, line)


def solve_intercept(point: CoordinateLike, line: LineLike) -> InterceptResult:
    return _DEFAULT_FACADE.solve_intercept(point, line)


def destination_point(origin: CoordinateLike, azimuth: float, distance: float) -> Coordinate:
    return _DEFAULT_FACADE.destination_point(origin, azimuth, distance)


def initial_bearing(origin: CoordinateLike, destination: CoordinateLike) -> float:
    return _DEFAULT_FACADE.initial_bearing(origin, destination)


def final_bearing(origin: CoordinateLike, destination: CoordinateLike) -> float:
    return _DEFAULT_FACADE.final_bearing(origin, destination)
