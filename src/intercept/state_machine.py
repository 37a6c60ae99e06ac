"""Intercept State Machine — итеративный поиск ближайшей точки на линии.

Для точки B1 и линии (A1, A2) ищется B2 — точка на геодезическом отрезке
A1-A2, ближайшая к B1. На каждой итерации:
- A1, A2, B1 проецируются гномонически с центром в текущем B2
- В плоскости строится перпендикуляр из b1 на отрезок a1-a2
- Основание перпендикуляра проецируется обратно → новое B2

Начальное B2 — арифметическое среднее концов линии (не геодезическая середина).

Терминальные состояния:
- DEGENERATE: новое B2 содержит NaN (вырожденная геометрия)
- CONVERGED: приращение B2 меньше convergence_eps по обеим осям
- CYCLED: новое B2 уже встречалось (колебание между неподвижными точками)
- EXHAUSTED: достигнут max_iterations
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Set, Tuple

from src.core.domain.coordinate import Coordinate, Line
from src.core.domain.planar import Point, Vector
from src.core.math.numerical_safeguards import (
    EPS_CONVERGENCE_DEG,
    validate_min_int,
    validate_positive,
)
from src.core.math.planar_intersect import PlanarIntersector

logger = logging.getLogger(__name__)


class GnomonicProjection(Protocol):
    """Минимальный интерфейс движка, нужный solver."""

    def gnomonic_forward(self, center: Coordinate, coord: Coordinate) -> Point: ...

    def gnomonic_reverse(self, center: Coordinate, point: Point) -> Coordinate: ...


class InterceptState(str, Enum):
    """Терминальное состояние intercept solver."""
    CONVERGED = "CONVERGED"
    DEGENERATE = "DEGENERATE"
    CYCLED = "CYCLED"
    EXHAUSTED = "EXHAUSTED"


@dataclass(frozen=True)
class InterceptSolverConfig:
    """Конфигурация intercept solver.

    - convergence_eps: порог приращения B2 (градусы)
    - max_iterations: страховочный лимит итераций
    - absolute_delta: сравнивать |delta| вместо delta. По умолчанию False:
      отрицательное приращение любой величины считается сошедшимся
    """
    convergence_eps: float = EPS_CONVERGENCE_DEG
    max_iterations: int = 100
    absolute_delta: bool = False

    def __post_init__(self) -> None:
        validate_positive(self.convergence_eps, "convergence_eps")
        validate_min_int(self.max_iterations, "max_iterations", 1)


@dataclass(frozen=True)
class InterceptResult:
    """Результат работы intercept solver."""

    coordinate: Coordinate
    state: InterceptState
    iterations: int

    # Диагностика
    termination_reason: str
    details: str

    @property
    def succeeded(self) -> bool:
        """Завершение без NaN и без исчерпания лимита."""
        return self.state in (InterceptState.CONVERGED, InterceptState.CYCLED)


class InterceptNotConverged(Exception):
    """Solver исчерпал max_iterations, не сойдясь и не обнаружив цикл.

    Атрибут result содержит последнее приближение и диагностику.
    """

    def __init__(self, result: InterceptResult):
        self.result = result
        super().__init__(
            f"Intercept did not converge after {result.iterations} iterations: "
            f"{result.details}"
        )


class InterceptSolver:
    """Intercept solver как явная машина состояний.

    Переходы после каждой итерации:
    - nB2 содержит NaN            → DEGENERATE (nB2 возвращается как есть)
    - delta < eps по обеим осям   → CONVERGED
    - nB2 встречалось ранее       → CYCLED
    - iterations >= max_iterations → EXHAUSTED
    - иначе                       → следующая итерация
    """

    def __init__(
        self,
        engine: GnomonicProjection,
        config: Optional[InterceptSolverConfig] = None,
        intersector: Optional[PlanarIntersector] = None
    ):
        """
        Args:
            engine: поставщик гномонической проекции (forward/reverse)
            config: конфигурация solver
            intersector: планарное пересечение (default PlanarIntersector)
        """
        self.engine = engine
        self.config = config or InterceptSolverConfig()
        self.intersector = intersector or PlanarIntersector()

    def solve(self, point: Coordinate, line: Line) -> InterceptResult:
        """Поиск точки на line, ближайшей к point.

        Args:
            point: точка B1
            line: линия (A1, A2)

        Returns:
            InterceptResult с терминальным состоянием
        """
        a1_coord, a2_coord = line.endpoints()
        b2 = line.midpoint()
        visited: Set[Tuple[float, float]] = set()
        iterations = 0

        while True:
            iterations += 1
            next_b2 = self._step(b2, a1_coord, a2_coord, point)

            if next_b2.has_nan():
                return self._finish(
                    coordinate=next_b2,
                    state=InterceptState.DEGENERATE,
                    iterations=iterations,
                    termination_reason="non_finite",
                    details=f"Reverse projection produced NaN from center {b2.to_pair()}"
                )

            delta_lon = next_b2.lon - b2.lon
            delta_lat = next_b2.lat - b2.lat
            b2 = next_b2

            if self._is_converged(delta_lon, delta_lat):
                state = InterceptState.CONVERGED
                reason = "delta_below_eps"
                details = f"delta=({delta_lon:.3e}, {delta_lat:.3e})"
                break

            key = b2.to_pair()
            if key in visited:
                state = InterceptState.CYCLED
                reason = "revisited_center"
                details = f"Center {key} already visited, delta=({delta_lon:.3e}, {delta_lat:.3e})"
                break
            visited.add(key)

            if iterations >= self.config.max_iterations:
                state = InterceptState.EXHAUSTED
                reason = "max_iterations"
                details = f"Last delta=({delta_lon:.3e}, {delta_lat:.3e}) at {key}"
                break

        return self._finish(
            coordinate=b2,
            state=state,
            iterations=iterations,
            termination_reason=reason,
            details=details
        )

    def _step(
        self,
        center: Coordinate,
        a1_coord: Coordinate,
        a2_coord: Coordinate,
        point: Coordinate
    ) -> Coordinate:
        """Одна итерация: проекция, пересечение в плоскости, обратная проекция."""
        a1 = self.engine.gnomonic_forward(center, a1_coord)
        a2 = self.engine.gnomonic_forward(center, a2_coord)
        b1 = self.engine.gnomonic_forward(center, point)

        b2 = self.intersector.intersect(Vector(a1, a2), b1)
        return self.engine.gnomonic_reverse(center, b2)

    def _is_converged(self, delta_lon: float, delta_lat: float) -> bool:
        """Проверка приращения против convergence_eps."""
        eps = self.config.convergence_eps
        if self.config.absolute_delta:
            return abs(delta_lon) < eps and abs(delta_lat) < eps
        return delta_lon < eps and delta_lat < eps

    def _finish(
        self,
        coordinate: Coordinate,
        state: InterceptState,
        iterations: int,
        termination_reason: str,
        details: str
    ) -> InterceptResult:
        """Создание результата с логированием терминального состояния."""
        if state == InterceptState.EXHAUSTED:
            logger.warning(
                "Intercept solver exhausted %d iterations: %s", iterations, details
            )
        else:
            logger.debug(
                "Intercept solver finished: state=%s iterations=%d reason=%s",
                state.value, iterations, termination_reason
            )

        return InterceptResult(
            coordinate=coordinate,
            state=state,
            iterations=iterations,
            termination_reason=termination_reason,
            details=details
        )
