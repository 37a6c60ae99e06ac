"""Intercept — итеративный поиск ближайшей точки на геодезической линии.

- Гномоническая проекция с центром в текущем приближении
- Планарный перпендикуляр с зажатием в отрезок
- Выход по NaN, сходимости, циклу или лимиту итераций
"""

from .state_machine import (
    GnomonicProjection,
    InterceptNotConverged,
    InterceptResult,
    InterceptSolver,
    InterceptSolverConfig,
    InterceptState,
)

__all__ = [
    "GnomonicProjection",
    "InterceptNotConverged",
    "InterceptResult",
    "InterceptSolver",
    "InterceptSolverConfig",
    "InterceptState",
]
