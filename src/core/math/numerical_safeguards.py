"""
Numerical Safeguards — численные примитивы для геодезических расчётов

Модуль собирает мелкие численные операции, на которые опираются
планарное пересечение и итеративный intercept solver:
- Проверка конечности float и пар координат
- Проверка вхождения в диапазон без учёта порядка границ
- Выбор ближайшего значения из набора
- Деление с IEEE-семантикой (inf/nan вместо ZeroDivisionError)
- Валидация параметров конфигурации

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf НЕ санитизируются: невалидные значения пропагируют к вызывающему
2. Сравнения точные (без epsilon), если явно не указано иное
3. Все операции детерминированы и воспроизводимы
"""

import math
import sys
from typing import Final, Sequence

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог сходимости intercept solver (сравнивается с приращением в градусах)
EPS_CONVERGENCE_DEG: Final[float] = 1e-16

# Машинный epsilon double
EPS_MACHINE: Final[float] = sys.float_info.epsilon


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_valid_pair(first: float, second: float) -> bool:
    """Обе компоненты пары конечны."""
    return is_valid_float(first) and is_valid_float(second)


def has_nan(*values: float) -> bool:
    """
    Есть ли среди значений NaN.

    Inf не считается NaN: intercept solver прерывается только на NaN.

    Examples:
        >>> has_nan(1.0, float('nan'))
        True
        >>> has_nan(1.0, float('inf'))
        False
    """
    return any(math.isnan(v) for v in values)


# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================


def in_range(value: float, bounds: Sequence[float]) -> bool:
    """
    Проверка вхождения value в замкнутый диапазон [bounds[0], bounds[1]].

    Порядок границ не важен: (0, 10) и (10, 0) задают один и тот же диапазон.

    Args:
        value: Проверяемое значение
        bounds: Пара границ в любом порядке

    Returns:
        True если value внутри диапазона (включительно), False иначе (в т.ч. NaN)

    Examples:
        >>> in_range(5.0, (0.0, 10.0))
        True
        >>> in_range(5.0, (10.0, 0.0))
        True
        >>> in_range(10.0, (0.0, 10.0))
        True
        >>> in_range(11.0, (10.0, 0.0))
        False
    """
    low, high = bounds[0], bounds[1]
    if high > low:
        return low <= value <= high
    return high <= value <= low


def nearest(value: float, candidates: Sequence[float]) -> float:
    """
    Ближайший к value элемент из candidates.

    При равном расстоянии возвращается первый по порядку кандидат.
    Если value равно NaN, расстояния несравнимы и также возвращается первый.

    Examples:
        >>> nearest(12.0, (0.0, 10.0))
        10.0
        >>> nearest(5.0, (0.0, 10.0))
        0.0
    """
    if not candidates:
        raise ValueError("candidates must not be empty")
    return min(candidates, key=lambda c: abs(c - value))


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE 754.

    В отличие от оператора `/`, деление на ноль не бросает ZeroDivisionError:
    - x / ±0 → ±inf (знак — произведение знаков)
    - 0 / 0 и NaN / 0 → NaN

    Используется там, где вырожденные входы должны дать non-finite результат,
    а не исключение.

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(1.0, -0.0)
        -inf
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator) or math.isnan(denominator):
        return math.nan

    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_min_int(value: int, name: str, min_value: int) -> None:
    """
    Валидация целочисленного параметра с нижней границей.

    Raises:
        ValueError: Если value не int или value < min_value
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")

    if value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")
