"""
Planar Intersect — перпендикуляр из точки на отрезок в локальной плоскости

Работает в плоскости гномонической проекции (метры), где геодезические через
центр проекции отображаются прямыми.

Алгоритм:
    1. Горизонтальный отрезок (p1.y == p2.y) → (point.x, p1.y)
    2. Вертикальный отрезок (p1.x == p2.x) → (p1.x, point.y)
    3. Общий случай: y = m·x + b, перпендикуляр m2 = -1/m через point,
       пересечение x = (b2 - b) / (m - m2), y = m·x + b
    4. Каждая ось независимо зажимается в диапазон концов отрезка:
       значение вне диапазона заменяется ближайшим концом по этой оси

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнения в пунктах 1-2 точные (==), без epsilon
2. Результат (если конечный) лежит в bbox концов отрезка по каждой оси
3. Вырожденные входы дают NaN/Inf, исключения не бросаются
"""

from src.core.domain.planar import Point, Vector
from src.core.math.numerical_safeguards import ieee_divide, in_range, nearest


def intersect(vector: Vector, point: Point) -> Point:
    """
    Основание перпендикуляра из point на прямую vector, зажатое в отрезок.

    Args:
        vector: Отрезок (start, end) в плоскости проекции
        point: Точка в той же плоскости

    Returns:
        Point на отрезке (по каждой оси в пределах концов)

    Examples:
        >>> intersect(Vector(Point(0, 0), Point(10, 0)), Point(5, 7))
        Point(x=5, y=0)
        >>> intersect(Vector(Point(0, 0), Point(10, 10)), Point(0, 10))
        Point(x=5.0, y=5.0)
    """
    p1, p2 = vector.start, vector.end

    if p1.y == p2.y:
        # Горизонтальная прямая
        x = point.x
        y = p1.y
    elif p1.x == p2.x:
        # Вертикальная прямая
        x = p1.x
        y = point.y
    else:
        m = (p2.y - p1.y) / (p2.x - p1.x)
        b = p1.y - m * p1.x

        # Перпендикуляр через point
        m2 = ieee_divide(-1.0, m)
        b2 = point.y - m2 * point.x

        # m·x + b = m2·x + b2
        x = ieee_divide(b2 - b, m - m2)
        y = m * x + b

    if not in_range(x, (p1.x, p2.x)):
        x = nearest(x, (p1.x, p2.x))

    if not in_range(y, (p1.y, p2.y)):
        y = nearest(y, (p1.y, p2.y))

    return Point(x, y)


class PlanarIntersector:
    """Объектная обёртка над intersect() для внедрения в solver."""

    def intersect(self, vector: Vector, point: Point) -> Point:
        return intersect(vector, point)
