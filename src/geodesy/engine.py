"""Geodesic Engine — обёртка над geographiclib для WGS84.

Предоставляет:
- inverse: обратная геодезическая задача (расстояние, азимуты, m12, M12)
- direct: прямая геодезическая задача (точка по азимуту и расстоянию)
- gnomonic_forward: гномоническая проекция точки относительно центра
- gnomonic_reverse: обратная гномоническая проекция (ограниченный Newton)

Гномоническая проекция: любая геодезическая через центр отображается прямой.
Формулы проекции (Karney, Algorithms for geodesics, 2013, §8):
    rho = m12 / M12,  x = rho·sin(azi1),  y = rho·cos(azi1)
Проекция определена только при M12 > 0.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from geographiclib.geodesic import Geodesic

from src.core.domain.coordinate import Coordinate
from src.core.domain.planar import Point
from src.core.math.numerical_safeguards import (
    EPS_MACHINE,
    ieee_divide,
    is_valid_pair,
    validate_min_int,
    validate_positive,
)

logger = logging.getLogger(__name__)


# Маски выходных величин geographiclib
DISTANCE_MASK = Geodesic.DISTANCE
AZIMUTH_MASK = Geodesic.AZIMUTH
POSITION_MASK = Geodesic.LATITUDE | Geodesic.LONGITUDE
DIFFERENTIAL_MASK = Geodesic.AZIMUTH | Geodesic.REDUCEDLENGTH | Geodesic.GEODESICSCALE


@dataclass(frozen=True)
class GnomonicConfig:
    """Конфигурация обратной гномонической проекции.

    Критерий остановки Newton: |ds| < tolerance_scale · sqrt(eps) · a
    """
    max_iterations: int = 10
    tolerance_scale: float = 0.01

    def __post_init__(self) -> None:
        validate_min_int(self.max_iterations, "max_iterations", 1)
        validate_positive(self.tolerance_scale, "tolerance_scale")


class GeodesicEngine:
    """Геодезический движок на эллипсоиде (по умолчанию WGS84).

    Все координаты на входе и выходе — Coordinate (lon, lat) в градусах,
    несмотря на то что geographiclib принимает порядок (lat, lon).
    """

    def __init__(
        self,
        geodesic: Optional[Geodesic] = None,
        gnomonic_config: Optional[GnomonicConfig] = None
    ):
        """
        Args:
            geodesic: эллипсоид geographiclib (default Geodesic.WGS84)
            gnomonic_config: конфигурация обратной гномонической проекции
        """
        self.geodesic = geodesic or Geodesic.WGS84
        self.gnomonic_config = gnomonic_config or GnomonicConfig()

    @property
    def equatorial_radius(self) -> float:
        """Большая полуось эллипсоида (м)."""
        return self.geodesic.a

    # -------------------------------------------------------------------------
    # Geodesic problems
    # -------------------------------------------------------------------------

    def inverse(
        self,
        origin: Coordinate,
        destination: Coordinate,
        outmask: int = Geodesic.STANDARD
    ) -> Dict[str, Any]:
        """Обратная задача: результат geographiclib Inverse.

        Ключи результата зависят от outmask: s12, azi1, azi2, m12, M12, M21.
        """
        return self.geodesic.Inverse(
            origin.lat, origin.lon,
            destination.lat, destination.lon,
            outmask
        )

    def direct(
        self,
        origin: Coordinate,
        azimuth: float,
        distance: float,
        outmask: int = POSITION_MASK
    ) -> Dict[str, Any]:
        """Прямая задача: пройти distance метров от origin по азимуту azimuth.

        Отрицательные и очень большие расстояния передаются без изменений.
        """
        return self.geodesic.Direct(origin.lat, origin.lon, azimuth, distance, outmask)

    def distance(self, origin: Coordinate, destination: Coordinate) -> float:
        """Длина геодезической (м)."""
        return self.inverse(origin, destination, DISTANCE_MASK)["s12"]

    def azimuths(self, origin: Coordinate, destination: Coordinate) -> tuple[float, float]:
        """Азимуты (azi1, azi2) в градусах: в начале и в конце геодезической."""
        result = self.inverse(origin, destination, AZIMUTH_MASK)
        return result["azi1"], result["azi2"]

    def destination(self, origin: Coordinate, azimuth: float, distance: float) -> Coordinate:
        """Конечная точка прямой задачи."""
        result = self.direct(origin, azimuth, distance, POSITION_MASK)
        return Coordinate(lon=result["lon2"], lat=result["lat2"])

    # -------------------------------------------------------------------------
    # Gnomonic projection
    # -------------------------------------------------------------------------

    def gnomonic_forward(self, center: Coordinate, coord: Coordinate) -> Point:
        """Гномоническая проекция coord в плоскость с центром center.

        Returns:
            Point (x, y) в метрах; (NaN, NaN) если M12 <= 0 (точка вне области
            определения проекции, например у антипода центра) или вход не конечен
        """
        if not (is_valid_pair(center.lon, center.lat) and is_valid_pair(coord.lon, coord.lat)):
            return Point(math.nan, math.nan)

        result = self.inverse(center, coord, DIFFERENTIAL_MASK)

        if result["M12"] <= 0:
            return Point(math.nan, math.nan)

        rho = result["m12"] / result["M12"]
        azi0 = math.radians(result["azi1"])
        return Point(rho * math.sin(azi0), rho * math.cos(azi0))

    def gnomonic_reverse(self, center: Coordinate, point: Point) -> Coordinate:
        """Обратная гномоническая проекция point с центром center.

        Решает rho(s) = |point| по длине дуги s вдоль геодезической из center
        с азимутом atan2(x, y). Для rho <= a используется
            drho/ds = 1/M12^2,
        для rho > a решается 1/rho(s) = 1/rho с
            d(1/rho)/ds = -1/m12^2.

        Returns:
            Coordinate; (NaN, NaN) если Newton не сошёлся за max_iterations
        """
        if not is_valid_pair(point.x, point.y) or not is_valid_pair(center.lon, center.lat):
            return Coordinate.nan()

        a = self.equatorial_radius
        tolerance = self.gnomonic_config.tolerance_scale * math.sqrt(EPS_MACHINE) * a

        azi0 = math.degrees(math.atan2(point.x, point.y))
        rho = math.hypot(point.x, point.y)
        s = a * math.atan(rho / a)
        little = rho <= a
        if not little:
            rho = 1 / rho

        line = self.geodesic.Line(
            center.lat, center.lon, azi0,
            Geodesic.LATITUDE | Geodesic.LONGITUDE | Geodesic.AZIMUTH
            | Geodesic.DISTANCE_IN | Geodesic.REDUCEDLENGTH | Geodesic.GEODESICSCALE
        )
        outmask = (
            Geodesic.LATITUDE | Geodesic.LONGITUDE | Geodesic.AZIMUTH
            | Geodesic.REDUCEDLENGTH | Geodesic.GEODESICSCALE
        )

        converged = False
        position: Optional[Dict[str, Any]] = None
        for _ in range(self.gnomonic_config.max_iterations):
            position = line.Position(s, outmask)
            if converged:
                break

            m12, M12 = position["m12"], position["M12"]
            if little:
                ds = (ieee_divide(m12, M12) - rho) * M12 * M12
            else:
                ds = (rho - ieee_divide(M12, m12)) * m12 * m12
            s -= ds

            # NaN в ds не даёт converged
            if abs(ds) < tolerance:
                converged = True

        if not converged or position is None:
            logger.debug(
                "gnomonic_reverse did not converge: center=%s point=%s",
                center.to_pair(), tuple(point)
            )
            return Coordinate.nan()

        return Coordinate(lon=position["lon2"], lat=position["lat2"])
