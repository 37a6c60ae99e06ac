"""
Contract Validation Module

Модуль для валидации входных payload'ов (координаты, линии, GeoJSON)
и приведения их к доменным моделям.
"""

from .validators import (
    ContractValidator,
    CoordinateLike,
    CoordinateValidator,
    GeoJSONLineValidator,
    GeoJSONPointValidator,
    LineLike,
    LineValidator,
    SchemaLoader,
    as_coordinate,
    as_line,
    coordinate_from_geojson,
    coordinate_to_geojson,
    line_from_geojson,
    validate_coordinate,
    validate_geojson_line,
    validate_geojson_point,
    validate_line,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CoordinateValidator",
    "LineValidator",
    "GeoJSONPointValidator",
    "GeoJSONLineValidator",
    # Types
    "CoordinateLike",
    "LineLike",
    # Validation
    "validate_coordinate",
    "validate_line",
    "validate_geojson_point",
    "validate_geojson_line",
    # Coercion
    "as_coordinate",
    "as_line",
    "coordinate_from_geojson",
    "line_from_geojson",
    "coordinate_to_geojson",
]
