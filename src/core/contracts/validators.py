"""
JSON Schema Contract Validators

Модуль для валидации входных payload'ов (координаты и линии) согласно
формальным JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (schema/ рядом с модулем):
- coordinate.json — [lon, lat]
- line.json — [[lon, lat], [lon, lat]]
- geojson_point.json — GeoJSON Point
- geojson_line.json — GeoJSON LineString ровно из двух позиций

Контракты проверяют только структуру (арность и типы). Диапазоны координат
не ограничиваются.
"""

import json
from pathlib import Path
from typing import Any, Dict, Sequence, Union

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.coordinate import Coordinate, Line


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'coordinate')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    Кортежи приводятся к спискам: jsonschema считает массивом только list.
    """

    def __init__(self, schema_name: str):
        """
        Args:
            schema_name: Имя схемы для валидации
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(_to_json_like(data))

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(_to_json_like(data))

    def iter_errors(self, data: Any):
        """Итератор по всем ошибкам валидации (ValidationError)."""
        return self.validator.iter_errors(_to_json_like(data))


class CoordinateValidator(ContractValidator):
    """Валидатор для [lon, lat]."""

    def __init__(self):
        super().__init__("coordinate")


class LineValidator(ContractValidator):
    """Валидатор для [[lon, lat], [lon, lat]]."""

    def __init__(self):
        super().__init__("line")


class GeoJSONPointValidator(ContractValidator):
    """Валидатор для GeoJSON Point."""

    def __init__(self):
        super().__init__("geojson_point")


class GeoJSONLineValidator(ContractValidator):
    """Валидатор для GeoJSON LineString из двух позиций."""

    def __init__(self):
        super().__init__("geojson_line")


_COORDINATE_VALIDATOR = CoordinateValidator()
_LINE_VALIDATOR = LineValidator()
_GEOJSON_POINT_VALIDATOR = GeoJSONPointValidator()
_GEOJSON_LINE_VALIDATOR = GeoJSONLineValidator()


def _to_json_like(data: Any) -> Any:
    """Рекурсивное приведение tuple → list (dict обходится по значениям)."""
    if isinstance(data, (list, tuple)):
        return [_to_json_like(item) for item in data]
    if isinstance(data, dict):
        return {key: _to_json_like(value) for key, value in data.items()}
    return data


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_coordinate(data: Any) -> None:
    """
    Валидация [lon, lat].

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _COORDINATE_VALIDATOR.validate(data)


def validate_line(data: Any) -> None:
    """
    Валидация [[lon, lat], [lon, lat]].

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _LINE_VALIDATOR.validate(data)


def validate_geojson_point(data: Dict[str, Any]) -> None:
    """
    Валидация GeoJSON Point.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _GEOJSON_POINT_VALIDATOR.validate(data)


def validate_geojson_line(data: Dict[str, Any]) -> None:
    """
    Валидация GeoJSON LineString из двух позиций.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _GEOJSON_LINE_VALIDATOR.validate(data)


# =============================================================================
# COERCION
# =============================================================================


CoordinateLike = Union[Coordinate, Sequence[float]]
LineLike = Union[Line, Sequence[Sequence[float]]]


def as_coordinate(value: CoordinateLike) -> Coordinate:
    """
    Coordinate как есть или провалидированная пара [lon, lat].

    Raises:
        ValidationError: Если пара не соответствует схеме coordinate
    """
    if isinstance(value, Coordinate):
        return value
    validate_coordinate(value)
    return Coordinate.from_pair(value)


def as_line(value: LineLike) -> Line:
    """
    Line как есть или провалидированная пара пар.

    Raises:
        ValidationError: Если данные не соответствуют схеме line
    """
    if isinstance(value, Line):
        return value
    validate_line(value)
    return Line.from_pairs(value[0], value[1])


def coordinate_from_geojson(data: Dict[str, Any]) -> Coordinate:
    """GeoJSON Point → Coordinate (высота отбрасывается)."""
    validate_geojson_point(data)
    return Coordinate.from_pair(data["coordinates"])


def line_from_geojson(data: Dict[str, Any]) -> Line:
    """GeoJSON LineString (две позиции) → Line."""
    validate_geojson_line(data)
    origin, destination = data["coordinates"]
    return Line.from_pairs(origin, destination)


def coordinate_to_geojson(coordinate: Coordinate) -> Dict[str, Any]:
    """Coordinate → GeoJSON Point."""
    return {"type": "Point", "coordinates": [coordinate.lon, coordinate.lat]}
