"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных (list и tuple)
- Детекция нарушений арности и типов
- GeoJSON Point / LineString
- Приведение payload'ов к доменным моделям
"""

import math

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    CoordinateValidator,
    GeoJSONLineValidator,
    GeoJSONPointValidator,
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
from src.core.domain import Coordinate, Line


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Загрузка и meta-валидация схем"""

    @pytest.mark.parametrize(
        "schema_name", ["coordinate", "line", "geojson_point", "geojson_line"]
    )
    def test_schemas_load(self, schema_name: str) -> None:
        """Все схемы загружаются и проходят meta-валидацию"""
        schema = SchemaLoader().load_schema(schema_name)
        assert schema["$id"] == schema_name

    def test_schema_cached(self) -> None:
        """Повторная загрузка возвращает кэшированный объект"""
        loader = SchemaLoader()
        assert loader.load_schema("coordinate") is loader.load_schema("coordinate")

    def test_missing_schema(self) -> None:
        """Несуществующая схема"""
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("polygon")

    def test_missing_directory(self, tmp_path) -> None:
        """Несуществующий каталог схем"""
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_file(self, tmp_path) -> None:
        """Файл, не являющийся JSON Schema"""
        (tmp_path / "broken.json").write_text('{"type": 42}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# COORDINATE / LINE
# =============================================================================


class TestCoordinateContract:
    """[lon, lat]"""

    def test_valid_list_and_tuple(self) -> None:
        """list и tuple одинаково валидны"""
        validate_coordinate([29.0121795, 41.0053215])
        validate_coordinate((29.0121795, 41.0053215))
        validate_coordinate([0, 0])

    def test_out_of_range_is_valid(self) -> None:
        """Контракт не ограничивает диапазоны"""
        validate_coordinate([720.0, -95.0])

    @pytest.mark.parametrize(
        "payload",
        [[1.0], [1.0, 2.0, 3.0], ["1.0", 2.0], [True, 2.0], {"lon": 1.0, "lat": 2.0}, None],
    )
    def test_invalid_payloads(self, payload) -> None:
        """Нарушения арности и типов"""
        with pytest.raises(ValidationError):
            validate_coordinate(payload)

    def test_is_valid_without_exception(self) -> None:
        """is_valid не бросает"""
        validator = CoordinateValidator()
        assert validator.is_valid([1.0, 2.0])
        assert not validator.is_valid([1.0])

    def test_iter_errors(self) -> None:
        """iter_errors перечисляет все ошибки"""
        errors = list(CoordinateValidator().iter_errors(["a", "b"]))
        assert len(errors) == 2


class TestLineContract:
    """[[lon, lat], [lon, lat]]"""

    def test_valid_line(self) -> None:
        """Две пары"""
        validate_line([[29.0121795, 41.0053215], [-77.0145665, 38.8993488]])
        validate_line(((0.0, 0.0), (10.0, 0.0)))

    @pytest.mark.parametrize(
        "payload",
        [
            [[0.0, 0.0]],
            [[0.0, 0.0], [1.0, 1.0], [2.0, 2.0]],
            [[0.0, 0.0], [1.0]],
            [0.0, 0.0],
        ],
    )
    def test_invalid_lines(self, payload) -> None:
        """Нарушения структуры"""
        assert not LineValidator().is_valid(payload)
        with pytest.raises(ValidationError):
            validate_line(payload)


# =============================================================================
# GEOJSON
# =============================================================================


class TestGeoJSONContracts:
    """GeoJSON Point / LineString"""

    def test_valid_point(self) -> None:
        """Point с высотой и без"""
        validate_geojson_point({"type": "Point", "coordinates": [-21.8524424, 64.132442]})
        validate_geojson_point({"type": "Point", "coordinates": [-21.8524424, 64.132442, 12.0]})

    def test_wrong_type_rejected(self) -> None:
        """type должен быть Point"""
        assert not GeoJSONPointValidator().is_valid(
            {"type": "MultiPoint", "coordinates": [0.0, 0.0]}
        )

    def test_missing_coordinates_rejected(self) -> None:
        """coordinates обязателен"""
        with pytest.raises(ValidationError):
            validate_geojson_point({"type": "Point"})

    def test_valid_linestring(self) -> None:
        """LineString из двух позиций"""
        validate_geojson_line(
            {"type": "LineString", "coordinates": [[29.0, 41.0], [-77.0, 38.9]]}
        )

    def test_linestring_with_three_positions_rejected(self) -> None:
        """Только отрезок из двух позиций"""
        assert not GeoJSONLineValidator().is_valid(
            {"type": "LineString", "coordinates": [[0, 0], [1, 1], [2, 2]]}
        )


# =============================================================================
# COERCION
# =============================================================================


class TestCoercion:
    """Приведение к доменным моделям"""

    def test_as_coordinate_passthrough(self) -> None:
        """Coordinate возвращается как есть"""
        coordinate = Coordinate(lon=1.0, lat=2.0)
        assert as_coordinate(coordinate) is coordinate

    def test_as_coordinate_from_pair(self) -> None:
        """Пара валидируется и превращается в Coordinate"""
        assert as_coordinate((1.0, 2.0)) == Coordinate(lon=1.0, lat=2.0)

    def test_as_coordinate_nan_pair(self) -> None:
        """NaN — число, контракт его пропускает"""
        assert as_coordinate([math.nan, 0.0]).has_nan()

    def test_as_coordinate_invalid(self) -> None:
        """Невалидная пара"""
        with pytest.raises(ValidationError):
            as_coordinate([1.0])

    def test_as_line(self) -> None:
        """Line как есть и из пар"""
        line = Line.from_pairs((0.0, 0.0), (10.0, 0.0))
        assert as_line(line) is line
        assert as_line([[0.0, 0.0], [10.0, 0.0]]) == line

    def test_geojson_roundtrip(self) -> None:
        """Coordinate → GeoJSON Point → Coordinate"""
        coordinate = Coordinate(lon=-21.8524424, lat=64.132442)
        assert coordinate_from_geojson(coordinate_to_geojson(coordinate)) == coordinate

    def test_geojson_altitude_dropped(self) -> None:
        """Высота GeoJSON отбрасывается"""
        coordinate = coordinate_from_geojson({"type": "Point", "coordinates": [1.0, 2.0, 300.0]})
        assert coordinate.to_pair() == (1.0, 2.0)

    def test_line_from_geojson(self) -> None:
        """GeoJSON LineString → Line"""
        line = line_from_geojson(
            {"type": "LineString", "coordinates": [[29.0121795, 41.0053215], [-77.0145665, 38.8993488]]}
        )
        assert line.origin.lon == 29.0121795
        assert line.destination.lat == 38.8993488
