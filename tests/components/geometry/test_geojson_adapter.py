"""Unit tests for GeoJsonAdapter"""

import pytest

from src.components.geometry import GeoJsonAdapter
from src.core import CoordinateLayout, GeometryModelError
from src.models import (
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
)


class TestToDict:
    """Tests for GeoJsonAdapter.to_dict"""

    def test_point(self):
        assert GeoJsonAdapter.to_dict(Point(1, 2)) == {
            "type": "Point",
            "coordinates": [1.0, 2.0],
        }

    def test_point_with_measure(self):
        """Test that M-bearing geometries announce their layout"""
        result = GeoJsonAdapter.to_dict(Point(1, 2, m=3))
        assert result["coordinates"] == [1.0, 2.0, 3.0]
        assert result["dimensions"] == "XYM"

    def test_polygon(self):
        ring = LineString([Point(0, 0), Point(1, 0), Point(0, 0)])
        assert GeoJsonAdapter.to_dict(Polygon([ring])) == {
            "type": "Polygon",
            "coordinates": [[[0.0, 0.0], [1.0, 0.0], [0.0, 0.0]]],
        }

    def test_collection(self):
        result = GeoJsonAdapter.to_dict(GeometryCollection([Point(0, 0), LineString()]))
        assert result == {
            "type": "GeometryCollection",
            "geometries": [
                {"type": "Point", "coordinates": [0.0, 0.0]},
                {"type": "LineString", "coordinates": []},
            ],
        }


class TestFromDict:
    """Tests for GeoJsonAdapter.from_dict"""

    def test_point_z(self):
        point = GeoJsonAdapter.from_dict({"type": "Point", "coordinates": [1, 2, 3]})
        assert point == Point(1, 2, z=3)

    def test_point_m_with_dimensions(self):
        point = GeoJsonAdapter.from_dict({
            "type": "Point",
            "coordinates": [1, 2, 3],
            "dimensions": "XYM",
        })
        assert point.layout == CoordinateLayout.XYM
        assert point.m == 3.0

    def test_point_zm(self):
        point = GeoJsonAdapter.from_dict({"type": "Point", "coordinates": [1, 2, 3, 4]})
        assert point == Point(1, 2, z=3, m=4)

    def test_multi_kinds(self):
        assert GeoJsonAdapter.from_dict({
            "type": "MultiPoint",
            "coordinates": [[0, 0], [1, 1]],
        }) == MultiPoint([Point(0, 0), Point(1, 1)])

        assert GeoJsonAdapter.from_dict({
            "type": "MultiLineString",
            "coordinates": [[[0, 0], [1, 1]]],
        }) == MultiLineString([LineString([Point(0, 0), Point(1, 1)])])

        assert GeoJsonAdapter.from_dict({
            "type": "MultiPolygon",
            "coordinates": [[[[0, 0], [1, 0], [0, 0]]], []],
        }) == MultiPolygon([
            Polygon([LineString([Point(0, 0), Point(1, 0), Point(0, 0)])]),
            Polygon(),
        ])

    def test_round_trip(self):
        geometry = GeometryCollection([
            Point(1, 2, m=5),
            MultiPolygon([Polygon([LineString([Point(0, 0, z=1), Point(1, 1, z=1)])])]),
        ])
        assert GeoJsonAdapter.from_dict(GeoJsonAdapter.to_dict(geometry)) == geometry

    @pytest.mark.parametrize("data,message", [
        ({"type": "Circle", "coordinates": []}, "unsupported type"),
        ({"type": "CircularString", "coordinates": []}, "unsupported type"),
        ({"type": "Point"}, "missing 'coordinates'"),
        ({"type": "Point", "coordinates": [1]}, "2 to 4 numbers"),
        ({"type": "LineString", "coordinates": 5}, "list of coordinates"),
        ({"type": "Point", "coordinates": [1, 2], "dimensions": "XYW"}, "invalid dimensions"),
        ({"type": "GeometryCollection", "geometries": {}}, "must be a list"),
    ])
    def test_malformed(self, data, message):
        with pytest.raises(GeometryModelError, match=message):
            GeoJsonAdapter.from_dict(data)

    def test_not_a_dict(self):
        with pytest.raises(GeometryModelError, match="expected a dict"):
            GeoJsonAdapter.from_dict([1, 2])

    def test_mixed_line_layout(self):
        with pytest.raises(GeometryModelError):
            GeoJsonAdapter.from_dict({
                "type": "LineString",
                "coordinates": [[0, 0], [1, 1, 1]],
            })

    def test_deep_collection_rejected(self):
        data = {"type": "Point", "coordinates": [0, 0]}
        for _ in range(600):
            data = {"type": "GeometryCollection", "geometries": [data]}
        with pytest.raises(GeometryModelError, match="nested too deep"):
            GeoJsonAdapter.from_dict(data)

    def test_nesting_limit_argument(self):
        inner = {"type": "GeometryCollection", "geometries": []}
        data = {"type": "GeometryCollection", "geometries": [inner]}
        assert GeoJsonAdapter.from_dict(data, max_depth=1) == GeometryCollection(
            [GeometryCollection()]
        )
        with pytest.raises(GeometryModelError):
            GeoJsonAdapter.from_dict(data, max_depth=0)
