from typing import Any, Callable, Dict, List, Sequence

from src.core import (
    GeometryKind,
    CoordinateLayout,
    GeoJsonKey,
    GeometryModelError,
    DEFAULT_CODEC_CONFIG,
)
from src.models import (
    Geometry,
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
)


class GeoJsonAdapter:
    """
    Adapter between geometry trees and GeoJSON-like dictionaries (Adapter Pattern)

    Coordinates are lists of 2, 3 or 4 numbers. GeoJSON cannot tell XYZ from
    XYM, so geometries carrying measures add a "dimensions" key; without it a
    3-value coordinate is read as XYZ and a 4-value coordinate as XYZM.
    """

    @staticmethod
    def _point_coords(point: Point) -> List[float]:
        return list(point.coordinates())

    @classmethod
    def _line_coords(cls, line_string: LineString) -> List[List[float]]:
        return [cls._point_coords(point) for point in line_string.points]

    @classmethod
    def _polygon_coords(cls, polygon: Polygon) -> List[List[List[float]]]:
        return [cls._line_coords(ring) for ring in polygon.rings]

    @classmethod
    def to_dict(cls, geometry: Geometry) -> Dict[str, Any]:
        """
        Convert a geometry tree to a GeoJSON-like dictionary

        Args:
            geometry: Geometry to convert

        Returns:
            Dictionary with "type" and "coordinates" (or "geometries")
        """
        kind = geometry.kind()
        result: Dict[str, Any] = {GeoJsonKey.TYPE.value: kind.type_name}

        if kind == GeometryKind.GEOMETRY_COLLECTION:
            result[GeoJsonKey.GEOMETRIES.value] = [
                cls.to_dict(child) for child in geometry.components()
            ]
            return result

        coordinate_writers: Dict[GeometryKind, Callable[[Any], Any]] = {
            GeometryKind.POINT: cls._point_coords,
            GeometryKind.LINE_STRING: cls._line_coords,
            GeometryKind.POLYGON: cls._polygon_coords,
            GeometryKind.MULTI_POINT: lambda g: [cls._point_coords(p) for p in g.points],
            GeometryKind.MULTI_LINE_STRING: lambda g: [cls._line_coords(ls) for ls in g.line_strings],
            GeometryKind.MULTI_POLYGON: lambda g: [cls._polygon_coords(p) for p in g.polygons],
        }
        result[GeoJsonKey.COORDINATES.value] = coordinate_writers[kind](geometry)

        if geometry.has_m:
            result[GeoJsonKey.DIMENSIONS.value] = geometry.layout.value

        return result

    @staticmethod
    def _parse_point(values: Any, three_is_m: bool, type_name: str) -> Point:
        if not isinstance(values, (list, tuple)) or not 2 <= len(values) <= 4:
            raise GeometryModelError(
                type_name,
                f"coordinate must be a list of 2 to 4 numbers, got {values!r}"
            )

        if len(values) == 2:
            layout = CoordinateLayout.XY
        elif len(values) == 3:
            layout = CoordinateLayout.XYM if three_is_m else CoordinateLayout.XYZ
        else:
            layout = CoordinateLayout.XYZM

        return Point.from_coordinates(values, layout)

    @classmethod
    def _parse_sequence(cls, values: Any, type_name: str) -> Sequence[Any]:
        if not isinstance(values, (list, tuple)):
            raise GeometryModelError(
                type_name,
                f"expected a list of coordinates, got {type(values).__name__}"
            )
        return values

    @classmethod
    def _parse_line(cls, values: Any, three_is_m: bool, type_name: str) -> LineString:
        return LineString(tuple(
            cls._parse_point(item, three_is_m, type_name)
            for item in cls._parse_sequence(values, type_name)
        ))

    @classmethod
    def _parse_polygon(cls, values: Any, three_is_m: bool, type_name: str) -> Polygon:
        return Polygon(tuple(
            cls._parse_line(ring, three_is_m, type_name)
            for ring in cls._parse_sequence(values, type_name)
        ))

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        max_depth: int = DEFAULT_CODEC_CONFIG.max_depth
    ) -> Geometry:
        """
        Build a geometry tree from a GeoJSON-like dictionary

        Args:
            data: Dictionary with "type" and "coordinates" (or "geometries")
            max_depth: Deepest allowed GeometryCollection nesting below this dict

        Returns:
            Geometry tree

        Raises:
            GeometryModelError: If the dictionary is malformed or nested too deep
        """
        if max_depth < 0:
            raise GeometryModelError("GeometryCollection", "nested too deep")

        if not isinstance(data, dict):
            raise GeometryModelError(
                "Geometry",
                f"expected a dict, got {type(data).__name__}"
            )

        type_name = data.get(GeoJsonKey.TYPE.value)
        try:
            kind = GeometryKind.from_type_name(type_name)
        except ValueError:
            kind = None
        if kind is None or not kind.is_implemented:
            raise GeometryModelError("Geometry", f"unsupported type {type_name!r}")

        if kind == GeometryKind.GEOMETRY_COLLECTION:
            children = data.get(GeoJsonKey.GEOMETRIES.value)
            if not isinstance(children, list):
                raise GeometryModelError(type_name, "'geometries' must be a list")
            return GeometryCollection(tuple(
                cls.from_dict(child, max_depth - 1) for child in children
            ))

        if GeoJsonKey.COORDINATES.value not in data:
            raise GeometryModelError(type_name, "missing 'coordinates'")

        dimensions = data.get(GeoJsonKey.DIMENSIONS.value, CoordinateLayout.XY.value)
        try:
            three_is_m = CoordinateLayout(dimensions) == CoordinateLayout.XYM
        except ValueError:
            valid = [layout.value for layout in CoordinateLayout]
            raise GeometryModelError(
                type_name,
                f"invalid dimensions {dimensions!r}, valid: {', '.join(valid)}"
            )

        coords = data[GeoJsonKey.COORDINATES.value]
        builders: Dict[GeometryKind, Callable[[], Geometry]] = {
            GeometryKind.POINT: lambda: cls._parse_point(coords, three_is_m, type_name),
            GeometryKind.LINE_STRING: lambda: cls._parse_line(coords, three_is_m, type_name),
            GeometryKind.POLYGON: lambda: cls._parse_polygon(coords, three_is_m, type_name),
            GeometryKind.MULTI_POINT: lambda: MultiPoint(tuple(
                cls._parse_point(item, three_is_m, type_name)
                for item in cls._parse_sequence(coords, type_name)
            )),
            GeometryKind.MULTI_LINE_STRING: lambda: MultiLineString(tuple(
                cls._parse_line(item, three_is_m, type_name)
                for item in cls._parse_sequence(coords, type_name)
            )),
            GeometryKind.MULTI_POLYGON: lambda: MultiPolygon(tuple(
                cls._parse_polygon(item, three_is_m, type_name)
                for item in cls._parse_sequence(coords, type_name)
            )),
        }
        return builders[kind]()
