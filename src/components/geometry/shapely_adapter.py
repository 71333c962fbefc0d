from typing import Any, Callable, Dict, Tuple
import logging

import numpy as np
from shapely.geometry import (
    Point as ShapelyPoint,
    LineString as ShapelyLineString,
    Polygon as ShapelyPolygon,
    MultiPoint as ShapelyMultiPoint,
    MultiLineString as ShapelyMultiLineString,
    MultiPolygon as ShapelyMultiPolygon,
    GeometryCollection as ShapelyGeometryCollection,
)
from shapely.geometry.base import BaseGeometry

from src.core import GeometryKind, GeometryModelError
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

logger = logging.getLogger(__name__)

LINEAR_RING = "LinearRing"


class ShapelyAdapter:
    """
    Adapter between geometry trees and Shapely geometries (Adapter Pattern)

    Shapely carries X, Y and optional Z; measures are dropped on the way out.
    """

    @staticmethod
    def _xyz(point: Point) -> Tuple[float, ...]:
        if point.z is None:
            return (point.x, point.y)
        return (point.x, point.y, point.z)

    @classmethod
    def _line_array(cls, line_string: LineString) -> np.ndarray:
        return np.array([cls._xyz(point) for point in line_string.points], dtype=float)

    @classmethod
    def _to_shapely_point(cls, point: Point) -> ShapelyPoint:
        return ShapelyPoint(cls._xyz(point))

    @classmethod
    def _to_shapely_line(cls, line_string: LineString) -> ShapelyLineString:
        if not line_string.points:
            return ShapelyLineString()
        return ShapelyLineString(cls._line_array(line_string))

    @classmethod
    def _to_shapely_polygon(cls, polygon: Polygon) -> ShapelyPolygon:
        if not polygon.rings:
            return ShapelyPolygon()
        shell = cls._line_array(polygon.rings[0])
        holes = [cls._line_array(ring) for ring in polygon.interiors]
        return ShapelyPolygon(shell, holes)

    @classmethod
    def to_shapely(cls, geometry: Geometry) -> BaseGeometry:
        """
        Convert a geometry tree to a Shapely geometry

        Args:
            geometry: Geometry to convert

        Returns:
            Shapely geometry of the matching type
        """
        if any(point.m is not None for point in geometry.iter_points()):
            logger.debug(f"Dropping M values converting {geometry.type_name} to Shapely")

        converters: Dict[GeometryKind, Callable[[Any], BaseGeometry]] = {
            GeometryKind.POINT: cls._to_shapely_point,
            GeometryKind.LINE_STRING: cls._to_shapely_line,
            GeometryKind.POLYGON: cls._to_shapely_polygon,
            GeometryKind.MULTI_POINT: lambda g: ShapelyMultiPoint(
                [cls._to_shapely_point(p) for p in g.points]
            ),
            GeometryKind.MULTI_LINE_STRING: lambda g: ShapelyMultiLineString(
                [cls._to_shapely_line(ls) for ls in g.line_strings]
            ),
            GeometryKind.MULTI_POLYGON: lambda g: ShapelyMultiPolygon(
                [cls._to_shapely_polygon(p) for p in g.polygons]
            ),
            GeometryKind.GEOMETRY_COLLECTION: lambda g: ShapelyGeometryCollection(
                [cls.to_shapely(child) for child in g.geometries]
            ),
        }
        return converters[geometry.kind()](geometry)

    @staticmethod
    def _from_coords(coords: Any) -> Tuple[Point, ...]:
        return tuple(Point(*values) for values in coords)

    @classmethod
    def _from_shapely_point(cls, shape: Any) -> Point:
        if shape.is_empty:
            raise GeometryModelError("Point", "empty Shapely points have no coordinates")
        return Point(*shape.coords[0])

    @classmethod
    def _from_shapely_line(cls, shape: Any) -> LineString:
        return LineString(cls._from_coords(shape.coords))

    @classmethod
    def _from_shapely_polygon(cls, shape: Any) -> Polygon:
        if shape.is_empty:
            return Polygon()
        rings = [shape.exterior] + list(shape.interiors)
        return Polygon(tuple(LineString(cls._from_coords(ring.coords)) for ring in rings))

    @classmethod
    def from_shapely(cls, shape: BaseGeometry) -> Geometry:
        """
        Convert a Shapely geometry to a geometry tree

        Args:
            shape: Shapely geometry (LinearRing converts to LineString)

        Returns:
            Geometry tree

        Raises:
            GeometryModelError: If the Shapely type has no model counterpart
        """
        geom_type = shape.geom_type
        if geom_type == LINEAR_RING:
            return cls._from_shapely_line(shape)

        try:
            kind = GeometryKind.from_type_name(geom_type)
        except ValueError:
            raise GeometryModelError("Geometry", f"unsupported Shapely type {geom_type!r}")

        converters: Dict[GeometryKind, Callable[[Any], Geometry]] = {
            GeometryKind.POINT: cls._from_shapely_point,
            GeometryKind.LINE_STRING: cls._from_shapely_line,
            GeometryKind.POLYGON: cls._from_shapely_polygon,
            GeometryKind.MULTI_POINT: lambda s: MultiPoint(
                tuple(cls._from_shapely_point(g) for g in s.geoms)
            ),
            GeometryKind.MULTI_LINE_STRING: lambda s: MultiLineString(
                tuple(cls._from_shapely_line(g) for g in s.geoms)
            ),
            GeometryKind.MULTI_POLYGON: lambda s: MultiPolygon(
                tuple(cls._from_shapely_polygon(g) for g in s.geoms)
            ),
            GeometryKind.GEOMETRY_COLLECTION: lambda s: GeometryCollection(
                tuple(cls.from_shapely(g) for g in s.geoms)
            ),
        }
        return converters[kind](shape)
