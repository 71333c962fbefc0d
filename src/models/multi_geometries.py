"""
Homogeneous multi-geometries.

Each element of a multi-geometry is framed with its own header on the
wire, so elements may use different coordinate layouts.
"""
from typing import Tuple
from dataclasses import dataclass, field

from src.core import GeometryKind
from src.models.geometry import CompositeGeometry
from src.models.point import Point
from src.models.line_string import LineString
from src.models.polygon import Polygon


@dataclass(frozen=True)
class MultiPoint(CompositeGeometry):
    """Ordered sequence of points"""
    points: Tuple[Point, ...] = field(default_factory=tuple)

    _children_field = "points"
    _child_type = Point

    def __post_init__(self) -> None:
        self._freeze_children(self.points)

    def kind(self) -> GeometryKind:
        return GeometryKind.MULTI_POINT


@dataclass(frozen=True)
class MultiLineString(CompositeGeometry):
    """Ordered sequence of line strings"""
    line_strings: Tuple[LineString, ...] = field(default_factory=tuple)

    _children_field = "line_strings"
    _child_type = LineString

    def __post_init__(self) -> None:
        self._freeze_children(self.line_strings)

    def kind(self) -> GeometryKind:
        return GeometryKind.MULTI_LINE_STRING


@dataclass(frozen=True)
class MultiPolygon(CompositeGeometry):
    """Ordered sequence of polygons"""
    polygons: Tuple[Polygon, ...] = field(default_factory=tuple)

    _children_field = "polygons"
    _child_type = Polygon

    def __post_init__(self) -> None:
        self._freeze_children(self.polygons)

    def kind(self) -> GeometryKind:
        return GeometryKind.MULTI_POLYGON
