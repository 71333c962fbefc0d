from src.models.geometry import Geometry, CompositeGeometry
from src.models.point import Point
from src.models.line_string import LineString
from src.models.polygon import Polygon
from src.models.multi_geometries import MultiPoint, MultiLineString, MultiPolygon
from src.models.geometry_collection import GeometryCollection

__all__ = [
    "Geometry",
    "CompositeGeometry",
    "Point",
    "LineString",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "GeometryCollection",
]
