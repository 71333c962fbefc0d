from enum import Enum, IntEnum
from typing import Dict


class GeometryKind(IntEnum):
    """WKB geometry kind codes (Enumerator Pattern)"""
    POINT = 1
    LINE_STRING = 2
    POLYGON = 3
    MULTI_POINT = 4
    MULTI_LINE_STRING = 5
    MULTI_POLYGON = 6
    GEOMETRY_COLLECTION = 7

    # Reserved by the format, no payload logic in this codec
    CIRCULAR_STRING = 8
    COMPOUND_CURVE = 9
    CURVE_POLYGON = 10
    MULTI_CURVE = 11
    MULTI_SURFACE = 12
    CURVE = 13
    SURFACE = 14
    POLYHEDRAL_SURFACE = 15
    TIN = 16
    TRIANGLE = 17

    @property
    def type_name(self) -> str:
        """Get the conventional geometry type name (e.g. 'MultiPolygon')"""
        return GEOMETRY_TYPE_NAMES[self]

    @property
    def is_implemented(self) -> bool:
        """Check whether this codec carries payload logic for the kind"""
        return self in IMPLEMENTED_KINDS

    @property
    def is_multi(self) -> bool:
        """Check whether elements of this kind are framed with their own header"""
        return self in (
            GeometryKind.MULTI_POINT,
            GeometryKind.MULTI_LINE_STRING,
            GeometryKind.MULTI_POLYGON,
            GeometryKind.GEOMETRY_COLLECTION,
        )

    @classmethod
    def from_type_name(cls, name: str) -> "GeometryKind":
        """
        Look up a kind by its geometry type name

        Args:
            name: Type name such as 'Point' or 'GeometryCollection'

        Returns:
            Matching GeometryKind

        Raises:
            ValueError: If the name is unknown
        """
        for kind, type_name in GEOMETRY_TYPE_NAMES.items():
            if type_name == name:
                return kind
        raise ValueError(f"Unknown geometry type name: {name}")


GEOMETRY_TYPE_NAMES: Dict[GeometryKind, str] = {
    GeometryKind.POINT: "Point",
    GeometryKind.LINE_STRING: "LineString",
    GeometryKind.POLYGON: "Polygon",
    GeometryKind.MULTI_POINT: "MultiPoint",
    GeometryKind.MULTI_LINE_STRING: "MultiLineString",
    GeometryKind.MULTI_POLYGON: "MultiPolygon",
    GeometryKind.GEOMETRY_COLLECTION: "GeometryCollection",
    GeometryKind.CIRCULAR_STRING: "CircularString",
    GeometryKind.COMPOUND_CURVE: "CompoundCurve",
    GeometryKind.CURVE_POLYGON: "CurvePolygon",
    GeometryKind.MULTI_CURVE: "MultiCurve",
    GeometryKind.MULTI_SURFACE: "MultiSurface",
    GeometryKind.CURVE: "Curve",
    GeometryKind.SURFACE: "Surface",
    GeometryKind.POLYHEDRAL_SURFACE: "PolyhedralSurface",
    GeometryKind.TIN: "TIN",
    GeometryKind.TRIANGLE: "Triangle",
}

IMPLEMENTED_KINDS = frozenset(
    kind for kind in GeometryKind if kind <= GeometryKind.GEOMETRY_COLLECTION
)


class ByteOrder(IntEnum):
    """WKB byte order tags"""
    XDR = 0  # big endian, not supported
    NDR = 1  # little endian


class DimensionMode(str, Enum):
    """How the encoder resolves Z/M header flags for nested geometries"""
    PER_GEOMETRY = "per_geometry"
    OUTERMOST = "outermost"


class CoordinateLayout(str, Enum):
    """Coordinate layouts by ordinate names"""
    XY = "XY"
    XYZ = "XYZ"
    XYM = "XYM"
    XYZM = "XYZM"

    @classmethod
    def from_flags(cls, has_z: bool, has_m: bool) -> "CoordinateLayout":
        """Get layout for a Z/M flag pair"""
        if has_z and has_m:
            return cls.XYZM
        if has_z:
            return cls.XYZ
        if has_m:
            return cls.XYM
        return cls.XY

    @property
    def has_z(self) -> bool:
        return "Z" in self.value

    @property
    def has_m(self) -> bool:
        return "M" in self.value


class GeoJsonKey(str, Enum):
    """Keys of the GeoJSON-like geometry dictionaries"""
    TYPE = "type"
    COORDINATES = "coordinates"
    GEOMETRIES = "geometries"
    DIMENSIONS = "dimensions"


class ResponseKey(Enum):
    """API response keys"""
    ERROR = "error"
    ERROR_TYPE = "error_type"
    STATUS = "status"
    SERVICES = "services"
    GEOMETRY = "geometry"
    KIND = "kind"
    WKT = "wkt"
    WKB = "wkb"
    SIZE = "size"
