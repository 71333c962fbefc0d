from src.core.enums import (
    GeometryKind,
    GEOMETRY_TYPE_NAMES,
    IMPLEMENTED_KINDS,
    ByteOrder,
    DimensionMode,
    CoordinateLayout,
    GeoJsonKey,
    ResponseKey,
)
from src.core.exceptions import (
    WkbCodecException,
    DecodingError,
    EmptyInputError,
    UnsupportedByteOrderError,
    UnknownGeometryTypeError,
    UnsupportedGeometryTypeError,
    TruncatedInputError,
    InvalidHexError,
    TrailingBytesError,
    NestingTooDeepError,
    GeometryModelError,
)
from src.core.wkb_constants import WKB_CONSTANTS, WkbWireConstants
from src.core.codec_config import CodecConfig, DEFAULT_CODEC_CONFIG

__all__ = [
    "GeometryKind",
    "GEOMETRY_TYPE_NAMES",
    "IMPLEMENTED_KINDS",
    "ByteOrder",
    "DimensionMode",
    "CoordinateLayout",
    "GeoJsonKey",
    "ResponseKey",
    "WkbCodecException",
    "DecodingError",
    "EmptyInputError",
    "UnsupportedByteOrderError",
    "UnknownGeometryTypeError",
    "UnsupportedGeometryTypeError",
    "TruncatedInputError",
    "InvalidHexError",
    "TrailingBytesError",
    "NestingTooDeepError",
    "GeometryModelError",
    "WKB_CONSTANTS",
    "WkbWireConstants",
    "CodecConfig",
    "DEFAULT_CODEC_CONFIG",
]
