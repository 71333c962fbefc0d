import logging
from typing import Callable, Dict, Optional, Union, Type

from src.core import (
    GeometryKind,
    CodecConfig,
    DEFAULT_CODEC_CONFIG,
    EmptyInputError,
    UnknownGeometryTypeError,
    TrailingBytesError,
    NestingTooDeepError,
    WKB_CONSTANTS,
)
from src.components.byte_cursor import ByteReader, HexCodec
from src.components.wkb.header import HeaderResolver, DimensionContext
from src.models import (
    Geometry,
    CompositeGeometry,
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
)

logger = logging.getLogger(__name__)

WkbInput = Union[bytes, bytearray, memoryview, str]
PayloadReader = Callable[[ByteReader, DimensionContext, int], Geometry]


class WkbDecoder:
    """
    Recursive-descent WKB reader

    Each framed geometry resolves its own header; points, line strings and
    rings nested below it reuse that header's dimension context as bare
    coordinate arrays. Multi-geometry and collection elements are complete
    WKB values and re-enter header resolution.
    """

    # Multi container kind -> (model class, element kind; None means any kind)
    _MULTI_KINDS: Dict[GeometryKind, tuple] = {
        GeometryKind.MULTI_POINT: (MultiPoint, GeometryKind.POINT),
        GeometryKind.MULTI_LINE_STRING: (MultiLineString, GeometryKind.LINE_STRING),
        GeometryKind.MULTI_POLYGON: (MultiPolygon, GeometryKind.POLYGON),
        GeometryKind.GEOMETRY_COLLECTION: (GeometryCollection, None),
    }

    def __init__(self, config: CodecConfig = DEFAULT_CODEC_CONFIG):
        """
        Initialize decoder

        Args:
            config: Codec configuration (trailing byte policy, nesting limit)
        """
        self._config = config

        # Strategy map: GeometryKind -> payload reader (Strategy Pattern)
        self._payload_readers: Dict[GeometryKind, PayloadReader] = {
            GeometryKind.POINT: self._read_point,
            GeometryKind.LINE_STRING: self._read_line_string,
            GeometryKind.POLYGON: self._read_polygon,
        }
        for kind in self._MULTI_KINDS:
            self._payload_readers[kind] = self._multi_reader(kind)

    def decode(self, data: WkbInput, is_hex: bool = False) -> Geometry:
        """
        Decode a WKB buffer into a geometry tree

        Args:
            data: WKB bytes, or hex text (str input is always treated as hex)
            is_hex: Treat bytes input as ASCII hex digits

        Returns:
            Root geometry

        Raises:
            EmptyInputError: If the input holds no bytes
            InvalidHexError: If hex text cannot be unpacked
            UnsupportedByteOrderError: If a byte order tag is not NDR
            UnknownGeometryTypeError: If a kind code is unknown or unsupported
            TruncatedInputError: If the buffer ends early
            TrailingBytesError: In strict mode, if bytes follow the root geometry
            NestingTooDeepError: If multi-geometries nest deeper than config.max_depth
        """
        raw = self._unpack_input(data, is_hex)
        if len(raw) == 0:
            raise EmptyInputError("hex text" if is_hex or isinstance(data, str) else None)

        reader = ByteReader(raw)
        geometry = self._read_geometry(reader)

        if not reader.at_end:
            if self._config.strict_trailing_bytes:
                raise TrailingBytesError(reader.offset, reader.remaining)
            logger.warning(
                f"Ignoring {reader.remaining} trailing bytes after "
                f"{geometry.type_name} ending at offset {reader.offset}"
            )

        return geometry

    @staticmethod
    def _unpack_input(data: WkbInput, is_hex: bool) -> bytes:
        if isinstance(data, str) or is_hex:
            return HexCodec.from_hex(data)
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"Expecting WKB as bytes or hex text, got {type(data).__name__}"
            )
        return bytes(data)

    def _read_geometry(
        self,
        reader: ByteReader,
        expected_kind: Optional[GeometryKind] = None,
        depth: int = 0
    ) -> Geometry:
        """Resolve one header and dispatch to the payload reader"""
        offset = reader.offset
        if depth > self._config.max_depth:
            raise NestingTooDeepError(self._config.max_depth, offset)

        header = HeaderResolver.read(reader)

        if expected_kind is not None and header.kind != expected_kind:
            raise UnknownGeometryTypeError(
                int(header.kind),
                offset=offset + 1,
                details=f"expected {expected_kind.type_name} element, "
                        f"found {header.kind.type_name}"
            )

        return self._payload_readers[header.kind](reader, header.context, depth)

    @staticmethod
    def _read_point(reader: ByteReader, context: DimensionContext, depth: int = 0) -> Point:
        values = [reader.read_double_le() for _ in range(context.dimensionality)]
        return Point.from_coordinates(values, context.layout)

    @staticmethod
    def _read_line_string(
        reader: ByteReader,
        context: DimensionContext,
        depth: int = 0
    ) -> LineString:
        count = reader.read_uint32_le()
        if count == 0:
            return LineString()

        dimensionality = context.dimensionality
        reader.ensure_available(count * WKB_CONSTANTS.coordinate_size(dimensionality))

        block = reader.read_doubles(count * dimensionality).reshape(count, dimensionality)
        layout = context.layout
        return LineString(tuple(
            Point.from_coordinates(row, layout) for row in block.tolist()
        ))

    def _read_polygon(self, reader: ByteReader, context: DimensionContext, depth: int = 0) -> Polygon:
        count = reader.read_uint32_le()
        # Every ring carries at least its own count
        reader.ensure_available(count * WKB_CONSTANTS.COUNT_SIZE)
        return Polygon(tuple(
            self._read_line_string(reader, context) for _ in range(count)
        ))

    def _multi_reader(self, kind: GeometryKind) -> PayloadReader:
        model_class: Type[CompositeGeometry]
        model_class, element_kind = self._MULTI_KINDS[kind]

        def read_elements(reader: ByteReader, context: DimensionContext, depth: int) -> Geometry:
            # Elements carry their own headers; the container context is unused
            count = reader.read_uint32_le()
            reader.ensure_available(count * WKB_CONSTANTS.HEADER_SIZE)
            logger.debug(f"Reading {count} elements of {kind.type_name} at depth {depth}")
            return model_class(tuple(
                self._read_geometry(reader, element_kind, depth + 1) for _ in range(count)
            ))

        return read_elements
