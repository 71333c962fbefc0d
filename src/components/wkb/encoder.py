import math
import logging
from itertools import chain
from typing import Callable, Dict, List, Union

from src.core import (
    GeometryKind,
    IMPLEMENTED_KINDS,
    DimensionMode,
    CodecConfig,
    DEFAULT_CODEC_CONFIG,
    GeometryModelError,
)
from src.components.byte_cursor import ByteWriter
from src.components.wkb.header import HeaderResolver, DimensionContext
from src.models import Geometry, CompositeGeometry, Point, LineString, Polygon

logger = logging.getLogger(__name__)

PayloadWriter = Callable[[ByteWriter, Geometry, DimensionContext], None]


class WkbEncoder:
    """
    Recursive WKB writer, the mirror image of WkbDecoder

    Framed geometries emit a header followed by their payload. Line string
    points and polygon rings are written as bare coordinate arrays;
    multi-geometry and collection elements are written as full WKB values.
    """

    def __init__(self, config: CodecConfig = DEFAULT_CODEC_CONFIG):
        """
        Initialize encoder

        Args:
            config: Codec configuration (hex case, dimension mode, nesting limit)
        """
        self._config = config

        # Strategy map: GeometryKind -> payload writer (Strategy Pattern)
        self._payload_writers: Dict[GeometryKind, PayloadWriter] = {
            GeometryKind.POINT: self._write_point,
            GeometryKind.LINE_STRING: self._write_line_string,
            GeometryKind.POLYGON: self._write_polygon,
        }
        for kind in IMPLEMENTED_KINDS:
            if kind.is_multi:
                self._payload_writers[kind] = self._write_elements

    def encode(self, geometry: Geometry, as_hex: bool = False) -> Union[bytes, str]:
        """
        Encode a geometry tree into WKB

        Args:
            geometry: Root geometry; it is not modified
            as_hex: Return hex text instead of bytes

        Returns:
            WKB bytes, or hex text when as_hex is set

        Raises:
            TypeError: If geometry is not a geometry model value
            GeometryModelError: If multi-geometries nest deeper than config.max_depth
        """
        if not isinstance(geometry, Geometry):
            raise TypeError(
                f"Expecting a Geometry instance, got {type(geometry).__name__}"
            )

        self._check_depth(geometry)

        writer = ByteWriter()
        self._write_geometry(writer, geometry, DimensionContext.from_geometry(geometry))

        logger.debug(
            f"Encoded {geometry.type_name} into {len(writer)} bytes "
            f"({self._config.dimension_mode.value})"
        )

        if as_hex:
            return writer.to_hex(uppercase=self._config.hex_uppercase)
        return writer.to_bytes()

    def _check_depth(self, geometry: Geometry) -> None:
        """Walk framed elements without recursion and enforce the nesting limit"""
        max_depth = self._config.max_depth
        pending = [(geometry, 0)]
        while pending:
            node, depth = pending.pop()
            if depth > max_depth:
                raise GeometryModelError(
                    node.type_name,
                    f"nested deeper than {max_depth} levels"
                )
            if node.kind().is_multi:
                pending.extend((child, depth + 1) for child in node.components())

    def _write_geometry(
        self,
        writer: ByteWriter,
        geometry: Geometry,
        inherited: DimensionContext
    ) -> None:
        """Emit header and payload for one framed geometry"""
        if self._config.dimension_mode == DimensionMode.OUTERMOST:
            context = inherited
        else:
            context = DimensionContext.from_geometry(geometry)

        kind = geometry.kind()
        HeaderResolver.write(writer, kind, context)
        self._payload_writers[kind](writer, geometry, context)

    @staticmethod
    def _ordinates(point: Point, context: DimensionContext) -> List[float]:
        """
        Get ordinates of a point for the active layout

        Ordinates the layout needs but the point lacks are written as NaN;
        this only happens in OUTERMOST mode.
        """
        values = [point.x, point.y]
        if context.has_z:
            values.append(point.z if point.z is not None else math.nan)
        if context.has_m:
            values.append(point.m if point.m is not None else math.nan)
        return values

    def _write_point(self, writer: ByteWriter, point: Point, context: DimensionContext) -> None:
        for value in self._ordinates(point, context):
            writer.write_double_le(value)

    def _write_line_string(
        self,
        writer: ByteWriter,
        line_string: LineString,
        context: DimensionContext
    ) -> None:
        writer.write_uint32_le(len(line_string.points))
        if line_string.points:
            writer.write_doubles(chain.from_iterable(
                self._ordinates(point, context) for point in line_string.points
            ))

    def _write_polygon(self, writer: ByteWriter, polygon: Polygon, context: DimensionContext) -> None:
        writer.write_uint32_le(len(polygon.rings))
        for ring in polygon.rings:
            self._write_line_string(writer, ring, context)

    def _write_elements(
        self,
        writer: ByteWriter,
        container: CompositeGeometry,
        context: DimensionContext
    ) -> None:
        elements = container.components()
        writer.write_uint32_le(len(elements))
        for element in elements:
            self._write_geometry(writer, element, context)
