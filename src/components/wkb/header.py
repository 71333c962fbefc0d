import logging
from dataclasses import dataclass

from src.core import (
    GeometryKind,
    ByteOrder,
    CoordinateLayout,
    UnsupportedByteOrderError,
    UnknownGeometryTypeError,
    UnsupportedGeometryTypeError,
    WKB_CONSTANTS,
)
from src.components.byte_cursor import ByteReader, ByteWriter
from src.models import Geometry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DimensionContext:
    """
    Z/M setting in force for one framed geometry

    Passed explicitly down the recursion so that decode and encode calls
    share no mutable state.
    """
    has_z: bool = False
    has_m: bool = False

    @property
    def layout(self) -> CoordinateLayout:
        return CoordinateLayout.from_flags(self.has_z, self.has_m)

    @property
    def dimensionality(self) -> int:
        """Number of doubles in one bare coordinate tuple"""
        return WKB_CONSTANTS.BASE_DIMENSIONALITY + int(self.has_z) + int(self.has_m)

    @classmethod
    def from_geometry(cls, geometry: Geometry) -> "DimensionContext":
        return cls(has_z=geometry.has_z, has_m=geometry.has_m)


@dataclass(frozen=True)
class WkbHeader:
    """Resolved 5-byte geometry header"""
    kind: GeometryKind
    has_z: bool = False
    has_m: bool = False
    has_srid: bool = False

    @property
    def context(self) -> DimensionContext:
        return DimensionContext(has_z=self.has_z, has_m=self.has_m)


class HeaderResolver:
    """Reads and writes the per-geometry header"""

    @staticmethod
    def resolve_kind(code: int, offset: int) -> GeometryKind:
        """
        Look up a kind code in the kind table

        Args:
            code: Kind byte value
            offset: Buffer offset of the kind byte

        Returns:
            Implemented GeometryKind

        Raises:
            UnsupportedGeometryTypeError: For reserved kinds without payload logic
            UnknownGeometryTypeError: For codes outside the kind table
        """
        try:
            kind = GeometryKind(code)
        except ValueError:
            raise UnknownGeometryTypeError(code, offset=offset)

        if not kind.is_implemented:
            raise UnsupportedGeometryTypeError(code, kind.type_name, offset=offset)

        return kind

    @classmethod
    def read(cls, reader: ByteReader) -> WkbHeader:
        """
        Consume one header, skipping the SRID field when flagged

        Args:
            reader: Reader positioned at a byte order tag

        Returns:
            Resolved header

        Raises:
            UnsupportedByteOrderError: If the order tag is not NDR
            UnknownGeometryTypeError: If the kind code cannot be decoded
            TruncatedInputError: If the header runs past the buffer
        """
        order_offset = reader.offset
        byte_order = reader.read_byte()
        if byte_order != ByteOrder.NDR:
            raise UnsupportedByteOrderError(byte_order, offset=order_offset)

        kind_offset = reader.offset
        kind = cls.resolve_kind(reader.read_byte(), kind_offset)

        has_z = reader.read_byte() != 0
        has_m = reader.read_byte() != 0
        has_srid = reader.read_byte() != 0

        if has_srid:
            # SRID value is not retained
            reader.read_bytes(WKB_CONSTANTS.SRID_SIZE)

        header = WkbHeader(kind=kind, has_z=has_z, has_m=has_m, has_srid=has_srid)
        logger.debug(
            f"Header at offset {order_offset}: {kind.type_name} "
            f"{header.context.layout.value}, srid={has_srid}"
        )
        return header

    @staticmethod
    def write(writer: ByteWriter, kind: GeometryKind, context: DimensionContext) -> None:
        """Emit one header; the SRID flag is always 0"""
        writer.write_byte(int(ByteOrder.NDR))
        writer.write_byte(int(kind))
        writer.write_byte(int(context.has_z))
        writer.write_byte(int(context.has_m))
        writer.write_byte(0)
