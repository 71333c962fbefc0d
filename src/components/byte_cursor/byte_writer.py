import struct
from typing import Iterable

import numpy as np

from src.core import WKB_CONSTANTS
from src.components.byte_cursor.hex_codec import HexCodec


class ByteWriter:
    """Growable little-endian byte sink"""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def __len__(self) -> int:
        return len(self._buffer)

    def write_byte(self, value: int) -> None:
        """Append one unsigned byte (0-255)"""
        self._buffer.append(value)

    def write_uint32_le(self, value: int) -> None:
        """Append a little-endian unsigned 32-bit integer"""
        self._buffer += struct.pack(WKB_CONSTANTS.UINT32_FORMAT, value)

    def write_double_le(self, value: float) -> None:
        """Append a little-endian IEEE-754 double"""
        self._buffer += struct.pack(WKB_CONSTANTS.DOUBLE_FORMAT, value)

    def write_doubles(self, values: Iterable[float]) -> None:
        """Append a block of little-endian doubles"""
        block = np.asarray(list(values), dtype=WKB_CONSTANTS.DOUBLE_DTYPE)
        self._buffer += block.tobytes()

    def write_bytes(self, data: bytes) -> None:
        """Append raw bytes"""
        self._buffer += data

    def to_bytes(self) -> bytes:
        """Get an immutable copy of the assembled bytes"""
        return bytes(self._buffer)

    def to_hex(self, uppercase: bool = False) -> str:
        """Get the assembled bytes as hex text"""
        return HexCodec.to_hex(self._buffer, uppercase=uppercase)
