"""
Byte cursor module for reading and writing WKB primitives.

This module provides a forward-only reader, a growable writer and the
hex text conversion used at the codec entry points.
"""

from src.components.byte_cursor.hex_codec import HexCodec
from src.components.byte_cursor.byte_reader import ByteReader
from src.components.byte_cursor.byte_writer import ByteWriter

__all__ = [
    'HexCodec',
    'ByteReader',
    'ByteWriter',
]
