import struct
from typing import Union

import numpy as np

from src.core import TruncatedInputError, WKB_CONSTANTS

BytesLike = Union[bytes, bytearray, memoryview]


class ByteReader:
    """
    Forward-only reader over an immutable byte buffer

    Every read advances the internal offset and fails with
    TruncatedInputError when fewer bytes remain than requested.
    """

    def __init__(self, data: BytesLike):
        """
        Initialize reader

        Args:
            data: Buffer to read; it is copied so later mutation of a
                bytearray cannot affect the reader
        """
        self._data = bytes(data)
        self._offset = 0

    @property
    def offset(self) -> int:
        """Get current read position"""
        return self._offset

    @property
    def remaining(self) -> int:
        """Get number of unread bytes"""
        return len(self._data) - self._offset

    @property
    def at_end(self) -> bool:
        return self._offset >= len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def ensure_available(self, size: int) -> None:
        """
        Check that at least `size` bytes remain, without consuming them

        Args:
            size: Number of bytes required

        Raises:
            TruncatedInputError: If fewer bytes remain
        """
        if size > self.remaining:
            raise TruncatedInputError(self._offset, size, self.remaining)

    def read_bytes(self, size: int) -> bytes:
        """Read `size` raw bytes"""
        self.ensure_available(size)
        chunk = self._data[self._offset:self._offset + size]
        self._offset += size
        return chunk

    def read_byte(self) -> int:
        """Read one unsigned byte"""
        self.ensure_available(1)
        value = self._data[self._offset]
        self._offset += 1
        return value

    def read_uint32_le(self) -> int:
        """Read a little-endian unsigned 32-bit integer"""
        self.ensure_available(WKB_CONSTANTS.COUNT_SIZE)
        (value,) = struct.unpack_from(WKB_CONSTANTS.UINT32_FORMAT, self._data, self._offset)
        self._offset += WKB_CONSTANTS.COUNT_SIZE
        return value

    def read_double_le(self) -> float:
        """Read a little-endian IEEE-754 double"""
        self.ensure_available(WKB_CONSTANTS.DOUBLE_SIZE)
        (value,) = struct.unpack_from(WKB_CONSTANTS.DOUBLE_FORMAT, self._data, self._offset)
        self._offset += WKB_CONSTANTS.DOUBLE_SIZE
        return value

    def read_doubles(self, count: int) -> np.ndarray:
        """
        Read a block of little-endian doubles

        Args:
            count: Number of doubles to read

        Returns:
            1-D float64 array of length `count`
        """
        size = count * WKB_CONSTANTS.DOUBLE_SIZE
        self.ensure_available(size)
        values = np.frombuffer(
            self._data,
            dtype=WKB_CONSTANTS.DOUBLE_DTYPE,
            count=count,
            offset=self._offset
        )
        self._offset += size
        return values
