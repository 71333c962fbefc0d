"""
Custom exceptions for the WKB codec.

This module defines custom exception classes for the error conditions
that can occur while decoding WKB buffers, unpacking hex text and
building geometry trees.
"""

from typing import Optional


class WkbCodecException(Exception):
    """Base exception class for all WKB codec errors"""
    pass


class DecodingError(WkbCodecException):
    """Base exception for malformed WKB input"""
    pass


class EmptyInputError(DecodingError):
    """Exception raised when the input holds no bytes at all"""

    def __init__(self, details: Optional[str] = None):
        """
        Initialize EmptyInputError.

        Args:
            details: Additional details about the input
        """
        self.details = details

        message = "Cannot decode WKB from empty input"
        if details:
            message += f": {details}"

        super().__init__(message)


class UnsupportedByteOrderError(DecodingError):
    """
    Exception raised when the byte order tag is not NDR (1).

    Big endian (XDR, tag 0) buffers are explicitly unsupported.
    """

    def __init__(self, byte_order: int, offset: int = 0):
        """
        Initialize UnsupportedByteOrderError.

        Args:
            byte_order: Byte order tag found in the buffer
            offset: Buffer offset of the tag
        """
        self.byte_order = byte_order
        self.offset = offset

        if byte_order == 0:
            reason = "big endian (XDR) is not supported"
        else:
            reason = "not a valid byte order tag"

        message = (
            f"Unsupported byte order {byte_order} at offset {offset}: {reason}. "
            f"Only little endian (NDR, 1) is accepted."
        )
        super().__init__(message)


class UnknownGeometryTypeError(DecodingError):
    """Exception raised when a geometry kind code is not in the kind table"""

    def __init__(self, code: int, offset: Optional[int] = None, details: Optional[str] = None):
        """
        Initialize UnknownGeometryTypeError.

        Args:
            code: Geometry kind code (or offending value)
            offset: Buffer offset of the kind byte, if decoding
            details: Additional details about the failure
        """
        self.code = code
        self.offset = offset
        self.details = details

        message = f"Unknown geometry type code {code}"
        if offset is not None:
            message += f" at offset {offset}"
        if details:
            message += f": {details}"

        super().__init__(message)


class UnsupportedGeometryTypeError(UnknownGeometryTypeError):
    """
    Exception raised for geometry kinds that are reserved by the format
    (curves, surfaces, TIN, Triangle) but have no payload logic here.
    """

    def __init__(self, code: int, type_name: str, offset: Optional[int] = None):
        """
        Initialize UnsupportedGeometryTypeError.

        Args:
            code: Geometry kind code
            type_name: Name of the geometry kind
            offset: Buffer offset of the kind byte, if decoding
        """
        self.type_name = type_name
        super().__init__(
            code,
            offset=offset,
            details=f"{type_name} is not supported by this codec"
        )


class TruncatedInputError(DecodingError):
    """Exception raised when a read runs past the end of the buffer"""

    def __init__(self, offset: int, requested: int, available: int):
        """
        Initialize TruncatedInputError.

        Args:
            offset: Reader offset at the failed read
            requested: Number of bytes requested
            available: Number of bytes remaining
        """
        self.offset = offset
        self.requested = requested
        self.available = available

        message = (
            f"Truncated WKB input at offset {offset}: "
            f"needed {requested} bytes, only {available} remaining"
        )
        super().__init__(message)


class InvalidHexError(DecodingError):
    """Exception raised when hex text cannot be unpacked into bytes"""

    def __init__(self, reason: str, position: Optional[int] = None):
        """
        Initialize InvalidHexError.

        Args:
            reason: Description of the problem
            position: Character position of the first bad digit, if any
        """
        self.reason = reason
        self.position = position

        message = f"Invalid hex input: {reason}"
        if position is not None:
            message += f" (position {position})"

        super().__init__(message)


class TrailingBytesError(DecodingError):
    """Exception raised in strict mode when bytes remain after the root geometry"""

    def __init__(self, offset: int, remaining: int):
        """
        Initialize TrailingBytesError.

        Args:
            offset: Offset where the root geometry ended
            remaining: Number of unread bytes
        """
        self.offset = offset
        self.remaining = remaining

        message = f"{remaining} trailing bytes after geometry ending at offset {offset}"
        super().__init__(message)


class NestingTooDeepError(DecodingError):
    """Exception raised when multi-geometries nest deeper than the configured limit"""

    def __init__(self, max_depth: int, offset: int):
        """
        Initialize NestingTooDeepError.

        Args:
            max_depth: Configured nesting limit
            offset: Buffer offset of the header that exceeded the limit
        """
        self.max_depth = max_depth
        self.offset = offset

        message = (
            f"Geometry nesting deeper than {max_depth} levels "
            f"at offset {offset}"
        )
        super().__init__(message)

class GeometryModelError(WkbCodecException, ValueError):
    """Exception raised when a geometry tree or geometry dict is ill-formed"""

    def __init__(self, geometry_type: str, details: str):
        """
        Initialize GeometryModelError.

        Args:
            geometry_type: Geometry type being built
            details: Details about the problem
        """
        self.geometry_type = geometry_type
        self.details = details

        message = f"Invalid {geometry_type}: {details}"
        super().__init__(message)
