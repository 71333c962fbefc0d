"""
Wire constants for the WKB framing.

Centralized location for the byte sizes and format strings used by the
readers and writers, avoiding magic numbers in code.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class WkbWireConstants:
    """
    Immutable sizes of the WKB building blocks (Immutable Object Pattern)

    All sizes are in bytes.
    """

    # order, kind, z flag, m flag, srid flag
    HEADER_SIZE: int = 5
    SRID_SIZE: int = 4
    COUNT_SIZE: int = 4
    DOUBLE_SIZE: int = 8

    # Base 2D coordinate (x, y)
    BASE_DIMENSIONALITY: int = 2

    # struct / numpy formats, little endian
    UINT32_FORMAT: str = "<I"
    DOUBLE_FORMAT: str = "<d"
    DOUBLE_DTYPE: str = "<f8"

    @classmethod
    def coordinate_size(cls, dimensionality: int) -> int:
        """
        Get the byte size of one bare coordinate tuple

        Args:
            dimensionality: Number of ordinates (2, 3 or 4)

        Returns:
            Size in bytes
        """
        return dimensionality * cls.DOUBLE_SIZE


# Singleton instance for easy access
WKB_CONSTANTS = WkbWireConstants()
