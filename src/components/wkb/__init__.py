"""
WKB module for decoding and encoding geometry trees.

This module provides the header resolution shared by both directions,
the recursive decoder and encoder, and module level convenience entry
points.
"""

from src.components.wkb.header import DimensionContext, WkbHeader, HeaderResolver
from src.components.wkb.decoder import WkbDecoder
from src.components.wkb.encoder import WkbEncoder
from src.components.wkb.codec import decode, encode, load, dump

__all__ = [
    'DimensionContext',
    'WkbHeader',
    'HeaderResolver',
    'WkbDecoder',
    'WkbEncoder',
    'decode',
    'encode',
    'load',
    'dump',
]
