"""
Geometry adapters module.

This module provides conversions between geometry trees and the other
representations the service deals in: GeoJSON-like dictionaries and
Shapely geometries.
"""

from src.components.geometry.geojson_adapter import GeoJsonAdapter
from src.components.geometry.shapely_adapter import ShapelyAdapter

__all__ = [
    'GeoJsonAdapter',
    'ShapelyAdapter',
]
