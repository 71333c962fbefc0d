from typing import Tuple
from dataclasses import dataclass, field

from src.core import GeometryKind
from src.models.geometry import CompositeGeometry, Geometry


@dataclass(frozen=True)
class GeometryCollection(CompositeGeometry):
    """Ordered sequence of arbitrary geometries, possibly nested collections"""
    geometries: Tuple[Geometry, ...] = field(default_factory=tuple)

    _children_field = "geometries"
    _child_type = Geometry

    def __post_init__(self) -> None:
        self._freeze_children(self.geometries)

    def kind(self) -> GeometryKind:
        return GeometryKind.GEOMETRY_COLLECTION
