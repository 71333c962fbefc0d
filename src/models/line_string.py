from typing import Tuple
from dataclasses import dataclass, field

from src.core import GeometryKind, CoordinateLayout, GeometryModelError
from src.models.geometry import CompositeGeometry
from src.models.point import Point


@dataclass(frozen=True)
class LineString(CompositeGeometry):
    """
    Ordered sequence of points, possibly empty

    Points of a line string are written as bare coordinate tuples under a
    single header, so all of them must share one coordinate layout.
    """
    points: Tuple[Point, ...] = field(default_factory=tuple)

    _children_field = "points"
    _child_type = Point

    def __post_init__(self) -> None:
        self._freeze_children(self.points)

        layouts = {point.layout for point in self.points}
        if len(layouts) > 1:
            found = ", ".join(sorted(layout.value for layout in layouts))
            raise GeometryModelError(
                self.type_name,
                f"all points must share one coordinate layout, found {found}"
            )

    def kind(self) -> GeometryKind:
        return GeometryKind.LINE_STRING

    @property
    def layout(self) -> CoordinateLayout:
        if not self.points:
            return CoordinateLayout.XY
        return self.points[0].layout

    @property
    def is_closed(self) -> bool:
        """Check whether first and last points coincide (non-empty only)"""
        return bool(self.points) and self.points[0] == self.points[-1]
