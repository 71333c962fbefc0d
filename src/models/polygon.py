from typing import Optional, Tuple
from dataclasses import dataclass, field

from src.core import GeometryKind, GeometryModelError
from src.models.geometry import CompositeGeometry
from src.models.line_string import LineString


@dataclass(frozen=True)
class Polygon(CompositeGeometry):
    """
    Ordered sequence of rings

    By convention ring 0 is the exterior and later rings are holes; the
    codec only preserves ring order. Non-empty rings must share one layout.
    """
    rings: Tuple[LineString, ...] = field(default_factory=tuple)

    _children_field = "rings"
    _child_type = LineString

    def __post_init__(self) -> None:
        self._freeze_children(self.rings)

        layouts = {ring.layout for ring in self.rings if ring.points}
        if len(layouts) > 1:
            found = ", ".join(sorted(layout.value for layout in layouts))
            raise GeometryModelError(
                self.type_name,
                f"all rings must share one coordinate layout, found {found}"
            )

    def kind(self) -> GeometryKind:
        return GeometryKind.POLYGON

    @property
    def exterior(self) -> Optional[LineString]:
        return self.rings[0] if self.rings else None

    @property
    def interiors(self) -> Tuple[LineString, ...]:
        return self.rings[1:]
