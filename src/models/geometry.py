from abc import ABC, abstractmethod
from typing import Iterator, Tuple, Type, Any, TYPE_CHECKING

from src.core import GeometryKind, CoordinateLayout, GeometryModelError, WKB_CONSTANTS

if TYPE_CHECKING:
    from src.models.point import Point


class Geometry(ABC):
    """
    Abstract base for all geometry model values

    Geometry values are immutable trees: every composite exclusively owns
    a tuple of child geometries, and points are leaves. Concrete classes
    are frozen dataclasses, so equality is structural.
    """

    @abstractmethod
    def kind(self) -> GeometryKind:
        """Get the WKB kind of this geometry"""
        pass

    @abstractmethod
    def components(self) -> Tuple["Geometry", ...]:
        """Get direct children in order (empty for points)"""
        pass

    @abstractmethod
    def iter_points(self) -> Iterator["Point"]:
        """Iterate over all points depth-first, in order"""
        pass

    @property
    def type_name(self) -> str:
        return self.kind().type_name

    @property
    def num_components(self) -> int:
        return len(self.components())

    @property
    def is_empty(self) -> bool:
        """Check whether the geometry has no coordinates at all"""
        return next(self.iter_points(), None) is None

    @property
    def layout(self) -> CoordinateLayout:
        """
        Get coordinate layout, taken from the first point depth-first

        Empty geometries report XY.
        """
        first = next(self.iter_points(), None)
        if first is None:
            return CoordinateLayout.XY
        return first.layout

    @property
    def has_z(self) -> bool:
        return self.layout.has_z

    @property
    def has_m(self) -> bool:
        return self.layout.has_m

    @property
    def dimensionality(self) -> int:
        """Number of ordinates per coordinate (2, 3 or 4)"""
        return WKB_CONSTANTS.BASE_DIMENSIONALITY + int(self.has_z) + int(self.has_m)


class CompositeGeometry(Geometry):
    """Shared behaviour of geometries that own an ordered tuple of children"""

    # Name of the dataclass field holding children and the accepted child class
    _children_field: str = ""
    _child_type: Type[Geometry] = Geometry

    def _freeze_children(self, children: Any) -> None:
        """Validate children and store them as a tuple on the frozen instance"""
        try:
            frozen = tuple(children)
        except TypeError:
            raise GeometryModelError(
                self.type_name,
                f"children must be an iterable of {self._child_type.__name__}, "
                f"got {type(children).__name__}"
            )

        for i, child in enumerate(frozen):
            if not isinstance(child, self._child_type):
                raise GeometryModelError(
                    self.type_name,
                    f"child at index {i} must be {self._child_type.__name__}, "
                    f"got {type(child).__name__}"
                )

        object.__setattr__(self, self._children_field, frozen)

    def components(self) -> Tuple[Geometry, ...]:
        return getattr(self, self._children_field)

    def iter_points(self) -> Iterator["Point"]:
        for child in self.components():
            yield from child.iter_points()

    def __iter__(self) -> Iterator[Geometry]:
        return iter(self.components())

    def __getitem__(self, index: int) -> Geometry:
        return self.components()[index]
