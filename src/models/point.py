import math
from typing import Any, Iterator, Optional, Sequence, Tuple
from dataclasses import dataclass

from src.core import GeometryKind, CoordinateLayout, GeometryModelError
from src.models.geometry import Geometry

_NAN_KEY = "NaN"


def _as_float(name: str, value: object) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise GeometryModelError(
            "Point",
            f"coordinate '{name}' has invalid value {value!r} "
            f"({type(e).__name__}: {str(e)})"
        )


@dataclass(frozen=True, eq=False)
class Point(Geometry):
    """
    Represents a point with x, y and optional z (elevation) and m (measure)

    Equality and hashing treat NaN ordinates as equal to each other, so a
    point written with NaN coordinates (the usual WKB empty point) compares
    equal to itself after a round trip.
    """
    x: float
    y: float
    z: Optional[float] = None
    m: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _as_float("x", self.x))
        object.__setattr__(self, "y", _as_float("y", self.y))
        if self.z is not None:
            object.__setattr__(self, "z", _as_float("z", self.z))
        if self.m is not None:
            object.__setattr__(self, "m", _as_float("m", self.m))

    def _ordinate_key(self) -> Tuple[Any, ...]:
        return tuple(
            _NAN_KEY if value is not None and math.isnan(value) else value
            for value in (self.x, self.y, self.z, self.m)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._ordinate_key() == other._ordinate_key()

    def __hash__(self) -> int:
        return hash(self._ordinate_key())

    def kind(self) -> GeometryKind:
        return GeometryKind.POINT

    def components(self) -> Tuple[Geometry, ...]:
        return ()

    def iter_points(self) -> Iterator["Point"]:
        yield self

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def layout(self) -> CoordinateLayout:
        return CoordinateLayout.from_flags(self.z is not None, self.m is not None)

    def coordinates(self) -> Tuple[float, ...]:
        """
        Get ordinates in wire order

        Returns:
            (x, y), (x, y, z), (x, y, m) or (x, y, z, m)
        """
        values = [self.x, self.y]
        if self.z is not None:
            values.append(self.z)
        if self.m is not None:
            values.append(self.m)
        return tuple(values)

    @classmethod
    def from_coordinates(
        cls,
        values: Sequence[float],
        layout: CoordinateLayout = CoordinateLayout.XY
    ) -> "Point":
        """
        Build a point from ordinates in wire order

        When only m is present (XYM) the third value is m, not z.

        Args:
            values: Ordinate values, length must match the layout
            layout: Coordinate layout of the values

        Returns:
            Point instance

        Raises:
            GeometryModelError: If the number of values does not match the layout
        """
        expected = 2 + int(layout.has_z) + int(layout.has_m)
        if len(values) != expected:
            raise GeometryModelError(
                "Point",
                f"{layout.value} layout needs {expected} ordinates, got {len(values)}"
            )

        z = values[2] if layout.has_z else None
        m = values[expected - 1] if layout.has_m else None
        return cls(values[0], values[1], z, m)
