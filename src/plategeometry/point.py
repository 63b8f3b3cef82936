#!/usr/bin/env python3
"""
Fixed-dimension points tagged with the coordinate system they live in.
"""

from enum import Enum
from typing import Iterable, Iterator, Tuple, Union
import math

from .errors import DimensionError


class CoordinateSystemType(Enum):
    """Enumeration for the supported coordinate systems."""

    CARTESIAN = "cartesian"
    SPHERICAL = "spherical"

    def __str__(self) -> str:
        return self.value


class Point:
    """
    An immutable 2D or 3D point.

    Arithmetic between points requires equal dimensions. Multiplying two
    points returns their dot product; multiplying by a number scales.
    """

    __slots__ = ("_coords", "_coordinate_system")

    def __init__(
        self,
        coords: Iterable[float],
        coordinate_system: CoordinateSystemType = CoordinateSystemType.CARTESIAN,
    ):
        values = tuple(float(c) for c in coords)
        if len(values) not in (2, 3):
            raise DimensionError(
                f"A point has 2 or 3 components, got {len(values)}."
            )
        object.__setattr__(self, "_coords", values)
        object.__setattr__(self, "_coordinate_system", coordinate_system)

    @classmethod
    def from_dim(
        cls,
        dim: int,
        *values: float,
        coordinate_system: CoordinateSystemType = CoordinateSystemType.CARTESIAN,
    ) -> "Point":
        """
        Build a point of a given dimension, checking the number of values.

        Args:
            dim: Expected dimension (2 or 3)
            values: The coordinate values
            coordinate_system: Coordinate system tag

        Raises:
            DimensionError: If the number of values does not match dim
        """
        if dim == 2 and len(values) == 3:
            raise DimensionError("Can't use the 3d constructor in 2d.")
        if dim == 3 and len(values) == 2:
            raise DimensionError("Can't use the 2d constructor in 3d.")
        if len(values) != dim:
            raise DimensionError(f"Expected {dim} values, got {len(values)}.")
        return cls(values, coordinate_system)

    @classmethod
    def origin(
        cls,
        dim: int,
        coordinate_system: CoordinateSystemType = CoordinateSystemType.CARTESIAN,
    ) -> "Point":
        return cls((0.0,) * dim, coordinate_system)

    def __setattr__(self, name, value):
        raise AttributeError("Point is immutable")

    @property
    def coordinate_system(self) -> CoordinateSystemType:
        return self._coordinate_system

    @property
    def dim(self) -> int:
        return len(self._coords)

    def get_array(self) -> Tuple[float, ...]:
        return self._coords

    def with_component(self, index: int, value: float) -> "Point":
        """Return a copy with one component replaced."""
        coords = list(self._coords)
        coords[index] = value
        return Point(coords, self._coordinate_system)

    def with_coordinate_system(self, coordinate_system: CoordinateSystemType) -> "Point":
        return Point(self._coords, coordinate_system)

    def _check_same_dim(self, other: "Point") -> None:
        if self.dim != other.dim:
            raise DimensionError(
                f"Can't combine a {self.dim}d point with a {other.dim}d point."
            )

    def __getitem__(self, index: int) -> float:
        return self._coords[index]

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self) -> Iterator[float]:
        return iter(self._coords)

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        self._check_same_dim(other)
        return Point(
            (a + b for a, b in zip(self._coords, other._coords)),
            self._coordinate_system,
        )

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        self._check_same_dim(other)
        return Point(
            (a - b for a, b in zip(self._coords, other._coords)),
            self._coordinate_system,
        )

    def __neg__(self) -> "Point":
        return Point((-a for a in self._coords), self._coordinate_system)

    def __mul__(self, other: Union["Point", float]) -> Union["Point", float]:
        if isinstance(other, Point):
            return self.dot(other)
        if isinstance(other, (int, float)):
            return Point((a * other for a in self._coords), self._coordinate_system)
        return NotImplemented

    def __rmul__(self, other: float) -> "Point":
        if isinstance(other, (int, float)):
            return Point((a * other for a in self._coords), self._coordinate_system)
        return NotImplemented

    def __truediv__(self, other: float) -> "Point":
        if isinstance(other, (int, float)):
            return Point((a / other for a in self._coords), self._coordinate_system)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (
            self._coords == other._coords
            and self._coordinate_system == other._coordinate_system
        )

    def __hash__(self) -> int:
        return hash((self._coords, self._coordinate_system))

    def __repr__(self) -> str:
        values = ", ".join(f"{c:g}" for c in self._coords)
        return f"Point({values}, {self._coordinate_system})"

    def dot(self, other: "Point") -> float:
        self._check_same_dim(other)
        return sum(a * b for a, b in zip(self._coords, other._coords))

    def norm_square(self) -> float:
        return sum(a * a for a in self._coords)

    def norm(self) -> float:
        return math.sqrt(self.norm_square())


def cross_product(a: Point, b: Point) -> Point:
    """
    Cross product of two 3D points.

    Raises:
        DimensionError: If either point is not 3D
    """
    if a.dim != 3 or b.dim != 3:
        raise DimensionError("The cross product is only defined for 3d points.")
    return Point(
        (
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        ),
        a.coordinate_system,
    )
