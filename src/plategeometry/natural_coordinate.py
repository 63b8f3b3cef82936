#!/usr/bin/env python3
"""
Read-only natural-coordinate view of a Cartesian position.
"""

from typing import Optional, Sequence, Tuple, Union

from .coordinate_systems import CoordinateSystem
from .errors import DimensionError
from .point import Point


class NaturalCoordinate:
    """A Cartesian position seen through a coordinate system."""

    def __init__(
        self,
        position: Union[Point, Sequence[float]],
        coordinate_system: CoordinateSystem,
    ):
        values = tuple(position.get_array() if isinstance(position, Point) else position)
        if len(values) != 3:
            raise DimensionError(
                f"A natural coordinate needs a 3d position, got {len(values)} values."
            )
        self._cartesian: Tuple[float, float, float] = values  # type: ignore[assignment]
        self._coordinate_system = coordinate_system
        self._natural: Optional[Tuple[float, float, float]] = None

    @property
    def coordinate_system(self) -> CoordinateSystem:
        return self._coordinate_system

    def get_coordinates(self) -> Tuple[float, float, float]:
        if self._natural is None:
            self._natural = self._coordinate_system.cartesian_to_natural_coordinates(
                self._cartesian
            )
        return self._natural

    def get_surface_coordinates(self) -> Tuple[float, float]:
        coords = self.get_coordinates()
        first, second = self._coordinate_system.surface_coordinate_indices
        return (coords[first], coords[second])

    def get_depth_coordinate(self) -> float:
        """z for Cartesian systems, the radius for spherical ones."""
        return self.get_coordinates()[self._coordinate_system.depth_coordinate_index]

    coordinates = property(get_coordinates)
    surface_coordinates = property(get_surface_coordinates)
    depth_coordinate = property(get_depth_coordinate)

    def surface_point(self) -> Point:
        return Point(
            self.get_surface_coordinates(),
            self._coordinate_system.natural_coordinate_system(),
        )

    def __repr__(self) -> str:
        return (
            f"NaturalCoordinate({self.get_coordinates()}, "
            f"{self._coordinate_system.name})"
        )
