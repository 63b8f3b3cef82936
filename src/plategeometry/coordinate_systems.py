#!/usr/bin/env python3
"""
Cartesian and spherical coordinate systems.

A coordinate system converts between Cartesian coordinates and its own
"natural" coordinates, and measures distances between points at the same
depth. Spherical natural coordinates are (radius, longitude, latitude) in
radians; Cartesian natural coordinates are (x, y, z).
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, Sequence, Tuple
import logging
import math

from .errors import PluginNotFoundError
from .point import CoordinateSystemType, Point

logger = logging.getLogger(__name__)


def clamp_unit(value: float) -> float:
    """Clamp a cosine/sine argument into [-1, 1] against round-off."""
    return max(-1.0, min(1.0, value))


class CoordinateSystem(ABC):
    """Interface shared by the coordinate systems."""

    name: str = ""
    system_type: CoordinateSystemType
    depth_coordinate_index: int
    surface_coordinate_indices: Tuple[int, int]

    def natural_coordinate_system(self) -> CoordinateSystemType:
        return self.system_type

    @abstractmethod
    def cartesian_to_natural_coordinates(
        self, position: Sequence[float]
    ) -> Tuple[float, float, float]:
        """Convert Cartesian (x, y, z) to natural coordinates."""
        pass

    @abstractmethod
    def natural_to_cartesian_coordinates(
        self, position: Sequence[float]
    ) -> Tuple[float, float, float]:
        """Convert natural coordinates back to Cartesian (x, y, z)."""
        pass

    @abstractmethod
    def distance_between_points_at_same_depth(self, point_1: Point, point_2: Point) -> float:
        """Distance along the surface between two points in natural coordinates."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Cartesian(CoordinateSystem):
    """Natural coordinates are the Cartesian coordinates themselves."""

    name = "cartesian"
    system_type = CoordinateSystemType.CARTESIAN
    depth_coordinate_index = 2
    surface_coordinate_indices = (0, 1)

    def cartesian_to_natural_coordinates(
        self, position: Sequence[float]
    ) -> Tuple[float, float, float]:
        x, y, z = position
        return (x, y, z)

    def natural_to_cartesian_coordinates(
        self, position: Sequence[float]
    ) -> Tuple[float, float, float]:
        x, y, z = position
        return (x, y, z)

    def distance_between_points_at_same_depth(self, point_1: Point, point_2: Point) -> float:
        """Horizontal Euclidean distance; the z component is ignored."""
        return math.hypot(point_2[0] - point_1[0], point_2[1] - point_1[1])


class Spherical(CoordinateSystem):
    """Natural coordinates are (radius, longitude, latitude) in radians."""

    name = "spherical"
    system_type = CoordinateSystemType.SPHERICAL
    depth_coordinate_index = 0
    surface_coordinate_indices = (1, 2)

    def cartesian_to_natural_coordinates(
        self, position: Sequence[float]
    ) -> Tuple[float, float, float]:
        x, y, z = position
        radius = math.sqrt(x * x + y * y + z * z)
        longitude = math.atan2(y, x)
        latitude = math.asin(clamp_unit(z / radius)) if radius > 0.0 else 0.0
        return (radius, longitude, latitude)

    def natural_to_cartesian_coordinates(
        self, position: Sequence[float]
    ) -> Tuple[float, float, float]:
        radius, longitude, latitude = position
        cos_lat = math.cos(latitude)
        return (
            radius * cos_lat * math.cos(longitude),
            radius * cos_lat * math.sin(longitude),
            radius * math.sin(latitude),
        )

    def distance_between_points_at_same_depth(self, point_1: Point, point_2: Point) -> float:
        """
        Great circle distance between two points at the same radius.

        Uses the spherical law of cosines for the central angle.

        Args:
            point_1: First point as (radius, longitude, latitude)
            point_2: Second point as (radius, longitude, latitude)

        Returns:
            radius * central angle
        """
        radius = point_1[0]
        if abs(radius - point_2[0]) > 1e-12 * max(abs(radius), 1.0):
            logger.debug(
                f"Points are not at the same radius ({radius} vs {point_2[0]}), "
                f"using the radius of the first point"
            )
        lon_1, lat_1 = point_1[1], point_1[2]
        lon_2, lat_2 = point_2[1], point_2[2]
        cos_angle = math.sin(lat_1) * math.sin(lat_2) + math.cos(lat_1) * math.cos(
            lat_2
        ) * math.cos(lon_2 - lon_1)
        return radius * math.acos(clamp_unit(cos_angle))


CoordinateSystemFactory = Callable[[], CoordinateSystem]


class CoordinateSystemRegistry:
    """Maps lowercase names to coordinate system factories."""

    def __init__(self, factories: Optional[Dict[str, CoordinateSystemFactory]] = None):
        self._factories: Dict[str, CoordinateSystemFactory] = {}
        for name, factory in (factories or {}).items():
            self.register(name, factory)

    def register(self, name: str, factory: CoordinateSystemFactory) -> None:
        key = name.strip().lower()
        if key in self._factories:
            logger.debug(f"Replacing coordinate system factory '{key}'")
        self._factories[key] = factory

    def create(self, name: str) -> CoordinateSystem:
        """
        Create a coordinate system by name.

        Raises:
            PluginNotFoundError: If no factory is registered under the name
        """
        key = name.strip().lower()
        factory = self._factories.get(key)
        if factory is None:
            raise PluginNotFoundError(name, len(self._factories))
        logger.debug(f"Creating coordinate system '{key}'")
        return factory()

    def names(self) -> List[str]:
        return sorted(self._factories)

    def __contains__(self, name: str) -> bool:
        return name.strip().lower() in self._factories

    def __len__(self) -> int:
        return len(self._factories)


def default_registry() -> CoordinateSystemRegistry:
    """Build a registry holding the Cartesian and spherical systems."""
    return CoordinateSystemRegistry(
        {Cartesian.name: Cartesian, Spherical.name: Spherical}
    )


def create_coordinate_system(
    name: str, registry: Optional[CoordinateSystemRegistry] = None
) -> CoordinateSystem:
    """
    Look up a coordinate system by (case-insensitive) name.

    Args:
        name: Registered name, e.g. "cartesian" or "spherical"
        registry: Registry to search; a default registry when omitted

    Raises:
        PluginNotFoundError: If the name is unknown
    """
    if registry is None:
        registry = default_registry()
    return registry.create(name)
