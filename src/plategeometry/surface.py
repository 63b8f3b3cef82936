#!/usr/bin/env python3
"""
Curved surfaces described by sections and segments, and 2D cross sections.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union
import logging
import math

from .config import DEFAULT_CONFIG, GeometryConfig
from .coordinate_systems import CoordinateSystem
from .curved_planes import (
    PlaneDistance,
    distance_point_from_curved_planes,
    validate_surface_tables,
)
from .errors import DimensionError, SurfaceShapeError
from .point import CoordinateSystemType, Point

logger = logging.getLogger(__name__)

PointLike = Union[Point, Sequence[float]]


class CrossSection:
    """
    A vertical slice through the model between two surface points.

    Points in the slice are (x, z): x is measured from the first point
    towards the second in natural surface coordinates (length units for
    Cartesian models, radians for spherical ones), z is the height
    (Cartesian) or the radius (spherical).
    """

    def __init__(
        self,
        start: PointLike,
        end: PointLike,
        coordinate_system: CoordinateSystem,
    ):
        self.start = (float(start[0]), float(start[1]))
        self.end = (float(end[0]), float(end[1]))
        self.coordinate_system = coordinate_system

        length = math.hypot(self.end[0] - self.start[0], self.end[1] - self.start[1])
        if length == 0.0:
            raise SurfaceShapeError(
                f"The two cross section points must differ, both are {self.start}."
            )
        self.direction = (
            (self.end[0] - self.start[0]) / length,
            (self.end[1] - self.start[1]) / length,
        )

    def surface_coordinates(self, x: float) -> Tuple[float, float]:
        return (
            self.start[0] + x * self.direction[0],
            self.start[1] + x * self.direction[1],
        )

    def to_cartesian(self, x: float, z: float) -> Point:
        """
        Convert a cross section point to a 3D Cartesian point.

        Args:
            x: Distance along the slice from its first point
            z: Height (Cartesian) or radius (spherical)

        Returns:
            3D point in Cartesian coordinates
        """
        first, second = self.surface_coordinates(x)
        if self.coordinate_system.natural_coordinate_system() == CoordinateSystemType.CARTESIAN:
            return Point((first, second, z))
        return Point(self.coordinate_system.natural_to_cartesian_coordinates((z, first, second)))

    def __repr__(self) -> str:
        return f"CrossSection({self.start}, {self.end}, {self.coordinate_system.name})"


@dataclass(frozen=True)
class CurvedSurface:
    """
    An immutable curved plane anchored along a line at the surface.

    Tables are indexed [section][segment]; segment angles are (top, bottom)
    dip angles in radians.
    """

    reference_point: Tuple[float, float]
    coordinates: Tuple[Tuple[float, float], ...]
    segment_lengths: Tuple[Tuple[float, ...], ...]
    segment_angles: Tuple[Tuple[Tuple[float, float], ...], ...]
    starting_radius: float
    coordinate_system: CoordinateSystem
    cross_section: Optional[CrossSection] = None
    config: GeometryConfig = DEFAULT_CONFIG

    def __post_init__(self):
        validate_surface_tables(self.coordinates, self.segment_lengths, self.segment_angles)
        if len(self.reference_point) != 2:
            raise SurfaceShapeError(
                f"The reference point must have 2 components, got {len(self.reference_point)}."
            )
        if not math.isfinite(self.starting_radius):
            raise SurfaceShapeError(f"Invalid starting radius: {self.starting_radius}.")

        # Freeze the tables so callers can't change the surface afterwards
        object.__setattr__(
            self, "reference_point", tuple(float(c) for c in self.reference_point)
        )
        object.__setattr__(
            self,
            "coordinates",
            tuple((float(c[0]), float(c[1])) for c in self.coordinates),
        )
        object.__setattr__(
            self,
            "segment_lengths",
            tuple(tuple(float(v) for v in section) for section in self.segment_lengths),
        )
        object.__setattr__(
            self,
            "segment_angles",
            tuple(
                tuple((float(a[0]), float(a[1])) for a in section)
                for section in self.segment_angles
            ),
        )
        object.__setattr__(self, "starting_radius", float(self.starting_radius))

        logger.info(
            f"Created {self.coordinate_system.name} surface with "
            f"{self.number_of_sections} sections of {self.number_of_segments} segments"
        )

    @property
    def number_of_sections(self) -> int:
        return len(self.coordinates)

    @property
    def number_of_segments(self) -> int:
        return len(self.segment_lengths[0])

    def total_length(self, section: int) -> float:
        """Sum of the segment lengths of one section."""
        return math.fsum(self.segment_lengths[section])

    def distance(self, point: PointLike, only_positive: bool = False) -> PlaneDistance:
        """
        Locate a point relative to the surface.

        Args:
            point: 3D Cartesian point, or a 2D (x, z) point when a cross
                section is configured
            only_positive: Ignore the part of space above the surface

        Raises:
            DimensionError: For 2D points without a cross section
        """
        if len(point) == 2:
            return self.distance_2d(point[0], point[1], only_positive)
        return distance_point_from_curved_planes(
            point,
            self.reference_point,
            self.coordinates,
            self.segment_lengths,
            self.segment_angles,
            self.starting_radius,
            self.coordinate_system,
            only_positive=only_positive,
            config=self.config,
        )

    def distance_2d(self, x: float, z: float, only_positive: bool = False) -> PlaneDistance:
        """
        Locate a cross section point relative to the surface.

        Raises:
            DimensionError: If the surface has no cross section
        """
        if self.cross_section is None:
            raise DimensionError(
                "This function can only be called when the cross section "
                "variable has been set. Dim is 3."
            )
        return self.distance(self.cross_section.to_cartesian(x, z), only_positive)
