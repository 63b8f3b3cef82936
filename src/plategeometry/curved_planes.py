#!/usr/bin/env python3
"""
Distance from a point to a curved plane built from sections and segments.

A plane is anchored at the surface along a line through the section
coordinates. Below each section it descends as a chain of segments; each
segment is a circular arc (or a straight line when its top and bottom dip
angles are equal). Segment angles and lengths are interpolated linearly
between neighbouring sections.

All geometry is done in a local vertical cross section through the point
on the surface line closest to the query point:

    y
    ^   begin (0, starting_radius)
    |   o-----.
    |          `-.   <- plane, dipping towards +x
    |             `.
    +-----------------> x  (towards the reference point side)

For Cartesian systems the origin of the cross section is at z = 0 below
the surface line; for spherical systems it is the center of the sphere.
"""

from typing import Dict, Iterator, List, NamedTuple, Optional, Sequence, Tuple, Union
import logging
import math

from .config import DEFAULT_CONFIG, GeometryConfig
from .coordinate_systems import CoordinateSystem
from .errors import SurfaceShapeError
from .natural_coordinate import NaturalCoordinate
from .point import CoordinateSystemType, Point
from .utilities import interpolate

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi

PointLike = Union[Point, Sequence[float]]


class PlaneDistance(NamedTuple):
    """Where a point lies relative to a curved plane."""

    distance_from_plane: float  # Signed; positive below the plane
    distance_along_plane: float  # Arc length from the surface to the foot point
    section_fraction: float  # Fraction between section and section + 1
    section: int
    segment: int
    segment_fraction: float  # Fraction along the segment

    @classmethod
    def no_match(cls) -> "PlaneDistance":
        """The result for points that are not next to the plane."""
        return cls(math.inf, math.inf, 0.0, 0, 0, 0.0)

    def is_match(self) -> bool:
        return math.isfinite(self.distance_from_plane)

    def as_dict(self) -> Dict[str, float]:
        return {
            "distanceFromPlane": self.distance_from_plane,
            "distanceAlongPlane": self.distance_along_plane,
            "sectionFraction": self.section_fraction,
            "section": self.section,
            "segment": self.segment,
            "segmentFraction": self.segment_fraction,
        }


class SegmentHit(NamedTuple):
    """The foot point of the query point on a single segment."""

    distance: float
    along: float  # Arc length within the segment


def validate_surface_tables(
    coordinates: Sequence[PointLike],
    segment_lengths: Sequence[Sequence[float]],
    segment_angles: Sequence[Sequence[Sequence[float]]],
) -> None:
    """
    Check that the section and segment tables describe a usable plane.

    Args:
        coordinates: Surface coordinates of each section
        segment_lengths: Segment lengths per section
        segment_angles: (top, bottom) dip angles in radians per segment per section

    Raises:
        SurfaceShapeError: If the tables are too short, inconsistent or not finite
    """
    number_of_sections = len(coordinates)
    if number_of_sections < 2:
        raise SurfaceShapeError(
            f"At least 2 section coordinates are needed, got {number_of_sections}."
        )
    if len(segment_lengths) != number_of_sections:
        raise SurfaceShapeError(
            f"There are {number_of_sections} section coordinates but "
            f"{len(segment_lengths)} sections of segment lengths."
        )
    if len(segment_angles) != number_of_sections:
        raise SurfaceShapeError(
            f"There are {number_of_sections} section coordinates but "
            f"{len(segment_angles)} sections of segment angles."
        )

    number_of_segments = len(segment_lengths[0])
    for i_section in range(number_of_sections):
        lengths = segment_lengths[i_section]
        angles = segment_angles[i_section]
        if len(coordinates[i_section]) != 2:
            raise SurfaceShapeError(
                f"Section coordinate {i_section} must have 2 components, "
                f"got {len(coordinates[i_section])}."
            )
        if len(lengths) != number_of_segments:
            raise SurfaceShapeError(
                f"Section {i_section} has {len(lengths)} segment lengths, "
                f"section 0 has {number_of_segments}."
            )
        if len(angles) != number_of_segments:
            raise SurfaceShapeError(
                f"Section {i_section} has {len(angles)} segment angles, "
                f"but {number_of_segments} segment lengths."
            )
        for i_segment, (length, angle_pair) in enumerate(zip(lengths, angles)):
            if not math.isfinite(length) or length < 0:
                raise SurfaceShapeError(
                    f"Segment {i_segment} of section {i_section} has an invalid "
                    f"length: {length}."
                )
            if len(angle_pair) != 2:
                raise SurfaceShapeError(
                    f"Segment {i_segment} of section {i_section} needs a top and "
                    f"a bottom angle, got {len(angle_pair)} values."
                )
            if not all(math.isfinite(a) for a in angle_pair):
                raise SurfaceShapeError(
                    f"Segment {i_segment} of section {i_section} has a non-finite "
                    f"angle: {tuple(angle_pair)}."
                )


def _cross_2d(ax: float, ay: float, bx: float, by: float) -> float:
    return ax * by - ay * bx


def project_onto_section(
    surface_point: Tuple[float, float],
    start: PointLike,
    end: PointLike,
    tolerance: float,
) -> Optional[float]:
    """
    Fraction of the way from start to end of the closest point on the line.

    Returns:
        The fraction clamped to [0, 1], or None if the closest point on the
        infinite line lies outside the section (or the section has no length)
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length_square = dx * dx + dy * dy
    if length_square == 0.0:
        return None

    fraction = (
        (surface_point[0] - start[0]) * dx + (surface_point[1] - start[1]) * dy
    ) / length_square
    if fraction < -tolerance or fraction > 1.0 + tolerance:
        return None
    return min(1.0, max(0.0, fraction))


def _reference_side_sign(
    surface_point: Tuple[float, float],
    reference_point: PointLike,
    start: PointLike,
    end: PointLike,
) -> float:
    """+1 if the point is on the same side of the surface line as the reference point."""
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    side_point = _cross_2d(dx, dy, surface_point[0] - start[0], surface_point[1] - start[1])
    side_reference = _cross_2d(
        dx, dy, reference_point[0] - start[0], reference_point[1] - start[1]
    )
    return -1.0 if side_point * side_reference < 0.0 else 1.0


def local_cross_section_point(
    natural: NaturalCoordinate,
    cartesian: Tuple[float, float, float],
    surface_line_point: Tuple[float, float],
    side: float,
) -> Tuple[float, float]:
    """
    Coordinates of the query point in the vertical cross section.

    Args:
        natural: Natural coordinates of the query point
        cartesian: Cartesian coordinates of the query point
        surface_line_point: Closest point on the surface line, in surface coordinates
        side: +1 or -1, the side of the surface line the point is on

    Returns:
        (x, y): x horizontal from the surface line, positive towards the
        reference point side; y vertical (z, or the radial component)
    """
    coordinate_system = natural.coordinate_system
    if coordinate_system.natural_coordinate_system() == CoordinateSystemType.CARTESIAN:
        surface = natural.get_surface_coordinates()
        horizontal = math.hypot(
            surface[0] - surface_line_point[0], surface[1] - surface_line_point[1]
        )
        return (side * horizontal, natural.get_depth_coordinate())

    # Spherical: the vertical axis is the radial direction at the surface line point.
    axis = coordinate_system.natural_to_cartesian_coordinates(
        (1.0, surface_line_point[0], surface_line_point[1])
    )
    vertical = sum(a * c for a, c in zip(axis, cartesian))
    horizontal = math.sqrt(
        sum((c - vertical * a) ** 2 for a, c in zip(axis, cartesian))
    )
    return (side * horizontal, vertical)


def _straight_segment_hit(
    px: float,
    py: float,
    begin: Tuple[float, float],
    angle: float,
    length: float,
    config: GeometryConfig,
) -> Tuple[Optional[SegmentHit], Tuple[float, float]]:
    tangent_x, tangent_y = math.cos(angle), -math.sin(angle)
    rel_x, rel_y = px - begin[0], py - begin[1]
    end = (begin[0] + length * tangent_x, begin[1] + length * tangent_y)

    along = rel_x * tangent_x + rel_y * tangent_y
    slack = config.coincident_point_tolerance * max(1.0, length)
    if along < -slack or along > length + slack:
        return None, end

    # The unit normal pointing to the lower side of the segment is (-sin a, -cos a)
    distance = -rel_x * math.sin(angle) - rel_y * math.cos(angle)
    return SegmentHit(distance, min(length, max(0.0, along))), end


def _curved_segment_hit(
    px: float,
    py: float,
    begin: Tuple[float, float],
    top_angle: float,
    bottom_angle: float,
    length: float,
    config: GeometryConfig,
) -> Tuple[Optional[SegmentHit], Tuple[float, float]]:
    delta = bottom_angle - top_angle
    sweep = abs(delta)
    radius = length / sweep
    # Steepening segments curve downwards, so their center lies below the
    # begin point; flattening segments have it above.
    direction = 1.0 if delta > 0 else -1.0
    center_x = begin[0] - direction * radius * math.sin(top_angle)
    center_y = begin[1] - direction * radius * math.cos(top_angle)
    end = (
        center_x + direction * radius * math.sin(bottom_angle),
        center_y + direction * radius * math.cos(bottom_angle),
    )

    dx, dy = px - center_x, py - center_y
    distance_to_center = math.hypot(dx, dy)

    if distance_to_center < config.coincident_point_tolerance:
        # Every point on the circle is equally close; use the top of the segment.
        swept = 0.0
    else:
        point_angle = math.atan2(direction * dx, direction * dy)
        swept = (direction * (point_angle - top_angle)) % TWO_PI
        if swept > TWO_PI - config.angle_tolerance:
            swept = 0.0

    if swept > sweep + config.angle_tolerance:
        return None, end

    distance = direction * (radius - distance_to_center)
    return SegmentHit(distance, min(swept, sweep) * radius), end


def iterate_segment_hits(
    local_point: Tuple[float, float],
    starting_radius: float,
    lengths: Sequence[float],
    angles: Sequence[Tuple[float, float]],
    config: GeometryConfig,
) -> Iterator[Tuple[int, SegmentHit, float, float]]:
    """
    Walk the segment chain and yield every segment the point projects onto.

    Args:
        local_point: (x, y) of the query point in the cross section
        starting_radius: Height of the surface in the cross section
        lengths: Interpolated segment lengths
        angles: Interpolated (top, bottom) angles

    Yields:
        (segment index, hit, arc length before the segment, segment length)
    """
    px, py = local_point
    begin = (0.0, starting_radius)
    total_length = 0.0

    for i_segment, (length, (top_angle, bottom_angle)) in enumerate(zip(lengths, angles)):
        if length < config.zero_length_tolerance:
            continue

        if abs(bottom_angle - top_angle) < config.straight_segment_tolerance:
            hit, end = _straight_segment_hit(px, py, begin, top_angle, length, config)
        else:
            hit, end = _curved_segment_hit(
                px, py, begin, top_angle, bottom_angle, length, config
            )

        if hit is not None:
            yield i_segment, hit, total_length, length

        total_length += length
        begin = end


def interpolate_section(
    segment_lengths: Sequence[Sequence[float]],
    segment_angles: Sequence[Sequence[Sequence[float]]],
    section: int,
    fraction: float,
) -> Tuple[List[float], List[Tuple[float, float]]]:
    """Segment lengths and angles at a fraction between section and section + 1."""
    lengths = [
        interpolate(a, b, fraction)
        for a, b in zip(segment_lengths[section], segment_lengths[section + 1])
    ]
    angles = [
        (interpolate(a[0], b[0], fraction), interpolate(a[1], b[1], fraction))
        for a, b in zip(segment_angles[section], segment_angles[section + 1])
    ]
    return lengths, angles


def distance_point_from_curved_planes(
    point: PointLike,
    reference_point: PointLike,
    coordinates: Sequence[PointLike],
    segment_lengths: Sequence[Sequence[float]],
    segment_angles: Sequence[Sequence[Sequence[float]]],
    starting_radius: float,
    coordinate_system: CoordinateSystem,
    only_positive: bool = False,
    config: Optional[GeometryConfig] = None,
) -> PlaneDistance:
    """
    Compute where a point lies relative to a curved plane.

    Args:
        point: Query point in Cartesian coordinates
        reference_point: Surface point on the side the plane dips towards
        coordinates: Surface coordinates of the sections, in natural surface
            coordinates (x, y) or (longitude, latitude) in radians
        segment_lengths: Segment lengths per section
        segment_angles: (top, bottom) dip angles in radians per segment per section
        starting_radius: Height (Cartesian) or radius (spherical) of the surface
        coordinate_system: The coordinate system of the model
        only_positive: Ignore the part of space above the plane
        config: Numeric tolerances; defaults are used when omitted

    Returns:
        PlaneDistance for the closest segment, or PlaneDistance.no_match()
        when the point is not next to any segment

    Raises:
        SurfaceShapeError: If the section/segment tables are inconsistent
    """
    if config is None:
        config = DEFAULT_CONFIG
    validate_surface_tables(coordinates, segment_lengths, segment_angles)

    cartesian = tuple(point.get_array() if isinstance(point, Point) else point)
    natural = NaturalCoordinate(cartesian, coordinate_system)
    surface_point = natural.get_surface_coordinates()

    best: Optional[PlaneDistance] = None

    for i_section in range(len(coordinates) - 1):
        start = coordinates[i_section]
        end = coordinates[i_section + 1]
        section_fraction = project_onto_section(
            surface_point, start, end, config.coincident_point_tolerance
        )
        if section_fraction is None:
            continue

        surface_line_point = (
            interpolate(start[0], end[0], section_fraction),
            interpolate(start[1], end[1], section_fraction),
        )
        side = _reference_side_sign(surface_point, reference_point, start, end)
        local_point = local_cross_section_point(
            natural, cartesian, surface_line_point, side
        )
        lengths, angles = interpolate_section(
            segment_lengths, segment_angles, i_section, section_fraction
        )

        for i_segment, hit, length_before, length in iterate_segment_hits(
            local_point, starting_radius, lengths, angles, config
        ):
            if only_positive and hit.distance < 0.0:
                continue
            # Near-ties keep the earlier section and segment
            if best is not None:
                best_distance = abs(best.distance_from_plane)
                tie_tolerance = config.coincident_point_tolerance * max(1.0, best_distance)
                if abs(hit.distance) >= best_distance - tie_tolerance:
                    continue
            best = PlaneDistance(
                distance_from_plane=hit.distance,
                distance_along_plane=length_before + hit.along,
                section_fraction=section_fraction,
                section=i_section,
                segment=i_segment,
                segment_fraction=hit.along / length,
            )

    if best is None:
        logger.debug(f"Point {cartesian} is not next to the plane")
        return PlaneDistance.no_match()

    return best
