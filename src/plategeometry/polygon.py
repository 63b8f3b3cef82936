#!/usr/bin/env python3
"""
Point-in-polygon and signed distance queries on 2D polygons.

Points on an edge or a vertex count as inside, and their signed distance
is zero.
"""

from typing import Sequence, Tuple, Union
import logging

from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon

from .errors import PolygonError
from .point import Point

logger = logging.getLogger(__name__)

PointLike = Union[Point, Sequence[float]]


def _as_xy(point: PointLike) -> Tuple[float, float]:
    return (float(point[0]), float(point[1]))


def coords_to_polygon(polygon: Sequence[PointLike]) -> Polygon:
    """
    Convert a list of 2D points to a Shapely Polygon.

    Args:
        polygon: Polygon vertices in order; the ring is closed implicitly

    Returns:
        Polygon object

    Raises:
        PolygonError: If fewer than three points are given
    """
    if len(polygon) < 3:
        raise PolygonError(
            f"Not enough polygon points were specified. "
            f"At least 3 are needed, got {len(polygon)}."
        )
    return Polygon([_as_xy(p) for p in polygon])


def polygon_contains_point(polygon: Sequence[PointLike], point: PointLike) -> bool:
    """
    Check whether a point lies inside or on the boundary of a polygon.

    Args:
        polygon: Polygon vertices in order
        point: The 2D point to test

    Returns:
        True if the point is inside the polygon or on its boundary

    Raises:
        PolygonError: If fewer than three polygon points are given
    """
    shape = coords_to_polygon(polygon)
    return bool(shape.covers(ShapelyPoint(_as_xy(point))))


def signed_distance_to_polygon(polygon: Sequence[PointLike], point: PointLike) -> float:
    """
    Distance from a point to the nearest polygon edge, positive inside.

    Args:
        polygon: Polygon vertices in order
        point: The 2D point to measure from

    Returns:
        Distance to the closest edge; negated when the point is outside

    Raises:
        PolygonError: If fewer than three polygon points are given
    """
    shape = coords_to_polygon(polygon)
    query = ShapelyPoint(_as_xy(point))

    distance = shape.exterior.distance(query)
    if shape.covers(query):
        return distance

    logger.debug(f"Point {_as_xy(point)} is outside the polygon at distance {distance}")
    return -distance
