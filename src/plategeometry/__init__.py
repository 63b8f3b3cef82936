#!/usr/bin/env python3
"""
Plategeometry - Geometric queries against curved plate surfaces.

This package locates points relative to piecewise-curved surfaces (such as
subducting plates) in Cartesian and spherical models, and answers 2D
polygon containment and signed distance queries.
"""
import importlib.metadata

__version__ = importlib.metadata.version("plategeometry")

# Import main classes for public API
from .point import CoordinateSystemType, Point, cross_product
from .coordinate_systems import (
    Cartesian,
    CoordinateSystem,
    CoordinateSystemRegistry,
    Spherical,
    create_coordinate_system,
    default_registry,
)
from .natural_coordinate import NaturalCoordinate
from .polygon import polygon_contains_point, signed_distance_to_polygon
from .curved_planes import PlaneDistance, distance_point_from_curved_planes
from .surface import CrossSection, CurvedSurface
from .config import GeometryConfig, setup_logging
from .errors import (
    ConversionError,
    DimensionError,
    PlateGeometryError,
    PluginNotFoundError,
    PolygonError,
    SurfaceShapeError,
)

__all__ = [
    "CoordinateSystemType",
    "Point",
    "cross_product",
    "Cartesian",
    "CoordinateSystem",
    "CoordinateSystemRegistry",
    "Spherical",
    "create_coordinate_system",
    "default_registry",
    "NaturalCoordinate",
    "polygon_contains_point",
    "signed_distance_to_polygon",
    "PlaneDistance",
    "distance_point_from_curved_planes",
    "CrossSection",
    "CurvedSurface",
    "GeometryConfig",
    "setup_logging",
    "ConversionError",
    "DimensionError",
    "PlateGeometryError",
    "PluginNotFoundError",
    "PolygonError",
    "SurfaceShapeError",
]
