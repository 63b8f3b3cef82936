"""
Exception types raised by plategeometry.

Every error derives from PlateGeometryError and from the builtin exception
that best describes it, so callers can catch either.
"""


class PlateGeometryError(Exception):
    """Base class for all plategeometry errors."""


class PluginNotFoundError(PlateGeometryError, KeyError):
    """Raised when a coordinate system name is not registered."""

    def __init__(self, name: str, number_of_factories: int):
        self.name = name
        self.number_of_factories = number_of_factories
        super().__init__(
            f"Plugin with name '{name}' is not found. "
            f"The size of factories is {number_of_factories}."
        )

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0])


class PolygonError(PlateGeometryError, ValueError):
    """Raised when a polygon has too few points to enclose an area."""


class SurfaceShapeError(PlateGeometryError, ValueError):
    """Raised when section/segment tables do not describe a valid surface."""


class DimensionError(PlateGeometryError, ValueError):
    """Raised on 2D/3D mismatches between points, operations or models."""


class ConversionError(PlateGeometryError, ValueError):
    """Raised when a string can not be converted to the requested type."""
