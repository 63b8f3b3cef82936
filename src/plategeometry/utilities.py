"""
Small conversion and interpolation helpers.
"""

from typing import Tuple

from .errors import ConversionError
from .point import CoordinateSystemType, Point


def string_to_double(string: str) -> float:
    """
    Convert a string to a float, tolerating surrounding whitespace.

    Raises:
        ConversionError: If the string is not a complete number
    """
    try:
        return float(string.strip())
    except ValueError as e:
        raise ConversionError(
            f'Conversion of "{string}" to double failed (bad cast): {e}'
        ) from e


def string_to_int(string: str) -> int:
    """
    Convert a string to an int, tolerating surrounding whitespace.

    Raises:
        ConversionError: If the string is not a complete integer
    """
    try:
        return int(string.strip())
    except ValueError as e:
        raise ConversionError(
            f'Conversion of "{string}" to int failed (bad cast): {e}'
        ) from e


def string_to_unsigned_int(string: str) -> int:
    """
    Convert a string to a non-negative int.

    Raises:
        ConversionError: If the string is not a complete non-negative integer
    """
    try:
        value = int(string.strip())
    except ValueError as e:
        raise ConversionError(
            f'Conversion of "{string}" to unsigned int failed (bad cast): {e}'
        ) from e
    if value < 0:
        raise ConversionError(
            f'Conversion of "{string}" to unsigned int failed (bad cast): '
            f"value is negative"
        )
    return value


def string_to_coordinate_system(string: str) -> CoordinateSystemType:
    try:
        return CoordinateSystemType(string.strip().lower())
    except ValueError as e:
        raise ConversionError("Coordinate system not implemented.") from e


def convert_point_to_array(point: Point) -> Tuple[float, ...]:
    return point.get_array()


def interpolate(start: float, end: float, fraction: float) -> float:
    """Linear interpolation; fraction 0 gives start, 1 gives end."""
    return start + fraction * (end - start)
