"""
Tolerances for the geometric queries and console logging setup.
"""

import logging
import sys
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeometryConfig:
    """Numeric tolerances for the curved-plane queries."""

    straight_segment_tolerance: float = 1e-8
    zero_length_tolerance: float = 1e-14
    coincident_point_tolerance: float = 1e-12
    angle_tolerance: float = 1e-12
    log_level: str = "WARNING"


DEFAULT_CONFIG = GeometryConfig()


def setup_logging(level: str = DEFAULT_CONFIG.log_level) -> None:
    """
    Configure console logging for applications embedding plategeometry.

    The library itself never installs handlers; call this once from the
    application entry point.

    Args:
        level: Name of a logging level, e.g. "DEBUG" or "WARNING"

    Raises:
        ValueError: If level is not a known logging level name
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    # Create formatter
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    # Create console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)

    # Configure the root logger so all modules inherit the configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.addHandler(console_handler)

    # Shapely's GEOS bindings are chatty at DEBUG
    logging.getLogger("shapely").setLevel(logging.WARNING)
    logger.debug(f"Logging configured at level {level.upper()}")
