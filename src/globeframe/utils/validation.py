"""Input validation utilities."""

from __future__ import annotations
import math


def _require_finite(**values):
    for name, value in values.items():
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value}")


def validate_region_bounds(
    west: float,
    south: float,
    east: float,
    north: float
):
    """
    Validate geographic rectangle bounds (degrees).

    Args:
        west, south, east, north: Boundary angles in degrees

    Raises:
        ValueError: If a bound is non-finite, the rectangle is empty or
            inverted, a longitude lies outside [-180, 180], the span wraps
            the whole globe, or a latitude lies outside [-90, 90]
    """
    _require_finite(west=west, south=south, east=east, north=north)

    if west < -180.0 or east > 180.0:
        raise ValueError(f"Longitudes must lie in [-180, 180], got [{west}, {east}]")

    if west >= east:
        raise ValueError(f"west ({west}) must be less than east ({east})")

    if east - west >= 360.0:
        raise ValueError(f"Longitude span must be less than 360 degrees, got {east - west}")

    if south >= north:
        raise ValueError(f"south ({south}) must be less than north ({north})")

    if south < -90.0 or north > 90.0:
        raise ValueError(f"Latitudes must lie in [-90, 90], got [{south}, {north}]")


def validate_heights(**heights):
    """
    Validate elevation values.

    Raises:
        ValueError: If any value is NaN or Inf
    """
    _require_finite(**heights)


def validate_viewport(aspect_ratio: float, fov: float):
    """
    Validate viewport parameters.

    Args:
        aspect_ratio: Viewport width / height
        fov: Field of view (radians)

    Raises:
        ValueError: If aspect_ratio <= 0 or fov is outside (0, pi)
    """
    _require_finite(aspect_ratio=aspect_ratio, fov=fov)

    if aspect_ratio <= 0.0:
        raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")

    if not 0.0 < fov < math.pi:
        raise ValueError(f"fov must lie in (0, pi), got {fov}")


def validate_non_negative(name: str, value: float):
    """Raise ValueError unless value is finite and >= 0."""
    _require_finite(**{name: value})
    if value < 0.0:
        raise ValueError(f"{name} must be non-negative, got {value}")
