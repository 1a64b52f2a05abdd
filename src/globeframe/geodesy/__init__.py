"""Geodesy primitives: ellipsoid, rectangles and local frames."""

from .ellipsoid import Ellipsoid
from .rectangle import (
    Rectangle,
    surface_distance_along_latitude,
    rectangle_outline_positions,
)
from .frames import LocalFrame

__all__ = [
    "Ellipsoid",
    "Rectangle",
    "surface_distance_along_latitude",
    "rectangle_outline_positions",
    "LocalFrame",
]
