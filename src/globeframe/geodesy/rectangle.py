"""Geographic rectangles and surface distances."""

from __future__ import annotations
from typing import Optional, Tuple
from dataclasses import dataclass
import math
import numpy as np

from .ellipsoid import Ellipsoid


@dataclass(frozen=True)
class Rectangle:
    """Geographic rectangle in radians (west < east, south < north)."""
    west: float
    south: float
    east: float
    north: float

    @classmethod
    def from_degrees(
        cls,
        west: float,
        south: float,
        east: float,
        north: float
    ) -> 'Rectangle':
        """Create a Rectangle from boundary angles in degrees."""
        return cls(
            west=math.radians(west),
            south=math.radians(south),
            east=math.radians(east),
            north=math.radians(north),
        )

    @property
    def width(self) -> float:
        """Angular east-west extent (radians)."""
        return self.east - self.west

    @property
    def height(self) -> float:
        """Angular north-south extent (radians)."""
        return self.north - self.south

    def center(self) -> Tuple[float, float]:
        """Geographic midpoint as (longitude, latitude) in radians."""
        return 0.5 * (self.west + self.east), 0.5 * (self.south + self.north)


def surface_distance_along_latitude(
    rectangle: Rectangle,
    latitude: Optional[float] = None,
    ellipsoid: Optional[Ellipsoid] = None
) -> float:
    """
    Geodesic distance between the west and east edges at one latitude.

    Args:
        rectangle: Rectangle to measure
        latitude: Latitude of both endpoints (radians). Defaults to the
            rectangle's center latitude.
        ellipsoid: Reference ellipsoid (default WGS84)

    Returns:
        Shortest surface distance between (west, latitude) and
        (east, latitude) on the ellipsoid (m)
    """
    if ellipsoid is None:
        ellipsoid = Ellipsoid()
    if latitude is None:
        latitude = rectangle.center()[1]

    lat = math.degrees(latitude)
    _, _, distance = ellipsoid.geod.inv(
        math.degrees(rectangle.west), lat,
        math.degrees(rectangle.east), lat,
    )
    return float(distance)


def rectangle_outline_positions(
    rectangle: Rectangle,
    height: float,
    ellipsoid: Optional[Ellipsoid] = None
) -> np.ndarray:
    """
    Corner points of the rectangle at a constant height.

    Args:
        rectangle: Rectangle to outline
        height: Height of every corner above the ellipsoid (m)
        ellipsoid: Reference ellipsoid (default WGS84)

    Returns:
        (4, 3) ECEF positions ordered NW, NE, SE, SW
    """
    if ellipsoid is None:
        ellipsoid = Ellipsoid()

    corners = [
        (rectangle.west, rectangle.north),
        (rectangle.east, rectangle.north),
        (rectangle.east, rectangle.south),
        (rectangle.west, rectangle.south),
    ]
    return np.stack([
        ellipsoid.cartographic_to_cartesian(lon, lat, height)
        for lon, lat in corners
    ])
