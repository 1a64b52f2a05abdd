"""Reference ellipsoid: geodetic <-> Earth-fixed Cartesian conversions."""

from __future__ import annotations
from typing import Tuple
import numpy as np
from pyproj import Geod, Transformer

from ..utils.conversion import to_vector3, normalize


class Ellipsoid:
    """
    Reference ellipsoid backed by PROJ.

    Angles are in radians and heights in metres above the ellipsoid.
    Cartesian coordinates are Earth-centred, Earth-fixed (ECEF) metres.

    Args:
        name: PROJ ellipsoid name (e.g. 'WGS84', 'GRS80')
    """

    def __init__(self, name: str = "WGS84"):
        self.name = name
        self.geod = Geod(ellps=name)

        a = float(self.geod.a)
        b = float(self.geod.b)
        self.radii = np.array([a, a, b], dtype=np.float64)
        self.one_over_radii_squared = 1.0 / (self.radii * self.radii)

        geodetic = {"proj": "latlong", "ellps": name}
        geocentric = {"proj": "geocent", "ellps": name, "units": "m"}
        self._to_cartesian = Transformer.from_crs(geodetic, geocentric, always_xy=True)
        self._to_cartographic = Transformer.from_crs(geocentric, geodetic, always_xy=True)

    def __repr__(self) -> str:
        return f"Ellipsoid({self.name!r})"

    def cartographic_to_cartesian(
        self,
        longitude: float,
        latitude: float,
        height: float = 0.0
    ) -> np.ndarray:
        """
        Convert geodetic coordinates to an ECEF point.

        Args:
            longitude, latitude: Geodetic angles (radians)
            height: Height above the ellipsoid (m)

        Returns:
            (3,) float64 ECEF position
        """
        x, y, z = self._to_cartesian.transform(
            float(longitude), float(latitude), float(height), radians=True
        )
        return np.array([x, y, z], dtype=np.float64)

    def cartesian_to_cartographic(self, point) -> Tuple[float, float, float]:
        """
        Convert an ECEF point to geodetic coordinates.

        Args:
            point: (3,) ECEF position (m)

        Returns:
            (longitude, latitude, height) with angles in radians
        """
        x, y, z = to_vector3(point)
        lon, lat, h = self._to_cartographic.transform(
            float(x), float(y), float(z), radians=True
        )
        return float(lon), float(lat), float(h)

    def geodetic_surface_normal(self, point) -> np.ndarray:
        """Unit normal of the ellipsoid surface through the given ECEF point."""
        return normalize(to_vector3(point) * self.one_over_radii_squared)
