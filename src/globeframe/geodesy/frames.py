"""Local east/north/up tangent frames."""

from __future__ import annotations
from typing import Optional
from dataclasses import dataclass
import numpy as np

from .ellipsoid import Ellipsoid
from ..utils.conversion import to_vector3, normalize

# Below this |x| and |y| the origin sits on the polar axis and east is undefined.
POLAR_AXIS_EPSILON = 1e-14


@dataclass(frozen=True, eq=False)
class LocalFrame:
    """
    Orthonormal east/north/up basis anchored at an ECEF origin.

    Attributes:
        origin: (3,) ECEF anchor point
        east, north, up: (3,) Unit axes in ECEF coordinates
    """
    origin: np.ndarray
    east: np.ndarray
    north: np.ndarray
    up: np.ndarray

    @classmethod
    def east_north_up(
        cls,
        origin,
        ellipsoid: Optional[Ellipsoid] = None
    ) -> 'LocalFrame':
        """
        Build the east/north/up frame at an ECEF point.

        Up is the geodetic surface normal through the origin, east is
        tangent to the parallel and north completes the right-handed
        basis. On the polar axis east is fixed to +Y.

        Args:
            origin: (3,) ECEF anchor point
            ellipsoid: Reference ellipsoid (default WGS84)

        Returns:
            LocalFrame anchored at origin
        """
        if ellipsoid is None:
            ellipsoid = Ellipsoid()

        origin = to_vector3(origin)
        x, y, z = origin

        if abs(x) < POLAR_AXIS_EPSILON and abs(y) < POLAR_AXIS_EPSILON:
            sign = 1.0 if z >= 0.0 else -1.0
            up = np.array([0.0, 0.0, sign])
            east = np.array([0.0, 1.0, 0.0])
            north = np.array([-sign, 0.0, 0.0])
        else:
            up = ellipsoid.geodetic_surface_normal(origin)
            east = normalize(np.array([-y, x, 0.0]))
            north = np.cross(up, east)

        return cls(origin=origin, east=east, north=north, up=up)

    @property
    def rotation(self) -> np.ndarray:
        """(3, 3) local-to-world rotation; columns are east, north, up."""
        return np.stack([self.east, self.north, self.up], axis=1)

    @property
    def matrix(self) -> np.ndarray:
        """(4, 4) local-to-world transform (rotation + translation)."""
        M = np.eye(4, dtype=np.float64)
        M[:3, :3] = self.rotation
        M[:3, 3] = self.origin
        return M

    def multiply_by_point(self, local_point) -> np.ndarray:
        """Map a local-frame point to world space (rotate, then translate)."""
        return self.rotation @ to_vector3(local_point) + self.origin

    def multiply_by_point_as_vector(self, local_vector) -> np.ndarray:
        """Map a local-frame direction to world space (rotation only)."""
        return self.rotation @ to_vector3(local_vector)
