"""Value types passed between the framing stages."""

from __future__ import annotations
from typing import Dict, Any
from dataclasses import dataclass
import numpy as np

from ..utils.conversion import to_float_list
from ..utils.validation import (
    validate_region_bounds,
    validate_heights,
    validate_non_negative,
)


@dataclass(frozen=True)
class GeographicRegion:
    """
    Rectangular region to frame, with its terrain display scaling.

    Attributes:
        west, south, east, north: Boundary angles (degrees)
        minimum_height: Lowest raw terrain elevation inside the region (m)
        maximum_height: Highest raw terrain elevation inside the region (m)
        exaggeration: Vertical exaggeration factor of the displayed terrain
        relative_height: Height the exaggeration is anchored to (m)

    Raises:
        ValueError: On inverted bounds or non-finite values
    """
    west: float
    south: float
    east: float
    north: float
    minimum_height: float = 0.0
    maximum_height: float = 0.0
    exaggeration: float = 1.0
    relative_height: float = 0.0

    def __post_init__(self):
        validate_region_bounds(self.west, self.south, self.east, self.north)
        validate_heights(
            minimum_height=self.minimum_height,
            maximum_height=self.maximum_height,
            exaggeration=self.exaggeration,
            relative_height=self.relative_height,
        )

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> 'GeographicRegion':
        """
        Create GeographicRegion from a region description.

        Expected layout:
            rectangle: {west, south, east, north}
            minimum_terrain_height, maximum_terrain_height,
            terrain_exaggeration, terrain_exaggeration_relative_height
        """
        rect = cfg['rectangle']
        return cls(
            west=float(rect['west']),
            south=float(rect['south']),
            east=float(rect['east']),
            north=float(rect['north']),
            minimum_height=float(cfg.get('minimum_terrain_height', 0.0)),
            maximum_height=float(cfg.get('maximum_terrain_height', 0.0)),
            exaggeration=float(cfg.get('terrain_exaggeration', 1.0)),
            relative_height=float(cfg.get('terrain_exaggeration_relative_height', 0.0)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the layout accepted by from_dict."""
        return {
            'rectangle': {
                'west': self.west,
                'south': self.south,
                'east': self.east,
                'north': self.north,
            },
            'minimum_terrain_height': self.minimum_height,
            'maximum_terrain_height': self.maximum_height,
            'terrain_exaggeration': self.exaggeration,
            'terrain_exaggeration_relative_height': self.relative_height,
        }


@dataclass(frozen=True)
class HeadingPitchRange:
    """Spherical offset from a target: heading, pitch (radians) and range (m)."""
    heading: float = 0.0
    pitch: float = 0.0
    range: float = 0.0

    def __post_init__(self):
        validate_non_negative("range", self.range)


@dataclass(frozen=True, eq=False)
class CameraPose:
    """
    Camera placement produced by frame_region.

    Attributes:
        position: (3,) Earth-fixed camera position (m)
        direction: (3,) Unit view direction
        up: (3,) Unit up vector, orthogonal to direction
        right: (3,) Unit vector direction x up
        maximum_height: Altitude the viewer's flight must not exceed (m)
        height: Geodetic height of position (m)
        range: Distance used to fit the region in the frustum (m)
        clamped: True if the candidate position was at or above the
            surface and was moved to the fallback height
    """
    position: np.ndarray
    direction: np.ndarray
    up: np.ndarray
    right: np.ndarray
    maximum_height: float
    height: float
    range: float
    clamped: bool = False

    def to_fly_to_options(self) -> Dict[str, Any]:
        """Describe the pose as a viewer fly-to request (JSON friendly)."""
        return {
            'destination': to_float_list(self.position),
            'orientation': {
                'direction': to_float_list(self.direction),
                'up': to_float_list(self.up),
            },
            'maximum_height': float(self.maximum_height),
        }
