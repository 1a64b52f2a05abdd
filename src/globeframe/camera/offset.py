"""Heading/pitch/range to local-frame offset."""

from __future__ import annotations
import math
import numpy as np
from scipy.spatial.transform import Rotation

UNIT_X = np.array([1.0, 0.0, 0.0])
UNIT_Y = np.array([0.0, 1.0, 0.0])
UNIT_Z = np.array([0.0, 0.0, 1.0])

TWO_PI = 2.0 * math.pi
PI_OVER_TWO = 0.5 * math.pi


def zero_to_two_pi(angle: float) -> float:
    """Wrap an angle into [0, 2*pi)."""
    wrapped = math.fmod(angle, TWO_PI)
    if wrapped < 0.0:
        wrapped += TWO_PI
    # fmod of a tiny negative angle can round up to exactly 2*pi
    if wrapped >= TWO_PI:
        wrapped = 0.0
    return wrapped


def axis_angle(axis: np.ndarray, angle: float) -> Rotation:
    """Rotation of `angle` radians about a unit axis."""
    return Rotation.from_rotvec(np.asarray(axis, dtype=np.float64) * angle)


def offset_from_heading_pitch_range(
    heading: float,
    pitch: float,
    range: float
) -> np.ndarray:
    """
    Convert a heading/pitch/range offset to a vector in local east/north/up axes.

    The returned vector points from the target to the camera. Heading 0
    places the camera south of the target looking north; negative pitch
    places it above the target looking down.

    Args:
        heading: Azimuth of the view, clockwise from north (radians, any value)
        pitch: Elevation of the view (radians, clamped to [-pi/2, pi/2])
        range: Distance from target to camera (m)

    Returns:
        (3,) float64 offset in local frame coordinates, |offset| == range
    """
    pitch = min(max(pitch, -PI_OVER_TWO), PI_OVER_TWO)
    heading = zero_to_two_pi(heading) - PI_OVER_TWO

    pitch_rot = axis_angle(UNIT_Y, -pitch)
    heading_rot = axis_angle(UNIT_Z, -heading)

    # pitch is applied first, then heading
    rotation = heading_rot * pitch_rot

    offset = rotation.apply(UNIT_X)
    return -offset * range
