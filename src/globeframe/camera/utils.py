"""Camera matrix and frustum utilities."""

from __future__ import annotations
from typing import Tuple
import math
import numpy as np

from ..utils.validation import validate_viewport, validate_non_negative


def ensure_4x4_matrix(m) -> np.ndarray:
    """
    Convert input to 4x4 numpy array.

    Args:
        m: Input matrix (4x4 array or flat list of 16 floats)

    Returns:
        4x4 float64 numpy array

    Raises:
        ValueError: If input cannot be reshaped to 4x4
    """
    M = np.asarray(m, dtype=np.float64)

    if M.shape == (16,):
        M = M.reshape(4, 4)

    if M.shape != (4, 4):
        raise ValueError(
            f"Expected 4x4 matrix or flat length-16 array, got shape {M.shape}"
        )

    return M


def invert_transform(m: np.ndarray) -> np.ndarray:
    """
    Invert a rigid 4x4 transform (rotation + translation).

    Args:
        m: 4x4 transformation matrix with orthonormal rotation block

    Returns:
        Inverted 4x4 matrix (float64)
    """
    M = ensure_4x4_matrix(m)
    R = M[:3, :3]
    t = M[:3, 3]

    inv = np.eye(4, dtype=np.float64)
    inv[:3, :3] = R.T
    inv[:3, 3] = -R.T @ t
    return inv


def compute_tan_half_fov(fov: float, aspect_ratio: float) -> Tuple[float, float]:
    """
    Compute tangent of half the horizontal and vertical FOV.

    The field of view applies to the larger viewport side:
        aspect <= 1:  tan(FOVy/2) = tan(fov/2)
        aspect >  1:  tan(FOVy/2) = tan(fov/2) / aspect
    and tan(FOVx/2) = aspect * tan(FOVy/2).

    Args:
        fov: Field of view (radians)
        aspect_ratio: Viewport width / height

    Returns:
        (tanfovx, tanfovy)
    """
    validate_viewport(aspect_ratio, fov)

    tan_half = math.tan(0.5 * fov)
    tanfovy = tan_half if aspect_ratio <= 1.0 else tan_half / aspect_ratio
    tanfovx = aspect_ratio * tanfovy
    return tanfovx, tanfovy


def range_to_fit_width(
    surface_distance: float,
    aspect_ratio: float,
    fov: float,
    offset_ratio: float = 0.2
) -> float:
    """
    Distance at which a region of the given width fills the frustum.

        frustum_width  = d * (1 + offset_ratio)
        frustum_height = frustum_width / aspect_ratio
        range          = frustum_height / tan(fov / 2) / 2

    Args:
        surface_distance: East-west surface width of the region (m)
        aspect_ratio: Viewport width / height
        fov: Field of view (radians)
        offset_ratio: Margin around the region (0.2 = 20%)

    Returns:
        Camera range (m)
    """
    validate_non_negative("surface_distance", surface_distance)
    validate_viewport(aspect_ratio, fov)

    frustum_width = surface_distance * (1.0 + offset_ratio)
    frustum_height = frustum_width / aspect_ratio
    return frustum_height / math.tan(0.5 * fov) / 2.0
