"""Projection matrix construction."""

from __future__ import annotations
import numpy as np

from .utils import compute_tan_half_fov


def build_perspective_projection_matrix(
    fov: float,
    aspect_ratio: float,
    znear: float,
    zfar: float
) -> np.ndarray:
    """
    Build a symmetric perspective projection matrix from a field of view.

    Uses the same camera convention as build_pose_matrix (+Z forward,
    +Y down) and produces clip.w = z_cam > 0 for points in front of the
    camera.

    Args:
        fov: Field of view of the larger viewport side (radians)
        aspect_ratio: Viewport width / height
        znear, zfar: Near and far clipping planes (m)

    Returns:
        4x4 projection matrix (row-major, float64)

    Notes:
        - Depth encoding: z_ndc = (z_cam * zfar) / (z_cam * (zfar - znear) + znear * zfar)
    """
    if not 0.0 < znear < zfar:
        raise ValueError(f"Expected 0 < znear < zfar, got znear={znear}, zfar={zfar}")

    tanfovx, tanfovy = compute_tan_half_fov(fov, aspect_ratio)

    P = np.zeros((4, 4), dtype=np.float64)

    P[0, 0] = 1.0 / tanfovx
    P[1, 1] = 1.0 / tanfovy

    P[2, 2] = zfar / (zfar - znear)
    P[2, 3] = (-znear * zfar) / (zfar - znear)

    # Perspective division: clip.w = z_cam
    P[3, 2] = 1.0

    return P
