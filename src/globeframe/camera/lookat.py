"""Camera-to-world transform of a framed pose."""

from __future__ import annotations
from typing import TYPE_CHECKING
import numpy as np

from .utils import invert_transform

if TYPE_CHECKING:
    from ..core.types import CameraPose


def build_pose_matrix(pose: "CameraPose") -> np.ndarray:
    """
    Build camera-to-world (c2w) matrix from a CameraPose.

    Uses an OpenCV-style camera coordinate system:
        +Z = forward (pose.direction)
        +X = right
        +Y = down (-pose.up)

    The output matrix columns are [right, down, forward, position].

    Args:
        pose: Framed camera pose (direction and up orthonormal)

    Returns:
        c2w: (4,4) camera-to-world transformation matrix (float64)
    """
    forward = np.asarray(pose.direction, dtype=np.float64)
    up = np.asarray(pose.up, dtype=np.float64)

    # right-handed: right x down = forward
    right = np.cross(forward, up)
    down = np.cross(forward, right)

    R = np.stack([right, down, forward], axis=1)

    c2w = np.eye(4, dtype=np.float64)
    c2w[:3, :3] = R
    c2w[:3, 3] = pose.position

    return c2w


def build_view_matrix(pose: "CameraPose") -> np.ndarray:
    """World-to-camera (w2c) matrix of a CameraPose."""
    return invert_transform(build_pose_matrix(pose))
