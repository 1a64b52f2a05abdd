"""Camera framing for globe viewers."""

from .utils import (
    ensure_4x4_matrix,
    invert_transform,
    compute_tan_half_fov,
    range_to_fit_width,
)
from .offset import offset_from_heading_pitch_range, zero_to_two_pi
from .framing import frame_region, compute_view_basis, clamp_below_surface
from .projection import build_perspective_projection_matrix
from .lookat import build_pose_matrix, build_view_matrix
from .config import make_pose_from_config

__all__ = [
    "ensure_4x4_matrix",
    "invert_transform",
    "compute_tan_half_fov",
    "range_to_fit_width",
    "offset_from_heading_pitch_range",
    "zero_to_two_pi",
    "frame_region",
    "compute_view_basis",
    "clamp_below_surface",
    "build_perspective_projection_matrix",
    "build_pose_matrix",
    "build_view_matrix",
    "make_pose_from_config",
]
