"""
globeframe - Camera framing for 3D globe viewers

Computes the camera pose (position, direction, up, maximum flight height)
that frames a rectangular geographic region from a requested heading and
pitch, with the region's floor expressed in exaggerated terrain heights.

Components:
    - Core: Region, offset and pose types; framing and viewport configuration
    - Terrain: Vertical exaggeration of heights
    - Geodesy: Ellipsoid conversions, rectangles, local east/north/up frames
    - Camera: Heading/pitch/range offsets, range fitting, framing, matrices
    - Utils: Validation, conversion and debug helpers

Example:
    >>> import math
    >>> from globeframe import GeographicRegion, frame_region
    >>>
    >>> region = GeographicRegion(
    ...     west=-106.708205618, south=46.474605807,
    ...     east=-101.199005618, north=49.156605807,
    ...     minimum_height=-9006.2236328125, exaggeration=8.0,
    ...     relative_height=-100000.0,
    ... )
    >>> pose = frame_region(region, heading=0.0, pitch=math.radians(-15),
    ...                     aspect_ratio=16 / 9, fov=math.radians(60))
    >>> pose.to_fly_to_options()
"""

__version__ = "1.0.0"

# Core
from .core import (
    FramingConfig,
    ViewportConfig,
    GeographicRegion,
    HeadingPitchRange,
    CameraPose,
)

# Terrain
from .terrain import (
    exaggerated_height,
    region_floor_height,
    region_ceiling_height,
)

# Geodesy
from .geodesy import (
    Ellipsoid,
    Rectangle,
    LocalFrame,
    surface_distance_along_latitude,
    rectangle_outline_positions,
)

# Camera
from .camera import (
    frame_region,
    offset_from_heading_pitch_range,
    range_to_fit_width,
    compute_tan_half_fov,
    build_pose_matrix,
    build_view_matrix,
    build_perspective_projection_matrix,
    make_pose_from_config,
)

# Utils
from .utils import (
    debug_print,
    is_debug_enabled,
)

__all__ = [
    "__version__",

    # Core
    "FramingConfig",
    "ViewportConfig",
    "GeographicRegion",
    "HeadingPitchRange",
    "CameraPose",

    # Terrain
    "exaggerated_height",
    "region_floor_height",
    "region_ceiling_height",

    # Geodesy
    "Ellipsoid",
    "Rectangle",
    "LocalFrame",
    "surface_distance_along_latitude",
    "rectangle_outline_positions",

    # Camera
    "frame_region",
    "offset_from_heading_pitch_range",
    "range_to_fit_width",
    "compute_tan_half_fov",
    "build_pose_matrix",
    "build_view_matrix",
    "build_perspective_projection_matrix",
    "make_pose_from_config",

    # Utils
    "debug_print",
    "is_debug_enabled",
]
