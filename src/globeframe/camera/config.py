"""Camera configuration parser."""

from __future__ import annotations
from typing import Dict, Any
import math

from .framing import frame_region
from .lookat import build_view_matrix
from .projection import build_perspective_projection_matrix
from ..core.config import FramingConfig, ViewportConfig
from ..core.types import GeographicRegion
from ..geodesy.ellipsoid import Ellipsoid
from ..geodesy.rectangle import Rectangle, rectangle_outline_positions
from ..terrain.exaggeration import region_floor_height


def make_pose_from_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """
    Frame a region described by a configuration mapping.

    This is the main entry point for turning a region description,
    typically loaded from a YAML config file, into everything a viewer
    needs to fly to it.

    Args:
        cfg: Configuration mapping with keys:
            Required:
                - region: Region description (see GeographicRegion.from_dict)
            Optional:
                - viewport: aspect_ratio (or width/height), fov or fov_deg,
                  znear, zfar
                - framing: offset_ratio, pitch or pitch_deg,
                  singularity_epsilon, fallback_height, ellipsoid
                - view: heading_deg, pitch_deg (override framing.pitch)

    Returns:
        Dictionary with:
            - pose: CameraPose
            - view_matrix (4x4): World-to-camera transform
            - proj_matrix (4x4): Perspective projection
            - outline (4, 3): Region corners at the floor height (NW, NE, SE, SW)
            - fly_to: Viewer fly-to request (JSON friendly)

    Example:
        >>> config = {
        ...     "region": {
        ...         "rectangle": {"west": -106.7, "south": 46.5,
        ...                       "east": -101.2, "north": 49.2},
        ...         "minimum_terrain_height": -9006.2,
        ...         "terrain_exaggeration": 8.0,
        ...         "terrain_exaggeration_relative_height": -100000,
        ...     },
        ...     "viewport": {"width": 1280, "height": 720, "fov_deg": 60},
        ... }
        >>> result = make_pose_from_config(config)
    """
    if "region" not in cfg:
        raise ValueError("Missing required config section: region")

    region = GeographicRegion.from_dict(cfg["region"])
    viewport = ViewportConfig.from_dict(cfg.get("viewport") or {})
    framing = FramingConfig.from_dict(cfg.get("framing") or {})

    view_cfg = cfg.get("view") or {}
    heading = math.radians(float(view_cfg.get("heading_deg", 0.0)))
    pitch = None
    if view_cfg.get("pitch_deg") is not None:
        pitch = math.radians(float(view_cfg["pitch_deg"]))

    ellipsoid = Ellipsoid(framing.ellipsoid)

    pose = frame_region(
        region,
        heading=heading,
        pitch=pitch,
        aspect_ratio=viewport.aspect_ratio,
        fov=viewport.fov,
        config=framing,
        ellipsoid=ellipsoid,
    )

    rectangle = Rectangle.from_degrees(region.west, region.south, region.east, region.north)
    outline = rectangle_outline_positions(rectangle, region_floor_height(region), ellipsoid)

    return {
        "pose": pose,
        "view_matrix": build_view_matrix(pose),
        "proj_matrix": build_perspective_projection_matrix(
            viewport.fov, viewport.aspect_ratio, viewport.znear, viewport.zfar
        ),
        "outline": outline,
        "fly_to": pose.to_fly_to_options(),
    }
