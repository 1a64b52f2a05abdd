"""Camera framing of a geographic region."""

from __future__ import annotations
from typing import Optional, Tuple
import numpy as np

from .offset import offset_from_heading_pitch_range, axis_angle, UNIT_Z
from .utils import range_to_fit_width
from ..core.config import FramingConfig, DEFAULT_ASPECT_RATIO, DEFAULT_FOV
from ..core.types import CameraPose, GeographicRegion, HeadingPitchRange
from ..geodesy.ellipsoid import Ellipsoid
from ..geodesy.frames import LocalFrame
from ..geodesy.rectangle import Rectangle, surface_distance_along_latitude
from ..terrain.exaggeration import region_floor_height
from ..utils.conversion import normalize
from ..utils.debug import debug_print, debug_vector_info
from ..utils.validation import validate_viewport


def compute_view_basis(
    frame: LocalFrame,
    position: np.ndarray,
    target: np.ndarray,
    heading: float,
    singularity_epsilon: float = 1e-6
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, bool]:
    """
    Orthonormal view basis for a camera at `position` looking at `target`.

    The provisional up vector is the frame's vertical axis. When the view
    direction is within `singularity_epsilon` of that axis, the frame's
    north axis rotated about the view direction by `heading` is used
    instead.

    Args:
        frame: Local east/north/up frame at the target
        position: (3,) Camera position
        target: (3,) Point looked at
        heading: Requested heading (radians)
        singularity_epsilon: Threshold on 1 - |dot(direction, up)|

    Returns:
        (direction, up, right, corrected) where the three vectors are
        unit length and mutually orthogonal, and `corrected` tells
        whether the singular case was hit
    """
    direction = normalize(target - position)
    up = frame.multiply_by_point_as_vector(UNIT_Z)

    corrected = 1.0 - abs(float(np.dot(direction, up))) < singularity_epsilon
    if corrected:
        up = axis_angle(direction, heading).apply(frame.north)
        debug_print("[Framing] View along local vertical, up taken from north axis")

    right = normalize(np.cross(direction, up))
    up = normalize(np.cross(right, direction))

    return direction, up, right, corrected


def clamp_below_surface(
    position: np.ndarray,
    ellipsoid: Ellipsoid,
    fallback_height: float = -100.0
) -> Tuple[np.ndarray, float, float, bool]:
    """
    Keep a candidate camera position below the ellipsoid surface.

    If the candidate's geodetic height is >= 0 it is moved to
    `fallback_height` at the same longitude/latitude and a warning is
    printed.

    Args:
        position: (3,) Candidate ECEF position
        ellipsoid: Reference ellipsoid
        fallback_height: Height used for relocated positions (m)

    Returns:
        (position, height, candidate_height, clamped)
    """
    longitude, latitude, candidate_height = ellipsoid.cartesian_to_cartographic(position)

    if candidate_height >= 0.0:
        print(
            f"[Warning] Camera height {candidate_height:.3f} m is not below the surface, "
            f"moving camera to {fallback_height:.3f} m"
        )
        relocated = ellipsoid.cartographic_to_cartesian(longitude, latitude, fallback_height)
        return relocated, fallback_height, candidate_height, True

    return position, candidate_height, candidate_height, False


def frame_region(
    region: GeographicRegion,
    heading: float = 0.0,
    pitch: Optional[float] = None,
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
    fov: float = DEFAULT_FOV,
    config: Optional[FramingConfig] = None,
    ellipsoid: Optional[Ellipsoid] = None
) -> CameraPose:
    """
    Compute a camera pose that frames a region from a heading and pitch.

    The range is chosen so that the region's east-west extent plus the
    configured margin spans the frustum. The camera looks at the center
    of the region's floor, expressed in exaggerated display heights.

    Args:
        region: Region to frame
        heading: View heading, clockwise from north (radians)
        pitch: View pitch (radians); config.pitch when None
        aspect_ratio: Viewport width / height
        fov: Field of view (radians)
        config: Framing constants (defaults when None)
        ellipsoid: Reference ellipsoid; built from config.ellipsoid when None

    Returns:
        CameraPose of the framed view

    Raises:
        ValueError: If aspect_ratio or fov are out of range, or the region
            has no measurable east-west width
    """
    if config is None:
        config = FramingConfig()
    if ellipsoid is None:
        ellipsoid = Ellipsoid(config.ellipsoid)
    if pitch is None:
        pitch = config.pitch

    validate_viewport(aspect_ratio, fov)

    floor_height = region_floor_height(region)

    rectangle = Rectangle.from_degrees(region.west, region.south, region.east, region.north)
    center_lon, center_lat = rectangle.center()
    surface_distance = surface_distance_along_latitude(rectangle, center_lat, ellipsoid)

    if rectangle.width >= 2.0 * np.pi or not surface_distance > 0.0:
        raise ValueError(
            f"Region has no east-west extent to frame "
            f"(span {np.degrees(rectangle.width):.6f} deg, width {surface_distance} m)"
        )

    distance = range_to_fit_width(surface_distance, aspect_ratio, fov, config.offset_ratio)
    hpr = HeadingPitchRange(heading=heading, pitch=pitch, range=distance)

    debug_print(
        f"[Framing] floor={floor_height:.3f} m width={surface_distance:.3f} m "
        f"range={distance:.3f} m"
    )

    offset = offset_from_heading_pitch_range(hpr.heading, hpr.pitch, hpr.range)

    target = ellipsoid.cartographic_to_cartesian(center_lon, center_lat, floor_height)
    frame = LocalFrame.east_north_up(target, ellipsoid)

    candidate = frame.multiply_by_point(offset)

    direction, up, right, _ = compute_view_basis(
        frame, candidate, target, hpr.heading, config.singularity_epsilon
    )
    debug_vector_info("direction", direction)
    debug_vector_info("up", up)

    position, height, candidate_height, clamped = clamp_below_surface(
        candidate, ellipsoid, config.fallback_height
    )

    return CameraPose(
        position=position,
        direction=direction,
        up=up,
        right=right,
        maximum_height=candidate_height,
        height=height,
        range=distance,
        clamped=clamped,
    )
