"""
Tests for framing a region with a camera pose
"""

import math

import numpy as np
import pytest

from globeframe import (
    FramingConfig,
    GeographicRegion,
    LocalFrame,
    Rectangle,
    build_pose_matrix,
    build_view_matrix,
    frame_region,
    region_floor_height,
)
from globeframe.camera import clamp_below_surface, compute_view_basis

ASPECT_RATIO = 16.0 / 9.0
FOV = math.radians(60.0)


def _frame(region, ellipsoid, heading=0.0, pitch=None, **kwargs):
    return frame_region(
        region,
        heading=heading,
        pitch=pitch,
        aspect_ratio=ASPECT_RATIO,
        fov=FOV,
        ellipsoid=ellipsoid,
        **kwargs,
    )


def _target(region, ellipsoid):
    rect = Rectangle.from_degrees(region.west, region.south, region.east, region.north)
    lon, lat = rect.center()
    return ellipsoid.cartographic_to_cartesian(lon, lat, region_floor_height(region))


def _assert_orthonormal(pose):
    assert np.linalg.norm(pose.direction) == pytest.approx(1.0, abs=1e-9)
    assert np.linalg.norm(pose.up) == pytest.approx(1.0, abs=1e-9)
    assert np.linalg.norm(pose.right) == pytest.approx(1.0, abs=1e-9)
    assert abs(np.dot(pose.direction, pose.up)) < 1e-6
    assert abs(np.dot(pose.direction, pose.right)) < 1e-6
    assert abs(np.dot(pose.up, pose.right)) < 1e-6


def test_default_view_of_sample_region(subsurface_region, ellipsoid, capsys):
    """Default pitch keeps the camera below the surface, no clamp"""
    pose = _frame(subsurface_region, ellipsoid)

    assert not pose.clamped
    assert pose.height < 0.0
    assert pose.maximum_height == pose.height
    assert "[Warning]" not in capsys.readouterr().out

    _, _, h = ellipsoid.cartesian_to_cartographic(pose.position)
    assert h == pytest.approx(pose.height, abs=1e-6)
    _assert_orthonormal(pose)


def test_camera_looks_at_region_center(subsurface_region, ellipsoid):
    pose = _frame(subsurface_region, ellipsoid)
    target = _target(subsurface_region, ellipsoid)

    to_target = target - pose.position
    assert np.linalg.norm(to_target) == pytest.approx(pose.range, rel=1e-9)
    np.testing.assert_allclose(pose.direction, to_target / np.linalg.norm(to_target), atol=1e-12)


def test_zero_heading_looks_north(subsurface_region, ellipsoid):
    pose = _frame(subsurface_region, ellipsoid, heading=0.0)
    frame = LocalFrame.east_north_up(_target(subsurface_region, ellipsoid), ellipsoid)

    assert np.dot(pose.direction, frame.north) > 0.9
    assert abs(np.dot(pose.direction, frame.east)) < 1e-9
    assert np.dot(pose.direction, frame.up) < 0.0
    assert np.dot(pose.up, frame.up) > 0.9


def test_default_pitch_comes_from_config(subsurface_region, ellipsoid):
    explicit = _frame(subsurface_region, ellipsoid, pitch=math.radians(-15.0))
    default = _frame(subsurface_region, ellipsoid)
    np.testing.assert_allclose(default.position, explicit.position)

    steeper = _frame(
        subsurface_region, ellipsoid,
        config=FramingConfig(pitch=math.radians(-20.0)),
    )
    assert not np.allclose(steeper.position, default.position)


def test_range_fits_region_width(subsurface_region, ellipsoid):
    narrow = _frame(subsurface_region, ellipsoid)
    wide = _frame(subsurface_region, ellipsoid, config=FramingConfig(offset_ratio=0.5))
    assert wide.range == pytest.approx(narrow.range * 1.5 / 1.2)


def test_high_camera_is_clamped(subsurface_region, ellipsoid, capsys):
    """A steep pitch lifts the camera above ground, so it is pulled down"""
    pose = _frame(subsurface_region, ellipsoid, pitch=math.radians(-45.0))

    assert pose.clamped
    assert pose.height == -100.0
    assert pose.maximum_height >= 0.0
    assert "[Warning]" in capsys.readouterr().out

    _, _, h = ellipsoid.cartesian_to_cartographic(pose.position)
    assert h == pytest.approx(-100.0, abs=1e-4)
    _assert_orthonormal(pose)


def test_fallback_height_is_configurable(subsurface_region, ellipsoid):
    config = FramingConfig(fallback_height=-250.0)
    pose = _frame(subsurface_region, ellipsoid, pitch=math.radians(-60.0), config=config)
    assert pose.clamped
    assert pose.height == -250.0


def test_clamp_keeps_longitude_and_latitude(ellipsoid):
    above = ellipsoid.cartographic_to_cartesian(0.3, 0.6, 1500.0)
    position, height, candidate_height, clamped = clamp_below_surface(above, ellipsoid)

    assert clamped
    assert height == -100.0
    assert candidate_height == pytest.approx(1500.0, abs=1e-4)
    lon, lat, h = ellipsoid.cartesian_to_cartographic(position)
    assert lon == pytest.approx(0.3)
    assert lat == pytest.approx(0.6)


def test_clamp_leaves_subsurface_position(ellipsoid):
    below = ellipsoid.cartographic_to_cartesian(0.3, 0.6, -1.0)
    position, height, _, clamped = clamp_below_surface(below, ellipsoid)

    assert not clamped
    assert position is below
    assert height == pytest.approx(-1.0, abs=1e-4)


def test_straight_down_view_uses_heading_rotated_north(small_region, ellipsoid):
    """Looking along the vertical, up falls back to the rotated north axis"""
    heading = math.radians(30.0)
    pose = _frame(small_region, ellipsoid, heading=heading, pitch=-math.pi / 2)
    frame = LocalFrame.east_north_up(_target(small_region, ellipsoid), ellipsoid)

    assert not pose.clamped
    np.testing.assert_allclose(pose.direction, -frame.up, atol=1e-9)
    _assert_orthonormal(pose)

    # up stays in the horizontal plane, at the heading from north
    assert abs(np.dot(pose.up, frame.up)) < 1e-6
    angle = math.atan2(np.dot(pose.up, frame.east), np.dot(pose.up, frame.north))
    assert abs(abs(angle) - heading) < 1e-6


def test_view_basis_reports_singular_case(ellipsoid):
    origin = ellipsoid.cartographic_to_cartesian(0.2, 0.5, -5000.0)
    frame = LocalFrame.east_north_up(origin, ellipsoid)

    above = origin + 1000.0 * frame.up
    direction, up, right, corrected = compute_view_basis(frame, above, origin, 0.0)
    assert corrected
    np.testing.assert_allclose(up, frame.north, atol=1e-9)

    beside = origin + 1000.0 * frame.east + 10.0 * frame.up
    _, up, _, corrected = compute_view_basis(frame, beside, origin, 0.0)
    assert not corrected
    assert np.dot(up, frame.up) > 0.99


def test_near_pole_region_is_orthonormal(ellipsoid):
    region = GeographicRegion(
        west=-10.0, south=85.0, east=10.0, north=89.9,
        minimum_height=0.0, exaggeration=1.0, relative_height=-200000.0,
    )
    for pitch in (-math.pi / 2, -0.3, 0.2):
        _assert_orthonormal(_frame(region, ellipsoid, heading=1.0, pitch=pitch))


@pytest.mark.parametrize("heading", [0.0, 1.1, 4.0])
def test_heading_is_periodic(subsurface_region, ellipsoid, heading):
    base = _frame(subsurface_region, ellipsoid, heading=heading)
    shifted = _frame(subsurface_region, ellipsoid, heading=heading + 2 * math.pi)
    np.testing.assert_allclose(shifted.position, base.position, atol=1e-3)
    np.testing.assert_allclose(shifted.up, base.up, atol=1e-9)


def test_framing_is_deterministic(subsurface_region, ellipsoid):
    a = _frame(subsurface_region, ellipsoid, heading=0.5, pitch=-0.4)
    b = _frame(subsurface_region, ellipsoid, heading=0.5, pitch=-0.4)

    np.testing.assert_array_equal(a.position, b.position)
    np.testing.assert_array_equal(a.direction, b.direction)
    np.testing.assert_array_equal(a.up, b.up)
    assert a.maximum_height == b.maximum_height


def test_rejects_bad_viewport(subsurface_region, ellipsoid):
    with pytest.raises(ValueError):
        frame_region(subsurface_region, aspect_ratio=0.0, fov=FOV, ellipsoid=ellipsoid)
    with pytest.raises(ValueError):
        frame_region(subsurface_region, aspect_ratio=1.0, fov=4.0, ellipsoid=ellipsoid)


@pytest.mark.parametrize("bounds", [
    dict(west=10.0, south=0.0, east=10.0, north=1.0),
    dict(west=11.0, south=0.0, east=10.0, north=1.0),
    dict(west=0.0, south=5.0, east=1.0, north=4.0),
    dict(west=0.0, south=80.0, east=1.0, north=95.0),
    dict(west=float("nan"), south=0.0, east=1.0, north=1.0),
    dict(west=-180.0, south=10.0, east=180.0, north=20.0),
    dict(west=-190.0, south=10.0, east=-170.0, north=20.0),
    dict(west=170.0, south=10.0, east=190.0, north=20.0),
])
def test_malformed_region_is_rejected(bounds):
    with pytest.raises(ValueError):
        GeographicRegion(**bounds)


def test_zero_width_region_is_rejected(subsurface_region, ellipsoid, monkeypatch):
    """A region with no measurable width cannot be fitted into the frustum"""
    monkeypatch.setattr(
        "globeframe.camera.framing.surface_distance_along_latitude",
        lambda *args, **kwargs: 0.0,
    )
    with pytest.raises(ValueError, match="east-west extent"):
        _frame(subsurface_region, ellipsoid)


def test_non_finite_height_is_rejected():
    with pytest.raises(ValueError):
        GeographicRegion(west=0.0, south=0.0, east=1.0, north=1.0,
                         minimum_height=float("inf"))


def test_pose_matrices(subsurface_region, ellipsoid):
    pose = _frame(subsurface_region, ellipsoid)
    c2w = build_pose_matrix(pose)

    R = c2w[:3, :3]
    np.testing.assert_allclose(R.T @ R, np.eye(3), atol=1e-9)
    assert np.linalg.det(R) == pytest.approx(1.0)
    np.testing.assert_allclose(c2w[:3, 2], pose.direction)
    np.testing.assert_allclose(c2w[:3, 1], -pose.up, atol=1e-12)

    w2c = build_view_matrix(pose)
    cam = w2c @ np.append(pose.position, 1.0)
    np.testing.assert_allclose(cam[:3], 0.0, atol=1e-6)

    target = w2c @ np.append(_target(subsurface_region, ellipsoid), 1.0)
    assert target[2] == pytest.approx(pose.range, rel=1e-9)


def test_fly_to_options_are_plain_data(subsurface_region, ellipsoid):
    options = _frame(subsurface_region, ellipsoid).to_fly_to_options()

    assert set(options) == {"destination", "orientation", "maximum_height"}
    assert len(options["destination"]) == 3
    assert all(isinstance(c, float) for c in options["orientation"]["up"])
    assert isinstance(options["maximum_height"], float)
