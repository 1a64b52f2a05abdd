"""
Shared fixtures for the framing tests
"""

import pytest

from globeframe import Ellipsoid, FramingConfig, GeographicRegion


@pytest.fixture(scope="session")
def ellipsoid():
    return Ellipsoid("WGS84")


@pytest.fixture
def subsurface_region():
    """Region of the sample viewer scene, floor at -100 km in display space"""
    return GeographicRegion(
        west=-106.708205618,
        south=46.474605807,
        east=-101.199005618,
        north=49.156605807,
        minimum_height=-9006.2236328125,
        maximum_height=-3173.1181640625,
        exaggeration=8.0,
        relative_height=-100000.0,
    )


@pytest.fixture
def small_region():
    """Narrow region whose top-down camera stays below the surface"""
    return GeographicRegion(
        west=10.0,
        south=47.0,
        east=10.5,
        north=47.3,
        minimum_height=-500.0,
        maximum_height=0.0,
        exaggeration=1.0,
        relative_height=-100000.0,
    )


@pytest.fixture
def config():
    return FramingConfig()
