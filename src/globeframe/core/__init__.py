"""Core framing types and configuration."""

from .config import FramingConfig, ViewportConfig
from .types import GeographicRegion, HeadingPitchRange, CameraPose

__all__ = [
    "FramingConfig",
    "ViewportConfig",
    "GeographicRegion",
    "HeadingPitchRange",
    "CameraPose",
]
