"""Framing configuration."""

from __future__ import annotations
from typing import Dict, Any
from dataclasses import dataclass
import math


DEFAULT_OFFSET_RATIO = 0.2
DEFAULT_PITCH = math.radians(-15.0)
DEFAULT_SINGULARITY_EPSILON = 1e-6
DEFAULT_FALLBACK_HEIGHT = -100.0
DEFAULT_ELLIPSOID = "WGS84"

DEFAULT_ASPECT_RATIO = 16.0 / 9.0
DEFAULT_FOV = math.radians(60.0)
DEFAULT_ZNEAR = 1.0
DEFAULT_ZFAR = 5.0e8


@dataclass
class FramingConfig:
    """
    Tunable constants of the framing algorithm.

    Attributes:
        offset_ratio: Margin added to the region width before fitting it
            into the frustum (0.2 = 20%)
        pitch: Pitch used when the caller passes none (radians)
        singularity_epsilon: Threshold on 1 - |dot(direction, up)| below
            which the view is treated as looking along the local vertical
        fallback_height: Geodetic height the camera is moved to when the
            candidate position ends up at or above the surface
        ellipsoid: Reference ellipsoid name understood by PROJ
    """
    offset_ratio: float = DEFAULT_OFFSET_RATIO
    pitch: float = DEFAULT_PITCH
    singularity_epsilon: float = DEFAULT_SINGULARITY_EPSILON
    fallback_height: float = DEFAULT_FALLBACK_HEIGHT
    ellipsoid: str = DEFAULT_ELLIPSOID

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> 'FramingConfig':
        """
        Create FramingConfig from dictionary.

        Pitch may be given as 'pitch' (radians) or 'pitch_deg'.
        """
        if 'pitch_deg' in cfg:
            pitch = math.radians(float(cfg['pitch_deg']))
        else:
            pitch = float(cfg.get('pitch', DEFAULT_PITCH))

        return cls(
            offset_ratio=float(cfg.get('offset_ratio', DEFAULT_OFFSET_RATIO)),
            pitch=pitch,
            singularity_epsilon=float(cfg.get('singularity_epsilon', DEFAULT_SINGULARITY_EPSILON)),
            fallback_height=float(cfg.get('fallback_height', DEFAULT_FALLBACK_HEIGHT)),
            ellipsoid=str(cfg.get('ellipsoid', DEFAULT_ELLIPSOID)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'offset_ratio': self.offset_ratio,
            'pitch': self.pitch,
            'singularity_epsilon': self.singularity_epsilon,
            'fallback_height': self.fallback_height,
            'ellipsoid': self.ellipsoid,
        }


@dataclass
class ViewportConfig:
    """
    Viewer frustum parameters.

    Attributes:
        aspect_ratio: Viewport width / height
        fov: Field of view of the larger viewport side (radians)
        znear, zfar: Clipping planes for the projection matrix
    """
    aspect_ratio: float = DEFAULT_ASPECT_RATIO
    fov: float = DEFAULT_FOV
    znear: float = DEFAULT_ZNEAR
    zfar: float = DEFAULT_ZFAR

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> 'ViewportConfig':
        """
        Create ViewportConfig from dictionary.

        Accepts 'aspect_ratio' or 'width'/'height', and 'fov' (radians)
        or 'fov_deg'.
        """
        if 'aspect_ratio' in cfg:
            aspect_ratio = float(cfg['aspect_ratio'])
        elif 'width' in cfg and 'height' in cfg:
            aspect_ratio = float(cfg['width']) / float(cfg['height'])
        else:
            aspect_ratio = DEFAULT_ASPECT_RATIO

        if 'fov_deg' in cfg:
            fov = math.radians(float(cfg['fov_deg']))
        else:
            fov = float(cfg.get('fov', DEFAULT_FOV))

        return cls(
            aspect_ratio=aspect_ratio,
            fov=fov,
            znear=float(cfg.get('znear', DEFAULT_ZNEAR)),
            zfar=float(cfg.get('zfar', DEFAULT_ZFAR)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'aspect_ratio': self.aspect_ratio,
            'fov': self.fov,
            'znear': self.znear,
            'zfar': self.zfar,
        }
