"""Terrain height scaling."""

from .exaggeration import (
    exaggerated_height,
    region_floor_height,
    region_ceiling_height,
)

__all__ = [
    "exaggerated_height",
    "region_floor_height",
    "region_ceiling_height",
]
