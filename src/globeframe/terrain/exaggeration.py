"""Vertical exaggeration of terrain heights."""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.types import GeographicRegion


def exaggerated_height(
    height,
    minimum_height,
    relative_height,
    exaggeration
):
    """
    Map a raw elevation into the exaggerated display space.

        h' = (h - minimum_height) * exaggeration + relative_height

    Works element-wise on NumPy arrays as well as on scalars.

    Args:
        height: Raw elevation (m)
        minimum_height: Baseline elevation that stays fixed at relative_height
        relative_height: Display height of the baseline (m)
        exaggeration: Vertical scale factor

    Returns:
        Display elevation (m)
    """
    return (height - minimum_height) * exaggeration + relative_height


def region_floor_height(region: "GeographicRegion") -> float:
    """Display height of the region's lowest terrain point."""
    return exaggerated_height(
        region.minimum_height,
        region.minimum_height,
        region.relative_height,
        region.exaggeration,
    )


def region_ceiling_height(region: "GeographicRegion") -> float:
    """Display height of the region's highest terrain point."""
    return exaggerated_height(
        region.maximum_height,
        region.minimum_height,
        region.relative_height,
        region.exaggeration,
    )
