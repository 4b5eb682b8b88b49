"""Measurement helpers for split results.

Tests and verbose callers only need a few scalars to judge a cut: how many
fragments came out, how much area survived, and how much the blade removed.
"""

from __future__ import annotations

from typing import Dict, Optional, Union

from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry


def count_fragments(geometry: BaseGeometry) -> int:
    """Number of polygon parts in ``geometry``."""
    if geometry is None or geometry.is_empty:
        return 0
    if isinstance(geometry, Polygon):
        return 1
    if isinstance(geometry, MultiPolygon):
        return len(geometry.geoms)
    return 0


def measure_split(
    original: Union[Polygon, MultiPolygon],
    result: BaseGeometry,
) -> Dict[str, Optional[Union[float, int, bool]]]:
    """Return core metrics comparing a split ``result`` with its ``original``."""
    area = getattr(result, "area", 0.0)
    original_area = getattr(original, "area", 0.0)
    area_ratio: Optional[float] = None

    if original_area > 0:
        area_ratio = area / original_area

    return {
        "fragments": count_fragments(result),
        "area": area,
        "original_area": original_area,
        "area_ratio": area_ratio,
        "removed_area": original_area - area,
        "is_valid": getattr(result, "is_valid", False),
    }


__all__ = [
    "count_fragments",
    "measure_split",
]
