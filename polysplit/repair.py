"""Ring repair for raw boolean-difference output.

Clipping kernels do not all guarantee closed rings, and a cut can leave
slivers that collapse to a line or a point. This pass closes open rings,
drops degenerate ones, and rebuilds a MultiPolygon from what survives.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence

import numpy as np
from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry

from .core.validation_utils import count_distinct_vertices, ensure_ring_closed

MIN_RING_VERTICES = 3


def repair_ring(ring: Sequence[Sequence[float]]) -> Optional[np.ndarray]:
    """Close a ring, or reject it when it is degenerate.

    Args:
        ring: Ring coordinates, closed or open

    Returns:
        Closed copy of the ring, or None when it has fewer than 3 distinct
        vertices

    Examples:
        >>> repair_ring([(0, 0), (1, 0), (1, 1)]).tolist()
        [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0]]
        >>> repair_ring([(0, 0), (1, 0), (0, 0)]) is None
        True
    """
    coords = np.asarray(ring, dtype=float)
    if coords.ndim != 2 or len(coords) < MIN_RING_VERTICES:
        return None
    if count_distinct_vertices(coords) < MIN_RING_VERTICES:
        return None
    return ensure_ring_closed(coords)


def repair_polygon_rings(rings: Sequence[Sequence[Sequence[float]]]) -> Optional[List[np.ndarray]]:
    """Repair one polygon's rings (exterior first).

    Returns None when the exterior ring is discarded; holes that do not
    survive are simply dropped.
    """
    if len(rings) == 0:
        return None

    exterior = repair_ring(rings[0])
    if exterior is None:
        return None

    repaired = [exterior]
    for hole in rings[1:]:
        fixed = repair_ring(hole)
        if fixed is not None:
            repaired.append(fixed)
    return repaired


def repair_rings(raw: Iterable[Sequence[Sequence[Sequence[float]]]]) -> MultiPolygon:
    """Normalize a raw ring set into a MultiPolygon.

    Args:
        raw: Polygons given as lists of rings, exterior ring first

    Returns:
        MultiPolygon of the surviving polygons, empty when nothing survives

    Examples:
        >>> raw = [[[(0, 0), (4, 0), (4, 4), (0, 4)]], [[(9, 9), (9, 9)]]]
        >>> result = repair_rings(raw)
        >>> len(result.geoms), result.area
        (1, 16.0)
    """
    polygons = []
    for rings in raw:
        repaired = repair_polygon_rings(rings)
        if repaired is None:
            continue
        polygons.append(Polygon(repaired[0], holes=repaired[1:]))

    if not polygons:
        return MultiPolygon()
    return MultiPolygon(polygons)


def iter_rings(geometry: BaseGeometry) -> Iterator[np.ndarray]:
    """Yield every ring (exteriors and holes) of a Polygon or MultiPolygon."""
    if isinstance(geometry, Polygon):
        polygons = [geometry] if not geometry.is_empty else []
    elif isinstance(geometry, MultiPolygon):
        polygons = list(geometry.geoms)
    else:
        polygons = []

    for polygon in polygons:
        yield np.asarray(polygon.exterior.coords)
        for interior in polygon.interiors:
            yield np.asarray(interior.coords)


__all__ = [
    'MIN_RING_VERTICES',
    'repair_ring',
    'repair_polygon_rings',
    'repair_rings',
    'iter_rings',
]
