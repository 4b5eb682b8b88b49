"""Thin adapter over the Shapely/GEOS primitives the splitter relies on.

Three operations are needed: parallel offset of a polyline, a disjointness
test, and polygon boolean difference returned as a raw ring set (a list of
polygons, each a list of coordinate rings with the exterior first).
"""

from __future__ import annotations

from typing import List, Sequence, Union

import numpy as np
from shapely.geometry import (
    GeometryCollection,
    JOIN_STYLE,
    LineString,
    MultiLineString,
    MultiPolygon,
    Polygon,
)
from shapely.geometry.base import BaseGeometry
from shapely.errors import GEOSException
from shapely.ops import linemerge

from .core.errors import BladeError, GeometryError, InvalidInputGeometryError

RingSet = List[List[np.ndarray]]
LineLike = Union[LineString, Sequence[Sequence[float]]]


def as_line(line: LineLike) -> LineString:
    """Coerce a cutting line into a 2D LineString.

    Args:
        line: LineString or sequence of (x, y) coordinates

    Returns:
        New LineString (input is never reused)

    Raises:
        InvalidInputGeometryError: Fewer than 2 points or not a line
    """
    if isinstance(line, BaseGeometry):
        if not isinstance(line, LineString):
            raise InvalidInputGeometryError(
                f"Cutting line must be a LineString, got {line.geom_type}"
            )
        coords = np.asarray(line.coords, dtype=float)
    else:
        try:
            coords = np.asarray(line, dtype=float)
        except (TypeError, ValueError) as e:
            raise InvalidInputGeometryError(f"Cutting line has invalid coordinates: {e}") from None

    if coords.ndim != 2 or coords.shape[0] < 2 or coords.shape[1] < 2:
        count = coords.shape[0] if coords.ndim == 2 else 0
        raise InvalidInputGeometryError(
            f"Cutting line needs at least 2 points, got {count}"
        )

    return LineString(coords[:, :2])


def offset_line(line: LineString, distance: float, mitre_limit: float = 5.0) -> LineString:
    """Offset a polyline sideways by ``distance`` coordinate units.

    Positive distances offset to the left of the line direction, negative to
    the right. The result keeps the direction of the input.

    Raises:
        BladeError: The offset is empty or breaks into disjoint pieces
    """
    if line.length == 0:
        raise BladeError("Cannot offset a zero-length line")

    offset = line.offset_curve(distance, join_style=JOIN_STYLE.mitre, mitre_limit=mitre_limit)

    if isinstance(offset, MultiLineString):
        offset = linemerge(offset)

    if offset.is_empty or not isinstance(offset, LineString):
        raise BladeError(
            f"Offset by {distance} did not produce a single line ({offset.geom_type})"
        )

    return offset


def is_disjoint(a: BaseGeometry, b: BaseGeometry) -> bool:
    """Return True when the two geometries share no point.

    Raises:
        GeometryError: GEOS could not evaluate the predicate
    """
    try:
        return bool(a.disjoint(b))
    except GEOSException as e:
        raise GeometryError(f"Disjointness test failed: {e}") from e


def difference(a: BaseGeometry, b: BaseGeometry) -> RingSet:
    """Boolean difference ``a - b`` as a raw ring set.

    Non-areal pieces of a mixed result are dropped. An empty list means
    ``a`` was fully consumed.

    Raises:
        GeometryError: GEOS could not compute the overlay
    """
    try:
        result = a.difference(b)
    except GEOSException as e:
        raise GeometryError(f"Boolean difference failed: {e}") from e
    return to_ring_set(result)


def to_ring_set(geometry: BaseGeometry) -> RingSet:
    """Explode areal geometry into a list of polygons given as coordinate rings."""
    if geometry.is_empty:
        return []

    if isinstance(geometry, Polygon):
        rings = [np.asarray(geometry.exterior.coords)]
        rings.extend(np.asarray(interior.coords) for interior in geometry.interiors)
        return [rings]
    elif isinstance(geometry, (MultiPolygon, GeometryCollection)):
        ring_set: RingSet = []
        for part in geometry.geoms:
            ring_set.extend(to_ring_set(part))
        return ring_set

    return []


__all__ = [
    'RingSet',
    'LineLike',
    'as_line',
    'offset_line',
    'is_disjoint',
    'difference',
    'to_ring_set',
]
