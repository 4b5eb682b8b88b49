"""Blade construction.

A blade is the auxiliary polygon built around a cutting line. Subtracting it
from a target polygon realizes the cut. Two variants exist:

- the thin blade, a sliver ``2 * min_kerf`` wide centred on the line, used for
  purely topological cuts;
- the kerf blades, one strip on each side of the line between the line and
  its offset by ``width``, used when material is removed along the cut.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

import numpy as np
from shapely.geometry import MultiPolygon, Polygon
from shapely.ops import unary_union
from shapely.validation import make_valid

from .core.config import SplitConfig, resolve_config
from .core.errors import BladeError, UnsupportedWidthConfigurationError
from .kernel import LineLike, as_line, offset_line

Blade = Union[Polygon, MultiPolygon]


def thin_blade(line: LineLike, config: Optional[SplitConfig] = None) -> Blade:
    """Build the thin blade polygon around a cutting line.

    The line is offset by ``min_kerf`` to both sides. The ring runs along the
    left offset, back along the right offset reversed, and closes on its
    first point.

    Args:
        line: Cutting line (at least 2 points)
        config: Split configuration; only ``min_kerf``, ``unit`` and
            ``coordinate_system`` are used

    Returns:
        Polygon with a single exterior ring and no holes. When a sharp bend
        makes the ring self-intersect, its repaired areal parts, which may
        form a MultiPolygon

    Raises:
        InvalidInputGeometryError: Line has fewer than 2 points
        BladeError: Line has zero length or cannot be offset

    Examples:
        >>> from polysplit.core import CoordinateSystem
        >>> cfg = SplitConfig(min_kerf=0.1, coordinate_system=CoordinateSystem.PLANAR)
        >>> blade = thin_blade([(0, 0), (10, 0)], cfg)
        >>> round(blade.area, 6)
        2.0
    """
    config = resolve_config(config)
    line = as_line(line)
    _require_length(line)

    half_width = config.thin_blade_distance()
    left = offset_line(line, half_width, config.mitre_limit)
    right = offset_line(line, -half_width, config.mitre_limit)

    left_coords = np.asarray(left.coords)
    right_coords = np.asarray(right.coords)[::-1]
    ring = np.vstack([left_coords, right_coords, left_coords[0:1]])

    return _valid_blade(Polygon(ring))


def kerf_blades(line: LineLike, config: SplitConfig) -> Tuple[Blade, Blade]:
    """Build the two kerf strips on either side of a cutting line.

    For each side the ring is the line itself, then that side's offset line
    reversed, then the line's first point again.

    Args:
        line: Cutting line (at least 2 points)
        config: Split configuration with ``width > 0`` and a ``unit``

    Returns:
        ``(left_strip, right_strip)``, each a Polygon, or a MultiPolygon
        when a self-intersecting strip had to be repaired

    Raises:
        UnsupportedWidthConfigurationError: Width is not positive or unit is unset
        InvalidInputGeometryError: Line has fewer than 2 points
        BladeError: Line has zero length or cannot be offset
    """
    config = resolve_config(config)
    if not config.is_kerf or config.unit is None:
        raise UnsupportedWidthConfigurationError(
            "Kerf blades need a positive width and a unit"
        )

    line = as_line(line)
    _require_length(line)

    distance = config.kerf_distance()
    line_coords = np.asarray(line.coords)

    strips = []
    for side in (distance, -distance):
        offset = offset_line(line, side, config.mitre_limit)
        ring = np.vstack([
            line_coords,
            np.asarray(offset.coords)[::-1],
            line_coords[0:1],
        ])
        strips.append(_valid_blade(Polygon(ring)))

    return strips[0], strips[1]


def _require_length(line) -> None:
    if line.length == 0:
        raise BladeError("Cutting line collapses to a single point")


def _valid_blade(blade: Polygon) -> Blade:
    """Repair a self-intersecting blade (sharp bends), keeping its areal parts."""
    if blade.is_valid:
        return blade

    fixed = make_valid(blade)
    if not isinstance(fixed, (Polygon, MultiPolygon)):
        fixed = unary_union([
            part for part in getattr(fixed, 'geoms', ())
            if isinstance(part, (Polygon, MultiPolygon))
        ])

    if fixed.is_empty or not isinstance(fixed, (Polygon, MultiPolygon)):
        raise BladeError("Blade collapsed while repairing its outline")
    return fixed


__all__ = [
    'Blade',
    'thin_blade',
    'kerf_blades',
]
