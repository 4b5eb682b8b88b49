"""Polygon splitting along a cutting line.

The target is cut by subtracting a blade built around the line (see
:mod:`polysplit.blade`) and normalizing what is left with the ring repair
pass (see :mod:`polysplit.repair`).
"""

from __future__ import annotations

import warnings
from typing import Optional, Tuple, Union

from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union
from shapely.validation import explain_validity

from .blade import kerf_blades, thin_blade
from .core.config import SplitConfig, resolve_config
from .core.errors import BladeError, InvalidInputGeometryError
from .core.types import SplitOutcome
from .kernel import LineLike, RingSet, as_line, difference, is_disjoint
from .repair import repair_rings

Target = Union[Polygon, MultiPolygon]


def split_polygon(
    target: Target,
    line: LineLike,
    config: Optional[SplitConfig] = None,
    verbose: bool = False,
) -> MultiPolygon:
    """Split a polygon or multipolygon along a cutting line.

    With ``config.width == 0`` a thin blade is subtracted, leaving fragments
    that are separated only by ``2 * min_kerf``. With a positive width a strip
    of ``width`` is removed on each side of the line.

    Args:
        target: Polygon or MultiPolygon to split (not modified)
        line: Cutting line, LineString or coordinate sequence with >= 2 points
        config: Split configuration (default: thin cut, meters, lon/lat)
        verbose: Print diagnostic information (default: False)

    Returns:
        MultiPolygon of the fragments. When the line misses the target, the
        target wrapped as a MultiPolygon. Empty when nothing survives.

    Raises:
        InvalidInputGeometryError: Target is not a valid Polygon/MultiPolygon,
            or the line has fewer than 2 points
        GeometryError: The geometry kernel failed on the inputs
        ConfigurationError: Invalid configuration values

    Examples:
        >>> from polysplit import SplitConfig, CoordinateSystem
        >>> square = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
        >>> config = SplitConfig(coordinate_system=CoordinateSystem.PLANAR)
        >>> result = split_polygon(square, [(5, -1), (5, 11)], config)
        >>> len(result.geoms)
        2
    """
    result, _ = split_polygon_with_outcome(target, line, config, verbose=verbose)
    return result


def split_polygon_with_outcome(
    target: Target,
    line: LineLike,
    config: Optional[SplitConfig] = None,
    verbose: bool = False,
) -> Tuple[MultiPolygon, SplitOutcome]:
    """Like :func:`split_polygon`, also reporting what happened.

    Returns:
        Tuple of (MultiPolygon, SplitOutcome)
    """
    config = resolve_config(config)
    wrapped = as_multipolygon(target)
    cut = as_line(line)

    if cut.length == 0:
        warnings.warn("Cut skipped: cutting line collapses to a single point",
                      UserWarning, stacklevel=2)
        return wrapped, SplitOutcome.UNCHANGED

    if is_disjoint(cut, target):
        if verbose:
            print("Line was outside of polygon")
        return wrapped, SplitOutcome.DISJOINT

    try:
        if config.is_kerf:
            raw = _kerf_difference(target, cut, config)
            if raw is None:
                if verbose:
                    print("Line does not cross the polygon boundary, kerf not computable")
                return wrapped, SplitOutcome.UNCHANGED
        else:
            raw = difference(target, thin_blade(cut, config))
    except BladeError as e:
        warnings.warn(f"Cut skipped: {e}", UserWarning, stacklevel=2)
        return wrapped, SplitOutcome.UNCHANGED

    result = repair_rings(raw)

    if result.is_empty:
        if verbose:
            print("Nothing left after the cut")
        return result, SplitOutcome.DEGENERATE

    if verbose:
        print(f"Split into {len(result.geoms)} fragment(s)")
    return result, SplitOutcome.SPLIT


def as_multipolygon(target: BaseGeometry) -> MultiPolygon:
    """Wrap a Polygon as a MultiPolygon; MultiPolygons are returned as-is.

    Raises:
        InvalidInputGeometryError: Any other geometry type, an empty polygon,
            or an invalid (e.g. self-intersecting) target
    """
    if isinstance(target, MultiPolygon):
        _require_valid(target)
        return target
    elif isinstance(target, Polygon):
        if target.is_empty:
            raise InvalidInputGeometryError("Cannot split an empty polygon")
        _require_valid(target)
        return MultiPolygon([target])

    geom_type = getattr(target, 'geom_type', type(target).__name__)
    raise InvalidInputGeometryError(f"Unsupported geometry type for cutting: {geom_type}")


def _require_valid(target: BaseGeometry) -> None:
    if not target.is_valid:
        raise InvalidInputGeometryError(
            f"Invalid target geometry: {explain_validity(target)}"
        )


def _kerf_difference(target: Target, cut, config: SplitConfig) -> Optional[RingSet]:
    # No boundary crossing means the strip can only carve a slot, never split.
    if not cut.intersects(target.boundary):
        return None

    left, right = kerf_blades(cut, config)
    return difference(target, unary_union([left, right]))


split = split_polygon


__all__ = [
    'Target',
    'split',
    'split_polygon',
    'split_polygon_with_outcome',
    'as_multipolygon',
]
