"""GeoJSON feature helpers.

Map editors hand features around as GeoJSON mappings. These helpers split
Polygon/MultiPolygon features with a LineString and hand back new features
that keep the original ``id`` and ``properties``.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from shapely.geometry import LineString, mapping, shape
from shapely.geometry.base import BaseGeometry
from shapely.errors import GEOSException

from .batch import SplitRecord, split_all_records
from .core.config import SplitConfig
from .core.errors import InvalidInputGeometryError, PolysplitError
from .core.types import SplitOutcome

Feature = Dict[str, Any]

_AREAL_TYPES = ('Polygon', 'MultiPolygon')


def line_from_geojson(line: Union[Mapping[str, Any], BaseGeometry]) -> LineString:
    """Read a cutting line from a GeoJSON LineString geometry or Feature."""
    if isinstance(line, BaseGeometry):
        geometry = line
    else:
        if line.get('type') == 'Feature':
            line = line.get('geometry') or {}
        if line.get('type') != 'LineString':
            raise InvalidInputGeometryError(
                f"Cutting line must be a LineString, got {line.get('type')}"
            )
        if len(line.get('coordinates') or ()) < 2:
            raise InvalidInputGeometryError("Cutting line needs at least 2 points")
        try:
            geometry = shape(line)
        except (ValueError, TypeError, GEOSException) as e:
            raise InvalidInputGeometryError(f"Malformed LineString coordinates: {e}") from e

    if not isinstance(geometry, LineString):
        raise InvalidInputGeometryError(
            f"Cutting line must be a LineString, got {geometry.geom_type}"
        )
    return geometry


def feature_geometry(feature: Mapping[str, Any]) -> BaseGeometry:
    """Shapely geometry of a Polygon or MultiPolygon feature.

    Raises:
        InvalidInputGeometryError: Missing geometry, unsupported type or
            malformed coordinates
    """
    geometry = feature.get('geometry')
    if not geometry or geometry.get('type') not in _AREAL_TYPES:
        geom_type = geometry.get('type') if geometry else None
        raise InvalidInputGeometryError(f"Unsupported geometry type for cutting: {geom_type}")
    try:
        return shape(geometry)
    except (ValueError, TypeError, GEOSException) as e:
        raise InvalidInputGeometryError(f"Malformed {geometry['type']} coordinates: {e}") from e


def split_features(
    features: Union[Mapping[str, Any], List[Mapping[str, Any]]],
    line: Union[Mapping[str, Any], BaseGeometry],
    config: Optional[SplitConfig] = None,
    on_error: str = 'keep',
    verbose: bool = False,
) -> Tuple[List[Feature], List[Tuple[Any, PolysplitError]]]:
    """Split GeoJSON polygon features with a cutting line.

    Args:
        features: FeatureCollection or list of Features
        line: LineString geometry or Feature, or a shapely LineString
        config: Split configuration
        on_error: 'keep' (default), 'skip' or 'raise'; see split_all_records
        verbose: Print progress information

    Returns:
        Tuple of (features, failures). Split features are new dicts with a
        MultiPolygon geometry; disjoint and unchanged features are the input
        mappings themselves. Failures pair the feature id with its error.
    """
    if isinstance(features, Mapping):
        features = features.get('features') or []
    features = [f for f in features if f]

    cut = line_from_geojson(line)

    targets = []
    preflight: Dict[int, PolysplitError] = {}
    for i, feature in enumerate(features):
        try:
            targets.append((i, feature_geometry(feature)))
        except PolysplitError as e:
            if on_error == 'raise':
                raise
            preflight[i] = e

    records = {
        record.feature_id: record
        for record in split_all_records(targets, cut, config, on_error=on_error, verbose=verbose)
    }

    result: List[Feature] = []
    failures: List[Tuple[Any, PolysplitError]] = []
    for i, feature in enumerate(features):
        if i in preflight:
            failures.append((feature.get('id'), preflight[i]))
            if on_error == 'keep':
                result.append(feature)
            continue

        record = records[i]
        if record.outcome == SplitOutcome.FAILED:
            failures.append((feature.get('id'), record.error))
        if record.geometry is None:
            continue
        result.append(_updated_feature(feature, record))

    return result, failures


def _updated_feature(feature: Mapping[str, Any], record: SplitRecord) -> Mapping[str, Any]:
    if not record.changed:
        return feature

    updated: Feature = {
        'type': 'Feature',
        'properties': copy.deepcopy(feature.get('properties')) or {},
        'geometry': mapping(record.geometry),
    }
    if 'id' in feature:
        updated['id'] = feature['id']
    return updated


__all__ = [
    'Feature',
    'line_from_geojson',
    'feature_geometry',
    'split_features',
]
