"""Split a batch of identified polygons with one cutting line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterable, List, Mapping, Optional, Tuple, Union

from shapely.geometry.base import BaseGeometry

from .core.config import SplitConfig, resolve_config
from .core.errors import PolysplitError
from .core.types import SplitOutcome
from .kernel import LineLike, as_line
from .split import split_polygon_with_outcome

Targets = Union[Mapping[Hashable, BaseGeometry], Iterable[Tuple[Hashable, BaseGeometry]]]

_ON_ERROR = ('keep', 'skip', 'raise')


@dataclass
class SplitRecord:
    """Result of splitting one identified target.

    Attributes:
        feature_id: Identifier the target was submitted with
        geometry: Split result; the original object for DISJOINT, UNCHANGED
            and kept FAILED targets; None for skipped failures
        outcome: What happened to the target
        error: Exception raised for FAILED targets
    """
    feature_id: Hashable
    geometry: Optional[BaseGeometry]
    outcome: SplitOutcome
    error: Optional[PolysplitError] = None

    @property
    def changed(self) -> bool:
        return self.outcome in (SplitOutcome.SPLIT, SplitOutcome.DEGENERATE)


def split_all_records(
    targets: Targets,
    line: LineLike,
    config: Optional[SplitConfig] = None,
    on_error: str = 'keep',
    verbose: bool = False,
) -> List[SplitRecord]:
    """Split every target with the same line, one record per target.

    Targets are processed in the order given, without deduplication. Targets
    whose geometry is None (unresolved identifiers) are skipped silently.

    Args:
        targets: Mapping or iterable of (id, Polygon|MultiPolygon) pairs
        line: Cutting line shared by all targets
        config: Split configuration
        on_error: What to do when a single target fails:
            - 'keep': Record the failure, pass the original geometry through
            - 'skip': Record the failure without a geometry
            - 'raise': Raise the exception
        verbose: Print progress information

    Returns:
        List of SplitRecord in input order

    Raises:
        ValueError: Unknown on_error value
        InvalidInputGeometryError: The line itself is invalid
        ConfigurationError: Invalid configuration
    """
    if on_error not in _ON_ERROR:
        raise ValueError(f"Unknown on_error: {on_error}")

    # Line and config problems affect every target, so they are not isolated.
    config = resolve_config(config)
    cut = as_line(line)

    items = list(targets.items()) if isinstance(targets, Mapping) else list(targets)
    records: List[SplitRecord] = []

    for i, (feature_id, geometry) in enumerate(items):
        if geometry is None:
            continue

        if verbose and i % 100 == 0:
            print(f"Processing target {i}/{len(items)}...")

        try:
            result, outcome = split_polygon_with_outcome(geometry, cut, config)
        except PolysplitError as e:
            if on_error == 'raise':
                raise
            kept = geometry if on_error == 'keep' else None
            records.append(SplitRecord(feature_id, kept, SplitOutcome.FAILED, e))
            if verbose:
                print(f"  Failed to split target {feature_id!r}: {e}")
            continue

        if outcome in (SplitOutcome.DISJOINT, SplitOutcome.UNCHANGED):
            if verbose and outcome == SplitOutcome.DISJOINT:
                print(f"  Line was outside of polygon {feature_id!r}")
            result = geometry

        records.append(SplitRecord(feature_id, result, outcome))

    return records


def split_all(
    targets: Targets,
    line: LineLike,
    config: Optional[SplitConfig] = None,
    on_error: str = 'keep',
    verbose: bool = False,
) -> Tuple[List[Tuple[Hashable, BaseGeometry]], List[Tuple[Hashable, PolysplitError]]]:
    """Split every target with the same line.

    Disjoint targets are passed through as the very same object they were
    submitted as.

    Args:
        targets: Mapping or iterable of (id, Polygon|MultiPolygon) pairs
        line: Cutting line shared by all targets
        config: Split configuration
        on_error: 'keep' (default), 'skip' or 'raise'; see split_all_records
        verbose: Print progress information

    Returns:
        Tuple of (results, failures), both lists of (id, value) pairs in
        input order

    Examples:
        >>> results, failures = split_all({'a': square, 'b': far_away}, line)
        >>> [fid for fid, _ in results]
        ['a', 'b']
    """
    records = split_all_records(targets, line, config, on_error=on_error, verbose=verbose)

    results = [(r.feature_id, r.geometry) for r in records if r.geometry is not None]
    failures = [(r.feature_id, r.error) for r in records if r.outcome == SplitOutcome.FAILED]
    return results, failures


__all__ = [
    'SplitRecord',
    'split_all',
    'split_all_records',
]
