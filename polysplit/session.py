"""Hand-off between an interactive editor and the splitter.

A session collects the features to split from a feature store, waits for the
drawing tool to deliver one finished cutting line, splits, and writes the
changed features back to the store under their original ids.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Protocol, Tuple

from .core.config import SplitConfig, resolve_config
from .core.errors import PolysplitError
from .features import Feature, split_features


class FeatureStore(Protocol):
    """Minimal store interface the session relies on.

    The session only calls ``get`` and ``add``. ``set_feature_property`` is
    for hosts that mark features while a session is open (e.g. to highlight
    the targets); a store without it works with :class:`SplitSession`.
    """

    def get(self, feature_id: Hashable) -> Optional[Mapping[str, Any]]:
        ...

    def add(self, feature: Mapping[str, Any]) -> Any:
        ...

    def set_feature_property(self, feature_id: Hashable, key: str, value: Any) -> None:
        ...


class InMemoryFeatureStore:
    """Dict-backed feature store keyed by feature id."""

    def __init__(self, features: Iterable[Mapping[str, Any]] = ()):
        self._features: Dict[Hashable, Feature] = {}
        for feature in features:
            self.add(feature)

    def get(self, feature_id: Hashable) -> Optional[Feature]:
        feature = self._features.get(feature_id)
        return copy.deepcopy(feature) if feature is not None else None

    def add(self, feature: Mapping[str, Any]) -> Hashable:
        if 'id' not in feature:
            raise KeyError("Feature has no id")
        self._features[feature['id']] = copy.deepcopy(dict(feature))
        return feature['id']

    def set_feature_property(self, feature_id: Hashable, key: str, value: Any) -> None:
        feature = self._features[feature_id]
        properties = feature.get('properties') or {}
        properties[key] = value
        feature['properties'] = properties

    def __contains__(self, feature_id: Hashable) -> bool:
        return feature_id in self._features

    def __len__(self) -> int:
        return len(self._features)


class SplitSession:
    """One split interaction: a fixed set of features and a single line.

    Example:
        ```python
        store = InMemoryFeatureStore([parcel])
        session = SplitSession(store, ['parcel-1'], SplitConfig(width=1.0))
        updated, failures = session.on_draw(line_feature)
        ```

    Attributes:
        store: Feature store the targets are read from and written to
        features: Resolved target features (ids the store lacks are dropped)
        config: Split configuration
        finished: True once a line was processed or the session cancelled
    """

    def __init__(
        self,
        store: FeatureStore,
        feature_ids: Iterable[Hashable],
        config: Optional[SplitConfig] = None,
    ):
        self.store = store
        self.config = resolve_config(config)
        self.features: List[Mapping[str, Any]] = [
            feature for feature in (store.get(fid) for fid in feature_ids)
            if feature
        ]
        self.finished = False

    @property
    def feature_ids(self) -> List[Hashable]:
        return [feature.get('id') for feature in self.features]

    def on_draw(
        self,
        line: Any,
        on_error: str = 'keep',
        verbose: bool = False,
    ) -> Tuple[List[Feature], List[Tuple[Any, PolysplitError]]]:
        """Split the session's features with the finished cutting line.

        Changed features are added back to the store, replacing the originals.

        Args:
            line: LineString geometry/Feature or shapely LineString
            on_error: 'keep' (default), 'skip' or 'raise'
            verbose: Print progress information

        Returns:
            Tuple of (features, failures) as returned by split_features

        Raises:
            PolysplitError: The session already finished
            InvalidInputGeometryError: The line is not a usable LineString;
                the session stays open for another line
        """
        if self.finished:
            raise PolysplitError("Split session already finished")

        updated, failures = split_features(
            self.features, line, self.config, on_error=on_error, verbose=verbose,
        )
        self.finished = True
        originals = {id(feature) for feature in self.features}
        for feature in updated:
            if id(feature) not in originals and 'id' in feature:
                self.store.add(feature)

        return updated, failures

    def on_cancel(self) -> None:
        """Abort the session without splitting."""
        self.finished = True


__all__ = [
    'FeatureStore',
    'InMemoryFeatureStore',
    'SplitSession',
]
