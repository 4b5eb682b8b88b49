"""Tests for editor split sessions."""

import pytest
from shapely.geometry import shape

from polysplit import (
    CoordinateSystem,
    InMemoryFeatureStore,
    InvalidInputGeometryError,
    PolysplitError,
    SplitConfig,
    SplitSession,
)


PLANAR = SplitConfig(coordinate_system=CoordinateSystem.PLANAR)
LINE = {'type': 'Feature', 'properties': {}, 'geometry': {
    'type': 'LineString', 'coordinates': [[5, -1], [5, 11]],
}}


def _feature(fid, x0=0.0):
    return {
        'type': 'Feature',
        'id': fid,
        'properties': {'owner': fid},
        'geometry': {
            'type': 'Polygon',
            'coordinates': [[
                [x0, 0], [x0 + 10, 0], [x0 + 10, 10], [x0, 10], [x0, 0],
            ]],
        },
    }


def _store():
    return InMemoryFeatureStore([_feature('near'), _feature('far', 20)])


class TestInMemoryFeatureStore:
    """Tests for InMemoryFeatureStore."""

    def test_get_returns_copy(self):
        store = _store()
        feature = store.get('near')
        feature['properties']['owner'] = 'someone else'
        assert store.get('near')['properties']['owner'] == 'near'

    def test_missing_id(self):
        assert _store().get('nope') is None

    def test_add_replaces(self):
        store = _store()
        replacement = _feature('near', 100)
        store.add(replacement)
        assert len(store) == 2
        assert shape(store.get('near')['geometry']).bounds[0] == 100

    def test_add_without_id_raises(self):
        with pytest.raises(KeyError):
            _store().add({'type': 'Feature', 'geometry': None})

    def test_set_feature_property(self):
        store = _store()
        store.set_feature_property('near', 'highlight', '#f00')
        assert store.get('near')['properties']['highlight'] == '#f00'


class TestSplitSession:
    """Tests for SplitSession."""

    def test_missing_ids_dropped(self):
        session = SplitSession(_store(), ['near', 'ghost', 'far'], PLANAR)
        assert session.feature_ids == ['near', 'far']

    def test_on_draw_updates_store(self):
        store = _store()
        session = SplitSession(store, ['near', 'far'], PLANAR)
        updated, failures = session.on_draw(LINE)

        assert failures == []
        assert [f['id'] for f in updated] == ['near', 'far']
        stored = store.get('near')
        assert stored['geometry']['type'] == 'MultiPolygon'
        assert len(shape(stored['geometry']).geoms) == 2
        assert stored['properties'] == {'owner': 'near'}
        assert store.get('far')['geometry']['type'] == 'Polygon'
        assert session.finished

    def test_second_line_rejected(self):
        session = SplitSession(_store(), ['near'], PLANAR)
        session.on_draw(LINE)
        with pytest.raises(PolysplitError, match="already finished"):
            session.on_draw(LINE)

    def test_rejected_line_keeps_session_open(self):
        store = _store()
        session = SplitSession(store, ['near'], PLANAR)
        with pytest.raises(InvalidInputGeometryError):
            session.on_draw({'type': 'LineString', 'coordinates': [[5, 5]]})
        assert not session.finished

        updated, _ = session.on_draw(LINE)
        assert session.finished
        assert len(shape(updated[0]['geometry']).geoms) == 2

    def test_store_without_set_feature_property(self):
        class MinimalStore:
            def __init__(self, features):
                self.features = {f['id']: f for f in features}

            def get(self, feature_id):
                return self.features.get(feature_id)

            def add(self, feature):
                self.features[feature['id']] = feature

        store = MinimalStore([_feature('near')])
        SplitSession(store, ['near'], PLANAR).on_draw(LINE)
        assert store.features['near']['geometry']['type'] == 'MultiPolygon'

    def test_cancel_leaves_store_untouched(self):
        store = _store()
        session = SplitSession(store, ['near'], PLANAR)
        session.on_cancel()
        assert session.finished
        assert store.get('near')['geometry']['type'] == 'Polygon'
        with pytest.raises(PolysplitError):
            session.on_draw(LINE)

    def test_default_config(self):
        session = SplitSession(_store(), ['near'])
        assert session.config == SplitConfig()
