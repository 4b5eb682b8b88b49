"""Tests for batch splitting."""

import pytest
from shapely.geometry import MultiPolygon, Point, Polygon

from polysplit import (
    CoordinateSystem,
    InvalidInputGeometryError,
    SplitConfig,
    SplitOutcome,
    split_all,
    split_all_records,
)


PLANAR = SplitConfig(coordinate_system=CoordinateSystem.PLANAR)
LINE = [(5, -1), (5, 11)]


def _square(x0: float = 0.0) -> Polygon:
    return Polygon([(x0, 0), (x0 + 10, 0), (x0 + 10, 10), (x0, 10)])


class TestSplitAll:
    """Tests for split_all()."""

    def test_order_and_ids_preserved(self):
        targets = [('b', _square()), ('a', _square(20)), ('c', _square())]
        results, failures = split_all(targets, LINE, PLANAR)
        assert [fid for fid, _ in results] == ['b', 'a', 'c']
        assert failures == []

    def test_disjoint_target_passed_through(self):
        far = _square(20)
        results, _ = split_all([('near', _square()), ('far', far)], LINE, PLANAR)
        near_result = dict(results)['near']
        assert isinstance(near_result, MultiPolygon)
        assert len(near_result.geoms) == 2
        assert dict(results)['far'] is far

    def test_mapping_input(self):
        results, _ = split_all({1: _square(), 2: _square(20)}, LINE, PLANAR)
        assert [fid for fid, _ in results] == [1, 2]

    def test_duplicates_are_not_removed(self):
        square = _square()
        results, _ = split_all([('x', square), ('x', square)], LINE, PLANAR)
        assert len(results) == 2

    def test_none_targets_skipped(self):
        results, failures = split_all([('missing', None), ('ok', _square())], LINE, PLANAR)
        assert [fid for fid, _ in results] == ['ok']
        assert failures == []

    def test_invalid_target_is_isolated(self):
        bowtie = Polygon([(0, 0), (10, 10), (10, 0), (0, 10)])
        results, failures = split_all([('bad', bowtie), ('good', _square())], LINE, PLANAR)

        assert [fid for fid, _ in failures] == ['bad']
        assert isinstance(failures[0][1], InvalidInputGeometryError)
        assert dict(results)['bad'] is bowtie
        assert len(dict(results)['good'].geoms) == 2

    def test_empty_batch(self):
        assert split_all([], LINE, PLANAR) == ([], [])

    def test_failure_is_isolated_keep(self):
        point = Point(5, 5)
        results, failures = split_all(
            [('bad', point), ('good', _square())], LINE, PLANAR,
        )
        assert [fid for fid, _ in results] == ['bad', 'good']
        assert dict(results)['bad'] is point
        assert len(dict(results)['good'].geoms) == 2
        assert len(failures) == 1
        assert failures[0][0] == 'bad'
        assert isinstance(failures[0][1], InvalidInputGeometryError)

    def test_failure_is_isolated_skip(self):
        results, failures = split_all(
            [('bad', Point(5, 5)), ('good', _square())], LINE, PLANAR, on_error='skip',
        )
        assert [fid for fid, _ in results] == ['good']
        assert [fid for fid, _ in failures] == ['bad']

    def test_failure_raise(self):
        with pytest.raises(InvalidInputGeometryError):
            split_all([('bad', Point(5, 5))], LINE, PLANAR, on_error='raise')

    def test_invalid_on_error(self):
        with pytest.raises(ValueError, match="Unknown on_error"):
            split_all([('a', _square())], LINE, PLANAR, on_error='ignore')

    def test_invalid_line_fails_whole_batch(self):
        with pytest.raises(InvalidInputGeometryError):
            split_all([('a', _square())], [(5, 5)], PLANAR)

    def test_verbose(self, capsys):
        split_all([('far', _square(20))], LINE, PLANAR, verbose=True)
        captured = capsys.readouterr()
        assert "outside of polygon 'far'" in captured.out


class TestSplitAllRecords:
    """Tests for split_all_records()."""

    def test_outcomes(self):
        records = split_all_records(
            [
                ('split', _square()),
                ('disjoint', _square(20)),
                ('bad', Point(0, 0)),
            ],
            LINE,
            SplitConfig(width=20.0, coordinate_system=CoordinateSystem.PLANAR),
        )
        outcomes = {r.feature_id: r.outcome for r in records}
        assert outcomes == {
            'split': SplitOutcome.DEGENERATE,
            'disjoint': SplitOutcome.DISJOINT,
            'bad': SplitOutcome.FAILED,
        }

    def test_changed_flag(self):
        records = split_all_records([('a', _square()), ('b', _square(20))], LINE, PLANAR)
        assert [r.changed for r in records] == [True, False]
        assert records[0].error is None

    def test_degenerate_result_is_empty_not_failed(self):
        records = split_all_records(
            [('a', _square())], LINE,
            SplitConfig(width=20.0, coordinate_system=CoordinateSystem.PLANAR),
        )
        assert records[0].geometry.is_empty
        assert records[0].error is None
