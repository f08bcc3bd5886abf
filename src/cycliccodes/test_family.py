import pandas as pd
import pytest

from cycliccodes.family import COLUMNS, bch_family


def test_family_rows():
    df = bch_family(2, 15, deltas=[3, 5, 7], offsets=[1], n_jobs=1)
    assert list(df.columns) == COLUMNS
    assert df['k'].tolist() == [11, 7, 5]
    assert df['bch_bound'].tolist() == [3, 5, 7]
    assert (df['kind'] == "BCH").all()
    assert df['defining_set'].iloc[0] == "1 2 4 8"


def test_zero_codes_are_left_out():
    df = bch_family(2, 15, deltas=[15], offsets=[0], n_jobs=1)
    assert df.empty
    assert list(df.columns) == COLUMNS


def test_default_sweep():
    df = bch_family(2, 7, n_jobs=1)
    assert len(df) == 9
    assert (df['k'] >= 1).all()
    assert (df['ht_bound'] >= df['bch_bound']).all()
    assert (df['upper_bound'] >= df['ht_bound']).all()


def test_reed_solomon_rows():
    df = bch_family(8, 7, deltas=[3], offsets=[0], n_jobs=1)
    assert df['kind'].tolist() == ["Reed-Solomon"]
    assert df['upper_bound'].tolist() == [3]


def test_parallel_matches_serial():
    kwargs = dict(deltas=[3, 5, 7], offsets=(0, 1))
    pd.testing.assert_frame_equal(bch_family(2, 15, n_jobs=1, **kwargs),
                                  bch_family(2, 15, n_jobs=2, **kwargs))


if __name__ == "__main__":
    raise SystemExit(pytest.main([__file__]))
