import pytest

from cycliccodes import settings
from cycliccodes.bounds import bound, consecutive_runs
from cycliccodes.cosets import defining_set
from cycliccodes.errors import DomainError


def qr17_cosets():
    # quadratic residues mod 17 form a single 2-cyclotomic coset
    return defining_set([1], 2, 17, flatten=False)


# -------------------------------------------------------------------------
# BCH bound
# -------------------------------------------------------------------------

def test_bch_bound_scenario_a():
    cosets = defining_set(range(3, 7), 2, 15, flatten=False)
    assert bound(15, cosets) == (7, 1, 7)


@pytest.mark.parametrize("q,n,seeds,expected", [
    (2, 7, [1], (3, 1, 3)),
    (2, 15, [1, 3], (5, 1, 5)),
    (13, 12, [1, 2, 3, 4], (5, 1, 5)),
    (8, 7, [0, 1], (3, 0, 3)),
])
def test_bch_bound_known_codes(q, n, seeds, expected):
    assert bound(n, defining_set(seeds, q, n, flatten=False)) == expected


def test_runs_wrap_around_zero():
    cosets = [[11], [0], [1]]
    delta, offset, _ = bound(12, cosets)
    assert (delta, offset) == (4, 11)


def test_ties_break_on_lowest_start():
    cosets = [[1], [2], [5], [6]]
    assert bound(12, cosets)[:2] == (3, 1)


def test_runs_record_contributing_cosets():
    cosets = defining_set(range(3, 7), 2, 15, flatten=False)
    runs = {run.start: run for run in consecutive_runs(15, cosets)}
    assert runs[1].residues == [1, 2, 3, 4, 5, 6]
    # 1, 3 and 5 bring in three different cosets, the rest are covered
    assert len(runs[1].cosets) == 3


def test_empty_defining_set_is_rejected():
    with pytest.raises(DomainError):
        bound(15, [])


# -------------------------------------------------------------------------
# Hartmann-Tzeng refinement
# -------------------------------------------------------------------------

def test_hartmann_tzeng_off_by_default():
    assert bound(17, qr17_cosets()) == (3, 1, 3)


def test_hartmann_tzeng_refines_qr17():
    # {1, 2} + {0, 7} = {1, 2, 8, 9} lies inside the residues
    assert bound(17, qr17_cosets(), True) == (3, 1, 4)


def test_hartmann_tzeng_follows_settings(monkeypatch):
    monkeypatch.setattr(settings, "HARTMANN_TZENG", True)
    assert bound(17, qr17_cosets())[2] == 4
    assert bound(17, qr17_cosets(), False)[2] == 3


def test_hartmann_tzeng_never_below_bch():
    for seeds in ([1], [1, 3], [1, 3, 5], [1, 7]):
        cosets = defining_set(seeds, 2, 15, flatten=False)
        delta, _, ht = bound(15, cosets, True)
        assert ht >= delta
