import logging
from math import gcd
from typing import List, Optional, Sequence, Set, Tuple

from . import settings
from .cosets import coset_index, flatten_cosets
from .errors import DomainError

log = logging.getLogger(__name__)


class Run:
    """
    A run of consecutive residues x, x+1, ... (mod n) inside a defining set,
    together with the cosets that contributed them.
    """

    def __init__(self, start: int):
        self.start = start
        self.residues: List[int] = []
        self.cosets: Set[int] = set()
        self.covered: Set[int] = set()

    def extend(self, y: int, index: int, coset: Sequence[int]) -> None:
        # a residue already covered by a coset of this run is not new
        if y not in self.covered:
            self.cosets.add(index)
            self.covered.update(coset)
        self.residues.append(y)

    @property
    def count(self) -> int:
        return len(self.residues)

    @property
    def wraps(self) -> bool:
        """True if the run passes from n - 1 to 0."""
        return self.residues[-1] < self.start


def consecutive_runs(n: int, cosets: Sequence[Sequence[int]]) -> List[Run]:
    """One greedy run per residue of the defining set, in increasing start order."""
    def_set = flatten_cosets(cosets)
    members = set(def_set)
    where = coset_index(cosets)
    runs = []
    for x in def_set:
        run = Run(x)
        y = x
        while y in members and run.count < n:
            run.extend(y, where[y], cosets[where[y]])
            y = (y + 1) % n
        runs.append(run)
    return runs


def hartmann_tzeng(n: int, def_set: Set[int], runs: Sequence[Run], delta: int) -> int:
    """
    Hartmann-Tzeng refinement: if A is a run of delta - 1 consecutive zeros
    and B = {0, c, ..., s*c} with gcd(c, n) < delta and A + B inside the
    defining set, then d >= delta + s. Here s <= delta - 2.
    """
    best = delta
    for run in runs:
        if run.count != delta - 1:
            continue
        for c in range(1, n):
            if gcd(c, n) >= delta:
                continue
            for s in range(1, delta - 1):
                shifted = ((a + s * c) % n for a in run.residues)
                if not all(y in def_set for y in shifted):
                    break
                if delta + s > best:
                    log.debug(f"HT: run at {run.start}, step {c}, s={s} gives {delta + s}")
                    best = delta + s
    return best


def bound(n: int, cosets: Sequence[Sequence[int]], hartmann_tzeng_search: Optional[bool] = None) -> Tuple[int, int, int]:
    """
    Certify a lower bound on the minimum distance of the cyclic code with
    the given cosets.

    Returns
    -------
    delta
        BCH bound: one more than the longest run of consecutive residues.
    offset
        First residue of that run. Ties go to runs that do not wrap past
        n - 1, then to the lowest start.
    certified
        Hartmann-Tzeng bound when the search is enabled (see
        ``settings.HARTMANN_TZENG``), otherwise ``delta``.
    """
    if not cosets:
        raise DomainError("Cannot bound a code with an empty defining set")
    runs = consecutive_runs(n, cosets)
    longest = min(runs, key=lambda run: (-run.count, run.wraps, run.start))
    delta = longest.count + 1
    offset = longest.start
    log.debug(f"BCH bound {delta} from run at {offset} over cosets {sorted(longest.cosets)}")

    if hartmann_tzeng_search is None:
        hartmann_tzeng_search = settings.HARTMANN_TZENG
    certified = delta
    if hartmann_tzeng_search and delta > 2:
        certified = hartmann_tzeng(n, set(flatten_cosets(cosets)), runs, delta)
    return delta, offset, certified
