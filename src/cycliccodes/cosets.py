import logging
from typing import Dict, Iterable, List, Sequence, Union

from .errors import DomainError
from .mathutils import require_coprime

log = logging.getLogger(__name__)

Coset = List[int]


def cyclotomic_coset(x: int, q: int, n: int) -> Coset:
    """
    Orbit of x under multiplication by q modulo n, in first-visit order:
    [x, xq, xq^2, ...] (mod n), stopping just before it returns to x.
    """
    if n <= 1:
        raise DomainError(f"Cosets need n >= 2, got n={n}")
    require_coprime(q, n)
    start = x % n
    coset = [start]
    y = (start * q) % n
    while y != start:
        coset.append(y)
        y = (y * q) % n
    return coset


def defining_set(seeds: Iterable[int], q: int, n: int, flatten: bool = True) -> Union[List[int], List[Coset]]:
    """
    Union of the q-cyclotomic cosets of ``seeds`` modulo n.

    Seeds whose coset was already emitted are skipped. With ``flatten`` the
    result is the sorted list of residues, otherwise the list of cosets in
    the order their first seed appeared.
    """
    require_coprime(q, n)
    cosets: List[Coset] = []
    seen = set()
    for x in seeds:
        if x % n in seen:
            continue
        cx = cyclotomic_coset(x, q, n)
        seen.update(cx)
        cosets.append(cx)
    if flatten:
        return sorted(seen)
    return cosets


def flatten_cosets(cosets: Sequence[Sequence[int]]) -> List[int]:
    return sorted(r for coset in cosets for r in coset)


def all_cosets(q: int, n: int) -> List[Coset]:
    """Partition of {0, ..., n-1} into q-cyclotomic cosets, ordered by representative."""
    return defining_set(range(n), q, n, flatten=False)


def complement_cosets(q: int, n: int, cosets: Sequence[Sequence[int]]) -> List[Coset]:
    """The cosets of every residue not covered by ``cosets``."""
    covered = set(flatten_cosets(cosets))
    return defining_set((x for x in range(n) if x not in covered), q, n, flatten=False)


def representatives(cosets: Sequence[Sequence[int]]) -> List[int]:
    return sorted(min(coset) for coset in cosets)


def dual_defining_set(def_set: Iterable[int], n: int) -> List[int]:
    """Defining set of the dual of the length-n cyclic code with defining set ``def_set``."""
    zeros = set(def_set)
    return sorted((n - i) % n for i in range(n) if i not in zeros)


def cosets_from_roots(exponents: Iterable[int], q: int, n: int) -> List[Coset]:
    """
    Group the exponents of the roots of a polynomial into cosets.
    The exponents must already form a union of whole cosets.
    """
    exps = sorted(set(e % n for e in exponents))
    cosets = defining_set(exps, q, n, flatten=False)
    log.debug(f"Root exponents {exps} group into cosets {cosets}")
    if flatten_cosets(cosets) != exps:
        raise DomainError(f"Exponents {exps} are not a union of {q}-cyclotomic cosets mod {n}")
    return cosets


def coset_index(cosets: Sequence[Sequence[int]]) -> Dict[int, int]:
    """Map each residue to the position of the coset that contains it."""
    return {r: i for i, coset in enumerate(cosets) for r in coset}
