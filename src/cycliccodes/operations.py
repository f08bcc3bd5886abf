import logging

import galois

from .code import CyclicCode
from .constructors import cyclic_code
from .cosets import complement_cosets, defining_set, dual_defining_set
from .errors import CodeArgumentError, ConstructionError

log = logging.getLogger(__name__)


def _require_compatible(C1: CyclicCode, C2: CyclicCode, action: str) -> None:
    if C1.base_field is not C2.base_field or C1.n != C2.n:
        raise CodeArgumentError(f"Cannot {action} two codes over different base fields or lengths: "
                                f"GF({C1.q}) n={C1.n} vs GF({C2.q}) n={C2.n}.")


def _from_def_set(q: int, n: int, def_set) -> CyclicCode:
    return cyclic_code(q, n, defining_set(sorted(def_set), q, n, flatten=False))


def complement(C: CyclicCode) -> CyclicCode:
    """The cyclic code whose cosets are the complement of C's."""
    D = cyclic_code(C.q, C.n, complement_cosets(C.q, C.n, C.cosets))
    one = galois.Poly.One(C.splitting_field)
    if C.h != D.g or D.e != one - C.e:
        raise ConstructionError("Error constructing the complement cyclic code.")
    return D


def intersection(C1: CyclicCode, C2: CyclicCode) -> CyclicCode:
    """C1 ∩ C2: generator lcm(g1, g2), defining set T1 ∪ T2."""
    _require_compatible(C1, C2, "intersect")
    return _from_def_set(C1.q, C1.n, set(C1.defining_set) | set(C2.defining_set))


def code_sum(C1: CyclicCode, C2: CyclicCode) -> CyclicCode:
    """C1 + C2: generator gcd(g1, g2), defining set T1 ∩ T2."""
    _require_compatible(C1, C2, "add")
    def_set = set(C1.defining_set) & set(C2.defining_set)
    if not def_set:
        raise CodeArgumentError("Addition of codes has empty defining set.")
    return _from_def_set(C1.q, C1.n, def_set)


def is_subcode(C1: CyclicCode, C2: CyclicCode) -> bool:
    """C1 ⊆ C2 iff g2 | g1 iff T2 ⊆ T1."""
    _require_compatible(C1, C2, "compare")
    return set(C2.defining_set) <= set(C1.defining_set)


def dual(C: CyclicCode) -> CyclicCode:
    D = _from_def_set(C.q, C.n, dual_defining_set(C.defining_set, C.n))
    log.debug(f"Dual of the [{C.n}, {C.k}] code has defining set {D.defining_set}")
    if D.k != C.n - C.k:
        raise ConstructionError(f"Dual has dimension {D.k}, expected {C.n - C.k}.")
    return D


def is_self_dual(C: CyclicCode) -> bool:
    return 2 * C.k == C.n and C == dual(C)


def is_self_orthogonal(C: CyclicCode) -> bool:
    return 2 * C.k <= C.n and C <= dual(C)
