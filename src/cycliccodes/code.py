import enum
from dataclasses import dataclass
from typing import Optional, Tuple, Type

import numpy as np
import galois

from .errors import CodeArgumentError
from .polynomials import x_n_minus_one


class CodeKind(enum.Enum):
    CYCLIC = "cyclic"
    BCH = "BCH"
    REED_SOLOMON = "Reed-Solomon"


@dataclass(frozen=True, eq=False)
class CyclicCode:
    """
    A length-n cyclic code over GF(q), with every derived object computed
    once at construction.

    ``kind`` refines what is certified about the code: BCH records carry a
    meaningful offset and design distance, Reed-Solomon records also carry
    the exact minimum distance ``d``. ``d`` and ``P`` are ``None`` when
    unknown or not needed.
    """
    kind: CodeKind
    base_field: Type[galois.FieldArray]
    splitting_field: Type[galois.FieldArray]
    beta: galois.FieldArray
    n: int
    k: int
    d: Optional[int]
    offset: int
    design_distance: int
    ht_bound: int
    upper_bound: int
    cosets: Tuple[Tuple[int, ...], ...]
    coset_reps: Tuple[int, ...]
    defining_set: Tuple[int, ...]
    g: galois.Poly
    h: galois.Poly
    e: galois.Poly
    G: galois.FieldArray
    H: galois.FieldArray
    G_stand: galois.FieldArray
    H_stand: galois.FieldArray
    P: Optional[galois.FieldArray]

    # ------------------------------------------------------------------
    # accessors
    # ------------------------------------------------------------------

    @property
    def q(self) -> int:
        return self.base_field.order

    @property
    def polynomial_ring(self) -> Tuple[Type[galois.FieldArray], galois.Poly]:
        """Coefficient field and indeterminate x of the generator polynomial."""
        return self.splitting_field, galois.Poly.Identity(self.splitting_field)

    @property
    def primitive_root(self) -> galois.FieldArray:
        return self.beta

    @property
    def generator_polynomial(self) -> galois.Poly:
        return self.g

    @property
    def parity_check_polynomial(self) -> galois.Poly:
        return self.h

    @property
    def idempotent(self) -> galois.Poly:
        return self.e

    @property
    def generator_matrix(self) -> galois.FieldArray:
        return self.G

    @property
    def parity_check_matrix(self) -> galois.FieldArray:
        return self.H

    @property
    def standard_form(self) -> Tuple[galois.FieldArray, galois.FieldArray, Optional[galois.FieldArray]]:
        return self.G_stand, self.H_stand, self.P

    @property
    def bch_bound(self) -> int:
        return self.design_distance

    @property
    def minimum_distance(self) -> Optional[int]:
        return self.d

    @property
    def distance_bounds(self) -> Tuple[int, int]:
        if self.d is not None:
            return self.d, self.d
        return self.ht_bound, self.upper_bound

    @property
    def zeros(self) -> galois.FieldArray:
        return self.beta ** np.array(self.defining_set, dtype=int)

    @property
    def nonzeros(self) -> galois.FieldArray:
        zeros = set(self.defining_set)
        return self.beta ** np.array([i for i in range(self.n) if i not in zeros], dtype=int)

    # ------------------------------------------------------------------
    # predicates
    # ------------------------------------------------------------------

    def _require_bch(self, what: str) -> None:
        if self.kind is CodeKind.CYCLIC:
            raise CodeArgumentError(f"{what} is only defined for BCH and Reed-Solomon codes")

    def is_narrowsense(self) -> bool:
        self._require_bch("is_narrowsense")
        return self.offset == 0

    def is_primitive(self) -> bool:
        self._require_bch("is_primitive")
        return self.n == self.q - 1

    def is_antiprimitive(self) -> bool:
        self._require_bch("is_antiprimitive")
        return self.n == self.q + 1

    def is_reversible(self) -> bool:
        zeros = set(self.defining_set)
        return all((self.n - i) % self.n in zeros for i in zeros)

    def is_degenerate(self) -> bool:
        """True if h(x) divides x^r - 1 for some r < n."""
        for r in range(1, self.n):
            if x_n_minus_one(self.splitting_field, r) % self.h == 0:
                return True
        return False

    # ------------------------------------------------------------------
    # comparisons and algebra
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, CyclicCode):
            return NotImplemented
        return (self.base_field is other.base_field
                and self.n == other.n
                and self.defining_set == other.defining_set
                and self.splitting_field is other.splitting_field
                and int(self.beta) == int(other.beta))

    def __hash__(self):
        return hash((self.q, self.n, self.defining_set))

    def __le__(self, other):
        from .operations import is_subcode
        return is_subcode(self, other)

    def __and__(self, other):
        from .operations import intersection
        return intersection(self, other)

    def __add__(self, other):
        from .operations import code_sum
        return code_sum(self, other)

    def __repr__(self):
        dist = f"{self.d}" if self.d is not None else f">={self.ht_bound}"
        return f"[{self.n}, {self.k}, {dist}; {self.offset}]_{self.q} {self.kind.value} code"
