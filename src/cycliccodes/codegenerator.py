import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np
import galois

from . import settings
from .bounds import bound, consecutive_runs
from .code import CodeKind, CyclicCode
from .cosets import (complement_cosets, cyclotomic_coset, defining_set,
                     flatten_cosets, representatives)
from .errors import ConstructionError, DomainError
from .mathutils import (extension_field, hamming_weight, order, prime_power,
                        require_coprime, restrict)
from .matrices import generator_matrix, is_zero, standard_form
from .polynomials import (generator_polynomial, idempotent, is_idempotent,
                          reciprocal, x_n_minus_one)

log = logging.getLogger(__name__)


class CyclicCodeGenerator:
    """
    Builds the splitting field and the primitive n-th root of unity for
    cyclic codes of length n over GF(q), then turns a list of q-cyclotomic
    cosets into a verified CyclicCode record.
    """
    def __init__(self, q: int, n: int):
        if not all(isinstance(v, (int, np.integer)) and v > 1 for v in (q, n)):
            raise DomainError(f"Invalid code parameters: q = {q}, n = {n}.")
        self.p, self.t = prime_power(int(q))
        require_coprime(q, n)
        self.q, self.n = int(q), int(n)
        # degree of the splitting field over GF(q)
        self.m = order(self.q, self.n)
        self.base_field = extension_field(self.p, self.t)
        self.splitting_field = extension_field(self.p, self.t * self.m)
        alpha = self.splitting_field.primitive_element
        self.beta = alpha ** ((self.splitting_field.order - 1) // self.n)
        log.info(f"Initialized cyclic code gen q={q}, n={n}, m={self.m}, splitting field {self.splitting_field.name}")

    def cosets(self, seeds) -> List[List[int]]:
        return defining_set(seeds, self.q, self.n, flatten=False)

    def _check_cosets(self, cosets: Sequence[Sequence[int]]) -> List[List[int]]:
        cosets = [[r % self.n for r in coset] for coset in cosets]
        for coset in cosets:
            if not coset or sorted(coset) != sorted(cyclotomic_coset(coset[0], self.q, self.n)):
                raise DomainError(f"{coset} is not a {self.q}-cyclotomic coset mod {self.n}")
        def_set = flatten_cosets(cosets)
        if len(set(def_set)) != len(def_set):
            raise DomainError(f"Cosets overlap: {cosets}")
        if not def_set:
            raise DomainError("The defining set is empty; that is the full space, not a cyclic code here")
        if len(def_set) == self.n:
            raise DomainError("The defining set covers every residue; that is the zero code")
        return cosets

    def _orient_parity_check(self, H: galois.FieldArray, k: int) -> galois.FieldArray:
        expected = (self.n - k, self.n)
        if H.shape == expected:
            return H
        if H.T.shape == expected:
            log.warning(f"Parity-check matrix came out as {H.shape}, using its transpose")
            return H.T
        raise ConstructionError(f"Parity-check matrix has shape {H.shape}, expected {expected}")

    def verify(self, g, h, e, G, H, G_stand, P, rank, k) -> galois.FieldArray:
        """
        Check every invariant of a construction and return H in (n-k) x n
        orientation. Raises ConstructionError on the first failure.
        """
        xn1 = x_n_minus_one(self.splitting_field, self.n)
        quotient, remainder = divmod(xn1, g)
        if remainder != 0:
            raise ConstructionError(f"Incorrect generator polynomial, does not divide x^{self.n} - 1.")
        if quotient != h:
            raise ConstructionError(f"Division of x^{self.n} - 1 by the generator polynomial does not "
                                    f"yield the constructed parity check polynomial.")
        if settings.VERIFY_IDEMPOTENT and not is_idempotent(e, self.n):
            raise ConstructionError("Idempotent polynomial is not an idempotent.")
        H = self._orient_parity_check(H, k)
        if not is_zero(G @ H.T):
            raise ConstructionError("Generator and parity check matrices are not transpose orthogonal.")
        if rank != k:
            raise ConstructionError(f"Standard form has rank {rank}, expected dimension {k}.")
        if P is not None or not is_zero(G_stand @ H.T):
            raise ConstructionError("Column swap appeared in the standard form.")
        return H

    def describe(self, cosets: Sequence[Sequence[int]],
                 requested: Optional[Tuple[int, int]] = None) -> Optional[Tuple[int, int]]:
        """
        BCH description (delta, b) of the defining set: a run of consecutive
        residues b, ..., b + delta - 2 whose cosets give back exactly the
        defining set. None if there is no such run.

        Runs that hold the ``requested`` (delta, b) range come first, then
        runs that do not wrap past n - 1, then longer runs, then lower starts.
        """
        def_set = flatten_cosets(cosets)
        wanted = set()
        if requested is not None:
            delta, b = requested
            wanted = {(b + i) % self.n for i in range(delta - 1)}
        runs = [run for run in consecutive_runs(self.n, cosets)
                if defining_set(run.residues, self.q, self.n) == def_set]
        if not runs:
            return None
        run = min(runs, key=lambda run: (not wanted <= set(run.residues), run.wraps, -run.count, run.start))
        return run.count + 1, run.start

    def classify(self, description: Optional[Tuple[int, int]]) -> CodeKind:
        if description is None:
            return CodeKind.CYCLIC
        if self.m == 1 and self.n == self.q - 1:
            return CodeKind.REED_SOLOMON
        return CodeKind.BCH

    def build(self, cosets: Sequence[Sequence[int]], kind: Optional[CodeKind] = None,
              design: Optional[Tuple[int, int]] = None, hartmann_tzeng: Optional[bool] = None) -> CyclicCode:
        """
        Run the whole pipeline for the given cosets.

        With ``kind=None`` the most specific kind is detected. A BCH or
        Reed-Solomon ``kind`` is checked against the cosets instead, and
        ``design`` is the requested (delta, b): the record keeps the
        description that holds that range, so a narrow-sense request stays
        narrow-sense. The certified lower bound may still come from a longer
        run elsewhere in the defining set.
        """
        cosets = self._check_cosets(cosets)
        def_set = flatten_cosets(cosets)
        n = self.n
        k = n - len(def_set)
        log.debug(f"Cosets {cosets}, defining set {def_set}, k={k}")

        g = generator_polynomial(self.beta, def_set)
        h = generator_polynomial(self.beta, flatten_cosets(complement_cosets(self.q, n, cosets)))
        e = idempotent(g, h, n)
        log.debug(f"g(x) = {g}, h(x) = {h}")

        G = generator_matrix(n, k, g)
        H = generator_matrix(n, n - k, reciprocal(h))
        G_stand, H_stand, P, rank = standard_form(G)
        # HT is the certified lower bound, the weight of g an upper bound
        delta, b, ht = bound(n, cosets, hartmann_tzeng)
        upper = hamming_weight(G[0])

        H = self.verify(g, h, e, G, H, G_stand, P, rank, k)

        base_field = self.base_field
        if self.t == 1:
            G, H, G_stand, H_stand = (restrict(M, base_field) for M in (G, H, G_stand, H_stand))
        for M in (G, H, G_stand, H_stand):
            M.flags.writeable = False

        description = self.describe(cosets, design)
        detected = self.classify(description)
        if kind is not None and detected is not kind and detected is not CodeKind.REED_SOLOMON:
            raise ConstructionError(f"Cosets {cosets} do not define a {kind.value} code of length {n} over GF({self.q})")
        kind = detected
        if description is not None:
            delta, b = description

        d = None
        if kind is CodeKind.REED_SOLOMON:
            d = n - k + 1
            delta = ht = upper = d
        log.info(f"Built {kind.value} code [{n}, {k}] over GF({self.q}): delta={delta}, b={b}, HT={ht}, ub={upper}")

        return CyclicCode(
            kind=kind,
            base_field=base_field,
            splitting_field=self.splitting_field,
            beta=self.beta,
            n=n,
            k=k,
            d=d,
            offset=b,
            design_distance=delta,
            ht_bound=ht,
            upper_bound=upper,
            cosets=tuple(tuple(c) for c in cosets),
            coset_reps=tuple(representatives(cosets)),
            defining_set=tuple(def_set),
            g=g,
            h=h,
            e=e,
            G=G,
            H=H,
            G_stand=G_stand,
            H_stand=H_stand,
            P=P,
        )
