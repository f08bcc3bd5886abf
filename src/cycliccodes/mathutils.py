import functools
import logging
from math import gcd
from typing import List, Tuple, Type

import numpy as np
import galois
from sympy import factorint, isprime
from sympy.ntheory import is_quad_residue

from .errors import ConstructionError, DomainError

log = logging.getLogger(__name__)


def order(q: int, p: int) -> int:
    """
    Multiplicative order of q modulo p: smallest k>0 with q^k ≡ 1 (mod p).
    Raises DomainError if no order exists, i.e. gcd(q, p) != 1.
    """
    if p <= 0:
        raise DomainError("p must be positive")
    if p == 1:
        return 1
    tx = q % p
    for k in range(1, p + 1):
        if tx == 1:
            return k
        tx = (tx * q) % p
    raise DomainError(f"No multiplicative order for q={q} mod p={p}")


def require_coprime(q: int, n: int) -> None:
    if gcd(q, n) != 1:
        raise DomainError(f"q-cyclotomic cosets mod n need gcd(q, n) = 1, got q={q}, n={n}")


def prime_power(q: int) -> Tuple[int, int]:
    """Split a field order q into (p, t) with q = p^t."""
    if q <= 1:
        raise DomainError(f"There is no finite field of order {q}.")
    factors = factorint(q)
    if len(factors) != 1:
        raise DomainError(f"There is no finite field of order {q}.")
    (p, t), = factors.items()
    return p, t


@functools.lru_cache(maxsize=None)
def extension_field(p: int, degree: int) -> Type[galois.FieldArray]:
    """GF(p^degree), built once per process and shared read-only afterwards."""
    log.debug(f"Building GF({p}^{degree})")
    return galois.GF(p ** degree)


@functools.lru_cache(maxsize=None)
def _subfield_generator(small: Type[galois.FieldArray], big: Type[galois.FieldArray]) -> galois.FieldArray:
    """Image in ``big`` of the polynomial-basis generator of ``small``."""
    if big.degree % small.degree or big.characteristic != small.characteristic:
        raise DomainError(f"{small.name} is not a subfield of {big.name}")
    coeffs = [int(c) for c in small.irreducible_poly.coeffs]
    roots = galois.Poly(coeffs, field=big).roots()
    if not roots.size:
        raise ConstructionError(f"No root of {small.irreducible_poly} in {big.name}")
    return roots[0]


def embed(values: galois.FieldArray, field: Type[galois.FieldArray]) -> galois.FieldArray:
    """Map an array over a subfield into ``field``."""
    small = type(values)
    if small is field:
        return values
    if small.degree == 1:
        return field(values.view(np.ndarray))
    gamma = _subfield_generator(small, field)
    powers = gamma ** np.arange(small.degree - 1, -1, -1)
    vectors = field(values.vector().view(np.ndarray))
    return vectors @ powers


def restrict(values: galois.FieldArray, prime_field: Type[galois.FieldArray]) -> galois.FieldArray:
    """
    Map an array over an extension back to its prime field.
    Raises ConstructionError if some entry is not in the prime field.
    """
    if type(values) is prime_field:
        return values
    raw = values.view(np.ndarray)
    if np.any(raw >= prime_field.order):
        raise ConstructionError(f"Entries are not defined over {prime_field.name}")
    return prime_field(raw)


def embed_poly(poly: galois.Poly, field: Type[galois.FieldArray]) -> galois.Poly:
    return galois.Poly(embed(poly.coeffs, field))


def hamming_weight(vector) -> int:
    return int(np.count_nonzero(vector))


def quadratic_residues(q: int, n: int) -> List[int]:
    """
    Nonzero quadratic residues mod an odd prime n, for which q is a residue too.
    That makes the residues a union of q-cyclotomic cosets.
    """
    if n <= 2 or not isprime(n):
        raise DomainError(f"Quadratic residue codes need an odd prime length, got n={n}")
    require_coprime(q, n)
    if not is_quad_residue(q, n):
        raise DomainError(f"q={q} is not a quadratic residue mod {n}")
    return sorted({(i * i) % n for i in range(1, n)})
