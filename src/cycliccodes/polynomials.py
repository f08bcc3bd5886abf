import logging
from typing import Iterable, Type

import galois

from .errors import ConstructionError

log = logging.getLogger(__name__)


def x_n_minus_one(field: Type[galois.FieldArray], n: int) -> galois.Poly:
    x = galois.Poly.Identity(field)
    return x ** n - galois.Poly.One(field)


def linear_factor(root: galois.FieldArray) -> galois.Poly:
    """The monic polynomial x - root."""
    coeffs = type(root)([1, 0])
    coeffs[1] = -root
    return galois.Poly(coeffs)


def generator_polynomial(beta: galois.FieldArray, def_set: Iterable[int]) -> galois.Poly:
    """Product of (x - beta^i) over i in the defining set."""
    field = type(beta)
    g = galois.Poly.One(field)
    for i in def_set:
        g *= linear_factor(beta ** i)
    return g


def reciprocal(poly: galois.Poly) -> galois.Poly:
    """x^deg * poly(1/x): the coefficient list read backwards."""
    return galois.Poly(poly.coeffs[::-1])


def monic(poly: galois.Poly) -> galois.Poly:
    return galois.Poly(poly.coeffs / poly.coeffs[0])


def idempotent(g: galois.Poly, h: galois.Poly, n: int) -> galois.Poly:
    """
    Generating idempotent e(x) = a(x) g(x) mod x^n - 1, where
    1 = a(x) g(x) + b(x) h(x) comes from the extended Euclidean algorithm.
    """
    d, a, _ = galois.egcd(g, h)
    if d != 1:
        raise ConstructionError(f"g and h are not coprime: gcd = {d}")
    e = (a * g) % x_n_minus_one(g.field, n)
    log.debug(f"Idempotent e(x) = {e}")
    return e


def is_idempotent(e: galois.Poly, n: int) -> bool:
    return (e * e) % x_n_minus_one(e.field, n) == e
