import logging
from math import gcd
from typing import List, Optional, Sequence

import galois

from .code import CodeKind, CyclicCode
from .codegenerator import CyclicCodeGenerator
from .cosets import cosets_from_roots, defining_set
from .errors import CodeArgumentError, ConstructionError, DomainError
from .mathutils import embed_poly, quadratic_residues
from .matrices import generator_matrix, rank
from .polynomials import monic, x_n_minus_one

log = logging.getLogger(__name__)


def cyclic_code(q: int, n: int, cosets: Sequence[Sequence[int]], hartmann_tzeng: Optional[bool] = None) -> CyclicCode:
    """
    Cyclic code of length n over GF(q) whose defining set is the union of
    ``cosets``. Returns a BCH or Reed-Solomon record when the defining set
    is the coset closure of a consecutive range.
    """
    gen = CyclicCodeGenerator(q, n)
    return gen.build(cosets, hartmann_tzeng=hartmann_tzeng)


def bch_code(q: int, n: int, delta: int, b: int = 0, hartmann_tzeng: Optional[bool] = None) -> CyclicCode:
    """
    BCH code of length n over GF(q) with design distance ``delta`` and
    offset ``b``: zeros beta^b, ..., beta^(b + delta - 2) and their conjugates.

    The record keeps b (or an earlier start) and the longest delta whose
    range, taken from there, still gives back the same defining set.
    """
    if delta < 2:
        raise DomainError(f"BCH codes require delta >= 2 but the constructor was given delta = {delta}.")
    gen = CyclicCodeGenerator(q, n)
    cosets = gen.cosets(range(b, b + delta - 1))
    return gen.build(cosets, kind=CodeKind.BCH, design=(delta, b), hartmann_tzeng=hartmann_tzeng)


def reed_solomon_code(q: int, d: int, b: int = 0) -> CyclicCode:
    """Reed-Solomon code of length q - 1 over GF(q) with minimum distance d and offset b."""
    if d < 2:
        raise DomainError(f"Reed-Solomon codes require d >= 2 but the constructor was given d = {d}.")
    if q <= 4:
        raise DomainError(f"Invalid or too small parameters passed to the Reed-Solomon constructor: q = {q}.")
    n = q - 1
    if d - 1 >= n:
        raise DomainError(f"Distance d = {d} leaves no information symbols at length {n}.")
    gen = CyclicCodeGenerator(q, n)
    cosets = gen.cosets(range(b, b + d - 1))
    return gen.build(cosets, kind=CodeKind.REED_SOLOMON, design=(d, b))


def _root_exponents(gen: CyclicCodeGenerator, g_split: galois.Poly) -> List[int]:
    logs = {int(gen.beta ** i): i for i in range(gen.n)}
    return [logs[int(root)] for root in g_split.roots()]


def _rebuild(gen: CyclicCodeGenerator, g_split: galois.Poly) -> CyclicCode:
    code = gen.build(cosets_from_roots(_root_exponents(gen, g_split), gen.q, gen.n))
    if code.g != g_split:
        raise ConstructionError(f"Rebuilt generator {code.g} differs from the given {g_split}.")
    return code


def cyclic_code_from_polynomial(n: int, g: galois.Poly) -> CyclicCode:
    """
    Length-n cyclic code generated by g over GF(q), q being the order of
    g's coefficient field.
    """
    if n <= 1:
        raise DomainError(f"Invalid code parameters: n = {n}.")
    field = g.field
    _, remainder = divmod(x_n_minus_one(field, n), g)
    if remainder != 0:
        raise CodeArgumentError(f"Given polynomial does not divide x^{n} - 1.")

    gen = CyclicCodeGenerator(field.order, n)
    return _rebuild(gen, monic(embed_poly(g, gen.splitting_field)))


def quadratic_residue_code(q: int, n: int) -> CyclicCode:
    """Cyclic code whose zeros are beta^r for the nonzero quadratic residues r mod n."""
    return cyclic_code(q, n, defining_set(quadratic_residues(q, n), q, n, flatten=False))


def bch_supercode(code: CyclicCode) -> CyclicCode:
    """The BCH code built from the certified (delta, b) of ``code``; it contains ``code``."""
    if code.kind is not CodeKind.CYCLIC:
        return code
    supercode = bch_code(code.q, code.n, code.design_distance, code.offset)
    if not code <= supercode:
        raise ConstructionError("Failed to create BCH supercode.")
    return supercode


def is_cyclic(G: galois.FieldArray, q: Optional[int] = None) -> Optional[CyclicCode]:
    """
    The cyclic code over GF(q) spanned by the rows of G, or None if that
    span is not such a code (with a proper, nontrivial generator polynomial).

    Parameters
    ----------
    G
        Matrix over GF(q) or over the splitting field of x^n - 1 over GF(q),
        as in the records of codes over GF(p^t) with t > 1.
    q
        Base field order (default: the order of G's field). Pass it for
        matrices over a splitting field, otherwise the span is read as a
        code over that larger field.
    """
    field = type(G)
    q = field.order if q is None else q
    G = G.copy()
    n = G.shape[1]
    if gcd(n, q) != 1:
        return None
    gen = CyclicCodeGenerator(q, n)
    if field is not gen.base_field and field is not gen.splitting_field:
        raise DomainError(f"A matrix over {field.name} holds no code over GF({q}) of length {n}")
    k = rank(G)
    if k == 0 or k == n:
        return None

    g = galois.Poly(G[0, ::-1])
    for row in G[1:]:
        g = galois.gcd(g, galois.Poly(row[::-1]))
    if g.degree == 0 or g.degree != n - k:
        return None
    if x_n_minus_one(field, n) % g != 0:
        return None

    stacked = field.Zeros((G.shape[0] + 1, n))
    stacked[:-1] = G
    for row in generator_matrix(n, k, g):
        stacked[-1] = row
        if rank(stacked) != k:
            return None

    g_split = monic(embed_poly(g, gen.splitting_field))
    exponents = sorted(_root_exponents(gen, g_split))
    # the zeros of a code over GF(q) are closed under x -> x^q
    if defining_set(exponents, q, n) != exponents:
        return None
    log.debug(f"Rows span the cyclic code generated by {g}")
    return _rebuild(gen, g_split)
