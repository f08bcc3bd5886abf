import logging
from typing import List, Optional, Tuple

import numpy as np
import galois

from .errors import DomainError

log = logging.getLogger(__name__)


def generator_matrix(n: int, k: int, g: galois.Poly) -> galois.FieldArray:
    """
    k x n matrix whose i-th row is the coefficient vector of g (constant
    term first) shifted right by i positions.
    """
    coeffs = g.coeffs[::-1]
    width = coeffs.size
    if k + width - 1 > n:
        raise DomainError(f"Too many coefficients ({width}) for {k} shifts in a length {n} generator matrix")
    G = g.field.Zeros((k, n))
    for i in range(k):
        G[i, i:i + width] = coeffs
    return G


def is_zero(M: galois.FieldArray) -> bool:
    return not np.count_nonzero(M)


def row_reduce(M: galois.FieldArray) -> Tuple[galois.FieldArray, List[int]]:
    """
    Reduced row echelon form (row operations and row swaps only, via galois)
    and its pivot columns.
    """
    R = M.row_reduce()
    nonzero = np.count_nonzero(R.view(np.ndarray), axis=1) > 0
    # the leading nonzero entry of every nonzero row is its pivot
    pivots = (R[nonzero] != 0).argmax(axis=1)
    return R, [int(j) for j in pivots]


def rank(M: galois.FieldArray) -> int:
    return int(np.linalg.matrix_rank(M))


def standard_form(G: galois.FieldArray) -> Tuple[galois.FieldArray, galois.FieldArray, Optional[galois.FieldArray], int]:
    """
    Bring G to [I_k | A] with row operations only.

    Returns
    -------
    G_stand
        The reduced k x n matrix.
    H_stand
        [-A^T | I_{n-k}], the parity-check matrix of G_stand.
    P
        ``None`` when the pivots already sit in the first k columns.
        Otherwise the n x n permutation with G_stand = R @ P, where R is
        the row-reduced G, so R = G_stand @ P.T.
    rank
        Number of pivots, i.e. the dimension k.
    """
    field = type(G)
    n = G.shape[1]
    R, pivots = row_reduce(G)
    k = len(pivots)
    R = R[:k]
    if pivots == list(range(k)):
        P = None
        G_stand = R
    else:
        order = pivots + [c for c in range(n) if c not in pivots]
        log.debug(f"Pivot columns {pivots} are not leading, permuting to {order}")
        P = field.Zeros((n, n))
        for new, old in enumerate(order):
            P[old, new] = 1
        G_stand = R @ P
    H_stand = field.Zeros((n - k, n))
    H_stand[:, :k] = -G_stand[:, k:].T
    H_stand[:, k:] = field.Identity(n - k)
    return G_stand, H_stand, P, k
