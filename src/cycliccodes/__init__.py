from .code import CodeKind, CyclicCode
from .constructors import (bch_code, bch_supercode, cyclic_code,
                           cyclic_code_from_polynomial, is_cyclic,
                           quadratic_residue_code, reed_solomon_code)
from .cosets import (all_cosets, complement_cosets, cyclotomic_coset,
                     defining_set, dual_defining_set)
from .errors import CodeArgumentError, CodeError, ConstructionError, DomainError
from .operations import (code_sum, complement, dual, intersection,
                         is_self_dual, is_self_orthogonal, is_subcode)
