class CodeError(Exception):
    """Base class for every error raised while building or combining codes."""


class DomainError(CodeError, ValueError):
    """Malformed parameters, rejected before any computation."""


class ConstructionError(CodeError, RuntimeError):
    """An algebraic invariant failed in the middle of a construction."""


class CodeArgumentError(CodeError, ValueError):
    """Two code records cannot be combined, or a record lacks a property."""
