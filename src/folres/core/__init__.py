"""Core data structures: names, terms, formulas and unification."""

from .names import NameAllocator, NameTable
from .logic import (
    EQUALITY, TRUE, FALSE,
    Var, Fun, Term,
    Top, Bottom, Pred, And, Or, Not, All, Some, Formula,
    const, equals, implies, iff, xor, no, conjoin, disjoin,
    names, free_variables, next_free_name, is_quantifier_free, term_size,
)
from .unification import Unifier, MguFinder, mgu, mgu_terms
from .exceptions import (
    FolresError, UnifierIntegrityError, NotClauseError, QuantifiedFormulaError,
    ArityError, UnknownHeuristicError, ParseError, ScopeError,
)

__all__ = [
    # Names
    "NameAllocator", "NameTable",

    # Terms and formulas
    "EQUALITY", "TRUE", "FALSE",
    "Var", "Fun", "Term",
    "Top", "Bottom", "Pred", "And", "Or", "Not", "All", "Some", "Formula",
    "const", "equals", "implies", "iff", "xor", "no", "conjoin", "disjoin",
    "names", "free_variables", "next_free_name", "is_quantifier_free", "term_size",

    # Unification
    "Unifier", "MguFinder", "mgu", "mgu_terms",

    # Errors
    "FolresError", "UnifierIntegrityError", "NotClauseError", "QuantifiedFormulaError",
    "ArityError", "UnknownHeuristicError", "ParseError", "ScopeError",
]
