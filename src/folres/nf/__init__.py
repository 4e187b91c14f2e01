"""Conversion of formulas into clause sets."""

from .index import PredicateIndex
from .clause import Clause, NormalForm
from .equiv import cnf, dnf, equiv_cnf, equiv_dnf
from .tseitin import tseitin_cnf, tseitin_dnf, fold_constants
from .skolem import skolemise, prenex, PrenexForm

__all__ = [
    "PredicateIndex",
    "Clause", "NormalForm",
    "cnf", "dnf", "equiv_cnf", "equiv_dnf",
    "tseitin_cnf", "tseitin_dnf", "fold_constants",
    "skolemise", "prenex", "PrenexForm",
]
