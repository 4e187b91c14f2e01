"""Equivalence-preserving CNF and DNF conversion."""

import logging

from folres.core.exceptions import QuantifiedFormulaError
from folres.core.logic import Formula, Top, Bottom, Pred, And, Or, Not, is_quantifier_free
from .clause import Clause, NormalForm
from .skolem import skolemise


logger = logging.getLogger(__name__)


def cnf(formula: Formula) -> NormalForm:
    """Clauses equivalent to a quantifier-free formula.

    The size of the result can be exponential in the size of the formula.
    """
    if isinstance(formula, Top):
        return NormalForm.empty()
    if isinstance(formula, Bottom):
        return NormalForm.single(Clause())
    if isinstance(formula, Pred):
        return NormalForm.single(Clause.unit(formula))
    if isinstance(formula, And):
        return cnf(formula.left).concat(cnf(formula.right))
    if isinstance(formula, Or):
        return cnf(formula.left).distribute(cnf(formula.right))
    if isinstance(formula, Not):
        return dnf(formula.body).invert()
    raise QuantifiedFormulaError(formula)


def dnf(formula: Formula) -> NormalForm:
    """Conjunctive terms whose disjunction is equivalent to ``formula``."""
    if isinstance(formula, Top):
        return NormalForm.single(Clause())
    if isinstance(formula, Bottom):
        return NormalForm.empty()
    if isinstance(formula, Pred):
        return NormalForm.single(Clause.unit(formula))
    if isinstance(formula, And):
        return dnf(formula.left).distribute(dnf(formula.right))
    if isinstance(formula, Or):
        return dnf(formula.left).concat(dnf(formula.right))
    if isinstance(formula, Not):
        return cnf(formula.body).invert()
    raise QuantifiedFormulaError(formula)


def equiv_cnf(formula: Formula) -> NormalForm:
    """CNF of ``formula``, Skolemizing it first if it has quantifiers."""
    if not is_quantifier_free(formula):
        formula = skolemise(formula)
    result = cnf(formula)
    logger.debug("Equivalence CNF has %d clauses", len(result))
    return result


def equiv_dnf(formula: Formula) -> NormalForm:
    if not is_quantifier_free(formula):
        raise QuantifiedFormulaError(formula)
    result = dnf(formula)
    logger.debug("Equivalence DNF has %d terms", len(result))
    return result
