"""Skolemization of quantified formulas.

``skolemise`` removes all quantifiers from a formula while preserving
satisfiability:

1. Quantifiers whose variable does not occur in their body are dropped.
2. Negations are pushed inwards (De Morgan's laws, also over quantifiers).
3. The formula is brought into prenex form.
4. Every existential variable is replaced by a Skolem function of the
   universal variables in front of it.
5. The universal quantifiers are dropped; their variables stay free and are
   read as implicitly universal by resolution.

Bound variable names are assumed to be unique within the formula, which is
what the parser guarantees. The Skolem function for an existential variable
reuses the variable's name.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from folres.core.logic import (
    Formula, Var, Fun, Top, Bottom, And, Or, Not, All, Some,
    free_variables, is_quantifier_free,
)
from folres.core.unification import Unifier


logger = logging.getLogger(__name__)

UNIVERSAL = "all"
EXISTENTIAL = "some"

Quantifier = Tuple[str, int]


def drop_unused_quantifiers(formula: Formula) -> Formula:
    if isinstance(formula, And):
        return And(drop_unused_quantifiers(formula.left), drop_unused_quantifiers(formula.right))
    if isinstance(formula, Or):
        return Or(drop_unused_quantifiers(formula.left), drop_unused_quantifiers(formula.right))
    if isinstance(formula, Not):
        return Not(drop_unused_quantifiers(formula.body))
    if isinstance(formula, (All, Some)):
        body = drop_unused_quantifiers(formula.body)
        if formula.name in free_variables(body):
            return type(formula)(formula.name, body)
        return body
    return formula


def push_negations(formula: Formula, negated: bool = False) -> Formula:
    """Negation normal form: ``Not`` only directly above atoms."""
    if isinstance(formula, Not):
        return push_negations(formula.body, not negated)
    if isinstance(formula, And):
        connective = Or if negated else And
        return connective(push_negations(formula.left, negated), push_negations(formula.right, negated))
    if isinstance(formula, Or):
        connective = And if negated else Or
        return connective(push_negations(formula.left, negated), push_negations(formula.right, negated))
    if isinstance(formula, All):
        quantifier = Some if negated else All
        return quantifier(formula.name, push_negations(formula.body, negated))
    if isinstance(formula, Some):
        quantifier = All if negated else Some
        return quantifier(formula.name, push_negations(formula.body, negated))
    if isinstance(formula, Top):
        return Bottom() if negated else formula
    if isinstance(formula, Bottom):
        return Top() if negated else formula
    return Not(formula) if negated else formula


@dataclass(frozen=True)
class PrenexForm:
    """A quantifier prefix, outermost first, followed by a quantifier-free matrix."""
    prefix: Tuple[Quantifier, ...]
    matrix: Formula

    @classmethod
    def from_nnf(cls, formula: Formula) -> 'PrenexForm':
        if is_quantifier_free(formula):
            return cls((), formula)
        if isinstance(formula, And):
            return cls.from_nnf(formula.left).conjunct(cls.from_nnf(formula.right))
        if isinstance(formula, Or):
            return cls.from_nnf(formula.left).disjunct(cls.from_nnf(formula.right))
        if isinstance(formula, All):
            inner = cls.from_nnf(formula.body)
            return cls(((UNIVERSAL, formula.name),) + inner.prefix, inner.matrix)
        if isinstance(formula, Some):
            inner = cls.from_nnf(formula.body)
            return cls(((EXISTENTIAL, formula.name),) + inner.prefix, inner.matrix)
        # Negated quantifiers do not survive push_negations.
        return cls((), formula)

    def is_skolem_form(self) -> bool:
        """True when the prefix holds no existential quantifier."""
        return all(kind == UNIVERSAL for kind, _ in self.prefix)

    def conjunct(self, other: 'PrenexForm') -> 'PrenexForm':
        first, second = self._order(other)
        return PrenexForm(first.prefix + second.prefix, And(first.matrix, second.matrix))

    def disjunct(self, other: 'PrenexForm') -> 'PrenexForm':
        first, second = self._order(other)
        return PrenexForm(first.prefix + second.prefix, Or(first.matrix, second.matrix))

    def _order(self, other: 'PrenexForm'):
        # Existentials of the other side must not end up behind our
        # universals, or their Skolem functions take needless arguments.
        if self.is_skolem_form() and not other.is_skolem_form():
            return other, self
        return self, other

    def skolemise(self) -> Formula:
        universals: List[int] = []
        matrix = self.matrix
        for kind, name in self.prefix:
            if kind == UNIVERSAL:
                universals.append(name)
            else:
                function = Fun(name, tuple(Var(u) for u in universals))
                matrix = Unifier.singleton(name, function).apply(matrix)
        return matrix


def prenex(formula: Formula) -> PrenexForm:
    formula = drop_unused_quantifiers(formula)
    formula = push_negations(formula)
    return PrenexForm.from_nnf(formula)


def skolemise(formula: Formula) -> Formula:
    """Equisatisfiable quantifier-free version of ``formula``."""
    form = prenex(formula)
    logger.debug("Prenex prefix has %d quantifiers", len(form.prefix))
    return form.skolemise()
