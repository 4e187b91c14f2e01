"""Tseitin conversion to conjunctive normal form.

Every distinct subformula is named by a fresh definition atom whose
arguments are the free variables of the subformula. The defining clauses
state that the atom is equivalent to the connective applied to the atoms of
the direct subformulas, and the atom of the whole formula is asserted. The
result is linear in the size of the input and equisatisfiable with it, but
not equivalent.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

from folres.core.exceptions import QuantifiedFormulaError
from folres.core.logic import (
    Formula, Var, Top, Bottom, Pred, And, Or, Not,
    free_variables, is_quantifier_free, next_free_name,
)
from folres.core.names import NameAllocator
from .clause import Clause, NormalForm
from .equiv import cnf
from .skolem import skolemise


logger = logging.getLogger(__name__)

IDENT = "ident"
CONJ = "conj"
DISJ = "disj"
INV = "inv"


def fold_constants(formula: Formula) -> Formula:
    """Remove ``Top`` and ``Bottom`` unless the whole formula is constant."""
    if isinstance(formula, And):
        left = fold_constants(formula.left)
        right = fold_constants(formula.right)
        if isinstance(left, Bottom) or isinstance(right, Bottom):
            return Bottom()
        if isinstance(left, Top):
            return right
        if isinstance(right, Top):
            return left
        return And(left, right)
    if isinstance(formula, Or):
        left = fold_constants(formula.left)
        right = fold_constants(formula.right)
        if isinstance(left, Top) or isinstance(right, Top):
            return Top()
        if isinstance(left, Bottom):
            return right
        if isinstance(right, Bottom):
            return left
        return Or(left, right)
    if isinstance(formula, Not):
        body = fold_constants(formula.body)
        if isinstance(body, Top):
            return Bottom()
        if isinstance(body, Bottom):
            return Top()
        return Not(body)
    return formula


@dataclass(frozen=True)
class Definition:
    atom: Pred
    operator: str
    operands: Tuple[Pred, ...] = ()

    def clauses(self) -> Iterator[Clause]:
        x = self.atom
        if self.operator == CONJ:
            p, q = self.operands
            # X <-> P & Q
            yield Clause.of(pos=[p], neg=[x])
            yield Clause.of(pos=[q], neg=[x])
            yield Clause.of(pos=[x], neg=[p, q])
        elif self.operator == DISJ:
            p, q = self.operands
            # X <-> P | Q
            yield Clause.of(pos=[x], neg=[p])
            yield Clause.of(pos=[x], neg=[q])
            yield Clause.of(pos=[p, q], neg=[x])
        elif self.operator == INV:
            p, = self.operands
            # X <-> !P
            yield Clause.of(pos=[x, p])
            yield Clause.of(neg=[x, p])


class Tseitin:
    """Assigns definition atoms to the subformulas of constant-free formulas."""

    def __init__(self, allocator: NameAllocator):
        self.allocator = allocator
        self.definitions: Dict[Formula, Definition] = {}

    def assign(self, formula: Formula) -> Pred:
        known = self.definitions.get(formula)
        if known is not None:
            return known.atom

        if isinstance(formula, Pred):
            definition = Definition(formula, IDENT)
        elif isinstance(formula, (And, Or)):
            operands = (self.assign(formula.left), self.assign(formula.right))
            operator = CONJ if isinstance(formula, And) else DISJ
            definition = Definition(self._fresh_atom(formula), operator, operands)
        elif isinstance(formula, Not):
            operands = (self.assign(formula.body),)
            definition = Definition(self._fresh_atom(formula), INV, operands)
        elif isinstance(formula, (Top, Bottom)):
            raise ValueError("Constants must be folded before naming subformulas")
        else:
            raise QuantifiedFormulaError(formula)

        self.definitions[formula] = definition
        return definition.atom

    def _fresh_atom(self, formula: Formula) -> Pred:
        args = tuple(Var(name) for name in sorted(free_variables(formula)))
        return Pred(self.allocator.fresh(), args)

    def clauses(self) -> Iterator[Clause]:
        for definition in self.definitions.values():
            yield from definition.clauses()


def tseitin_cnf(formula: Formula, allocator: Optional[NameAllocator] = None) -> NormalForm:
    """Equisatisfiable CNF of ``formula``, Skolemizing it first if needed.

    Definition atoms draw their names from ``allocator``; without one, names
    start right after the largest name used in the formula.
    """
    if not is_quantifier_free(formula):
        formula = skolemise(formula)

    formula = fold_constants(formula)
    if isinstance(formula, (Top, Bottom)):
        return cnf(formula)

    if allocator is None:
        allocator = NameAllocator()
    allocator.reserve(next_free_name(formula))

    tseitin = Tseitin(allocator)
    top = tseitin.assign(formula)
    clauses = set(tseitin.clauses())
    clauses.add(Clause.unit(top))

    result = NormalForm(clauses).retain_only_clean()
    logger.debug("Tseitin CNF has %d clauses for %d subformulas",
                 len(result), len(tseitin.definitions))
    return result


def tseitin_dnf(formula: Formula, allocator: Optional[NameAllocator] = None) -> NormalForm:
    if not is_quantifier_free(formula):
        raise QuantifiedFormulaError(formula)
    return tseitin_cnf(Not(formula), allocator).invert()
