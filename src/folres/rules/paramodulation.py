"""Substitution of equals for equals.

A unit clause ``l == r`` allows replacing occurrences of ``l`` by ``r``
(and of ``r`` by ``l``) in any other clause. A subterm ``s`` of the target
is an occurrence of ``l`` when the two unify; the unifier is then applied
to the whole target before rewriting. This is not full paramodulation:
variables of the target are never rewritten themselves, and only unit
equalities take part.
"""

from dataclasses import dataclass, field
from typing import List

from folres.core.logic import Term, Var, Fun, sort_key
from folres.core.unification import Unifier, mgu_terms
from folres.nf.clause import Clause
from .base import Rule, RuleApplication, classify


def replace_term(term: Term, old: Term, new: Term) -> Term:
    if term == old:
        return new
    if isinstance(term, Var):
        return term
    return Fun(term.name, tuple(replace_term(arg, old, new) for arg in term.args))


def subterms(clause: Clause) -> List[Term]:
    """Distinct non-variable subterms of the atoms of ``clause``, sorted."""
    found = set()
    stack = [arg for atom, _ in clause.literals() for arg in atom.args]
    while stack:
        term = stack.pop()
        if isinstance(term, Var) or term in found:
            continue
        found.add(term)
        stack.extend(term.args)
    return sorted(found, key=sort_key)


@dataclass(frozen=True)
class Substitutee:
    """Rewriting of ``target`` with the unit equality ``equation``.

    ``lhs`` and ``rhs`` are the equation sides, oriented; ``unifier``
    makes ``lhs`` match a subterm of the target.
    """
    equation: Clause
    target: Clause
    lhs: Term
    rhs: Term
    unifier: Unifier = field(default_factory=Unifier)

    @property
    def old(self) -> Term:
        return self.unifier.apply(self.lhs)

    @property
    def new(self) -> Term:
        return self.unifier.apply(self.rhs)

    def substitute(self) -> Clause:
        old, new = self.old, self.new

        def rewrite(args):
            return tuple(replace_term(arg, old, new) for arg in args)
        target = self.unifier.apply(self.target)
        return Clause(target.pos.map_args(rewrite), target.neg.map_args(rewrite))


def find_substitutees(equation: Clause, target: Clause) -> List[Substitutee]:
    """Rewrites of ``target`` by ``equation`` that change it."""
    if not equation.is_unit_equality() or equation == target:
        return []
    (atom, _), = equation.literals()
    left, right = atom.args
    candidates = subterms(target)
    found = []
    for lhs, rhs in ((left, right), (right, left)):
        for subterm in candidates:
            unifier = mgu_terms((subterm,), (lhs,))
            if unifier is None:
                continue
            substitutee = Substitutee(equation, target, lhs, rhs, unifier)
            if substitutee.substitute() != target:
                found.append(substitutee)
    return found


class SubstitutionRule(Rule):
    """Rewrites clauses with unit equalities, in either direction."""

    @property
    def name(self) -> str:
        return "substitution"

    def apply(self, first: Clause, second: Clause) -> List[RuleApplication]:
        applications = []
        for equation, target in ((first, second), (second, first)):
            for substitutee in find_substitutees(equation, target):
                clause, outcome = classify(substitutee.substitute())
                applications.append(RuleApplication(
                    rule_name=self.name,
                    parents=(equation, target),
                    clause=clause,
                    outcome=outcome,
                    metadata={'substitutee': substitutee},
                ))
        return applications
