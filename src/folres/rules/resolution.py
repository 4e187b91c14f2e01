"""Binary resolution."""

from dataclasses import dataclass
from typing import List

from folres.core.logic import Pred, sort_key
from folres.core.unification import Unifier, mgu_terms
from folres.nf.clause import Clause
from folres.nf.index import PredicateIndex
from .base import Rule, RuleApplication, classify


@dataclass(frozen=True)
class Resolvee:
    """One way to resolve clause ``a`` with clause ``b``.

    ``a_atom`` occurs in ``a`` with polarity ``a_positive`` and ``b_atom``
    occurs in ``b`` with the opposite polarity; ``unifier`` makes the two
    atoms equal.
    """
    a: Clause
    b: Clause
    a_atom: Pred
    b_atom: Pred
    a_positive: bool
    unifier: Unifier

    def resolve(self) -> Clause:
        """The resolvent, before classification."""
        if self.a_positive:
            pos = self.a.pos.remove(self.a_atom).union(self.b.pos)
            neg = self.a.neg.union(self.b.neg.remove(self.b_atom))
        else:
            pos = self.a.pos.union(self.b.pos.remove(self.b_atom))
            neg = self.a.neg.remove(self.a_atom).union(self.b.neg)
        return Clause(pos, neg).substitute(self.unifier)


def _unify_under(a: Clause, b: Clause, a_side: PredicateIndex, b_side: PredicateIndex,
                 a_positive: bool, found: List[Resolvee]):
    for name in sorted(a_side.names()):
        if not b_side.has_name(name):
            continue
        for a_args in sorted(a_side.get(name), key=sort_key):
            for b_args in sorted(b_side.get(name), key=sort_key):
                unifier = mgu_terms(a_args, b_args)
                if unifier is not None:
                    found.append(Resolvee(
                        a, b, Pred(name, a_args), Pred(name, b_args), a_positive, unifier))


def find_resolvees(a: Clause, b: Clause) -> List[Resolvee]:
    """All complementary atom pairs of ``a`` and ``b`` that unify."""
    found: List[Resolvee] = []
    _unify_under(a, b, a.pos, b.neg, True, found)
    _unify_under(a, b, a.neg, b.pos, False, found)
    return found


class ResolutionRule(Rule):
    """Binary resolution without factoring."""

    @property
    def name(self) -> str:
        return "resolution"

    def apply(self, first: Clause, second: Clause) -> List[RuleApplication]:
        applications = []
        for resolvee in find_resolvees(first, second):
            clause, outcome = classify(resolvee.resolve())
            applications.append(RuleApplication(
                rule_name=self.name,
                parents=(first, second),
                clause=clause,
                outcome=outcome,
                metadata={'resolvee': resolvee},
            ))
        return applications
