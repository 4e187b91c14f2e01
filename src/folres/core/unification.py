"""Unification of first-order terms.

The most general unifier is computed with the rewriting algorithm of
Martelli and Montanari: a set of equations is repeatedly simplified by
deleting trivial equations, eliminating solved variables, swapping
misoriented equations and decomposing function applications, until either
no equation is left or a clash is found.
"""

import logging
from typing import Dict, ItemsView, List, Optional, Sequence, Tuple

from .exceptions import UnifierIntegrityError
from .logic import (
    Term, Var, Fun, Top, Bottom, Pred, And, Or, Not, All, Some,
    free_variables, occurs,
)


logger = logging.getLogger(__name__)


class Unifier:
    """A substitution from variable names to terms.

    The mapping is kept idempotent: no bound name occurs in any of the
    terms, and every name is bound at most once. Adding a binding that would
    break this raises ``UnifierIntegrityError``, since applying a broken
    unifier would silently produce unsound resolvents.
    """

    def __init__(self, mapping: Optional[Dict[int, Term]] = None):
        self._mapping: Dict[int, Term] = {}
        for name, term in (mapping or {}).items():
            self.add(name, term)

    @classmethod
    def singleton(cls, name: int, term: Term) -> 'Unifier':
        return cls({name: term})

    def add(self, name: int, term: Term):
        """Bind ``name`` to ``term``, checking the unifier invariants."""
        if name in self._mapping:
            raise UnifierIntegrityError("name is already bound", name, term)
        if occurs(name, term):
            raise UnifierIntegrityError("binding is recursive", name, term)
        bound_in_term = free_variables(term) & self._mapping.keys()
        if bound_in_term:
            raise UnifierIntegrityError(
                f"term mentions bound names {sorted(bound_in_term)}", name, term)
        for other, value in self._mapping.items():
            if occurs(name, value):
                raise UnifierIntegrityError(
                    f"name occurs in the value bound to {other}", name, term)
        self._mapping[name] = term

    def chain(self, other: 'Unifier') -> 'Unifier':
        """Compose with ``other``: the result applies ``self``, then ``other``.

        Bindings of ``self`` are never overwritten.
        """
        mapping = {name: other.apply(term) for name, term in self._mapping.items()}
        for name, term in other.items():
            if name not in mapping:
                mapping[name] = term
        return Unifier(mapping)

    def apply(self, obj):
        """Apply the substitution to a term, formula, clause or tuple."""
        if not self._mapping:
            return obj
        if isinstance(obj, Var):
            return self._mapping.get(obj.name, obj)
        if isinstance(obj, Fun):
            return Fun(obj.name, tuple(self.apply(arg) for arg in obj.args))
        if isinstance(obj, Pred):
            return Pred(obj.name, tuple(self.apply(arg) for arg in obj.args))
        if isinstance(obj, tuple):
            return tuple(self.apply(item) for item in obj)
        if isinstance(obj, list):
            return [self.apply(item) for item in obj]
        if isinstance(obj, (Top, Bottom)):
            return obj
        if isinstance(obj, And):
            return And(self.apply(obj.left), self.apply(obj.right))
        if isinstance(obj, Or):
            return Or(self.apply(obj.left), self.apply(obj.right))
        if isinstance(obj, Not):
            return Not(self.apply(obj.body))
        if isinstance(obj, (All, Some)):
            # The quantifier shadows any binding of its own variable.
            inner = self.without(obj.name)
            return type(obj)(obj.name, inner.apply(obj.body))
        if hasattr(obj, 'substitute'):
            return obj.substitute(self)
        raise TypeError(f"Cannot apply unifier to {obj!r}")

    def without(self, name: int) -> 'Unifier':
        if name not in self._mapping:
            return self
        result = Unifier()
        result._mapping = {k: v for k, v in self._mapping.items() if k != name}
        return result

    def items(self) -> ItemsView[int, Term]:
        return self._mapping.items()

    def is_empty(self) -> bool:
        return not self._mapping

    def __getitem__(self, name: int) -> Term:
        return self._mapping[name]

    def __contains__(self, name: int) -> bool:
        return name in self._mapping

    def __len__(self) -> int:
        return len(self._mapping)

    def __eq__(self, other):
        if not isinstance(other, Unifier):
            return NotImplemented
        return self._mapping == other._mapping

    def __hash__(self):
        return hash(frozenset(self._mapping.items()))

    def __repr__(self):
        return f"Unifier({self._mapping!r})"

    def __str__(self):
        if not self._mapping:
            return "{}"
        items = [f":{name}: {term}" for name, term in sorted(self._mapping.items())]
        return "{" + ", ".join(items) + "}"


class MguFinder:
    """Solves one set of term equations.

    The finder is used once: construct it with the two term sequences and
    call ``run``.
    """

    def __init__(self, left: Sequence[Term], right: Sequence[Term]):
        if len(left) != len(right):
            raise ValueError(f"Cannot unify {len(left)} terms with {len(right)} terms")
        self.equations: List[Tuple[Term, Term]] = list(zip(left, right))
        self.unifier = Unifier()
        self.passes = 0

    def run(self) -> Optional[Unifier]:
        """Return the most general unifier, or None if there is none."""
        while self.equations:
            self.passes += 1
            if not self._rewrite():
                return None
        return self.unifier

    def _rewrite(self) -> bool:
        """Run one pass over the equations; False on a clash."""
        pending = self.equations
        self.equations = []

        for left, right in pending:
            left = self.unifier.apply(left)
            right = self.unifier.apply(right)

            if left == right:
                continue

            if isinstance(left, Var):
                # Eliminate
                if occurs(left.name, right):
                    return False
                self.unifier = self.unifier.chain(Unifier.singleton(left.name, right))
            elif isinstance(right, Var):
                # Swap
                self.equations.append((right, left))
            else:
                # Decompose
                if left.name != right.name or len(left.args) != len(right.args):
                    return False
                self.equations.extend(zip(left.args, right.args))

        return True


def mgu_terms(left: Sequence[Term], right: Sequence[Term]) -> Optional[Unifier]:
    """Most general unifier of two equally long term sequences."""
    if len(left) != len(right):
        return None
    return MguFinder(left, right).run()


def mgu(left, right) -> Optional[Unifier]:
    """Most general unifier of two terms, atoms or term sequences.

    Values of different shapes, atoms with different predicates and
    sequences of different lengths never unify.
    """
    if isinstance(left, (Var, Fun)) and isinstance(right, (Var, Fun)):
        return mgu_terms((left,), (right,))
    if isinstance(left, Pred) and isinstance(right, Pred):
        if left.name != right.name or left.arity != right.arity:
            return None
        return mgu_terms(left.args, right.args)
    if isinstance(left, (tuple, list)) and isinstance(right, (tuple, list)):
        return mgu_terms(tuple(left), tuple(right))
    return None
