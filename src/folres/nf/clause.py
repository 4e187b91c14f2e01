"""Clauses and clause sets."""

from typing import FrozenSet, Iterable, Iterator, Optional, Set, Tuple

from folres.core.exceptions import NotClauseError
from folres.core.logic import Formula, Pred, Or, Not, Bottom, Top, And, sort_key
from .index import PredicateIndex


class Clause:
    """A disjunction of literals, split into positive and negative atoms.

    Read as a CNF member, the clause ``(pos, neg)`` means
    ``p1 | ... | pm | !n1 | ... | !nk``. The same object is also used for the
    conjunctive members of a DNF, where it reads ``p1 & ... & !nk``.

    A clause is *clean* when no atom occurs on both sides; the empty clause
    stands for a contradiction.
    """

    __slots__ = ('pos', 'neg', '_hash')

    def __init__(self, pos: Optional[PredicateIndex] = None, neg: Optional[PredicateIndex] = None):
        self.pos = pos if pos is not None else PredicateIndex()
        self.neg = neg if neg is not None else PredicateIndex()
        self._hash = None

    @classmethod
    def of(cls, pos: Iterable[Pred] = (), neg: Iterable[Pred] = ()) -> 'Clause':
        return cls(PredicateIndex.of(pos), PredicateIndex.of(neg))

    @classmethod
    def unit(cls, atom: Pred, positive: bool = True) -> 'Clause':
        if positive:
            return cls.of(pos=[atom])
        return cls.of(neg=[atom])

    @classmethod
    def from_formula(cls, formula: Formula) -> 'Clause':
        """Build a clause from a disjunction of literals."""
        pos: Set[Pred] = set()
        neg: Set[Pred] = set()
        stack = [formula]
        while stack:
            current = stack.pop()
            if isinstance(current, Or):
                stack.append(current.right)
                stack.append(current.left)
            elif isinstance(current, Pred):
                pos.add(current)
            elif isinstance(current, Not) and isinstance(current.body, Pred):
                neg.add(current.body)
            elif isinstance(current, Bottom):
                continue
            else:
                raise NotClauseError(formula)
        return cls.of(pos, neg)

    def to_formula(self, conjunctive: bool = False) -> Formula:
        literals = [atom for atom in self.pos.atoms()] + [Not(atom) for atom in self.neg.atoms()]
        if not literals:
            return Top() if conjunctive else Bottom()
        connective = And if conjunctive else Or
        result = literals[0]
        for literal in literals[1:]:
            result = connective(result, literal)
        return result

    def is_empty(self) -> bool:
        return self.pos.is_empty() and self.neg.is_empty()

    def is_clean(self) -> bool:
        return self.pos.is_disjoint(self.neg)

    def is_unit(self) -> bool:
        return len(self) == 1

    def is_unit_equality(self) -> bool:
        """A single positive equality atom."""
        if not self.neg.is_empty() or len(self.pos) != 1:
            return False
        return next(self.pos.atoms()).is_equality

    def concat(self, other: 'Clause') -> 'Clause':
        return Clause(self.pos.union(other.pos), self.neg.union(other.neg))

    def invert(self) -> 'Clause':
        return Clause(self.neg, self.pos)

    def substitute(self, unifier) -> 'Clause':
        return Clause(self.pos.map_args(unifier.apply), self.neg.map_args(unifier.apply))

    def names(self) -> Set[int]:
        return set(self.pos.names()) | set(self.neg.names())

    def literals(self) -> Iterator[Tuple[Pred, bool]]:
        for atom in self.pos.atoms():
            yield atom, True
        for atom in self.neg.atoms():
            yield atom, False

    def sort_key(self):
        return (
            len(self),
            tuple(sort_key(atom) for atom in self.pos.atoms()),
            tuple(sort_key(atom) for atom in self.neg.atoms()),
        )

    def __len__(self) -> int:
        return len(self.pos) + len(self.neg)

    def __eq__(self, other):
        if not isinstance(other, Clause):
            return NotImplemented
        return self.pos == other.pos and self.neg == other.neg

    def __hash__(self):
        if self._hash is None:
            self._hash = hash((self.pos, self.neg))
        return self._hash

    def __repr__(self):
        pos = ", ".join(repr(atom) for atom in self.pos.atoms())
        neg = ", ".join(repr(atom) for atom in self.neg.atoms())
        return f"Clause(pos=[{pos}], neg=[{neg}])"


class NormalForm:
    """A set of clauses.

    Whether it is read as a conjunction of disjunctions (CNF) or as a
    disjunction of conjunctions (DNF) depends on the producer; ``invert``
    turns the CNF of a formula into the DNF of its negation and back.
    """

    __slots__ = ('clauses',)

    def __init__(self, clauses: Iterable[Clause] = ()):
        self.clauses: FrozenSet[Clause] = frozenset(clauses)

    @classmethod
    def empty(cls) -> 'NormalForm':
        return cls()

    @classmethod
    def single(cls, clause: Clause) -> 'NormalForm':
        return cls((clause,))

    def concat(self, other: 'NormalForm') -> 'NormalForm':
        return NormalForm(self.clauses | other.clauses)

    def distribute(self, other: 'NormalForm') -> 'NormalForm':
        """Pairwise merge every clause of ``self`` with every clause of ``other``.

        Merged clauses that are not clean are left out.
        """
        merged = (a.concat(b) for a in self.clauses for b in other.clauses)
        return NormalForm(clause for clause in merged if clause.is_clean())

    def invert(self) -> 'NormalForm':
        return NormalForm(clause.invert() for clause in self.clauses)

    def retain_only_clean(self) -> 'NormalForm':
        return NormalForm(clause for clause in self.clauses if clause.is_clean())

    def has_empty_clause(self) -> bool:
        return any(clause.is_empty() for clause in self.clauses)

    def sorted(self):
        return sorted(self.clauses, key=Clause.sort_key)

    def to_formula(self, conjunctive: bool = True) -> Formula:
        """The CNF (``conjunctive``) or DNF reading of the clause set."""
        parts = [clause.to_formula(conjunctive=not conjunctive) for clause in self.sorted()]
        if not parts:
            return Top() if conjunctive else Bottom()
        connective = And if conjunctive else Or
        result = parts[0]
        for part in parts[1:]:
            result = connective(result, part)
        return result

    def __iter__(self) -> Iterator[Clause]:
        return iter(self.sorted())

    def __len__(self) -> int:
        return len(self.clauses)

    def __contains__(self, clause: Clause) -> bool:
        return clause in self.clauses

    def __eq__(self, other):
        if not isinstance(other, NormalForm):
            return NotImplemented
        return self.clauses == other.clauses

    def __hash__(self):
        return hash(self.clauses)

    def __repr__(self):
        return f"NormalForm({self.sorted()!r})"
