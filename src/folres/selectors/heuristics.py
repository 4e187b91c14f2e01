"""Clause selection heuristics."""

from folres.core.logic import term_size
from folres.nf.clause import Clause
from .base import Heuristic


def symbol_count(clause: Clause) -> int:
    """Number of predicate and term symbols in the clause."""
    return sum(1 + sum(term_size(arg) for arg in atom.args) for atom, _ in clause.literals())


def disjunct_count(clause: Clause) -> int:
    return len(clause)


class NaiveHeuristic(Heuristic):
    """Every clause weighs the same, so clauses are explored in insertion order."""

    def weight(self, clause: Clause, distance: int) -> int:
        return 0

    @property
    def name(self) -> str:
        return "naive"


class PreferEmptyHeuristic(Heuristic):
    """Like ``naive``, but the empty clause jumps the queue."""

    def weight(self, clause: Clause, distance: int) -> int:
        return 0 if clause.is_empty() else 1

    @property
    def name(self) -> str:
        return "prefer_empty"


class DistanceHeuristic(Heuristic):
    """Breadth first by derivation depth."""

    def weight(self, clause: Clause, distance: int) -> int:
        return 0 if clause.is_empty() else distance

    @property
    def name(self) -> str:
        return "distance"


class SymbolCountHeuristic(Heuristic):
    """Smallest clause first, measured in symbols."""

    def weight(self, clause: Clause, distance: int) -> int:
        return symbol_count(clause)

    @property
    def name(self) -> str:
        return "symbol_count"


class DisjunctCountHeuristic(Heuristic):
    """Shortest clause first, measured in literals."""

    def weight(self, clause: Clause, distance: int) -> int:
        return disjunct_count(clause)

    @property
    def name(self) -> str:
        return "disjunct_count"


class SymbolCountPlusDistanceHeuristic(Heuristic):
    def weight(self, clause: Clause, distance: int) -> int:
        return symbol_count(clause) + distance

    @property
    def name(self) -> str:
        return "symbol_count_plus_distance"


class DisjunctCountPlusDistanceHeuristic(Heuristic):
    def weight(self, clause: Clause, distance: int) -> int:
        return disjunct_count(clause) + distance

    @property
    def name(self) -> str:
        return "disjunct_count_plus_distance"
