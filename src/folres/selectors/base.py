"""Base class for clause selection heuristics."""

from abc import ABC, abstractmethod

from folres.nf.clause import Clause


class Heuristic(ABC):
    """Weighs pending clauses; the resolver explores lower weights first.

    A heuristic must be total and non-negative. ``distance`` is the length of
    the longest derivation chain from a premise to the clause.
    """

    def __init__(self):
        self.stats = {
            'evaluations': 0,
        }

    @abstractmethod
    def weight(self, clause: Clause, distance: int) -> int:
        """Weight of ``clause`` found at ``distance`` from the premises."""
        pass

    def __call__(self, clause: Clause, distance: int = 0) -> int:
        self.stats['evaluations'] += 1
        return self.weight(clause, distance)

    @property
    @abstractmethod
    def name(self) -> str:
        """Return name of the heuristic."""
        pass

    def __repr__(self):
        return f"{type(self).__name__}()"
