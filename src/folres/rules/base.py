"""Base interface for inference rules."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from folres.core.logic import EQUALITY, Pred
from folres.nf.clause import Clause


class Outcome(Enum):
    """Classification of a derived clause."""
    NONTRIVIAL = "nontrivial"
    TAUTOLOGY = "tautology"
    CONTRADICTION = "contradiction"


def is_reflexive(args) -> bool:
    return args[0] == args[1]


def normalize_equalities(clause: Clause) -> Clause:
    """Remove negative literals of the form ``t != t``, which are always false."""
    trivial = [args for args in clause.neg.get(EQUALITY) if is_reflexive(args)]
    if not trivial:
        return clause
    neg = clause.neg
    for args in trivial:
        neg = neg.remove(Pred(EQUALITY, args))
    return Clause(clause.pos, neg)


def classify(clause: Clause) -> Tuple[Clause, Outcome]:
    """Normalize equality literals and classify the clause."""
    clause = normalize_equalities(clause)
    if not clause.is_clean() or any(is_reflexive(args) for args in clause.pos.get(EQUALITY)):
        return clause, Outcome.TAUTOLOGY
    if clause.is_empty():
        return clause, Outcome.CONTRADICTION
    return clause, Outcome.NONTRIVIAL


@dataclass
class RuleApplication:
    """Result of applying an inference rule to two clauses."""
    rule_name: str
    parents: Tuple[Clause, Clause]
    clause: Clause
    outcome: Outcome
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_contradiction(self) -> bool:
        return self.outcome is Outcome.CONTRADICTION

    @property
    def is_tautology(self) -> bool:
        return self.outcome is Outcome.TAUTOLOGY


class Rule(ABC):
    """Abstract base class for binary inference rules."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the inference rule."""
        pass

    @abstractmethod
    def apply(self, first: Clause, second: Clause) -> List[RuleApplication]:
        """
        Apply the rule to a pair of clauses in both directions.

        Args:
            first: A clause of the knowledge base
            second: Another clause of the knowledge base

        Returns:
            One application per way the rule fits the pair, possibly none
        """
        pass

    def is_applicable(self, first: Clause, second: Clause) -> bool:
        return bool(self.apply(first, second))
