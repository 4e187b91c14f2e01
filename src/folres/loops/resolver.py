"""Best-first saturation loop.

The resolver keeps a priority queue of clauses that have been derived but
not yet admitted to the knowledge base. Every step pops the clause with the
lowest heuristic weight, admits it, and applies the inference rules to it
and every clause of the base it was paired with. Derived clauses are
classified: tautologies are dropped, new clauses are queued, and the empty
clause ends the search with a proof.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Set, Union

from folres.nf.clause import Clause, NormalForm
from folres.proofs.proof import (
    Assumed, Resolved, Substituted, Derivation,
    Proven, Disproven, ResolverResult, reconstruct,
)
from folres.rules import Rule, RuleApplication, Outcome, ResolutionRule, SubstitutionRule, classify
from folres.selectors import Heuristic, get_heuristic, DEFAULT_HEURISTIC
from .knowledge import KnowledgeBase
from .queue import ClauseQueue


logger = logging.getLogger(__name__)


@dataclass
class ResolverStats:
    steps: int
    deductions_made: int
    pending: int
    learning_order: List[Clause]


def derivation_of(application: RuleApplication) -> Derivation:
    if 'resolvee' in application.metadata:
        resolvee = application.metadata['resolvee']
        return Resolved(resolvee.a, resolvee.b, resolvee.unifier)
    substitutee = application.metadata['substitutee']
    return Substituted(substitutee.equation, substitutee.target,
                       substitutee.old, substitutee.new, substitutee.unifier)


class Resolver:
    """Saturates a clause set by resolution and equality substitution.

    The resolver is driven by the caller: ``step`` performs one unit of work
    and returns the result once the search is decided. Typical use::

        resolver = Resolver("symbol_count")
        resolver.assume_cnf(equiv_cnf(formula))
        result = resolver.step_n_times(10000)
    """

    def __init__(self,
                 heuristic: Union[str, Heuristic] = DEFAULT_HEURISTIC,
                 rules: Optional[Sequence[Rule]] = None,
                 skip_proof: bool = False):
        """
        Args:
            heuristic: Heuristic instance or registered heuristic name
            rules: Inference rules to apply (default: resolution and substitution)
            skip_proof: Do not reconstruct the proof when a contradiction is found
        """
        self.heuristic = get_heuristic(heuristic)
        self.rules: List[Rule] = list(rules) if rules is not None else [ResolutionRule(), SubstitutionRule()]
        self.skip_proof = skip_proof

        self.kb = KnowledgeBase()
        self.queue = ClauseQueue()
        self.derivations: Dict[Clause, Derivation] = {}
        self.distances: Dict[Clause, int] = {}
        self.seen: Set[Clause] = set()
        self.learning_order: List[Clause] = []
        self.deductions_made = 0
        self.steps = 0
        self.result: Optional[ResolverResult] = None

    def assume(self, clause: Clause):
        """Add a premise. Tautologies are dropped."""
        if self.result is not None:
            if self.result.is_proven:
                return
            # New premises reopen a saturated search.
            self.result = None

        clause, outcome = classify(clause)
        if outcome is Outcome.TAUTOLOGY:
            logger.debug("Dropping tautological premise %r", clause)
            return

        self._record(clause, Assumed(), 0)
        if outcome is Outcome.CONTRADICTION:
            self._prove(clause)
            return
        self._enqueue(clause, 0)

    def assume_all(self, clauses: Iterable[Clause]):
        for clause in clauses:
            self.assume(clause)

    def assume_cnf(self, cnf: NormalForm):
        self.assume_all(cnf.sorted())

    def step(self) -> Optional[ResolverResult]:
        """Admit one pending clause; return the result once decided."""
        if self.result is not None:
            return self.result

        entry = self.queue.pop()
        if entry is None:
            return self._finish(Disproven())

        self.steps += 1
        clause = entry.clause
        if clause in self.kb:
            return None

        _, pairs = self.kb.learn(clause)
        self.learning_order.append(clause)
        logger.debug("Step %d: admitted clause with weight %d, %d pairs",
                     self.steps, entry.weight, len(pairs))

        for _, other in pairs:
            partner = self.kb.get(other)
            for rule in self.rules:
                for application in rule.apply(clause, partner):
                    self.deductions_made += 1
                    if application.is_tautology:
                        continue

                    distance = 1 + max(self.distances[parent] for parent in application.parents)
                    self._record(application.clause, derivation_of(application), distance)

                    if application.is_contradiction:
                        return self._prove(application.clause)
                    self._enqueue(application.clause, distance)

        return None

    def step_n_times(self, n: int) -> Optional[ResolverResult]:
        """Run at most ``n`` steps; None means the search is still undecided."""
        if n < 0:
            raise ValueError(f"Step count must be non-negative, got {n}")
        for _ in range(n):
            result = self.step()
            if result is not None:
                return result
        return self.result

    def step_indefinitely(self) -> ResolverResult:
        """Run until decided.

        First-order resolution is only semi-decidable, so for satisfiable
        inputs with function symbols this may never return.
        """
        while True:
            result = self.step()
            if result is not None:
                return result

    def stats(self) -> ResolverStats:
        return ResolverStats(
            steps=self.steps,
            deductions_made=self.deductions_made,
            pending=len(self.queue),
            learning_order=list(self.learning_order),
        )

    def _record(self, clause: Clause, derivation: Derivation, distance: int):
        if clause not in self.derivations:
            self.derivations[clause] = derivation
            self.distances[clause] = distance

    def _enqueue(self, clause: Clause, distance: int) -> bool:
        if clause in self.seen:
            return False
        self.seen.add(clause)
        self.queue.push(clause, self.heuristic(clause, distance), distance)
        return True

    def _prove(self, empty: Clause) -> ResolverResult:
        deductions = () if self.skip_proof else tuple(reconstruct(empty, self.derivations))
        logger.info("Contradiction found after %d steps and %d deductions",
                    self.steps, self.deductions_made)
        return self._finish(Proven(deductions))

    def _finish(self, proof) -> ResolverResult:
        if isinstance(proof, Disproven):
            logger.info("Saturated after %d steps without contradiction", self.steps)
        self.result = ResolverResult(
            proof=proof,
            deductions_made=self.deductions_made,
            learning_order=list(self.learning_order),
        )
        return self.result
