"""Knowledge base of learned clauses."""

import logging
from typing import Dict, Iterator, List, Set, Tuple

from folres.nf.clause import Clause


logger = logging.getLogger(__name__)

Pair = Tuple[int, int]


class KnowledgeBase:
    """Clauses the resolver has admitted, addressed by integer handles.

    Besides the clause arena, two indices record for every predicate name the
    clauses in which it occurs positively (``by_pos``) and negatively
    (``by_neg``). Learning a clause only has to look at clauses sharing a
    complementary predicate to find every pair that might resolve. Unit
    equalities are kept in a separate list, since they can rewrite any clause.
    """

    def __init__(self):
        self._clauses: List[Clause] = []
        self._handles: Dict[Clause, int] = {}
        self.by_pos: Dict[int, List[int]] = {}
        self.by_neg: Dict[int, List[int]] = {}
        self.equalities: List[int] = []

    def learn(self, clause: Clause) -> Tuple[int, List[Pair]]:
        """Admit ``clause`` and return its handle and the new candidate pairs.

        Every pair has the new handle first. A clause is never paired with
        itself, and learning a known clause returns no pairs.
        """
        known = self._handles.get(clause)
        if known is not None:
            return known, []

        handle = len(self._clauses)
        partners = self._partners(clause, handle)

        self._clauses.append(clause)
        self._handles[clause] = handle
        for name in clause.pos.names():
            self.by_pos.setdefault(name, []).append(handle)
        for name in clause.neg.names():
            self.by_neg.setdefault(name, []).append(handle)
        if clause.is_unit_equality():
            self.equalities.append(handle)

        pairs = [(handle, other) for other in partners]
        logger.debug("Learned clause #%d with %d new candidate pairs", handle, len(pairs))
        return handle, pairs

    def get(self, handle: int) -> Clause:
        return self._clauses[handle]

    def handle_of(self, clause: Clause) -> int:
        return self._handles[clause]

    def candidates(self) -> Iterator[Pair]:
        """Every pair discovered so far, in discovery order.

        Pairs are recomputed from the indices rather than stored.
        """
        for handle, clause in enumerate(self._clauses):
            for other in self._partners(clause, handle):
                yield handle, other

    def _partners(self, clause: Clause, limit: int) -> List[int]:
        """Handles below ``limit`` that ``clause`` should be paired with."""
        partners: List[int] = []
        seen: Set[int] = set()

        def pair_with(others):
            for other in others:
                if other < limit and other not in seen:
                    seen.add(other)
                    partners.append(other)

        for name in sorted(clause.pos.names()):
            pair_with(self.by_neg.get(name, ()))
        for name in sorted(clause.neg.names()):
            pair_with(self.by_pos.get(name, ()))

        if clause.is_unit_equality():
            pair_with(range(limit))
        else:
            pair_with(self.equalities)
        return partners

    def __contains__(self, clause: Clause) -> bool:
        return clause in self._handles

    def __len__(self) -> int:
        return len(self._clauses)

    def __iter__(self) -> Iterator[Clause]:
        return iter(self._clauses)

    def __repr__(self):
        return f"KnowledgeBase(clauses={len(self._clauses)})"
