"""Priority queue of clauses waiting to be admitted."""

import heapq
import itertools
from dataclasses import dataclass, field
from typing import List, Optional

from folres.nf.clause import Clause
from folres.selectors.heuristics import symbol_count


@dataclass(order=True)
class QueueEntry:
    weight: int
    complexity: int
    order: int
    clause: Clause = field(compare=False)
    distance: int = field(compare=False, default=0)


class ClauseQueue:
    """Min-heap ordered by weight, then complexity, then insertion order."""

    def __init__(self):
        self._heap: List[QueueEntry] = []
        self._counter = itertools.count()

    def push(self, clause: Clause, weight: int, distance: int = 0):
        if weight < 0:
            raise ValueError(f"Heuristic weights must be non-negative, got {weight}")
        entry = QueueEntry(weight, symbol_count(clause), next(self._counter), clause, distance)
        heapq.heappush(self._heap, entry)

    def pop(self) -> Optional[QueueEntry]:
        if not self._heap:
            return None
        return heapq.heappop(self._heap)

    def peek(self) -> Optional[QueueEntry]:
        return self._heap[0] if self._heap else None

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
