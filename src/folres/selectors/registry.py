"""Registry for clause selection heuristics."""

from typing import Any, Dict, Type, Union

from folres.core.exceptions import UnknownHeuristicError
from .base import Heuristic
from .heuristics import (
    NaiveHeuristic,
    PreferEmptyHeuristic,
    DistanceHeuristic,
    SymbolCountHeuristic,
    DisjunctCountHeuristic,
    SymbolCountPlusDistanceHeuristic,
    DisjunctCountPlusDistanceHeuristic,
)


DEFAULT_HEURISTIC = "symbol_count"


class HeuristicRegistry:
    """Registry for managing clause selection heuristics."""

    def __init__(self):
        self._heuristics: Dict[str, Type[Heuristic]] = {}
        self._register_default_heuristics()

    def _register_default_heuristics(self):
        self.register('naive', NaiveHeuristic)
        self.register('prefer_empty', PreferEmptyHeuristic)
        self.register('distance', DistanceHeuristic)
        self.register('symbol_count', SymbolCountHeuristic)
        self.register('disjunct_count', DisjunctCountHeuristic)
        self.register('symbol_count_plus_distance', SymbolCountPlusDistanceHeuristic)
        self.register('disjunct_count_plus_distance', DisjunctCountPlusDistanceHeuristic)

    def register(self, name: str, heuristic_class: Type[Heuristic]):
        """Register a new heuristic type."""
        self._heuristics[self._normalize(name)] = heuristic_class

    def create_heuristic(self, name: str, **kwargs: Any) -> Heuristic:
        """Create a heuristic instance."""
        key = self._normalize(name)
        if key not in self._heuristics:
            raise UnknownHeuristicError(name, self.list_heuristics())
        return self._heuristics[key](**kwargs)

    def list_heuristics(self) -> list:
        """List available heuristic names."""
        return list(self._heuristics.keys())

    @staticmethod
    def _normalize(name: str) -> str:
        # Accept "symbol-count" and "SymbolCount" alongside "symbol_count".
        name = name.replace('-', '_')
        if name.lower() != name and '_' not in name:
            name = ''.join('_' + c.lower() if c.isupper() else c for c in name).lstrip('_')
        return name.lower()


_registry = HeuristicRegistry()


def get_heuristic(name: Union[str, Heuristic] = DEFAULT_HEURISTIC, **kwargs: Any) -> Heuristic:
    """Get a heuristic instance; instances are passed through unchanged."""
    if isinstance(name, Heuristic):
        return name
    return _registry.create_heuristic(name, **kwargs)


def list_heuristics() -> list:
    return _registry.list_heuristics()
