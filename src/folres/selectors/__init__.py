from .base import Heuristic
from .heuristics import (
    NaiveHeuristic,
    PreferEmptyHeuristic,
    DistanceHeuristic,
    SymbolCountHeuristic,
    DisjunctCountHeuristic,
    SymbolCountPlusDistanceHeuristic,
    DisjunctCountPlusDistanceHeuristic,
    symbol_count,
    disjunct_count,
)
from .registry import HeuristicRegistry, get_heuristic, list_heuristics, DEFAULT_HEURISTIC

__all__ = [
    'Heuristic',
    'NaiveHeuristic',
    'PreferEmptyHeuristic',
    'DistanceHeuristic',
    'SymbolCountHeuristic',
    'DisjunctCountHeuristic',
    'SymbolCountPlusDistanceHeuristic',
    'DisjunctCountPlusDistanceHeuristic',
    'symbol_count',
    'disjunct_count',
    'HeuristicRegistry',
    'get_heuristic',
    'list_heuristics',
    'DEFAULT_HEURISTIC',
]
