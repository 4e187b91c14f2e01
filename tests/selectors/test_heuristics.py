"""Tests for clause selection heuristics and their registry."""

import unittest

from folres.core.exceptions import UnknownHeuristicError
from folres.core.logic import Var, Fun, Pred
from folres.nf.clause import Clause
from folres.selectors import (
    DistanceHeuristic, PreferEmptyHeuristic, NaiveHeuristic,
    SymbolCountHeuristic, SymbolCountPlusDistanceHeuristic,
    HeuristicRegistry, get_heuristic, list_heuristics,
    symbol_count, disjunct_count,
)


class TestWeights(unittest.TestCase):

    def setUp(self):
        """Set up P(f(:x)) | !Q."""
        self.clause = Clause.of(pos=[Pred(0, (Fun(1, (Var(2),)),))], neg=[Pred(3)])

    def test_symbol_count(self):
        """Test counting predicate and term symbols."""
        self.assertEqual(symbol_count(self.clause), 4)
        self.assertEqual(symbol_count(Clause()), 0)

    def test_disjunct_count(self):
        self.assertEqual(disjunct_count(self.clause), 2)

    def test_distance_variants(self):
        """Test heuristics that take the derivation distance into account."""
        self.assertEqual(DistanceHeuristic()(self.clause, 3), 3)
        self.assertEqual(DistanceHeuristic()(Clause(), 3), 0)
        self.assertEqual(SymbolCountPlusDistanceHeuristic()(self.clause, 3), 7)

    def test_prefer_empty(self):
        heuristic = PreferEmptyHeuristic()
        self.assertEqual(heuristic(Clause()), 0)
        self.assertEqual(heuristic(self.clause), 1)
        self.assertEqual(NaiveHeuristic()(self.clause, 5), 0)

    def test_evaluations_are_counted(self):
        heuristic = SymbolCountHeuristic()
        heuristic(self.clause)
        heuristic(self.clause, 2)
        self.assertEqual(heuristic.stats['evaluations'], 2)


class TestRegistry(unittest.TestCase):

    def test_default_heuristics(self):
        """Test that every built-in heuristic is registered."""
        self.assertEqual(set(list_heuristics()), {
            'naive', 'prefer_empty', 'distance', 'symbol_count', 'disjunct_count',
            'symbol_count_plus_distance', 'disjunct_count_plus_distance',
        })

    def test_name_spellings(self):
        """Test that dashes and camel case resolve to the same heuristic."""
        for spelling in ('symbol_count', 'symbol-count', 'SymbolCount'):
            self.assertEqual(get_heuristic(spelling).name, 'symbol_count')

    def test_instance_passes_through(self):
        heuristic = DistanceHeuristic()
        self.assertIs(get_heuristic(heuristic), heuristic)

    def test_unknown_heuristic(self):
        with self.assertRaises(UnknownHeuristicError) as context:
            get_heuristic('fifo')
        self.assertIn('naive', context.exception.available)

    def test_register(self):
        registry = HeuristicRegistry()
        registry.register('depth', DistanceHeuristic)
        self.assertIsInstance(registry.create_heuristic('depth'), DistanceHeuristic)


if __name__ == '__main__':
    unittest.main()
