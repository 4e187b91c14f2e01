"""Tests for clause classification."""

import unittest

from folres.core.logic import Fun, Pred, equals
from folres.nf.clause import Clause
from folres.rules.base import Outcome, classify, normalize_equalities


class TestClassify(unittest.TestCase):

    def setUp(self):
        self.a = Fun(1)
        self.b = Fun(2)
        self.P = Pred(0)

    def test_unclean_is_tautology(self):
        _, outcome = classify(Clause.of(pos=[self.P], neg=[self.P]))
        self.assertEqual(outcome, Outcome.TAUTOLOGY)

    def test_reflexive_equality_is_tautology(self):
        """Test that a clause containing a == a always holds."""
        _, outcome = classify(Clause.of(pos=[equals(self.a, self.a)], neg=[self.P]))
        self.assertEqual(outcome, Outcome.TAUTOLOGY)

    def test_empty_is_contradiction(self):
        _, outcome = classify(Clause())
        self.assertEqual(outcome, Outcome.CONTRADICTION)

    def test_reflexive_disequality_is_removed(self):
        """Test that a != a is dropped from the clause."""
        clause, outcome = classify(Clause.of(pos=[self.P], neg=[equals(self.a, self.a)]))
        self.assertEqual(clause, Clause.of(pos=[self.P]))
        self.assertEqual(outcome, Outcome.NONTRIVIAL)

        clause, outcome = classify(Clause.unit(equals(self.b, self.b), positive=False))
        self.assertTrue(clause.is_empty())
        self.assertEqual(outcome, Outcome.CONTRADICTION)

    def test_normalize_keeps_other_equalities(self):
        clause = Clause.unit(equals(self.a, self.b), positive=False)
        self.assertIs(normalize_equalities(clause), clause)


if __name__ == '__main__':
    unittest.main()
