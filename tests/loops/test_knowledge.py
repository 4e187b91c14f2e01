"""Tests for the knowledge base."""

import unittest

from folres.core.logic import Var, Fun, Pred, equals
from folres.loops.knowledge import KnowledgeBase
from folres.nf.clause import Clause


class TestKnowledgeBase(unittest.TestCase):

    def setUp(self):
        self.kb = KnowledgeBase()
        self.a = Fun(10)
        self.b = Fun(11)
        self.x = Var(0)
        self.P = 1
        self.Q = 2

    def test_pairs_complementary_predicates(self):
        """Test that a new clause is paired with clauses of opposite polarity."""
        h0, pairs = self.kb.learn(Clause.unit(Pred(self.P, (self.a,))))
        self.assertEqual((h0, pairs), (0, []))

        self.kb.learn(Clause.unit(Pred(self.Q, (self.a,))))
        h2, pairs = self.kb.learn(Clause.of(neg=[Pred(self.P, (self.x,))]))
        self.assertEqual(h2, 2)
        self.assertEqual(pairs, [(2, 0)])

    def test_learning_twice_is_idempotent(self):
        """Test that a known clause keeps its handle and brings no pairs."""
        clause = Clause.unit(Pred(self.P, (self.a,)))
        self.kb.learn(clause)
        self.kb.learn(Clause.unit(Pred(self.P, (self.x,)), positive=False))
        handle, pairs = self.kb.learn(clause)
        self.assertEqual(handle, 0)
        self.assertEqual(pairs, [])
        self.assertEqual(len(self.kb), 2)

    def test_never_paired_with_itself(self):
        """Test that a clause with both polarities of a predicate is not self-paired."""
        clause = Clause.of(pos=[Pred(self.P, (self.x,))], neg=[Pred(self.P, (Fun(3, (self.x,)),))])
        _, pairs = self.kb.learn(clause)
        self.assertEqual(pairs, [])

    def test_unit_equalities_pair_with_everything(self):
        """Test that unit equalities are paired with every clause, before and after."""
        self.kb.learn(Clause.unit(Pred(self.P, (self.a,))))
        self.kb.learn(Clause.unit(Pred(self.Q, (self.b,))))
        handle, pairs = self.kb.learn(Clause.unit(equals(self.a, self.b)))
        self.assertEqual(pairs, [(handle, 0), (handle, 1)])
        self.assertEqual(self.kb.equalities, [handle])

        later, pairs = self.kb.learn(Clause.unit(Pred(self.Q, (self.a,)), positive=False))
        self.assertIn((later, handle), pairs)
        self.assertIn((later, 1), pairs)

    def test_lookup(self):
        clause = Clause.unit(Pred(self.P, (self.a,)))
        handle, _ = self.kb.learn(clause)
        self.assertIs(self.kb.get(handle), clause)
        self.assertEqual(self.kb.handle_of(clause), handle)
        self.assertIn(clause, self.kb)
        self.assertEqual(list(self.kb), [clause])
        self.assertEqual(self.kb.by_pos[self.P], [handle])

    def test_candidates_accumulate(self):
        self.kb.learn(Clause.unit(Pred(self.P, (self.a,))))
        self.kb.learn(Clause.unit(Pred(self.P, (self.a,)), positive=False))
        self.kb.learn(Clause.unit(Pred(self.P, (self.b,)), positive=False))
        self.assertEqual(list(self.kb.candidates()), [(1, 0), (2, 0)])

    def test_candidates_replay_learning(self):
        """Test that candidates yields exactly the pairs learn returned, in order."""
        clauses = [
            Clause.of(pos=[Pred(self.P, (self.a,))], neg=[Pred(self.P, (self.b,))]),
            Clause.unit(Pred(self.P, (self.x,)), positive=False),
            Clause.unit(equals(self.a, self.b)),
            Clause.of(pos=[Pred(self.Q, (self.a,))], neg=[Pred(self.P, (self.a,))]),
            Clause.unit(Pred(self.Q, (self.b,)), positive=False),
        ]
        learned = []
        for clause in clauses:
            _, pairs = self.kb.learn(clause)
            learned.extend(pairs)
        self.assertEqual(list(self.kb.candidates()), learned)
        self.assertNotIn((0, 0), learned)


if __name__ == '__main__':
    unittest.main()
