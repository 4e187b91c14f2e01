"""Tests for the predicate index."""

import unittest

from folres.core.logic import Var, Fun, Pred
from folres.nf.index import PredicateIndex


class TestPredicateIndex(unittest.TestCase):

    def setUp(self):
        self.a = Fun(10)
        self.b = Fun(11)
        self.Pa = Pred(0, (self.a,))
        self.Pb = Pred(0, (self.b,))
        self.Qx = Pred(1, (Var(5),))

    def test_insert_returns_new_index(self):
        """Test that inserting leaves the original index untouched."""
        empty = PredicateIndex()
        index = empty.insert(self.Pa)
        self.assertTrue(empty.is_empty())
        self.assertTrue(index.contains(self.Pa))
        self.assertIn(self.Pa, index)
        self.assertIs(index.insert(self.Pa), index)

    def test_remove_drops_empty_names(self):
        """Test that removing the last atom of a name forgets the name."""
        index = PredicateIndex.of([self.Pa, self.Qx])
        removed = index.remove(self.Pa)
        self.assertFalse(removed.has_name(0))
        self.assertEqual(removed, PredicateIndex.of([self.Qx]))
        self.assertEqual(hash(removed), hash(PredicateIndex.of([self.Qx])))

    def test_get_and_names(self):
        index = PredicateIndex.of([self.Pa, self.Pb, self.Qx])
        self.assertEqual(index.get(0), frozenset({(self.a,), (self.b,)}))
        self.assertEqual(index.get(7), frozenset())
        self.assertEqual(set(index.names()), {0, 1})
        self.assertEqual(len(index), 3)

    def test_atoms_are_sorted(self):
        """Test that atoms come out ordered by name, then arguments."""
        index = PredicateIndex.of([self.Qx, self.Pb, self.Pa])
        self.assertEqual(list(index.atoms()), [self.Pa, self.Pb, self.Qx])

    def test_set_operations(self):
        """Test union, intersection and disjointness."""
        left = PredicateIndex.of([self.Pa, self.Qx])
        right = PredicateIndex.of([self.Pb, self.Qx])
        self.assertEqual(left.union(right), PredicateIndex.of([self.Pa, self.Pb, self.Qx]))
        self.assertEqual(left.intersection(right), PredicateIndex.of([self.Qx]))
        self.assertFalse(left.is_disjoint(right))
        self.assertTrue(PredicateIndex.of([self.Pa]).is_disjoint(PredicateIndex.of([self.Pb])))

    def test_map_args_merges_duplicates(self):
        """Test that mapping arguments can collapse atoms."""
        index = PredicateIndex.of([self.Pa, self.Pb])
        mapped = index.map_args(lambda args: (self.a,))
        self.assertEqual(mapped, PredicateIndex.of([self.Pa]))
        self.assertEqual(len(mapped), 1)


if __name__ == '__main__':
    unittest.main()
