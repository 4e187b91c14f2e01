"""Tests for unification algorithm."""

import random
import unittest

from folres.core.exceptions import UnifierIntegrityError
from folres.core.logic import Var, Fun, Pred, All, free_variables
from folres.core.unification import Unifier, MguFinder, mgu, mgu_terms


class TestMgu(unittest.TestCase):
    """Test cases for most general unifiers."""

    def setUp(self):
        """Set up test fixtures."""
        # Variables
        self.x = Var(0)
        self.y = Var(1)
        self.z = Var(2)

        # Constants
        self.a = Fun(5)
        self.b = Fun(6)
        self.c = Fun(7)

    def f(self, *args):
        return Fun(3, args)

    def g(self, *args):
        return Fun(4, args)

    def assertSound(self, left, right, unifier):
        self.assertIsNotNone(unifier)
        self.assertEqual(unifier.apply(tuple(left)), unifier.apply(tuple(right)))

    def test_nested_chain(self):
        """Test that solved variables are substituted into earlier bindings."""
        left = [self.x, self.f(self.z), self.z]
        right = [self.f(self.y), self.y, self.c]
        unifier = mgu(left, right)
        self.assertEqual(unifier, Unifier({
            0: self.f(self.f(self.c)),
            1: self.f(self.c),
            2: self.c,
        }))
        self.assertSound(left, right, unifier)

    def test_decompose_then_eliminate(self):
        """Test decomposition followed by elimination."""
        left = [self.f(self.x), self.y]
        right = [self.f(self.a), self.x]
        unifier = mgu(left, right)
        self.assertEqual(unifier, Unifier({0: self.a, 1: self.a}))
        self.assertSound(left, right, unifier)

    def test_variable_with_variable(self):
        """Test that two variables unify by binding the left one."""
        self.assertEqual(mgu([self.x], [self.y]), Unifier({0: self.y}))

    def test_swap(self):
        """Test that a term on the left and a variable on the right are swapped."""
        self.assertEqual(mgu(self.f(self.a), self.x), Unifier({0: self.f(self.a)}))

    def test_identical_terms(self):
        """Test that identical terms unify with the empty unifier."""
        unifier = mgu(self.f(self.x), self.f(self.x))
        self.assertIsNotNone(unifier)
        self.assertTrue(unifier.is_empty())

    def test_function_clash(self):
        """Test that different function symbols do not unify."""
        self.assertIsNone(mgu([self.g(self.x)], [self.f(self.a)]))

    def test_constant_clash(self):
        self.assertIsNone(mgu([self.f(self.b)], [self.f(self.a)]))

    def test_occurs_check(self):
        """Test that a variable never unifies with a term containing it."""
        self.assertIsNone(mgu([self.x], [self.f(self.g(self.x))]))

    def test_atoms(self):
        """Test unifying atoms by predicate and arguments."""
        p_xa = Pred(10, (self.x, self.a))
        p_by = Pred(10, (self.b, self.y))
        self.assertEqual(mgu(p_xa, p_by), Unifier({0: self.b, 1: self.a}))
        self.assertIsNone(mgu(p_xa, Pred(11, (self.b, self.y))))
        self.assertIsNone(mgu(p_xa, Pred(10, (self.b,))))

    def test_mismatched_shapes(self):
        """Test that values of different kinds or lengths never unify."""
        self.assertIsNone(mgu(self.x, Pred(10, (self.x,))))
        self.assertIsNone(mgu_terms((self.x,), ()))
        with self.assertRaises(ValueError):
            MguFinder((self.x,), ())

    def test_finder_counts_passes(self):
        finder = MguFinder([self.x, self.f(self.z), self.z], [self.f(self.y), self.y, self.c])
        self.assertIsNotNone(finder.run())
        self.assertEqual(finder.passes, 2)


class TestUnifier(unittest.TestCase):
    """Test the unifier invariants."""

    def setUp(self):
        self.x = Var(0)
        self.y = Var(1)
        self.a = Fun(5)
        self.b = Fun(6)

    def test_recursive_binding(self):
        """Test that a variable cannot be bound to a term containing it."""
        with self.assertRaises(UnifierIntegrityError):
            Unifier({0: Fun(3, (self.x,))})

    def test_duplicate_binding(self):
        unifier = Unifier({0: self.a})
        with self.assertRaises(UnifierIntegrityError) as context:
            unifier.add(0, self.b)
        self.assertEqual(context.exception.name, 0)

    def test_value_mentions_bound_name(self):
        """Test that values cannot mention bound names."""
        unifier = Unifier({0: self.a})
        with self.assertRaises(UnifierIntegrityError):
            unifier.add(1, self.x)

    def test_bound_name_already_in_value(self):
        """Test that a name occurring in a value cannot be bound later."""
        unifier = Unifier({0: self.y})
        with self.assertRaises(UnifierIntegrityError):
            unifier.add(1, self.a)

    def test_chain(self):
        """Test composing unifiers by application."""
        first = Unifier({0: Fun(3, (self.y,))})
        second = Unifier({1: self.a})
        self.assertEqual(first.chain(second), Unifier({0: Fun(3, (self.a,)), 1: self.a}))

    def test_apply_respects_quantifiers(self):
        """Test that a quantifier shadows the binding of its variable."""
        unifier = Unifier({0: self.a, 1: self.b})
        formula = All(0, Pred(9, (self.x, self.y)))
        self.assertEqual(unifier.apply(formula), All(0, Pred(9, (self.x, self.b))))

    def test_mapping_access(self):
        unifier = Unifier({0: self.a})
        self.assertIn(0, unifier)
        self.assertEqual(unifier[0], self.a)
        self.assertEqual(len(unifier), 1)
        self.assertEqual(hash(unifier), hash(Unifier({0: self.a})))


class TestMguRandom(unittest.TestCase):
    """Test mgu on generated term lists over a small signature."""

    VARIABLES = (0, 1, 2)
    CONSTANTS = (5, 6)
    # name -> arity
    SYMBOLS = {3: 1, 4: 2, 5: 0, 6: 0}

    def setUp(self):
        self.rng = random.Random(1234)

    def term(self, depth):
        if depth == 0 or self.rng.random() < 0.3:
            if self.rng.random() < 0.5:
                return Var(self.rng.choice(self.VARIABLES))
            return Fun(self.rng.choice(self.CONSTANTS))
        name = self.rng.choice(sorted(self.SYMBOLS))
        return Fun(name, tuple(self.term(depth - 1) for _ in range(self.SYMBOLS[name])))

    def terms(self, length):
        return tuple(self.term(3) for _ in range(length))

    def test_unifier_equalizes_both_sides(self):
        """Test that every unifier found makes the two lists equal."""
        unified = 0
        for _ in range(500):
            length = self.rng.randint(1, 3)
            left, right = self.terms(length), self.terms(length)
            unifier = mgu_terms(left, right)
            if unifier is None:
                continue
            unified += 1
            self.assertEqual(unifier.apply(left), unifier.apply(right), f"{left} and {right}")
            for name, term in unifier.items():
                self.assertNotIn(name, free_variables(term))
        self.assertGreater(unified, 0)

    def test_ground_instance_unifies(self):
        """Test that a list unifies with every ground instance of itself."""
        for _ in range(200):
            left = self.terms(2)
            grounding = Unifier({name: Fun(self.rng.choice(self.CONSTANTS)) for name in self.VARIABLES})
            right = grounding.apply(left)
            unifier = mgu_terms(left, right)
            self.assertIsNotNone(unifier, f"{left} and {right}")
            self.assertEqual(unifier.apply(left), right)


if __name__ == '__main__':
    unittest.main()
