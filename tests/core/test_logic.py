"""Tests for core.logic module."""

import unittest

from folres.core.exceptions import ArityError
from folres.core.logic import (
    EQUALITY, TRUE, FALSE,
    Var, Fun, Top, Bottom, Pred, And, Or, Not, All, Some,
    const, equals, implies, iff, xor, no, conjoin, disjoin,
    is_term, is_formula, names, free_variables, occurs, next_free_name,
    is_quantifier_free, term_size, sort_key,
)


class TestTerms(unittest.TestCase):
    """Test term construction."""

    def setUp(self):
        self.x = Var(0)
        self.a = const(1)
        self.f = 2

    def test_constant_is_nullary_function(self):
        """Test that constants are functions without arguments."""
        self.assertEqual(self.a, Fun(1, ()))
        self.assertEqual(self.a.arity, 0)

    def test_structural_equality(self):
        """Test that equal structures are equal and hash alike."""
        t1 = Fun(self.f, (self.x, self.a))
        t2 = Fun(self.f, (Var(0), Fun(1)))
        self.assertEqual(t1, t2)
        self.assertEqual(hash(t1), hash(t2))
        self.assertEqual(len({t1, t2}), 1)
        self.assertEqual(t1.arity, 2)

    def test_term_size(self):
        """Test counting symbols in a term."""
        self.assertEqual(term_size(self.x), 1)
        self.assertEqual(term_size(Fun(self.f, (self.x, Fun(self.f, (self.a,))))), 4)

    def test_occurs(self):
        """Test the occurs check."""
        self.assertTrue(occurs(0, Fun(self.f, (Fun(self.f, (self.x,)),))))
        self.assertFalse(occurs(0, Fun(self.f, (self.a,))))

    def test_is_term(self):
        self.assertTrue(is_term(self.x))
        self.assertTrue(is_term(self.a))
        self.assertFalse(is_term(Pred(3)))

    def test_sort_key_orders_variables_first(self):
        """Test that variables sort before function applications."""
        terms = [Fun(3), Var(5), Fun(1, (Var(0),)), Var(2)]
        self.assertEqual(sorted(terms, key=sort_key), [Var(2), Var(5), Fun(1, (Var(0),)), Fun(3)])


class TestFormulas(unittest.TestCase):
    """Test formula construction and derived connectives."""

    def setUp(self):
        self.x = Var(0)
        self.P = Pred(1, (self.x,))
        self.Q = Pred(2)
        self.R = Pred(3)

    def test_equality_arity(self):
        """Test that equality must have exactly two arguments."""
        self.assertTrue(equals(self.x, const(4)).is_equality)
        with self.assertRaises(ArityError):
            Pred(EQUALITY, (self.x,))

    def test_implies_and_iff(self):
        """Test derived connectives."""
        self.assertEqual(implies(self.P, self.Q), Or(Not(self.P), self.Q))
        self.assertEqual(
            iff(self.P, self.Q),
            And(Or(Not(self.P), self.Q), Or(Not(self.Q), self.P)),
        )
        self.assertEqual(xor(self.P, self.Q), Not(iff(self.P, self.Q)))

    def test_no(self):
        self.assertEqual(no(0, self.P), All(0, Not(self.P)))

    def test_conjoin_and_disjoin(self):
        """Test folding sequences into conjunctions and disjunctions."""
        self.assertEqual(conjoin([]), TRUE)
        self.assertEqual(disjoin([]), FALSE)
        self.assertEqual(conjoin([self.Q]), self.Q)
        self.assertEqual(conjoin([self.P, self.Q, self.R]), And(And(self.P, self.Q), self.R))
        self.assertEqual(disjoin([self.P, self.Q]), Or(self.P, self.Q))

    def test_constants(self):
        self.assertEqual(TRUE, Top())
        self.assertEqual(FALSE, Bottom())
        self.assertTrue(is_formula(TRUE))
        self.assertFalse(is_formula(self.x))


class TestNameCollection(unittest.TestCase):
    """Test collecting names from terms and formulas."""

    def test_names_include_symbols_and_variables(self):
        """Test that names covers predicates, functions and variables."""
        formula = All(0, Pred(1, (Fun(2, (Var(0), Var(5))),)))
        self.assertEqual(names(formula), {0, 1, 2, 5})

    def test_names_exclude_equality(self):
        """Test that the reserved equality name is never reported."""
        self.assertEqual(names(equals(Var(0), const(1))), {0, 1})

    def test_free_variables(self):
        """Test that quantified variables are not free."""
        formula = And(All(0, Pred(1, (Var(0), Var(2)))), Pred(3, (Var(0),)))
        self.assertEqual(free_variables(formula), frozenset({0, 2}))
        self.assertEqual(free_variables(Some(2, Pred(1, (Var(2),)))), frozenset())

    def test_next_free_name(self):
        """Test finding a name past every used one."""
        self.assertEqual(next_free_name(Pred(3, (Var(7),))), 8)
        self.assertEqual(next_free_name(TRUE), 0)
        self.assertEqual(next_free_name(equals(const(0), const(0))), 1)

    def test_is_quantifier_free(self):
        self.assertTrue(is_quantifier_free(And(Pred(0), Not(Pred(1)))))
        self.assertFalse(is_quantifier_free(Or(Pred(0), Not(Some(1, Pred(2, (Var(1),)))))))


if __name__ == '__main__':
    unittest.main()
