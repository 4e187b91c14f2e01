"""End-to-end proof attempts on small textbook statements."""

import unittest

from folres import prove
from folres.proofs.proof import Disproven, Substitute, is_valid_proof
from folres.prover import PROVEN, DISPROVEN, EXHAUSTED


CHAIN = ",\n".join(f"{a} <-> {b}" for a, b in zip("ABCDEFGHIJKLMNOPQRSTUVWXY", "BCDEFGHIJKLMNOPQRSTUVWXYZ"))

VALID = {
    'basic_fol': "all x: (P(x) -> Q(x)) & some x: P(x) |- some x: Q(x)",
    'taut': "|- true",
    'demorgan1': "!(P | Q) |- (!P & !Q)",
    'demorgan2': "!(P & Q) |- (!P | !Q)",
    'equivs': "A <-> (B | C), B <-> (C | D), C <-> (D | A), A, !B |- D",
    'names': "Foo -> Bar, Bar -> Baz |- Foo -> Baz",
    'eq_subst': "a == b, P(b) |- P(a)",
    'eq_transitive': "a == b, b == c |- c == a",
    'eq_mixed': "P(a), a == b, P(b) <-> Q(b) |- Q(a)",
    'eq_instance': "all x: f(x) == g(x), P(f(a)) |- P(g(a))",
    'chain': CHAIN + ",\nA |- Z",
}

TSEITIN = ['basic_fol', 'taut', 'demorgan1', 'demorgan2', 'equivs', 'names', 'eq_subst']


class TestValidStatements(unittest.TestCase):
    """Statements that hold are proven with a checkable proof."""

    def assertProven(self, attempt):
        self.assertEqual(attempt.outcome, PROVEN)
        self.assertTrue(is_valid_proof(list(attempt.result.proof.deductions)))

    def test_equivalence_strategy(self):
        for name, text in VALID.items():
            with self.subTest(name=name):
                self.assertProven(prove(text))

    def test_tseitin_strategy(self):
        for name in TSEITIN:
            with self.subTest(name=name):
                self.assertProven(prove(VALID[name], strategy='tseitin'))

    def test_chain_within_bound(self):
        """Test that the equivalence chain needs only a few hundred steps."""
        self.assertProven(prove(VALID['chain'], max_steps=500))

    def test_equation_with_variables(self):
        """Test that the proof records the unifier of the rewrite."""
        attempt = prove(VALID['eq_instance'], max_steps=500)
        self.assertProven(attempt)
        rewrites = [d for d in attempt.result.proof.deductions if isinstance(d, Substitute)]
        self.assertTrue(rewrites)
        self.assertFalse(rewrites[0].unifier.is_empty())

    def test_other_heuristics(self):
        for heuristic in ('naive', 'distance'):
            with self.subTest(heuristic=heuristic):
                self.assertProven(prove(VALID['demorgan1'], heuristic=heuristic))


class TestInvalidStatements(unittest.TestCase):
    """Statements that fail saturate, and can be refuted outright."""

    def test_contradiction(self):
        self.assertEqual(prove("|- false").outcome, EXHAUSTED)
        self.assertEqual(prove("|- false", prefer_counterproof=True).outcome, DISPROVEN)

    def test_refuted_by_premises(self):
        attempt = prove("P <-> Q, P |- !Q")
        self.assertEqual(attempt.outcome, EXHAUSTED)
        self.assertIsInstance(attempt.result.proof, Disproven)
        self.assertEqual(prove("P <-> Q, P |- !Q", prefer_counterproof=True).outcome, DISPROVEN)

    def test_self_contradiction(self):
        self.assertEqual(prove("P |- !P").outcome, EXHAUSTED)
        self.assertEqual(prove("P |- !P", prefer_counterproof=True).outcome, DISPROVEN)

    def test_equalities(self):
        self.assertEqual(prove("a == b |- a != b").outcome, EXHAUSTED)
        self.assertEqual(prove("a == b, b == c, c == d, d == e |- e != a").outcome, EXHAUSTED)

    def test_counterproof_has_proof(self):
        """Test that a refutation comes with the proof of the conclusions' negation."""
        attempt = prove("P |- !P", prefer_counterproof=True)
        self.assertTrue(is_valid_proof(list(attempt.result.proof.deductions)))


if __name__ == '__main__':
    unittest.main()
