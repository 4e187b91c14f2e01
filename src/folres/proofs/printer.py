"""Rendering of terms, formulas, clauses and proofs as text."""

from typing import Iterable, List, Optional

from folres.core.logic import Var, Fun, Top, Bottom, Pred, And, Or, Not, All, Some
from folres.core.names import NameTable
from folres.core.unification import Unifier
from folres.nf.clause import Clause, NormalForm
from .proof import Premise, Resolve, Substitute, QED


EMPTY_CLAUSE = "⊥"


class Printer:
    """Formats objects using the identifiers of a name table.

    Names missing from the table are shown as ``#n``, or ``:n`` for
    variables.
    """

    def __init__(self, table: Optional[NameTable] = None):
        self.table = table if table is not None else NameTable()

    def name(self, name: int) -> str:
        text = self.table.lookup(name)
        return text if text is not None else f"#{name}"

    def term(self, term) -> str:
        if isinstance(term, Var):
            text = self.table.lookup(term.name)
            return text if text is not None else f":{term.name}"
        if not term.args:
            return self.name(term.name)
        return f"{self.name(term.name)}({self._args(term.args)})"

    def atom(self, atom: Pred) -> str:
        if atom.is_equality:
            left, right = atom.args
            return f"{self.term(left)} == {self.term(right)}"
        if not atom.args:
            return self.name(atom.name)
        return f"{self.name(atom.name)}({self._args(atom.args)})"

    def formula(self, formula) -> str:
        if isinstance(formula, Top):
            return "true"
        if isinstance(formula, Bottom):
            return "false"
        if isinstance(formula, Pred):
            return self.atom(formula)
        if isinstance(formula, Not):
            if isinstance(formula.body, Pred) and formula.body.is_equality:
                left, right = formula.body.args
                return f"{self.term(left)} != {self.term(right)}"
            return f"!{self.formula(formula.body)}"
        if isinstance(formula, And):
            return f"({self.formula(formula.left)} & {self.formula(formula.right)})"
        if isinstance(formula, Or):
            return f"({self.formula(formula.left)} | {self.formula(formula.right)})"
        if isinstance(formula, All):
            return f"(all {self.term(Var(formula.name))}: {self.formula(formula.body)})"
        if isinstance(formula, Some):
            return f"(exists {self.term(Var(formula.name))}: {self.formula(formula.body)})"
        raise TypeError(f"Expected formula, got {formula!r}")

    def literal(self, atom: Pred, positive: bool) -> str:
        if positive:
            return self.atom(atom)
        if atom.is_equality:
            left, right = atom.args
            return f"{self.term(left)} != {self.term(right)}"
        return f"!{self.atom(atom)}"

    def clause(self, clause: Clause) -> str:
        if clause.is_empty():
            return EMPTY_CLAUSE
        return " | ".join(self.literal(atom, positive) for atom, positive in clause.literals())

    def normal_form(self, normal_form: NormalForm) -> str:
        if not len(normal_form):
            return "{}"
        return "{" + ", ".join(self.clause(clause) for clause in normal_form) + "}"

    def unifier(self, unifier: Unifier) -> str:
        items = sorted(unifier.items())
        return "{" + ", ".join(f"{self.term(Var(name))}: {self.term(term)}" for name, term in items) + "}"

    def deduction(self, deduction) -> str:
        if isinstance(deduction, Premise):
            return f"{self.clause(deduction.clause)}   [Premise.]"
        if isinstance(deduction, Resolve):
            return (f"{self.clause(deduction.clause)}   [By resolution from line #{deduction.a_line} "
                    f"and #{deduction.b_line} with unifier {self.unifier(deduction.unifier)}.]")
        if isinstance(deduction, Substitute):
            text = (f"{self.clause(deduction.clause)}   [By substitution of {self.term(deduction.lhs)} "
                    f"with {self.term(deduction.rhs)} from line #{deduction.equation_line} "
                    f"into line #{deduction.target_line}")
            if not deduction.unifier.is_empty():
                text += f" with unifier {self.unifier(deduction.unifier)}"
            return text + ".]"
        if isinstance(deduction, QED):
            return f"Q.E.D.   [By refutation on line {deduction.line}.]"
        raise TypeError(f"Expected deduction, got {deduction!r}")

    def proof(self, deductions: Iterable) -> List[str]:
        return [f"{line}: {self.deduction(deduction)}" for line, deduction in enumerate(deductions)]

    def format(self, obj) -> str:
        """Format any supported object."""
        if isinstance(obj, (Var, Fun)):
            return self.term(obj)
        if isinstance(obj, Clause):
            return self.clause(obj)
        if isinstance(obj, NormalForm):
            return self.normal_form(obj)
        if isinstance(obj, Unifier):
            return self.unifier(obj)
        if isinstance(obj, (Premise, Resolve, Substitute, QED)):
            return self.deduction(obj)
        return self.formula(obj)

    def _args(self, args) -> str:
        return ", ".join(self.term(arg) for arg in args)
