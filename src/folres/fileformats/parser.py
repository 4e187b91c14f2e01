"""Reading statements and formulas from text.

The syntax, loosest binding first::

    premise, ... |- conclusion, ...
    p | q        p & q        p -> q    p <- q    p <-> q
    a == b       a != b       !p        (p)       true    false
    all x, y: p  exists x: p  some x: p no x: p
    P(f(a), :x)

For unification queries, two comma separated term lists are joined by
``===``, as in ``f(:x), :y === f(a), :x``.

Quantifier bodies extend as far to the right as possible. Identifiers bound
by an enclosing quantifier are variables, ``:x`` is a free variable, and
every other identifier is a predicate, function or constant symbol.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from lark import Transformer
from lark.exceptions import UnexpectedInput

from folres.core.exceptions import ParseError, ScopeError
from folres.core.logic import (
    Formula, Term, Var, Fun, Top, Bottom, Pred, And, Or, Not, All, Some,
    equals, implies, iff,
)
from folres.core.names import NameAllocator, NameTable
from folres.nf.clause import Clause
from .lexer import statementlexer
from .statement import Statement


logger = logging.getLogger(__name__)


class SyntaxTreeBuilder(Transformer):
    """Turns the lark tree into nested tuples, before names are resolved."""

    def stmt(self, children):
        premises, conclusions = children
        return ('stmt', premises or [], conclusions or [])

    def args(self, children):
        return list(children)

    def unifiable(self, children):
        left, right = children
        return ('unifiable', left or [], right or [])

    def terms(self, children):
        return list(children)

    def or_(self, children):
        return ('or', children[0], children[1])

    def and_(self, children):
        return ('and', children[0], children[1])

    def implies(self, children):
        return ('implies', children[0], children[1])

    def implied_by(self, children):
        return ('implies', children[1], children[0])

    def iff(self, children):
        return ('iff', children[0], children[1])

    def not_(self, children):
        return ('not', children[0])

    def equal(self, children):
        return ('eq', children[0], children[1])

    def unequal(self, children):
        return ('not', ('eq', children[0], children[1]))

    def true(self, children):
        return ('true',)

    def false(self, children):
        return ('false',)

    def quantified(self, children):
        kind = str(children[0])
        variables = [str(token) for token in children[1:-1]]
        return ('quant', kind, variables, children[-1])

    def call(self, children):
        name, terms = children
        return ('app', str(name), terms or [])

    def symbol(self, children):
        return ('app', str(children[0]), [])

    def free_var(self, children):
        return ('free', str(children[0]))


class Namer:
    """Assigns names to identifiers for one parse context.

    Symbols and free variables keep their name across everything parsed
    with the same namer; every quantifier binding gets a fresh name.
    """

    def __init__(self, allocator: Optional[NameAllocator] = None, table: Optional[NameTable] = None):
        self.allocator = allocator if allocator is not None else NameAllocator()
        self.table = table if table is not None else NameTable()
        self.symbols: Dict[str, int] = {}
        self.free: Dict[str, int] = {}

    def symbol(self, identifier: str) -> int:
        if identifier not in self.symbols:
            name = self.allocator.fresh()
            self.symbols[identifier] = name
            self.table.bind(name, identifier)
        return self.symbols[identifier]

    def free_variable(self, identifier: str) -> int:
        if identifier not in self.free:
            name = self.allocator.fresh()
            self.free[identifier] = name
            self.table.bind(name, f":{identifier}")
        return self.free[identifier]

    def statement(self, node) -> Statement:
        _, premises, conclusions = node
        return Statement(
            tuple(self.formula(p, {}) for p in premises),
            tuple(self.formula(c, {}) for c in conclusions),
        )

    def formula(self, node, scope: Dict[str, int]) -> Formula:
        kind = node[0]
        if kind == 'true':
            return Top()
        if kind == 'false':
            return Bottom()
        if kind == 'not':
            return Not(self.formula(node[1], scope))
        if kind == 'and':
            return And(self.formula(node[1], scope), self.formula(node[2], scope))
        if kind == 'or':
            return Or(self.formula(node[1], scope), self.formula(node[2], scope))
        if kind == 'implies':
            return implies(self.formula(node[1], scope), self.formula(node[2], scope))
        if kind == 'iff':
            return iff(self.formula(node[1], scope), self.formula(node[2], scope))
        if kind == 'eq':
            return equals(self.term(node[1], scope), self.term(node[2], scope))
        if kind == 'quant':
            return self.quantified(node, scope)
        if kind == 'app':
            _, identifier, args = node
            if identifier in scope:
                raise ScopeError(identifier, "a bound variable is not a formula")
            return Pred(self.symbol(identifier), tuple(self.term(arg, scope) for arg in args))
        if kind == 'free':
            raise ScopeError(f":{node[1]}", "a variable is not a formula")
        raise ValueError(f"Unknown syntax node {kind!r}")

    def quantified(self, node, scope: Dict[str, int]) -> Formula:
        _, kind, identifiers, body = node
        inner = dict(scope)
        bound: List[int] = []
        for identifier in identifiers:
            name = self.allocator.fresh()
            self.table.bind(name, identifier)
            inner[identifier] = name
            bound.append(name)

        result = self.formula(body, inner)
        if kind == 'no':
            result = Not(result)
        quantifier = All if kind in ('all', 'no') else Some
        for name in reversed(bound):
            result = quantifier(name, result)
        return result

    def term(self, node, scope: Dict[str, int]) -> Term:
        if node[0] == 'free':
            return Var(self.free_variable(node[1]))
        if node[0] != 'app':
            raise ScopeError(str(node), "expected a term")
        _, identifier, args = node
        if identifier in scope:
            if args:
                raise ScopeError(identifier, "a bound variable takes no arguments")
            return Var(scope[identifier])
        return Fun(self.symbol(identifier), tuple(self.term(arg, scope) for arg in args))


def _parse(text: str, start: str):
    try:
        tree = statementlexer.parse(text, start=start)
    except UnexpectedInput as e:
        expected = getattr(e, 'expected', None) or getattr(e, 'allowed', None)
        raise ParseError(text, e.line, e.column, expected) from e
    return SyntaxTreeBuilder().transform(tree)


def parse_statement(text: str, namer: Optional[Namer] = None) -> Tuple[Statement, NameTable, NameAllocator]:
    """Parse ``premises |- conclusions``."""
    namer = namer if namer is not None else Namer()
    statement = namer.statement(_parse(text, "stmt"))
    logger.debug("Parsed statement with %d premises and %d conclusions",
                 len(statement.premises), len(statement.conclusions))
    return statement, namer.table, namer.allocator


def parse_formula(text: str, namer: Optional[Namer] = None) -> Tuple[Formula, NameTable, NameAllocator]:
    namer = namer if namer is not None else Namer()
    formula = namer.formula(_parse(text, "exp"), {})
    return formula, namer.table, namer.allocator


def parse_clause(text: str, namer: Optional[Namer] = None) -> Clause:
    """Parse a disjunction of literals such as ``!P(:x) | Q(:x)``."""
    formula, _, _ = parse_formula(text, namer)
    return Clause.from_formula(formula)


TermLists = Tuple[Tuple[Term, ...], Tuple[Term, ...]]


def parse_unifiable(text: str, namer: Optional[Namer] = None) -> Tuple[TermLists, NameTable, NameAllocator]:
    """Parse two term lists ``s1, ..., sn === t1, ..., tm``.

    Every identifier is a function or constant symbol; variables are
    written ``:x``.
    """
    namer = namer if namer is not None else Namer()
    _, left, right = _parse(text, "unifiable")
    terms = (
        tuple(namer.term(node, {}) for node in left),
        tuple(namer.term(node, {}) for node in right),
    )
    return terms, namer.table, namer.allocator


def read_text(path) -> str:
    """Contents of the file at ``path``; ``-`` reads standard input."""
    if str(path) == "-":
        return sys.stdin.read()
    with open(Path(path), "r") as f:
        return f.read()


def read_file(path, namer: Optional[Namer] = None) -> Tuple[Statement, NameTable, NameAllocator]:
    return parse_statement(read_text(path), namer)
