"""
folres: a first-order resolution prover.

folres decides statements ``premises |- conclusions`` of first-order logic
with equality by refutation. It includes:

- Term and formula representations with integer names
- Conversion to clause normal form (distribution or Tseitin, with Skolemization)
- Martelli-Montanari unification
- Binary resolution and unit equality substitution
- A heuristic best-first saturation loop
- Proof reconstruction and printing

Basic usage:
    >>> from folres import prove, Printer
    >>> attempt = prove("all x: (P(x) -> Q(x)), P(a) |- Q(a)")
    >>> attempt.outcome
    'proven'
    >>> for line in Printer(attempt.table).proof(attempt.result.proof.deductions):
    ...     print(line)
"""

from typing import Union

__version__ = "0.1.0"

# Names, terms and formulas
from folres.core import (
    NameAllocator, NameTable,
    Var, Fun, Pred, And, Or, Not, All, Some, TRUE, FALSE,
    Unifier, mgu,
    FolresError,
)

# Normal forms
from folres.nf import Clause, NormalForm, equiv_cnf, tseitin_cnf

# Saturation
from folres.loops import Resolver
from folres.selectors import get_heuristic, list_heuristics

# Proofs
from folres.proofs import Proven, Disproven, ResolverResult, Printer

# Text front-end
from folres.fileformats import Statement, parse_statement, parse_formula, parse_clause

# Configuration
from folres.utils.config import ResolverConfig, get_config

from folres.prover import ProofAttempt, prepare, run


def prove(statement: Union[str, Statement],
          strategy: str = "equiv",
          heuristic: str = "symbol_count",
          max_steps: int = 10000,
          prefer_counterproof: bool = False) -> ProofAttempt:
    """
    Attempt to prove a statement by refutation.

    Args:
        statement: Statement text such as ``"P, P -> Q |- Q"`` or a parsed Statement
        strategy: Clausification strategy, ``"equiv"`` or ``"tseitin"``
        heuristic: Name of the clause selection heuristic
        max_steps: Maximum number of resolver steps (0 for no limit)
        prefer_counterproof: Refute the statement instead of proving it

    Returns:
        The proof attempt; ``outcome`` tells how it ended
    """
    config = ResolverConfig(
        heuristic=heuristic,
        strategy=strategy,
        max_steps=max_steps,
        prefer_counterproof=prefer_counterproof,
    )
    if isinstance(statement, str):
        statement, table, allocator = parse_statement(statement)
    else:
        table, allocator = NameTable(), None
    return run(prepare(statement, table, config, allocator))


__all__ = [
    # Version
    "__version__",

    # Core logic
    "NameAllocator", "NameTable",
    "Var", "Fun", "Pred", "And", "Or", "Not", "All", "Some", "TRUE", "FALSE",
    "Unifier", "mgu",
    "FolresError",

    # Normal forms
    "Clause", "NormalForm", "equiv_cnf", "tseitin_cnf",

    # Saturation
    "Resolver", "get_heuristic", "list_heuristics",

    # Proofs
    "Proven", "Disproven", "ResolverResult", "Printer",

    # Text front-end
    "Statement", "parse_statement", "parse_formula", "parse_clause",

    # Configuration
    "ResolverConfig", "get_config",

    # High-level API
    "ProofAttempt", "prove",
]
