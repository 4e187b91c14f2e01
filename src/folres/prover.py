"""Glue between the front-end, the normal-form conversion and the resolver."""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from folres.core.names import NameAllocator, NameTable
from folres.fileformats.statement import Statement
from folres.loops.resolver import Resolver
from folres.nf.clause import NormalForm
from folres.nf.equiv import equiv_cnf
from folres.nf.tseitin import tseitin_cnf
from folres.proofs.proof import ResolverResult
from folres.utils.config import ResolverConfig


logger = logging.getLogger(__name__)

PROVEN = "proven"
DISPROVEN = "disproven"
EXHAUSTED = "exhausted"
UNDECIDED = "undecided"


@dataclass
class ProofAttempt:
    """Everything produced while trying to prove one statement."""
    statement: Statement
    table: NameTable
    cnf: NormalForm
    resolver: Resolver
    config: ResolverConfig
    result: Optional[ResolverResult] = None

    @property
    def outcome(self) -> str:
        if self.result is None:
            return UNDECIDED
        if self.result.is_proven:
            return DISPROVEN if self.config.prefer_counterproof else PROVEN
        return EXHAUSTED


def clausify(statement: Statement, config: ResolverConfig,
             allocator: Optional[NameAllocator] = None) -> NormalForm:
    """The clause set to refute for ``statement``."""
    if config.prefer_counterproof:
        formula = statement.provable_formula()
    else:
        formula = statement.refutable_formula()

    if config.strategy == 'tseitin':
        return tseitin_cnf(formula, allocator)
    return equiv_cnf(formula)


def prepare(statement: Statement, table: NameTable, config: ResolverConfig,
            allocator: Optional[NameAllocator] = None) -> ProofAttempt:
    cnf = clausify(statement, config, allocator)
    resolver = Resolver(config.heuristic)
    resolver.assume_cnf(cnf)
    logger.info("Refuting %d clauses with the %s heuristic", len(cnf), resolver.heuristic.name)
    return ProofAttempt(statement, table, cnf, resolver, config)


def run(attempt: ProofAttempt, on_step: Optional[Callable[[int], None]] = None) -> ProofAttempt:
    """Drive the resolver within the configured budget (0 means no budget).

    ``on_step`` is called after every step with the step number.
    """
    resolver = attempt.resolver
    budget = attempt.config.max_steps
    taken = 0
    while budget == 0 or taken < budget:
        result = resolver.step()
        taken += 1
        if on_step is not None:
            on_step(taken)
        if result is not None:
            attempt.result = result
            break
    return attempt
