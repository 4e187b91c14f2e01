"""Derivations, proofs and resolver results.

While saturating, the resolver remembers for every clause how it was first
obtained (a *derivation*). Once the empty clause shows up, ``reconstruct``
turns the derivations leading to it into a numbered list of *deductions*:
every clause used gets exactly one line, premises and intermediate results
appear before the lines that use them, and the proof ends with ``QED``.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Union

import networkx as nx

from folres.core.logic import Term
from folres.core.unification import Unifier
from folres.nf.clause import Clause


# Derivations


@dataclass(frozen=True)
class Assumed:
    """The clause was given as a premise."""


@dataclass(frozen=True)
class Resolved:
    """The clause is a resolvent of ``a`` and ``b``."""
    a: Clause
    b: Clause
    unifier: Unifier


@dataclass(frozen=True)
class Substituted:
    """The clause is ``target``, instantiated by ``unifier``, with ``lhs`` replaced by ``rhs``."""
    equation: Clause
    target: Clause
    lhs: Term
    rhs: Term
    unifier: Unifier = field(default_factory=Unifier)


Derivation = Union[Assumed, Resolved, Substituted]


def parents(derivation: Derivation) -> Tuple[Clause, ...]:
    if isinstance(derivation, Resolved):
        return (derivation.a, derivation.b)
    if isinstance(derivation, Substituted):
        return (derivation.equation, derivation.target)
    return ()


# Deductions


@dataclass(frozen=True)
class Premise:
    clause: Clause


@dataclass(frozen=True)
class Resolve:
    clause: Clause
    a_line: int
    b_line: int
    unifier: Unifier


@dataclass(frozen=True)
class Substitute:
    clause: Clause
    equation_line: int
    target_line: int
    lhs: Term
    rhs: Term
    unifier: Unifier = field(default_factory=Unifier)


@dataclass(frozen=True)
class QED:
    """Closes a proof; ``line`` holds the empty clause."""
    line: int


Deduction = Union[Premise, Resolve, Substitute, QED]


def referenced_lines(deduction: Deduction) -> Tuple[int, ...]:
    if isinstance(deduction, Resolve):
        return (deduction.a_line, deduction.b_line)
    if isinstance(deduction, Substitute):
        return (deduction.equation_line, deduction.target_line)
    if isinstance(deduction, QED):
        return (deduction.line,)
    return ()


def derivation_graph(goal: Clause, derivations: Dict[Clause, Derivation]) -> nx.DiGraph:
    """Graph with an edge from every clause needed for ``goal`` to its parents."""
    graph = nx.DiGraph()
    graph.add_node(goal)
    stack = [goal]
    while stack:
        clause = stack.pop()
        for parent in parents(derivations[clause]):
            if parent not in graph:
                stack.append(parent)
            graph.add_edge(clause, parent)
    return graph


def reconstruct(goal: Clause, derivations: Dict[Clause, Derivation]) -> List[Deduction]:
    """Number the clauses ``goal`` depends on, parents first, and close with QED."""
    graph = derivation_graph(goal, derivations)
    lines: Dict[Clause, int] = {}
    deductions: List[Deduction] = []

    for clause in nx.dfs_postorder_nodes(graph, source=goal):
        derivation = derivations[clause]
        if isinstance(derivation, Resolved):
            deduction = Resolve(clause, lines[derivation.a], lines[derivation.b], derivation.unifier)
        elif isinstance(derivation, Substituted):
            deduction = Substitute(clause, lines[derivation.equation], lines[derivation.target],
                                   derivation.lhs, derivation.rhs, derivation.unifier)
        else:
            deduction = Premise(clause)
        lines[clause] = len(deductions)
        deductions.append(deduction)

    deductions.append(QED(lines[goal]))
    return deductions


def is_valid_proof(deductions: List[Deduction]) -> bool:
    """Check that lines only refer backwards and the proof ends with QED."""
    if not deductions or not isinstance(deductions[-1], QED):
        return False
    for line, deduction in enumerate(deductions):
        if isinstance(deduction, QED) and line != len(deductions) - 1:
            return False
        if any(ref < 0 or ref >= line for ref in referenced_lines(deduction)):
            return False
    final = deductions[deductions[-1].line]
    return not isinstance(final, QED) and final.clause.is_empty()


# Results


@dataclass(frozen=True)
class Proven:
    deductions: Tuple[Deduction, ...]


@dataclass(frozen=True)
class Disproven:
    """Saturation ended without deriving the empty clause."""


@dataclass
class ResolverResult:
    proof: Union[Proven, Disproven]
    deductions_made: int
    learning_order: List[Clause]

    @property
    def is_proven(self) -> bool:
        return isinstance(self.proof, Proven)
