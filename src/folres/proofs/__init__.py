"""Proof reconstruction and display."""

from .proof import (
    Assumed, Resolved, Substituted, Derivation,
    Premise, Resolve, Substitute, QED, Deduction,
    Proven, Disproven, ResolverResult,
    reconstruct, derivation_graph, is_valid_proof,
)
from .printer import Printer

__all__ = [
    "Assumed", "Resolved", "Substituted", "Derivation",
    "Premise", "Resolve", "Substitute", "QED", "Deduction",
    "Proven", "Disproven", "ResolverResult",
    "reconstruct", "derivation_graph", "is_valid_proof",
    "Printer",
]
