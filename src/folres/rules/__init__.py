"""Inference rules."""

from .base import Rule, RuleApplication, Outcome, classify, normalize_equalities
from .resolution import ResolutionRule, Resolvee, find_resolvees
from .paramodulation import SubstitutionRule, Substitutee, find_substitutees, replace_term

__all__ = [
    "Rule", "RuleApplication", "Outcome", "classify", "normalize_equalities",
    "ResolutionRule", "Resolvee", "find_resolvees",
    "SubstitutionRule", "Substitutee", "find_substitutees", "replace_term",
]
