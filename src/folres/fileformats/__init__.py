"""Text front-end: statements, formulas and unification queries."""

from .statement import Statement
from .parser import (
    Namer, parse_statement, parse_formula, parse_clause, parse_unifiable, read_text, read_file,
)

__all__ = [
    "Statement",
    "Namer", "parse_statement", "parse_formula", "parse_clause", "parse_unifiable",
    "read_text", "read_file",
]
