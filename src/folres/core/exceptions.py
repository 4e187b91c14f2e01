class FolresError(Exception):
    pass


class UnifierIntegrityError(FolresError):
    def __init__(self, reason, name, term):
        super().__init__(f"Invalid unifier binding {name} := {term!r}: {reason}")
        self.reason = reason
        self.name = name
        self.term = term


class NotClauseError(FolresError):
    def __init__(self, notclause):
        super().__init__(f"Expected clause, got {notclause!r}")
        self.notclause = notclause


class QuantifiedFormulaError(FolresError):
    def __init__(self, formula):
        super().__init__(f"Expected quantifier-free formula, got {formula!r}")
        self.formula = formula


class ArityError(FolresError):
    def __init__(self, name, expected, got):
        super().__init__(f"Symbol {name} expects {expected} arguments, got {got}")
        self.name = name
        self.expected = expected
        self.got = got


class UnknownHeuristicError(FolresError):
    def __init__(self, name, available):
        super().__init__(f"Unknown heuristic: {name} (available: {', '.join(available)})")
        self.name = name
        self.available = list(available)


class ParseError(FolresError):
    def __init__(self, text, line, column, expected=None):
        message = f"Syntax error at line {line}, column {column}"
        if expected:
            message += f", expected one of: {', '.join(sorted(expected))}"
        super().__init__(message)
        self.text = text
        self.line = line
        self.column = column
        self.expected = set(expected or ())


class ScopeError(FolresError):
    def __init__(self, identifier, reason):
        super().__init__(f"Cannot use '{identifier}' here: {reason}")
        self.identifier = identifier
        self.reason = reason
