"""Terms and formulas of first-order logic.

Every symbol is identified by an integer name. Terms are variables and
function applications (constants are functions without arguments); formulas
are built from predicate atoms, the two constants, the Boolean connectives
and the two quantifiers. All objects are immutable and hashable, so they can
be shared freely and used as dictionary keys.
"""

from dataclasses import dataclass
from functools import reduce
from typing import FrozenSet, Iterable, Set, Tuple, Union

from .exceptions import ArityError


# Name reserved for the equality predicate.
EQUALITY = -1


@dataclass(frozen=True)
class Var:
    """A variable."""
    name: int


@dataclass(frozen=True)
class Fun:
    """Application of a function symbol; a constant when ``args`` is empty."""
    name: int
    args: Tuple["Term", ...] = ()

    @property
    def arity(self) -> int:
        return len(self.args)


Term = Union[Var, Fun]


@dataclass(frozen=True)
class Top:
    """The formula that is always true."""


@dataclass(frozen=True)
class Bottom:
    """The formula that is always false."""


@dataclass(frozen=True)
class Pred:
    """A predicate applied to terms. Equality uses the name ``EQUALITY``."""
    name: int
    args: Tuple[Term, ...] = ()

    def __post_init__(self):
        if self.name == EQUALITY and len(self.args) != 2:
            raise ArityError(self.name, 2, len(self.args))

    @property
    def arity(self) -> int:
        return len(self.args)

    @property
    def is_equality(self) -> bool:
        return self.name == EQUALITY


@dataclass(frozen=True)
class And:
    left: "Formula"
    right: "Formula"


@dataclass(frozen=True)
class Or:
    left: "Formula"
    right: "Formula"


@dataclass(frozen=True)
class Not:
    body: "Formula"


@dataclass(frozen=True)
class All:
    """Universal quantification of the variable ``name`` over ``body``."""
    name: int
    body: "Formula"


@dataclass(frozen=True)
class Some:
    """Existential quantification of the variable ``name`` over ``body``."""
    name: int
    body: "Formula"


Formula = Union[Top, Bottom, Pred, And, Or, Not, All, Some]

TRUE = Top()
FALSE = Bottom()


def const(name: int) -> Fun:
    return Fun(name, ())


def equals(left: Term, right: Term) -> Pred:
    return Pred(EQUALITY, (left, right))


def implies(premise: "Formula", conclusion: "Formula") -> Or:
    return Or(Not(premise), conclusion)


def iff(left: "Formula", right: "Formula") -> And:
    return And(implies(left, right), implies(right, left))


def xor(left: "Formula", right: "Formula") -> Not:
    return Not(iff(left, right))


def no(name: int, body: "Formula") -> All:
    """``no x: body``, i.e. there is no ``x`` for which ``body`` holds."""
    return All(name, Not(body))


def conjoin(formulas: Iterable["Formula"]) -> "Formula":
    """Conjunction of all ``formulas``, ``TRUE`` when there are none."""
    formulas = list(formulas)
    if not formulas:
        return TRUE
    return reduce(And, formulas)


def disjoin(formulas: Iterable["Formula"]) -> "Formula":
    """Disjunction of all ``formulas``, ``FALSE`` when there are none."""
    formulas = list(formulas)
    if not formulas:
        return FALSE
    return reduce(Or, formulas)


def is_term(obj) -> bool:
    return isinstance(obj, (Var, Fun))


def is_formula(obj) -> bool:
    return isinstance(obj, (Top, Bottom, Pred, And, Or, Not, All, Some))


def names(obj) -> Set[int]:
    """Collect every name occurring in a term, formula or sequence of them.

    This includes predicate and function symbols as well as bound and free
    variables, but not the reserved equality name.
    """
    result: Set[int] = set()
    _collect_names(obj, result)
    result.discard(EQUALITY)
    return result


def _collect_names(obj, acc: Set[int]):
    if isinstance(obj, Var):
        acc.add(obj.name)
    elif isinstance(obj, (Fun, Pred)):
        acc.add(obj.name)
        for arg in obj.args:
            _collect_names(arg, acc)
    elif isinstance(obj, (And, Or)):
        _collect_names(obj.left, acc)
        _collect_names(obj.right, acc)
    elif isinstance(obj, Not):
        _collect_names(obj.body, acc)
    elif isinstance(obj, (All, Some)):
        acc.add(obj.name)
        _collect_names(obj.body, acc)
    elif isinstance(obj, (Top, Bottom)):
        pass
    elif isinstance(obj, (tuple, list, set, frozenset)):
        for item in obj:
            _collect_names(item, acc)
    else:
        raise TypeError(f"Expected term or formula, got {obj!r}")


def free_variables(obj) -> FrozenSet[int]:
    """Names of the variables occurring free in ``obj``."""
    if isinstance(obj, Var):
        return frozenset((obj.name,))
    if isinstance(obj, (Fun, Pred)):
        return frozenset().union(*(free_variables(arg) for arg in obj.args))
    if isinstance(obj, (And, Or)):
        return free_variables(obj.left) | free_variables(obj.right)
    if isinstance(obj, Not):
        return free_variables(obj.body)
    if isinstance(obj, (All, Some)):
        return free_variables(obj.body) - {obj.name}
    if isinstance(obj, (Top, Bottom)):
        return frozenset()
    if isinstance(obj, (tuple, list, set, frozenset)):
        return frozenset().union(*(free_variables(item) for item in obj))
    raise TypeError(f"Expected term or formula, got {obj!r}")


def occurs(name: int, term: Term) -> bool:
    """Check whether the variable ``name`` occurs in ``term``."""
    if isinstance(term, Var):
        return term.name == name
    return any(occurs(name, arg) for arg in term.args)


def next_free_name(obj) -> int:
    """Smallest name that is larger than every name used in ``obj``."""
    used = names(obj)
    return max(used) + 1 if used else 0


def is_quantifier_free(formula: "Formula") -> bool:
    if isinstance(formula, (All, Some)):
        return False
    if isinstance(formula, (And, Or)):
        return is_quantifier_free(formula.left) and is_quantifier_free(formula.right)
    if isinstance(formula, Not):
        return is_quantifier_free(formula.body)
    return True


def term_size(term: Term) -> int:
    """Number of symbols in a term, counting a variable as one."""
    if isinstance(term, Var):
        return 1
    return 1 + sum(term_size(arg) for arg in term.args)


def sort_key(obj):
    """Total structural order on terms, atoms and argument tuples."""
    if isinstance(obj, Var):
        return (0, obj.name)
    if isinstance(obj, Fun):
        return (1, obj.name, tuple(sort_key(arg) for arg in obj.args))
    if isinstance(obj, Pred):
        return (2, obj.name, tuple(sort_key(arg) for arg in obj.args))
    if isinstance(obj, tuple):
        return (3, tuple(sort_key(item) for item in obj))
    raise TypeError(f"Expected term, atom or tuple, got {obj!r}")
