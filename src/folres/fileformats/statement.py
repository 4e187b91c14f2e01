from dataclasses import dataclass
from typing import Tuple

from folres.core.logic import Formula, And, Not, conjoin


@dataclass(frozen=True)
class Statement:
    """``premises |- conclusions``: the conclusions follow from the premises."""
    premises: Tuple[Formula, ...] = ()
    conclusions: Tuple[Formula, ...] = ()

    def refutable_formula(self) -> Formula:
        """A formula that is unsatisfiable exactly when the statement holds."""
        return And(conjoin(self.premises), Not(conjoin(self.conclusions)))

    def provable_formula(self) -> Formula:
        """A formula whose unsatisfiability refutes the statement."""
        return And(conjoin(self.premises), conjoin(self.conclusions))
