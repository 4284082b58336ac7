"""chembalance core package."""

from chembalance.balancer import BalancerOptions, BalanceReport, balance, try_balance
from chembalance.errors import BalanceError, ErrorKind
from chembalance.models import BalanceResult, Equation, Side, Species
from chembalance.parser import ParsedFormula, parse_formula

__all__ = [
    "BalancerOptions",
    "BalanceReport",
    "balance",
    "try_balance",
    "BalanceError",
    "ErrorKind",
    "BalanceResult",
    "Equation",
    "Side",
    "Species",
    "ParsedFormula",
    "parse_formula",
]
