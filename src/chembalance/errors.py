"""Error kinds raised by the balancing pipeline."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    DIVISION_BY_ZERO = "DivisionByZero"
    NO_ARROW_FOUND = "NoArrowFound"
    MALFORMED_EQUATION = "MalformedEquation"
    EMPTY_EQUATION = "EmptyEquation"
    NO_ATOMS_RECOGNIZED = "NoAtomsRecognized"
    NO_NONTRIVIAL_SOLUTION = "NoNontrivialSolution"
    COEFFICIENT_LENGTH_MISMATCH = "CoefficientLengthMismatch"
    AMBIGUOUS_SIGN = "AmbiguousSign"
    MULTIPLE_SOLUTIONS = "MultipleSolutions"


class BalanceError(ValueError):
    """Base class for every failure surfaced by :func:`chembalance.balance`."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DivisionByZeroError(BalanceError, ZeroDivisionError):
    kind = ErrorKind.DIVISION_BY_ZERO


class NoArrowFoundError(BalanceError):
    kind = ErrorKind.NO_ARROW_FOUND


class MalformedEquationError(BalanceError):
    kind = ErrorKind.MALFORMED_EQUATION


class EmptyEquationError(BalanceError):
    kind = ErrorKind.EMPTY_EQUATION


class NoAtomsRecognizedError(BalanceError):
    kind = ErrorKind.NO_ATOMS_RECOGNIZED


class NoNontrivialSolutionError(BalanceError):
    kind = ErrorKind.NO_NONTRIVIAL_SOLUTION


class CoefficientLengthMismatchError(BalanceError):
    kind = ErrorKind.COEFFICIENT_LENGTH_MISMATCH


class AmbiguousSignError(BalanceError):
    """Raised in strict mode when no all-positive coefficient vector was found."""

    kind = ErrorKind.AMBIGUOUS_SIGN


class MultipleSolutionsError(BalanceError):
    """Raised in strict mode when the nullspace has more than one dimension."""

    kind = ErrorKind.MULTIPLE_SOLUTIONS
