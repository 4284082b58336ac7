"""Nullspace extraction and integer normalization."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import Sequence

from chembalance.elimination import RREFResult
from chembalance.errors import NoNontrivialSolutionError
from chembalance.fraction import ONE, ZERO, denominator_lcm, integer_gcd

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntegerSolution:
    coefficients: tuple[int, ...]
    sign_ambiguous: bool = False

    @property
    def all_positive(self) -> bool:
        return not self.sign_ambiguous


def solve_homogeneous(reduced: RREFResult) -> list[Fraction]:
    """Return one nonzero rational solution of ``A @ x = 0``.

    The lowest-index free column is set to 1 and every other free column to
    0; pivot variables follow by back-substitution against their rows.
    """
    free = reduced.free_columns()
    logger.debug("Free columns %s", free)
    if not free:
        raise NoNontrivialSolutionError(
            "No nontrivial solution found; the equation cannot be balanced as given."
        )

    matrix = reduced.matrix
    n = matrix.shape[1]
    x = [ZERO] * n
    x[free[0]] = ONE

    for row, pivot_col in enumerate(reduced.pivot_columns):
        total = ZERO
        for col in range(n):
            if col != pivot_col:
                total += matrix[row, col] * x[col]
        x[pivot_col] = -total
    logger.debug("Rational solution %s", [str(value) for value in x])

    if len(free) > 1:
        logger.warning("Nullspace has dimension %d; returning the basis vector for column %d",
                       len(free), free[0])
    return x


def normalize(vector: Sequence[Fraction]) -> IntegerSolution:
    """Scale ``vector`` to coprime integers and fix the overall sign.

    The vector is negated when no entry is positive, or when negative entries
    strictly outnumber positive ones. A result that still contains a
    non-positive entry is flagged as ``sign_ambiguous``.
    """
    scale = denominator_lcm(vector)
    integers = [int(value * scale) for value in vector]
    divisor = integer_gcd(integers)
    logger.debug("Cleared denominators with factor %d: %s", scale, integers)
    integers = [value // divisor for value in integers]

    positives = sum(1 for value in integers if value > 0)
    negatives = sum(1 for value in integers if value < 0)
    if positives == 0 or negatives > positives:
        integers = [-value for value in integers]

    logger.debug("Normalized coefficients %s", integers)
    ambiguous = any(value <= 0 for value in integers)
    if ambiguous:
        logger.warning("Coefficient vector %s is not all positive", integers)
    return IntegerSolution(coefficients=tuple(integers), sign_ambiguous=ambiguous)
