"""Exact rational arithmetic helpers.

All values are :class:`fractions.Fraction` instances, which are kept in lowest
terms with a positive denominator by construction. This module only adds the
integer-only constructor and the zero checks used by the solver.
"""

from __future__ import annotations

import math
import numbers
from fractions import Fraction
from typing import Iterable

from chembalance.errors import DivisionByZeroError

ZERO = Fraction(0, 1)
ONE = Fraction(1, 1)


def make_fraction(numerator: int, denominator: int = 1) -> Fraction:
    """Build a reduced fraction from two integers.

    Floats are rejected so that no binary rounding can leak into the solver.
    """
    for value in (numerator, denominator):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError(f"Fractions are built from integers only, got {value!r}")
    if denominator == 0:
        raise DivisionByZeroError(f"Zero denominator in {numerator}/0")
    return Fraction(int(numerator), int(denominator))


def divide(dividend: Fraction, divisor: Fraction) -> Fraction:
    if divisor == 0:
        raise DivisionByZeroError(f"Cannot divide {dividend} by zero")
    return dividend / divisor


def is_zero(value: Fraction) -> bool:
    return value.numerator == 0


def denominator_lcm(values: Iterable[Fraction]) -> int:
    """Least common multiple of all denominators (1 for an empty input)."""
    result = 1
    for value in values:
        result = math.lcm(result, value.denominator)
    return result


def integer_gcd(values: Iterable[int]) -> int:
    """Greatest common divisor of the absolute values, treating all-zero as 1."""
    result = 0
    for value in values:
        result = math.gcd(result, abs(value))
    return result or 1
