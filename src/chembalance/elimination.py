"""Gauss-Jordan elimination over exact fractions."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from chembalance.fraction import divide, is_zero, make_fraction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RREFResult:
    """Reduced row-echelon form and the pivot column of each leading row."""

    matrix: np.ndarray
    pivot_columns: tuple[int, ...]

    @property
    def rank(self) -> int:
        return len(self.pivot_columns)

    def free_columns(self) -> tuple[int, ...]:
        pivots = set(self.pivot_columns)
        return tuple(j for j in range(self.matrix.shape[1]) if j not in pivots)


def to_fraction_matrix(values: np.ndarray) -> np.ndarray:
    """Copy an integer matrix into an object array of fractions."""
    rows, cols = values.shape
    matrix = np.empty((rows, cols), dtype=object)
    for i in range(rows):
        for j in range(cols):
            matrix[i, j] = make_fraction(int(values[i, j]))
    return matrix


def rref(values: np.ndarray) -> RREFResult:
    """Reduce ``values`` to reduced row-echelon form.

    The input is not modified. Columns are scanned left to right; the first
    row at or below the current row with a nonzero entry becomes the pivot,
    is scaled to 1 and then cleared from every other row.
    """
    matrix = to_fraction_matrix(np.asarray(values))
    (m, n) = matrix.shape

    row = 0
    pivot_columns = []
    for col in range(n):
        if row >= m:
            break

        pivot = next((i for i in range(row, m) if not is_zero(matrix[i, col])), None)
        if pivot is None:
            # col is no pivot column.
            continue

        if pivot != row:
            matrix[[row, pivot]] = matrix[[pivot, row]]

        pivot_value = matrix[row, col]
        for j in range(col, n):
            matrix[row, j] = divide(matrix[row, j], pivot_value)

        for i in range(m):
            if i == row:
                continue
            factor = matrix[i, col]
            if is_zero(factor):
                continue
            for j in range(col, n):
                matrix[i, j] = matrix[i, j] - factor * matrix[row, j]

        pivot_columns.append(col)
        row += 1

    logger.debug("RREF pivot columns %s", pivot_columns)
    return RREFResult(matrix=matrix, pivot_columns=tuple(pivot_columns))
