"""Conservation matrix assembly."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from chembalance.errors import NoAtomsRecognizedError
from chembalance.models import Species

logger = logging.getLogger(__name__)

CHARGE_ROW_LABEL = "charge"


@dataclass(frozen=True)
class ConservationMatrix:
    """Signed element (and optional charge) balance, one column per species.

    Attributes:
        elements: Element symbols labelling the rows, sorted.
        values: Integer matrix of shape ``(rows, species)``.
        charge_row: Whether the last row balances net ionic charge.
    """

    elements: tuple[str, ...]
    values: np.ndarray
    charge_row: bool = False

    @property
    def row_labels(self) -> tuple[str, ...]:
        if self.charge_row:
            return self.elements + (CHARGE_ROW_LABEL,)
        return self.elements

    @property
    def shape(self) -> tuple[int, int]:
        return self.values.shape

    def residual(self, coefficients: Sequence[int]) -> np.ndarray:
        """``A @ x``; all zeros when ``coefficients`` balance the equation."""
        return self.values @ np.asarray(coefficients, dtype=np.int64)


def build_conservation_matrix(
    species: Sequence[Species],
    include_charge: bool | None = None,
) -> ConservationMatrix:
    """Build the conservation matrix for ``species`` in order.

    Cells are ``side.sign * count`` so that reactants are positive and
    products negative in ``A @ x = 0``. With ``include_charge=None`` the
    charge row is added only when some species carries a nonzero charge.
    """
    elements = tuple(sorted({symbol for s in species for symbol in s.atoms}))
    if include_charge is None:
        include_charge = any(s.charge != 0 for s in species)

    rows = len(elements) + (1 if include_charge else 0)
    values = np.zeros((rows, len(species)), dtype=np.int64)
    index = {symbol: i for i, symbol in enumerate(elements)}
    for col, s in enumerate(species):
        for symbol, count in s.atoms.items():
            values[index[symbol], col] = s.side.sign * count
        if include_charge:
            values[-1, col] = s.side.sign * s.charge

    if rows == 0:
        raise NoAtomsRecognizedError("No atoms recognized in the equation.")

    logger.debug("Conservation matrix %s over rows %s", values.shape, elements)
    return ConservationMatrix(elements=elements, values=values, charge_row=include_charge)
