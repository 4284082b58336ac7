"""Molar mass, mass/mole conversion and limiting-reagent helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

import numpy as np

from chembalance.elements import ELEMENTS, ElementProperties, UnknownElementError
from chembalance.parser import parse_formula


@dataclass(frozen=True)
class ReagentAmount:
    formula: str
    mass: float  # g


@dataclass(frozen=True)
class LimitingReagent:
    index: int
    reagent: ReagentAmount
    moles: float


def molar_mass(
    formula: str,
    table: Mapping[str, ElementProperties] | None = None,
) -> float:
    """Molar mass in g/mol.

    Raises:
        UnknownElementError: An element of ``formula`` is missing from the table.
    """
    table = ELEMENTS if table is None else table
    mass = 0.0
    for symbol, count in parse_formula(formula).atoms.items():
        if symbol not in table:
            raise UnknownElementError(symbol)
        mass += count * table[symbol].atomic_weight
    return mass


def grams_to_moles(grams: float, formula: str) -> float:
    return grams / molar_mass(formula)


def moles_to_grams(moles: float, formula: str) -> float:
    return moles * molar_mass(formula)


def limiting_reagent(reactants: Sequence[ReagentAmount]) -> LimitingReagent:
    """Pick the reactant present in the fewest moles."""
    if not reactants:
        raise ValueError("At least one reactant is required.")
    moles = np.array([grams_to_moles(r.mass, r.formula) for r in reactants])
    index = int(np.argmin(moles))
    return LimitingReagent(index=index, reagent=reactants[index], moles=float(moles[index]))
