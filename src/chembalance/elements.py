"""Minimal element table used by the stoichiometry helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class ElementProperties:
    atomic_number: int
    symbol: str
    name: str
    atomic_weight: float  # g/mol
    electronegativity: float  # Pauling


class UnknownElementError(KeyError):
    def __init__(self, symbol: str):
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self) -> str:
        return f"Element {self.symbol!r} is not in the element table"


_TABLE = [
    ElementProperties(1, "H", "Hydrogen", 1.008, 2.20),
    ElementProperties(6, "C", "Carbon", 12.011, 2.55),
    ElementProperties(7, "N", "Nitrogen", 14.007, 3.04),
    ElementProperties(8, "O", "Oxygen", 15.999, 3.44),
    ElementProperties(11, "Na", "Sodium", 22.990, 0.93),
    ElementProperties(12, "Mg", "Magnesium", 24.305, 1.31),
    ElementProperties(13, "Al", "Aluminium", 26.982, 1.61),
    ElementProperties(16, "S", "Sulfur", 32.06, 2.58),
    ElementProperties(17, "Cl", "Chlorine", 35.45, 3.16),
    ElementProperties(19, "K", "Potassium", 39.098, 0.82),
    ElementProperties(20, "Ca", "Calcium", 40.078, 1.00),
    ElementProperties(24, "Cr", "Chromium", 51.996, 1.66),
    ElementProperties(26, "Fe", "Iron", 55.845, 1.83),
    ElementProperties(29, "Cu", "Copper", 63.546, 1.90),
    ElementProperties(30, "Zn", "Zinc", 65.38, 1.65),
    ElementProperties(47, "Ag", "Silver", 107.87, 1.93),
    ElementProperties(79, "Au", "Gold", 196.97, 2.54),
]

ELEMENTS: Mapping[str, ElementProperties] = {e.symbol: e for e in _TABLE}


def lookup(symbol: str) -> ElementProperties:
    try:
        return ELEMENTS[symbol]
    except KeyError:
        raise UnknownElementError(symbol) from None
