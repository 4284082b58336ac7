"""Data structures for species, equations and balancing results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class Side(Enum):
    REACTANT = 1
    PRODUCT = -1

    @property
    def sign(self) -> int:
        return self.value


@dataclass(frozen=True)
class Species:
    raw_token: str
    atoms: Mapping[str, int]
    charge: int = 0
    side: Side = Side.REACTANT

    def to_dict(self) -> dict[str, Any]:
        return {
            "raw": self.raw_token,
            "atoms": dict(self.atoms),
            "charge": self.charge,
            "side": self.side.name.lower(),
        }


@dataclass(frozen=True)
class Equation:
    """Species in input order, reactants first."""

    species: tuple[Species, ...]
    arrow: str = "->"

    @property
    def reactants(self) -> tuple[Species, ...]:
        return tuple(s for s in self.species if s.side is Side.REACTANT)

    @property
    def products(self) -> tuple[Species, ...]:
        return tuple(s for s in self.species if s.side is Side.PRODUCT)

    @property
    def has_charge(self) -> bool:
        return any(s.charge != 0 for s in self.species)

    def __len__(self) -> int:
        return len(self.species)


@dataclass(frozen=True)
class BalanceResult:
    coefficients: tuple[int, ...]
    equation_text: str
    species: tuple[Species, ...]
    nullity: int = 1
    charge_row: bool = False
    sign_ambiguous: bool = False
    elements: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_unique(self) -> bool:
        return self.nullity == 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": True,
            "coefficients": list(self.coefficients),
            "equation": self.equation_text,
            "species": [s.to_dict() for s in self.species],
            "elements": list(self.elements),
            "charge_row": self.charge_row,
            "nullity": self.nullity,
            "sign_ambiguous": self.sign_ambiguous,
        }
