"""Ground-state electron configurations.

Subshells are filled in Aufbau (Madelung) order; a few elements whose
measured ground state differs from that order are tabulated.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass

from chembalance.elements import lookup

MAX_ATOMIC_NUMBER = 118

AUFBAU_ORDER: tuple[tuple[str, int], ...] = (
    ("1s", 2), ("2s", 2), ("2p", 6), ("3s", 2), ("3p", 6), ("4s", 2),
    ("3d", 10), ("4p", 6), ("5s", 2), ("4d", 10), ("5p", 6), ("6s", 2),
    ("4f", 14), ("5d", 10), ("6p", 6), ("7s", 2), ("5f", 14), ("6d", 10),
    ("7p", 6),
)

# Largest first.
NOBLE_GAS_CORES: tuple[tuple[int, str], ...] = (
    (86, "Rn"), (54, "Xe"), (36, "Kr"), (18, "Ar"), (10, "Ne"), (2, "He"),
)

# Valence subshells on top of a noble-gas core.
_EXCEPTIONS: dict[int, tuple[int, tuple[tuple[str, int], ...]]] = {
    24: (18, (("4s", 1), ("3d", 5))),  # Cr
    29: (18, (("4s", 1), ("3d", 10))),  # Cu
    47: (36, (("5s", 1), ("4d", 10))),  # Ag
    79: (54, (("6s", 1), ("4f", 14), ("5d", 10))),  # Au
}


@dataclass(frozen=True)
class ElectronConfiguration:
    atomic_number: int
    subshells: tuple[tuple[str, int], ...]
    exception: bool = False

    @property
    def long(self) -> str:
        """``1s2 2s2 2p6 ...``"""
        return " ".join(f"{orbital}{count}" for orbital, count in self.subshells)

    @property
    def noble_gas(self) -> str:
        """Shorthand such as ``[Ar] 4s2 3d6``; long form for H and He."""
        for core_z, symbol in NOBLE_GAS_CORES:
            if core_z < self.atomic_number:
                core = aufbau_fill(core_z)
                rest = self.subshells[len(core):]
                return " ".join([f"[{symbol}]"] + [f"{o}{c}" for o, c in rest])
        return self.long

    @property
    def shells(self) -> tuple[int, ...]:
        """Electron count per principal quantum number, from n=1 outwards."""
        counts = [0] * max(int(orbital[:-1]) for orbital, _ in self.subshells)
        for orbital, count in self.subshells:
            counts[int(orbital[:-1]) - 1] += count
        return tuple(counts)


def aufbau_fill(electrons: int) -> tuple[tuple[str, int], ...]:
    subshells = []
    left = electrons
    for orbital, capacity in AUFBAU_ORDER:
        if left <= 0:
            break
        used = min(left, capacity)
        subshells.append((orbital, used))
        left -= used
    return tuple(subshells)


def electron_configuration(atomic_number: int) -> ElectronConfiguration:
    """Ground-state configuration of the neutral atom ``atomic_number``.

    Raises:
        ValueError: ``atomic_number`` is not an integer in 1..118.
    """
    if isinstance(atomic_number, bool) or not isinstance(atomic_number, numbers.Integral):
        raise ValueError(f"Atomic number must be an integer, got {atomic_number!r}")
    if not 1 <= atomic_number <= MAX_ATOMIC_NUMBER:
        raise ValueError(f"Atomic number must be in 1..{MAX_ATOMIC_NUMBER}, got {atomic_number}")

    if atomic_number in _EXCEPTIONS:
        core_z, valence = _EXCEPTIONS[atomic_number]
        return ElectronConfiguration(
            atomic_number=atomic_number,
            subshells=aufbau_fill(core_z) + valence,
            exception=True,
        )
    return ElectronConfiguration(atomic_number=atomic_number, subshells=aufbau_fill(atomic_number))


def electron_configuration_for(symbol: str) -> ElectronConfiguration:
    """Configuration for an element symbol from the element table.

    Raises:
        UnknownElementError: ``symbol`` is not in the element table.
    """
    return electron_configuration(lookup(symbol).atomic_number)
