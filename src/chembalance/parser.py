"""Formula and equation parsing.

A formula token such as ``Fe2(SO4)3`` or ``SO4^2-`` is read by a small
recursive-descent parser into an atom-count mapping and an ionic charge.
Formula parsing never fails: characters that are not part of an element
symbol, a count or a parenthesised group are skipped, and trailing text that
does not look like a charge yields charge 0.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence

from chembalance.constants import ARROW_SPELLINGS
from chembalance.errors import (
    EmptyEquationError,
    MalformedEquationError,
    NoArrowFoundError,
)
from chembalance.models import Equation, Side, Species

logger = logging.getLogger(__name__)

_CHARGE = re.compile(r"\^?(\d*)([+-])")
# Cu2+, Fe3+, O2-: a bare element symbol with a signed magnitude.
_MONATOMIC_ION = re.compile(r"^([A-Z][a-z]?)(\d+)([+-])$")
# A '+' preceded by whitespace, or followed by the next formula (optionally
# behind spaces and a coefficient). A trailing charge sign is followed by
# neither.
_TERM_SEPARATOR = re.compile(r"(?<!\S)\+|\+(?=\s*\d*\s*[A-Z(])")
_LEADING_COEFFICIENT = re.compile(r"^\d+\s*(?=[A-Z(])")


@dataclass(frozen=True)
class ParsedFormula:
    atoms: Mapping[str, int]
    charge: int = 0


class FormulaParser:
    """Recursive-descent reader over the characters of one formula token."""

    def __init__(self, text: str):
        self._text = text
        self._pos = 0

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _advance(self) -> str:
        char = self._peek()
        self._pos += 1
        return char

    def parse(self) -> ParsedFormula:
        atoms = self.parse_group()
        rest = self._text[self._pos:]
        return ParsedFormula(atoms=atoms, charge=parse_charge(rest))

    def parse_number(self) -> int:
        digits = ""
        while self._peek().isdigit():
            digits += self._advance()
        return int(digits) if digits else 1

    def parse_symbol(self) -> str | None:
        if not self._peek().isupper():
            return None
        symbol = self._advance()
        if self._peek().islower():
            symbol += self._advance()
        return symbol

    def parse_group(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        while self._pos < len(self._text):
            char = self._peek()
            if char == "(":
                self._advance()
                inner = self.parse_group()
                if self._peek() == ")":
                    self._advance()
                multiplier = self.parse_number()
                for symbol, count in inner.items():
                    counts[symbol] = counts.get(symbol, 0) + count * multiplier
            elif char in ")^+-":
                break
            elif char.isupper():
                symbol = self.parse_symbol()
                counts[symbol] = counts.get(symbol, 0) + self.parse_number()
            else:
                self._advance()
        return {symbol: count for symbol, count in counts.items() if count > 0}


def parse_charge(text: str) -> int:
    """Read ``^2-``, ``3+``, ``+`` style charge notation; 0 when absent."""
    match = _CHARGE.search(text)
    if match is None:
        return 0
    magnitude = int(match.group(1)) if match.group(1) else 1
    return magnitude if match.group(2) == "+" else -magnitude


def parse_formula(token: str) -> ParsedFormula:
    """Parse one formula token into atom counts and charge.

    A bare element symbol followed by digits and a sign is read as a
    monatomic ion: the digits are the charge magnitude, not an atom count.
    ``Cu2+`` is one Cu with charge +2, and likewise ``H2+`` is ``{H: 1}``
    with charge +2 and ``O2-`` is a single O with charge -2. Write ``H2^+``
    or ``O2^-`` for the diatomic ions. Longer formulas keep their digits as
    counts, so ``NH4+`` is N1 H4 with charge +1.
    """
    text = token.strip()
    ion = _MONATOMIC_ION.match(text)
    if ion is not None:
        symbol, magnitude, sign = ion.groups()
        charge = int(magnitude) if sign == "+" else -int(magnitude)
        return ParsedFormula(atoms=MappingProxyType({symbol: 1}), charge=charge)
    parsed = FormulaParser(text).parse()
    return ParsedFormula(atoms=MappingProxyType(dict(parsed.atoms)), charge=parsed.charge)


def parse_species(token: str, side: Side) -> Species:
    parsed = parse_formula(token)
    return Species(raw_token=token, atoms=parsed.atoms, charge=parsed.charge, side=side)


def split_terms(side_text: str) -> list[str]:
    """Split one side of an equation into formula tokens."""
    terms = []
    for segment in _TERM_SEPARATOR.split(side_text):
        term = _LEADING_COEFFICIENT.sub("", segment.strip())
        if term:
            terms.append(term)
    return terms


def split_equation(text: str, arrows: Sequence[str] = ARROW_SPELLINGS) -> Equation:
    """Split ``text`` on its arrow and parse both sides into species."""
    if not text or not text.strip():
        raise EmptyEquationError("Please enter an equation.")

    pattern = "|".join(re.escape(arrow) for arrow in sorted(arrows, key=len, reverse=True))
    match = re.search(pattern, text)
    if match is None:
        spellings = ", ".join(repr(a) for a in arrows)
        raise NoArrowFoundError(f"No arrow ({spellings}) found in equation.")

    sides = re.split(pattern, text)
    if len(sides) != 2:
        raise MalformedEquationError(
            f"Equation must have exactly one arrow, found {len(sides) - 1}."
        )

    reactant_terms = split_terms(sides[0])
    product_terms = split_terms(sides[1])
    if not reactant_terms or not product_terms:
        raise MalformedEquationError("Equation must have a left and a right side.")

    species = [parse_species(t, Side.REACTANT) for t in reactant_terms]
    species += [parse_species(t, Side.PRODUCT) for t in product_terms]
    logger.debug("Split %r into %d reactant(s) and %d product(s)",
                 text, len(reactant_terms), len(product_terms))
    return Equation(species=tuple(species), arrow=match.group(0))
