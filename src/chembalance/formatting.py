"""Rendering of balanced equations."""

from __future__ import annotations

import json
from typing import Any, Mapping, Sequence

from chembalance.constants import OUTPUT_ARROW, TERM_SEPARATOR
from chembalance.errors import CoefficientLengthMismatchError
from chembalance.models import Side, Species


def format_term(coefficient: int, species: Species) -> str:
    if coefficient == 1:
        return species.raw_token
    return f"{coefficient} {species.raw_token}"


def format_equation(
    coefficients: Sequence[int],
    species: Sequence[Species],
    arrow: str = OUTPUT_ARROW,
) -> str:
    """Render ``2 H2 + O2 → 2 H2O`` style text, omitting coefficients of 1."""
    if len(coefficients) != len(species):
        raise CoefficientLengthMismatchError(
            f"Got {len(coefficients)} coefficients for {len(species)} species."
        )
    left, right = [], []
    for coefficient, s in zip(coefficients, species):
        part = format_term(coefficient, s)
        (left if s.side is Side.REACTANT else right).append(part)
    return f"{TERM_SEPARATOR.join(left)} {arrow} {TERM_SEPARATOR.join(right)}"


def dumps_payload(payload: Mapping[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)
