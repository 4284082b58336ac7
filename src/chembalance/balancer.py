"""Balancing pipeline: text -> species -> matrix -> RREF -> coefficients -> text.

Each request is computed from scratch; nothing is cached or shared between
calls.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from chembalance.constants import ARROW_SPELLINGS, OUTPUT_ARROW
from chembalance.elimination import rref
from chembalance.errors import (
    AmbiguousSignError,
    BalanceError,
    CoefficientLengthMismatchError,
    ErrorKind,
    MultipleSolutionsError,
)
from chembalance.formatting import format_equation
from chembalance.matrix import build_conservation_matrix
from chembalance.models import BalanceResult
from chembalance.nullspace import normalize, solve_homogeneous
from chembalance.parser import split_equation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BalancerOptions:
    """Tunable behaviour of :func:`balance`.

    Attributes:
        arrows: Accepted arrow spellings between the two sides.
        output_arrow: Arrow used when rendering the balanced equation.
        include_charge: Force (True) or suppress (False) the charge row;
            None adds it only when some species is charged.
        strict: Raise instead of returning a sign-ambiguous or
            non-unique solution.
    """

    arrows: tuple[str, ...] = ARROW_SPELLINGS
    output_arrow: str = OUTPUT_ARROW
    include_charge: bool | None = None
    strict: bool = False


def load_options(config_file: str | Path) -> BalancerOptions:
    """Read :class:`BalancerOptions` from a JSON file."""
    with open(config_file, "r", encoding="utf-8") as f:
        data = json.load(f)

    known = {f.name for f in fields(BalancerOptions)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown balancer option(s): {', '.join(sorted(unknown))}")
    if "arrows" in data:
        data["arrows"] = tuple(data["arrows"])
    return BalancerOptions(**data)


def balance(equation_text: str, options: BalancerOptions | None = None) -> BalanceResult:
    """Balance ``equation_text`` with minimal integer coefficients.

    Raises:
        BalanceError: One of its subclasses, see :mod:`chembalance.errors`.
    """
    options = options or BalancerOptions()
    equation = split_equation(equation_text, options.arrows)
    matrix = build_conservation_matrix(equation.species, options.include_charge)
    reduced = rref(matrix.values)
    vector = solve_homogeneous(reduced)

    nullity = len(reduced.free_columns())
    if options.strict and nullity > 1:
        raise MultipleSolutionsError(
            f"The equation has {nullity} independent balancings; combine or split it."
        )

    solution = normalize(vector)
    if len(solution.coefficients) != len(equation.species):
        raise CoefficientLengthMismatchError(
            "Internal error: coefficient count does not match species count."
        )
    if options.strict and solution.sign_ambiguous:
        raise AmbiguousSignError(
            f"No all-positive balancing found (got {list(solution.coefficients)})."
        )

    text = format_equation(solution.coefficients, equation.species, options.output_arrow)
    logger.debug("Balanced %r as %r", equation_text, text)
    return BalanceResult(
        coefficients=solution.coefficients,
        equation_text=text,
        species=equation.species,
        nullity=nullity,
        charge_row=matrix.charge_row,
        sign_ambiguous=solution.sign_ambiguous,
        elements=matrix.elements,
    )


@dataclass(frozen=True)
class BalanceReport:
    """Outcome of :func:`try_balance`: a result or a typed failure."""

    equation_input: str
    result: BalanceResult | None = None
    error_kind: ErrorKind | None = None
    message: str | None = None

    @property
    def success(self) -> bool:
        return self.result is not None

    def to_dict(self) -> dict[str, Any]:
        if self.result is not None:
            return {"input": self.equation_input, **self.result.to_dict()}
        return {
            "input": self.equation_input,
            "success": False,
            "error": self.message,
            "kind": self.error_kind.value if self.error_kind else None,
        }


def try_balance(equation_text: str, options: BalancerOptions | None = None) -> BalanceReport:
    """Like :func:`balance`, but reports failures instead of raising them."""
    try:
        result = balance(equation_text, options)
    except BalanceError as exc:
        logger.info("Could not balance %r: %s", equation_text, exc.message)
        return BalanceReport(equation_input=equation_text, error_kind=exc.kind, message=exc.message)
    return BalanceReport(equation_input=equation_text, result=result)
