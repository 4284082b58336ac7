"""Command-line entrypoints for chembalance."""

from __future__ import annotations

import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from chembalance.balancer import BalancerOptions, load_options, try_balance
from chembalance.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV
from chembalance.electron_config import electron_configuration, electron_configuration_for
from chembalance.elements import UnknownElementError
from chembalance.formatting import dumps_payload
from chembalance.parser import parse_formula
from chembalance.persistence import sqlite_store
from chembalance.stoichiometry import (
    ReagentAmount,
    grams_to_moles,
    limiting_reagent,
    molar_mass,
    moles_to_grams,
)

app = typer.Typer(add_completion=False)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log solver steps.")] = False,
) -> None:
    """Balance chemical equations with exact rational arithmetic."""
    level = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING))


@app.command()
def balance(
    equation: Annotated[
        str | None,
        typer.Argument(help="Equation such as 'Fe + O2 -> Fe2O3'; defaults to the last one in --history."),
    ] = None,
    config_file: Annotated[
        Path | None, typer.Option("--config", help="JSON file with balancer options.")
    ] = None,
    strict: Annotated[
        bool, typer.Option(help="Fail on non-unique or not all-positive solutions.")
    ] = False,
    output: Annotated[
        Path | None, typer.Option(help="Path to save the result as JSON.")
    ] = None,
    history: Annotated[
        Path | None, typer.Option(help="SQLite file recording every request.")
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the JSON payload.")] = False,
) -> None:
    """Balance an equation and print it."""
    options = load_options(config_file) if config_file else BalancerOptions()
    if strict:
        options = replace(options, strict=True)

    connection = None
    if history is not None:
        connection = sqlite_store.connect(history)
        sqlite_store.ensure_schema(connection)
        if equation is None:
            equation = sqlite_store.last_equation(connection)
    if equation is None:
        if connection is not None:
            connection.close()
        typer.echo("Error: no equation given and no previous input recorded.", err=True)
        raise typer.Exit(code=1)

    report = try_balance(equation, options)
    payload = dumps_payload(report.to_dict())

    if connection is not None:
        sqlite_store.save_balance(
            connection,
            input_text=equation,
            equation=report.result.equation_text if report.result else None,
            coefficients=report.result.coefficients if report.result else None,
            error_kind=report.error_kind.value if report.error_kind else None,
        )
        connection.close()

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(payload)

    if as_json:
        typer.echo(payload)
    elif report.result is not None:
        typer.echo(report.result.equation_text)
        if report.result.sign_ambiguous:
            typer.echo("Warning: coefficients are not all positive.", err=True)
    else:
        typer.echo(f"Error: {report.message}", err=True)

    if not report.success:
        raise typer.Exit(code=1)


@app.command()
def parse(
    formula: Annotated[str, typer.Argument(help="Formula such as 'Fe2(SO4)3' or 'SO4^2-'.")],
) -> None:
    """Print the atom counts and charge of a formula."""
    parsed = parse_formula(formula)
    typer.echo(dumps_payload({"atoms": dict(parsed.atoms), "charge": parsed.charge}))


@app.command("molar-mass")
def molar_mass_command(
    formula: Annotated[str, typer.Argument(help="Formula to weigh.")],
    grams: Annotated[float | None, typer.Option(help="Sample mass (g).")] = None,
    moles: Annotated[float | None, typer.Option(help="Amount of substance (mol).")] = None,
) -> None:
    """Print the molar mass of a formula, and convert a given mass or amount."""
    try:
        mass = molar_mass(formula)
    except UnknownElementError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Molar mass {formula}: {mass:.4f} g/mol")
    if grams is not None:
        typer.echo(f"{grams} g = {grams_to_moles(grams, formula):.6g} mol")
    if moles is not None:
        typer.echo(f"{moles} mol = {moles_to_grams(moles, formula):.6g} g")


@app.command()
def limiting(
    reactants: Annotated[
        list[str], typer.Argument(help="Reactants as FORMULA=GRAMS, e.g. H2=4 O2=32.")
    ],
) -> None:
    """Name the limiting reagent, the reactant present in the fewest moles."""
    amounts = []
    for item in reactants:
        formula, _, grams = item.rpartition("=")
        try:
            mass = float(grams)
        except ValueError:
            mass = None
        if not formula or mass is None:
            typer.echo(f"Error: expected FORMULA=GRAMS, got {item!r}", err=True)
            raise typer.Exit(code=1)
        amounts.append(ReagentAmount(formula=formula, mass=mass))

    try:
        result = limiting_reagent(amounts)
    except UnknownElementError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Limiting reagent: {result.reagent.formula} ({result.moles:.6g} mol)")


@app.command("electron-config")
def electron_config_command(
    element: Annotated[str, typer.Argument(help="Element symbol or atomic number.")],
) -> None:
    """Print the ground-state electron configuration of an element."""
    try:
        if element.isdigit():
            config = electron_configuration(int(element))
        else:
            config = electron_configuration_for(element)
    except (ValueError, UnknownElementError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(config.long)
    typer.echo(config.noble_gas)
    if config.exception:
        typer.echo("Note: exception to the Aufbau order.")


@app.command()
def history(
    history_file: Annotated[Path, typer.Argument(help="SQLite history file.")],
    limit: Annotated[int, typer.Option(help="Number of entries to show.")] = 20,
) -> None:
    """Show recent balance requests."""
    connection = sqlite_store.connect(history_file)
    sqlite_store.ensure_schema(connection)
    entries = sqlite_store.list_history(connection, limit=limit)
    connection.close()

    for entry in entries:
        outcome = entry.equation if entry.success else f"failed ({entry.error_kind})"
        typer.echo(f"{entry.created_utc}  {entry.input}  =>  {outcome}")


if __name__ == "__main__":
    app()
