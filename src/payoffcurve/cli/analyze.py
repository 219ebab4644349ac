"""
Analyze command for payoffcurve CLI.

This module provides the analyze command for validating a portfolio of
contracts stored in a JSON file and printing its payoff analysis.
"""

from __future__ import annotations

import json
import logging

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..core.parser import ContractPayloadError, load_contracts
from ..core.validation import ContractValidationError, validate_contracts
from ..services.display import (
    format_break_even_points,
    format_contract_label,
    format_currency,
    format_payoff,
)
from ..services.engine import analyze_contracts
from ..services.json_serializer import serialize_analysis_result, serialize_contract

logger = logging.getLogger(__name__)


@click.command()
@click.argument("contracts_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "summary", "json"]),
    default="table",
    help="Output format",
)
@click.option("--show-graph", is_flag=True, help="Include the sampled payoff curve in table output")
@click.option(
    "--include-contracts",
    is_flag=True,
    help="Echo the validated contracts alongside the analysis in json output",
)
def analyze(contracts_file, output_format, show_graph, include_contracts):
    """Analyze the payoff profile of contracts in a JSON file."""
    console = Console()

    try:
        contracts = load_contracts(contracts_file)
        validate_contracts(contracts)
    except ContractPayloadError as exc:
        raise click.ClickException(str(exc)) from exc
    except ContractValidationError as exc:
        raise click.ClickException(f"Contract {exc.index}: {exc}") from exc

    logger.info("Loaded %d contracts from %s", len(contracts), contracts_file)
    result = analyze_contracts(contracts)

    if output_format == "json":
        payload = serialize_analysis_result(result)
        if include_contracts:
            payload["contracts"] = [serialize_contract(contract) for contract in contracts]
        click.echo(json.dumps(payload, indent=2))
        return

    if output_format == "summary":
        summary = (
            f"Contracts: {len(contracts)}\n"
            f"Max profit: {format_payoff(result.max_profit)}\n"
            f"Max loss: {format_payoff(result.max_loss)}\n"
            f"Break-even: {format_break_even_points(result.break_even_points)}"
        )
        console.print(Panel(summary, title="Payoff Analysis"))
        return

    contracts_table = Table(title="Contracts")
    contracts_table.add_column("Contract", style="cyan", no_wrap=True)
    contracts_table.add_column("Bid", justify="right", no_wrap=True)
    contracts_table.add_column("Ask", justify="right", no_wrap=True)
    contracts_table.add_column("Expiration", style="magenta", no_wrap=True)
    for contract in contracts:
        contracts_table.add_row(
            format_contract_label(contract),
            format_currency(contract.bid),
            format_currency(contract.ask),
            contract.expiration_date,
        )
    console.print(contracts_table)

    summary_table = Table(title="Payoff Analysis")
    summary_table.add_column("Metric", style="cyan", no_wrap=True)
    summary_table.add_column("Value", justify="right")
    summary_table.add_row("Max profit", format_payoff(result.max_profit))
    summary_table.add_row("Max loss", format_payoff(result.max_loss))
    summary_table.add_row("Break-even", format_break_even_points(result.break_even_points))
    summary_table.add_row("Graph points", str(len(result.graph_data)))
    console.print(summary_table)

    if show_graph:
        graph_table = Table(title="Payoff Curve")
        graph_table.add_column("Price", justify="right", no_wrap=True)
        graph_table.add_column("Payoff", justify="right", no_wrap=True)
        for point in result.graph_data:
            graph_table.add_row(format_currency(point.x), format_payoff(point.y))
        console.print(graph_table)
