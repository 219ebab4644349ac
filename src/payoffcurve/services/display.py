"""
Display formatting services for the payoffcurve CLI.

This module provides formatting functions for rendering contracts and
analysis results in the terminal.
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional, Sequence

from ..core.models import OptionsContract


def format_currency(value: Optional[Decimal]) -> str:
    """Format a price as currency."""
    if value is None:
        return "--"
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        quantized = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        sign = "-" if quantized < 0 else ""
        quantized = abs(quantized)
    return f"{sign}${quantized:,.2f}"


def format_payoff(value: Optional[Decimal]) -> str:
    """Format a payoff with rich color markup for gains and losses."""
    if value is None:
        return "--"
    text = format_currency(value)
    if value > 0:
        return f"[green]{text}[/green]"
    if value < 0:
        return f"[red]{text}[/red]"
    return text


def format_break_even_points(points: Sequence[Decimal]) -> str:
    """Format break-even prices as a comma separated list."""
    if not points:
        return "--"
    return ", ".join(format_currency(point) for point in points)


def format_contract_label(contract: OptionsContract) -> str:
    """Short description of a contract, e.g. ``long Call $100.00``."""
    return f"{contract.position} {contract.option_type} {format_currency(contract.strike_price)}"
