"""Services for payoff analysis."""

from .display import (
    format_break_even_points,
    format_contract_label,
    format_currency,
    format_payoff,
)
from .engine import analyze_contracts, max_strike, sweep_prices
from .json_serializer import (
    serialize_analysis_result,
    serialize_contract,
    serialize_decimal,
    serialize_graph_point,
)
from .payoff import aggregate_payoff, intrinsic_value, position_payoff

__all__ = [
    "analyze_contracts",
    "max_strike",
    "sweep_prices",
    "aggregate_payoff",
    "intrinsic_value",
    "position_payoff",
    "serialize_analysis_result",
    "serialize_contract",
    "serialize_decimal",
    "serialize_graph_point",
    "format_break_even_points",
    "format_contract_label",
    "format_currency",
    "format_payoff",
]
