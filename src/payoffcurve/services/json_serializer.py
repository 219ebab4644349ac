"""JSON serialization utilities for contracts and analysis results."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict

from ..core.models import AnalysisResult, GraphPoint, OptionsContract


def serialize_decimal(value: Any) -> Any:
    """Serialize Decimal values as JSON numbers."""
    if isinstance(value, Decimal):
        return float(value)
    return value


def serialize_graph_point(point: GraphPoint) -> Dict[str, Any]:
    """Serialize a graph point as ``{"x": ..., "y": ...}``."""
    return {"x": serialize_decimal(point.x), "y": serialize_decimal(point.y)}


def serialize_analysis_result(result: AnalysisResult) -> Dict[str, Any]:
    """Serialize an analysis result for JSON output."""
    return {
        "graph_data": [serialize_graph_point(point) for point in result.graph_data],
        "max_profit": serialize_decimal(result.max_profit),
        "max_loss": serialize_decimal(result.max_loss),
        "break_even_points": [serialize_decimal(price) for price in result.break_even_points],
    }


def serialize_contract(contract: OptionsContract) -> Dict[str, Any]:
    """Serialize a contract using its wire field names."""
    return {
        "type": contract.option_type,
        "strike_price": serialize_decimal(contract.strike_price),
        "bid": serialize_decimal(contract.bid),
        "ask": serialize_decimal(contract.ask),
        "expiration_date": contract.expiration_date,
        "long_short": contract.position,
    }
