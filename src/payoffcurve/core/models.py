"""
Core data models for payoff analysis.

This module defines the Pydantic model for incoming options contracts and the
immutable result records produced by the analysis engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class OptionType(str, Enum):
    """Kind of option contract."""

    CALL = "Call"
    PUT = "Put"


class Position(str, Enum):
    """Side of the contract held in the portfolio."""

    LONG = "long"
    SHORT = "short"


class OptionsContract(BaseModel):
    """Represents a single leg of an options portfolio.

    ``type`` and ``long_short`` are kept as free-form strings so that unknown
    values reach the validator and are reported with their own error kind.
    """

    model_config = ConfigDict(populate_by_name=True)

    option_type: str = Field("", alias="type", description="'Call' or 'Put'")
    strike_price: Decimal = Field(Decimal("0"), allow_inf_nan=False, description="Strike price")
    bid: Decimal = Field(Decimal("0"), allow_inf_nan=False, description="Bid premium quote")
    ask: Decimal = Field(Decimal("0"), allow_inf_nan=False, description="Ask premium quote")
    expiration_date: str = Field("", description="Expiration as an RFC 3339 timestamp")
    position: str = Field("", alias="long_short", description="'long' or 'short'")

    @property
    def is_call(self) -> bool:
        return self.option_type == OptionType.CALL.value

    @property
    def is_put(self) -> bool:
        return self.option_type == OptionType.PUT.value

    @property
    def is_long(self) -> bool:
        return self.position == Position.LONG.value

    @property
    def is_short(self) -> bool:
        return self.position == Position.SHORT.value


@dataclass(frozen=True)
class GraphPoint:
    """A single point on the payoff curve."""

    x: Decimal
    y: Decimal


@dataclass(frozen=True)
class AnalysisResult:
    """Summary of one payoff sweep."""

    graph_data: Tuple[GraphPoint, ...] = ()
    max_profit: Decimal = Decimal("0")
    max_loss: Decimal = Decimal("0")
    break_even_points: Tuple[Decimal, ...] = ()
