"""
Payoff analysis engine.

Sweeps the underlying price across a fixed window around the largest strike in
the portfolio and reduces the per-price aggregate payoff into an
``AnalysisResult``. Prices are produced by a generator and consumed by a
single reduction pass; nothing outside the run's local state is touched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterable, Iterator, List, Sequence, Tuple

from ..core.models import AnalysisResult, GraphPoint, OptionsContract
from .payoff import ZERO, aggregate_payoff

logger = logging.getLogger(__name__)

PRICE_RANGE = Decimal("50")
PRICE_STEP = Decimal("0.01")
BREAK_EVEN_TOLERANCE = Decimal("0.01")
GRAPH_SAMPLE_INTERVAL = 10
OUTPUT_PRECISION = Decimal("0.01")
PRECISION_MARGIN = 10


def round_output(value: Decimal) -> Decimal:
    """Round to two decimals, ties away from zero."""
    return value.quantize(OUTPUT_PRECISION, rounding=ROUND_HALF_UP)


def working_precision(values: Iterable[Decimal], terms: int = 1) -> int:
    """Significant digits needed to hold sums of ``terms`` values exactly.

    Covers the largest magnitude down to the finer of the inputs' own scale
    and the two-decimal output, so sweeping and rounding never overflow the
    context.
    """
    top = 0
    bottom = OUTPUT_PRECISION.as_tuple().exponent
    for value in values:
        if value.is_zero():
            continue
        top = max(top, value.adjusted())
        bottom = min(bottom, value.as_tuple().exponent)
    return top - bottom + len(str(terms)) + PRECISION_MARGIN


def max_strike(contracts: Sequence[OptionsContract]) -> Decimal:
    """Largest strike in the portfolio, or zero when it is empty."""
    return max((contract.strike_price for contract in contracts), default=ZERO)


def sample_count() -> int:
    """Number of prices in one sweep, both endpoints included."""
    return int((PRICE_RANGE * 2) / PRICE_STEP) + 1


def sweep_prices(center: Decimal) -> Iterator[Tuple[int, Decimal]]:
    """Yield ``(index, price)`` across ``[center - 50, center + 50]`` in 0.01 steps.

    Each price is derived from its index so no rounding error accumulates.
    """
    start = center - PRICE_RANGE
    for index in range(sample_count()):
        yield index, start + index * PRICE_STEP


@dataclass
class _SweepAccumulator:
    """Running aggregates for one sweep."""

    max_profit: Decimal = ZERO
    max_loss: Decimal = ZERO
    graph_data: List[GraphPoint] = field(default_factory=list)
    break_even_points: List[Decimal] = field(default_factory=list)

    def add(self, index: int, price: Decimal, payoff: Decimal) -> None:
        if index % GRAPH_SAMPLE_INTERVAL == 0:
            self.graph_data.append(GraphPoint(x=round_output(price), y=round_output(payoff)))
        if payoff > self.max_profit:
            self.max_profit = payoff
        if payoff < self.max_loss:
            self.max_loss = payoff
        if abs(payoff) < BREAK_EVEN_TOLERANCE:
            self.break_even_points.append(round_output(price))

    def to_result(self) -> AnalysisResult:
        return AnalysisResult(
            graph_data=tuple(self.graph_data),
            max_profit=round_output(self.max_profit),
            max_loss=round_output(self.max_loss),
            break_even_points=tuple(self.break_even_points),
        )


def analyze_contracts(contracts: Sequence[OptionsContract]) -> AnalysisResult:
    """Sweep the price range and summarize the portfolio payoff.

    The contracts are assumed to have passed validation already. An empty
    portfolio yields an all-zero result with no graph and no break-even points.
    """
    if not contracts:
        logger.debug("No contracts supplied; returning empty analysis")
        return AnalysisResult(
            max_profit=round_output(ZERO),
            max_loss=round_output(ZERO),
        )

    center = max_strike(contracts)
    values = [PRICE_RANGE, PRICE_STEP]
    for contract in contracts:
        values.extend((contract.strike_price, contract.bid, contract.ask))

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, working_precision(values, terms=len(contracts) + 1))
        logger.debug(
            "Sweeping %d contracts from %s to %s",
            len(contracts),
            center - PRICE_RANGE,
            center + PRICE_RANGE,
        )
        accumulator = _SweepAccumulator()
        for index, price in sweep_prices(center):
            accumulator.add(index, price, aggregate_payoff(contracts, price))
        result = accumulator.to_result()

    logger.debug(
        "Analysis complete: max_profit=%s max_loss=%s break_even_points=%d",
        result.max_profit,
        result.max_loss,
        len(result.break_even_points),
    )
    return result
