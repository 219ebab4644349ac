"""
Payoff-at-expiration calculations for individual contracts and portfolios.
"""

from decimal import Decimal
from typing import Iterable

from ..core.models import OptionsContract, OptionType

ZERO = Decimal("0")


def intrinsic_value(option_type: str, strike: Decimal, price: Decimal) -> Decimal:
    """Value of exercising the option at ``price``, ignoring premium."""
    if option_type == OptionType.CALL.value:
        return max(ZERO, price - strike)
    if option_type == OptionType.PUT.value:
        return max(ZERO, strike - price)
    return ZERO


def position_payoff(contract: OptionsContract, price: Decimal) -> Decimal:
    """Profit or loss of holding ``contract`` to expiry with the underlying at ``price``.

    A long leg paid the ask, a short leg received the bid. Anything other
    than the four call/put and long/short combinations contributes nothing.
    """
    if not (contract.is_call or contract.is_put):
        return ZERO
    value = intrinsic_value(contract.option_type, contract.strike_price, price)
    if contract.is_long:
        return value - contract.ask
    if contract.is_short:
        return contract.bid - value
    return ZERO


def aggregate_payoff(contracts: Iterable[OptionsContract], price: Decimal) -> Decimal:
    """Sum of the position payoffs of every contract at ``price``."""
    return sum((position_payoff(contract, price) for contract in contracts), ZERO)
