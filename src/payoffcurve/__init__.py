"""
payoffcurve - Options portfolio payoff analysis.

Validates options contracts and sweeps the underlying price to summarize the
portfolio's profit and loss at expiration.
"""

__version__ = "0.1.0"

# Import main components for easy access
from .core.models import AnalysisResult, GraphPoint, OptionsContract, OptionType, Position
from .core.parser import ContractPayloadError, load_contracts, parse_contracts
from .core.validation import (
    ContractValidationError,
    ExpirationDateRequiredError,
    InvalidExpirationDateError,
    InvalidOptionTypeError,
    InvalidPositionError,
    InvalidPremiumError,
    InvalidStrikePriceError,
    validate_contract,
    validate_contracts,
)
from .services.engine import analyze_contracts
from .services.payoff import aggregate_payoff, intrinsic_value, position_payoff

__all__ = [
    "AnalysisResult",
    "GraphPoint",
    "OptionsContract",
    "OptionType",
    "Position",
    "ContractPayloadError",
    "load_contracts",
    "parse_contracts",
    "ContractValidationError",
    "ExpirationDateRequiredError",
    "InvalidExpirationDateError",
    "InvalidOptionTypeError",
    "InvalidPositionError",
    "InvalidPremiumError",
    "InvalidStrikePriceError",
    "validate_contract",
    "validate_contracts",
    "analyze_contracts",
    "aggregate_payoff",
    "intrinsic_value",
    "position_payoff",
]
