"""Core data models, payload parsing and contract validation."""

from .models import AnalysisResult, GraphPoint, OptionsContract, OptionType, Position
from .parser import ContractPayloadError, load_contracts, parse_contracts
from .validation import ContractValidationError, validate_contract, validate_contracts

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
    "validate_contract",
    "validate_contracts",
]
