"""
Contract validation.

Each contract is checked field by field in a fixed order and the first failing
check determines the reported error. A batch is accepted only if every
contract in it passes.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from .models import OptionsContract, OptionType, Position

logger = logging.getLogger(__name__)

_RFC3339_PATTERN = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})[Tt]"
    r"(?P<time>\d{2}:\d{2}:\d{2})(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})$",
    re.ASCII,
)

_OPTION_TYPES = {member.value for member in OptionType}
_POSITIONS = {member.value for member in Position}


class ContractValidationError(ValueError):
    """Raised when a contract cannot be priced meaningfully."""

    message = "invalid contract"

    def __init__(self, message: Optional[str] = None, *, index: Optional[int] = None):
        super().__init__(message or self.message)
        self.index = index


class InvalidOptionTypeError(ContractValidationError):
    message = "invalid option type"


class InvalidPositionError(ContractValidationError):
    message = "invalid long/short value"


class InvalidStrikePriceError(ContractValidationError):
    message = "invalid strike price"


class InvalidPremiumError(ContractValidationError):
    message = "bid and ask prices must be positive"


class ExpirationDateRequiredError(ContractValidationError):
    message = "expiration date is required"


class InvalidExpirationDateError(ContractValidationError):
    message = "invalid expiration date"


def parse_expiration_date(value: str) -> datetime:
    """Parse an RFC 3339 date-time string into an aware ``datetime``.

    Raises ``ValueError`` when the string is not a full date-time with an
    explicit offset.
    """
    match = _RFC3339_PATTERN.fullmatch(value)
    if not match:
        raise ValueError(f"Not an RFC 3339 timestamp: {value}")
    fraction = match.group("fraction")
    offset = match.group("offset")
    if offset in {"Z", "z"}:
        offset = "+00:00"
    normalized = f"{match.group('date')}T{match.group('time')}"
    if fraction:
        # datetime only carries microseconds
        normalized += "." + fraction[:6].ljust(6, "0")
    return datetime.fromisoformat(normalized + offset)


def validate_contract(contract: OptionsContract) -> None:
    """Validate a single contract, raising on the first failing check."""
    if contract.option_type not in _OPTION_TYPES:
        raise InvalidOptionTypeError()
    if contract.position not in _POSITIONS:
        raise InvalidPositionError()
    if contract.strike_price <= Decimal("0"):
        raise InvalidStrikePriceError()
    if contract.bid < Decimal("0") or contract.ask < Decimal("0"):
        raise InvalidPremiumError()
    if not contract.expiration_date:
        raise ExpirationDateRequiredError()
    try:
        parse_expiration_date(contract.expiration_date)
    except ValueError as exc:
        raise InvalidExpirationDateError() from exc


def validate_contracts(contracts: Sequence[OptionsContract]) -> None:
    """Validate a batch in submission order; the first invalid contract aborts it."""
    for index, contract in enumerate(contracts):
        try:
            validate_contract(contract)
        except ContractValidationError as exc:
            exc.index = index
            logger.debug("Contract %d rejected: %s", index, exc)
            raise
