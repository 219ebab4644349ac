"""Tests for contract validation."""

from datetime import timedelta
from decimal import Decimal

import pytest

from payoffcurve.core.models import OptionsContract
from payoffcurve.core.validation import (
    ContractValidationError,
    ExpirationDateRequiredError,
    InvalidExpirationDateError,
    InvalidOptionTypeError,
    InvalidPositionError,
    InvalidPremiumError,
    InvalidStrikePriceError,
    parse_expiration_date,
    validate_contract,
    validate_contracts,
)


def test_valid_contract_passes(long_call):
    assert validate_contract(long_call) is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"type": "Put"},
        {"long_short": "short"},
        {"bid": "0", "ask": "0"},
        {"expiration_date": "2025-12-17T00:00:00+05:30"},
        {"expiration_date": "2025-12-17T00:00:00.123456789Z"},
        {"expiration_date": "2025-12-17t00:00:00z"},
    ],
)
def test_in_range_variants_pass(make_contract, overrides):
    validate_contract(make_contract(**overrides))


@pytest.mark.parametrize(
    "overrides,error,message",
    [
        ({"type": "InvalidType"}, InvalidOptionTypeError, "invalid option type"),
        ({"type": "call"}, InvalidOptionTypeError, "invalid option type"),
        ({"long_short": "InvalidLongShort"}, InvalidPositionError, "invalid long/short value"),
        ({"strike_price": "-100.0"}, InvalidStrikePriceError, "invalid strike price"),
        ({"strike_price": "0"}, InvalidStrikePriceError, "invalid strike price"),
        ({"bid": "-1.0"}, InvalidPremiumError, "bid and ask prices must be positive"),
        ({"ask": "-2.0"}, InvalidPremiumError, "bid and ask prices must be positive"),
        ({"expiration_date": ""}, ExpirationDateRequiredError, "expiration date is required"),
        ({"expiration_date": "invalid"}, InvalidExpirationDateError, "invalid expiration date"),
    ],
)
def test_invalid_field_reports_matching_error(make_contract, overrides, error, message):
    with pytest.raises(error) as excinfo:
        validate_contract(make_contract(**overrides))

    assert str(excinfo.value) == message
    assert isinstance(excinfo.value, ContractValidationError)
    assert isinstance(excinfo.value, ValueError)


def test_first_failing_check_wins(make_contract):
    contract = make_contract(type="Future", long_short="flat", strike_price="-1", bid="-1")

    with pytest.raises(InvalidOptionTypeError):
        validate_contract(contract)


def test_strike_checked_before_premium(make_contract):
    contract = make_contract(strike_price="0", ask="-1", expiration_date="")

    with pytest.raises(InvalidStrikePriceError):
        validate_contract(contract)


def test_missing_fields_default_to_zero_values():
    with pytest.raises(InvalidPositionError):
        validate_contract(OptionsContract.model_validate({"type": "Put"}))

    with pytest.raises(InvalidStrikePriceError):
        validate_contract(OptionsContract.model_validate({"type": "Put", "long_short": "short"}))


def test_validate_contracts_stops_at_first_invalid(make_contract):
    contracts = [
        make_contract(),
        make_contract(strike_price="-5"),
        make_contract(type="bogus"),
    ]

    with pytest.raises(InvalidStrikePriceError) as excinfo:
        validate_contracts(contracts)

    assert excinfo.value.index == 1


def test_validate_contracts_accepts_empty_and_valid_batches(make_contract):
    validate_contracts([])
    validate_contracts([make_contract(), make_contract(type="Put", long_short="short")])


@pytest.mark.parametrize(
    "value",
    [
        "2022-12-31",
        "2022-12-31T23:59:59",
        "2022-12-31 23:59:59Z",
        "2022-13-01T00:00:00Z",
        "2022-12-31T25:00:00Z",
        "2022-12-31T23:59:59+0500",
        " 2022-12-31T23:59:59Z",
        "2022-12-31T23:59:59Z\n",
    ],
)
def test_parse_expiration_date_rejects_non_rfc3339(value):
    with pytest.raises(ValueError):
        parse_expiration_date(value)


def test_parse_expiration_date_returns_aware_datetime():
    parsed = parse_expiration_date("2025-12-17T08:30:00-05:00")

    assert parsed.year == 2025
    assert parsed.hour == 8
    assert parsed.utcoffset() == timedelta(hours=-5)


def test_parse_expiration_date_handles_utc_and_fraction():
    parsed = parse_expiration_date("2022-12-31T23:59:59.5Z")

    assert parsed.utcoffset() == timedelta(0)
    assert parsed.microsecond == 500000


def test_decimal_boundaries(make_contract):
    validate_contract(make_contract(strike_price=Decimal("0.01"), bid=Decimal("0"), ask=Decimal("0")))
