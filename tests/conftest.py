"""Pytest configuration and fixtures."""

import json

import pytest

from payoffcurve.core.models import OptionsContract

VALID_EXPIRATION = "2022-12-31T23:59:59Z"


def _contract_payload(**overrides):
    payload = {
        "type": "Call",
        "strike_price": "100.0",
        "bid": "1.0",
        "ask": "2.0",
        "expiration_date": VALID_EXPIRATION,
        "long_short": "long",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def contract_payload():
    """Factory returning wire-format contract dicts with optional overrides."""
    return _contract_payload


@pytest.fixture
def make_contract():
    """Factory returning ``OptionsContract`` instances with optional overrides."""

    def _make(**overrides):
        return OptionsContract.model_validate(_contract_payload(**overrides))

    return _make


@pytest.fixture
def long_call(make_contract):
    """Long call, strike 100, bid 1.00, ask 2.00."""
    return make_contract()


@pytest.fixture
def write_contracts(tmp_path):
    """Write a list of contract payloads to a JSON file and return its path."""

    def _write(payloads, name="contracts.json"):
        path = tmp_path / name
        path.write_text(json.dumps(payloads), encoding="utf-8")
        return path

    return _write
