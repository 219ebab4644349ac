"""
Contract payload parsing.

Turns raw JSON (a file on disk or an already-decoded value) into
``OptionsContract`` records. Shape errors are reported here; field-level
business rules are left to :mod:`payoffcurve.core.validation`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Union

from pydantic import TypeAdapter, ValidationError

from .models import OptionsContract

_CONTRACT_LIST = TypeAdapter(List[OptionsContract])


class ContractPayloadError(ValueError):
    """Raised when a payload cannot be read into the contract shape at all."""


def parse_contracts(payload: Any) -> List[OptionsContract]:
    """Convert a decoded JSON value into a list of contracts."""
    if not isinstance(payload, list):
        raise ContractPayloadError("Expected a JSON array of contracts.")
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise ContractPayloadError(f"Contract {index}: expected a JSON object.")
    try:
        return _CONTRACT_LIST.validate_python(payload)
    except ValidationError as exc:
        raise ContractPayloadError(format_payload_errors(exc.errors())) from exc


def load_contracts(path: Union[str, Path]) -> List[OptionsContract]:
    """Load and parse contracts from a JSON file."""
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise ContractPayloadError(f"Unable to read {source}: {exc}") from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ContractPayloadError(f"Invalid JSON in {source}: {exc.msg}") from exc
    return parse_contracts(payload)


def format_payload_errors(errors: List[dict]) -> str:
    """Render pydantic error entries as a single human-readable line."""
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Malformed contract payload."
