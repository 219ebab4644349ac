"""FastAPI application factory for the payoffcurve HTTP service."""

from __future__ import annotations

import logging
from typing import List

from fastapi import Body, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.models import OptionsContract
from ..core.parser import format_payload_errors
from ..core.validation import ContractValidationError, validate_contracts
from ..services.engine import analyze_contracts
from ..services.json_serializer import serialize_analysis_result

logger = logging.getLogger(__name__)


def _error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app() -> FastAPI:
    """Construct and return the FastAPI application."""
    app = FastAPI(title="payoffcurve")

    @app.exception_handler(RequestValidationError)
    async def payload_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = format_payload_errors(list(exc.errors()))
        logger.info("Rejected malformed payload on %s: %s", request.url.path, message)
        return _error_response(message)

    @app.exception_handler(ContractValidationError)
    async def contract_error_handler(request: Request, exc: ContractValidationError) -> JSONResponse:
        logger.info("Rejected contract %s on %s: %s", exc.index, request.url.path, exc)
        return _error_response(str(exc))

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/analyze", tags=["api"])
    def analyze(contracts: List[OptionsContract] = Body(...)) -> dict[str, object]:
        """Validate a batch of contracts and return its payoff analysis."""
        validate_contracts(contracts)
        result = analyze_contracts(contracts)
        return serialize_analysis_result(result)

    return app
