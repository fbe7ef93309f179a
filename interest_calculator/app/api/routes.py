"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from interest_calculator.core.formatting import format_for_input, parse_digits
from interest_calculator.core.interest import compute
from interest_calculator.core.ping import get_ping_response
from interest_calculator.core.report import build_display
from interest_calculator.schemas.calculator import (
    CalculationResponse,
    CalculatorForm,
    FormatInputRequest,
    FormatInputResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("rejected payload: %s", exc.errors())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


def _read_payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


def _calculate(compound: bool) -> Any:
    form = CalculatorForm.model_validate(_read_payload())
    result = compute(form.to_input(with_contribution=not compound), compound=compound)
    logger.info(
        "%s calculation: %s rows", "compound" if compound else "simple", len(result.rows)
    )
    response = CalculationResponse(
        result=result,
        display=build_display(form, result, compound=compound),
    )
    # amounts past the float range go out as null
    return current_app.response_class(
        response.model_dump_json(), mimetype="application/json"
    )


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(get_ping_response().model_dump())


@api_bp.post("/calc/compound")
def compound() -> Any:
    """Compound interest: M = P(1 + r)^n."""
    return _calculate(compound=True)


@api_bp.post("/calc/simple")
def simple() -> Any:
    """Simple interest with an optional periodic contribution."""
    return _calculate(compound=False)


@api_bp.post("/format/input")
def format_input() -> Any:
    """Digit-grouped display text for a principal or contribution field."""
    payload = FormatInputRequest.model_validate(_read_payload())
    response = FormatInputResponse(
        value=parse_digits(payload.value),
        display=format_for_input(payload.value),
    )
    return jsonify(response.model_dump())
