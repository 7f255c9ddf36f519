"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from compound_calc.core.breakdown import available_resolutions, default_resolution
from compound_calc.core.calculation import calculate, prepare_snapshot, rebuild_breakdown
from compound_calc.errors import CalculationInputError
from compound_calc.schemas.calculation import (
    BreakdownRequest,
    CalculationRequest,
    ResolutionOptions,
    ResolutionQuery,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

GENERIC_FAILURE = "An error occurred during calculation. Please check your inputs."


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False, include_input=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(CalculationInputError)
def _handle_input_error(exc: CalculationInputError):
    """Rejected inputs are a normal outcome, not a failure."""
    logger.info("Calculation rejected (%s): %s", exc.code, exc.message)
    return jsonify(exc.to_dict()), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(Exception)
def _handle_unexpected_error(exc: Exception):
    if isinstance(exc, HTTPException):
        return exc
    logger.exception("Unexpected error while calculating")
    return jsonify({"error": [GENERIC_FAILURE]}), HTTPStatus.INTERNAL_SERVER_ERROR


@api_bp.post("/calculate")
def calculate_projection() -> Any:
    """Headline figures, chart series and the default breakdown in one go."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = CalculationRequest.model_validate(raw_payload)
    response = calculate(payload)
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/breakdown")
def breakdown() -> Any:
    """Re-render only the breakdown table, e.g. after the view selector changes."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = BreakdownRequest.model_validate(raw_payload)
    snapshot = prepare_snapshot(payload)
    table = rebuild_breakdown(snapshot, payload.resolution)
    return jsonify(table.model_dump(mode="json"))


@api_bp.get("/resolutions")
def resolutions() -> Any:
    """Breakdown views on offer for a compounding frequency and span."""
    query = ResolutionQuery.model_validate(request.args.to_dict())
    options = ResolutionOptions(
        available=available_resolutions(query.compoundingFrequency),
        default=default_resolution(query.compoundingFrequency, query.elapsedYears),
    )
    return jsonify(options.model_dump(mode="json"))
