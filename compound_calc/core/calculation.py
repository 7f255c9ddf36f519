"""
One calculation pass: validate the form values, normalise them, project,
then build the chart series and the breakdown table from the same inputs.

Nothing is kept between calls. The snapshot returned alongside the result is
all that is needed to redraw the breakdown at another resolution.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from pydantic import BaseModel, ConfigDict

from compound_calc.core.breakdown import (
    Breakdown,
    Resolution,
    available_resolutions,
    default_resolution,
    generate_breakdown,
    resolve_resolution,
)
from compound_calc.core.formatting import format_currency, format_date_long
from compound_calc.core.period_clock import TimeSpan, resolve_time_span
from compound_calc.core.projection import ProjectionInputs, ProjectionResult, project
from compound_calc.core.rates import period_rate
from compound_calc.core.series import sample_series
from compound_calc.errors import InvalidAmount, InvalidRate, ResultOutOfRange
from compound_calc.schemas.calculation import (
    CalculationRequest,
    CalculationResponse,
    CalculationSummary,
    ResolutionOptions,
)

logger = logging.getLogger(__name__)


class CalculationSnapshot(BaseModel):
    """The validated inputs of the most recent calculation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    inputs: ProjectionInputs
    time_span: TimeSpan


def validate_request(request: CalculationRequest) -> None:
    if request.principal <= 0 and request.contributionAmount <= 0:
        raise InvalidAmount()
    if request.interestRate < 0:
        raise InvalidRate()


def prepare_snapshot(request: CalculationRequest) -> CalculationSnapshot:
    """Validate and normalise a request. Raises CalculationInputError subclasses."""
    validate_request(request)

    time_span = resolve_time_span(
        years=request.years,
        months=request.months,
        days=request.days,
        start_date=request.startDate,
        end_date=request.endDate,
    )
    inputs = ProjectionInputs(
        principal=request.principal,
        period_rate=period_rate(
            request.interestRate,
            request.rateType,
            request.compoundingFrequency,
        ),
        compounding_frequency=request.compoundingFrequency,
        contribution_amount=request.contributionAmount,
        contribution_frequency=request.contributionFrequency,
    )
    # balances only grow with time, so a finite final balance bounds every sample and row
    if not math.isfinite(project(inputs, time_span.elapsed_years).final_balance):
        raise ResultOutOfRange()
    return CalculationSnapshot(inputs=inputs, time_span=time_span)


def summarize(snapshot: CalculationSnapshot, result: ProjectionResult) -> CalculationSummary:
    has_contributions = snapshot.inputs.has_contributions
    display = {
        "final_balance": format_currency(result.final_balance),
        "total_interest": format_currency(result.total_interest),
    }
    if has_contributions:
        display["total_contributions"] = format_currency(result.total_contributions)

    return CalculationSummary(
        final_balance=result.final_balance,
        total_contributions=result.total_contributions,
        total_interest=result.total_interest,
        principal_only_balance=result.principal_only_balance,
        has_contributions=has_contributions,
        period_text=snapshot.time_span.description,
        start_date=snapshot.time_span.start_date,
        end_date=snapshot.time_span.end_date,
        end_date_label=format_date_long(snapshot.time_span.end_date),
        display=display,
    )


def rebuild_breakdown(
    snapshot: CalculationSnapshot,
    resolution: Optional[Resolution] = None,
) -> Breakdown:
    span = snapshot.time_span
    chosen = resolve_resolution(
        resolution,
        snapshot.inputs.compounding_frequency,
        span.elapsed_years,
    )
    return generate_breakdown(snapshot.inputs, span.elapsed_years, span.start_date, chosen)


def calculate(
    request: CalculationRequest,
    resolution: Optional[Resolution] = None,
) -> CalculationResponse:
    snapshot = prepare_snapshot(request)
    inputs = snapshot.inputs
    elapsed_years = snapshot.time_span.elapsed_years

    logger.debug(
        "Projecting principal=%s period_rate=%s n=%s contribution=%sx%s over %.4f years",
        inputs.principal,
        inputs.period_rate,
        inputs.compounding_frequency,
        inputs.contribution_amount,
        inputs.contribution_frequency,
        elapsed_years,
    )

    result = project(inputs, elapsed_years)
    options = ResolutionOptions(
        available=available_resolutions(inputs.compounding_frequency),
        default=default_resolution(inputs.compounding_frequency, elapsed_years),
    )

    return CalculationResponse(
        summary=summarize(snapshot, result),
        chart=sample_series(inputs, elapsed_years),
        resolutions=options,
        breakdown=rebuild_breakdown(snapshot, resolution),
    )


__all__ = [
    "CalculationSnapshot",
    "validate_request",
    "prepare_snapshot",
    "summarize",
    "rebuild_breakdown",
    "calculate",
]
