from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field


class ProjectionInputs(BaseModel):
    """
    Everything the engine needs apart from the elapsed time.

    period_rate is already a decimal per compounding period (see core.rates).
    A contribution stream is off when either the amount or the frequency is zero.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    principal: float = Field(ge=0)
    period_rate: float = Field(ge=0)
    compounding_frequency: int = Field(gt=0)
    contribution_amount: float = Field(default=0.0, ge=0)
    contribution_frequency: int = Field(default=0, ge=0)

    @property
    def has_contributions(self) -> bool:
        return self.contribution_frequency > 0 and self.contribution_amount > 0


class ProjectionResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    final_balance: float
    total_contributions: float
    total_interest: float
    principal_only_balance: float

    @property
    def contribution_growth(self) -> float:
        return self.final_balance - self.principal_only_balance


def grow(amount: float, period_rate: float, periods: float) -> float:
    """A = P(1 + r)^n, n may be fractional. Growth past the float range is infinite."""
    if amount == 0:
        return 0.0
    try:
        return amount * (1 + period_rate) ** periods
    except OverflowError:
        return math.inf


def project(inputs: ProjectionInputs, elapsed_years: float) -> ProjectionResult:
    """
    Balance, contributions and interest after ``elapsed_years``.

    Each deposit is grown separately over the time it has left, so the
    contribution frequency does not need to match the compounding frequency:
      1) principal grows over compounding_frequency * t periods
      2) deposit i lands at i / contribution_frequency years and grows over
         whatever time remains; deposits past the horizon are skipped
      3) total_contributions uses the real-valued deposit count, not the
         number of deposits actually summed
    """
    number_of_periods = inputs.compounding_frequency * elapsed_years
    principal_growth = grow(inputs.principal, inputs.period_rate, number_of_periods)

    if not inputs.has_contributions:
        return ProjectionResult(
            final_balance=principal_growth,
            total_contributions=0.0,
            total_interest=principal_growth - inputs.principal,
            principal_only_balance=principal_growth,
        )

    total_contribution_periods = inputs.contribution_frequency * elapsed_years
    contribution_period_in_years = 1 / inputs.contribution_frequency

    contribution_growth = 0.0
    for i in range(1, math.floor(total_contribution_periods) + 1):
        remaining_time = elapsed_years - i * contribution_period_in_years
        if remaining_time < 0:
            continue
        periods_remaining = inputs.compounding_frequency * remaining_time
        contribution_growth += grow(inputs.contribution_amount, inputs.period_rate, periods_remaining)

    total_contributions = inputs.contribution_amount * total_contribution_periods
    final_balance = principal_growth + contribution_growth

    return ProjectionResult(
        final_balance=final_balance,
        total_contributions=total_contributions,
        total_interest=final_balance - inputs.principal - total_contributions,
        principal_only_balance=principal_growth,
    )


def contributions_made(inputs: ProjectionInputs, elapsed_years: float) -> float:
    """Undiscounted principal plus every whole deposit made by ``elapsed_years``."""
    if not inputs.has_contributions:
        return inputs.principal
    deposits = math.floor(inputs.contribution_frequency * elapsed_years)
    return inputs.principal + inputs.contribution_amount * deposits


__all__ = [
    "ProjectionInputs",
    "ProjectionResult",
    "grow",
    "project",
    "contributions_made",
]
