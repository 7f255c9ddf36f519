"""Data contracts for the calculator endpoints."""

from __future__ import annotations

import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from compound_calc.core.breakdown import Breakdown, Resolution
from compound_calc.core.series import ChartSeries


class CalculationRequest(BaseModel):
    """Raw form values; numeric fields left blank count as zero."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    principal: float = Field(0.0, ge=0, description="Initial lump sum.")
    interestRate: float = Field(
        0.0,
        description="Rate as a percentage (5 means 5%), in the convention named by rateType.",
    )
    rateType: str = Field("annual", description="daily, monthly, quarterly or annual.")
    compoundingFrequency: int = Field(12, gt=0, description="Compounding periods per year.")
    contributionAmount: float = Field(0.0, ge=0, description="Size of each recurring deposit.")
    contributionFrequency: int = Field(0, ge=0, description="Deposits per year; 0 disables them.")
    years: int = Field(0, ge=0)
    months: int = Field(0, ge=0)
    days: int = Field(0, ge=0)
    startDate: Optional[datetime.date] = Field(None, description="Defaults to today.")
    endDate: Optional[datetime.date] = Field(
        None,
        description="When given together with startDate, overrides years/months/days.",
    )


class BreakdownRequest(CalculationRequest):
    resolution: Optional[Resolution] = Field(
        None,
        description="Breakdown view; the default for the span is used when omitted.",
    )


class ResolutionQuery(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    compoundingFrequency: int = Field(..., gt=0)
    elapsedYears: float = Field(..., gt=0)


class CalculationSummary(BaseModel):
    """Headline figures plus the strings the result cards show."""

    final_balance: float
    total_contributions: float
    total_interest: float
    principal_only_balance: float
    has_contributions: bool
    period_text: str
    start_date: datetime.date
    end_date: datetime.date
    end_date_label: str
    display: Dict[str, str]


class ResolutionOptions(BaseModel):
    available: List[Resolution]
    default: Resolution


class CalculationResponse(BaseModel):
    summary: CalculationSummary
    chart: ChartSeries
    resolutions: ResolutionOptions
    breakdown: Breakdown
