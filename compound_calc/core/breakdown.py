from __future__ import annotations

import datetime
import math
from datetime import date
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict

from compound_calc.core.formatting import format_date_long, format_date_short
from compound_calc.core.period_clock import add_days, add_months, add_years
from compound_calc.core.projection import ProjectionInputs, project
from compound_calc.errors import InvalidResolution


class Resolution(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"

    @property
    def min_frequency(self) -> int:
        """Coarsest compounding frequency for which this view still makes sense."""
        return _SETTINGS[self][0]

    @property
    def increment_years(self) -> float:
        return _SETTINGS[self][1]

    @property
    def max_rows(self) -> int:
        return _SETTINGS[self][2]

    @property
    def period_label(self) -> str:
        return _SETTINGS[self][3]

    @property
    def display_label(self) -> str:
        return self.value.capitalize()

    def row_count(self, elapsed_years: float) -> int:
        multiplier, divisor = _ROW_SCALE[self]
        return min(math.ceil(elapsed_years * multiplier / divisor), self.max_rows)

    def row_date(self, start_date: date, period: int) -> date:
        if self is Resolution.DAILY:
            return add_days(start_date, period)
        if self is Resolution.WEEKLY:
            return add_days(start_date, period * 7)
        if self is Resolution.MONTHLY:
            return add_months(start_date, period)
        if self is Resolution.QUARTERLY:
            return add_months(start_date, period * 3)
        return add_years(start_date, period)

    def format_date(self, value: date) -> str:
        if self in (Resolution.DAILY, Resolution.WEEKLY):
            return format_date_short(value)
        return format_date_long(value)


# resolution -> (min compounding frequency, increment in years, row cap, column header)
_SETTINGS = {
    Resolution.DAILY: (365, 1 / 365, 100, "Date"),
    Resolution.WEEKLY: (52, 7 / 365, 100, "Week Ending"),
    Resolution.MONTHLY: (12, 1 / 12, 60, "Month"),
    Resolution.QUARTERLY: (4, 0.25, 40, "Quarter"),
    Resolution.ANNUALLY: (1, 1, 30, "Year"),
}

# rows needed to cover t years: ceil(t * multiplier / divisor)
_ROW_SCALE = {
    Resolution.DAILY: (365, 1),
    Resolution.WEEKLY: (365, 7),
    Resolution.MONTHLY: (12, 1),
    Resolution.QUARTERLY: (4, 1),
    Resolution.ANNUALLY: (1, 1),
}


class BreakdownRow(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    date: datetime.date
    date_label: str
    period_contribution: float
    balance: float
    period_interest: float
    cumulative_interest: float


class Breakdown(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    resolution: Resolution
    columns: List[str]
    rows: List[BreakdownRow]


def available_resolutions(compounding_frequency: int) -> List[Resolution]:
    """Finest first; never anything finer than the compounding frequency."""
    return [option for option in Resolution if option.min_frequency <= compounding_frequency]


def default_resolution(compounding_frequency: int, elapsed_years: float) -> Resolution:
    total_days = elapsed_years * 365
    if total_days <= 30:
        preferred = Resolution.DAILY
    elif total_days <= 90:
        preferred = Resolution.WEEKLY
    elif total_days <= 365:
        preferred = Resolution.MONTHLY
    else:
        preferred = Resolution.ANNUALLY

    available = available_resolutions(compounding_frequency)
    if preferred in available:
        return preferred
    return available[0]


def resolve_resolution(
    requested: Union[str, Resolution, None],
    compounding_frequency: int,
    elapsed_years: float,
) -> Resolution:
    """Validate a requested view, or pick the default when none was given."""
    if requested is None or requested == "":
        return default_resolution(compounding_frequency, elapsed_years)

    try:
        resolution = Resolution(requested)
    except ValueError:
        raise InvalidResolution(f"Unknown breakdown view '{requested}'") from None

    if resolution not in available_resolutions(compounding_frequency):
        raise InvalidResolution(
            f"{resolution.display_label} breakdown is finer than the compounding frequency"
        )
    return resolution


def breakdown_columns(resolution: Resolution, has_contributions: bool) -> List[str]:
    columns = [resolution.period_label]
    if has_contributions:
        columns.append("Contribution")
    columns.extend(["Balance", "Interest Earned", "Total Interest"])
    return columns


def generate_breakdown(
    inputs: ProjectionInputs,
    elapsed_years: float,
    start_date: date,
    resolution: Optional[Resolution] = None,
) -> Breakdown:
    """
    Period-by-period table.

    Per row:
      - period_contribution: change in the engine's total contributions
      - period_interest: balance change minus that contribution
      - cumulative_interest: the engine's total interest at this time, not a
        running sum of period_interest (the two can drift by rounding)
    Stops after the row that reaches elapsed_years.
    """
    resolution = resolution or default_resolution(inputs.compounding_frequency, elapsed_years)
    if resolution not in available_resolutions(inputs.compounding_frequency):
        raise InvalidResolution(
            f"{resolution.display_label} breakdown is finer than the compounding frequency"
        )

    previous_balance = inputs.principal
    previous_contributions = 0.0

    rows: List[BreakdownRow] = []
    for period in range(1, resolution.row_count(elapsed_years) + 1):
        current_time = min(period * resolution.increment_years, elapsed_years)
        row_date = resolution.row_date(start_date, period)

        result = project(inputs, current_time)
        period_contribution = result.total_contributions - previous_contributions

        rows.append(
            BreakdownRow(
                date=row_date,
                date_label=resolution.format_date(row_date),
                period_contribution=period_contribution,
                balance=result.final_balance,
                period_interest=result.final_balance - previous_balance - period_contribution,
                cumulative_interest=result.total_interest,
            )
        )

        previous_balance = result.final_balance
        previous_contributions = result.total_contributions

        if current_time >= elapsed_years:
            break

    return Breakdown(
        resolution=resolution,
        columns=breakdown_columns(resolution, inputs.has_contributions),
        rows=rows,
    )


__all__ = [
    "Resolution",
    "BreakdownRow",
    "Breakdown",
    "available_resolutions",
    "default_resolution",
    "resolve_resolution",
    "breakdown_columns",
    "generate_breakdown",
]
