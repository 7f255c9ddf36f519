from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from compound_calc.core.formatting import format_time_period, format_time_period_from_inputs
from compound_calc.errors import InvalidDateRange, InvalidDuration

DAYS_PER_YEAR = 365


class TimeSpan(BaseModel):
    """
    How long the money is invested.

    elapsed_years is what the projection math consumes; the dates are only
    used to label breakdown rows and the end-of-period summary.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    start_date: date
    end_date: date
    elapsed_years: float = Field(gt=0)
    description: str


# -----------------------------
# Calendar arithmetic
# -----------------------------
# Day overflow rolls forward into the next month (31 Jan + 1 month -> 3 Mar
# in a non-leap year) instead of clamping to the month end.


def _rolled_date(year: int, month_index: int, day: int) -> date:
    year += month_index // 12
    month = month_index % 12 + 1
    return date(year, month, 1) + timedelta(days=day - 1)


def add_years(value: date, years: int) -> date:
    return _rolled_date(value.year + years, value.month - 1, value.day)


def add_months(value: date, months: int) -> date:
    return _rolled_date(value.year, value.month - 1 + months, value.day)


def add_days(value: date, days: int) -> date:
    return value + timedelta(days=days)


# -----------------------------
# TimeSpan constructors
# -----------------------------


def span_from_date_range(start_date: date, end_date: date) -> TimeSpan:
    if end_date <= start_date:
        raise InvalidDateRange()

    diff_days = abs((end_date - start_date).days)
    return TimeSpan(
        start_date=start_date,
        end_date=end_date,
        elapsed_years=diff_days / DAYS_PER_YEAR,
        description=format_time_period(diff_days),
    )


def span_from_duration(
    years: int,
    months: int,
    days: int,
    start_date: Optional[date] = None,
) -> TimeSpan:
    """Years, then months, then days are added to the start date, in that order."""
    if min(years, months, days) < 0:
        raise InvalidDuration()
    if years == 0 and months == 0 and days == 0:
        raise InvalidDuration()

    start = start_date or date.today()
    end = add_days(add_months(add_years(start, years), months), days)

    return TimeSpan(
        start_date=start,
        end_date=end,
        elapsed_years=years + months / 12 + days / DAYS_PER_YEAR,
        description=format_time_period_from_inputs(years, months, days),
    )


def resolve_time_span(
    years: int = 0,
    months: int = 0,
    days: int = 0,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> TimeSpan:
    """An explicit date pair wins over the duration fields."""
    if start_date is not None and end_date is not None:
        return span_from_date_range(start_date, end_date)
    return span_from_duration(years, months, days, start_date)


__all__ = [
    "TimeSpan",
    "add_years",
    "add_months",
    "add_days",
    "span_from_date_range",
    "span_from_duration",
    "resolve_time_span",
]
