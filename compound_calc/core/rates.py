"""Turn a user-entered rate into the decimal rate applied per compounding period."""

from __future__ import annotations

from enum import Enum
from typing import Union


class RateConvention(str, Enum):
    DAILY = "daily"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUAL = "annual"

    @property
    def periods_per_year(self) -> int:
        return _PERIODS_PER_YEAR[self]

    @classmethod
    def parse(cls, value: Union[str, "RateConvention", None]) -> "RateConvention":
        """Unknown or missing conventions fall back to annual. Matching is case-sensitive."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.ANNUAL


_PERIODS_PER_YEAR = {
    RateConvention.DAILY: 365,
    RateConvention.MONTHLY: 12,
    RateConvention.QUARTERLY: 4,
    RateConvention.ANNUAL: 1,
}


def convert_to_annual_rate(rate: float, convention: Union[str, RateConvention, None]) -> float:
    """Scale a daily/monthly/quarterly rate up to its annual equivalent (still a percentage)."""
    return rate * RateConvention.parse(convention).periods_per_year


def period_rate(
    rate_percent: float,
    convention: Union[str, RateConvention, None],
    compounding_frequency: int,
) -> float:
    """
    Decimal rate for one compounding period.

    ``rate_percent`` is what the user typed (5 means 5%). It is annualised,
    split across the compounding periods, and only then divided by 100.
    """
    annual_rate_percent = convert_to_annual_rate(rate_percent, convention)
    period_rate_percent = annual_rate_percent / compounding_frequency
    return period_rate_percent / 100


__all__ = ["RateConvention", "convert_to_annual_rate", "period_rate"]
