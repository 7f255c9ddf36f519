from __future__ import annotations

from math import isclose

import pytest

from compound_calc.core.rates import RateConvention, convert_to_annual_rate, period_rate


@pytest.mark.parametrize(
    "convention, expected",
    [("daily", 365.0), ("monthly", 12.0), ("quarterly", 4.0), ("annual", 1.0)],
)
def test_convert_to_annual_rate(convention, expected):
    assert isclose(convert_to_annual_rate(1.0, convention), expected)


def test_unknown_convention_is_treated_as_annual():
    assert convert_to_annual_rate(7.5, "fortnightly") == 7.5
    assert convert_to_annual_rate(7.5, None) == 7.5
    assert RateConvention.parse("monthly") is RateConvention.MONTHLY
    assert RateConvention.parse("Monthly") is RateConvention.ANNUAL
    assert convert_to_annual_rate(2.0, "Daily") == 2.0


def test_period_rate_divides_by_hundred_once():
    assert period_rate(12, "annual", 12) == 0.01
    assert period_rate(1, "monthly", 12) == 0.01
    assert isclose(period_rate(1.5, "quarterly", 4), 0.015)
    assert period_rate(0, "daily", 365) == 0.0
