"""Rejections raised while validating a calculation request."""

from __future__ import annotations

from typing import List


class CalculationInputError(ValueError):
    """Base class for inputs the calculator refuses to project."""

    code = "invalid_input"
    default_message = "Please check your inputs."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def errors(self) -> List[str]:
        return [self.message]

    def to_dict(self) -> dict:
        return {"code": self.code, "error": self.errors}


class InvalidAmount(CalculationInputError):
    code = "invalid_amount"
    default_message = "Please enter a principal amount or contribution amount"


class InvalidRate(CalculationInputError):
    code = "invalid_rate"
    default_message = "Please enter a valid interest rate"


class InvalidDuration(CalculationInputError):
    code = "invalid_duration"
    default_message = "Please enter a time period or select dates"


class InvalidDateRange(CalculationInputError):
    code = "invalid_date_range"
    default_message = "End date must be after start date"


class ResultOutOfRange(CalculationInputError):
    code = "result_out_of_range"
    default_message = "The projected balance is too large to display. Please lower the rate or the time period"


class InvalidResolution(CalculationInputError):
    code = "invalid_resolution"
    default_message = "Breakdown view is not available for this compounding frequency"


__all__ = [
    "CalculationInputError",
    "InvalidAmount",
    "InvalidRate",
    "InvalidDuration",
    "InvalidDateRange",
    "InvalidResolution",
    "ResultOutOfRange",
]
