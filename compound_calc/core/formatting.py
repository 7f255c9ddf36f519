"""Display helpers whose output the front end shows verbatim."""

from __future__ import annotations

from datetime import date

MONTH_ABBREVIATIONS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]


# Format a float as US dollars, always two decimals.
def format_currency(amount: float) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_date_long(value: date) -> str:
    """``10 Oct 2025``: unpadded day, abbreviated month, full year."""
    return f"{value.day} {MONTH_ABBREVIATIONS[value.month - 1]} {value.year}"


def format_date_short(value: date) -> str:
    """``DD/MM/YY``."""
    return f"{value.day:02d}/{value.month:02d}/{value.year % 100:02d}"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count != 1 else ''}"


def format_time_period_from_inputs(years: int, months: int, days: int) -> str:
    parts = []
    if years > 0:
        parts.append(_plural(years, "year"))
    if months > 0:
        parts.append(_plural(months, "month"))
    if days > 0:
        parts.append(_plural(days, "day"))
    return ", ".join(parts) or "0 days"


def format_time_period(total_days: int) -> str:
    # 365-day years and 30-day months, matching the elapsed-time approximation
    years = total_days // 365
    remaining_days = total_days % 365
    months = remaining_days // 30
    days = remaining_days % 30
    return format_time_period_from_inputs(years, months, days)


__all__ = [
    "format_currency",
    "format_date_long",
    "format_date_short",
    "format_time_period",
    "format_time_period_from_inputs",
]
