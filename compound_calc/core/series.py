from __future__ import annotations

import math
from typing import List

from pydantic import BaseModel, ConfigDict

from compound_calc.core.projection import ProjectionInputs, contributions_made, project

MAX_POINTS = 100


class SamplePoint(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str
    balance: float
    # principal + deposits so far, no interest
    baseline: float


class ChartSeries(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    points: List[SamplePoint]
    show_baseline: bool


def point_count(elapsed_years: float) -> int:
    """Number of intervals to split the span into; longer spans get coarser sampling."""
    if elapsed_years <= 1:
        count = max(12, math.ceil(elapsed_years * 52))
    elif elapsed_years <= 5:
        count = max(24, math.ceil(elapsed_years * 12))
    elif elapsed_years <= 20:
        count = max(40, math.ceil(elapsed_years * 4))
    else:
        count = min(math.ceil(elapsed_years * 2), 80)
    return min(count, MAX_POINTS)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def point_label(current_time: float, elapsed_years: float) -> str:
    if elapsed_years <= 0.25:
        days = _round_half_up(current_time * 365)
        return "Start" if days == 0 else f"{days}d"
    if elapsed_years <= 1:
        months = _round_half_up(current_time * 12)
        return "Start" if months == 0 else f"{months}mo"

    if current_time == 0:
        return "Start"
    if current_time < 1:
        return f"{_round_half_up(current_time * 12)}mo"
    if float(current_time).is_integer():
        return f"{int(current_time)}y"
    return f"{current_time:.1f}y"


def sample_series(inputs: ProjectionInputs, elapsed_years: float) -> ChartSeries:
    """
    Evenly spaced points from 0 to elapsed_years, both ends included.

    The last point is evaluated at elapsed_years itself so it always agrees
    with the headline projection.
    """
    count = point_count(elapsed_years)
    increment = elapsed_years / count

    points: List[SamplePoint] = []
    for i in range(count + 1):
        current_time = elapsed_years if i == count else i * increment
        result = project(inputs, current_time)
        points.append(
            SamplePoint(
                label=point_label(current_time, elapsed_years),
                balance=result.final_balance,
                baseline=contributions_made(inputs, current_time),
            )
        )

    return ChartSeries(points=points, show_baseline=inputs.has_contributions)


__all__ = ["SamplePoint", "ChartSeries", "point_count", "point_label", "sample_series"]
