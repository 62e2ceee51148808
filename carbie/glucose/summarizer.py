"""
Meal-level totals for analyzed ingredients.
"""
import math
from typing import Iterable, Optional, Sequence

from carbie.models import (
    AggregateTotals, IngredientRecord, PEAK_SOURCE_REPORTED, PEAK_SOURCE_WEIGHTED
)
from carbie.parsers import parse_peak_time, round_half_up


def weighted_peak_minutes(records: Iterable[IngredientRecord]) -> int:
    """
    Carb-weighted average peak time.

    sum(peak_i * carbs_i) / sum(carbs_i), rounded; 0 when there are no carbs
    or the average is not finite.
    """
    weighted_sum = 0.0
    total_carbs = 0.0

    for record in records:
        carbs = record.carb_amount
        weighted_sum += parse_peak_time(record.peak_time_label) * carbs
        total_carbs += carbs

    if total_carbs == 0:
        return 0
    average = weighted_sum / total_carbs
    if not math.isfinite(average):
        return 0
    return round_half_up(average)


def summarize(records: Sequence[IngredientRecord],
              reported_peak_minutes: Optional[int] = None) -> AggregateTotals:
    """
    Sum weight, volume and carb range over all ingredients.

    Zero-carb ingredients count toward weight and volume.

    Args:
        records: All ingredients of the meal
        reported_peak_minutes: Peak time supplied by the analysis service;
            used as-is when given, otherwise the weighted average is computed

    Returns:
        AggregateTotals
    """
    totals = AggregateTotals()

    for record in records:
        if record.is_liquid:
            totals.total_volume_ml += record.amount
        else:
            totals.total_weight_grams += record.amount
        totals.total_carb_low += record.carb_low
        totals.total_carb_high += record.carb_high

    if reported_peak_minutes is not None:
        totals.peak_minutes = int(reported_peak_minutes)
        totals.peak_source = PEAK_SOURCE_REPORTED
    else:
        totals.peak_minutes = weighted_peak_minutes(records)
        totals.peak_source = PEAK_SOURCE_WEIGHTED

    return totals
