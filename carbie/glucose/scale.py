"""
Shared axis scaling for absorption charts.
"""
import math
from typing import List, Optional, Sequence

from carbie.models import AxisTick, DomainScale, NormalizedIngredient
from carbie.parsers import format_clock_label, round_half_up

# Chart extents relative to the largest ingredient values
TIME_RANGE_FACTOR = 2.5
CARB_RANGE_FACTOR = 1.2

TIME_TICK_STEP = 30     # minutes
CARB_TICK_TARGET = 4    # approximate number of gridlines
CARB_TICK_ROUNDING = 5  # grams


def plan_scale(ingredients: Sequence[NormalizedIngredient]) -> Optional[DomainScale]:
    """
    Derive the shared domain for a set of ingredients.

    Args:
        ingredients: Normalized (carb-bearing) ingredients

    Returns:
        DomainScale, or None when there is nothing to plot
    """
    if not ingredients:
        return None

    max_peak = max(i.peak_minutes for i in ingredients)
    max_carbs = max(i.carb_amount for i in ingredients)

    return DomainScale(
        time_range_minutes=max_peak * TIME_RANGE_FACTOR,
        carb_range_grams=max_carbs * CARB_RANGE_FACTOR,
    )


def carb_tick_step(carb_range_grams: float) -> int:
    """Gridline step: ~4 lines, rounded up to a multiple of 5 g."""
    return int(math.ceil(carb_range_grams / CARB_TICK_TARGET / CARB_TICK_ROUNDING)) * CARB_TICK_ROUNDING


def time_ticks(scale: Optional[DomainScale]) -> List[AxisTick]:
    """Ticks every 30 minutes from 0 up to the time range."""
    if scale is None:
        return []

    ticks = []
    t = 0
    while t <= scale.time_range_minutes:
        ticks.append(AxisTick(value=t, label=format_clock_label(t)))
        t += TIME_TICK_STEP
    return ticks


def carb_ticks(scale: Optional[DomainScale]) -> List[AxisTick]:
    """Ticks from 0 g up to the carb range at carb_tick_step() intervals."""
    if scale is None:
        return []

    step = carb_tick_step(scale.carb_range_grams)
    if step <= 0:
        return [AxisTick(value=0, label="0g")]

    ticks = []
    c = 0
    while c <= scale.carb_range_grams:
        ticks.append(AxisTick(value=c, label=f"{round_half_up(c)}g"))
        c += step
    return ticks
