"""
Ingredient normalization for curve synthesis.
"""
from typing import Iterable, List

from carbie.models import IngredientRecord, NormalizedIngredient, CHART_COLORS
from carbie.parsers import parse_peak_time


def normalize_ingredient(record: IngredientRecord, index: int) -> NormalizedIngredient:
    """
    Normalize one record.

    Args:
        record: Raw ingredient
        index: Position of the record in the original (unfiltered) list

    Returns:
        NormalizedIngredient with parsed peak time and carb midpoint
    """
    return NormalizedIngredient(
        name=record.name,
        peak_minutes=parse_peak_time(record.peak_time_label),
        carb_amount=record.carb_amount,
        glycemic_index=record.glycemic_index,
        color_index=index % len(CHART_COLORS),
    )


def normalize_ingredients(records: Iterable[IngredientRecord]) -> List[NormalizedIngredient]:
    """
    Normalize records, dropping those without carbohydrate.

    Order is preserved. Colors are assigned before filtering.
    """
    return [
        normalize_ingredient(record, index)
        for index, record in enumerate(records)
        if record.has_carbs
    ]
