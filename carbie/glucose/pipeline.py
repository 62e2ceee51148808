"""
End-to-end chart data for one analyzed meal.
"""
import logging
from typing import Optional, Sequence

from carbie.models import CurveChart, IngredientRecord
from .calculator import AbsorptionCurveCalculator
from .normalizer import normalize_ingredients
from .scale import plan_scale, time_ticks, carb_ticks
from .summarizer import summarize

logger = logging.getLogger(__name__)


class CurvePipeline:
    """
    Turns raw ingredient records into renderable chart data.

    Stateless apart from the calculator's sampling settings, so one
    instance can be reused for any number of meals.
    """

    def __init__(self, calculator: Optional[AbsorptionCurveCalculator] = None):
        """
        Initialize pipeline.

        Args:
            calculator: Curve calculator (default settings if omitted)
        """
        self.calculator = calculator or AbsorptionCurveCalculator()

    def build(self, records: Sequence[IngredientRecord],
              reported_peak_minutes: Optional[int] = None) -> CurveChart:
        """
        Build chart data.

        Args:
            records: All ingredients, in analysis order
            reported_peak_minutes: Aggregate peak time from the service, if any

        Returns:
            CurveChart; without scale/curves when nothing carries carbs
        """
        records = list(records)
        totals = summarize(records, reported_peak_minutes)
        ingredients = normalize_ingredients(records)
        scale = plan_scale(ingredients)

        if scale is None:
            logger.debug("No carb-bearing ingredients among %d record(s)", len(records))
            return CurveChart(totals=totals)

        curves = [
            self.calculator.build_curve(ingredient, scale.time_range_minutes)
            for ingredient in ingredients
        ]
        curves = [curve for curve in curves if not curve.is_empty]

        logger.debug("Built %d curve(s) over %.1f min", len(curves), scale.time_range_minutes)

        return CurveChart(
            totals=totals,
            ingredients=ingredients,
            curves=curves,
            scale=scale,
            time_ticks=time_ticks(scale),
            carb_ticks=carb_ticks(scale),
        )
