"""
Carbohydrate absorption modeling
"""

from .calculator import (
    AbsorptionCurveCalculator, ShapeParameters, shape_parameters,
    gamma_kernel, tail_dampening,
)
from .normalizer import normalize_ingredient, normalize_ingredients
from .scale import plan_scale, time_ticks, carb_ticks, carb_tick_step
from .summarizer import summarize, weighted_peak_minutes
from .pipeline import CurvePipeline

__all__ = [
    'AbsorptionCurveCalculator',
    'ShapeParameters',
    'shape_parameters',
    'gamma_kernel',
    'tail_dampening',
    'normalize_ingredient',
    'normalize_ingredients',
    'plan_scale',
    'time_ticks',
    'carb_ticks',
    'carb_tick_step',
    'summarize',
    'weighted_peak_minutes',
    'CurvePipeline',
]
