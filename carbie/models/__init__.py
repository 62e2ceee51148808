"""
Data models for carb absorption analysis.
"""
from .ingredient import (
    IngredientRecord, NormalizedIngredient, AnalysisResult, CHART_COLORS
)
from .totals import AggregateTotals, PEAK_SOURCE_REPORTED, PEAK_SOURCE_WEIGHTED
from .curve import AbsorptionCurve, CurvePoint, DomainScale, AxisTick, CurveChart

__all__ = [
    # Ingredient models
    'IngredientRecord',
    'NormalizedIngredient',
    'AnalysisResult',
    'CHART_COLORS',
    # Totals models
    'AggregateTotals',
    'PEAK_SOURCE_REPORTED',
    'PEAK_SOURCE_WEIGHTED',
    # Curve models
    'AbsorptionCurve',
    'CurvePoint',
    'DomainScale',
    'AxisTick',
    'CurveChart',
]
