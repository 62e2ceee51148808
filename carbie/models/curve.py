"""
Models for absorption curves and chart geometry.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .ingredient import NormalizedIngredient
from .totals import AggregateTotals


@dataclass(frozen=True)
class CurvePoint:
    """Single curve sample: minutes after eating and carb impact (g)."""
    time_minutes: float
    impact: float


@dataclass
class AbsorptionCurve:
    """
    Sampled blood-glucose impact curve for one ingredient.

    Attributes:
        ingredient: Normalized ingredient the curve was built from
        points: Ordered samples across the shared time range
    """
    ingredient: NormalizedIngredient
    points: List[CurvePoint] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when no curve was synthesized (zero carbohydrate)."""
        return not self.points

    @property
    def name(self) -> str:
        return self.ingredient.name

    @property
    def color(self) -> str:
        return self.ingredient.color

    @property
    def glycemic_index(self) -> float:
        return self.ingredient.glycemic_index

    @property
    def times(self) -> List[float]:
        return [p.time_minutes for p in self.points]

    @property
    def impacts(self) -> List[float]:
        return [p.impact for p in self.points]

    def peak(self) -> Optional[CurvePoint]:
        """Highest sample (first one on ties), or None for an empty curve."""
        if not self.points:
            return None
        best = self.points[0]
        for point in self.points[1:]:
            if point.impact > best.impact:
                best = point
        return best

    def as_pairs(self) -> List[Tuple[float, float]]:
        """Samples as (time, impact) tuples."""
        return [(p.time_minutes, p.impact) for p in self.points]


@dataclass(frozen=True)
class DomainScale:
    """Shared axis extents for one chart."""
    time_range_minutes: float
    carb_range_grams: float


@dataclass(frozen=True)
class AxisTick:
    """Axis tick position and its label."""
    value: float
    label: str


@dataclass
class CurveChart:
    """
    Everything a renderer needs to draw one meal's absorption chart.

    scale is None when no ingredient carries carbohydrate; renderers
    should draw nothing in that case.
    """
    totals: AggregateTotals
    ingredients: List[NormalizedIngredient] = field(default_factory=list)
    curves: List[AbsorptionCurve] = field(default_factory=list)
    scale: Optional[DomainScale] = None
    time_ticks: List[AxisTick] = field(default_factory=list)
    carb_ticks: List[AxisTick] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.scale is None or not self.curves
